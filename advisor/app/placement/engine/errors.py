"""Errors raised by the placement engine."""

from __future__ import annotations


class PlacementError(ValueError):
    """Base class for placement engine errors."""


class MalformedBoardError(PlacementError):
    """The board cannot be analysed as supplied.

    Raised for duplicate tile coordinates, a port on an edge that is not part
    of the board, or two ports on the same edge.
    """


class InvalidCandidateError(PlacementError):
    """A vertex passed to the engine is not a vertex of the board.

    Usually a stale reference kept across a board edit.
    """
