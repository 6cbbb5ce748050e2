"""Board validation performed before any scoring."""

from __future__ import annotations

import collections

from ..models.board import BoardConfiguration, EdgeIdentity
from ..topology import BoardTopology
from .errors import MalformedBoardError


def validate_board(board: BoardConfiguration) -> BoardTopology:
    """Check board for structural problems and return its derived topology.

    Raises:
        MalformedBoardError: if two tiles share a coordinate, a port sits on
            an edge that is not part of the board, or two ports share an
            edge.
    """
    counts = collections.Counter(board.coordinates())
    duplicates = sorted(
        (c for c, n in counts.items() if n > 1), key=lambda c: c.sort_key()
    )
    if duplicates:
        listed = ', '.join(f'({c.q}, {c.r})' for c in duplicates)
        raise MalformedBoardError(f'Duplicate tile coordinates: {listed}')

    topology = BoardTopology.from_hexes(board.coordinates())

    ported: set[EdgeIdentity] = set()
    for i, port in enumerate(board.ports):
        if not topology.has_edge(port.edge):
            raise MalformedBoardError(f'Port {i} is not on an edge of this board.')
        if port.edge in ported:
            raise MalformedBoardError(f'Port {i} shares its edge with another port.')
        ported.add(port.edge)

    return topology
