"""Axial hex coordinates.

Tiles are identified by axial coordinates (q, r).  The implicit third cube
component is ``s = -q - r``.  See
https://www.redblobgames.com/grids/hexagons/#coordinates-axial for a full
explanation.
"""

from __future__ import annotations

import pydantic

# Six neighbour directions, clockwise starting top-right.  Corner i of a hex
# sits between neighbour i and neighbour (i + 1) % 6, so this order must not
# change.
HEX_DIRECTIONS: list[tuple[int, int]] = [
    (1, -1),  # top-right
    (1, 0),  # right
    (0, 1),  # bottom-right
    (-1, 1),  # bottom-left
    (-1, 0),  # left
    (0, -1),  # top-left
]


class HexCoordinate(pydantic.BaseModel):
    """Axial coordinates for a hex tile."""

    model_config = pydantic.ConfigDict(frozen=True)

    q: int
    r: int

    @property
    def s(self) -> int:
        """The derived cube coordinate, so that q + r + s == 0."""
        return -self.q - self.r

    def sort_key(self) -> tuple[int, int]:
        """Return the lexicographic (q, r) ordering key."""
        return (self.q, self.r)

    def neighbors(self) -> list[HexCoordinate]:
        """Return the 6 neighbouring coordinates in clockwise order."""
        return [
            HexCoordinate(q=self.q + dq, r=self.r + dr) for dq, dr in HEX_DIRECTIONS
        ]

    def distance_to(self, other: HexCoordinate) -> int:
        """Return the number of hex steps between this tile and other."""
        return (
            abs(self.q - other.q) + abs(self.r - other.r) + abs(self.s - other.s)
        ) // 2


def neighbors(coord: HexCoordinate) -> list[HexCoordinate]:
    """Return the 6 neighbours of coord, clockwise from top-right."""
    return coord.neighbors()


def distance(a: HexCoordinate, b: HexCoordinate) -> int:
    """Return the hex distance between a and b."""
    return a.distance_to(b)
