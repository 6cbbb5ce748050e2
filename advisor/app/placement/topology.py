"""Vertex and edge derivation for an arbitrary set of hex tiles.

Vertex identification
---------------------
A vertex is the point shared by (up to) three hexes.  For hex H with
neighbours N[0..5] (clockwise from top-right, see
:data:`~.models.hex.HEX_DIRECTIONS`), corner i is surrounded by::

    { H, N[i], N[(i+1) % 6] }

Neighbours that are not on the board become :class:`OffBoardSlot` entries,
so every corner of every hex has a unique identity, including coastal
corners that touch a single tile.  The three slots are sorted canonically,
which makes the identity independent of which surrounding hex produced it.

Example: for H = (0, 0) and i = 0, N[0] = (1, -1) and N[1] = (1, 0).  On a
board holding only H this gives::

    v[0] = ( Tile(0,0), OffBoard(1,-1), OffBoard(1,0) )

Edge identification
-------------------
Edge i of H joins corner i to corner (i+1) % 6.  The two corners share H and
N[(i+1) % 6], so those are the tiles the edge borders.  An edge is
identified by its unordered pair of endpoint vertices.

A standard 19-tile board has **54 vertices** and **72 edges**.
"""

from __future__ import annotations

import collections
from collections.abc import Collection, Iterable, Sequence

from .models.board import (
    EdgeIdentity,
    OffBoardSlot,
    TileSlot,
    VertexIdentity,
)
from .models.hex import HexCoordinate

# ---------------------------------------------------------------------------
# Per-hex derivation
# ---------------------------------------------------------------------------


def _slot(
    coord: HexCoordinate, on_board: Collection[HexCoordinate]
) -> TileSlot | OffBoardSlot:
    if coord in on_board:
        return TileSlot(coordinate=coord)
    return OffBoardSlot(coordinate=coord)


def vertices_of(
    hex_coord: HexCoordinate, all_hexes: Collection[HexCoordinate]
) -> list[VertexIdentity]:
    """Return the six corner vertices of hex_coord, indexed 0-5 clockwise."""
    on_board = set(all_hexes)
    on_board.add(hex_coord)
    nbrs = hex_coord.neighbors()
    return [
        VertexIdentity(
            slots=(
                TileSlot(coordinate=hex_coord),
                _slot(nbrs[i], on_board),
                _slot(nbrs[(i + 1) % 6], on_board),
            ),
            direction=i,
        )
        for i in range(6)
    ]


def edges_of(
    hex_coord: HexCoordinate, all_hexes: Collection[HexCoordinate]
) -> list[EdgeIdentity]:
    """Return the six edges of hex_coord; edge i joins corner i and corner i+1."""
    on_board = set(all_hexes)
    on_board.add(hex_coord)
    nbrs = hex_coord.neighbors()
    corners = vertices_of(hex_coord, on_board)
    return [
        EdgeIdentity(
            vertices=(corners[i], corners[(i + 1) % 6]),
            bordering=(
                TileSlot(coordinate=hex_coord),
                _slot(nbrs[(i + 1) % 6], on_board),
            ),
        )
        for i in range(6)
    ]


# ---------------------------------------------------------------------------
# Whole-board derivation
# ---------------------------------------------------------------------------


def derive_vertices(hexes: Sequence[HexCoordinate]) -> list[VertexIdentity]:
    """Return every vertex of the board exactly once, in derivation order.

    A vertex shared by three hexes is produced three times (with three
    different ``direction`` hints); only the first occurrence is kept.
    """
    on_board = set(hexes)
    seen: dict[VertexIdentity, VertexIdentity] = {}
    for hex_coord in hexes:
        for vertex in vertices_of(hex_coord, on_board):
            seen.setdefault(vertex, vertex)
    return list(seen.values())


def derive_edges(hexes: Sequence[HexCoordinate]) -> list[EdgeIdentity]:
    """Return every edge of the board exactly once, in derivation order."""
    on_board = set(hexes)
    seen: dict[EdgeIdentity, EdgeIdentity] = {}
    for hex_coord in hexes:
        for edge in edges_of(hex_coord, on_board):
            seen.setdefault(edge, edge)
    return list(seen.values())


def edges_at(
    vertex: VertexIdentity, edges: Iterable[EdgeIdentity]
) -> list[EdgeIdentity]:
    """Return the edges in edges that have vertex as an endpoint."""
    return [e for e in edges if e.touches(vertex)]


def adjacent_vertices(
    vertex: VertexIdentity, edges: Iterable[EdgeIdentity]
) -> list[VertexIdentity]:
    """Return the vertices one edge away from vertex."""
    return [e.other_end(vertex) for e in edges_at(vertex, edges)]


class BoardTopology:
    """Derived vertices and edges of one set of hexes, indexed for lookup.

    Build once per request with :meth:`from_hexes`; every query after that is
    a dictionary lookup.
    """

    def __init__(
        self, vertices: list[VertexIdentity], edges: list[EdgeIdentity]
    ) -> None:
        self.vertices = vertices
        self.edges = edges
        self._vertex_set: set[VertexIdentity] = set(vertices)
        self._edge_set: set[EdgeIdentity] = set(edges)
        self._edges_by_vertex: dict[VertexIdentity, list[EdgeIdentity]] = (
            collections.defaultdict(list)
        )
        for edge in edges:
            for endpoint in edge.vertices:
                self._edges_by_vertex[endpoint].append(edge)

    @classmethod
    def from_hexes(cls, hexes: Sequence[HexCoordinate]) -> BoardTopology:
        """Derive the topology of hexes."""
        return cls(derive_vertices(hexes), derive_edges(hexes))

    def has_vertex(self, vertex: VertexIdentity) -> bool:
        return vertex in self._vertex_set

    def has_edge(self, edge: EdgeIdentity) -> bool:
        return edge in self._edge_set

    def edges_at(self, vertex: VertexIdentity) -> list[EdgeIdentity]:
        """Return the 2-3 edges touching vertex (empty if not on the board)."""
        return list(self._edges_by_vertex.get(vertex, []))

    def adjacent_vertices(self, vertex: VertexIdentity) -> list[VertexIdentity]:
        """Return the vertices one edge away from vertex."""
        return [e.other_end(vertex) for e in self.edges_at(vertex)]
