"""Ready-made board configurations.

Provides the standard 19-tile layout, the published beginner board and
seeded random boards.  Tiles are laid out in axial coordinates, row by row
from the top::

          ( 0,-2) ( 1,-2) ( 2,-2)
      (-1,-1) ( 0,-1) ( 1,-1) ( 2,-1)
    (-2, 0) (-1, 0) ( 0, 0) ( 1, 0) ( 2, 0)
      (-2, 1) (-1, 1) ( 0, 1) ( 1, 1)
          (-2, 2) (-1, 2) ( 0, 2)

Ports are placed on 9 coastal edges (edges bordering exactly one tile) that
share no endpoint, so no vertex has access to two ports.
"""

from __future__ import annotations

import random

from .engine import probabilities
from .models.board import (
    BoardConfiguration,
    EdgeIdentity,
    OffBoardSlot,
    Port,
    PortType,
    ResourceKind,
    Tile,
    VertexIdentity,
)
from .models.hex import HexCoordinate
from .topology import derive_edges

# ---------------------------------------------------------------------------
# Board constants
# ---------------------------------------------------------------------------

STANDARD_LAYOUT: list[HexCoordinate] = [
    HexCoordinate(q=q, r=r)
    for q, r in [
        # Row 1 (top)
        (0, -2),
        (1, -2),
        (2, -2),
        # Row 2
        (-1, -1),
        (0, -1),
        (1, -1),
        (2, -1),
        # Row 3 (widest)
        (-2, 0),
        (-1, 0),
        (0, 0),
        (1, 0),
        (2, 0),
        # Row 4
        (-2, 1),
        (-1, 1),
        (0, 1),
        (1, 1),
        # Row 5 (bottom)
        (-2, 2),
        (-1, 2),
        (0, 2),
    ]
]

# Beginner setup from the rulebook, in STANDARD_LAYOUT order.
_BEGINNER_TILES: list[tuple[ResourceKind, int | None]] = [
    (ResourceKind.ORE, 10),
    (ResourceKind.SHEEP, 2),
    (ResourceKind.WOOD, 9),
    (ResourceKind.WHEAT, 12),
    (ResourceKind.BRICK, 6),
    (ResourceKind.SHEEP, 4),
    (ResourceKind.BRICK, 10),
    (ResourceKind.WHEAT, 9),
    (ResourceKind.WOOD, 11),
    (ResourceKind.DESERT, None),
    (ResourceKind.WOOD, 3),
    (ResourceKind.ORE, 8),
    (ResourceKind.WOOD, 8),
    (ResourceKind.ORE, 3),
    (ResourceKind.WHEAT, 4),
    (ResourceKind.SHEEP, 5),
    (ResourceKind.BRICK, 5),
    (ResourceKind.WHEAT, 6),
    (ResourceKind.SHEEP, 11),
]

# Standard resource distribution (must sum to 19).
_RESOURCE_DISTRIBUTION: list[ResourceKind] = (
    [ResourceKind.WOOD] * 4
    + [ResourceKind.SHEEP] * 4
    + [ResourceKind.WHEAT] * 4
    + [ResourceKind.BRICK] * 3
    + [ResourceKind.ORE] * 3
    + [ResourceKind.DESERT] * 1
)

# Standard number-token distribution (18 tokens for 18 non-desert tiles).
_NUMBER_TOKENS: list[int] = [2, 3, 3, 4, 4, 5, 5, 6, 6, 8, 8, 9, 9, 10, 10, 11, 11, 12]

# 6 and 8 are the only tokens printed with five pips (in red).
_RED_PIPS = 5

# Standard port distribution (4 generic 3:1 + one 2:1 per resource = 9 total).
_PORT_DISTRIBUTION: list[PortType] = [
    PortType.GENERIC,
    PortType.GENERIC,
    PortType.GENERIC,
    PortType.GENERIC,
    PortType.WOOD,
    PortType.BRICK,
    PortType.WHEAT,
    PortType.SHEEP,
    PortType.ORE,
]

_PORT_COUNT = len(_PORT_DISTRIBUTION)

_BALANCE_ATTEMPTS = 200

# Fixed seed so the beginner board always has the same ports.
_BEGINNER_PORT_SEED = 0

# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def beginner_board() -> BoardConfiguration:
    """Return the rulebook beginner board with 9 ports."""
    tiles = [
        Tile(
            coordinate=coord,
            resource=resource,
            number=number,
            has_robber=resource == ResourceKind.DESERT,
        )
        for coord, (resource, number) in zip(
            STANDARD_LAYOUT, _BEGINNER_TILES, strict=True
        )
    ]
    rng = random.Random(_BEGINNER_PORT_SEED)
    return BoardConfiguration(tiles=tiles, ports=_place_ports(rng, tiles))


def generate_board(
    balanced: bool = False, seed: int | None = None
) -> BoardConfiguration:
    """Generate a randomised standard board.

    Args:
        balanced: When True, reshuffle the layout until no two adjacent
            tiles both carry a red number (6 or 8), giving up after 200
            attempts.
        seed: Optional integer seed for reproducible boards.
    """
    rng = random.Random(seed)
    tiles = _create_tiles(rng)
    if balanced:
        for _ in range(_BALANCE_ATTEMPTS):
            if not has_adjacent_red_numbers(tiles):
                break
            tiles = _create_tiles(rng)
    return BoardConfiguration(tiles=tiles, ports=_place_ports(rng, tiles))


def has_adjacent_red_numbers(tiles: list[Tile]) -> bool:
    """Return True if two neighbouring tiles both carry a 6 or an 8."""
    red = [
        t.coordinate
        for t in tiles
        if t.number is not None and probabilities.pip_count(t.number) == _RED_PIPS
    ]
    return any(a.distance_to(b) == 1 for i, a in enumerate(red) for b in red[i + 1 :])


def coastal_edges(tiles: list[Tile]) -> list[EdgeIdentity]:
    """Return the edges bordering exactly one tile, in derivation order."""
    return [
        e
        for e in derive_edges([t.coordinate for t in tiles])
        if any(isinstance(s, OffBoardSlot) for s in e.bordering)
    ]


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _create_tiles(rng: random.Random) -> list[Tile]:
    """Shuffle resources and number tokens over the standard layout."""
    resources = _RESOURCE_DISTRIBUTION.copy()
    rng.shuffle(resources)
    number_tokens = _NUMBER_TOKENS.copy()
    rng.shuffle(number_tokens)
    token_iter = iter(number_tokens)

    tiles: list[Tile] = []
    for coord, resource in zip(STANDARD_LAYOUT, resources, strict=True):
        desert = resource == ResourceKind.DESERT
        tiles.append(
            Tile(
                coordinate=coord,
                resource=resource,
                number=None if desert else next(token_iter),
                has_robber=desert,
            )
        )
    return tiles


def _place_ports(rng: random.Random, tiles: list[Tile]) -> list[Port]:
    """Assign the 9 ports to coastal edges that share no endpoint."""
    candidates = coastal_edges(tiles)
    rng.shuffle(candidates)

    used_vertices: set[VertexIdentity] = set()
    selected: list[EdgeIdentity] = []
    for edge in candidates:
        v0, v1 = edge.vertices
        if v0 not in used_vertices and v1 not in used_vertices:
            selected.append(edge)
            used_vertices.update((v0, v1))
        if len(selected) == _PORT_COUNT:
            break

    port_types = _PORT_DISTRIBUTION.copy()
    rng.shuffle(port_types)

    return [
        Port(port_type=pt, edge=edge, ratio=3 if pt == PortType.GENERIC else 2)
        for pt, edge in zip(port_types, selected, strict=True)
    ]
