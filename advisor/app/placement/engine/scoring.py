"""Settlement scoring.

A candidate vertex is scored on five normalised components, combined with
fixed weights into a 0-100 score:

- **expected yield** (40%): expected cards per 36 rolls from the adjacent
  tiles, divided by 14 (roughly a 6 + 8 + 5 spot) and capped at 1.
- **resource diversity** (30%): distinct resources produced / 5.  For a
  second settlement, +0.1 per resource the first settlement lacks.
- **number quality** (15%): mean quality of the adjacent tokens.
- **port access** (10%): 0.3 for a generic port, 1.0 for a 2:1 port in a
  resource produced here, 0.6 for any other 2:1 port.
- **expansion potential** (5%): free adjacent vertices / 3.
"""

from __future__ import annotations

from collections.abc import Collection

from ..models.board import (
    PRODUCING_RESOURCES,
    BoardConfiguration,
    Port,
    PortType,
    ResourceKind,
    Tile,
    VertexIdentity,
)
from ..models.recommendation import Recommendation, ScoreBreakdown
from ..topology import BoardTopology
from . import probabilities
from .errors import InvalidCandidateError

WEIGHTS: dict[str, float] = {
    'expected_yield': 0.40,
    'resource_diversity': 0.30,
    'number_quality': 0.15,
    'port_access': 0.10,
    'expansion_potential': 0.05,
}

# Expected yield of a strong three-tile spot (two of 6/8 plus a 5 or 9).
_YIELD_NORMALISER = 14.0

_GENERIC_PORT_SCORE = 0.3
_MATCHED_PORT_SCORE = 1.0
_UNMATCHED_PORT_SCORE = 0.6

_SECOND_PLACEMENT_BONUS = 0.1  # per resource the first settlement lacks

_MAX_ROAD_SUGGESTIONS = 3


# ---------------------------------------------------------------------------
# Component helpers
# ---------------------------------------------------------------------------


def adjacent_tiles(vertex: VertexIdentity, board: BoardConfiguration) -> list[Tile]:
    """Return the board tiles touching vertex, in canonical slot order."""
    tiles: list[Tile] = []
    for coord in vertex.tiles:
        tile = board.tile_at(coord)
        if tile is not None:
            tiles.append(tile)
    return tiles


def resource_yield(
    tiles: list[Tile],
) -> tuple[dict[ResourceKind, float], float, list[int]]:
    """Return (yield per resource, total yield, numbers) for tiles.

    Deserts and unconfigured tiles contribute nothing.
    """
    yields: dict[ResourceKind, float] = {r: 0.0 for r in PRODUCING_RESOURCES}
    total = 0.0
    numbers: list[int] = []
    for tile in tiles:
        if not tile.produces or tile.number is None or tile.resource is None:
            continue
        expected = probabilities.expected_yield(tile.number)
        yields[tile.resource] += expected
        total += expected
        numbers.append(tile.number)
    return yields, total, numbers


def adjacent_resources(tiles: list[Tile]) -> list[ResourceKind]:
    """Return the distinct producing resources of tiles, first seen first."""
    resources: list[ResourceKind] = []
    for tile in tiles:
        if tile.produces and tile.resource and tile.resource not in resources:
            resources.append(tile.resource)
    return resources


def port_score(port: Port | None, resources: Collection[ResourceKind]) -> float:
    """Return the port access component for port given the local resources."""
    if port is None or port.port_type is None:
        return 0.0
    if port.port_type == PortType.GENERIC:
        return _GENERIC_PORT_SCORE
    if ResourceKind(port.port_type.value) in resources:
        return _MATCHED_PORT_SCORE
    return _UNMATCHED_PORT_SCORE


def port_at(
    vertex: VertexIdentity,
    board: BoardConfiguration,
    topology: BoardTopology,
    resources: Collection[ResourceKind],
) -> Port | None:
    """Return the most valuable port on an edge touching vertex.

    Ports without a type are ignored.  Ties go to the port listed first.
    """
    incident = set(topology.edges_at(vertex))
    best: Port | None = None
    best_score = 0.0
    for port in board.ports:
        if port.port_type is None or port.edge not in incident:
            continue
        score = port_score(port, resources)
        if score > best_score:
            best, best_score = port, score
    return best


def expansion_potential(
    vertex: VertexIdentity,
    topology: BoardTopology,
    occupied: Collection[VertexIdentity],
) -> float:
    """Return the fraction of (up to 3) adjacent vertices still free."""
    free = [v for v in topology.adjacent_vertices(vertex) if v not in occupied]
    return min(len(free) / 3, 1.0)


def _require_vertex(vertex: VertexIdentity, topology: BoardTopology) -> None:
    if not topology.has_vertex(vertex):
        raise InvalidCandidateError(
            f'Vertex {vertex.key} is not a vertex of this board.'
        )


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def score_settlement(
    vertex: VertexIdentity,
    board: BoardConfiguration,
    topology: BoardTopology,
    occupied: Collection[VertexIdentity] = (),
    first_placement: VertexIdentity | None = None,
) -> Recommendation:
    """Score a settlement at vertex and return the full recommendation.

    Args:
        vertex: The candidate vertex.
        board: The board snapshot; never modified.
        topology: The derived topology of board's tiles.
        occupied: Vertices that already hold a settlement.
        first_placement: The player's first settlement, when scoring the
            second one.

    Raises:
        InvalidCandidateError: if vertex or first_placement is not on the
            board.
    """
    _require_vertex(vertex, topology)
    occupied_set = set(occupied)

    tiles = adjacent_tiles(vertex, board)
    yields, total, numbers = resource_yield(tiles)
    resources = adjacent_resources(tiles)

    diversity = sum(1 for amount in yields.values() if amount > 0) / 5
    if first_placement is not None:
        _require_vertex(first_placement, topology)
        first_yields, _, _ = resource_yield(adjacent_tiles(first_placement, board))
        have = {r for r, amount in first_yields.items() if amount > 0}
        new = [r for r in resources if r not in have]
        diversity = min(diversity + _SECOND_PLACEMENT_BONUS * len(new), 1.0)

    port = port_at(vertex, board, topology, resources)

    breakdown = ScoreBreakdown(
        expected_yield=min(total / _YIELD_NORMALISER, 1.0),
        resource_diversity=diversity,
        number_quality=probabilities.average_number_quality(numbers),
        port_access=port_score(port, resources),
        expansion_potential=expansion_potential(vertex, topology, occupied_set),
    )
    score = 100 * sum(
        getattr(breakdown, name) * weight for name, weight in WEIGHTS.items()
    )

    return Recommendation(
        vertex=vertex,
        score=score,
        breakdown=breakdown,
        resource_yield=yields,
        adjacent_resources=resources,
        adjacent_numbers=numbers,
        port_access=port.port_type if port is not None else None,
        recommended_road_edges=topology.edges_at(vertex)[:_MAX_ROAD_SUGGESTIONS],
    )
