"""HTTP routes for the settlement placement advisor.

Registers:

* ``POST /placement/topology`` : vertices and edges of a tile set
* ``POST /placement/recommendations`` : ranked settlement locations
* ``POST /placement/roads`` : best roads from a settlement
* ``GET  /placement/boards/beginner`` : the rulebook beginner board
* ``GET  /placement/boards/random`` : a randomised standard board

All computation is delegated to :mod:`advisor.app.placement.engine`.  Engine
errors (:class:`~advisor.app.placement.engine.errors.PlacementError`) become
HTTP 400 through the handler registered in :mod:`advisor.app.main`.
"""

from __future__ import annotations

import logging

import fastapi
import pydantic

from ..placement import board_generator, topology
from ..placement.engine import recommendations
from ..placement.models.board import BoardConfiguration, EdgeIdentity, VertexIdentity
from ..placement.models.hex import HexCoordinate
from ..placement.models.recommendation import RecommendationSet

logger = logging.getLogger(__name__)

router = fastapi.APIRouter(prefix='/placement')


# ---------------------------------------------------------------------------
# Request / response models
# ---------------------------------------------------------------------------


class TopologyRequest(pydantic.BaseModel):
    """Body of POST /placement/topology."""

    tiles: list[HexCoordinate]


class TopologyResponse(pydantic.BaseModel):
    """Returned by POST /placement/topology."""

    vertices: list[VertexIdentity]
    edges: list[EdgeIdentity]


class RecommendationRequest(pydantic.BaseModel):
    """Body of POST /placement/recommendations."""

    board: BoardConfiguration
    occupied: list[VertexIdentity] = []
    first_placement: VertexIdentity | None = None
    top_n: int | None = pydantic.Field(default=None, ge=0)  # None: DEFAULT_TOP_N


class RoadRequest(pydantic.BaseModel):
    """Body of POST /placement/roads."""

    settlement: VertexIdentity
    board: BoardConfiguration
    occupied_vertices: list[VertexIdentity] = []
    occupied_edges: list[EdgeIdentity] = []


class RoadResponse(pydantic.BaseModel):
    """Returned by POST /placement/roads."""

    edges: list[EdgeIdentity]


# ---------------------------------------------------------------------------
# HTTP endpoints
# ---------------------------------------------------------------------------


@router.post('/topology', response_model=TopologyResponse)
async def derive_topology(body: TopologyRequest) -> TopologyResponse:
    """Return every vertex and edge of the given tiles."""
    return TopologyResponse(
        vertices=topology.derive_vertices(body.tiles),
        edges=topology.derive_edges(body.tiles),
    )


@router.post('/recommendations', response_model=RecommendationSet)
async def recommend_settlements(body: RecommendationRequest) -> RecommendationSet:
    """Return the best settlement locations for the supplied board."""
    logger.info(
        'Recommending settlements: %d tiles, %d occupied, placement %d',
        len(body.board.tiles),
        len(body.occupied),
        2 if body.first_placement is not None else 1,
    )
    return recommendations.generate_recommendations(
        body.board,
        occupied=body.occupied,
        first_placement=body.first_placement,
        top_n=body.top_n,
    )


@router.post('/roads', response_model=RoadResponse)
async def recommend_roads(body: RoadRequest) -> RoadResponse:
    """Return up to 3 road edges from a settlement, best first."""
    edges = recommendations.recommend_road_placement(
        body.settlement,
        body.board,
        occupied_vertices=body.occupied_vertices,
        occupied_edges=body.occupied_edges,
    )
    return RoadResponse(edges=edges)


@router.get('/boards/beginner', response_model=BoardConfiguration)
async def beginner_board() -> BoardConfiguration:
    """Return the rulebook beginner board."""
    return board_generator.beginner_board()


@router.get('/boards/random', response_model=BoardConfiguration)
async def random_board(
    seed: int | None = None, balanced: bool = False
) -> BoardConfiguration:
    """Return a randomised standard board.

    Args:
        seed: Optional seed for a reproducible board.
        balanced: Avoid adjacent 6/8 tokens.
    """
    return board_generator.generate_board(balanced=balanced, seed=seed)
