"""Settlement and road recommendations.

Enumerates the legal settlement vertices of a board, scores each with
:func:`~.scoring.score_settlement` and returns a ranked shortlist.

Ranking uses Python's stable sort on descending score, so candidates with
equal scores keep their derivation order (tile order, then corner index).
Identical inputs therefore always produce identical rankings.
"""

from __future__ import annotations

import logging
from collections.abc import Collection, Sequence

from common import settings

from ..models.board import BoardConfiguration, EdgeIdentity, VertexIdentity
from ..models.recommendation import Recommendation, RecommendationSet
from ..topology import BoardTopology
from . import scoring, validation
from .errors import InvalidCandidateError

logger = logging.getLogger(__name__)

_MAX_ROAD_RECOMMENDATIONS = 3


def legal_vertices(
    topology: BoardTopology, occupied: Collection[VertexIdentity]
) -> list[VertexIdentity]:
    """Return vertices where a settlement may be placed, in derivation order.

    A vertex is legal if it is free and none of its neighbours (one edge
    away) holds a settlement.
    """
    taken = set(occupied)
    return [
        vertex
        for vertex in topology.vertices
        if vertex not in taken
        and not any(adj in taken for adj in topology.adjacent_vertices(vertex))
    ]


def generate_recommendations(
    board: BoardConfiguration,
    occupied: Sequence[VertexIdentity] = (),
    first_placement: VertexIdentity | None = None,
    top_n: int | None = None,
) -> RecommendationSet:
    """Return the top_n best settlement locations on board.

    Args:
        board: The board snapshot.
        occupied: Vertices that already hold a settlement.
        first_placement: The player's first settlement; when given, the set
            is for the second placement and complementary resources score
            higher.
        top_n: Maximum number of recommendations to return; defaults to
            ``settings.DEFAULT_TOP_N``.

    Returns:
        A :class:`RecommendationSet`.  An empty list of recommendations (for
        example on a full board) is a normal result.

    Raises:
        MalformedBoardError: if the board fails validation.
        InvalidCandidateError: if first_placement is not on the board.
        ValueError: if top_n is negative.
    """
    if top_n is None:
        top_n = settings.DEFAULT_TOP_N
    if top_n < 0:
        raise ValueError(f'top_n must be non-negative, got {top_n}')

    topology = validation.validate_board(board)
    if first_placement is not None and not topology.has_vertex(first_placement):
        raise InvalidCandidateError(
            f'Vertex {first_placement.key} is not a vertex of this board.'
        )
    candidates = legal_vertices(topology, occupied)
    logger.debug(
        '%d of %d vertices are legal with %d occupied',
        len(candidates),
        len(topology.vertices),
        len(occupied),
    )

    scored: list[Recommendation] = [
        scoring.score_settlement(v, board, topology, occupied, first_placement)
        for v in candidates
    ]
    scored.sort(key=lambda rec: rec.score, reverse=True)

    return RecommendationSet(
        recommendations=scored[:top_n],
        placement_number=2 if first_placement is not None else 1,
        occupied=list(occupied),
    )


def recommend_road_placement(
    settlement: VertexIdentity,
    board: BoardConfiguration,
    occupied_vertices: Sequence[VertexIdentity] = (),
    occupied_edges: Sequence[EdgeIdentity] = (),
) -> list[EdgeIdentity]:
    """Return up to 3 free edges from settlement, best destination first.

    Each free edge touching settlement is ranked by the settlement score of
    the vertex at its far end.

    Raises:
        MalformedBoardError: if the board fails validation.
        InvalidCandidateError: if settlement is not on the board.
    """
    topology = validation.validate_board(board)
    if not topology.has_vertex(settlement):
        raise InvalidCandidateError(
            f'Vertex {settlement.key} is not a vertex of this board.'
        )

    taken = set(occupied_edges)
    scored: list[tuple[float, EdgeIdentity]] = []
    for edge in topology.edges_at(settlement):
        if edge in taken:
            continue
        target = edge.other_end(settlement)
        rec = scoring.score_settlement(target, board, topology, occupied_vertices)
        scored.append((rec.score, edge))

    scored.sort(key=lambda pair: pair[0], reverse=True)
    return [edge for _, edge in scored[:_MAX_ROAD_RECOMMENDATIONS]]
