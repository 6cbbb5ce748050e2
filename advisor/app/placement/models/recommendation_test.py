"""Unit tests for recommendation output models."""

from __future__ import annotations

import unittest

import pydantic

from advisor.app.placement import topology
from advisor.app.placement.models.board import ResourceKind
from advisor.app.placement.models.hex import HexCoordinate
from advisor.app.placement.models.recommendation import (
    Recommendation,
    RecommendationSet,
    ScoreBreakdown,
)

_ORIGIN = HexCoordinate(q=0, r=0)


def _breakdown(**overrides: float) -> ScoreBreakdown:
    values = {
        'expected_yield': 0.5,
        'resource_diversity': 0.2,
        'number_quality': 0.6,
        'port_access': 0.0,
        'expansion_potential': 1.0,
    }
    values.update(overrides)
    return ScoreBreakdown(**values)


class TestScoreBreakdown(unittest.TestCase):
    """Tests for ScoreBreakdown bounds."""

    def test_components_within_unit_interval(self) -> None:
        with self.assertRaises(pydantic.ValidationError):
            _breakdown(expected_yield=1.2)
        with self.assertRaises(pydantic.ValidationError):
            _breakdown(port_access=-0.1)

    def test_frozen(self) -> None:
        breakdown = _breakdown()
        with self.assertRaises(pydantic.ValidationError):
            breakdown.port_access = 1.0  # type: ignore[misc]


class TestRecommendation(unittest.TestCase):
    """Tests for Recommendation and RecommendationSet."""

    def setUp(self) -> None:
        self.vertex = topology.vertices_of(_ORIGIN, [_ORIGIN])[0]

    def _recommendation(self, score: float) -> Recommendation:
        return Recommendation(
            vertex=self.vertex,
            score=score,
            breakdown=_breakdown(),
            resource_yield={ResourceKind.ORE: 3.0},
            adjacent_resources=[ResourceKind.ORE],
            adjacent_numbers=[10],
        )

    def test_score_bounds(self) -> None:
        self.assertEqual(self._recommendation(0.0).score, 0.0)
        self.assertEqual(self._recommendation(100.0).score, 100.0)
        with self.assertRaises(pydantic.ValidationError):
            self._recommendation(100.5)

    def test_defaults(self) -> None:
        rec = self._recommendation(50.0)
        self.assertIsNone(rec.port_access)
        self.assertEqual(rec.recommended_road_edges, [])

    def test_placement_number_is_one_or_two(self) -> None:
        with self.assertRaises(pydantic.ValidationError):
            RecommendationSet(
                recommendations=[],
                placement_number=3,  # type: ignore[arg-type]
                occupied=[],
            )

    def test_json_uses_resource_names(self) -> None:
        data = self._recommendation(50.0).model_dump(mode='json')
        self.assertEqual(data['resource_yield'], {'ore': 3.0})
        self.assertEqual(data['adjacent_resources'], ['ore'])


if __name__ == '__main__':
    unittest.main()
