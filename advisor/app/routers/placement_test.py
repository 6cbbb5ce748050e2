"""Integration tests for the placement HTTP router."""

from __future__ import annotations

import unittest
from typing import Any

import fastapi.testclient

from advisor.app import main
from advisor.app.placement import board_generator, topology
from advisor.app.placement.models.board import (
    BoardConfiguration,
    ResourceKind,
    Tile,
    VertexIdentity,
)
from advisor.app.placement.models.hex import HexCoordinate

_ORIGIN = HexCoordinate(q=0, r=0)


def _dump(model: Any) -> Any:
    return model.model_dump(mode='json')


class TestTopologyRoute(unittest.TestCase):
    """Tests for POST /placement/topology."""

    def setUp(self) -> None:
        self.client = fastapi.testclient.TestClient(main.app)

    def test_single_hex(self) -> None:
        resp = self.client.post('/placement/topology', json={'tiles': [_dump(_ORIGIN)]})
        self.assertEqual(resp.status_code, 200)
        data = resp.json()
        self.assertEqual(len(data['vertices']), 6)
        self.assertEqual(len(data['edges']), 6)

    def test_standard_layout(self) -> None:
        tiles = [_dump(c) for c in board_generator.STANDARD_LAYOUT]
        resp = self.client.post('/placement/topology', json={'tiles': tiles})
        data = resp.json()
        self.assertEqual(len(data['vertices']), 54)
        self.assertEqual(len(data['edges']), 72)

    def test_vertex_round_trips(self) -> None:
        """A vertex returned by the API is accepted back as the same vertex."""
        resp = self.client.post('/placement/topology', json={'tiles': [_dump(_ORIGIN)]})
        returned = VertexIdentity.model_validate(resp.json()['vertices'][0])
        self.assertEqual(returned, topology.vertices_of(_ORIGIN, [_ORIGIN])[0])

    def test_empty_tiles(self) -> None:
        resp = self.client.post('/placement/topology', json={'tiles': []})
        self.assertEqual(resp.json(), {'vertices': [], 'edges': []})

    def test_missing_body_rejected(self) -> None:
        resp = self.client.post('/placement/topology', json={})
        self.assertEqual(resp.status_code, 422)


class TestRecommendationsRoute(unittest.TestCase):
    """Tests for POST /placement/recommendations."""

    def setUp(self) -> None:
        self.client = fastapi.testclient.TestClient(main.app)
        self.board = _dump(board_generator.beginner_board())

    def test_default_top_five(self) -> None:
        resp = self.client.post(
            '/placement/recommendations', json={'board': self.board}
        )
        self.assertEqual(resp.status_code, 200)
        data = resp.json()
        self.assertEqual(len(data['recommendations']), 5)
        self.assertEqual(data['placement_number'], 1)
        scores = [rec['score'] for rec in data['recommendations']]
        self.assertEqual(scores, sorted(scores, reverse=True))

    def test_recommendation_fields(self) -> None:
        resp = self.client.post(
            '/placement/recommendations', json={'board': self.board, 'top_n': 1}
        )
        rec = resp.json()['recommendations'][0]
        self.assertEqual(
            set(rec['breakdown']),
            {
                'expected_yield',
                'resource_diversity',
                'number_quality',
                'port_access',
                'expansion_potential',
            },
        )
        self.assertEqual(
            set(rec['resource_yield']), {'wood', 'brick', 'sheep', 'wheat', 'ore'}
        )
        self.assertLessEqual(len(rec['recommended_road_edges']), 3)

    def test_second_placement(self) -> None:
        first = self.client.post(
            '/placement/recommendations', json={'board': self.board, 'top_n': 1}
        ).json()['recommendations'][0]['vertex']
        resp = self.client.post(
            '/placement/recommendations',
            json={'board': self.board, 'occupied': [first], 'first_placement': first},
        )
        self.assertEqual(resp.status_code, 200)
        data = resp.json()
        self.assertEqual(data['placement_number'], 2)
        returned = [
            VertexIdentity.model_validate(r['vertex']) for r in data['recommendations']
        ]
        self.assertNotIn(VertexIdentity.model_validate(first), returned)

    def test_negative_top_n_rejected(self) -> None:
        resp = self.client.post(
            '/placement/recommendations', json={'board': self.board, 'top_n': -1}
        )
        self.assertEqual(resp.status_code, 422)

    def test_duplicate_tiles_are_bad_request(self) -> None:
        tile = Tile(coordinate=_ORIGIN, resource=ResourceKind.ORE, number=10)
        board = BoardConfiguration(tiles=[tile, tile])
        resp = self.client.post(
            '/placement/recommendations', json={'board': _dump(board)}
        )
        self.assertEqual(resp.status_code, 400)
        self.assertIn('Duplicate', resp.json()['detail'])

    def test_unknown_first_placement_is_bad_request(self) -> None:
        stray = topology.vertices_of(HexCoordinate(q=9, r=9), [])[0]
        resp = self.client.post(
            '/placement/recommendations',
            json={'board': self.board, 'first_placement': _dump(stray)},
        )
        self.assertEqual(resp.status_code, 400)

    def test_invalid_tile_rejected(self) -> None:
        board = {
            'tiles': [
                {'coordinate': {'q': 0, 'r': 0}, 'resource': 'desert', 'number': 6}
            ]
        }
        resp = self.client.post('/placement/recommendations', json={'board': board})
        self.assertEqual(resp.status_code, 422)


class TestRoadsRoute(unittest.TestCase):
    """Tests for POST /placement/roads."""

    def setUp(self) -> None:
        self.client = fastapi.testclient.TestClient(main.app)
        self.board = board_generator.beginner_board()
        self.topo = topology.BoardTopology.from_hexes(self.board.coordinates())
        # Corner 0 of the central desert touches three tiles.
        self.settlement = topology.vertices_of(_ORIGIN, self.board.coordinates())[0]

    def test_three_roads_from_inland_vertex(self) -> None:
        resp = self.client.post(
            '/placement/roads',
            json={'settlement': _dump(self.settlement), 'board': _dump(self.board)},
        )
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(len(resp.json()['edges']), 3)

    def test_occupied_edge_excluded(self) -> None:
        taken = self.topo.edges_at(self.settlement)[0]
        resp = self.client.post(
            '/placement/roads',
            json={
                'settlement': _dump(self.settlement),
                'board': _dump(self.board),
                'occupied_edges': [_dump(taken)],
            },
        )
        self.assertEqual(len(resp.json()['edges']), 2)

    def test_unknown_settlement_is_bad_request(self) -> None:
        stray = topology.vertices_of(HexCoordinate(q=9, r=9), [])[0]
        resp = self.client.post(
            '/placement/roads',
            json={'settlement': _dump(stray), 'board': _dump(self.board)},
        )
        self.assertEqual(resp.status_code, 400)


class TestBoardRoutes(unittest.TestCase):
    """Tests for the ready-made board routes."""

    def setUp(self) -> None:
        self.client = fastapi.testclient.TestClient(main.app)

    def test_beginner_board(self) -> None:
        resp = self.client.get('/placement/boards/beginner')
        self.assertEqual(resp.status_code, 200)
        board = BoardConfiguration.model_validate(resp.json())
        self.assertEqual(board, board_generator.beginner_board())

    def test_random_board_with_seed(self) -> None:
        a = self.client.get('/placement/boards/random', params={'seed': 7}).json()
        b = self.client.get('/placement/boards/random', params={'seed': 7}).json()
        self.assertEqual(a, b)
        self.assertEqual(len(a['tiles']), 19)
        self.assertEqual(len(a['ports']), 9)

    def test_balanced_random_board(self) -> None:
        resp = self.client.get(
            '/placement/boards/random', params={'seed': 3, 'balanced': 'true'}
        )
        board = BoardConfiguration.model_validate(resp.json())
        self.assertFalse(board_generator.has_adjacent_red_numbers(board.tiles))

    def test_generated_board_feeds_recommendations(self) -> None:
        board = self.client.get('/placement/boards/random', params={'seed': 11}).json()
        resp = self.client.post('/placement/recommendations', json={'board': board})
        self.assertEqual(resp.status_code, 200)


if __name__ == '__main__':
    unittest.main()
