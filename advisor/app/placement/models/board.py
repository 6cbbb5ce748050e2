"""Board data models for the placement advisor.

Defines resources, tiles, ports, the canonical vertex and edge identities,
and the overall BoardConfiguration supplied by the caller.
"""

from __future__ import annotations

import enum
import typing

import pydantic

from .hex import HexCoordinate


class ResourceKind(enum.StrEnum):
    """What a tile produces.  Desert produces nothing."""

    WOOD = 'wood'
    BRICK = 'brick'
    SHEEP = 'sheep'
    WHEAT = 'wheat'
    ORE = 'ore'
    DESERT = 'desert'


# The five resources that yield cards, in display order.
PRODUCING_RESOURCES: tuple[ResourceKind, ...] = (
    ResourceKind.WOOD,
    ResourceKind.BRICK,
    ResourceKind.SHEEP,
    ResourceKind.WHEAT,
    ResourceKind.ORE,
)


class PortType(enum.StrEnum):
    """Port types: generic 3:1 or specific resource 2:1."""

    GENERIC = 'generic'
    WOOD = 'wood'
    BRICK = 'brick'
    SHEEP = 'sheep'
    WHEAT = 'wheat'
    ORE = 'ore'


# Number tokens that may sit on a producing tile (7 summons the robber).
VALID_NUMBER_TOKENS: frozenset[int] = frozenset({2, 3, 4, 5, 6, 8, 9, 10, 11, 12})


# ---------------------------------------------------------------------------
# Vertex / edge identity
# ---------------------------------------------------------------------------


class TileSlot(pydantic.BaseModel):
    """A vertex or edge slot occupied by a real board tile."""

    model_config = pydantic.ConfigDict(frozen=True)

    kind: typing.Literal['tile'] = 'tile'
    coordinate: HexCoordinate


class OffBoardSlot(pydantic.BaseModel):
    """A slot facing a grid position that holds no tile (water).

    The coordinate records which empty position the slot faces; the tag keeps
    it from ever comparing equal to a real tile at the same position.
    """

    model_config = pydantic.ConfigDict(frozen=True)

    kind: typing.Literal['off_board'] = 'off_board'
    coordinate: HexCoordinate


Slot = typing.Annotated[TileSlot | OffBoardSlot, pydantic.Field(discriminator='kind')]

SlotKey = tuple[int, int, int]


def slot_key(slot: TileSlot | OffBoardSlot) -> SlotKey:
    """Return the canonical ordering key: real tiles first, then (q, r)."""
    off = 1 if isinstance(slot, OffBoardSlot) else 0
    return (off, slot.coordinate.q, slot.coordinate.r)


def _canonical_slots(
    slots: tuple[TileSlot | OffBoardSlot, ...],
) -> tuple[TileSlot | OffBoardSlot, ...]:
    if len(set(slots)) != len(slots):
        raise ValueError('slots must be distinct')
    if not any(isinstance(s, TileSlot) for s in slots):
        raise ValueError('at least one slot must be a board tile')
    return tuple(sorted(slots, key=slot_key))


class VertexIdentity(pydantic.BaseModel):
    """A point where up to three tiles meet; a settlement location.

    Identified by the three grid positions surrounding it, sorted into
    canonical order.  ``direction`` is the corner index (0-5, clockwise from the
    upper right) on the tile that first produced the vertex.  It is only a
    rendering hint and takes no part in equality or hashing.
    """

    model_config = pydantic.ConfigDict(frozen=True)

    slots: tuple[Slot, Slot, Slot]
    direction: int = pydantic.Field(default=0, ge=0, le=5)

    @pydantic.field_validator('slots')
    @classmethod
    def _sort_slots(
        cls, value: tuple[TileSlot | OffBoardSlot, ...]
    ) -> tuple[TileSlot | OffBoardSlot, ...]:
        return _canonical_slots(value)

    @property
    def key(self) -> tuple[SlotKey, SlotKey, SlotKey]:
        """Canonical hashable identity of this vertex."""
        k0, k1, k2 = (slot_key(s) for s in self.slots)
        return (k0, k1, k2)

    @property
    def tiles(self) -> list[HexCoordinate]:
        """The 1-3 real tile coordinates touching this vertex."""
        return [s.coordinate for s in self.slots if isinstance(s, TileSlot)]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VertexIdentity):
            return NotImplemented
        return self.key == other.key

    def __hash__(self) -> int:
        return hash(self.key)


class EdgeIdentity(pydantic.BaseModel):
    """A side of a tile where roads can be placed.

    Connects exactly two vertices and borders one or two real tiles (the
    second slot is off-board on the coast).  Two edges are equal iff their
    endpoint vertices match, regardless of order.
    """

    model_config = pydantic.ConfigDict(frozen=True)

    vertices: tuple[VertexIdentity, VertexIdentity]
    bordering: tuple[Slot, Slot]

    @pydantic.field_validator('vertices')
    @classmethod
    def _sort_vertices(
        cls, value: tuple[VertexIdentity, VertexIdentity]
    ) -> tuple[VertexIdentity, VertexIdentity]:
        v0, v1 = value
        if v0 == v1:
            raise ValueError('an edge must join two distinct vertices')
        return (v0, v1) if v0.key <= v1.key else (v1, v0)

    @pydantic.field_validator('bordering')
    @classmethod
    def _sort_bordering(
        cls, value: tuple[TileSlot | OffBoardSlot, ...]
    ) -> tuple[TileSlot | OffBoardSlot, ...]:
        return _canonical_slots(value)

    @property
    def key(self) -> frozenset[tuple[SlotKey, SlotKey, SlotKey]]:
        """Canonical, order-independent identity of this edge."""
        return frozenset(v.key for v in self.vertices)

    def touches(self, vertex: VertexIdentity) -> bool:
        """Return True if vertex is one of this edge's endpoints."""
        return vertex in self.vertices

    def other_end(self, vertex: VertexIdentity) -> VertexIdentity:
        """Return the endpoint that is not vertex."""
        v0, v1 = self.vertices
        if vertex == v0:
            return v1
        if vertex == v1:
            return v0
        raise ValueError('vertex is not an endpoint of this edge')

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EdgeIdentity):
            return NotImplemented
        return self.key == other.key

    def __hash__(self) -> int:
        return hash(self.key)


# ---------------------------------------------------------------------------
# Board configuration
# ---------------------------------------------------------------------------


class Tile(pydantic.BaseModel):
    """A single terrain hex tile on the board."""

    model_config = pydantic.ConfigDict(frozen=True)

    coordinate: HexCoordinate
    resource: ResourceKind | None = None  # None while unconfigured in the editor
    number: int | None = None  # None for desert; 2-12 excluding 7
    has_robber: bool = False

    @pydantic.model_validator(mode='after')
    def _check_number(self) -> Tile:
        if self.number is not None and self.number not in VALID_NUMBER_TOKENS:
            raise ValueError(f'invalid number token {self.number}')
        if self.resource == ResourceKind.DESERT and self.number is not None:
            raise ValueError('a desert tile cannot carry a number token')
        if self.produces and self.number is None:
            raise ValueError(f'a {self.resource} tile needs a number token')
        return self

    @property
    def produces(self) -> bool:
        """True if this tile yields resource cards."""
        return self.resource is not None and self.resource != ResourceKind.DESERT


class Port(pydantic.BaseModel):
    """A trading port attached to one coastal edge."""

    model_config = pydantic.ConfigDict(frozen=True)

    port_type: PortType | None  # None while unassigned in the editor
    edge: EdgeIdentity
    ratio: typing.Literal[2, 3]

    @pydantic.model_validator(mode='after')
    def _check_ratio(self) -> Port:
        if self.port_type is None:
            return self
        expected = 3 if self.port_type == PortType.GENERIC else 2
        if self.ratio != expected:
            raise ValueError(
                f'{self.port_type} port must trade at {expected}:1, got {self.ratio}:1'
            )
        return self


class BoardConfiguration(pydantic.BaseModel):
    """The caller-owned board snapshot: tiles plus ports."""

    model_config = pydantic.ConfigDict(frozen=True)

    tiles: list[Tile] = []
    ports: list[Port] = []

    def coordinates(self) -> list[HexCoordinate]:
        """Return tile coordinates in board order."""
        return [t.coordinate for t in self.tiles]

    def tile_at(self, coordinate: HexCoordinate) -> Tile | None:
        """Return the first tile at coordinate, or None."""
        for tile in self.tiles:
            if tile.coordinate == coordinate:
                return tile
        return None
