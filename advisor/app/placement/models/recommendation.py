"""Output models for settlement placement recommendations."""

from __future__ import annotations

import typing

import pydantic

from .board import EdgeIdentity, PortType, ResourceKind, VertexIdentity

UnitFloat = typing.Annotated[float, pydantic.Field(ge=0.0, le=1.0)]


class ScoreBreakdown(pydantic.BaseModel):
    """The normalised components of a settlement score, each in [0, 1]."""

    model_config = pydantic.ConfigDict(frozen=True)

    expected_yield: UnitFloat  # total yield / 14, capped at 1
    resource_diversity: UnitFloat  # distinct resources / 5, plus second-placement bonus
    number_quality: UnitFloat  # mean token quality (6 and 8 score 1.0)
    port_access: UnitFloat
    expansion_potential: UnitFloat  # free adjacent vertices / 3


class Recommendation(pydantic.BaseModel):
    """A scored candidate settlement location."""

    model_config = pydantic.ConfigDict(frozen=True)

    vertex: VertexIdentity
    score: float = pydantic.Field(ge=0.0, le=100.0)
    breakdown: ScoreBreakdown
    resource_yield: dict[ResourceKind, float]  # expected cards per 36 rolls
    adjacent_resources: list[ResourceKind]
    adjacent_numbers: list[int]
    port_access: PortType | None = None
    recommended_road_edges: list[EdgeIdentity] = []


class RecommendationSet(pydantic.BaseModel):
    """Top-ranked recommendations for one placement decision."""

    model_config = pydantic.ConfigDict(frozen=True)

    recommendations: list[Recommendation]
    placement_number: typing.Literal[1, 2]
    occupied: list[VertexIdentity]
