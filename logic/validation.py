"""Pydantic schemas validating the recommendation wire format.

The wire format uses camelCase keys; every schema also accepts the
snake_case field names.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from models.closet_mapping import closet_items_to_garments
from models.garment import Garment
from models.outfit import Outfit
from models.recommendation import DEFAULT_RESULT_LIMIT, RecommendationContext, RecommendationResult
from models.taxonomy import Category, Mood, Season, Weather, validate_category, validate_season


class WireModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class GarmentPayload(WireModel):
    """A garment as supplied by a client or data source."""

    id: str = Field(min_length=1)
    user_id: str = Field(min_length=1)
    name: Optional[str] = None
    category: Category
    primary_color: str = Field(min_length=1)
    secondary_color: Optional[str] = None
    material: Optional[str] = None
    season: Season = Season.ALL_SEASON
    image_url: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    created_at: Optional[datetime] = None

    @field_validator("category", mode="before")
    @classmethod
    def _normalise_category(cls, value: Any) -> Category:
        return validate_category(value)

    @field_validator("season", mode="before")
    @classmethod
    def _normalise_season(cls, value: Any) -> Season:
        return validate_season(value)

    def to_garment(self) -> Garment:
        return Garment(
            id=self.id,
            owner_id=self.user_id,
            category=self.category,
            primary_color=self.primary_color,
            season=self.season,
            material=self.material,
            tags=tuple(self.tags),
            name=self.name,
            secondary_color=self.secondary_color,
            image_url=self.image_url,
            created_at=self.created_at,
        )


class RecommendationOptions(WireModel):
    """Context fields shared by every recommendation request."""

    user_id: str = Field(min_length=1)
    mood: Optional[Mood] = None
    weather: Optional[Weather] = None
    temperature: Optional[float] = Field(default=None, ge=-50, le=50)
    occasion: Optional[str] = None
    limit_count: Optional[int] = Field(default=None, ge=1, le=10)

    @field_validator("mood", "weather", mode="before")
    @classmethod
    def _normalise_signal(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().lower() or None
        return value

    def to_context(self, default_limit: int = DEFAULT_RESULT_LIMIT) -> RecommendationContext:
        return RecommendationContext(
            owner_id=self.user_id,
            mood=self.mood,
            weather=self.weather,
            temperature=self.temperature,
            occasion=self.occasion,
            result_limit=self.limit_count or default_limit,
        )


class RecommendationRequest(RecommendationOptions):
    """Request for recommendations; garments fall back to the configured source."""

    garments: Optional[List[GarmentPayload]] = None

    def to_garments(self) -> Optional[List[Garment]]:
        if self.garments is None:
            return None
        return [payload.to_garment() for payload in self.garments]


class ClosetTraits(WireModel):
    style: List[str] = Field(default_factory=list)
    fit: Optional[str] = None
    occasion: List[str] = Field(default_factory=list)
    versatility: Optional[Literal["high", "medium", "low"]] = None
    vibrancy: Optional[Literal["muted", "balanced", "vibrant"]] = None


class ClosetItemPayload(WireModel):
    """Simplified closet item shape used by lightweight clients."""

    id: str = Field(min_length=1)
    src: Optional[str] = None
    name: str = ""
    category: Literal["top", "bottom", "shoes", "outerwear", "accessory"]
    color: str = Field(min_length=1)
    traits: Optional[ClosetTraits] = None


class ClosetRecommendationRequest(RecommendationOptions):
    items: List[ClosetItemPayload] = Field(default_factory=list)

    def to_garments(self) -> List[Garment]:
        return closet_items_to_garments((item.model_dump() for item in self.items), self.user_id)


class OutfitPayload(WireModel):
    id: str
    user_id: str
    garment_ids: List[str]
    context_weather: Optional[Weather] = None
    context_mood: Optional[Mood] = None
    explanation: str
    score: int
    created_at: datetime
    reasons: List[str] = Field(default_factory=list)
    sub_scores: Dict[str, int] = Field(default_factory=dict)

    @classmethod
    def from_outfit(cls, outfit: Outfit) -> "OutfitPayload":
        return cls(
            id=outfit.id,
            user_id=outfit.owner_id,
            garment_ids=list(outfit.garment_ids),
            context_weather=outfit.context_weather,
            context_mood=outfit.context_mood,
            explanation=outfit.explanation,
            score=outfit.score,
            created_at=outfit.created_at,
            reasons=list(outfit.reasons),
            sub_scores=dict(outfit.sub_scores),
        )


class RecommendationResponse(WireModel):
    outfits: List[OutfitPayload]
    explanation: str
    total_generated: int
    outcome: str

    @classmethod
    def from_result(cls, result: RecommendationResult) -> "RecommendationResponse":
        return cls(
            outfits=[OutfitPayload.from_outfit(outfit) for outfit in result.outfits],
            explanation=result.explanation,
            total_generated=result.total_generated,
            outcome=result.outcome.value,
        )


class GarmentQuery(BaseModel):
    """Input contract for garment listings."""

    owner_id: str = Field(min_length=1)
    category: Optional[str] = None
    season: Optional[str] = None
    color: Optional[str] = None


__all__ = [
    "ClosetItemPayload",
    "ClosetRecommendationRequest",
    "ClosetTraits",
    "GarmentPayload",
    "GarmentQuery",
    "OutfitPayload",
    "RecommendationOptions",
    "RecommendationRequest",
    "RecommendationResponse",
]
