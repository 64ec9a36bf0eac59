"""Request context and result envelope for the recommendation engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from models.outfit import Outfit
from models.taxonomy import Mood, Weather, coerce_mood, coerce_weather

DEFAULT_RESULT_LIMIT = 6


class RecommendationOutcome(str, Enum):
    """Terminal state reached by one recommendation request."""

    OK = "ok"
    EMPTY_WARDROBE = "empty_wardrobe"
    NO_ELIGIBLE_GARMENTS = "no_eligible_garments"
    NO_QUALIFYING_OUTFITS = "no_qualifying_outfits"


@dataclass(frozen=True)
class RecommendationContext:
    """Request-time signals that bias filtering and scoring.

    Unknown mood or weather values are coerced to ``None`` so they act as if
    no signal had been given.
    """

    owner_id: str
    mood: Optional[Mood] = None
    weather: Optional[Weather] = None
    temperature: Optional[float] = None
    occasion: Optional[str] = None
    result_limit: int = DEFAULT_RESULT_LIMIT

    def __post_init__(self) -> None:
        object.__setattr__(self, "mood", coerce_mood(self.mood))
        object.__setattr__(self, "weather", coerce_weather(self.weather))
        if self.temperature is not None:
            object.__setattr__(self, "temperature", float(self.temperature))
        if self.result_limit is None:
            object.__setattr__(self, "result_limit", DEFAULT_RESULT_LIMIT)


@dataclass(frozen=True)
class RecommendationResult:
    outfits: List[Outfit]
    explanation: str
    total_generated: int
    outcome: RecommendationOutcome = RecommendationOutcome.OK
    diagnostics: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "outfits": [outfit.to_dict() for outfit in self.outfits],
            "explanation": self.explanation,
            "total_generated": self.total_generated,
            "outcome": self.outcome.value,
        }


__all__ = [
    "DEFAULT_RESULT_LIMIT",
    "RecommendationContext",
    "RecommendationOutcome",
    "RecommendationResult",
]
