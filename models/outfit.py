"""Outfit candidate and result schemas."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Optional, Tuple

from models.taxonomy import Mood, Weather

REASON_SEPARATOR = " • "


@dataclass(frozen=True)
class OutfitCandidate:
    """One scored combination, alive only while a request is computed."""

    garment_ids: Tuple[str, ...]
    score: int
    reasons: Tuple[str, ...]
    sub_scores: Dict[str, int] = field(default_factory=dict)


@dataclass(frozen=True)
class Outfit:
    """A candidate promoted to a recommendation result."""

    id: str
    owner_id: str
    garment_ids: Tuple[str, ...]
    score: int
    explanation: str
    created_at: datetime
    context_weather: Optional[Weather] = None
    context_mood: Optional[Mood] = None
    reasons: Tuple[str, ...] = ()
    sub_scores: Dict[str, int] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "owner_id": self.owner_id,
            "garment_ids": list(self.garment_ids),
            "score": self.score,
            "explanation": self.explanation,
            "created_at": self.created_at.isoformat(),
            "context_weather": self.context_weather.value if self.context_weather else None,
            "context_mood": self.context_mood.value if self.context_mood else None,
            "reasons": list(self.reasons),
            "sub_scores": dict(self.sub_scores),
        }
