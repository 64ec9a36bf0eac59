"""Mappings between moods and the descriptors the scorer rewards."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Tuple

from models.taxonomy import Mood, coerce_mood

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MoodStyleProfile:
    """Represents styling preferences for a given mood."""

    name: str
    keywords: Tuple[str, ...]
    occasions: Tuple[str, ...]
    description: str


NEUTRAL_PROFILE = MoodStyleProfile(
    name="neutral",
    keywords=(),
    occasions=(),
    description="Well-coordinated look",
)

_MOOD_STYLES: Mapping[Mood, MoodStyleProfile] = MappingProxyType(
    {
        Mood.CASUAL: MoodStyleProfile(
            name="casual",
            keywords=("cotton", "denim", "relaxed"),
            occasions=("casual", "weekend"),
            description="Perfect for a relaxed day",
        ),
        Mood.FORMAL: MoodStyleProfile(
            name="formal",
            keywords=("silk", "wool", "structured"),
            occasions=("formal", "work", "night"),
            description="Polished and professional",
        ),
        Mood.ADVENTUROUS: MoodStyleProfile(
            name="adventurous",
            keywords=("bold", "colorful", "unique"),
            occasions=("weekend", "casual"),
            description="Ready for an adventure",
        ),
        Mood.COZY: MoodStyleProfile(
            name="cozy",
            keywords=("fleece", "warm", "soft"),
            occasions=("casual", "weekend"),
            description="Comfortable and warm",
        ),
        Mood.ENERGETIC: MoodStyleProfile(
            name="energetic",
            keywords=("bright", "bold", "dynamic"),
            occasions=("casual", "work"),
            description="Energizing and uplifting",
        ),
        Mood.MINIMALIST: MoodStyleProfile(
            name="minimalist",
            keywords=("neutral", "simple", "clean"),
            occasions=("work", "smart-casual", "formal"),
            description="Clean and simple",
        ),
        Mood.BOLD: MoodStyleProfile(
            name="bold",
            keywords=("vibrant", "statement", "eye-catching"),
            occasions=("night", "weekend", "casual"),
            description="Statement-making outfit",
        ),
    }
)


def get_mood_style(mood: Mood | str | None) -> MoodStyleProfile:
    """Return a :class:`MoodStyleProfile` for the given mood.

    Falls back to the ``neutral`` profile, which rewards nothing, when the mood
    is missing or unsupported.
    """

    resolved = coerce_mood(mood)
    if resolved is None:
        if mood is not None:
            logger.info("Unknown mood '%s', defaulting to neutral profile", mood)
        return NEUTRAL_PROFILE
    return _MOOD_STYLES[resolved]


__all__ = ["MoodStyleProfile", "NEUTRAL_PROFILE", "get_mood_style"]
