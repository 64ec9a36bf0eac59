"""Canonical taxonomy definitions for garments and recommendation context.

This module centralises the closed vocabularies (categories, seasons, moods and
weather conditions) together with the open tag vocabularies the scorer looks
up. Helper functions keep coercion consistent across the engine, the transport
schemas and the closet mapping.
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Iterable, List, Mapping, Optional, Tuple, Type, TypeVar


def _normalize_key(value: str) -> str:
    """Normalise a free-form string into a taxonomy key."""

    return value.strip().lower().replace("_", "-")


class Category(str, Enum):
    TOP = "top"
    BOTTOM = "bottom"
    SHOES = "shoes"
    OUTERWEAR = "outerwear"
    ACCESSORY = "accessory"


class Season(str, Enum):
    SPRING = "spring"
    SUMMER = "summer"
    FALL = "fall"
    WINTER = "winter"
    ALL_SEASON = "all-season"


class Mood(str, Enum):
    CASUAL = "casual"
    FORMAL = "formal"
    ADVENTUROUS = "adventurous"
    COZY = "cozy"
    ENERGETIC = "energetic"
    MINIMALIST = "minimalist"
    BOLD = "bold"


class Weather(str, Enum):
    SUNNY = "sunny"
    CLOUDY = "cloudy"
    RAINY = "rainy"
    SNOWY = "snowy"
    WINDY = "windy"
    HOT = "hot"
    COLD = "cold"


# Plural spellings used by older clients on the wire.
CATEGORY_ALIASES: Mapping[str, Category] = MappingProxyType(
    {
        "tops": Category.TOP,
        "bottoms": Category.BOTTOM,
        "shoe": Category.SHOES,
        "accessories": Category.ACCESSORY,
    }
)

SEASON_ALIASES: Mapping[str, Season] = MappingProxyType(
    {
        "autumn": Season.FALL,
        "all-year": Season.ALL_SEASON,
        "allseason": Season.ALL_SEASON,
    }
)

WEATHER_SEASONS: Mapping[Weather, frozenset] = MappingProxyType(
    {
        Weather.SUNNY: frozenset({Season.SPRING, Season.SUMMER, Season.ALL_SEASON}),
        Weather.CLOUDY: frozenset({Season.SPRING, Season.SUMMER, Season.FALL, Season.ALL_SEASON}),
        Weather.RAINY: frozenset({Season.SPRING, Season.FALL, Season.WINTER, Season.ALL_SEASON}),
        Weather.SNOWY: frozenset({Season.WINTER, Season.ALL_SEASON}),
        Weather.WINDY: frozenset({Season.FALL, Season.WINTER, Season.ALL_SEASON}),
        Weather.HOT: frozenset({Season.SUMMER, Season.ALL_SEASON}),
        Weather.COLD: frozenset({Season.WINTER, Season.ALL_SEASON}),
    }
)

NEUTRAL_COLORS: Tuple[str, ...] = ("black", "white", "gray", "beige", "navy")
STYLE_KEYWORDS: Tuple[str, ...] = ("minimalist", "bold", "classic", "trendy", "avant-garde", "casual")
# "casual" is reported through the occasion note, not as an aesthetic.
AESTHETIC_KEYWORDS: Tuple[str, ...] = ("minimalist", "bold", "classic", "trendy", "avant-garde")
OCCASION_TAGS: Tuple[str, ...] = ("casual", "formal", "work", "smart-casual", "night", "weekend")
VERSATILITY_TAGS: Mapping[str, int] = MappingProxyType({"versatile-high": 2, "versatile-medium": 1})

COLOR_MAP = {
    "navy blue": "navy",
    "navy": "navy",
    "light blue": "blue",
    "sky blue": "blue",
    "blue": "blue",
    "black": "black",
    "white": "white",
    "off white": "white",
    "cream": "beige",
    "beige": "beige",
    "tan": "beige",
    "khaki": "beige",
    "brown": "brown",
    "gray": "gray",
    "grey": "gray",
    "green": "green",
    "olive": "green",
    "red": "red",
    "burgundy": "red",
    "pink": "pink",
    "yellow": "yellow",
    "orange": "orange",
    "purple": "purple",
    "violet": "purple",
}

E = TypeVar("E", bound=Enum)


def _coerce_enum(enum_cls: Type[E], value: object, aliases: Optional[Mapping[str, E]] = None) -> Optional[E]:
    if value is None:
        return None
    if isinstance(value, enum_cls):
        return value
    key = _normalize_key(str(value.value if isinstance(value, Enum) else value))
    if aliases and key in aliases:
        return aliases[key]
    try:
        return enum_cls(key)
    except ValueError:
        return None


def validate_category(value: object) -> Category:
    """Validate and normalise a category value.

    Raises a :class:`ValueError` if the category is not part of the canonical
    taxonomy.
    """

    category = _coerce_enum(Category, value, CATEGORY_ALIASES)
    if category is None:
        raise ValueError(f"Unsupported category '{value}'. Allowed: {[c.value for c in Category]}")
    return category


def validate_season(value: object) -> Season:
    """Validate and normalise a season value."""

    season = _coerce_enum(Season, value, SEASON_ALIASES)
    if season is None:
        raise ValueError(f"Unsupported season '{value}'. Allowed: {[s.value for s in Season]}")
    return season


def coerce_mood(value: object) -> Optional[Mood]:
    """Return the matching :class:`Mood` or ``None`` for unknown values."""

    return _coerce_enum(Mood, value)


def coerce_weather(value: object) -> Optional[Weather]:
    """Return the matching :class:`Weather` or ``None`` for unknown values."""

    return _coerce_enum(Weather, value)


def normalize_color_name(raw_string: str) -> str:
    """Map a raw color string to a canonical color name."""

    key = raw_string.strip().lower()
    return COLOR_MAP.get(key, key)


def normalise_tags(values: Iterable[str]) -> Tuple[str, ...]:
    """Lowercase and deduplicate free-text tags, keeping first-seen order."""

    normalised: List[str] = []
    seen = set()
    for value in values:
        key = str(value).strip().lower()
        if key and key not in seen:
            normalised.append(key)
            seen.add(key)
    return tuple(normalised)


__all__ = [
    "Category",
    "Season",
    "Mood",
    "Weather",
    "CATEGORY_ALIASES",
    "WEATHER_SEASONS",
    "NEUTRAL_COLORS",
    "STYLE_KEYWORDS",
    "AESTHETIC_KEYWORDS",
    "OCCASION_TAGS",
    "VERSATILITY_TAGS",
    "validate_category",
    "validate_season",
    "coerce_mood",
    "coerce_weather",
    "normalize_color_name",
    "normalise_tags",
]
