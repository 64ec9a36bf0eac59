"""Deterministic filtering functions for weather, season and temperature."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional

from models.garment import Garment
from models.recommendation import RecommendationContext
from models.taxonomy import WEATHER_SEASONS, Category, Season, Weather, coerce_weather

HOT_THRESHOLD_C = 25.0
COLD_THRESHOLD_C = 10.0
HOT_EXCLUDED_MATERIALS = ("wool", "fleece")
COLD_WEATHER_MATERIALS = ("wool", "fleece", "down", "synthetic")


@dataclass(frozen=True)
class FilteringResult:
    """Captures the outcome of a single filtering step."""

    items: List[Garment]
    removed: Dict[str, str]
    debug: Dict[str, object]


def is_season_appropriate(garment: Garment, weather: Optional[Weather]) -> bool:
    if weather is None or garment.season is Season.ALL_SEASON:
        return True
    return garment.season in WEATHER_SEASONS.get(weather, frozenset())


def temperature_rejection(garment: Garment, temperature: float) -> Optional[str]:
    """Return why a garment is unsuitable at ``temperature``, or ``None``."""

    material = garment.material_key
    if temperature > HOT_THRESHOLD_C:
        if garment.category is Category.OUTERWEAR:
            return "outerwear excluded in hot weather"
        if any(keyword in material for keyword in HOT_EXCLUDED_MATERIALS):
            return "material too warm for hot weather"
        return None
    if temperature < COLD_THRESHOLD_C:
        if garment.category is Category.OUTERWEAR:
            return None
        if any(keyword in material for keyword in COLD_WEATHER_MATERIALS):
            return None
        return "too light for cold weather"
    return None


def filter_by_season(items: List[Garment], weather: Weather | str | None) -> FilteringResult:
    """Keep garments whose season suits the weather condition."""

    resolved = coerce_weather(weather)
    removed: Dict[str, str] = {}
    kept: List[Garment] = []
    for item in items:
        if is_season_appropriate(item, resolved):
            kept.append(item)
        else:
            removed[item.id] = f"{item.season.value} garment unsuitable for {resolved.value} weather"

    debug = {
        "input_count": len(items),
        "kept_count": len(kept),
        "removed_count": len(removed),
        "weather": resolved.value if resolved else None,
        "skipped": resolved is None,
    }
    return FilteringResult(items=kept, removed=removed, debug=debug)


def filter_by_temperature(items: List[Garment], temperature: Optional[float]) -> FilteringResult:
    """Keep garments appropriate for the temperature in degrees Celsius."""

    removed: Dict[str, str] = {}
    kept: List[Garment] = []
    for item in items:
        reason = None if temperature is None else temperature_rejection(item, temperature)
        if reason:
            removed[item.id] = reason
        else:
            kept.append(item)

    if temperature is None:
        band = None
    elif temperature > HOT_THRESHOLD_C:
        band = "hot"
    elif temperature < COLD_THRESHOLD_C:
        band = "cold"
    else:
        band = "mild"
    debug = {
        "input_count": len(items),
        "kept_count": len(kept),
        "removed_count": len(removed),
        "temperature": temperature,
        "band": band,
        "skipped": temperature is None,
    }
    return FilteringResult(items=kept, removed=removed, debug=debug)


def filter_by_context(items: List[Garment], context: RecommendationContext) -> FilteringResult:
    """Apply the season and temperature checks conjunctively."""

    season_result = filter_by_season(items, context.weather)
    temperature_result = filter_by_temperature(season_result.items, context.temperature)
    removed = {**season_result.removed, **temperature_result.removed}
    debug = {
        "input_count": len(items),
        "kept_count": len(temperature_result.items),
        "removed_count": len(removed),
        "steps": [
            {"step": "season", "debug": season_result.debug},
            {"step": "temperature", "debug": temperature_result.debug},
        ],
    }
    return FilteringResult(items=temperature_result.items, removed=removed, debug=debug)


__all__ = [
    "FilteringResult",
    "filter_by_context",
    "filter_by_season",
    "filter_by_temperature",
    "is_season_appropriate",
    "temperature_rejection",
]
