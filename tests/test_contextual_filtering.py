"""Tests for the weather, season and temperature filters."""

from pathlib import Path
from typing import List, Optional

import sys

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from logic.contextual_filtering import (
    filter_by_context,
    filter_by_season,
    filter_by_temperature,
    temperature_rejection,
)
from models.garment import Garment
from models.recommendation import RecommendationContext


def _garment(
    garment_id: str,
    category: str = "top",
    season: str = "all-season",
    material: Optional[str] = None,
) -> Garment:
    return Garment(
        id=garment_id,
        owner_id="demo",
        category=category,
        primary_color="black",
        season=season,
        material=material,
    )


def _build_items() -> List[Garment]:
    return [
        _garment("linen_shirt", "top", "summer", "Linen"),
        _garment("wool_sweater", "top", "winter", "Merino Wool"),
        _garment("fleece_pants", "bottom", "fall", "fleece"),
        _garment("jeans", "bottom", "all-season", "denim"),
        _garment("parka", "outerwear", "winter", "cotton"),
        _garment("puffer_vest", "top", "winter", "Down"),
        _garment("raincoat_liner", "top", "spring", "synthetic blend"),
    ]


def test_season_filter_skipped_without_weather() -> None:
    items = _build_items()
    result = filter_by_season(items, None)
    assert result.items == items
    assert result.debug["skipped"] is True


@pytest.mark.parametrize(
    "weather, expected",
    [
        ("snowy", {"wool_sweater", "jeans", "parka", "puffer_vest"}),
        ("cloudy", {"linen_shirt", "fleece_pants", "jeans", "raincoat_liner"}),
        ("hot", {"linen_shirt", "jeans"}),
        ("windy", {"wool_sweater", "fleece_pants", "jeans", "parka", "puffer_vest"}),
    ],
)
def test_season_filter_uses_weather_allow_list(weather: str, expected: set) -> None:
    result = filter_by_season(_build_items(), weather)
    assert {item.id for item in result.items} == expected
    assert "jeans" not in result.removed


def test_unknown_weather_is_no_signal() -> None:
    items = _build_items()
    assert filter_by_season(items, "foggy").items == items


def test_hot_temperature_excludes_outerwear_and_warm_materials() -> None:
    result = filter_by_temperature(_build_items(), 30)
    assert {item.id for item in result.items} == {"linen_shirt", "jeans", "puffer_vest", "raincoat_liner"}
    assert result.removed["parka"] == "outerwear excluded in hot weather"
    assert result.removed["wool_sweater"] == "material too warm for hot weather"
    assert result.debug["band"] == "hot"


def test_cold_temperature_requires_outerwear_or_warm_material() -> None:
    result = filter_by_temperature(_build_items(), 5)
    assert {item.id for item in result.items} == {
        "wool_sweater",
        "fleece_pants",
        "parka",
        "puffer_vest",
        "raincoat_liner",
    }
    assert result.removed["jeans"] == "too light for cold weather"


@pytest.mark.parametrize("temperature", [10, 17.5, 25])
def test_mild_temperature_band_is_inclusive(temperature: float) -> None:
    items = _build_items()
    result = filter_by_temperature(items, temperature)
    assert result.items == items
    assert result.debug["band"] == "mild"


def test_garment_without_material_fails_cold_check() -> None:
    assert temperature_rejection(_garment("tee"), 0) == "too light for cold weather"
    assert temperature_rejection(_garment("tee"), 30) is None


def test_context_filter_is_conjunctive() -> None:
    context = RecommendationContext(owner_id="demo", weather="snowy", temperature=-5)
    result = filter_by_context(_build_items(), context)
    assert {item.id for item in result.items} == {"wool_sweater", "parka", "puffer_vest"}
    assert "linen_shirt" in result.removed
    assert "jeans" in result.removed
    assert [step["step"] for step in result.debug["steps"]] == ["season", "temperature"]
