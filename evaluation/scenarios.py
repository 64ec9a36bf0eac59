"""Evaluation scenarios exercising moods, weather and temperature bands."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional


@dataclass
class EvaluationScenario:
    name: str
    description: str
    mood: Optional[str]
    weather: Optional[str]
    temperature: Optional[float]
    wardrobe_items: List[Dict[str, object]]
    expectations: Dict[str, object]
    result_limit: int = 6


def _wardrobe_fixtures() -> List[Dict[str, object]]:
    return [
        {
            "id": "top_oxford",
            "category": "top",
            "primary_color": "white",
            "material": "cotton",
            "season": "all-season",
            "tags": ["classic", "work", "versatile-high"],
        },
        {
            "id": "top_silk_blouse",
            "category": "top",
            "primary_color": "navy",
            "material": "silk",
            "season": "spring",
            "tags": ["minimalist", "formal", "structured"],
        },
        {
            "id": "top_fleece",
            "category": "top",
            "primary_color": "gray",
            "material": "fleece",
            "season": "winter",
            "tags": ["casual", "warm", "soft", "versatile-medium"],
        },
        {
            "id": "top_tee_orange",
            "category": "top",
            "primary_color": "orange",
            "material": "cotton",
            "season": "summer",
            "tags": ["casual", "weekend", "bright"],
        },
        {
            "id": "bottom_jeans",
            "category": "bottom",
            "primary_color": "blue",
            "material": "denim",
            "season": "all-season",
            "tags": ["casual", "weekend", "versatile-high"],
        },
        {
            "id": "bottom_wool_trousers",
            "category": "bottom",
            "primary_color": "black",
            "material": "wool",
            "season": "winter",
            "tags": ["classic", "formal", "work", "versatile-high"],
        },
        {
            "id": "shoes_loafers",
            "category": "shoes",
            "primary_color": "black",
            "material": "leather",
            "season": "all-season",
            "tags": ["classic", "work"],
        },
        {
            "id": "shoes_sneakers",
            "category": "shoes",
            "primary_color": "white",
            "material": "canvas",
            "season": "all-season",
            "tags": ["casual", "weekend"],
        },
        {
            "id": "accessory_scarf",
            "category": "accessory",
            "primary_color": "beige",
            "material": "wool",
            "season": "winter",
            "tags": ["cozy", "warm"],
        },
        {
            "id": "outer_puffer",
            "category": "outerwear",
            "primary_color": "black",
            "material": "down",
            "season": "winter",
            "tags": ["warm"],
        },
    ]


SCENARIOS: List[EvaluationScenario] = [
    EvaluationScenario(
        name="mild_casual_weekend",
        description="Mild cloudy day with a casual mood should yield several outfits.",
        mood="casual",
        weather="cloudy",
        temperature=18,
        wardrobe_items=_wardrobe_fixtures(),
        expectations={"outcome": "ok", "min_outfits": 3},
    ),
    EvaluationScenario(
        name="formal_office",
        description="Formal mood without weather signals should favour the wool trousers.",
        mood="formal",
        weather=None,
        temperature=None,
        wardrobe_items=_wardrobe_fixtures(),
        expectations={"outcome": "ok", "min_outfits": 1, "top_includes": "bottom_wool_trousers"},
    ),
    EvaluationScenario(
        name="heatwave",
        description="Hot weather removes wool and fleece so only summer pieces remain.",
        mood="energetic",
        weather="hot",
        temperature=31,
        wardrobe_items=_wardrobe_fixtures(),
        expectations={"outcome": "ok", "min_outfits": 1, "excluded": ["top_fleece", "bottom_wool_trousers"]},
    ),
    EvaluationScenario(
        name="snow_day",
        description="Snow with freezing temperatures keeps only warm materials.",
        mood="cozy",
        weather="snowy",
        temperature=-3,
        wardrobe_items=_wardrobe_fixtures(),
        expectations={
            "outcome": "ok",
            "min_outfits": 1,
            "excluded": ["top_oxford", "bottom_jeans", "shoes_loafers", "shoes_sneakers"],
            "last_reason": "Comfortable and warm",
        },
    ),
    EvaluationScenario(
        name="summer_wardrobe_in_snow",
        description="A summer-only wardrobe has nothing to offer on a snowy day.",
        mood="cozy",
        weather="snowy",
        temperature=-3,
        wardrobe_items=[
            item for item in _wardrobe_fixtures() if item["season"] in {"summer", "spring"}
        ],
        expectations={"outcome": "no_eligible_garments", "min_outfits": 0},
    ),
    EvaluationScenario(
        name="empty_wardrobe",
        description="Nothing to recommend from.",
        mood="bold",
        weather="sunny",
        temperature=22,
        wardrobe_items=[],
        expectations={"outcome": "empty_wardrobe", "min_outfits": 0},
    ),
]


__all__ = ["EvaluationScenario", "SCENARIOS"]
