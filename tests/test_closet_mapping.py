"""Closet item to garment mapping tests."""

from pathlib import Path

import sys

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from logic.outfit_scoring import calculate_color_harmony
from models.closet_mapping import (
    build_tags,
    closet_item_to_garment,
    closet_items_to_garments,
    infer_material,
    infer_season,
)
from models.taxonomy import Category, Season


@pytest.mark.parametrize(
    "name, material",
    [
        ("Wool Overcoat", "wool"),
        ("Washed Denim Jeans", "denim"),
        ("Cashmere Crewneck", "cashmere"),
        ("Graphic Tee", "cotton"),
        ("", "cotton"),
    ],
)
def test_infer_material(name: str, material: str) -> None:
    assert infer_material(name) == material


@pytest.mark.parametrize(
    "name, season",
    [
        ("Chunky Sweater", Season.WINTER),
        ("Denim Jacket", Season.WINTER),
        ("Light Linen Shirt", Season.SUMMER),
        ("Cotton Tee", Season.SUMMER),
        ("Silk Scarf", Season.ALL_SEASON),
    ],
)
def test_infer_season(name: str, season: Season) -> None:
    assert infer_season(name) is season


def test_build_tags_flattens_traits() -> None:
    traits = {
        "style": ["Minimalist", "classic"],
        "fit": "relaxed",
        "occasion": ["work"],
        "versatility": "High",
        "vibrancy": "muted",
    }
    assert build_tags("Silk Blouse", "top", traits) == [
        "Minimalist",
        "classic",
        "relaxed",
        "work",
        "muted",
        "versatile-high",
        "silk",
        "top",
    ]
    assert build_tags("Plain Tee", "top", None) == ["cotton", "top"]


def test_closet_item_to_garment() -> None:
    garment = closet_item_to_garment(
        {
            "id": "c1",
            "src": "https://cdn.example.com/c1.png",
            "name": "Wool Trousers",
            "category": "bottom",
            "color": "Navy Blue",
            "traits": {"style": ["classic"], "versatility": "medium"},
        },
        owner_id="user7",
    )
    assert garment.owner_id == "user7"
    assert garment.category is Category.BOTTOM
    assert garment.primary_color == "navy blue"
    assert garment.material == "wool"
    assert garment.season is Season.WINTER
    assert garment.image_url == "https://cdn.example.com/c1.png"
    # tags are normalised by the garment
    assert garment.tags == ("classic", "versatile-medium", "wool", "bottom")


def test_closet_items_reject_unknown_category() -> None:
    with pytest.raises(ValueError):
        closet_items_to_garments([{"id": "x", "category": "dress", "color": "red"}], owner_id="u")


def test_closet_colors_keep_their_own_names() -> None:
    garments = closet_items_to_garments(
        [
            {"id": "t1", "name": "Overshirt", "category": "top", "color": "Olive"},
            {"id": "b1", "name": "Trousers", "category": "bottom", "color": "Burgundy"},
        ],
        owner_id="u",
    )
    assert [garment.primary_color for garment in garments] == ["olive", "burgundy"]
    # olive and burgundy are not the red/green complementary pair
    assert calculate_color_harmony(garments) == 0
