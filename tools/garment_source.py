"""Garment supplier abstractions and the bundled demo wardrobe."""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Dict, Iterable, List, Optional

from models.garment import Garment, from_raw_metadata
from models.taxonomy import normalize_color_name, validate_category, validate_season

_DEMO_CREATED_AT = datetime(2024, 1, 1, tzinfo=timezone.utc)

DEMO_WARDROBE: List[Dict[str, object]] = [
    {
        "id": "g1",
        "owner_id": "user1",
        "name": "Blue Linen Shirt",
        "category": "top",
        "primary_color": "blue",
        "material": "linen",
        "season": "summer",
        "tags": ["casual", "breathable"],
    },
    {
        "id": "g2",
        "owner_id": "user1",
        "name": "Black Skinny Jeans",
        "category": "bottom",
        "primary_color": "black",
        "material": "denim",
        "season": "all-season",
        "tags": ["versatile", "classic"],
    },
    {
        "id": "g3",
        "owner_id": "user1",
        "name": "White Sneakers",
        "category": "shoes",
        "primary_color": "white",
        "material": "canvas",
        "season": "all-season",
        "tags": ["casual", "comfortable"],
    },
    {
        "id": "g4",
        "owner_id": "user1",
        "name": "Wool Sweater",
        "category": "top",
        "primary_color": "gray",
        "material": "wool",
        "season": "winter",
        "tags": ["warm", "cozy"],
    },
    {
        "id": "g5",
        "owner_id": "user1",
        "name": "Khaki Chinos",
        "category": "bottom",
        "primary_color": "beige",
        "material": "cotton",
        "season": "spring",
        "tags": ["versatile", "professional"],
    },
    {
        "id": "g6",
        "owner_id": "user1",
        "name": "Leather Jacket",
        "category": "outerwear",
        "primary_color": "black",
        "material": "leather",
        "season": "fall",
        "tags": ["bold", "statement"],
    },
    {
        "id": "g7",
        "owner_id": "user1",
        "name": "Cotton T-Shirt",
        "category": "top",
        "primary_color": "white",
        "material": "cotton",
        "season": "summer",
        "tags": ["basic", "comfortable"],
    },
    {
        "id": "g8",
        "owner_id": "user1",
        "name": "Gold Necklace",
        "category": "accessory",
        "primary_color": "gold",
        "material": "metal",
        "season": "all-season",
        "tags": ["statement", "elegant"],
    },
]


class GarmentSource:
    """Supplier interface for wardrobe garments."""

    def list_garments_for_owner(self, owner_id: str) -> List[Garment]:
        raise NotImplementedError

    def get_garment(self, owner_id: str, garment_id: str) -> Optional[Garment]:
        raise NotImplementedError

    def search_garments(self, owner_id: str, filters: Dict[str, object]) -> List[Garment]:
        raise NotImplementedError


class InMemoryGarmentSource(GarmentSource):
    """Read-only garment source backed by a list held in memory."""

    def __init__(self, garments: Iterable[Garment]) -> None:
        self._garments = tuple(sorted(garments, key=lambda garment: garment.id))

    @classmethod
    def demo(cls) -> "InMemoryGarmentSource":
        return cls(from_raw_metadata({**raw, "created_at": _DEMO_CREATED_AT}) for raw in DEMO_WARDROBE)

    def list_garments_for_owner(self, owner_id: str) -> List[Garment]:
        return [garment for garment in self._garments if garment.owner_id == owner_id]

    def get_garment(self, owner_id: str, garment_id: str) -> Optional[Garment]:
        for garment in self.list_garments_for_owner(owner_id):
            if garment.id == garment_id:
                return garment
        return None

    def search_garments(self, owner_id: str, filters: Dict[str, object]) -> List[Garment]:
        garments = self.list_garments_for_owner(owner_id)
        filters = filters or {}
        try:
            category = validate_category(filters["category"]) if filters.get("category") else None
            season = validate_season(filters["season"]) if filters.get("season") else None
        except ValueError:
            return []
        color = normalize_color_name(str(filters["color"])) if filters.get("color") else None

        def matches(garment: Garment) -> bool:
            if category and garment.category is not category:
                return False
            if season and garment.season is not season:
                return False
            if color and normalize_color_name(garment.primary_color) != color:
                return False
            return True

        return [garment for garment in garments if matches(garment)]


__all__ = ["DEMO_WARDROBE", "GarmentSource", "InMemoryGarmentSource"]
