"""Garment data model and helpers."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple

from models.taxonomy import Category, Season, normalise_tags, validate_category, validate_season


def _ensure_list(value: Any) -> List[Any]:
    """Coerce a scalar or iterable into a list."""

    if value is None:
        return []
    if isinstance(value, (list, tuple, set, frozenset)):
        return list(value)
    return [value]


def _optional_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


@dataclass(frozen=True)
class Garment:
    """Represents an owned item in a user's wardrobe.

    Instances are immutable so a wardrobe can be shared between concurrent
    recommendation requests without copying.
    """

    id: str
    owner_id: str
    category: Category
    primary_color: str
    season: Season = Season.ALL_SEASON
    material: Optional[str] = None
    tags: Tuple[str, ...] = ()
    name: Optional[str] = None
    secondary_color: Optional[str] = None
    image_url: Optional[str] = None
    created_at: Optional[datetime] = None

    def __post_init__(self) -> None:
        if not str(self.id or "").strip():
            raise ValueError("Garment id is required")
        object.__setattr__(self, "id", str(self.id))
        object.__setattr__(self, "category", validate_category(self.category))
        object.__setattr__(self, "season", validate_season(self.season))
        object.__setattr__(self, "primary_color", str(self.primary_color or "").strip())
        object.__setattr__(self, "material", _optional_text(self.material))
        object.__setattr__(self, "tags", normalise_tags(_ensure_list(self.tags)))

    @property
    def color_key(self) -> str:
        """Primary color folded for case-insensitive comparison."""

        return self.primary_color.lower()

    @property
    def material_key(self) -> str:
        return (self.material or "").lower()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "owner_id": self.owner_id,
            "category": self.category.value,
            "primary_color": self.primary_color,
            "season": self.season.value,
            "material": self.material,
            "tags": list(self.tags),
            "name": self.name,
            "secondary_color": self.secondary_color,
            "image_url": self.image_url,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }


def from_raw_metadata(metadata: Dict[str, Any]) -> Garment:
    """Factory to build a :class:`Garment` from loose supplier metadata."""

    required_fields = ["id", "category", "primary_color"]
    missing = [field for field in required_fields if not metadata.get(field)]
    if missing:
        raise ValueError(f"Missing required fields for Garment: {missing}")

    return Garment(
        id=str(metadata["id"]),
        owner_id=str(metadata.get("owner_id") or ""),
        category=metadata["category"],
        primary_color=str(metadata["primary_color"]),
        season=metadata.get("season") or Season.ALL_SEASON,
        material=metadata.get("material"),
        tags=tuple(_ensure_list(metadata.get("tags"))),
        name=metadata.get("name"),
        secondary_color=metadata.get("secondary_color"),
        image_url=metadata.get("image_url"),
        created_at=metadata.get("created_at"),
    )


__all__ = ["Garment", "from_raw_metadata"]
