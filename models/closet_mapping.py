"""Mapping logic from simplified closet items to :class:`Garment`."""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Mapping, Optional

from models.garment import Garment
from models.taxonomy import Season, validate_category

logger = logging.getLogger(__name__)

_MATERIAL_HINTS = ("wool", "cotton", "linen", "cashmere", "denim", "leather", "silk")
_WINTER_HINTS = ("wool", "sweater", "coat", "jacket")
_SUMMER_HINTS = ("linen", "cotton", "light")
DEFAULT_MATERIAL = "cotton"


def infer_material(name: str) -> str:
    """Guess the material from an item name, defaulting to cotton."""

    lowered = name.lower()
    for material in _MATERIAL_HINTS:
        if material in lowered:
            return material
    return DEFAULT_MATERIAL


def infer_season(name: str) -> Season:
    lowered = name.lower()
    if any(hint in lowered for hint in _WINTER_HINTS):
        return Season.WINTER
    if any(hint in lowered for hint in _SUMMER_HINTS):
        return Season.SUMMER
    return Season.ALL_SEASON


def _as_list(value: object) -> List[str]:
    if not value:
        return []
    if isinstance(value, str):
        return [value]
    return [str(entry) for entry in value]  # type: ignore[union-attr]


def build_tags(name: str, category: str, traits: Optional[Mapping[str, object]]) -> List[str]:
    """Flatten closet traits into free-text garment tags."""

    traits = traits or {}
    tags: List[str] = []
    tags.extend(_as_list(traits.get("style")))
    tags.extend(_as_list(traits.get("fit")))
    tags.extend(_as_list(traits.get("occasion")))
    tags.extend(_as_list(traits.get("vibrancy")))
    versatility = traits.get("versatility")
    if versatility:
        tags.append(f"versatile-{str(versatility).lower()}")
    tags.append(infer_material(name))
    tags.append(category)
    return tags


def closet_item_to_garment(item: Mapping[str, object], owner_id: str) -> Garment:
    """Map one closet item into a :class:`Garment`.

    Raises a :class:`ValueError` if the category is not recognised.
    """

    name = str(item.get("name") or "")
    raw_category = str(item.get("category") or "")
    category = validate_category(raw_category)
    garment = Garment(
        id=str(item["id"]),
        owner_id=owner_id,
        category=category,
        primary_color=str(item.get("color") or "").strip().lower(),
        season=infer_season(name),
        material=infer_material(name),
        tags=tuple(build_tags(name, raw_category.lower(), item.get("traits"))),  # type: ignore[arg-type]
        name=name or None,
        image_url=str(item.get("src")) if item.get("src") else None,
    )
    logger.debug(
        "Mapped closet item to Garment",
        extra={"garment_id": garment.id, "category": garment.category.value, "season": garment.season.value},
    )
    return garment


def closet_items_to_garments(items: Iterable[Mapping[str, object]], owner_id: str) -> List[Garment]:
    return [closet_item_to_garment(item, owner_id) for item in items]


__all__ = [
    "closet_item_to_garment",
    "closet_items_to_garments",
    "infer_material",
    "infer_season",
    "build_tags",
]
