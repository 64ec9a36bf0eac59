"""Deterministic outfit candidate generation with transparent diagnostics."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional

from logic.explanations import generate_reasons
from logic.outfit_scoring import score_outfit
from models.garment import Garment
from models.mood_styles import MoodStyleProfile, get_mood_style
from models.outfit import OutfitCandidate
from models.taxonomy import Category, Mood

logger = logging.getLogger(__name__)

REQUIRED_CATEGORIES = (Category.TOP, Category.BOTTOM)
OPTIONAL_CATEGORIES = (Category.SHOES, Category.ACCESSORY)
# Bounds the accessory branching factor per (top, bottom) pair.
MAX_ACCESSORY_VARIANTS = 2


@dataclass(frozen=True)
class CandidateGenerationResult:
    candidates: List[OutfitCandidate]
    diagnostics: Dict[str, object]


def group_by_category(items: Iterable[Garment]) -> Dict[Category, List[Garment]]:
    """Group garments by category, each group ordered by garment id."""

    grouped: Dict[Category, List[Garment]] = {category: [] for category in Category}
    for item in items:
        grouped[item.category].append(item)
    for values in grouped.values():
        values.sort(key=lambda garment: garment.id)
    return grouped


def _build_candidate(pieces: List[Garment], mood_profile: MoodStyleProfile) -> OutfitCandidate:
    breakdown = score_outfit(pieces, mood_profile)
    return OutfitCandidate(
        garment_ids=tuple(piece.id for piece in pieces),
        score=breakdown.total,
        reasons=tuple(generate_reasons(pieces, mood_profile)),
        sub_scores=breakdown.sub_scores,
    )


def generate_candidates(
    items: List[Garment], mood: Mood | MoodStyleProfile | str | None
) -> CandidateGenerationResult:
    """Enumerate every valid top/bottom/shoe/accessory combination and score it."""

    mood_profile = mood if isinstance(mood, MoodStyleProfile) else get_mood_style(mood)
    grouped = group_by_category(items)
    tops = grouped[Category.TOP]
    bottoms = grouped[Category.BOTTOM]
    shoes = grouped[Category.SHOES]
    accessories = grouped[Category.ACCESSORY][:MAX_ACCESSORY_VARIANTS]

    diagnostics: Dict[str, object] = {
        "group_sizes": {category.value: len(values) for category, values in grouped.items()},
        "accessories_considered": [item.id for item in accessories],
        "mood_profile": mood_profile.name,
    }

    if not all(grouped[category] for category in REQUIRED_CATEGORIES):
        logger.info("Insufficient items for required categories: %s", diagnostics["group_sizes"])
        diagnostics["reason"] = "missing_required_categories"
        diagnostics["candidate_count"] = 0
        return CandidateGenerationResult(candidates=[], diagnostics=diagnostics)

    first_shoe: Optional[Garment] = shoes[0] if shoes else None
    candidates: List[OutfitCandidate] = []
    for top in tops:
        for bottom in bottoms:
            if shoes:
                for shoe in shoes:
                    candidates.append(_build_candidate([top, bottom, shoe], mood_profile))
            else:
                candidates.append(_build_candidate([top, bottom], mood_profile))

            for accessory in accessories:
                pieces = [top, bottom] + ([first_shoe] if first_shoe else []) + [accessory]
                candidates.append(_build_candidate(pieces, mood_profile))

    diagnostics["candidate_count"] = len(candidates)
    logger.debug("Generated %s candidates", len(candidates))
    return CandidateGenerationResult(candidates=candidates, diagnostics=diagnostics)


__all__ = [
    "CandidateGenerationResult",
    "MAX_ACCESSORY_VARIANTS",
    "generate_candidates",
    "group_by_category",
]
