"""Deterministic scoring for candidate outfits.

Every outfit starts from :data:`BASE_SCORE` and collects six independent
bonuses. Each bonus is capped on its own and the total is capped at
:data:`MAX_SCORE`, so scores always fall in ``[50, 100]``.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Dict, List, Sequence, Set

from models.color_theory import evaluate_harmony
from models.garment import Garment
from models.mood_styles import MoodStyleProfile, get_mood_style
from models.taxonomy import Mood, OCCASION_TAGS, STYLE_KEYWORDS, VERSATILITY_TAGS

BASE_SCORE = 50
MAX_SCORE = 100

CAPS = {
    "color": 20,
    "mood": 20,
    "style": 15,
    "occasion": 12,
    "versatility": 8,
}

MOOD_MATCH_POINTS = 3
OCCASION_MATCH_POINTS = 2


@dataclass(frozen=True)
class ScoreBreakdown:
    total: int
    sub_scores: Dict[str, int]


def calculate_color_harmony(outfit_items: Sequence[Garment]) -> int:
    return evaluate_harmony([item.primary_color for item in outfit_items], cap=CAPS["color"]).score


def calculate_mood_alignment(outfit_items: Sequence[Garment], mood_profile: MoodStyleProfile) -> int:
    if not mood_profile.keywords:
        return 0
    score = 0
    for item in outfit_items:
        descriptors = [item.material_key, *item.tags]
        matches = sum(
            1 for descriptor in descriptors if any(keyword in descriptor for keyword in mood_profile.keywords)
        )
        score += matches * MOOD_MATCH_POINTS
    return min(score, CAPS["mood"])


def _style_tags(item: Garment) -> Set[str]:
    return {tag for tag in item.tags if any(keyword in tag for keyword in STYLE_KEYWORDS)}


def calculate_style_coherence(outfit_items: Sequence[Garment]) -> int:
    if len(outfit_items) < 2:
        return 0
    per_item = [_style_tags(item) for item in outfit_items]
    all_styles = [style for styles in per_item for style in styles]
    if not all_styles:
        return 5
    if any(count > 1 for count in Counter(all_styles).values()):
        return 15

    def present(keyword: str) -> bool:
        return any(keyword in style for style in all_styles)

    if present("classic") and (present("minimalist") or present("bold")):
        return 10
    return 5


def calculate_occasion_match(outfit_items: Sequence[Garment], mood_profile: MoodStyleProfile) -> int:
    targets = set(mood_profile.occasions)
    if not targets:
        return 0
    score = 0
    for item in outfit_items:
        matches = [tag for tag in item.tags if tag in OCCASION_TAGS and tag in targets]
        score += len(matches) * OCCASION_MATCH_POINTS
    return min(score, CAPS["occasion"])


def calculate_versatility(outfit_items: Sequence[Garment]) -> int:
    score = 0
    for item in outfit_items:
        for tag, points in VERSATILITY_TAGS.items():
            if tag in item.tags:
                score += points
                break
    return min(score, CAPS["versatility"])


def calculate_diversity(outfit_items: Sequence[Garment]) -> int:
    return 10 if len(outfit_items) >= 3 else 5


def score_outfit(outfit_items: List[Garment], mood: Mood | MoodStyleProfile | str | None) -> ScoreBreakdown:
    """Calculate the composite score and its sub scores for one outfit."""

    profile = mood if isinstance(mood, MoodStyleProfile) else get_mood_style(mood)
    sub_scores = {
        "color": calculate_color_harmony(outfit_items),
        "mood": calculate_mood_alignment(outfit_items, profile),
        "style": calculate_style_coherence(outfit_items),
        "occasion": calculate_occasion_match(outfit_items, profile),
        "versatility": calculate_versatility(outfit_items),
        "diversity": calculate_diversity(outfit_items),
    }
    total = min(BASE_SCORE + sum(sub_scores.values()), MAX_SCORE)
    return ScoreBreakdown(total=total, sub_scores=sub_scores)


__all__ = [
    "BASE_SCORE",
    "MAX_SCORE",
    "ScoreBreakdown",
    "calculate_color_harmony",
    "calculate_diversity",
    "calculate_mood_alignment",
    "calculate_occasion_match",
    "calculate_style_coherence",
    "calculate_versatility",
    "score_outfit",
]
