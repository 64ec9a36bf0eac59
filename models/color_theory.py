"""Color harmony helpers used by the outfit scorer."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Sequence, Tuple

from models.taxonomy import NEUTRAL_COLORS

logger = logging.getLogger(__name__)

COMPLEMENTARY_PAIRS: Tuple[Tuple[str, str], ...] = (
    ("blue", "orange"),
    ("red", "green"),
    ("yellow", "purple"),
)

COMPLEMENTARY_BONUS = 15
MONOCHROME_BONUS = 10
NEUTRAL_BONUS = 8


@dataclass(frozen=True)
class HarmonyResult:
    """Represents the outcome of a harmony evaluation."""

    colors: List[str]
    rules_used: List[str]
    score: int


def _fold(colors: Iterable[str]) -> List[str]:
    return [str(color).strip().lower() for color in colors]


def monochrome(color_list: Iterable[str]) -> bool:
    """Return True when every color is exactly the same."""

    colors = _fold(color_list)
    result = bool(colors) and all(color == colors[0] for color in colors)
    logger.debug("monochrome check %s -> %s", colors, result)
    return result


def complementary_pairs_present(color_list: Iterable[str]) -> List[Tuple[str, str]]:
    """Return each complementary pair whose two colors both appear."""

    colors = set(_fold(color_list))
    return [pair for pair in COMPLEMENTARY_PAIRS if pair[0] in colors and pair[1] in colors]


def is_neutral(color: str) -> bool:
    return color.strip().lower() in NEUTRAL_COLORS


def neutral_dominant(color_list: Sequence[str]) -> bool:
    """Return True when at most one color falls outside the neutral set."""

    colors = _fold(color_list)
    neutral_count = sum(1 for color in colors if color in NEUTRAL_COLORS)
    return neutral_count >= len(colors) - 1


def evaluate_harmony(color_list: Sequence[str], cap: int = 20) -> HarmonyResult:
    """Score a set of garment colors; each matching rule adds its bonus."""

    colors = _fold(color_list)
    if len(colors) < 2:
        return HarmonyResult(colors=colors, rules_used=[], score=0)

    score = 0
    rules: List[str] = []
    for first, second in complementary_pairs_present(colors):
        score += COMPLEMENTARY_BONUS
        rules.append(f"complementary:{first}-{second}")
    if monochrome(colors):
        score += MONOCHROME_BONUS
        rules.append("monochrome")
    if neutral_dominant(colors):
        score += NEUTRAL_BONUS
        rules.append("neutral")
    logger.debug("harmony %s -> rules=%s raw=%s", colors, rules, score)
    return HarmonyResult(colors=colors, rules_used=rules, score=min(score, cap))


__all__ = [
    "COMPLEMENTARY_PAIRS",
    "HarmonyResult",
    "complementary_pairs_present",
    "evaluate_harmony",
    "is_neutral",
    "monochrome",
    "neutral_dominant",
]
