"""Human-readable reasons and summary sentences for recommendations."""

from __future__ import annotations

from typing import List, Sequence

from models.color_theory import is_neutral
from models.garment import Garment
from models.mood_styles import MoodStyleProfile, get_mood_style
from models.recommendation import RecommendationContext, RecommendationOutcome
from models.taxonomy import AESTHETIC_KEYWORDS, Mood

OUTCOME_MESSAGES = {
    RecommendationOutcome.EMPTY_WARDROBE: "No garments found in wardrobe. Please add items first.",
    RecommendationOutcome.NO_ELIGIBLE_GARMENTS: (
        "No suitable outfits found for the current weather and mood combination."
    ),
    RecommendationOutcome.NO_QUALIFYING_OUTFITS: (
        "No high-quality outfit combinations found. "
        "Try adjusting your mood, weather, or add more items to your closet."
    ),
}

FALLBACK_EXPLANATION = "Outfit recommendations based on your wardrobe."


def generate_reasons(outfit_items: Sequence[Garment], mood: Mood | MoodStyleProfile | str | None) -> List[str]:
    """Return the ordered reasons that justify an outfit.

    The mood description always closes the list.
    """

    profile = mood if isinstance(mood, MoodStyleProfile) else get_mood_style(mood)
    reasons: List[str] = []

    if len(outfit_items) >= 3:
        reasons.append(f"Well-balanced outfit with {len(outfit_items)} pieces")

    if any(is_neutral(item.primary_color) for item in outfit_items):
        reasons.append("Neutral base for easy coordination")

    aesthetics: List[str] = []
    for item in outfit_items:
        for tag in item.tags:
            if tag in AESTHETIC_KEYWORDS and tag not in aesthetics:
                aesthetics.append(tag)
    if len(aesthetics) == 1:
        reasons.append(f"Cohesive {aesthetics[0]} aesthetic")
    elif "classic" in aesthetics and ("bold" in aesthetics or "minimalist" in aesthetics):
        reasons.append("Classic foundation with modern twist")

    all_tags = {tag for item in outfit_items for tag in item.tags}
    if "formal" in all_tags:
        reasons.append("Polished and put-together")
    elif "casual" in all_tags:
        reasons.append("Comfortable and approachable")

    if sum(1 for item in outfit_items if "versatile-high" in item.tags) >= 2:
        reasons.append("Mix-and-match friendly pieces")

    reasons.append(profile.description)
    return reasons


def _format_temperature(temperature: float) -> str:
    if float(temperature).is_integer():
        return f"{int(temperature)}°C"
    return f"{temperature!r}°C"


def build_context_explanation(context: RecommendationContext) -> str:
    """Summarise the request context as one sentence."""

    parts: List[str] = []
    if context.weather is not None:
        parts.append(f"for {context.weather.value} weather")
    if context.mood is not None:
        parts.append(f"with a {context.mood.value} vibe")
    if context.temperature is not None:
        parts.append(f"({_format_temperature(context.temperature)})")
    if not parts:
        return FALLBACK_EXPLANATION
    return "Outfit recommendations " + " ".join(parts) + ". Mix and match pieces or shuffle for more options."


def outcome_message(outcome: RecommendationOutcome) -> str:
    return OUTCOME_MESSAGES[outcome]


__all__ = [
    "FALLBACK_EXPLANATION",
    "OUTCOME_MESSAGES",
    "build_context_explanation",
    "generate_reasons",
    "outcome_message",
]
