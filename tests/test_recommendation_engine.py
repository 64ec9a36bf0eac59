"""End-to-end tests for the filter, generate, score and rank pipeline."""

from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional

import sys

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from logic import recommendation_engine
from logic.explanations import OUTCOME_MESSAGES
from logic.ranking import MIN_SCORE_THRESHOLD, materialize_outfits, rank_candidates
from logic.recommendation_engine import generate_outfits
from models.garment import Garment
from models.outfit import OutfitCandidate
from models.recommendation import RecommendationContext, RecommendationOutcome
from models.taxonomy import Category, Mood, Weather

_CLOCK = datetime(2024, 5, 1, 9, 30, tzinfo=timezone.utc)


def _fixed_clock() -> datetime:
    return _CLOCK


def _ids(index: int) -> str:
    return f"outfit-{index}"


def _garment(
    garment_id: str,
    category: str,
    color: str = "black",
    material: Optional[str] = None,
    season: str = "all-season",
    tags: Optional[List[str]] = None,
) -> Garment:
    return Garment(
        id=garment_id,
        owner_id="demo",
        category=category,
        primary_color=color,
        material=material,
        season=season,
        tags=tuple(tags or []),
    )


def _wardrobe() -> List[Garment]:
    return [
        _garment("top_linen", "top", "blue", "linen", "summer", ["casual", "versatile-high"]),
        _garment("top_sweater", "top", "gray", "wool", "winter", ["classic", "cozy"]),
        _garment("top_tee", "top", "white", "cotton", "all-season", ["casual", "weekend"]),
        _garment("bottom_jeans", "bottom", "black", "denim", "all-season", ["classic", "versatile-high"]),
        _garment("bottom_chinos", "bottom", "beige", "cotton", "spring", ["work", "versatile-medium"]),
        _garment("shoes_sneakers", "shoes", "white", "canvas", "all-season", ["casual"]),
        _garment("shoes_boots", "shoes", "brown", "leather", "fall", ["classic"]),
        _garment("acc_scarf", "accessory", "red", "wool", "winter", ["cozy"]),
        _garment("acc_cap", "accessory", "navy", "cotton", "summer", ["casual"]),
        _garment("acc_watch", "accessory", "silver", "metal", "all-season", ["classic"]),
        _garment("outer_parka", "outerwear", "green", "down", "winter", ["warm"]),
    ]


def _run(garments: List[Garment], **context_fields: object):
    context = RecommendationContext(owner_id="demo", **context_fields)  # type: ignore[arg-type]
    return generate_outfits(garments, context, clock=_fixed_clock, id_factory=_ids)


def test_engine_is_deterministic_with_injected_clock_and_ids() -> None:
    first = _run(_wardrobe(), mood="casual", weather="cloudy", temperature=18)
    second = _run(list(reversed(_wardrobe())), mood="casual", weather="cloudy", temperature=18)
    assert first.to_dict() == second.to_dict()
    assert [outfit.id for outfit in first.outfits] == [f"outfit-{i}" for i in range(len(first.outfits))]
    assert all(outfit.created_at == _CLOCK for outfit in first.outfits)


@pytest.mark.parametrize(
    "context_fields",
    [
        {},
        {"mood": "formal"},
        {"mood": "cozy", "weather": "rainy", "temperature": 14},
        {"mood": "bold", "weather": "sunny", "temperature": 28, "result_limit": 2},
        {"weather": "windy", "temperature": 12, "result_limit": 10},
    ],
)
def test_results_respect_score_threshold_limit_and_ranking(context_fields: dict) -> None:
    result = _run(_wardrobe(), **context_fields)
    scores = [outfit.score for outfit in result.outfits]

    assert result.outcome is RecommendationOutcome.OK
    assert all(50 <= score <= 100 for score in scores)
    assert all(score >= MIN_SCORE_THRESHOLD for score in scores)
    assert len(scores) <= _result_limit(context_fields)
    assert scores == sorted(scores, reverse=True)
    assert result.total_generated == len(result.outfits)


def _result_limit(context_fields: dict) -> int:
    return int(context_fields.get("result_limit", 6))


def test_outfit_composition() -> None:
    wardrobe = _wardrobe()
    by_id = {item.id: item for item in wardrobe}
    result = _run(wardrobe, result_limit=10)

    assert len(result.outfits) == 10
    for outfit in result.outfits:
        categories = [by_id[garment_id].category for garment_id in outfit.garment_ids]
        assert categories.count(Category.TOP) == 1
        assert categories.count(Category.BOTTOM) == 1
        assert categories.count(Category.SHOES) <= 1
        assert categories.count(Category.ACCESSORY) <= 1
        assert Category.OUTERWEAR not in categories
        assert outfit.explanation == " • ".join(outfit.reasons)


def test_outfits_carry_context_and_explanation() -> None:
    result = _run(_wardrobe(), mood="casual", weather="cloudy", temperature=18)
    assert result.explanation == (
        "Outfit recommendations for cloudy weather with a casual vibe (18°C). "
        "Mix and match pieces or shuffle for more options."
    )
    outfit = result.outfits[0]
    assert outfit.owner_id == "demo"
    assert outfit.context_mood is Mood.CASUAL
    assert outfit.context_weather is Weather.CLOUDY
    assert outfit.reasons[-1] == "Perfect for a relaxed day"


def test_empty_wardrobe() -> None:
    result = _run([], mood="casual")
    assert result.outfits == []
    assert result.total_generated == 0
    assert result.outcome is RecommendationOutcome.EMPTY_WARDROBE
    assert result.explanation == "No garments found in wardrobe. Please add items first."


def test_only_shoes_and_accessories_yield_no_eligible_garments() -> None:
    garments = [_garment("s1", "shoes"), _garment("a1", "accessory")]
    result = _run(garments)
    assert result.outcome is RecommendationOutcome.NO_ELIGIBLE_GARMENTS
    assert result.diagnostics["stage"] == "generation"
    assert result.explanation == OUTCOME_MESSAGES[RecommendationOutcome.NO_ELIGIBLE_GARMENTS]


def test_wool_sweater_on_a_hot_day() -> None:
    garments = [
        _garment("sweater", "top", "gray", "wool"),
        _garment("jeans", "bottom", "blue", "denim"),
    ]
    result = _run(garments, temperature=30)
    assert result.outfits == []
    assert result.outcome is RecommendationOutcome.NO_ELIGIBLE_GARMENTS
    assert result.diagnostics["eligible_count"] == 1


def test_nothing_survives_the_filter() -> None:
    garments = [
        _garment("linen", "top", material="linen", season="summer"),
        _garment("shorts", "bottom", material="cotton", season="summer"),
    ]
    result = _run(garments, weather="snowy")
    assert result.outcome is RecommendationOutcome.NO_ELIGIBLE_GARMENTS
    assert result.diagnostics["stage"] == "filter"


def test_no_qualifying_outfits_when_threshold_unreachable(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(recommendation_engine, "MIN_SCORE_THRESHOLD", 101)
    result = _run(_wardrobe())
    assert result.outfits == []
    assert result.outcome is RecommendationOutcome.NO_QUALIFYING_OUTFITS
    assert result.diagnostics["best_score"] <= 100
    assert "Try adjusting your mood" in result.explanation


def test_outcome_messages_are_distinct() -> None:
    assert len(set(OUTCOME_MESSAGES.values())) == len(OUTCOME_MESSAGES)


def test_complementary_outfit_scores_color_bonus_once() -> None:
    garments = [
        _garment("top", "top", "Blue"),
        _garment("bottom", "bottom", "orange"),
        _garment("shoe", "shoes", "black"),
    ]
    outfit = _run(garments).outfits[0]
    assert outfit.garment_ids == ("top", "bottom", "shoe")
    assert outfit.sub_scores["color"] == 15


def test_cozy_mood_closes_with_warm_reason() -> None:
    result = _run(_wardrobe(), mood="cozy")
    assert result.outfits
    assert all(outfit.reasons[-1] == "Comfortable and warm" for outfit in result.outfits)


def test_rank_candidates_is_stable_for_ties() -> None:
    candidates = [
        OutfitCandidate(garment_ids=("a",), score=70, reasons=()),
        OutfitCandidate(garment_ids=("b",), score=80, reasons=()),
        OutfitCandidate(garment_ids=("c",), score=70, reasons=()),
        OutfitCandidate(garment_ids=("d",), score=55, reasons=()),
    ]
    ranked = rank_candidates(candidates, limit=3)
    assert [candidate.garment_ids[0] for candidate in ranked] == ["b", "a", "c"]
    assert rank_candidates(candidates, limit=10, threshold=75) == [candidates[1]]
    assert rank_candidates(candidates, limit=0) == []


def test_materialize_outfits_joins_reasons() -> None:
    candidate = OutfitCandidate(garment_ids=("t", "b"), score=72, reasons=("Neutral base", "Clean and simple"))
    context = RecommendationContext(owner_id="u1", mood="minimalist")
    outfit = materialize_outfits([candidate], context, _CLOCK, _ids)[0]
    assert outfit.id == "outfit-0"
    assert outfit.explanation == "Neutral base • Clean and simple"
    assert outfit.context_mood is Mood.MINIMALIST
    assert outfit.context_weather is None
