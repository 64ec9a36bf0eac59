"""Lightweight evaluation harness for deterministic scenarios."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Dict, List

from evaluation.scenarios import EvaluationScenario, SCENARIOS
from logic.ranking import MIN_SCORE_THRESHOLD
from logic.recommendation_engine import generate_outfits
from models.garment import from_raw_metadata
from models.outfit import Outfit
from models.recommendation import RecommendationContext, RecommendationResult

_FIXED_CLOCK = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)


def _invariant_checks(result: RecommendationResult, limit: int) -> Dict[str, bool]:
    scores = [outfit.score for outfit in result.outfits]
    return {
        "score_bounds": all(50 <= score <= 100 for score in scores),
        "threshold": all(score >= MIN_SCORE_THRESHOLD for score in scores),
        "limit": len(scores) <= limit,
        "ranking": all(first >= second for first, second in zip(scores, scores[1:])),
        "total_generated": result.total_generated == len(result.outfits),
    }


def _evaluate_expectations(expectations: Dict[str, object], result: RecommendationResult) -> Dict[str, bool]:
    outfits: List[Outfit] = result.outfits
    checks: Dict[str, bool] = {}
    checks["outcome"] = result.outcome.value == expectations.get("outcome", "ok")
    checks["min_outfits"] = len(outfits) >= int(expectations.get("min_outfits", 1))
    if expectations.get("top_includes"):
        checks["top_includes"] = bool(outfits) and expectations["top_includes"] in outfits[0].garment_ids
    if expectations.get("excluded"):
        excluded = set(expectations["excluded"])  # type: ignore[arg-type]
        checks["excluded"] = all(not excluded.intersection(outfit.garment_ids) for outfit in outfits)
    if expectations.get("last_reason"):
        checks["last_reason"] = all(outfit.reasons[-1] == expectations["last_reason"] for outfit in outfits)
    return checks


def run_scenario(scenario: EvaluationScenario, user_id: str = "eval_user") -> Dict[str, object]:
    garments = [from_raw_metadata({**item, "owner_id": user_id}) for item in scenario.wardrobe_items]
    context = RecommendationContext(
        owner_id=user_id,
        mood=scenario.mood,
        weather=scenario.weather,
        temperature=scenario.temperature,
        result_limit=scenario.result_limit,
    )
    result = generate_outfits(
        garments,
        context,
        clock=lambda: _FIXED_CLOCK,
        id_factory=lambda index: f"{scenario.name}-{index}",
    )
    checks = {
        **_invariant_checks(result, scenario.result_limit),
        **_evaluate_expectations(scenario.expectations, result),
    }
    return {
        "scenario": scenario.name,
        "passed": all(checks.values()),
        "checks": checks,
        "outfit_count": len(result.outfits),
        "response": result.to_dict(),
    }


def run_evaluation_suite() -> List[Dict[str, object]]:
    return [run_scenario(scenario) for scenario in SCENARIOS]


def run_smoke_checks() -> List[str]:
    results = run_evaluation_suite()
    return [f"{result['scenario']}: {'passed' if result['passed'] else 'failed'}" for result in results]


__all__ = ["run_evaluation_suite", "run_scenario", "run_smoke_checks"]
