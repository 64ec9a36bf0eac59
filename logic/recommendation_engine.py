"""Outfit recommendation engine: filter, generate, score and rank.

:func:`generate_outfits` is a pure function of the garments and the context.
The only non-deterministic inputs are the clock and the outfit id factory,
both injectable and neither of which influences scoring or ordering.
"""

from __future__ import annotations

import logging
import uuid
from datetime import datetime, timezone
from typing import Callable, Optional, Sequence

from logic.contextual_filtering import filter_by_context
from logic.explanations import build_context_explanation, outcome_message
from logic.outfit_builder import generate_candidates
from logic.ranking import MIN_SCORE_THRESHOLD, materialize_outfits, rank_candidates
from models.garment import Garment
from models.mood_styles import get_mood_style
from models.recommendation import RecommendationContext, RecommendationOutcome, RecommendationResult
from stylist_app.logging_config import get_logger, log_event

logger = get_logger(__name__)

Clock = Callable[[], datetime]
IdFactory = Callable[[int], str]


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _random_outfit_id(index: int) -> str:
    return f"outfit-{uuid.uuid4().hex[:12]}-{index}"


def _empty_result(outcome: RecommendationOutcome, **diagnostics: object) -> RecommendationResult:
    log_event(logger, logging.INFO, "recommendation_empty", outcome=outcome.value, **diagnostics)
    return RecommendationResult(
        outfits=[],
        explanation=outcome_message(outcome),
        total_generated=0,
        outcome=outcome,
        diagnostics=dict(diagnostics),
    )


def generate_outfits(
    garments: Sequence[Garment],
    context: RecommendationContext,
    *,
    clock: Optional[Clock] = None,
    id_factory: Optional[IdFactory] = None,
) -> RecommendationResult:
    """Recommend up to ``context.result_limit`` outfits from ``garments``.

    Never raises for well-typed input; empty outcomes are reported through
    :class:`RecommendationOutcome` and a matching explanation.
    """

    if not garments:
        return _empty_result(RecommendationOutcome.EMPTY_WARDROBE, input_count=0)

    filtering = filter_by_context(list(garments), context)
    log_event(logger, logging.DEBUG, "garments_filtered", removed=filtering.removed, **filtering.debug)
    if not filtering.items:
        return _empty_result(
            RecommendationOutcome.NO_ELIGIBLE_GARMENTS,
            input_count=len(garments),
            eligible_count=0,
            stage="filter",
        )

    generation = generate_candidates(filtering.items, get_mood_style(context.mood))
    if not generation.candidates:
        return _empty_result(
            RecommendationOutcome.NO_ELIGIBLE_GARMENTS,
            input_count=len(garments),
            eligible_count=len(filtering.items),
            stage="generation",
        )

    ranked = rank_candidates(generation.candidates, context.result_limit, MIN_SCORE_THRESHOLD)
    if not ranked:
        return _empty_result(
            RecommendationOutcome.NO_QUALIFYING_OUTFITS,
            input_count=len(garments),
            eligible_count=len(filtering.items),
            candidate_count=len(generation.candidates),
            best_score=max(candidate.score for candidate in generation.candidates),
        )

    created_at = (clock or _utc_now)()
    outfits = materialize_outfits(ranked, context, created_at, id_factory or _random_outfit_id)
    diagnostics = {
        "input_count": len(garments),
        "eligible_count": len(filtering.items),
        "candidate_count": len(generation.candidates),
        "returned_count": len(outfits),
    }
    log_event(
        logger,
        logging.INFO,
        "recommendation_completed",
        outcome=RecommendationOutcome.OK.value,
        top_score=outfits[0].score,
        **diagnostics,
    )
    return RecommendationResult(
        outfits=outfits,
        explanation=build_context_explanation(context),
        total_generated=len(outfits),
        outcome=RecommendationOutcome.OK,
        diagnostics={**diagnostics, "filter": filtering.debug, "generation": generation.diagnostics},
    )


__all__ = ["generate_outfits"]
