"""Ranking, thresholding and materialisation of scored candidates."""

from __future__ import annotations

from datetime import datetime
from typing import Callable, List, Sequence

from models.outfit import REASON_SEPARATOR, Outfit, OutfitCandidate
from models.recommendation import RecommendationContext

MIN_SCORE_THRESHOLD = 60


def rank_candidates(
    candidates: Sequence[OutfitCandidate],
    limit: int,
    threshold: int = MIN_SCORE_THRESHOLD,
) -> List[OutfitCandidate]:
    """Sort by score descending, drop weak candidates and truncate.

    ``sorted`` is stable, so equal scores keep their generation order.
    """

    ranked = sorted(candidates, key=lambda candidate: -candidate.score)
    passing = [candidate for candidate in ranked if candidate.score >= threshold]
    return passing[: max(0, limit)]


def materialize_outfits(
    candidates: Sequence[OutfitCandidate],
    context: RecommendationContext,
    created_at: datetime,
    id_factory: Callable[[int], str],
) -> List[Outfit]:
    """Promote ranked candidates to :class:`Outfit` results."""

    return [
        Outfit(
            id=id_factory(index),
            owner_id=context.owner_id,
            garment_ids=candidate.garment_ids,
            score=candidate.score,
            explanation=REASON_SEPARATOR.join(candidate.reasons),
            created_at=created_at,
            context_weather=context.weather,
            context_mood=context.mood,
            reasons=candidate.reasons,
            sub_scores=dict(candidate.sub_scores),
        )
        for index, candidate in enumerate(candidates)
    ]


__all__ = ["MIN_SCORE_THRESHOLD", "materialize_outfits", "rank_candidates"]
