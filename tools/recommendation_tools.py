"""Instrumented facade wiring garment suppliers to the recommendation engine."""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence

from logic.recommendation_engine import generate_outfits
from logic.validation import GarmentQuery
from models.garment import Garment
from models.recommendation import RecommendationContext, RecommendationResult
from tools.garment_source import GarmentSource, InMemoryGarmentSource
from tools.observability import instrument_tool, summarize_garments, summarize_recommendation


class RecommendationTools:
    """Thin wrapper exposing garment lookup and recommendation to the transport layer."""

    def __init__(self, source: Optional[GarmentSource] = None, use_source_fallback: bool = True) -> None:
        self.source = source or InMemoryGarmentSource.demo()
        self.use_source_fallback = use_source_fallback

    @instrument_tool("list_garments", input_model=GarmentQuery, summarize=summarize_garments)
    def list_garments(
        self,
        owner_id: str,
        category: Optional[str] = None,
        season: Optional[str] = None,
        color: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        filters = {"category": category, "season": season, "color": color}
        if any(filters.values()):
            garments = self.source.search_garments(owner_id, filters)
        else:
            garments = self.source.list_garments_for_owner(owner_id)
        return [garment.to_dict() for garment in garments]

    @instrument_tool("recommend_outfits", summarize=summarize_recommendation)
    def recommend(
        self,
        context: RecommendationContext,
        garments: Optional[Sequence[Garment]] = None,
    ) -> RecommendationResult:
        """Recommend outfits from ``garments`` or, when omitted, from the source."""

        if garments is None:
            garments = self.source.list_garments_for_owner(context.owner_id) if self.use_source_fallback else []
        return generate_outfits(list(garments), context)


__all__ = ["RecommendationTools"]
