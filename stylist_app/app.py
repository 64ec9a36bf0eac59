"""Application bootstrap wiring configuration, logging and collaborators."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Optional, Sequence

from logic.validation import ClosetRecommendationRequest, RecommendationRequest
from models.garment import Garment
from models.recommendation import RecommendationResult
from stylist_app.config import StylistConfig
from stylist_app.logging_config import configure_logging, get_logger, log_event, operation_context
from tools.garment_source import GarmentSource, InMemoryGarmentSource
from tools.recommendation_tools import RecommendationTools

LOGGER = get_logger(__name__)


class OutfitRecommenderApp:
    """Wires the garment source and recommendation tools together."""

    def __init__(self, config: StylistConfig | None = None, source: Optional[GarmentSource] = None) -> None:
        self.config = config or StylistConfig.from_env()
        configure_logging(self.config.log_level)
        self.garment_source = source or InMemoryGarmentSource.demo()
        self.recommendation_tools = RecommendationTools(
            self.garment_source, use_source_fallback=self.config.use_mock_garments
        )
        log_event(
            LOGGER,
            logging.INFO,
            "app_initialised",
            service=self.config.service_name,
            environment=self.config.environment or "local",
        )

    def _limit(self, requested: Optional[int]) -> int:
        return min(requested or self.config.default_result_limit, self.config.max_result_limit)

    def recommend(self, request: RecommendationRequest) -> RecommendationResult:
        """Handle a validated recommendation request end to end."""

        context = replace(request.to_context(), result_limit=self._limit(request.limit_count))
        with operation_context("recommendations.generate"):
            return self.recommendation_tools.recommend(context, request.to_garments())

    def recommend_from_closet(self, request: ClosetRecommendationRequest) -> RecommendationResult:
        """Convert simplified closet items and recommend outfits from them."""

        garments: Sequence[Garment] = request.to_garments()
        context = replace(request.to_context(), result_limit=self._limit(request.limit_count))
        with operation_context("recommendations.closet"):
            return self.recommendation_tools.recommend(context, list(garments))


__all__ = ["OutfitRecommenderApp"]
