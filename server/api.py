"""FastAPI server exposing the outfit recommendation endpoints."""

from typing import Optional

from fastapi import FastAPI, Query

from logic.validation import (
    ClosetRecommendationRequest,
    RecommendationRequest,
    RecommendationResponse,
)
from stylist_app.app import OutfitRecommenderApp


def create_app(recommender: OutfitRecommenderApp | None = None) -> FastAPI:
    """Build the FastAPI application around an :class:`OutfitRecommenderApp`."""

    recommender = recommender or OutfitRecommenderApp()
    api = FastAPI(title="Outfit Recommender", version="0.1.0")
    api.state.recommender = recommender

    @api.get("/healthz")
    async def healthcheck() -> dict:
        """Lightweight readiness probe."""

        return {
            "status": "ok",
            "service": recommender.config.service_name,
            "environment": recommender.config.environment or "local",
        }

    @api.post("/recommendations/generate", response_model=RecommendationResponse)
    def generate(request: RecommendationRequest) -> RecommendationResponse:
        """Recommend outfits for the garments in the body or the user's stored wardrobe."""

        return RecommendationResponse.from_result(recommender.recommend(request))

    @api.post("/recommendations/closet", response_model=RecommendationResponse)
    def generate_from_closet(request: ClosetRecommendationRequest) -> RecommendationResponse:
        """Recommend outfits from simplified closet items."""

        return RecommendationResponse.from_result(recommender.recommend_from_closet(request))

    @api.get("/recommendations/mock-garments/{user_id}")
    def mock_garments(
        user_id: str,
        category: Optional[str] = Query(None),
        season: Optional[str] = Query(None),
        color: Optional[str] = Query(None),
    ) -> list:
        """Return the demo wardrobe for a user, optionally filtered."""

        return recommender.recommendation_tools.list_garments(
            owner_id=user_id, category=category, season=season, color=color
        )

    return api


app = create_app()


def get_app() -> FastAPI:
    """Expose the FastAPI instance for ASGI servers."""

    return app


if __name__ == "__main__":
    import uvicorn

    config = app.state.recommender.config
    uvicorn.run("server.api:app", host=config.host, port=config.port, reload=False)
