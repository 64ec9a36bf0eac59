"""Model package exports."""

from models.taxonomy import *  # noqa: F401,F403
from models.garment import Garment, from_raw_metadata
from models.outfit import Outfit, OutfitCandidate
from models.recommendation import RecommendationContext, RecommendationOutcome, RecommendationResult

__all__ = [
    "Garment",
    "Outfit",
    "OutfitCandidate",
    "RecommendationContext",
    "RecommendationOutcome",
    "RecommendationResult",
    "from_raw_metadata",
]
