"""Command line entrypoint for the outfit recommender."""

import argparse
import json
from typing import List, Optional

from logic.validation import RecommendationRequest, RecommendationResponse
from models.taxonomy import Mood, Weather
from stylist_app.app import OutfitRecommenderApp


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Outfit recommender")
    sub = parser.add_subparsers(dest="command")

    recommend = sub.add_parser("recommend", help="Recommend outfits from the demo wardrobe")
    recommend.add_argument("--user-id", default="user1")
    recommend.add_argument("--mood", choices=[mood.value for mood in Mood])
    recommend.add_argument("--weather", choices=[weather.value for weather in Weather])
    recommend.add_argument("--temperature", type=float)
    recommend.add_argument("--limit", type=int)

    sub.add_parser("serve", help="Run the HTTP API with uvicorn")
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    args = _parser().parse_args(argv)
    if args.command == "serve":
        import uvicorn

        from server.api import app

        config = app.state.recommender.config
        uvicorn.run(app, host=config.host, port=config.port)
        return

    recommender = OutfitRecommenderApp()
    request = RecommendationRequest(
        user_id=getattr(args, "user_id", "user1"),
        mood=getattr(args, "mood", None),
        weather=getattr(args, "weather", None),
        temperature=getattr(args, "temperature", None),
        limit_count=getattr(args, "limit", None),
    )
    response = RecommendationResponse.from_result(recommender.recommend(request))
    print(json.dumps(response.model_dump(mode="json", by_alias=True), indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()
