"""HTTP surface tests using FastAPI's test client."""

from pathlib import Path

import sys

import pytest
from fastapi.testclient import TestClient

sys.path.append(str(Path(__file__).resolve().parents[1]))

from server.api import create_app
from stylist_app.app import OutfitRecommenderApp
from stylist_app.config import StylistConfig

DEMO_IDS = {f"g{index}" for index in range(1, 9)}


@pytest.fixture()
def client() -> TestClient:
    recommender = OutfitRecommenderApp(config=StylistConfig(environment="test"))
    return TestClient(create_app(recommender))


def test_healthz(client: TestClient) -> None:
    response = client.get("/healthz")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "service": "outfit-recommender", "environment": "test"}


def test_generate_falls_back_to_demo_wardrobe(client: TestClient) -> None:
    response = client.post("/recommendations/generate", json={"userId": "user1", "mood": "casual"})
    assert response.status_code == 200
    body = response.json()

    assert body["outcome"] == "ok"
    assert body["totalGenerated"] == len(body["outfits"]) == 6
    scores = [outfit["score"] for outfit in body["outfits"]]
    assert scores == sorted(scores, reverse=True)
    for outfit in body["outfits"]:
        assert set(outfit["garmentIds"]) <= DEMO_IDS
        assert outfit["contextMood"] == "casual"


def test_generate_respects_limit_and_body_garments(client: TestClient) -> None:
    payload = {
        "userId": "someone",
        "limitCount": 1,
        "garments": [
            {"id": "t1", "userId": "someone", "category": "top", "primaryColor": "blue"},
            {"id": "b1", "userId": "someone", "category": "bottom", "primaryColor": "orange"},
            {"id": "b2", "userId": "someone", "category": "bottom", "primaryColor": "pink"},
        ],
    }
    body = client.post("/recommendations/generate", json=payload).json()
    assert len(body["outfits"]) == 1
    assert body["outfits"][0]["garmentIds"] == ["t1", "b1"]


def test_generate_reports_empty_wardrobe(client: TestClient) -> None:
    body = client.post("/recommendations/generate", json={"userId": "nobody"}).json()
    assert body["outfits"] == []
    assert body["outcome"] == "empty_wardrobe"
    assert body["explanation"] == "No garments found in wardrobe. Please add items first."

    explicit = client.post("/recommendations/generate", json={"userId": "user1", "garments": []}).json()
    assert explicit["outcome"] == "empty_wardrobe"


@pytest.mark.parametrize(
    "payload",
    [
        {"userId": "user1", "limitCount": 11},
        {"userId": "user1", "temperature": 80},
        {"userId": "user1", "weather": "foggy"},
        {"mood": "casual"},
    ],
)
def test_generate_rejects_invalid_requests(client: TestClient, payload: dict) -> None:
    assert client.post("/recommendations/generate", json=payload).status_code == 422


def test_closet_endpoint(client: TestClient) -> None:
    payload = {
        "userId": "user9",
        "weather": "snowy",
        "temperature": -4,
        "items": [
            {"id": "c1", "name": "Wool Sweater", "category": "top", "color": "gray"},
            {"id": "c2", "name": "Wool Trousers", "category": "bottom", "color": "black"},
            {"id": "c3", "name": "Linen Shorts", "category": "bottom", "color": "beige"},
        ],
    }
    body = client.post("/recommendations/closet", json=payload).json()
    assert body["outcome"] == "ok"
    assert [outfit["garmentIds"] for outfit in body["outfits"]] == [["c1", "c2"]]
    assert body["outfits"][0]["userId"] == "user9"


def test_mock_garments_listing(client: TestClient) -> None:
    everything = client.get("/recommendations/mock-garments/user1").json()
    assert {item["id"] for item in everything} == DEMO_IDS

    tops = client.get("/recommendations/mock-garments/user1", params={"category": "tops"}).json()
    assert [item["id"] for item in tops] == ["g1", "g4", "g7"]

    assert client.get("/recommendations/mock-garments/stranger").json() == []
