"""
Integration tests for the routine endpoints.

The app runs with fake ports and a seeded random generator (see conftest).
"""

import pytest

from api.deps import get_catalog_repo
from models.stretch import BodyArea
from tests.fakes import FailingCatalogRepository, make_stretch

PREMIUM_USER_ID = "premium-user-456"

pytestmark = pytest.mark.integration


def _stretches(body):
    return [item for item in body["items"] if item["kind"] == "stretch"]


class TestParseEndpoint:
    def test_parse_description(self, client):
        response = client.post("/routines/parse", json={"text": "stiff neck from my desk job"})

        assert response.status_code == 200
        body = response.json()
        assert body["areas"] == ["Neck"]
        assert body["issue"] == "stiffness"
        assert body["position"] == "Sitting"
        assert body["activity"] == "desk work"

    def test_parse_empty(self, client):
        response = client.post("/routines/parse", json={})

        assert response.status_code == 200
        body = response.json()
        assert body["areas"] == []
        assert body["issue"] is None
        assert body["position"] is None


class TestGenerateEndpoint:
    def test_generate_neck_routine(self, client):
        response = client.post(
            "/routines/generate",
            json={"areas": ["Neck"], "position": "All", "desk_friendly": False},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["summary"]["area"] == "Neck"
        assert body["summary"]["transition_duration"] == 5
        assert body["summary"]["duration"] == "5"
        assert 180 <= body["total_duration"] <= 330
        assert body["stretch_count"] == len(_stretches(body))
        assert all("Neck" in s["tags"] for s in _stretches(body))
        assert body["items"][0]["kind"] == "stretch"
        assert body["items"][-1]["kind"] == "stretch"

    def test_generate_from_description_only(self, client):
        response = client.post("/routines/generate", json={"description": "tight hamstrings"})

        assert response.status_code == 200
        body = response.json()
        assert body["summary"]["area"] == "Hips & Legs"
        assert body["summary"]["issue_type"] == "stiffness"
        assert body["summary"]["description"] == "tight hamstrings"

    def test_generate_is_reproducible_with_seed(self, client):
        payload = {"areas": ["Full Body"], "duration": "10"}
        first = client.post("/routines/generate", json=payload).json()
        second = client.post("/routines/generate", json=payload).json()

        assert [i["id"] for i in first["items"]] == [i["id"] for i in second["items"]]

    def test_custom_duration(self, client):
        response = client.post(
            "/routines/generate",
            json={"areas": ["Full Body"], "position": "All", "duration": 7},
            headers={"X-User-Id": PREMIUM_USER_ID},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["summary"]["duration"] == 7
        assert 336 <= body["total_duration"] <= 450

    def test_premium_requires_entitled_user(self, client, fake_catalog_repo):
        fake_catalog_repo.reset()
        fake_catalog_repo.seed(
            [make_stretch(i, BodyArea.NECK, premium=True) for i in range(1, 5)]
        )
        payload = {"areas": ["Neck"]}

        anonymous = client.post("/routines/generate", json=payload)
        entitled = client.post(
            "/routines/generate", json=payload, headers={"X-User-Id": PREMIUM_USER_ID}
        )

        assert anonymous.status_code == 422
        assert entitled.status_code == 200
        assert entitled.json()["stretch_count"] == 4

    def test_no_suitable_stretches(self, client, fake_catalog_repo):
        fake_catalog_repo.reset()

        response = client.post("/routines/generate", json={"description": "stiff neck"})

        assert response.status_code == 422
        assert "No suitable stretches" in response.json()["detail"]

    def test_catalog_unavailable(self, app, client):
        app.dependency_overrides[get_catalog_repo] = lambda: FailingCatalogRepository()

        response = client.post("/routines/generate", json={})

        assert response.status_code == 503
        assert response.json()["detail"] == "Stretch catalog not available"

    @pytest.mark.parametrize(
        "payload",
        [
            {"duration": 0},
            {"duration": 61},
            {"duration": "0"},
            {"duration": "-5"},
            {"duration": "100"},
            {"areas": ["Elbows"]},
            {"position": "Upside Down"},
            {"issue_type": "boredom"},
        ],
    )
    def test_invalid_request(self, client, payload):
        response = client.post("/routines/generate", json=payload)
        assert response.status_code == 422
