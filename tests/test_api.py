import pytest
from fastapi.testclient import TestClient

from wiremaster.api import levels
from wiremaster.config import settings
from wiremaster.main import app

API = settings.API_PREFIX


@pytest.fixture(scope="module")
def client():
    with TestClient(app) as test_client:
        yield test_client


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"

    response = client.get(f"{API}/health")
    assert response.status_code == 200
    assert response.json()["max_level"] == settings.MAX_LEVEL


def test_security_headers(client):
    response = client.get("/")
    assert response.headers["X-Content-Type-Options"] == "nosniff"
    assert response.headers["X-Frame-Options"] == "DENY"


class TestGetLevel:
    def test_first_level(self, client):
        response = client.get(f"{API}/levels/1")
        assert response.status_code == 200

        data = response.json()
        assert data["id"] == 1
        assert data["config"]["grid_rows"] == 2
        assert data["config"]["difficulty"] == "easy"
        assert data["fallback"] is False
        assert len(data["wires"]) == 1
        assert len(data["solution"][0]) == 4

    def test_repeated_requests_return_same_level(self, client):
        first = client.get(f"{API}/levels/20").json()
        second = client.get(f"{API}/levels/20").json()
        assert first == second

    def test_invalid_level_number(self, client):
        assert client.get(f"{API}/levels/0").status_code == 400

    def test_past_last_level(self, client):
        assert client.get(f"{API}/levels/{settings.MAX_LEVEL + 1}").status_code == 404

    def test_next_levels_are_pregenerated(self, client):
        levels._cached_level.cache_clear()
        client.get(f"{API}/levels/5")
        assert levels._cached_level.cache_info().currsize == 1 + settings.PREGENERATE_AHEAD

    def test_no_pregeneration_past_last_level(self, client):
        levels._cached_level.cache_clear()
        client.get(f"{API}/levels/{settings.MAX_LEVEL}")
        assert levels._cached_level.cache_info().currsize == 1


class TestHint:
    def test_hint_path(self, client):
        response = client.get(f"{API}/levels/3/hint/0")
        assert response.status_code == 200

        data = response.json()
        assert data["level"] == 3
        assert data["wire_index"] == 0
        assert data["path"][0] == data["start"]
        assert data["path"][-1] == data["end"]

    def test_unknown_wire(self, client):
        assert client.get(f"{API}/levels/3/hint/9").status_code == 404


class TestGenerate:
    def test_custom_config(self, client):
        body = {"config": {"grid_rows": 4, "grid_cols": 5, "wire_count": 2}, "level_number": 10}
        response = client.post(f"{API}/levels/generate", json=body)
        assert response.status_code == 200

        data = response.json()
        assert sum(len(path) for path in data["solution"]) == 20
        assert data["config"]["difficulty"] == "easy"

    def test_infeasible_config_returns_fallback(self, client):
        body = {"config": {"grid_rows": 2, "grid_cols": 2, "wire_count": 3}, "level_number": 1}
        data = client.post(f"{API}/levels/generate", json=body).json()
        assert data["fallback"] is True
        assert len(data["wires"]) == 2

    def test_invalid_config(self, client):
        body = {"config": {"grid_rows": 1, "grid_cols": 5, "wire_count": 2}, "level_number": 10}
        assert client.post(f"{API}/levels/generate", json=body).status_code == 422

        body = {"config": {"grid_rows": 4, "grid_cols": 5, "wire_count": 21}, "level_number": 10}
        assert client.post(f"{API}/levels/generate", json=body).status_code == 422

    def test_oversized_grid_is_rejected(self, client):
        levels._cached_custom_level.cache_clear()
        body = {"config": {"grid_rows": 600, "grid_cols": 600, "wire_count": 3}, "level_number": 1}
        assert client.post(f"{API}/levels/generate", json=body).status_code == 422

        side = settings.GENERATOR_MAX_GRID_SIZE + 1
        body = {"config": {"grid_rows": 4, "grid_cols": side, "wire_count": 3}, "level_number": 1}
        assert client.post(f"{API}/levels/generate", json=body).status_code == 422
        assert levels._cached_custom_level.cache_info().currsize == 0

    def test_largest_grid_is_accepted(self, client):
        side = settings.GENERATOR_MAX_GRID_SIZE
        body = {"config": {"grid_rows": side, "grid_cols": side, "wire_count": 5}, "level_number": 2}
        data = client.post(f"{API}/levels/generate", json=body).json()
        assert data["fallback"] is False
        assert sum(len(path) for path in data["solution"]) == side * side


class TestValidate:
    def test_generated_level_is_valid(self, client):
        level = client.get(f"{API}/levels/3").json()
        report = client.post(f"{API}/levels/validate", json=level).json()
        assert report == {"valid": True, "errors": [], "coverage": 100.0}

    def test_tampered_level_is_invalid(self, client):
        level = client.get(f"{API}/levels/3").json()
        level["wires"][1]["color"] = level["wires"][0]["color"]

        report = client.post(f"{API}/levels/validate", json=level).json()
        assert report["valid"] is False
        assert any("[color_uniqueness]" in error for error in report["errors"])
