"""Tests for admin endpoints."""

from fastapi.testclient import TestClient

from artzyful.api.app import create_app
from artzyful.containers import AppContainer
from artzyful.domain.styles import DEFAULT_PROMPTS, PROMPTS_KEY
from tests.conftest import InMemoryConfigStore

ADMIN_HEADERS = {"X-Admin-Token": "admin-token"}


def test_admin_health_requires_token(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    response = client.get("/api/admin/health")

    assert response.status_code == 401
    assert response.json() == {"status": "error", "message": "Unauthorized"}


def test_admin_health_accepts_valid_token(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    response = client.get("/api/admin/health", headers=ADMIN_HEADERS)

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_admin_prompts_requires_token(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    response = client.get("/api/admin/prompts", headers={"X-Admin-Token": "wrong"})

    assert response.status_code == 401
    assert response.json() == {"status": "error", "message": "Unauthorized"}


def test_admin_get_prompts(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    response = client.get("/api/admin/prompts", headers=ADMIN_HEADERS)

    assert response.status_code == 200
    data = response.json()
    assert data["prompts"] == DEFAULT_PROMPTS
    assert data["siteContent"]["heroTitle"] == "Transform Your Pet Into Art"


def test_admin_update_prompts(
    container: AppContainer, config_store: InMemoryConfigStore
) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/api/admin/prompts",
        headers=ADMIN_HEADERS,
        json={"prompts": {"get-naked": "A robe and sunglasses."}},
    )

    assert response.status_code == 200
    assert response.json() == {"success": True}
    assert config_store.records[PROMPTS_KEY] == {"get-naked": "A robe and sunglasses."}


def test_admin_update_rejects_unknown_style(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/api/admin/prompts",
        headers=ADMIN_HEADERS,
        json={"prompts": {"dog-in-space": "Rocket."}},
    )

    assert response.status_code == 400
    assert response.json()["status"] == "error"


def test_admin_ui_is_served(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    response = client.get("/api/admin/ui")

    assert response.status_code == 200
    assert "Artzyful Admin" in response.text
