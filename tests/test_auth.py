from __future__ import annotations

from fastapi.testclient import TestClient


def test_token_success(client: TestClient) -> None:
    resp = client.post(
        "/api/v1/auth/token",
        data={"username": "admin", "password": "password"},
        headers={"Content-Type": "application/x-www-form-urlencoded"},
    )
    assert resp.status_code == 200
    body = resp.json()
    assert body["token_type"] == "bearer"
    assert isinstance(body["access_token"], str) and body["access_token"]
    assert resp.headers["Cache-Control"] == "no-store"


def test_token_wrong_password(client: TestClient) -> None:
    resp = client.post(
        "/api/v1/auth/token",
        data={"username": "admin", "password": "wrong"},
        headers={"Content-Type": "application/x-www-form-urlencoded"},
    )
    assert resp.status_code == 401


def test_me_lists_scopes(client: TestClient, auth_headers: dict[str, str]) -> None:
    resp = client.get("/api/v1/auth/me", headers=auth_headers)
    assert resp.status_code == 200, resp.text
    assert set(resp.json()["scopes"]) == {"station:read", "station:write"}


def test_invalid_token_rejected(client: TestClient) -> None:
    resp = client.get(
        "/api/v1/station/statistics",
        headers={"Authorization": "Bearer not-a-token"},
    )
    assert resp.status_code == 401


def test_token_reports_scope_and_lifetime(client: TestClient, settings) -> None:
    resp = client.post(
        "/api/v1/auth/token",
        data={"username": "admin", "password": "password"},
        headers={"Content-Type": "application/x-www-form-urlencoded"},
    )
    body = resp.json()
    assert body["expires_in"] == settings.access_token_expire_minutes * 60
    assert set(body["scope"].split()) == {"station:read", "station:write"}


def test_read_only_token_cannot_collect(client: TestClient) -> None:
    resp = client.post(
        "/api/v1/auth/token",
        data={"username": "admin", "password": "password", "scope": "station:read"},
        headers={"Content-Type": "application/x-www-form-urlencoded"},
    )
    assert resp.json()["scope"] == "station:read"
    headers = {"Authorization": f"Bearer {resp.json()['access_token']}"}

    assert client.get("/api/v1/station/readings", headers=headers).status_code == 200
    assert client.post("/api/v1/station/readings", headers=headers).status_code == 403
