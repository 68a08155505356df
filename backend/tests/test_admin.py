from fastapi.testclient import TestClient


def test_admin_panel(client: TestClient, admin_token: str):
    response = client.get(
        "/api/admin",
        headers={"Authorization": f"Bearer {admin_token}"},
    )
    assert response.status_code == 200
    assert response.json() == {"message": "Welcome to the admin panel"}


def test_admin_panel_member_forbidden(client: TestClient, user_token: str):
    response = client.get(
        "/api/admin",
        headers={"Authorization": f"Bearer {user_token}"},
    )
    assert response.status_code == 403


def test_admin_panel_requires_authentication(client: TestClient):
    response = client.get("/api/admin")
    assert response.status_code == 401


def test_health(client: TestClient):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}
