"""Tests for health endpoints and seeding"""
from fastapi.testclient import TestClient

from jambo_admin.models.admin import AdminRole
from jambo_admin.seed import SEED_ADMINS, seed_admins
from jambo_admin.utils.passwords import verify_password


def test_health(client: TestClient):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_readiness(client: TestClient):
    response = client.get("/health/ready")
    assert response.status_code == 200
    assert response.json()["checks"]["database"] is True


def test_liveness(client: TestClient):
    response = client.get("/health/live")
    assert response.status_code == 200
    assert response.json()["status"] == "alive"


def test_root(client: TestClient):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["docs"] == "/api-docs"


def test_seed_is_idempotent(db, store):
    created = seed_admins(db)
    assert created == [a["email"] for a in SEED_ADMINS]

    assert seed_admins(db) == []

    super_admin = store.find_by_email("admin@creditjambo.com", include_password=True)
    assert super_admin.role == AdminRole.SUPER_ADMIN
    assert verify_password("Admin@123", super_admin.password)


def test_seeded_super_admin_can_login(client: TestClient, db):
    seed_admins(db)
    response = client.post(
        "/api/auth/login",
        json={"email": "admin@creditjambo.com", "password": "Admin@123"},
    )
    assert response.status_code == 200
    assert response.json()["data"]["admin"]["role"] == "SUPER_ADMIN"
