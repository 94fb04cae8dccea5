"""Pytest configuration and fixtures"""
import os

# Settings are read at import time, so configure the test environment first.
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("DATABASE_URL", "sqlite:///./test.db")
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")
os.environ.setdefault("METRICS_ENABLED", "true")
os.environ.setdefault("JWT_SECRET", "test-access-secret")
os.environ.setdefault("JWT_REFRESH_SECRET", "test-refresh-secret")

from datetime import datetime, timedelta
from typing import Callable, Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from jambo_admin.config import TokenConfig
from jambo_admin.database import Base, get_db
from jambo_admin.main import app
from jambo_admin.models.admin import Admin, AdminRole, AdminStatus
from jambo_admin.services.admin_store import AdminStore
from jambo_admin.services.auth_service import AuthService
from jambo_admin.utils.jwt_utils import TokenIssuer, get_token_issuer

TEST_DATABASE_URL = os.environ["DATABASE_URL"]

engine = create_engine(TEST_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

DEFAULT_PASSWORD = "Test@123"


class FrozenClock:
    """Callable clock that only moves when told to"""

    def __init__(self, start: datetime):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


@pytest.fixture(scope="function")
def db() -> Generator[Session, None, None]:
    """Create a fresh database for each test"""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def client(db: Session) -> Generator[TestClient, None, None]:
    """Create test client with database session override"""

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def issuer() -> TokenIssuer:
    """The issuer the running app uses"""
    return get_token_issuer()


@pytest.fixture
def clock() -> FrozenClock:
    return FrozenClock(datetime(2024, 1, 15, 9, 0, 0))


@pytest.fixture
def store(db: Session) -> AdminStore:
    return AdminStore(db)


@pytest.fixture
def service(store: AdminStore, clock: FrozenClock) -> AuthService:
    issuer = TokenIssuer(TokenConfig(access_secret="svc-access", refresh_secret="svc-refresh"))
    return AuthService(store, issuer, clock=clock)


@pytest.fixture
def make_admin(store: AdminStore) -> Callable[..., Admin]:
    """Factory for persisted admins; the password is stored hashed"""

    def _make(
        email: str = "testadmin@creditjambo.com",
        password: str = DEFAULT_PASSWORD,
        role: AdminRole = AdminRole.ADMIN,
        status: AdminStatus = AdminStatus.ACTIVE,
        **extra,
    ) -> Admin:
        return store.create({
            "email": email,
            "password": password,
            "first_name": "Test",
            "last_name": "Admin",
            "role": role,
            "status": status,
            **extra,
        })

    return _make


@pytest.fixture
def auth_headers(issuer: TokenIssuer) -> Callable[[Admin], dict]:
    """Bearer headers for an admin, minted directly by the app's issuer"""

    def _headers(admin: Admin) -> dict:
        return {"Authorization": f"Bearer {issuer.issue_access_token(admin)}"}

    return _headers


@pytest.fixture
def super_admin(make_admin) -> Admin:
    return make_admin(email="admin@creditjambo.com", password="Admin@123", role=AdminRole.SUPER_ADMIN)


@pytest.fixture
def support_admin(make_admin) -> Admin:
    return make_admin(email="support@creditjambo.com", password="Support@123", role=AdminRole.SUPPORT)
