# tests/conftest.py
import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session

from storefront.core.config import Settings
from storefront.core.security import build_password_context
from storefront.db.session import create_db_and_tables, create_db_engine
from storefront.main import create_app


@pytest.fixture
def settings():
    """Settings for an isolated in-memory database with cheap bcrypt rounds."""
    return Settings(
        DATABASE_URL="sqlite://",
        SECRET_KEY="test-secret",
        BCRYPT_ROUNDS=4,
        LOG_LEVEL="WARNING",
    )


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    # Entering the context runs the lifespan (engine + tables)
    with TestClient(app) as client:
        yield client


@pytest.fixture
def session():
    engine = create_db_engine("sqlite://")
    create_db_and_tables(engine)
    with Session(engine) as session:
        yield session
    engine.dispose()


@pytest.fixture
def pwd_context():
    return build_password_context(4)


def register(client, username, password="secret", role="customer"):
    resp = client.post("/register", json={"username": username, "password": password, "role": role})
    assert resp.status_code == 201, resp.text
    return resp.json()["token"]


@pytest.fixture
def admin_token(client):
    return register(client, "admin", role="admin")


@pytest.fixture
def customer_token(client):
    return register(client, "alice")
