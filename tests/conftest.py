import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from stickit.api import app
from stickit.auth import get_db
from stickit.database import init_db
from stickit.rate_limit import limiter
from stickit.sessions import sessions


@pytest.fixture
def session_local():
    """Provide an isolated in-memory database seeded with the palette."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        future=True,
    )
    init_db(bind=engine)
    TestingSessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)
    yield TestingSessionLocal
    engine.dispose()


@pytest.fixture
def db(session_local):
    session = session_local()
    yield session
    session.close()


@pytest.fixture
def client(session_local):
    def override_get_db():
        session = session_local()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    limiter.reset()
    sessions.clear()
    yield TestClient(app)
    app.dependency_overrides.clear()
    sessions.clear()


@pytest.fixture
def login_as(client):
    """Register a user through the app and log them in."""

    def _login_as(username="alice", email=None, password="secret"):
        email = email or f"{username}@example.com"
        client.post(
            "/register",
            data={"username": username, "email": email, "password": password},
        )
        return client.post("/login", data={"email": email, "password": password})

    return _login_as
