"""
Pytest configuration and fixtures for tests.

Environment is set before any ``app`` import so settings, the engine and
Celery pick up the test configuration: shared in-memory SQLite, tasks run
inline, fixed signing secret.
"""

import os
import tempfile
from decimal import Decimal

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["CELERY_TASK_ALWAYS_EAGER"] = "1"
os.environ["JWT_SECRET"] = "test-secret-key-for-bookstore-tests"
os.environ["MEDIA_DIR"] = tempfile.mkdtemp(prefix="bookstore-media-")
os.environ["SEED_DEMO_DATA"] = "0"

import pytest
from fastapi.testclient import TestClient

from app.data.database import Base, SessionLocal, engine, init_db
from app.data.models import BookModel, Role
from app.services.user_service import UserService


# ============================================================================
# Database Fixtures
# ============================================================================

@pytest.fixture(autouse=True)
def reset_db():
    """Fresh schema for every test."""
    init_db()
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def seller(db):
    user, _ = UserService(db).signup(Role.SELLER, "Sam Seller", "sam@mail.com", "secret123")
    return user


@pytest.fixture
def other_seller(db):
    user, _ = UserService(db).signup(Role.SELLER, "Olive Seller", "olive@mail.com", "secret123")
    return user


@pytest.fixture
def buyer(db):
    user, _ = UserService(db).signup(Role.BUYER, "Bea Buyer", "bea@mail.com", "secret123")
    return user


@pytest.fixture
def make_book(db):
    def _make(seller, title="Dune", price="12.50", stock=3):
        book = BookModel(
            seller_id=seller.id,
            title=title,
            description="",
            price=Decimal(price),
            stock=stock,
        )
        db.add(book)
        db.commit()
        db.refresh(book)
        return book

    return _make


# ============================================================================
# HTTP Fixtures
# ============================================================================

@pytest.fixture
def client():
    from app.main import app

    with TestClient(app) as c:
        yield c


@pytest.fixture
def signup(client):
    """Signs a user up through the API and returns ``(user_json, auth_headers)``."""

    def _signup(role="buyer", name="Test User", email="user@mail.com", password="secret123"):
        resp = client.post(
            "/api/user/signup",
            json={"role": role, "name": name, "email": email, "password": password},
        )
        assert resp.status_code == 201, resp.text
        body = resp.json()
        return body["user"], {"Authorization": f"Bearer {body['token']}"}

    return _signup
