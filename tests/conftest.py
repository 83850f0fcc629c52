"""
Shared fixtures for storefront tests.

The service runs against an in-memory SQLite database (StaticPool, one shared
connection), Celery in eager mode and an in-memory lock service. The current
user and the lock service are replaced through FastAPI dependency overrides.
"""
import os

# Must be set before any storefront module reads settings
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["CELERY_TASK_ALWAYS_EAGER"] = "1"
os.environ["CELERY_BROKER_URL"] = "memory://"
os.environ["CELERY_RESULT_BACKEND"] = "cache+memory://"

from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from storefront.api.deps import get_current_user, get_lock_service
from storefront.data.database import Base, SessionLocal, engine
from storefront.data.models import ProductModel
from storefront.main import app
from tests.helpers import InMemoryLockService, TEST_USER


@pytest.fixture(autouse=True)
def clean_database():
    """Fresh schema for every test."""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def products():
    """
    Catalog used across tests:
    - product_a: price 10.00, stock 10
    - product_b: price 5.00, stock 10
    - sold_out: price 7.50, stock 0
    """
    with SessionLocal() as db:
        a = ProductModel(name="Product A", price=Decimal("10.00"), category="Electronics",
                         image_url="/a.jpg", stock=10)
        b = ProductModel(name="Product B", price=Decimal("5.00"), category="Clothing",
                         image_url="/b.jpg", stock=10, sizes=["S", "M"])
        c = ProductModel(name="Sold Out", price=Decimal("7.50"), category="Home",
                         image_url="/c.jpg", stock=0)
        db.add_all([a, b, c])
        db.commit()
        return {"product_a": a.id, "product_b": b.id, "sold_out": c.id}


@pytest.fixture
def lock_service():
    return InMemoryLockService()


def _client_for(user, lock_service):
    app.dependency_overrides[get_current_user] = lambda: user
    app.dependency_overrides[get_lock_service] = lambda: lock_service
    return TestClient(app)


@pytest.fixture
def client(lock_service):
    """TestClient authenticated as TEST_USER."""
    yield _client_for(TEST_USER, lock_service)
    app.dependency_overrides.clear()


@pytest.fixture
def anon_client(lock_service):
    """TestClient without a signed in user."""
    yield _client_for(None, lock_service)
    app.dependency_overrides.clear()
