"""Shared pytest fixtures: an in-memory database, the stores and an API client."""

import base64
from datetime import datetime, timedelta

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

import app.models  # noqa: F401
from app.core.config import settings
from app.db.session import get_session
from app.main import app as fastapi_app
from app.models.product import ProductWrite
from app.services.cart import CartStore
from app.services.catalog import CatalogService
from app.services.product import ProductStore

ADMIN_PASSWORD = "test-secret"

PNG_BYTES = b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR\x00\x00\x00\x01"
PNG_DATA_URI = "data:image/png;base64," + base64.b64encode(PNG_BYTES).decode("ascii")


class FakeClock:
    """Controllable replacement for ``utcnow``."""

    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def product_store(session) -> ProductStore:
    return ProductStore(session, admin_password=ADMIN_PASSWORD, max_image_bytes=1024)


@pytest.fixture
def catalog(product_store) -> CatalogService:
    return CatalogService(product_store)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock(datetime(2026, 1, 1, 12, 0, 0))


@pytest.fixture
def cart_store(session, catalog, clock) -> CartStore:
    return CartStore(session, catalog, ttl=timedelta(hours=24), clock=clock)


@pytest.fixture
def make_product(product_store):
    """Create a product with sensible defaults and return its id."""

    def _make(**overrides) -> str:
        fields = {
            "title": "Velvet sofa",
            "description": "Three seater",
            "price": "1000",
            "category": "furnitures",
            "subCategory": "home",
        }
        fields.update(overrides)
        return product_store.create(ProductWrite(**fields), password=ADMIN_PASSWORD)

    return _make


@pytest.fixture
def client(engine, monkeypatch):
    def _get_test_session():
        with Session(engine) as session:
            yield session

    monkeypatch.setattr(settings, "ADMIN_PASSWORD", ADMIN_PASSWORD)
    fastapi_app.dependency_overrides[get_session] = _get_test_session
    yield TestClient(fastapi_app)
    fastapi_app.dependency_overrides.clear()
