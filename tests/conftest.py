import os
from decimal import Decimal

# point the app at throwaway stores before anything from storefront is imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["STATIC_DIR"] = ""

import fakeredis
import pytest
from fastapi.testclient import TestClient

from storefront.data.database import Base, SessionLocal, engine
from storefront.data.models import ProductModel
from storefront.data.redis_client import get_redis
from storefront.main import create_app
from storefront.services.lock_service import LockService
from storefront.services.session_store import SessionStore

CATALOG = [
    (1, "Shake Weight", Decimal("29.99")),
    (2, "ShamWow", Decimal("26.95")),
    (3, "Snuggie", Decimal("19.99")),
]


@pytest.fixture()
def db():
    Base.metadata.create_all(bind=engine)
    session = SessionLocal()

    yield session

    session.close()
    Base.metadata.drop_all(bind=engine)


@pytest.fixture()
def products(db):
    rows = [
        ProductModel(
            product_id=product_id,
            name=name,
            price=price,
            image=f"/images/{product_id}.jpg",
            short_description=f"{name} in short",
            long_description=f"{name} at length",
        )
        for product_id, name, price in CATALOG
    ]
    db.add_all(rows)
    db.commit()
    return {p.product_id: p for p in rows}


@pytest.fixture()
def redis_client():
    return fakeredis.FakeRedis(decode_responses=True)


@pytest.fixture()
def session_store(redis_client):
    return SessionStore(client=redis_client)


@pytest.fixture()
def lock_service(redis_client):
    return LockService(client=redis_client, ttl=5, wait=0.3)


@pytest.fixture()
def app(db, redis_client):
    app = create_app(static_dir=None)
    app.dependency_overrides[get_redis] = lambda: redis_client

    yield app

    app.dependency_overrides.clear()


@pytest.fixture()
def client(app):
    return TestClient(app)
