"""
Shared fixtures: an in-memory SQLite persistence client and an app built around it.
"""
import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool

from shop_api.app import create_app
from shop_api.config import Settings
from shop_api.database import Database


@pytest.fixture
def settings() -> Settings:
    return Settings(SERVICE_NAME="Shop API Test", ENV="test", LOG_LEVEL="WARNING")


@pytest.fixture
def database():
    database = Database("sqlite://", poolclass=StaticPool)
    database.init()
    yield database
    database.shutdown()


@pytest.fixture
def session(database):
    db = database.SessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def client(database, settings):
    app = create_app(database=database, settings=settings)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def make_user(client):
    def _make_user(email="a@x.com", name="A"):
        response = client.post("/users", json={"email": email, "name": name})
        assert response.status_code == 201, response.text
        return response.json()
    return _make_user


@pytest.fixture
def make_store(client, make_user):
    def _make_store(name="S", user_id=None):
        if user_id is None:
            user_id = make_user(email=f"owner-{name.lower()}@x.com", name=f"Owner {name}")["id"]
        response = client.post("/stores", json={"name": name, "userId": user_id})
        assert response.status_code == 201, response.text
        return response.json()
    return _make_store


@pytest.fixture
def make_product(client, make_store):
    def _make_product(name="P", price=10.5, store_id=None):
        if store_id is None:
            store_id = make_store(name=f"Store for {name}")["id"]
        response = client.post("/products", json={"name": name, "price": price, "storeId": store_id})
        assert response.status_code == 201, response.text
        return response.json()
    return _make_product
