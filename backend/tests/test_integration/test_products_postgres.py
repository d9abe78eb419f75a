"""
End-to-end tests against a real PostgreSQL database

Run with TEST_DATABASE_URL pointing at a disposable database; every test
drops and recreates the products table.
"""
import pytest
from fastapi.testclient import TestClient

from catalog.core.config import Settings
from catalog.core.container import build_container
from catalog.core.database import Database
from catalog.main import create_app


@pytest.fixture
def database(test_database_url):
    db = Database(test_database_url, max_retries=1)
    db.reset_schema()
    yield db
    db.dispose()


@pytest.fixture
def pg_client(database, test_database_url):
    settings = Settings(_env_file=None, APP_ENV="test", DATABASE_URL=test_database_url)
    container = build_container(settings, database=database)
    with TestClient(create_app(settings=settings, container=container)) as test_client:
        yield test_client


def test_ping(database):
    assert database.ping() >= 0


def test_empty_table_answers_404(pg_client):
    response = pg_client.get("/api/products")

    assert response.status_code == 404
    assert response.json()["code"] == "PRODUCT_NOT_FOUND"


def test_create_then_list(pg_client):
    created = pg_client.post("/api/products", json={"name": "Widget", "price": 9.99, "stock": 5})
    pg_client.post("/api/products", json={"name": "Anvil", "price": 50, "stock": 0})

    assert created.status_code == 201
    assert len(created.json()["id"]) == 36

    listed = pg_client.get("/api/products").json()
    assert [product["name"] for product in listed] == ["Anvil", "Widget"]
    assert listed[1]["price"] == 9.99


def test_duplicate_name_is_rejected(pg_client):
    pg_client.post("/api/products", json={"name": "Widget", "price": 9.99, "stock": 5})

    response = pg_client.post("/api/products", json={"name": "Widget", "price": 1, "stock": 1})

    assert response.status_code == 400
    assert response.json()["code"] == "PRODUCT_ALREADY_EXISTS"
    assert len(pg_client.get("/api/products").json()) == 1


def test_health_reports_connected(pg_client):
    response = pg_client.get("/health")

    assert response.status_code == 200
    assert response.json()["database"]["status"] == "connected"
