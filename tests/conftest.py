import pytest
from fastapi.testclient import TestClient

from main import create_app
from repositories.order_store import OrderStore


@pytest.fixture
def order_store():
    return OrderStore()


@pytest.fixture
def client(order_store):
    return TestClient(create_app(order_store))
