import random

import pytest
from fastapi.testclient import TestClient

from book_store_api.app.main import create_app
from book_store_api.app.services.book_service import BookStore


@pytest.fixture
def store():
    # Seeded store with a deterministic random source for recommendations
    return BookStore(rng=random.Random(1234))


@pytest.fixture
def empty_store():
    return BookStore(seed=False)


@pytest.fixture
def client(store):
    app = create_app(store=store)
    with TestClient(app) as test_client:
        yield test_client
