import pytest

from catalog import BookStore, CatalogService
from utils.ui_helpers import OUTPUT_MODE_ENV


@pytest.fixture(autouse=True)
def plain_output(monkeypatch):
    # The CLI writes the chosen mode into the environment; keep tests isolated
    monkeypatch.setenv(OUTPUT_MODE_ENV, "plain")


@pytest.fixture
def store():
    # Fresh seeded store (ids 1-3) for every test
    return BookStore()


@pytest.fixture
def empty_store():
    return BookStore(books=[])


@pytest.fixture
def service(store):
    return CatalogService(store)
