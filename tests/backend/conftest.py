from datetime import datetime, timezone
import random

import pytest

import server
from services.ingest_service import QueryIngest
from services.seed_service import seed_store
from services.table_view import DatabaseView
from store import DatasetStore

FIXED_NOW = datetime(2025, 11, 3, 14, 5, 9, 123456, tzinfo=timezone.utc)


@pytest.fixture()
def rng():
    """Deterministic random source per test."""
    return random.Random(1234)


@pytest.fixture()
def isolated_store(rng):
    """Fresh seeded store per test."""
    return seed_store(rng)


@pytest.fixture()
def ingest(isolated_store, rng):
    return QueryIngest(isolated_store, rng=rng, clock=lambda: FIXED_NOW)


@pytest.fixture()
def client_ctx(monkeypatch, isolated_store, ingest, rng):
    """
    Flask test client with isolated backend globals.
    Swaps in a seeded temp store so tests never share dataset state.
    """
    view = DatabaseView(isolated_store)
    monkeypatch.setattr(server, "datastore", isolated_store)
    monkeypatch.setattr(server, "query_ingest", ingest)
    monkeypatch.setattr(server, "database_view", view)
    monkeypatch.setattr(server, "status_rng", rng)

    return {
        "client": server.app.test_client(),
        "store": isolated_store,
        "ingest": ingest,
        "view": view,
    }


@pytest.fixture()
def empty_store():
    return DatasetStore()
