import dataclasses
import os
import tempfile

# main builds its module-level app on import; keep that database out of the source tree
os.environ.setdefault("PORTFOLIO_DB_DIR", tempfile.mkdtemp(prefix="portfolio-tests-"))

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from config import Settings  # noqa: E402
from main import create_app  # noqa: E402
from record_store import InMemoryRecordStore, SQLiteRecordStore, StoreError  # noqa: E402

JSON = {"Accept": "application/json"}
HTML = {"Accept": "text/html,application/xhtml+xml"}


class BrokenStore(InMemoryRecordStore):
    """Every operation fails the way a lost database connection would."""

    name = "broken"

    def find_one(self, kind):
        raise StoreError("connection refused")

    def count(self, kind):
        raise StoreError("connection refused")

    def _insert(self, record):
        raise StoreError("connection refused")


@pytest.fixture
def memory_store():
    return InMemoryRecordStore()


@pytest.fixture
def sqlite_store(tmp_path):
    store = SQLiteRecordStore(tmp_path / "db" / "portfolio.db")
    store.connect()
    return store


@pytest.fixture(params=["memory", "sqlite"])
def store(request, tmp_path):
    if request.param == "memory":
        return InMemoryRecordStore()
    s = SQLiteRecordStore(tmp_path / "portfolio.db")
    s.connect()
    return s


@pytest.fixture
def settings(tmp_path):
    return Settings(db_dir=tmp_path)


@pytest.fixture
def make_client(settings):
    def _make(store, **overrides):
        app = create_app(dataclasses.replace(settings, **overrides), store=store)
        return TestClient(app)

    return _make


@pytest.fixture
def client(make_client, store):
    return make_client(store)
