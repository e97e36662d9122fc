import os
import tempfile

# database.py creates its tables on import; keep that file out of the repo.
os.environ.setdefault(
    "ATHLETEEDGE_DB_PATH", os.path.join(tempfile.gettempdir(), "athleteedge-test.db")
)

import pytest

import database as db
from analytics_engine.models import Player, PlayerRole


@pytest.fixture
def store(tmp_path, monkeypatch):
    """A fresh sqlite file per test."""
    monkeypatch.setattr(db, "DB_PATH", str(tmp_path / "athleteedge.db"))
    db.init_db()
    return db


@pytest.fixture
def client(store):
    from app import app

    app.config["TESTING"] = True
    with app.test_client() as c:
        yield c


@pytest.fixture
def make_player():
    def _make(**overrides) -> Player:
        fields = {"id": "p1", "name": "Test Player", "role": PlayerRole.BATSMAN}
        fields.update(overrides)
        return Player(**fields)

    return _make
