import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(ROOT))

import mongomock
import pytest
from fastapi.testclient import TestClient

from flashdeck.config import get_settings
from flashdeck.main import create_app

settings = get_settings()


@pytest.fixture()
def mongo():
    return mongomock.MongoClient()


@pytest.fixture()
def db(mongo):
    return mongo[settings.database_name]


@pytest.fixture()
def gemini(db):
    return db[settings.gemini_collection]


@pytest.fixture()
def gpt(db):
    return db[settings.gpt_collection]


@pytest.fixture()
def app(mongo):
    return create_app(settings, client_factory=lambda s: mongo)


@pytest.fixture()
def client(app):
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


def seed(collection, ids, **extra) -> None:
    collection.insert_many([{"_id": i, "question": f"q{i}", **extra} for i in ids])


class FixedRng:
    """Stand-in random source that always picks the given offset (or the last one)."""

    def __init__(self, offset=None):
        self.offset = offset
        self.calls = []

    def randrange(self, n):
        self.calls.append(n)
        return n - 1 if self.offset is None else self.offset
