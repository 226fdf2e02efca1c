"""
Shared pytest fixtures.

Storage tests run against FakeCollection, an in-memory stand-in for the
subset of the pymongo Collection API that core.dataset_repo uses.
"""

from __future__ import annotations

import copy
import re
from datetime import datetime, timedelta, timezone
from types import SimpleNamespace

import pytest
from bson import ObjectId
from pymongo import DESCENDING
from pymongo.errors import ServerSelectionTimeoutError

from core import dataset_repo


def _matches(doc: dict, query: dict) -> bool:
    for key, condition in query.items():
        if key == "$or":
            if not any(_matches(doc, sub) for sub in condition):
                return False
        elif isinstance(condition, dict) and "$regex" in condition:
            flags = re.IGNORECASE if "i" in condition.get("$options", "") else 0
            value = doc.get(key)
            if not isinstance(value, str) or not re.search(condition["$regex"], value, flags):
                return False
        elif doc.get(key) != condition:
            return False
    return True


class FakeCursor:
    def __init__(self, docs: list[dict]):
        self._docs = docs

    def sort(self, key, direction):
        self._docs.sort(key=lambda d: d[key], reverse=direction == DESCENDING)
        return self

    def limit(self, count: int):
        self._docs = self._docs[:count]
        return self

    def __iter__(self):
        return iter(self._docs)


class FakeCollection:
    def __init__(self):
        self.docs: list[dict] = []
        self.indexes: list[tuple] = []
        self.down = False

    def _check(self):
        if self.down:
            raise ServerSelectionTimeoutError("connection refused")

    def insert_one(self, doc: dict):
        self._check()
        doc.setdefault("_id", ObjectId())
        self.docs.append(copy.deepcopy(doc))
        return SimpleNamespace(inserted_id=doc["_id"])

    def find(self, query: dict, projection: dict | None = None):
        self._check()
        hidden = {k for k, v in (projection or {}).items() if not v}
        found = [
            {k: v for k, v in copy.deepcopy(doc).items() if k not in hidden}
            for doc in self.docs
            if _matches(doc, query)
        ]
        return FakeCursor(found)

    def find_one(self, query: dict):
        self._check()
        for doc in self.docs:
            if _matches(doc, query):
                return copy.deepcopy(doc)
        return None

    def count_documents(self, query: dict) -> int:
        self._check()
        return sum(1 for doc in self.docs if _matches(doc, query))

    def create_index(self, keys, name=None):
        self._check()
        self.indexes.append((tuple(keys), name))
        return name


@pytest.fixture
def collection(monkeypatch):
    fake = FakeCollection()
    monkeypatch.setattr(dataset_repo, "get_collection", lambda: fake)
    return fake


@pytest.fixture
def stored_dataset(collection):
    """Insert a dataset document directly and return it."""
    def _store(name="Focus", username="ada", description="", words=("energy", "clarity", "flow"),
               age_minutes=0):
        doc = {
            "name": name,
            "username": username,
            "description": description or None,
            "words": list(words),
            "wordCount": len(words),
            "createdAt": datetime(2026, 1, 1, tzinfo=timezone.utc) - timedelta(minutes=age_minutes),
        }
        collection.insert_one(doc)
        return doc
    return _store


@pytest.fixture
def valid_payload():
    return {
        "name": "Morning focus",
        "username": "ada",
        "description": "Three words to start the day",
        "words": ["energy", "clarity", "flow"],
    }
