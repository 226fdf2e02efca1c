"""
MongoDB repository for word-list datasets.

Provides insert, search and lookup over the ``datasets`` collection.
Validation happens before anything reaches this module.
"""

from __future__ import annotations

import os
import re
from typing import Optional

from bson import ObjectId
from dotenv import load_dotenv
from pymongo import DESCENDING, MongoClient
from pymongo.collection import Collection
from pymongo.server_api import ServerApi

from core.constants import LIST_PAGE_SIZE
from core.errors import StorageUnavailable
from core.schemas import DatasetDocument

# Load environment
load_dotenv()

# Configuration
DB_NAME = "vibelearn"
TEST_DB_NAME = "vibelearn_test"
COLLECTION_NAME = "datasets"
SEARCH_FIELDS = ("name", "username", "description")

# Global connection pool (reused across requests)
_client: Optional[MongoClient] = None
_collection: Optional[Collection] = None


# ---- Connection Management ----

def is_test_mode() -> bool:
    """Check if running in test mode."""
    return os.getenv("TEST_MODE", "false").lower() == "true"


def get_db_name() -> str:
    return TEST_DB_NAME if is_test_mode() else DB_NAME


def get_collection() -> Collection:
    """
    Get the MongoDB datasets collection.

    The client is created once per process and its connection pool is
    reused for every request.

    Returns:
        MongoDB collection object

    Raises:
        StorageUnavailable: If MONGO_URI is not configured
    """
    global _client, _collection

    if _collection is not None:
        return _collection

    mongo_uri = os.getenv("MONGO_URI")
    if not mongo_uri:
        raise StorageUnavailable(
            "Missing MONGO_URI. Set it in your environment to enable dataset storage."
        )

    _client = MongoClient(
        mongo_uri,
        server_api=ServerApi("1"),
        maxPoolSize=10,
        minPoolSize=1,
        maxIdleTimeMS=60000,
        serverSelectionTimeoutMS=5000,
        tz_aware=True,
    )
    _collection = _client[get_db_name()][COLLECTION_NAME]

    return _collection


def close_connection() -> None:
    """Close the pooled client (used on API shutdown)."""
    global _client, _collection
    if _client is not None:
        _client.close()
    _client = None
    _collection = None


def ensure_indexes() -> None:
    """Create the index backing newest-first listing."""
    get_collection().create_index([("createdAt", DESCENDING)], name="createdAt_desc")


# ---- Queries ----

def build_search_filter(query: Optional[str]) -> dict:
    """
    Case-insensitive substring filter over name, username and description.

    An empty query matches every dataset.
    """
    query = (query or "").strip()
    if not query:
        return {}
    pattern = re.escape(query)
    return {
        "$or": [
            {field: {"$regex": pattern, "$options": "i"}}
            for field in SEARCH_FIELDS
        ]
    }


def insert_dataset(document: DatasetDocument) -> dict:
    """
    Insert a validated dataset.

    Returns:
        The stored document including its new ``_id``
    """
    doc = document.to_mongo()
    result = get_collection().insert_one(doc)
    doc["_id"] = result.inserted_id
    return doc


def find_datasets(query: Optional[str] = None, limit: int = LIST_PAGE_SIZE) -> list[dict]:
    """
    Search datasets, newest first, without their word lists.
    """
    cursor = (
        get_collection()
        .find(build_search_filter(query), projection={"words": 0})
        .sort("createdAt", DESCENDING)
        .limit(limit)
    )
    return list(cursor)


def find_dataset_by_id(dataset_id: ObjectId) -> Optional[dict]:
    """
    Get a full dataset by id.

    Returns:
        Dataset document, or None if not found
    """
    return get_collection().find_one({"_id": dataset_id})


def count_datasets() -> int:
    return get_collection().count_documents({})
