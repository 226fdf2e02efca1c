"""
Dataset service - the boundary between callers and the store.

Validates input before any write, converts storage failures into a
generic StorageUnavailable and logs the underlying cause.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Optional

from bson import ObjectId
from pymongo.errors import PyMongoError

from core import dataset_repo
from core.errors import NotFoundError, StorageUnavailable, ValidationError
from core.schemas import (
    DatasetDetail,
    DatasetDocument,
    DatasetSummary,
    validate_dataset_payload,
)

logger = logging.getLogger(__name__)

LIST_FAILED = "Unable to load word lists right now. Please try again later."
CREATE_FAILED = "Unable to save that word list. Please try again later."
GET_FAILED = "Unable to load that word list. Please try again later."


def create_dataset(payload: Any) -> DatasetSummary:
    """
    Validate and store a new word list.

    Args:
        payload: Raw request body with name, username, description, words

    Returns:
        Summary of the stored dataset

    Raises:
        ValidationError: First violated constraint (nothing is stored)
        StorageUnavailable: Insert failed
    """
    request = validate_dataset_payload(payload)
    document = DatasetDocument.from_create(request, created_at=datetime.now(timezone.utc))

    try:
        stored = dataset_repo.insert_dataset(document)
    except (PyMongoError, StorageUnavailable):
        logger.exception("Failed to create dataset %r", request.name)
        raise StorageUnavailable(CREATE_FAILED)

    logger.info("Created dataset %s (%d words)", stored["_id"], document.word_count)
    return DatasetSummary.from_mongo(stored)


def list_datasets(query: Optional[str] = None) -> list[DatasetSummary]:
    """
    Newest datasets matching the query (all datasets when it is empty).
    """
    try:
        docs = dataset_repo.find_datasets(query)
    except (PyMongoError, StorageUnavailable):
        logger.exception("Failed to load datasets for query %r", query)
        raise StorageUnavailable(LIST_FAILED)
    return [DatasetSummary.from_mongo(doc) for doc in docs]


def parse_dataset_id(dataset_id: Optional[str]) -> ObjectId:
    """
    Raises:
        ValidationError: Missing or malformed id
    """
    if not dataset_id:
        raise ValidationError("Missing dataset id.", field="id")
    if not ObjectId.is_valid(dataset_id):
        raise ValidationError("Invalid dataset id.", field="id")
    return ObjectId(dataset_id)


def get_dataset(dataset_id: Optional[str]) -> DatasetDetail:
    """
    Full dataset including its words.

    Raises:
        ValidationError: Missing or malformed id
        NotFoundError: No dataset with that id
        StorageUnavailable: Lookup failed
    """
    object_id = parse_dataset_id(dataset_id)

    try:
        doc = dataset_repo.find_dataset_by_id(object_id)
    except (PyMongoError, StorageUnavailable):
        logger.exception("Failed to load dataset %s", dataset_id)
        raise StorageUnavailable(GET_FAILED)

    if doc is None:
        raise NotFoundError("Word list not found.")
    return DatasetDetail.from_mongo(doc)
