"""
Tests for create-request validation and dataset views.
"""

from datetime import datetime, timezone

import pytest
from bson import ObjectId

from core.errors import ValidationError
from core.schemas import (
    DatasetDetail,
    DatasetDocument,
    DatasetSummary,
    validate_dataset_payload,
)


def test_valid_payload_is_trimmed(valid_payload):
    valid_payload.update(name="  Morning focus ", words=[" energy ", "", None, "flow"])
    request = validate_dataset_payload(valid_payload)
    assert request.name == "Morning focus"
    assert request.words == ["energy", "flow"]


def test_blank_description_is_dropped(valid_payload):
    valid_payload["description"] = "   "
    assert validate_dataset_payload(valid_payload).description is None


@pytest.mark.parametrize("changes, message, field", [
    ({"name": "   "}, "Name and username are required.", "name"),
    ({"username": 42}, "Name and username are required.", "username"),
    ({"name": "n" * 81}, "List name cannot exceed 80 characters.", "name"),
    ({"username": "u" * 41}, "Username cannot exceed 40 characters.", "username"),
    ({"description": "d" * 241}, "Description cannot exceed 240 characters.", "description"),
    ({"words": []}, "Provide at least one word for your list.", "words"),
    ({"words": "energy flow"}, "Provide at least one word for your list.", "words"),
    ({"words": ["  ", ""]}, "Provide at least one word for your list.", "words"),
    ({"words": ["w"] * 1001}, "Lists are limited to 1000 words for now.", "words"),
])
def test_single_violation(valid_payload, changes, message, field):
    valid_payload.update(changes)
    with pytest.raises(ValidationError) as exc:
        validate_dataset_payload(valid_payload)
    assert exc.value.message == message
    assert exc.value.field == field


def test_oversized_word_is_named(valid_payload):
    long_word = "x" * 60
    valid_payload["words"] = ["energy", long_word]
    with pytest.raises(ValidationError) as exc:
        validate_dataset_payload(valid_payload)
    assert "48 characters or fewer" in exc.value.message
    assert long_word in exc.value.message


def test_first_violation_wins(valid_payload):
    valid_payload.update(
        name="n" * 81,
        username="u" * 41,
        description="d" * 241,
        words=["x" * 60],
    )
    with pytest.raises(ValidationError, match="List name"):
        validate_dataset_payload(valid_payload)

    valid_payload["name"] = "ok"
    with pytest.raises(ValidationError, match="Username"):
        validate_dataset_payload(valid_payload)

    valid_payload["username"] = "ok"
    with pytest.raises(ValidationError, match="Description"):
        validate_dataset_payload(valid_payload)

    valid_payload["description"] = ""
    with pytest.raises(ValidationError, match="48 characters"):
        validate_dataset_payload(valid_payload)


def test_non_object_body_is_rejected():
    with pytest.raises(ValidationError, match="JSON object"):
        validate_dataset_payload(["energy"])


def test_document_word_count_matches_words(valid_payload):
    created = datetime(2026, 3, 1, tzinfo=timezone.utc)
    document = DatasetDocument.from_create(validate_dataset_payload(valid_payload), created)
    stored = document.to_mongo()
    assert stored["wordCount"] == len(stored["words"]) == 3
    assert stored["createdAt"] == created


def test_views_from_mongo():
    doc = {
        "_id": ObjectId(),
        "name": "Focus",
        "username": "ada",
        "description": None,
        "words": ["energy"],
        "wordCount": 1,
        "createdAt": datetime(2026, 3, 1, tzinfo=timezone.utc),
    }
    summary = DatasetSummary.from_mongo(doc).model_dump(by_alias=True, mode="json")
    assert summary["id"] == str(doc["_id"])
    assert summary["description"] == ""
    assert summary["wordCount"] == 1
    assert "words" not in summary

    detail = DatasetDetail.from_mongo(doc)
    assert detail.words == ["energy"]
