"""
Pydantic models for word-list datasets.

These models define the shape of MongoDB documents, the validated create
request and the summary/detail views returned by the API.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, Field

from core.constants import (
    MAX_DATASET_WORDS,
    MAX_DESCRIPTION_LENGTH,
    MAX_NAME_LENGTH,
    MAX_USERNAME_LENGTH,
    MAX_WORD_LENGTH,
)
from core.errors import ValidationError


# ---- Create Request ----

class DatasetCreate(BaseModel):
    """
    A create request that passed validation.

    Only build this through validate_dataset_payload(), which enforces
    the limits in a fixed order and reports the first violation.
    """
    name: str = Field(..., min_length=1, max_length=MAX_NAME_LENGTH)
    username: str = Field(..., min_length=1, max_length=MAX_USERNAME_LENGTH)
    description: Optional[str] = Field(default=None, max_length=MAX_DESCRIPTION_LENGTH)
    words: list[str] = Field(..., min_length=1, max_length=MAX_DATASET_WORDS)


def _text_or_none(value: Any) -> Optional[str]:
    return value.strip() if isinstance(value, str) else None


def validate_dataset_payload(payload: Any) -> DatasetCreate:
    """
    Validate a raw create request body.

    Checks run in this order and the first failure is raised:
    missing name/username, name length, username length, description
    length, empty word list, word count, individual word length.

    Args:
        payload: Decoded JSON body (any shape)

    Returns:
        DatasetCreate with trimmed fields and empty words removed

    Raises:
        ValidationError: Naming the violated constraint
    """
    if not isinstance(payload, dict):
        raise ValidationError("Request body must be a JSON object.")

    name = _text_or_none(payload.get("name")) or ""
    username = _text_or_none(payload.get("username")) or ""
    description = _text_or_none(payload.get("description"))
    raw_words = payload.get("words")

    if not name or not username:
        raise ValidationError(
            "Name and username are required.",
            field="name" if not name else "username",
        )

    if len(name) > MAX_NAME_LENGTH:
        raise ValidationError(
            f"List name cannot exceed {MAX_NAME_LENGTH} characters.", field="name"
        )

    if len(username) > MAX_USERNAME_LENGTH:
        raise ValidationError(
            f"Username cannot exceed {MAX_USERNAME_LENGTH} characters.", field="username"
        )

    if description and len(description) > MAX_DESCRIPTION_LENGTH:
        raise ValidationError(
            f"Description cannot exceed {MAX_DESCRIPTION_LENGTH} characters.",
            field="description",
        )

    if not isinstance(raw_words, list) or not raw_words:
        raise ValidationError("Provide at least one word for your list.", field="words")

    if len(raw_words) > MAX_DATASET_WORDS:
        raise ValidationError(
            f"Lists are limited to {MAX_DATASET_WORDS} words for now.", field="words"
        )

    words = ["" if word is None else str(word).strip() for word in raw_words]
    words = [word for word in words if word]

    if not words:
        raise ValidationError("Provide at least one word for your list.", field="words")

    for word in words:
        if len(word) > MAX_WORD_LENGTH:
            raise ValidationError(
                f"Every word must be {MAX_WORD_LENGTH} characters or fewer "
                f"(\"{word}\" has {len(word)}).",
                field="words",
            )

    return DatasetCreate(
        name=name,
        username=username,
        description=description or None,
        words=words,
    )


# ---- MongoDB Document ----

class DatasetDocument(BaseModel):
    """
    A stored word list. One document per dataset in the ``datasets``
    collection; ``wordCount`` always equals ``len(words)``.
    """
    name: str
    username: str
    description: Optional[str] = None
    words: list[str]
    word_count: int = Field(..., alias="wordCount")
    created_at: datetime = Field(..., alias="createdAt")

    class Config:
        populate_by_name = True

    @classmethod
    def from_create(cls, request: DatasetCreate, created_at: datetime) -> "DatasetDocument":
        return cls(
            name=request.name,
            username=request.username,
            description=request.description,
            words=list(request.words),
            word_count=len(request.words),
            created_at=created_at,
        )

    def to_mongo(self) -> dict:
        """Document as stored, using the camelCase field names."""
        return self.model_dump(by_alias=True)


# ---- API Views ----

class DatasetSummary(BaseModel):
    """Every dataset field except the word sequence."""
    id: str
    name: str
    username: str
    description: str = ""
    word_count: int = Field(..., alias="wordCount")
    created_at: datetime = Field(..., alias="createdAt")

    class Config:
        populate_by_name = True

    @classmethod
    def from_mongo(cls, doc: dict) -> "DatasetSummary":
        return cls(**_view_fields(doc))


class DatasetDetail(DatasetSummary):
    """Summary plus the ordered word list."""
    words: list[str] = Field(default_factory=list)

    @classmethod
    def from_mongo(cls, doc: dict) -> "DatasetDetail":
        return cls(**_view_fields(doc), words=doc.get("words", []))


def _view_fields(doc: dict) -> dict:
    return {
        "id": str(doc["_id"]),
        "name": doc["name"],
        "username": doc["username"],
        "description": doc.get("description") or "",
        "word_count": doc.get("wordCount", len(doc.get("words", []))),
        "created_at": doc["createdAt"],
    }
