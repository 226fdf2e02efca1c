"""
Error kinds raised by the dataset layer and the word parser.

The session state machine never raises; a wrong attempt is an
``incorrect`` outcome, not an error.
"""

from __future__ import annotations


class DatasetError(Exception):
    """Base class for errors surfaced to the user with a short message."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(DatasetError):
    """Malformed or out-of-bound input."""

    status_code = 400

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message)
        self.field = field


class NotFoundError(DatasetError):
    """No dataset matches a well-formed id."""

    status_code = 404


class StorageUnavailable(DatasetError):
    """The store is unreachable or an operation failed unexpectedly."""

    status_code = 500


class EmptyInputError(DatasetError):
    """Parsed text or file produced no words."""

    status_code = 400
