"""
Error types shared by the HTTP client and the client‑side view layer.

Failures reported by the API are split by how the user should be told
about them: ``ValidationFailure`` belongs next to the form,
``NotFoundFailure`` is a dismissible notice and ``TransportFailure``
comes with a retry.  ``DataConsistencyError`` and
``RecordNotFoundError`` are raised by the mutation reconciler when the
local cache disagrees with a confirmed server response.
"""

from typing import Any, Optional


class DirectoryError(Exception):
    """Base class for every error raised by the directory client."""


class ValidationFailure(DirectoryError):
    """The server rejected a create or update payload (HTTP 400/422)."""

    def __init__(self, message: str, details: Optional[Any] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details


class NotFoundFailure(DirectoryError):
    """The update or delete target no longer exists on the server."""


class TransportFailure(DirectoryError):
    """The API was unreachable or answered with an unexpected status or body."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class DataConsistencyError(DirectoryError):
    """A created record's id is already present in the local cache."""


class RecordNotFoundError(DirectoryError):
    """An updated record is missing from the local cache."""
