"""
Exception hierarchy for the Sports Community application.

Raised by domain models, repositories and use cases. Controllers catch these
per request and render them as HTML fragments; every error carries a list of
user-facing messages.
"""

# -----------------------------------------------------------------------------
# Standard library
# -----------------------------------------------------------------------------
from typing import Iterable, List, Optional


# -----------------------------------------------------------------------------
# Base
# -----------------------------------------------------------------------------


class SportsCommunityError(Exception):
    """Base exception for all Sports Community errors."""

    def __init__(self, message: str, errors: Optional[Iterable[str]] = None):
        super().__init__(message)
        self.message = message
        self.errors: List[str] = list(errors) if errors else [message]


# -----------------------------------------------------------------------------
# Validation
# -----------------------------------------------------------------------------


class FieldValidationError(SportsCommunityError):
    """Raised when one or more record fields fail validation."""

    def __init__(self, errors: Iterable[str], entity: str = "Record"):
        errors = list(errors)
        super().__init__(f"{entity} validation failed: {'; '.join(errors)}", errors)
        self.entity = entity


# -----------------------------------------------------------------------------
# Lookup / storage
# -----------------------------------------------------------------------------


class RecordNotFoundError(SportsCommunityError):
    """Raised when a write targets a record that does not exist."""

    def __init__(self, entity: str, record_id: str):
        super().__init__(f"{entity} {record_id} not found")
        self.entity = entity
        self.record_id = record_id


class PersistenceError(SportsCommunityError):
    """Raised when the document store is unavailable or an operation fails."""
