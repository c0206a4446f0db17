from __future__ import annotations

from typing import Iterable, Optional


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is missing or malformed.

    `errors` carries one message per offending field.
    """

    def __init__(self, message: str, errors: Optional[Iterable[str]] = None):
        super().__init__(message)
        self.errors = list(errors or [])


class ConflictError(DomainError):
    """Raised when a unique key (e.g. external student ID) is already taken."""


class NotFoundError(DomainError):
    """Raised when an operation targets an identifier that does not exist."""


class UpstreamError(DomainError):
    """Raised when an external source (e.g. a shared spreadsheet) cannot be read."""
