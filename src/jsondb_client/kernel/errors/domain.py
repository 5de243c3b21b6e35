"""Domain errors – invalid queries, filters and staged operations."""

from __future__ import annotations

from typing import Any

from jsondb_client.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when a client-side rule is violated before anything is sent."""

    default_code = "domain_error"


class ValidationError(DomainError):
    """Input does not meet the construction rules of a query or operation.

    ``errors`` is a list of field-level failures, e.g.
    ``[{"field": "limit", "reason": "must be >= 0"}]``.
    """

    default_code = "validation_error"

    def __init__(
        self,
        message: str,
        *,
        errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.errors: list[dict[str, Any]] = errors or []

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["errors"] = self.errors
        return base


__all__ = ["DomainError", "ValidationError"]
