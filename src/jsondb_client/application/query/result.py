"""Application query – QueryResult container."""
from __future__ import annotations

import dataclasses
from typing import Any, Mapping

from jsondb_client.kernel.errors import MalformedResponseError
from jsondb_client.kernel.types import Document

__all__ = ["QueryResult"]


@dataclasses.dataclass(frozen=True)
class QueryResult:
    """Documents returned by the backend, in backend order.

    ``total_count`` is the number of matches before pagination.
    """

    documents: list[Document]
    total_count: int
    offset: int = 0
    limit: int | None = None

    @property
    def has_more(self) -> bool:
        return self.offset + len(self.documents) < self.total_count

    @classmethod
    def from_response(cls, response: Any, *, command: str | None = None) -> "QueryResult":
        """Interpret a ``{documents, total_count, ...}`` response.

        Raises :class:`MalformedResponseError` instead of guessing when the
        shape is not understood.
        """
        if not isinstance(response, Mapping):
            raise MalformedResponseError(
                f"Expected an object with 'documents', got {type(response).__name__}",
                command=command,
                payload_type=type(response).__name__,
            )
        documents = response.get("documents")
        if not isinstance(documents, list) or not all(isinstance(d, Mapping) for d in documents):
            raise MalformedResponseError(
                "Response 'documents' must be a list of objects",
                command=command,
                payload_type=type(documents).__name__,
            )
        total = response.get("total_count", len(documents))
        offset = response.get("offset") or 0
        limit = response.get("limit")
        if isinstance(total, bool) or not isinstance(total, int):
            raise MalformedResponseError(
                f"Response 'total_count' must be an integer, got {total!r}",
                command=command,
            )
        return cls(
            documents=list(documents),
            total_count=total,
            offset=offset if isinstance(offset, int) else 0,
            limit=limit if isinstance(limit, int) else None,
        )
