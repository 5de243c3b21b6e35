"""Application query – SortField and the immutable Query value."""
from __future__ import annotations

import dataclasses
from enum import Enum
from typing import Any

from jsondb_client.application.query.filters import Filter
from jsondb_client.kernel.errors import ValidationError

__all__ = ["Query", "SortField", "SortOrder"]


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"

    @classmethod
    def parse(cls, value: "SortOrder | str") -> "SortOrder":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError as exc:
            raise ValidationError(
                f"Unknown sort order: {value!r}",
                errors=[{"field": "order", "reason": "expected asc or desc"}],
            ) from exc


@dataclasses.dataclass(frozen=True)
class SortField:
    """Single sort criterion; position in ``Query.sort`` is its priority."""

    field: str
    order: SortOrder = SortOrder.ASC

    def __post_init__(self) -> None:
        object.__setattr__(self, "order", SortOrder.parse(self.order))

    @classmethod
    def asc(cls, field: str) -> "SortField":
        return cls(field, SortOrder.ASC)

    @classmethod
    def desc(cls, field: str) -> "SortField":
        return cls(field, SortOrder.DESC)

    def to_dict(self) -> dict[str, str]:
        return {"field": self.field, "order": self.order.value}


def check_bound(name: str, value: int | None) -> None:
    if value is None:
        return
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ValidationError(
            f"{name} must be a non-negative integer, got {value!r}",
            errors=[{"field": name, "reason": "must be >= 0"}],
        )


@dataclasses.dataclass(frozen=True)
class Query:
    """A search over one collection.

    ``filter=None`` matches every document of the collection.  ``offset``
    skips that many matches before the first returned result.
    """

    collection: str
    filter: Filter | None = None
    sort: tuple[SortField, ...] = ()
    limit: int | None = None
    offset: int | None = None
    projection: tuple[str, ...] | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.collection, str) or not self.collection.strip():
            raise ValidationError(
                "Query collection must be a non-empty string",
                errors=[{"field": "collection", "reason": "empty"}],
            )
        check_bound("limit", self.limit)
        check_bound("offset", self.offset)
        object.__setattr__(self, "sort", tuple(self.sort))
        if self.projection is not None:
            object.__setattr__(self, "projection", tuple(self.projection))

    def with_sort_prefix(self, field: SortField) -> "Query":
        """Return a copy with *field* inserted as the primary sort key."""
        return dataclasses.replace(self, sort=(field, *self.sort))

    def with_limit(self, limit: int | None) -> "Query":
        return dataclasses.replace(self, limit=limit)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON shape expected by ``jsondb_execute_query``."""
        payload: dict[str, Any] = {
            "collection": self.collection,
            "sort": [s.to_dict() for s in self.sort],
        }
        if self.filter is not None:
            payload["filter"] = self.filter.to_dict()
        if self.limit is not None:
            payload["limit"] = self.limit
        if self.offset is not None:
            payload["offset"] = self.offset
        if self.projection is not None:
            payload["projection"] = list(self.projection)
        return payload
