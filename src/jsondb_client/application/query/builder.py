"""Application query – fluent QueryBuilder."""
from __future__ import annotations

from typing import Any

from jsondb_client.application.query.filters import Comparison, ComparisonOp, Filter, Logical, LogicalOp, Negation
from jsondb_client.application.query.query import Query, SortField, SortOrder, check_bound
from jsondb_client.kernel.errors import ValidationError

__all__ = ["QueryBuilder", "create_query"]


class QueryBuilder:
    """Accumulate a filter tree, a sort sequence and pagination bounds.

    Successive predicates are folded left: with an existing filter ``F``,
    ``where``/``and_`` yield ``And[F, new]`` and ``or_`` yields ``Or[F, new]``.
    The first predicate becomes the filter itself.

    Example::

        query = (
            QueryBuilder("actors")
            .where("kind", "eq", "system")
            .where("name", "startsWith", "Op")
            .order_by("name")
            .limit(20)
            .build()
        )
    """

    def __init__(self, collection: str) -> None:
        if not isinstance(collection, str) or not collection.strip():
            raise ValidationError(
                "Query collection must be a non-empty string",
                errors=[{"field": "collection", "reason": "empty"}],
            )
        self._collection = collection
        self._filter: Filter | None = None
        self._sort: list[SortField] = []
        self._limit: int | None = None
        self._offset: int | None = None
        self._projection: tuple[str, ...] | None = None

    @property
    def collection(self) -> str:
        return self._collection

    @property
    def filter(self) -> Filter | None:
        """The filter accumulated so far (``None`` matches everything)."""
        return self._filter

    def _combine(self, op: LogicalOp, new: Filter) -> "QueryBuilder":
        if self._filter is None:
            self._filter = new
        else:
            self._filter = Logical(op, (self._filter, new))
        return self

    def where(self, field: str, op: ComparisonOp | str, value: Any) -> "QueryBuilder":
        return self._combine(LogicalOp.AND, Comparison(field, ComparisonOp.parse(op), value))

    def and_(self, filter: Filter) -> "QueryBuilder":
        return self._combine(LogicalOp.AND, filter)

    def or_(self, filter: Filter) -> "QueryBuilder":
        return self._combine(LogicalOp.OR, filter)

    def not_(self, filter: Filter | None = None) -> "QueryBuilder":
        """Replace the accumulated filter with ``Not[filter or current]``.

        Does nothing when there is neither an argument nor a current filter.
        """
        target = filter if filter is not None else self._filter
        if target is not None:
            self._filter = Negation(target)
        return self

    def order_by(self, field: str, order: SortOrder | str = SortOrder.ASC) -> "QueryBuilder":
        self._sort.append(SortField(field, SortOrder.parse(order)))
        return self

    def limit(self, n: int) -> "QueryBuilder":
        check_bound("limit", n)
        self._limit = n
        return self

    def offset(self, n: int) -> "QueryBuilder":
        check_bound("offset", n)
        self._offset = n
        return self

    def select(self, *fields: str) -> "QueryBuilder":
        """Restrict returned documents to *fields* (no argument clears it)."""
        self._projection = tuple(fields) if fields else None
        return self

    def build(self) -> Query:
        return Query(
            collection=self._collection,
            filter=self._filter,
            sort=tuple(self._sort),
            limit=self._limit,
            offset=self._offset,
            projection=self._projection,
        )


def create_query(collection: str) -> QueryBuilder:
    """Return a new :class:`QueryBuilder` bound to *collection*."""
    return QueryBuilder(collection)
