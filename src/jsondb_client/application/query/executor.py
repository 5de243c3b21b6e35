"""Application query – QueryExecutor.

Sends a :class:`Query` across the invocation boundary and hands back the
documents exactly as the backend ordered them.  No retries, no client-side
re-sorting or filtering.
"""
from __future__ import annotations

from jsondb_client.application.query.query import Query, SortField
from jsondb_client.application.query.result import QueryResult
from jsondb_client.kernel.invocation import Command, Invoker, bound_arguments
from jsondb_client.kernel.types import Document
from jsondb_client.observability.logging import get_logger

__all__ = ["DEFAULT_CREATED_AT_FIELD", "QueryExecutor"]

DEFAULT_CREATED_AT_FIELD = "createdAt"


class QueryExecutor:
    """Run queries against one ``space``/``db`` pair, fixed at construction.

    ``latest=True`` assumes every matching document carries
    *created_at_field*; that is a precondition on the stored data, not
    something the client checks.
    """

    def __init__(
        self,
        invoker: Invoker,
        space: str,
        db: str,
        *,
        created_at_field: str = DEFAULT_CREATED_AT_FIELD,
    ) -> None:
        self._invoker = invoker
        self._space = space
        self._db = db
        self._created_at_field = created_at_field
        self._log = get_logger(__name__, space=space, db=db)

    @property
    def space(self) -> str:
        return self._space

    @property
    def db(self) -> str:
        return self._db

    def prepare(self, query: Query, *, latest: bool = False) -> Query:
        """Return the query that will actually be sent.

        In latest mode a descending creation-timestamp sort is prepended and,
        when the caller set no limit, the limit is forced to 1.
        """
        if not latest:
            return query
        prepared = query.with_sort_prefix(SortField.desc(self._created_at_field))
        if prepared.limit is None:
            prepared = prepared.with_limit(1)
        return prepared

    async def fetch(self, query: Query, *, latest: bool = False) -> QueryResult:
        prepared = self.prepare(query, latest=latest)
        self._log.debug(
            "query.execute",
            collection=prepared.collection,
            latest=latest,
            limit=prepared.limit,
            offset=prepared.offset,
        )
        response = await self._invoker.invoke(
            Command.EXECUTE_QUERY.value,
            bound_arguments(self._space, self._db, query=prepared.to_dict()),
        )
        return QueryResult.from_response(response, command=Command.EXECUTE_QUERY.value)

    async def execute(self, query: Query, *, latest: bool = False) -> list[Document]:
        return (await self.fetch(query, latest=latest)).documents

    async def first(self, query: Query) -> Document | None:
        """Return the first matching document, or ``None``."""
        if query.limit is None:
            query = query.with_limit(1)
        documents = await self.execute(query)
        return documents[0] if documents else None

    async def fetch_raw(self, sql: str) -> QueryResult:
        """Run a backend-native SQL query (``SELECT`` only on the backend)."""
        self._log.debug("query.execute_raw", sql_length=len(sql))
        response = await self._invoker.invoke(
            Command.EXECUTE_SQL.value,
            bound_arguments(self._space, self._db, sql=sql),
        )
        return QueryResult.from_response(response, command=Command.EXECUTE_SQL.value)

    async def execute_raw(self, sql: str) -> list[Document]:
        return (await self.fetch_raw(sql)).documents
