"""Unit tests for QueryExecutor."""

from __future__ import annotations

import asyncio

import pytest

from jsondb_client.application.query import QueryBuilder, QueryExecutor, QueryResult, SortField
from jsondb_client.kernel.errors import InvocationError, MalformedResponseError
from jsondb_client.testing.fakes import RecordingInvoker

DOCS = [
    {"id": "3", "name": "Op3", "createdAt": 3},
    {"id": "1", "name": "Op1", "createdAt": 1},
    {"id": "2", "name": "Op2", "createdAt": 2},
]


def _executor(response: object = None, **kwargs: object) -> tuple[QueryExecutor, RecordingInvoker]:
    invoker = RecordingInvoker(
        {"jsondb_execute_query": response if response is not None else {"documents": DOCS, "total_count": 3}}
    )
    return QueryExecutor(invoker, "un2", "_system", **kwargs), invoker  # type: ignore[arg-type]


class TestExecute:
    def test_single_call_with_bound_space_and_db(self) -> None:
        executor, invoker = _executor()
        query = QueryBuilder("actors").where("name", "contains", "Op").limit(20).build()
        asyncio.run(executor.execute(query))
        assert invoker.commands() == ["jsondb_execute_query"]
        args = invoker.calls[0].arguments
        assert args["space"] == "un2"
        assert args["db"] == "_system"
        assert args["query"] == query.to_dict()

    def test_documents_returned_in_backend_order(self) -> None:
        executor, _ = _executor()
        docs = asyncio.run(executor.execute(QueryBuilder("actors").order_by("name").build()))
        assert [d["id"] for d in docs] == ["3", "1", "2"]

    def test_empty_query_sends_no_filter(self) -> None:
        executor, invoker = _executor()
        asyncio.run(executor.execute(QueryBuilder("actors").build()))
        assert "filter" not in invoker.calls[0].arguments["query"]

    def test_fetch_exposes_total_count(self) -> None:
        executor, _ = _executor({"documents": DOCS[:1], "total_count": 3, "offset": 0, "limit": 1})
        result = asyncio.run(executor.fetch(QueryBuilder("actors").limit(1).build()))
        assert isinstance(result, QueryResult)
        assert result.total_count == 3
        assert result.limit == 1
        assert result.has_more is True

    def test_first_returns_none_on_empty(self) -> None:
        executor, invoker = _executor({"documents": [], "total_count": 0})
        assert asyncio.run(executor.first(QueryBuilder("actors").build())) is None
        assert invoker.calls[0].arguments["query"]["limit"] == 1


class TestLatestMode:
    def test_prepends_created_at_desc_and_forces_limit_one(self) -> None:
        executor, invoker = _executor()
        query = QueryBuilder("actors").order_by("name").build()
        asyncio.run(executor.execute(query, latest=True))
        sent = invoker.calls[0].arguments["query"]
        assert sent["sort"][0] == {"field": "createdAt", "order": "desc"}
        assert sent["sort"][1] == {"field": "name", "order": "asc"}
        assert sent["limit"] == 1

    def test_explicit_limit_is_kept(self) -> None:
        executor, invoker = _executor()
        asyncio.run(executor.execute(QueryBuilder("actors").limit(5).build(), latest=True))
        assert invoker.calls[0].arguments["query"]["limit"] == 5

    def test_original_query_not_mutated(self) -> None:
        executor, _ = _executor()
        query = QueryBuilder("actors").build()
        prepared = executor.prepare(query, latest=True)
        assert query.sort == ()
        assert query.limit is None
        assert prepared.sort == (SortField.desc("createdAt"),)

    def test_custom_created_at_field(self) -> None:
        executor, invoker = _executor(created_at_field="created_at")
        asyncio.run(executor.execute(QueryBuilder("actors").build(), latest=True))
        assert invoker.calls[0].arguments["query"]["sort"][0]["field"] == "created_at"


class TestRawQuery:
    def test_execute_raw_sends_sql(self) -> None:
        invoker = RecordingInvoker({"jsondb_execute_sql": {"documents": DOCS, "total_count": 3}})
        executor = QueryExecutor(invoker, "un2", "_system")
        docs = asyncio.run(executor.execute_raw("SELECT * FROM actors"))
        assert docs == DOCS
        assert invoker.calls[0].command == "jsondb_execute_sql"
        assert invoker.calls[0].arguments == {"space": "un2", "db": "_system", "sql": "SELECT * FROM actors"}


class TestFaults:
    def test_backend_fault_propagates_unchanged(self) -> None:
        error = InvocationError("jsondb_execute_query", "Collection 'ghosts' not found")
        invoker = RecordingInvoker(fail_on_call=1, error=error)
        executor = QueryExecutor(invoker, "un2", "_system")
        with pytest.raises(InvocationError) as exc_info:
            asyncio.run(executor.execute(QueryBuilder("ghosts").build()))
        assert exc_info.value is error
        assert len(invoker.calls) == 1

    @pytest.mark.parametrize(
        "response",
        [
            [],
            {"total_count": 0},
            {"documents": "nope", "total_count": 0},
            {"documents": [1, 2], "total_count": 2},
            {"documents": [], "total_count": "many"},
        ],
    )
    def test_malformed_response_raises(self, response: object) -> None:
        invoker = RecordingInvoker({"jsondb_execute_query": response})
        executor = QueryExecutor(invoker, "un2", "_system")
        with pytest.raises(MalformedResponseError):
            asyncio.run(executor.execute(QueryBuilder("actors").build()))

    def test_missing_response_is_malformed(self, query_executor: QueryExecutor, recording_invoker: RecordingInvoker) -> None:
        recording_invoker.respond("jsondb_execute_query", None)
        with pytest.raises(MalformedResponseError):
            asyncio.run(query_executor.execute(QueryBuilder("actors").build()))
