"""Application query – filter tree, query value, builder and executor."""
from jsondb_client.application.query.builder import QueryBuilder, create_query
from jsondb_client.application.query.executor import DEFAULT_CREATED_AT_FIELD, QueryExecutor
from jsondb_client.application.query.filters import (
    Comparison,
    ComparisonOp,
    Filter,
    Logical,
    LogicalOp,
    Negation,
    filter_from_dict,
)
from jsondb_client.application.query.query import Query, SortField, SortOrder
from jsondb_client.application.query.result import QueryResult

__all__ = [
    "Comparison",
    "ComparisonOp",
    "DEFAULT_CREATED_AT_FIELD",
    "Filter",
    "Logical",
    "LogicalOp",
    "Negation",
    "Query",
    "QueryBuilder",
    "QueryExecutor",
    "QueryResult",
    "SortField",
    "SortOrder",
    "create_query",
    "filter_from_dict",
]
