"""Application – query, transaction and collection use cases."""

from jsondb_client.application.collections import CollectionService, IndexKind, schema_uri
from jsondb_client.application.query import (
    Comparison,
    ComparisonOp,
    Filter,
    Query,
    QueryBuilder,
    QueryExecutor,
    QueryResult,
    SortField,
    SortOrder,
    create_query,
)
from jsondb_client.application.transaction import (
    Delete,
    Insert,
    OperationRequest,
    TransactionStagingService,
    Update,
    create_transaction,
)

__all__ = [
    "CollectionService",
    "Comparison",
    "ComparisonOp",
    "Delete",
    "Filter",
    "IndexKind",
    "Insert",
    "OperationRequest",
    "Query",
    "QueryBuilder",
    "QueryExecutor",
    "QueryResult",
    "SortField",
    "SortOrder",
    "TransactionStagingService",
    "Update",
    "create_query",
    "create_transaction",
    "schema_uri",
]
