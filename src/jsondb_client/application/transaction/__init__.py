"""Application transaction – staged operations and the staging service."""
from jsondb_client.application.transaction.operations import Delete, Insert, OperationRequest, Update
from jsondb_client.application.transaction.service import TransactionStagingService, create_transaction

__all__ = [
    "Delete",
    "Insert",
    "OperationRequest",
    "TransactionStagingService",
    "Update",
    "create_transaction",
]
