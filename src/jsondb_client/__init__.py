"""
jsondb_client – document-query and staged-transaction client for a JSON-DB
backend reached through a command invocation boundary.

Import path convention::

    from jsondb_client.application.query import QueryBuilder, QueryExecutor
    from jsondb_client.application.transaction import TransactionStagingService
    from jsondb_client.adapters.http import HttpxInvoker
    from jsondb_client.config import JsonDbSettings
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
