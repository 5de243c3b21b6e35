"""Testing fixtures – pytest fixtures for the fake invoker.

Enable in your ``conftest.py``::

    pytest_plugins = ["jsondb_client.testing.fixtures"]
"""
from jsondb_client.testing.fixtures.invoker import (
    FIXTURE_DB,
    FIXTURE_SPACE,
    query_executor,
    recording_invoker,
    staging_service,
)

__all__ = ["FIXTURE_DB", "FIXTURE_SPACE", "query_executor", "recording_invoker", "staging_service"]
