"""Shared fixtures for the jsondb-client test suite."""
from jsondb_client.testing.fixtures import query_executor, recording_invoker, staging_service  # noqa: F401
