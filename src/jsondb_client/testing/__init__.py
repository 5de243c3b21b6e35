"""Testing – fakes and generators for code built on jsondb-client."""
from jsondb_client.testing.fakes import InvocationCall, RecordingInvoker

__all__ = ["InvocationCall", "RecordingInvoker"]
