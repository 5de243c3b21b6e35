"""Testing fakes – in-memory doubles for the invocation port."""
from jsondb_client.testing.fakes.invoker import InvocationCall, RecordingInvoker

__all__ = ["InvocationCall", "RecordingInvoker"]
