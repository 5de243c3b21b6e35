"""HTTP adapter – invocation boundary carried over httpx."""
from jsondb_client.adapters.http.invoker import HttpxInvoker

__all__ = ["HttpxInvoker"]
