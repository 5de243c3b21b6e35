"""Kernel invocation – port and command names for the backend boundary."""
from jsondb_client.kernel.invocation.commands import Command
from jsondb_client.kernel.invocation.port import Invoker, bound_arguments

__all__ = ["Command", "Invoker", "bound_arguments"]
