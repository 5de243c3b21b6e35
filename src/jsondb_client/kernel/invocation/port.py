"""Invocation port – the name + JSON arguments / JSON result boundary."""
from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Invoker(Protocol):
    """Port: call a backend command by name.

    Implementations send *arguments* as a JSON object and return the decoded
    JSON result.  A backend or transport fault is raised as
    :class:`~jsondb_client.kernel.errors.InvocationError`; implementations
    never retry.
    """

    async def invoke(self, command: str, arguments: dict[str, Any]) -> Any: ...


def bound_arguments(space: str, db: str, **arguments: Any) -> dict[str, Any]:
    """Return the argument payload for a command bound to *space*/*db*."""
    return {"space": space, "db": db, **arguments}


__all__ = ["Invoker", "bound_arguments"]
