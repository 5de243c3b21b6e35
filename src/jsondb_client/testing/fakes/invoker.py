"""Testing fakes – RecordingInvoker."""
from __future__ import annotations

import copy
import dataclasses
from typing import Any, Callable

from jsondb_client.kernel.errors import InvocationError


@dataclasses.dataclass(frozen=True)
class InvocationCall:
    command: str
    arguments: dict[str, Any]


Responder = Callable[[str, dict[str, Any]], Any]


class RecordingInvoker:
    """In-memory invoker that records every call.

    Responses are scripted per command, either as a value or as a callable
    ``(command, arguments) -> result``.  ``fail_on_call`` makes the n-th call
    (1-based) raise ``InvocationError``.
    """

    def __init__(
        self,
        responses: dict[str, Any] | None = None,
        *,
        fail_on_call: int | None = None,
        error: BaseException | None = None,
    ) -> None:
        self._responses: dict[str, Any] = dict(responses or {})
        self._calls: list[InvocationCall] = []
        self._fail_on_call = fail_on_call
        self._error = error

    def respond(self, command: str, response: Any | Responder) -> None:
        self._responses[command] = response

    async def invoke(self, command: str, arguments: dict[str, Any]) -> Any:
        self._calls.append(InvocationCall(command, copy.deepcopy(arguments)))
        if self._fail_on_call is not None and len(self._calls) == self._fail_on_call:
            raise self._error or InvocationError(command, f"Command '{command}' rejected")
        response = self._responses.get(command)
        if callable(response):
            return response(command, arguments)
        return copy.deepcopy(response)

    @property
    def calls(self) -> list[InvocationCall]:
        return list(self._calls)

    def commands(self) -> list[str]:
        return [c.command for c in self._calls]

    def clear(self) -> None:
        self._calls.clear()


__all__ = ["InvocationCall", "RecordingInvoker"]
