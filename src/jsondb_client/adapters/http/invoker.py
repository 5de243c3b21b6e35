"""HTTP adapter – HttpxInvoker.

Carries backend commands over HTTP: ``POST {base_url}/invoke/{command}``
with the arguments as the JSON body; the JSON response body is the result.
A non-2xx answer is a backend fault whose message is read from an
``{"error": "..."}`` body when present, else from the raw text.
"""
from __future__ import annotations

from typing import Any

import httpx

from jsondb_client.kernel.errors import InvocationError, InvocationTimeoutError, MalformedResponseError
from jsondb_client.observability.logging import get_logger

__all__ = ["HttpxInvoker"]

_log = get_logger(__name__)


def _fault_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and isinstance(body.get("error"), str):
        return body["error"]
    return response.text or f"HTTP {response.status_code}"


class HttpxInvoker:
    """Async :class:`~jsondb_client.kernel.invocation.Invoker` over httpx.

    Never retries: every fault is raised to the caller unchanged.
    """

    def __init__(
        self,
        base_url: str = "",
        timeout: float = 10.0,
        *,
        path_prefix: str = "/invoke",
        **kwargs: Any,
    ) -> None:
        self._client = httpx.AsyncClient(base_url=base_url, timeout=timeout, **kwargs)
        self._prefix = path_prefix.rstrip("/")

    async def __aenter__(self) -> "HttpxInvoker":
        await self._client.__aenter__()
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self._client.__aexit__(*args)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def invoke(self, command: str, arguments: dict[str, Any]) -> Any:
        url = f"{self._prefix}/{command}"
        _log.debug("invoker.request", command=command)
        try:
            response = await self._client.post(url, json=arguments)
            response.raise_for_status()
        except httpx.TimeoutException as exc:
            raise InvocationTimeoutError(command, f"Command '{command}' timed out") from exc
        except httpx.HTTPStatusError as exc:
            raise InvocationError(
                command,
                _fault_message(exc.response),
                status_code=exc.response.status_code,
            ) from exc
        except httpx.HTTPError as exc:
            raise InvocationError(command, str(exc) or f"Command '{command}' failed") from exc

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as exc:
            raise MalformedResponseError(
                f"Command '{command}' returned a non-JSON body",
                command=command,
                payload_type=response.headers.get("content-type"),
            ) from exc
