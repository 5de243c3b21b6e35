"""Unit tests – HTTP invocation adapter."""
from __future__ import annotations

import asyncio
import json

import httpx
import pytest
import respx

from jsondb_client.adapters.http import HttpxInvoker
from jsondb_client.kernel.errors import InvocationError, InvocationTimeoutError, MalformedResponseError

BASE = "http://backend"


class TestHttpxInvoker:
    @respx.mock
    def test_posts_arguments_as_json(self) -> None:
        route = respx.post(f"{BASE}/invoke/jsondb_execute_query").mock(
            return_value=httpx.Response(200, json={"documents": [], "total_count": 0})
        )

        async def run() -> object:
            async with HttpxInvoker(BASE) as invoker:
                return await invoker.invoke("jsondb_execute_query", {"space": "s", "db": "d"})

        result = asyncio.run(run())
        assert result == {"documents": [], "total_count": 0}
        assert json.loads(route.calls.last.request.content) == {"space": "s", "db": "d"}

    @respx.mock
    def test_backend_fault_message_from_error_body(self) -> None:
        respx.post(f"{BASE}/invoke/jsondb_insert_document").mock(
            return_value=httpx.Response(400, json={"error": "Schema validation failed"})
        )

        async def run() -> None:
            async with HttpxInvoker(BASE) as invoker:
                await invoker.invoke("jsondb_insert_document", {})

        with pytest.raises(InvocationError) as exc_info:
            asyncio.run(run())
        assert exc_info.value.message == "Schema validation failed"
        assert exc_info.value.status_code == 400
        assert exc_info.value.command == "jsondb_insert_document"

    @respx.mock
    def test_backend_fault_plain_text(self) -> None:
        respx.post(f"{BASE}/invoke/jsondb_drop_db").mock(return_value=httpx.Response(500, text="boom"))

        async def run() -> None:
            async with HttpxInvoker(BASE) as invoker:
                await invoker.invoke("jsondb_drop_db", {})

        with pytest.raises(InvocationError, match="boom"):
            asyncio.run(run())

    @respx.mock
    def test_timeout_maps_to_invocation_timeout(self) -> None:
        respx.post(f"{BASE}/invoke/jsondb_execute_query").mock(side_effect=httpx.ReadTimeout("slow"))

        async def run() -> None:
            async with HttpxInvoker(BASE) as invoker:
                await invoker.invoke("jsondb_execute_query", {})

        with pytest.raises(InvocationTimeoutError):
            asyncio.run(run())

    @respx.mock
    def test_transport_error_maps_to_invocation_error(self) -> None:
        respx.post(f"{BASE}/invoke/jsondb_execute_query").mock(side_effect=httpx.ConnectError("refused"))

        async def run() -> None:
            async with HttpxInvoker(BASE) as invoker:
                await invoker.invoke("jsondb_execute_query", {})

        with pytest.raises(InvocationError):
            asyncio.run(run())

    @respx.mock
    def test_non_json_body_is_malformed(self) -> None:
        respx.post(f"{BASE}/invoke/jsondb_list_all").mock(return_value=httpx.Response(200, text="<html>"))

        async def run() -> None:
            async with HttpxInvoker(BASE) as invoker:
                await invoker.invoke("jsondb_list_all", {})

        with pytest.raises(MalformedResponseError):
            asyncio.run(run())

    @respx.mock
    def test_empty_body_is_none(self) -> None:
        respx.post(f"{BASE}/invoke/jsondb_create_db").mock(return_value=httpx.Response(204))

        async def run() -> object:
            async with HttpxInvoker(BASE) as invoker:
                return await invoker.invoke("jsondb_create_db", {})

        assert asyncio.run(run()) is None

    @respx.mock
    def test_custom_path_prefix(self) -> None:
        route = respx.post(f"{BASE}/api/commands/jsondb_drop_db").mock(return_value=httpx.Response(204))

        async def run() -> None:
            async with HttpxInvoker(BASE, path_prefix="/api/commands/") as invoker:
                await invoker.invoke("jsondb_drop_db", {})

        asyncio.run(run())
        assert route.called
