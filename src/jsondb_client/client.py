"""JsonDbClient – one place that resolves the target database once.

Usage::

    settings = EnvSettingsLoader().load(JsonDbSettings)
    async with JsonDbClient.from_settings(settings) as client:
        actors = await client.executor.execute(
            client.query("actors").where("name", "contains", "Op").limit(20).build()
        )
        tx = client.transaction()
        tx.add("actors", {"name": "Op3"})
        await tx.commit()
"""
from __future__ import annotations

from typing import Any

from jsondb_client.adapters.http import HttpxInvoker
from jsondb_client.application.collections import CollectionService
from jsondb_client.application.query import QueryBuilder, QueryExecutor
from jsondb_client.application.transaction import TransactionStagingService
from jsondb_client.config.settings import JsonDbSettings
from jsondb_client.kernel.invocation import Invoker
from jsondb_client.observability.logging import configure_logging


class JsonDbClient:
    """Facade over one invoker and one ``space``/``db`` pair."""

    def __init__(self, invoker: Invoker, settings: JsonDbSettings | None = None) -> None:
        settings = settings or JsonDbSettings()
        self._invoker = invoker
        self._space = settings.space
        self._db = settings.db
        self.executor = QueryExecutor(
            invoker, self._space, self._db, created_at_field=settings.created_at_field
        )
        self.collections = CollectionService(invoker, self._space, self._db)

    @classmethod
    def from_settings(cls, settings: JsonDbSettings) -> "JsonDbClient":
        """Build a client talking HTTP to ``settings.base_url``.

        Also configures JSON logging at ``settings.log_level``.
        """
        configure_logging(settings.log_level)
        return cls(HttpxInvoker(settings.base_url, settings.timeout), settings)

    @property
    def space(self) -> str:
        return self._space

    @property
    def db(self) -> str:
        return self._db

    def query(self, collection: str) -> QueryBuilder:
        return QueryBuilder(collection)

    def transaction(self) -> TransactionStagingService:
        """Return a new staging service; each editing session owns its own."""
        return TransactionStagingService(self._invoker, self._space, self._db)

    async def aclose(self) -> None:
        close = getattr(self._invoker, "aclose", None)
        if close is not None:
            await close()

    async def __aenter__(self) -> "JsonDbClient":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()


__all__ = ["JsonDbClient"]
