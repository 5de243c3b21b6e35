"""Application collections – CollectionService.

One backend call per method; nothing is staged or cached.  Use
:class:`~jsondb_client.application.transaction.TransactionStagingService`
when several writes should be previewed and sent in order.
"""
from __future__ import annotations

from enum import Enum
from typing import Any, Mapping

from jsondb_client.kernel.errors import MalformedResponseError
from jsondb_client.kernel.invocation import Command, Invoker, bound_arguments
from jsondb_client.kernel.types import Document
from jsondb_client.observability.logging import get_logger

__all__ = ["CollectionService", "IndexKind"]


class IndexKind(str, Enum):
    HASH = "hash"
    BTREE = "btree"
    TEXT = "text"


def _expect_document(command: Command, response: Any) -> Document:
    if not isinstance(response, Mapping):
        raise MalformedResponseError(
            f"Expected a document from '{command.value}', got {type(response).__name__}",
            command=command.value,
            payload_type=type(response).__name__,
        )
    return dict(response)


def _expect_list(command: Command, response: Any) -> list[Any]:
    if not isinstance(response, list):
        raise MalformedResponseError(
            f"Expected a list from '{command.value}', got {type(response).__name__}",
            command=command.value,
            payload_type=type(response).__name__,
        )
    return response


class CollectionService:
    """Database, collection, index and single-document commands."""

    def __init__(self, invoker: Invoker, space: str, db: str) -> None:
        self._invoker = invoker
        self._space = space
        self._db = db
        self._log = get_logger(__name__, space=space, db=db)

    async def _call(self, command: Command, **arguments: Any) -> Any:
        self._log.debug("collections.invoke", command=command.value, collection=arguments.get("collection"))
        return await self._invoker.invoke(command.value, bound_arguments(self._space, self._db, **arguments))

    # Databases ---------------------------------------------------------
    async def create_db(self) -> None:
        await self._call(Command.CREATE_DB)

    async def drop_db(self) -> None:
        await self._call(Command.DROP_DB)

    # Collections -------------------------------------------------------
    async def create_collection(self, name: str, schema_uri: str | None = None) -> None:
        await self._call(Command.CREATE_COLLECTION, collection=name, schema_uri=schema_uri)

    async def list_collections(self) -> list[str]:
        names = _expect_list(Command.LIST_COLLECTIONS, await self._call(Command.LIST_COLLECTIONS))
        return [str(n) for n in names]

    async def drop_collection(self, name: str) -> None:
        await self._call(Command.DROP_COLLECTION, collection=name)

    # Indexes -----------------------------------------------------------
    async def create_index(self, collection: str, field: str, kind: IndexKind | str = IndexKind.HASH) -> None:
        await self._call(Command.CREATE_INDEX, collection=collection, field=field, kind=IndexKind(kind).value)

    async def drop_index(self, collection: str, field: str) -> None:
        await self._call(Command.DROP_INDEX, collection=collection, field=field)

    # Documents ---------------------------------------------------------
    async def insert_document(self, collection: str, document: Mapping[str, Any]) -> Document:
        response = await self._call(Command.INSERT_DOCUMENT, collection=collection, document=dict(document))
        return _expect_document(Command.INSERT_DOCUMENT, response)

    async def update_document(self, collection: str, id: str, document: Mapping[str, Any]) -> Document:
        response = await self._call(
            Command.UPDATE_DOCUMENT, collection=collection, id=id, document=dict(document)
        )
        return _expect_document(Command.UPDATE_DOCUMENT, response)

    async def get_document(self, collection: str, id: str) -> Document | None:
        response = await self._call(Command.GET_DOCUMENT, collection=collection, id=id)
        if response is None:
            return None
        return _expect_document(Command.GET_DOCUMENT, response)

    async def delete_document(self, collection: str, id: str) -> bool:
        response = await self._call(Command.DELETE_DOCUMENT, collection=collection, id=id)
        if not isinstance(response, bool):
            raise MalformedResponseError(
                f"Expected a boolean from '{Command.DELETE_DOCUMENT.value}', got {type(response).__name__}",
                command=Command.DELETE_DOCUMENT.value,
                payload_type=type(response).__name__,
            )
        return response

    async def list_all(self, collection: str) -> list[Document]:
        documents = _expect_list(Command.LIST_ALL, await self._call(Command.LIST_ALL, collection=collection))
        return [_expect_document(Command.LIST_ALL, d) for d in documents]
