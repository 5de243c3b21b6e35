"""Application transaction – TransactionStagingService.

Stages inserts, updates and deletes locally, then sends them one at a time,
in staging order, when :meth:`TransactionStagingService.commit` is awaited.
The backend offers no cross-call atomicity: a fault at operation *k* leaves
operations ``1..k-1`` applied and ``k..n`` still pending.
"""
from __future__ import annotations

import copy
from typing import Any, Callable, Mapping

from jsondb_client.application.transaction.operations import Delete, Insert, OperationRequest, Update
from jsondb_client.kernel.invocation import Invoker
from jsondb_client.kernel.types import ID_FIELD, document_id, new_document_id
from jsondb_client.observability.logging import get_logger

__all__ = ["TransactionStagingService", "create_transaction"]


class TransactionStagingService:
    """Own one pending-operation queue bound to one ``space``/``db``.

    The service is single-writer: one instance per editing session, never
    shared, and ``commit`` must not be awaited twice concurrently.

    Usage::

        tx = TransactionStagingService(invoker, "un2", "_system")
        tx.add("actors", {"name": "Op1"}).delete("actors", "old-id")
        preview = tx.get_pending_operations()
        await tx.commit()

    or as an async context manager, committing on clean exit and discarding
    the unsent remainder on error::

        async with TransactionStagingService(invoker, "un2", "_system") as tx:
            tx.update("actors", "a-1", {"id": "a-1", "name": "Renamed"})
    """

    def __init__(
        self,
        invoker: Invoker,
        space: str,
        db: str,
        *,
        id_factory: Callable[[], str] = new_document_id,
    ) -> None:
        self._invoker = invoker
        self._space = space
        self._db = db
        self._id_factory = id_factory
        self._operations: list[OperationRequest] = []
        self._log = get_logger(__name__, space=space, db=db)

    @property
    def space(self) -> str:
        return self._space

    @property
    def db(self) -> str:
        return self._db

    # ------------------------------------------------------------------
    # Staging
    # ------------------------------------------------------------------

    def _stage(self, operation: OperationRequest) -> "TransactionStagingService":
        self._operations.append(operation)
        self._log.debug(
            "transaction.staged",
            operation=operation.type,
            collection=operation.collection,
            id=operation.id,
            pending=len(self._operations),
        )
        return self

    def add(self, collection: str, document: Mapping[str, Any]) -> "TransactionStagingService":
        doc_id = document_id(document) or self._id_factory()
        return self._stage(Insert(collection, doc_id, {**document, ID_FIELD: doc_id}))

    def update(self, collection: str, id: str, document: Mapping[str, Any]) -> "TransactionStagingService":
        return self._stage(Update(collection, id, dict(document)))

    def delete(self, collection: str, id: str) -> "TransactionStagingService":
        return self._stage(Delete(collection, id))

    def get_pending_operations(self) -> list[OperationRequest]:
        """Return deep copies; mutating them, or their documents, does not
        touch what will be committed."""
        return copy.deepcopy(self._operations)

    @property
    def has_pending(self) -> bool:
        return bool(self._operations)

    def __len__(self) -> int:
        return len(self._operations)

    # ------------------------------------------------------------------
    # Resolution
    # ------------------------------------------------------------------

    def rollback(self) -> None:
        """Discard every staged operation without contacting the backend.

        Operations applied by an earlier (partial) commit stay applied.
        """
        discarded = len(self._operations)
        self._operations.clear()
        self._log.debug("transaction.rolled_back", discarded=discarded)

    async def commit(self) -> None:
        """Send the staged operations in order, awaiting each one.

        The first fault is re-raised unchanged; the failing operation and
        everything staged after it remain pending.  A :meth:`rollback` while
        a call is in flight lets that call finish and sends nothing more.
        """
        if not self._operations:
            return

        batch = list(self._operations)
        applied = 0
        self._log.info("transaction.commit.started", operations=len(batch))
        for operation in batch:
            if not self._operations or self._operations[0] is not operation:
                self._log.info("transaction.commit.interrupted", applied=applied, skipped=len(batch) - applied)
                return
            try:
                await self._invoker.invoke(
                    operation.command.value,
                    operation.arguments(self._space, self._db),
                )
            except Exception as exc:
                self._log.error(
                    "transaction.commit.failed",
                    operation=operation.type,
                    collection=operation.collection,
                    id=operation.id,
                    applied=applied,
                    remaining=len(self._operations),
                    error=str(exc),
                )
                raise
            applied += 1
            if self._operations and self._operations[0] is operation:
                self._operations.pop(0)
            self._log.debug(
                "transaction.operation.applied",
                operation=operation.type,
                collection=operation.collection,
                id=operation.id,
            )
        self._log.info("transaction.commit.completed", operations=applied)

    async def __aenter__(self) -> "TransactionStagingService":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: Any,
    ) -> None:
        if exc_type is None:
            await self.commit()
        else:
            self.rollback()


def create_transaction(invoker: Invoker, space: str, db: str) -> TransactionStagingService:
    """Return a fresh :class:`TransactionStagingService` (never shared)."""
    return TransactionStagingService(invoker, space, db)
