"""Application transaction – staged operation model (Insert / Update / Delete)."""
from __future__ import annotations

import dataclasses
from typing import Any, ClassVar, Union

from jsondb_client.kernel.invocation import Command, bound_arguments
from jsondb_client.kernel.types import Document

__all__ = ["Delete", "Insert", "OperationRequest", "Update"]


@dataclasses.dataclass(frozen=True)
class Insert:
    """Insert *document* (which already embeds ``id``) into *collection*."""

    type: ClassVar[str] = "Insert"
    command: ClassVar[Command] = Command.INSERT_DOCUMENT

    collection: str
    id: str
    document: Document

    def arguments(self, space: str, db: str) -> dict[str, Any]:
        return bound_arguments(space, db, collection=self.collection, document=self.document)

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type, "collection": self.collection, "id": self.id, "document": self.document}


@dataclasses.dataclass(frozen=True)
class Update:
    """Replace document *id* of *collection* with *document*, as given."""

    type: ClassVar[str] = "Update"
    command: ClassVar[Command] = Command.UPDATE_DOCUMENT

    collection: str
    id: str
    document: Document

    def arguments(self, space: str, db: str) -> dict[str, Any]:
        return bound_arguments(
            space, db, collection=self.collection, id=self.id, document=self.document
        )

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type, "collection": self.collection, "id": self.id, "document": self.document}


@dataclasses.dataclass(frozen=True)
class Delete:
    type: ClassVar[str] = "Delete"
    command: ClassVar[Command] = Command.DELETE_DOCUMENT

    collection: str
    id: str

    def arguments(self, space: str, db: str) -> dict[str, Any]:
        return bound_arguments(space, db, collection=self.collection, id=self.id)

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type, "collection": self.collection, "id": self.id}


OperationRequest = Union[Insert, Update, Delete]
