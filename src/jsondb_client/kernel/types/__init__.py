"""Kernel types – document shape and identifiers."""
from jsondb_client.kernel.types.document import ID_FIELD, Document, document_id, new_document_id

__all__ = ["Document", "ID_FIELD", "document_id", "new_document_id"]
