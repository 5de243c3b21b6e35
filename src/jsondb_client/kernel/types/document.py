"""Document type and identifier generation."""

from __future__ import annotations

import uuid
from typing import Any, Mapping

Document = dict[str, Any]
"""A flat, dynamically-shaped JSON object with a mandatory string ``id``.

No other field is assumed by the client.  Queries run with ``latest=True``
additionally expect the backend to keep a creation-timestamp field.
"""

ID_FIELD = "id"


def new_document_id() -> str:
    """Return a fresh UUID4 string suitable as a document ``id``."""
    return str(uuid.uuid4())


def document_id(document: Mapping[str, Any]) -> str | None:
    """Return ``document["id"]`` when it is a string, else ``None``."""
    value = document.get(ID_FIELD)
    return value if isinstance(value, str) else None


__all__ = ["Document", "ID_FIELD", "document_id", "new_document_id"]
