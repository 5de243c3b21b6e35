"""Application collections – schema URI helper."""
from __future__ import annotations

SCHEMA_VERSION = "v1"


def schema_uri(space: str, db: str, relative_path: str) -> str:
    """Return ``db://<space>/<db>/schemas/v1/<path>`` for a schema file.

    A leading ``/`` on *relative_path* is ignored.
    """
    path = relative_path[1:] if relative_path.startswith("/") else relative_path
    return f"db://{space}/{db}/schemas/{SCHEMA_VERSION}/{path}"


__all__ = ["SCHEMA_VERSION", "schema_uri"]
