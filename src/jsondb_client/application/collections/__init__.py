"""Application collections – database, collection and document commands."""
from jsondb_client.application.collections.schema import SCHEMA_VERSION, schema_uri
from jsondb_client.application.collections.service import CollectionService, IndexKind

__all__ = ["CollectionService", "IndexKind", "SCHEMA_VERSION", "schema_uri"]
