"""Command names understood by the JSON-DB backend."""
from __future__ import annotations

from enum import Enum


class Command(str, Enum):
    EXECUTE_QUERY = "jsondb_execute_query"
    EXECUTE_SQL = "jsondb_execute_sql"

    INSERT_DOCUMENT = "jsondb_insert_document"
    UPDATE_DOCUMENT = "jsondb_update_document"
    DELETE_DOCUMENT = "jsondb_delete_document"
    GET_DOCUMENT = "jsondb_get_document"
    LIST_ALL = "jsondb_list_all"

    CREATE_DB = "jsondb_create_db"
    DROP_DB = "jsondb_drop_db"
    CREATE_COLLECTION = "jsondb_create_collection"
    LIST_COLLECTIONS = "jsondb_list_collections"
    DROP_COLLECTION = "jsondb_drop_collection"
    CREATE_INDEX = "jsondb_create_index"
    DROP_INDEX = "jsondb_drop_index"

    def __str__(self) -> str:
        return self.value


__all__ = ["Command"]
