from __future__ import annotations

from typing import Optional

# Substring denylist: DML/DDL verbs, PostgreSQL catalog identifiers,
# transaction and privilege verbs.
PROHIBITED_KEYWORDS = [
    "insert", "update", "delete", "drop", "truncate", "alter", "create", "replace",
    "information_schema", "pg_catalog", "pg_tables", "pg_namespace", "pg_class",
    "table_schema", "table_name", "column_name", "column_default", "is_nullable",
    "data_type", "udt_name", "character_maximum_length", "numeric_precision",
    "numeric_scale", "datetime_precision", "interval_type", "collation_name",
    "grant", "revoke", "rollback", "commit", "savepoint", "vacuum", "analyze",
]

PROHIBITED_MESSAGE = "Prohibited query."


def is_prohibited_query(query: Optional[str]) -> bool:
    """
    Case-insensitive substring check against PROHIBITED_KEYWORDS.

    Not a parser: "create_date" is blocked, obfuscated statements may pass.
    """
    if not query:
        return False
    low = str(query).lower()
    return any(kw in low for kw in PROHIBITED_KEYWORDS)
