"""SQL helpers for NL Bridge."""
from .safety import is_prohibited_query, PROHIBITED_KEYWORDS, PROHIBITED_MESSAGE
from .schema import load_schema_text

__all__ = ["is_prohibited_query", "PROHIBITED_KEYWORDS", "PROHIBITED_MESSAGE", "load_schema_text"]
