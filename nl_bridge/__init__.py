# NL Bridge - natural language to SQL / email + SMS
"""
NL Bridge - prompt-to-structured-output bridge over OpenAI / Azure OpenAI.
"""

__version__ = "0.1.0"

from .config import (
    ConfigurationError,
    DirectBackend,
    HostedBackend,
    NLBridgeError,
    Settings,
    get_settings,
    select_backend,
)
from .completion import CompletionClient, CompletionError
from .extract import extract_json
from .results import MessageResult, QueryResult
from .sql.safety import is_prohibited_query
from .synthesis import complete_email_sms_messages, get_sql
from .tools.executor import BridgeToolExecutor

__all__ = [
    "__version__",
    "get_sql",
    "complete_email_sms_messages",
    "QueryResult",
    "MessageResult",
    "CompletionClient",
    "CompletionError",
    "ConfigurationError",
    "NLBridgeError",
    "Settings",
    "HostedBackend",
    "DirectBackend",
    "get_settings",
    "select_backend",
    "extract_json",
    "is_prohibited_query",
    "BridgeToolExecutor",
]
