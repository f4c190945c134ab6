"""
Public synthesis flows for NL Bridge.

- get_sql(): natural language -> parameterized PostgreSQL query
- complete_email_sms_messages(): free-text rules -> email subject/body + SMS

Neither flow raises. Failures are logged here and surface to the caller only
through the returned record (QueryResult.error / MessageResult.status).
"""

from __future__ import annotations

import json
import logging
from typing import Any, Optional

from .completion import CompletionClient
from .config import get_settings
from .prompts import (
    EMAIL_SMS_SYSTEM_PROMPT,
    build_email_sms_user_prompt,
    build_sql_system_prompt,
)
from .results import MessageResult, QueryResult
from .sql.safety import PROHIBITED_MESSAGE, is_prohibited_query
from .sql.schema import load_schema_text

logger = logging.getLogger(__name__)

SQL_TEMPERATURE = 0.0
MESSAGE_TEMPERATURE = 0.5


def _looks_like_json_object(text: str) -> bool:
    return bool(text) and text.startswith("{") and text.endswith("}")


def _parse_query_reply(reply: str) -> QueryResult:
    if _looks_like_json_object(reply):
        result = QueryResult.from_reply(json.loads(reply))
    else:
        result = QueryResult(error=reply)

    if is_prohibited_query(result.sql) or is_prohibited_query(result.error):
        return QueryResult(error=PROHIBITED_MESSAGE)
    if result.error:
        return QueryResult(error=result.error)
    return result


async def get_sql(
    user_prompt: str,
    client: Optional[CompletionClient] = None,
    schema_path: Optional[str] = None,
) -> QueryResult:
    """
    Ask the model for a SQL query answering user_prompt.

    Args:
        user_prompt: the user's question, passed to the model as-is
        client: completion client; built from the environment when omitted
        schema_path: schema summary file; Settings.schema_path when omitted

    Returns:
        QueryResult. A reply that is not a JSON object lands in .error with an
        empty .sql; a prohibited query comes back as error "Prohibited query.";
        any failure (missing schema file, config, network, bad JSON) returns
        an empty QueryResult.
    """
    try:
        if client is None or schema_path is None:
            settings = get_settings()
            client = client or CompletionClient.from_settings(settings)
            schema_path = schema_path or settings.schema_path

        schema_text = load_schema_text(schema_path)
        system_prompt = build_sql_system_prompt(schema_text)

        reply = await client.complete(system_prompt, user_prompt, temperature=SQL_TEMPERATURE)
        return _parse_query_reply(reply)
    except Exception:
        logger.exception("get_sql failed for prompt %r", user_prompt)
        return QueryResult()


async def complete_email_sms_messages(
    prompt: str,
    company: str,
    contact_name: str,
    client: Optional[CompletionClient] = None,
) -> MessageResult:
    """
    Ask the model for an email subject/body and an SMS built from prompt.

    company is accepted for callers that have it but is not sent to the model.
    On failure the partially filled MessageResult is returned with status False.
    """
    logger.info("Inputs: prompt=%r company=%r contact_name=%r", prompt, company, contact_name)

    content = MessageResult()
    try:
        client = client or CompletionClient.from_env()
        user_prompt = build_email_sms_user_prompt(prompt, contact_name)

        reply = await client.complete(
            EMAIL_SMS_SYSTEM_PROMPT, user_prompt, temperature=MESSAGE_TEMPERATURE
        )
        if _looks_like_json_object(reply):
            data: Any = json.loads(reply)
            content.merge_reply(data)
            content.status = True
        else:
            content.error = reply
    except Exception:
        logger.exception("complete_email_sms_messages failed for contact %r", contact_name)

    return content
