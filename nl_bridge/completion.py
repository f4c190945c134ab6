"""
Chat-completion client for NL Bridge.

Two REST dialects behind one call:
- HostedBackend: Azure OpenAI deployment, called over raw REST with httpx
- DirectBackend: OpenAI API, called through the official async SDK

One request per call, no retries. The backend is fixed when the client is built.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import httpx
import openai

from .config import (
    Backend,
    ConfigurationError,
    DirectBackend,
    HostedBackend,
    NLBridgeError,
    Settings,
    get_settings,
    select_backend,
)
from .extract import extract_json

logger = logging.getLogger(__name__)

MAX_TOKENS = 1024


class CompletionError(NLBridgeError):
    """Network, HTTP status, or response-shape failure while calling the model."""


def build_messages(system_prompt: str, user_prompt: str) -> List[Dict[str, str]]:
    return [
        {"role": "system", "content": system_prompt},
        {"role": "user", "content": user_prompt},
    ]


def _normalize_content(content: Optional[str]) -> str:
    text = (content or "").strip()
    if "{" in text and "}" in text:
        text = extract_json(text)
    return text


class CompletionClient:
    """
    Sends a system + user prompt pair to the configured backend.

    Args:
        backend: HostedBackend or DirectBackend (see config.select_backend)
        timeout: seconds; None keeps each transport's own default
        transport: httpx transport override for the hosted dialect
        openai_client: pre-built AsyncOpenAI-compatible client for the direct dialect
    """

    def __init__(
        self,
        backend: Backend,
        *,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        openai_client: Any = None,
    ):
        self.backend = backend
        self.timeout = timeout
        self._transport = transport
        self._openai_client = openai_client

    @classmethod
    def from_settings(cls, settings: Settings, **kwargs: Any) -> "CompletionClient":
        return cls(select_backend(settings), **kwargs)

    @classmethod
    def from_env(cls, **kwargs: Any) -> "CompletionClient":
        return cls.from_settings(get_settings(), **kwargs)

    @property
    def is_hosted(self) -> bool:
        return isinstance(self.backend, HostedBackend)

    async def complete(self, system_prompt: str, user_prompt: str, temperature: float = 0.0) -> str:
        """
        Return the first choice's content, trimmed.

        Content holding both '{' and '}' is reduced to its first JSON object.

        Raises:
            ConfigurationError: backend is missing its key/endpoint/model
            CompletionError: request or response failed
        """
        if isinstance(self.backend, HostedBackend):
            raw = await self._complete_hosted(self.backend, system_prompt, user_prompt, temperature)
            label = "Azure OpenAI"
        else:
            raw = await self._complete_direct(self.backend, system_prompt, user_prompt, temperature)
            label = "OpenAI"

        content = _normalize_content(raw)
        logger.info("%s output:\n%s", label, content)
        return content

    # ----------------------------
    # Hosted (Azure OpenAI REST)
    # ----------------------------

    async def _complete_hosted(
        self, backend: HostedBackend, system_prompt: str, user_prompt: str, temperature: float
    ) -> Optional[str]:
        if not (backend.api_key and backend.endpoint and backend.model):
            raise ConfigurationError(
                "Missing Azure OpenAI API key, endpoint, or model in environment variables."
            )

        payload = {
            "max_tokens": MAX_TOKENS,
            "temperature": temperature,
            "messages": build_messages(system_prompt, user_prompt),
        }
        headers = {
            "Content-Type": "application/json",
            "api-key": backend.api_key,
        }

        client_kwargs: Dict[str, Any] = {}
        if self.timeout is not None:
            client_kwargs["timeout"] = self.timeout
        if self._transport is not None:
            client_kwargs["transport"] = self._transport

        try:
            async with httpx.AsyncClient(**client_kwargs) as client:
                response = await client.post(backend.url, headers=headers, json=payload)
                response.raise_for_status()
                data = response.json()
        except httpx.HTTPError as e:
            raise CompletionError(f"Azure OpenAI request failed: {e}") from e
        except ValueError as e:
            raise CompletionError(f"Azure OpenAI returned invalid JSON: {e}") from e

        try:
            choices = data["choices"]
            if not choices:
                return ""
            return (choices[0].get("message") or {}).get("content")
        except (KeyError, TypeError, AttributeError) as e:
            raise CompletionError(f"Unexpected Azure OpenAI response shape: {data!r}") from e

    # ----------------------------
    # Direct (OpenAI SDK)
    # ----------------------------

    async def _complete_direct(
        self, backend: DirectBackend, system_prompt: str, user_prompt: str, temperature: float
    ) -> Optional[str]:
        if not backend.api_key:
            raise ConfigurationError("Missing OpenAI API key in environment variables.")

        request = {
            "model": backend.model,
            "max_tokens": MAX_TOKENS,
            "temperature": temperature,
            "messages": build_messages(system_prompt, user_prompt),
        }

        try:
            if self._openai_client is not None:
                completion = await self._openai_client.chat.completions.create(**request)
            else:
                client_kwargs: Dict[str, Any] = {"api_key": backend.api_key}
                if self.timeout is not None:
                    client_kwargs["timeout"] = self.timeout
                async with openai.AsyncOpenAI(**client_kwargs) as client:
                    completion = await client.chat.completions.create(**request)
        except openai.OpenAIError as e:
            raise CompletionError(f"OpenAI request failed: {e}") from e

        if not completion.choices:
            return ""
        return completion.choices[0].message.content
