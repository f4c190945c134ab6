"""
Configuration loading and backend selection for NL Bridge.

- Loads .env (python-dotenv), then reads OPENAI_* variables
- Collects everything into an immutable Settings value
- select_backend() picks the hosted (Azure OpenAI) or direct (OpenAI) dialect
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional, Union

from dotenv import find_dotenv, load_dotenv

DEFAULT_DIRECT_MODEL = "gpt-3.5-turbo"
DEFAULT_API_VERSION = "2023-05-15"
DEFAULT_SCHEMA_PATH = "db.schema"


class NLBridgeError(Exception):
    """Base error for NL Bridge."""


class ConfigurationError(NLBridgeError):
    """Raised when a required API key, endpoint, or model is missing."""


@dataclass(frozen=True)
class Settings:
    """Runtime settings, built once per process."""
    api_key: str = ""
    endpoint: str = ""
    model: str = ""
    api_version: str = DEFAULT_API_VERSION
    direct_model: str = DEFAULT_DIRECT_MODEL
    schema_path: str = DEFAULT_SCHEMA_PATH
    log_level: str = "INFO"


@dataclass(frozen=True)
class HostedBackend:
    """Enterprise-hosted deployment (Azure OpenAI REST dialect)."""
    api_key: str
    endpoint: str
    model: str
    api_version: str

    @property
    def url(self) -> str:
        base = self.endpoint.rstrip("/")
        return (
            f"{base}/openai/deployments/{self.model}/chat/completions"
            f"?api-version={self.api_version}"
        )


@dataclass(frozen=True)
class DirectBackend:
    """Direct provider API (OpenAI)."""
    api_key: str
    model: str = DEFAULT_DIRECT_MODEL


Backend = Union[HostedBackend, DirectBackend]


def _env(name: str, default: str = "") -> str:
    return (os.getenv(name) or default).strip()


def get_settings(env_file: Optional[str] = None) -> Settings:
    """
    Load .env + environment variables and return a Settings object.

    OS environment wins over .env values (load_dotenv does not override).
    Missing values are left empty; select_backend()/CompletionClient decide
    whether that is fatal.
    """
    load_dotenv(env_file or find_dotenv(usecwd=True))

    return Settings(
        api_key=_env("OPENAI_API_KEY"),
        endpoint=_env("OPENAI_ENDPOINT"),
        model=_env("OPENAI_MODEL"),
        api_version=_env("OPENAI_API_VERSION", DEFAULT_API_VERSION),
        direct_model=_env("NL_BRIDGE_DIRECT_MODEL", DEFAULT_DIRECT_MODEL),
        schema_path=_env("NL_BRIDGE_SCHEMA_PATH", DEFAULT_SCHEMA_PATH),
        log_level=_env("NL_BRIDGE_LOG_LEVEL", "INFO").upper(),
    )


def select_backend(settings: Settings) -> Backend:
    """
    Hosted when key, endpoint and model are all set; direct otherwise.

    A DirectBackend with an empty key is still returned: the client raises
    ConfigurationError when it is used, before any request goes out.
    """
    if settings.api_key and settings.endpoint and settings.model:
        return HostedBackend(
            api_key=settings.api_key,
            endpoint=settings.endpoint,
            model=settings.model,
            api_version=settings.api_version,
        )
    return DirectBackend(api_key=settings.api_key, model=settings.direct_model)
