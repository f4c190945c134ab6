"""
Tests for configuration loading and backend selection.
"""
import pytest

from nl_bridge.config import (
    DEFAULT_API_VERSION,
    DirectBackend,
    HostedBackend,
    Settings,
    get_settings,
    select_backend,
)


class TestGetSettings:
    """Test environment loading."""

    def test_defaults_when_env_empty(self, clean_env):
        """Test missing variables become empty strings / defaults."""
        s = get_settings()
        assert s.api_key == ""
        assert s.endpoint == ""
        assert s.model == ""
        assert s.api_version == DEFAULT_API_VERSION
        assert s.direct_model == "gpt-3.5-turbo"
        assert s.schema_path == "db.schema"
        assert s.log_level == "INFO"

    def test_reads_openai_variables(self, clean_env, monkeypatch):
        """Test OPENAI_* variables are read and stripped."""
        monkeypatch.setenv("OPENAI_API_KEY", "  sk-test  ")
        monkeypatch.setenv("OPENAI_ENDPOINT", "https://example.openai.azure.com/")
        monkeypatch.setenv("OPENAI_MODEL", "gpt-35")
        monkeypatch.setenv("OPENAI_API_VERSION", "2024-02-01")
        s = get_settings()
        assert s.api_key == "sk-test"
        assert s.endpoint == "https://example.openai.azure.com/"
        assert s.model == "gpt-35"
        assert s.api_version == "2024-02-01"

    def test_reads_dotenv_file(self, clean_env):
        """Test values come from a .env file when the OS env is empty."""
        env_file = clean_env / ".env"
        env_file.write_text("OPENAI_API_KEY=from-dotenv\nNL_BRIDGE_LOG_LEVEL=debug\n")
        s = get_settings(str(env_file))
        assert s.api_key == "from-dotenv"
        assert s.log_level == "DEBUG"

    def test_os_env_wins_over_dotenv(self, clean_env, monkeypatch):
        """Test OS environment takes precedence over .env."""
        env_file = clean_env / ".env"
        env_file.write_text("OPENAI_API_KEY=from-dotenv\n")
        monkeypatch.setenv("OPENAI_API_KEY", "from-os")
        assert get_settings(str(env_file)).api_key == "from-os"

    def test_settings_are_immutable(self):
        """Test Settings is frozen."""
        s = Settings(api_key="x")
        with pytest.raises(AttributeError):
            s.api_key = "y"


class TestSelectBackend:
    """Test hosted vs direct selection."""

    def test_hosted_when_all_present(self):
        s = Settings(api_key="k", endpoint="https://e", model="m", api_version="v")
        backend = select_backend(s)
        assert isinstance(backend, HostedBackend)
        assert backend.api_key == "k"
        assert backend.api_version == "v"

    def test_direct_when_endpoint_missing(self):
        backend = select_backend(Settings(api_key="k", model="m"))
        assert isinstance(backend, DirectBackend)
        assert backend.api_key == "k"
        assert backend.model == "gpt-3.5-turbo"

    def test_direct_when_model_missing(self):
        backend = select_backend(Settings(api_key="k", endpoint="https://e"))
        assert isinstance(backend, DirectBackend)

    def test_direct_when_key_missing(self):
        """Test a keyless config still selects direct (fails later, at call time)."""
        backend = select_backend(Settings(endpoint="https://e", model="m"))
        assert isinstance(backend, DirectBackend)
        assert backend.api_key == ""

    def test_direct_model_override(self):
        backend = select_backend(Settings(api_key="k", direct_model="gpt-4"))
        assert backend.model == "gpt-4"


class TestHostedBackendUrl:
    """Test the Azure deployment URL."""

    def test_url_shape(self, hosted_backend):
        assert hosted_backend.url == (
            "https://example.openai.azure.com/openai/deployments/gpt-35/chat/completions"
            "?api-version=2023-05-15"
        )

    def test_trailing_slash_stripped(self):
        backend = HostedBackend(api_key="k", endpoint="https://e.azure.com/", model="m", api_version="v")
        assert backend.url == "https://e.azure.com/openai/deployments/m/chat/completions?api-version=v"
