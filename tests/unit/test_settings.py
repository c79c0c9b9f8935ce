import pytest
from pydantic import ValidationError

from app.config.settings import Settings


class TestSettingsDefaults:
    def test_default_app_env(self) -> None:
        s = Settings()
        assert s.app_env == "dev"

    def test_default_db_port(self) -> None:
        s = Settings()
        assert s.db_port == 5432

    def test_default_upload_limit_is_five_mib(self) -> None:
        s = Settings()
        assert s.max_upload_size_bytes == 5 * 1024 * 1024

    def test_default_allowed_extensions(self) -> None:
        s = Settings()
        assert s.allowed_extensions == [".pdf", ".docx", ".xlsx"]

    def test_default_pdf_engine(self) -> None:
        s = Settings()
        assert s.pdf_engine == "pdfplumber"

    def test_default_ai_is_single_attempt(self) -> None:
        s = Settings()
        assert s.ai_max_attempts == 1

    def test_default_currency(self) -> None:
        s = Settings()
        assert s.default_currency == "USD"


class TestSettingsFromEnv:
    def test_loads_app_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("APP_ENV", "production")
        s = Settings()
        assert s.app_env == "production"

    def test_loads_log_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        s = Settings()
        assert s.log_level == "DEBUG"

    def test_loads_ai_provider(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("AI_PROVIDER", "groq")
        s = Settings()
        assert s.ai_provider == "groq"

    def test_loads_allowed_extensions_as_json(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ALLOWED_EXTENSIONS", '[".pdf"]')
        s = Settings()
        assert s.allowed_extensions == [".pdf"]

    def test_loads_default_agent_id(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DEFAULT_AGENT_ID", "agent-42")
        s = Settings()
        assert s.default_agent_id == "agent-42"


class TestSettingsValidation:
    def test_invalid_db_port_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DB_PORT", "not_a_number")
        with pytest.raises(ValidationError):
            Settings()

    def test_invalid_upload_limit_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MAX_UPLOAD_SIZE_BYTES", "abc")
        with pytest.raises(ValidationError):
            Settings()
