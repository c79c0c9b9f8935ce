"""Tests for RateExtractorFactory."""

from unittest.mock import patch

import pytest

from app.config.settings import Settings
from app.rates.extractor import RateExtractor
from app.rates.factory import RateExtractorFactory


class TestRateExtractorFactory:
    def test_example_provider_needs_no_network(self) -> None:
        settings = Settings(ai_provider="example")
        extractor = RateExtractorFactory.create(settings)
        assert isinstance(extractor, RateExtractor)
        assert extractor.extract("any text") == []

    def test_uses_openai_settings(self) -> None:
        settings = Settings(
            ai_provider="openai",
            ai_api_key="openai-key",
            ai_timeout_seconds=42,
            ai_base_url="",
        )
        with patch("app.rates.factory.OpenAIClientAdapter") as mock_adapter:
            extractor = RateExtractorFactory.create(settings)
        assert isinstance(extractor, RateExtractor)
        mock_adapter.assert_called_once_with(
            api_key="openai-key",
            timeout_seconds=42,
            base_url=None,
        )

    def test_uses_provider_default_base_url_for_openrouter(self) -> None:
        settings = Settings(ai_provider="openrouter", ai_api_key="k", ai_base_url="")
        with patch("app.rates.factory.OpenAIClientAdapter") as mock_adapter:
            RateExtractorFactory.create(settings)
        assert mock_adapter.call_args.kwargs["base_url"] == "https://openrouter.ai/api/v1"

    def test_uses_custom_base_url_for_openai_compatible(self) -> None:
        settings = Settings(
            ai_provider="openai_compatible",
            ai_api_key="k",
            ai_base_url="https://example.com/v1",
        )
        with patch("app.rates.factory.OpenAIClientAdapter") as mock_adapter:
            RateExtractorFactory.create(settings)
        assert mock_adapter.call_args.kwargs["base_url"] == "https://example.com/v1"

    def test_openai_compatible_requires_base_url(self) -> None:
        settings = Settings(ai_provider="openai_compatible", ai_api_key="k", ai_base_url="")
        with pytest.raises(ValueError, match="ai_base_url"):
            RateExtractorFactory.create(settings)

    def test_unknown_provider_raises_value_error(self) -> None:
        settings = Settings(ai_provider="unknown")
        with pytest.raises(ValueError, match="Unknown AI provider"):
            RateExtractorFactory.create(settings)

    def test_provider_is_case_insensitive(self) -> None:
        settings = Settings(ai_provider="EXAMPLE")
        assert RateExtractorFactory.create(settings).extract("text") == []
