from typing import ClassVar

from app.config.settings import Settings
from app.rates.example_client_adapter import ExampleClientAdapter
from app.rates.extractor import RateExtractor
from app.rates.openai_client_adapter import OpenAIClientAdapter


class RateExtractorFactory:
    """Creates the rate extractor for the configured AI provider."""

    OPENAI_COMPATIBLE_BASE_URLS: ClassVar[dict[str, str]] = {
        "openrouter": "https://openrouter.ai/api/v1",
        "groq": "https://api.groq.com/openai/v1",
        "together": "https://api.together.xyz/v1",
        "deepseek": "https://api.deepseek.com/v1",
        "ollama": "http://localhost:11434/v1",
    }

    @classmethod
    def create(cls, settings: Settings) -> RateExtractor:
        """Create a configured rate extractor from application settings."""
        provider = settings.ai_provider.lower()
        if provider == "example":
            client = ExampleClientAdapter()
        else:
            client = OpenAIClientAdapter(
                api_key=settings.ai_api_key,
                timeout_seconds=settings.ai_timeout_seconds,
                base_url=cls._resolve_base_url(provider, settings),
            )
        return RateExtractor(
            client=client,
            model=settings.ai_model_name,
            temperature=settings.ai_temperature,
            max_tokens=settings.ai_max_tokens,
            max_attempts=settings.ai_max_attempts,
            max_input_chars=settings.ai_max_input_chars,
            max_rates=settings.ai_max_rates,
            default_currency=settings.default_currency,
        )

    @classmethod
    def _resolve_base_url(cls, provider: str, settings: Settings) -> str | None:
        if provider == "openai":
            return settings.ai_base_url.strip() or None
        if provider == "openai_compatible":
            url = settings.ai_base_url.strip()
            if not url:
                raise ValueError(
                    "ai_base_url is required for ai_provider=openai_compatible"
                )
            return url
        default_base_url = cls.OPENAI_COMPATIBLE_BASE_URLS.get(provider)
        if default_base_url is not None:
            return settings.ai_base_url.strip() or default_base_url
        supported = [
            "example",
            "openai",
            "openai_compatible",
            *sorted(cls.OPENAI_COMPATIBLE_BASE_URLS),
        ]
        raise ValueError(f"Unknown AI provider '{provider}'. Choose from: {supported}")
