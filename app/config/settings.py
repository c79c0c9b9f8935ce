from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    http_host: str = "0.0.0.0"
    http_port: int = 8000

    db_host: str = "localhost"
    db_port: int = 5432
    db_database: str = "rates"
    db_username: str = "rates"
    db_password: str = "secret"
    db_pool_max_size: int = 10

    max_upload_size_bytes: int = 5 * 1024 * 1024
    allowed_extensions: list[str] = [".pdf", ".docx", ".xlsx"]
    upload_dir: str = ""
    default_agent_id: str = ""

    pdf_engine: str = "pdfplumber"

    ai_provider: str = "openai"
    ai_api_key: str = ""
    ai_model_name: str = "gpt-4o"
    ai_base_url: str = ""
    ai_timeout_seconds: int = 60
    ai_temperature: float = 0.1
    ai_max_tokens: int = 3000
    ai_max_attempts: int = 1
    ai_max_input_chars: int = 24000
    ai_max_rates: int = 20

    default_currency: str = "USD"
