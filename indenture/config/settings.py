from pydantic_settings import BaseSettings, SettingsConfigDict

MIB = 1024 * 1024


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    db_host: str = "localhost"
    db_port: int = 5432
    db_database: str = "indenture"
    db_username: str = "indenture"
    db_password: str = "secret"

    owner_id: str = ""

    pdf_engine: str = "pdfplumber"
    max_file_size_bytes: int = 10 * MIB
    min_extracted_chars: int = 100
    extraction_chunk_size: int = 2000

    analysis_max_chars: int = 8000
    summary_excerpt_chars: int = 4000

    # Seconds to pause after each step update; only useful for interactive display.
    step_delay_seconds: float = 0.0

    generation_provider: str = "openai"
    analysis_model: str = "gpt-4o-mini"
    analysis_max_output_tokens: int = 2000
    summary_model: str = "gpt-4o-mini"

    generation_openai_api_key: str = ""
    generation_openai_timeout_seconds: int = 60

    generation_openai_compatible_base_url: str = ""
    generation_openai_compatible_api_key: str = ""
    generation_openai_compatible_timeout_seconds: int = 60

    generation_openrouter_api_key: str = ""
    generation_groq_api_key: str = ""
    generation_together_api_key: str = ""
    generation_deepseek_api_key: str = ""
    generation_ollama_api_key: str = "ollama"
