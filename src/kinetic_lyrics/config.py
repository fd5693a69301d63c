"""Service configuration using pydantic-settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Kinetic Lyrics service configuration."""

    model_config = SettingsConfigDict(
        env_file=".env", case_sensitive=True, env_prefix="KINETIC_", extra="ignore"
    )

    # LLM Configuration (OpenAI-compatible API with audio input)
    # Supports OpenRouter, Gemini's OpenAI endpoint, or OpenAI direct
    LLM_API_KEY: str = ""
    LLM_BASE_URL: str = "https://openrouter.ai/api/v1"
    LLM_MODEL: str = "google/gemini-2.0-flash-001"
    LLM_TEMPERATURE: float = 0.2
    LLM_MAX_RETRIES: int = 3
    LLM_TIMEOUT: float = 300.0  # Long media can take minutes to process

    # API Security
    API_KEY: str = ""

    # Upload limits
    MAX_MEDIA_MB: int = 20

    # Force oracle style values into the closed enumerations
    STRICT_STYLES: bool = False

    LOG_LEVEL: str = "INFO"


settings = Settings()
