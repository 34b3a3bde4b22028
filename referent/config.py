"""Application configuration using Pydantic Settings."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Provider credentials
    openrouter_api_key: str = Field(default="", description="OpenRouter API key (text generation)")
    huggingface_api_key: str = Field(default="", description="Hugging Face API key (image generation)")

    # Provider endpoints
    openrouter_base_url: str = Field(
        default="https://openrouter.ai/api/v1", description="Base URL for OpenRouter API"
    )
    huggingface_base_url: str = Field(
        default="https://router.huggingface.co/hf-inference/models",
        description="Base URL for Hugging Face inference models",
    )
    app_url: str = Field(default="http://localhost:3000", description="Sent as HTTP-Referer to OpenRouter")

    # Models
    text_model: str = Field(default="deepseek/deepseek-r1-0528:free", description="Model for text actions")
    translation_model: str = Field(default="deepseek/deepseek-chat", description="Model for translation")
    image_prompt_model: str = Field(
        default="nex-agi/deepseek-v3.1-nex-n1:free", description="Model that writes image prompts"
    )
    image_model: str = Field(
        default="stabilityai/stable-diffusion-xl-base-1.0", description="Hugging Face image model id"
    )

    # Timeouts
    fetch_timeout: float = Field(default=30.0, description="Article page fetch timeout in seconds")
    llm_timeout: float = Field(default=120.0, description="Text generation request timeout in seconds")
    image_timeout: float = Field(default=120.0, description="Image generation request timeout in seconds")
    fetch_user_agent: str = Field(
        default=(
            "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
            "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
        ),
        description="User-Agent header used when downloading articles",
    )

    # Application Configuration
    app_title: str = Field(default="Referent", description="Application title")
    app_version: str = Field(default="1.0.0", description="Application version")
    debug: bool = Field(default=False, description="Debug mode")
    allowed_origins: str = Field(
        default="http://localhost:3000", description="Comma separated list of CORS origins"
    )

    # Logging Configuration
    log_level: str = Field(default="INFO", description="Log level (DEBUG, INFO, WARNING, ERROR)")
    log_json: bool = Field(default=True, description="Use JSON log format")
    log_file: str | None = Field(default=None, description="Optional log file path")

    @property
    def cors_origins(self) -> list[str]:
        return [o.strip() for o in self.allowed_origins.split(",") if o.strip()]


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
