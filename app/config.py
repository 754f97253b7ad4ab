"""Configuration management for the application."""

from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Server Configuration
    host: str = Field(default="0.0.0.0", description="Server host")
    port: int = Field(default=8000, description="Server port")
    log_level: str = Field(default="INFO", description="Logging level")

    # Proxy Configuration
    proxy: str | None = Field(default=None, description="HTTP proxy URL")

    # Timeout Configuration
    timeout: int = Field(default=120, description="Request timeout in seconds")

    # Environment / Access Configuration
    environment: str = Field(
        default="production",
        description="Deployment environment, manual triggers are unprotected in 'development'",
    )
    manual_trigger_password: str | None = Field(
        default=None, description="Password required for manual triggers outside development"
    )

    # Image Provider Configuration
    image_api_provider: str = Field(
        default="openai", description="Image provider: 'openai' or 'openrouter'"
    )
    openai_api_key: str | None = Field(default=None, description="OpenAI API key")
    openai_model: str = Field(default="dall-e-3", description="OpenAI image model")
    openai_base_api: str = Field(
        default="https://api.openai.com/v1", description="OpenAI base API URL"
    )
    openrouter_api_key: str | None = Field(default=None, description="OpenRouter API key")
    openrouter_model: str = Field(default="dall-e-3", description="OpenRouter image model")
    openrouter_base_api: str = Field(
        default="https://openrouter.ai/api/v1", description="OpenRouter base API URL"
    )
    openrouter_referer: str = Field(
        default="https://github.com/your-repo",
        description="HTTP-Referer header sent to OpenRouter",
    )
    openrouter_title: str = Field(
        default="Learn Notifier", description="X-Title header sent to OpenRouter"
    )
    image_size: str = Field(default="1024x1024", description="Generated image size")
    image_quality: str = Field(default="standard", description="Generated image quality")

    # Telegram Configuration
    telegram_bot_token: str | None = Field(default=None, description="Telegram bot token")
    telegram_chat_id: str | None = Field(default=None, description="Telegram chat ID")
    telegram_base_api: str = Field(
        default="https://api.telegram.org", description="Telegram Bot API base URL"
    )

    # Schedule Configuration
    schedule_enabled: bool = Field(
        default=True, description="Whether to run the pipeline on a timer"
    )
    schedule_interval: int = Field(
        default=86400,
        description="Interval between scheduled runs in seconds (default 1 day)",
    )

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"

    @property
    def is_development(self) -> bool:
        """Check if the service runs in development mode."""
        return self.environment.lower() == "development"


# Global settings instance
settings = Settings()


def get_settings() -> Settings:
    """Dependency returning the global settings instance."""
    return settings
