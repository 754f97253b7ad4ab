"""Services for the application."""

from .pipeline import run_pipeline
from .provider import (
    ImageProvider,
    OpenAIImageProvider,
    OpenRouterImageProvider,
    create_image_provider,
)
from .scheduler import MemeScheduler
from .session import get_session
from .telegram import TelegramClient, download_image

__all__ = [
    "run_pipeline",
    "ImageProvider",
    "OpenAIImageProvider",
    "OpenRouterImageProvider",
    "create_image_provider",
    "MemeScheduler",
    "get_session",
    "TelegramClient",
    "download_image",
]
