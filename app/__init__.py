"""Meme Notifier - generates AI memes and posts them to Telegram."""

__version__ = "1.0.0"
