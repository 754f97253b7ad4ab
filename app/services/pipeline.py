"""Meme generation pipeline: prompt -> image -> Telegram."""

import random

from curl_cffi.requests import AsyncSession
from loguru import logger

from app.config import Settings
from app.errors import ConfigurationError
from app.models.generation import DeliveryPayload
from app.models.response import OutcomeReport
from app.services.prompts import select_caption, select_prompt
from app.services.provider import create_image_provider
from app.services.telegram import TelegramClient, download_image


SUCCESS_MESSAGE = "Meme generated and sent to Telegram successfully"


async def run_pipeline(
    settings: Settings,
    session: AsyncSession,
    rng: random.Random | None = None,
) -> OutcomeReport:
    """
    Generate a meme and send it to Telegram.

    Every failure is logged and converted into a failure report; nothing is
    retried and the alternate provider is never tried.

    Args:
        settings: Settings for this run
        session: Shared HTTP session
        rng: Random source for prompt and caption selection

    Returns:
        OutcomeReport describing the run
    """
    try:
        if not settings.telegram_bot_token or not settings.telegram_chat_id:
            raise ConfigurationError(
                "TELEGRAM_BOT_TOKEN and TELEGRAM_CHAT_ID must be configured"
            )

        provider = create_image_provider(settings, session)

        prompt = select_prompt(rng)
        logger.info(f"Selected prompt: {prompt}")

        result = await provider.generate(prompt)
        if result.revised_prompt:
            logger.info(f"Revised prompt: {result.revised_prompt}")

        image_data = await download_image(
            session, result.image_url, timeout=settings.timeout, proxy=settings.proxy
        )

        caption = select_caption(rng)

        telegram = TelegramClient(
            session,
            bot_token=settings.telegram_bot_token,
            base_api=settings.telegram_base_api,
            timeout=settings.timeout,
            proxy=settings.proxy,
        )
        await telegram.send_photo(
            DeliveryPayload(
                image_bytes=image_data,
                caption=caption,
                chat_id=settings.telegram_chat_id,
            )
        )

        logger.info("Meme generated and sent successfully")
        return OutcomeReport(
            success=True,
            message=SUCCESS_MESSAGE,
            prompt=prompt,
            revised_prompt=result.revised_prompt,
        )

    except Exception as e:
        logger.exception(f"Error generating meme: {e}")
        return OutcomeReport.failure(str(e))
