"""Image download and Telegram delivery."""

from curl_cffi import CurlMime
from curl_cffi.requests import AsyncSession
from curl_cffi.requests.exceptions import RequestException
from loguru import logger

from app.errors import TransportError, UpstreamError
from app.models.generation import DeliveryPayload
from app.services.session import is_success


async def download_image(
    session: AsyncSession, image_url: str, timeout: int = 120, proxy: str | None = None
) -> bytes:
    """
    Download an image into memory.

    Raises:
        UpstreamError: The image host answered with a non-success status
        TransportError: The image host could not be reached
    """
    try:
        response = await session.get(image_url, timeout=timeout, proxy=proxy)
    except RequestException as e:
        logger.error(f"Image download failed: {e}")
        raise TransportError("Image download", str(e)) from e

    if not is_success(response.status_code):
        logger.error(f"Image download failed - status: {response.status_code}")
        raise UpstreamError("Image download", response.status_code)

    logger.info(f"Downloaded image ({len(response.content)} bytes)")
    return response.content


class TelegramClient:
    """Client for the Telegram Bot API."""

    name = "Telegram"

    def __init__(
        self,
        session: AsyncSession,
        bot_token: str,
        base_api: str = "https://api.telegram.org",
        timeout: int = 120,
        proxy: str | None = None,
    ):
        self.session = session
        self.bot_token = bot_token
        self.base_api = base_api
        self.timeout = timeout
        self.proxy = proxy

    @property
    def send_photo_url(self) -> str:
        return f"{self.base_api}/bot{self.bot_token}/sendPhoto"

    async def send_photo(self, payload: DeliveryPayload) -> None:
        """
        Send a photo with caption to a chat.

        Raises:
            UpstreamError: Telegram answered with a non-success status
            TransportError: Telegram could not be reached
        """
        multipart = CurlMime()
        multipart.addpart(
            name="photo",
            content_type="image/png",
            filename="meme.png",
            data=payload.image_bytes,
        )
        multipart.addpart(name="caption", data=payload.caption.encode("utf-8"))
        multipart.addpart(name="chat_id", data=payload.chat_id.encode("utf-8"))

        try:
            response = await self.session.post(
                self.send_photo_url,
                multipart=multipart,
                timeout=self.timeout,
                proxy=self.proxy,
            )
        except RequestException as e:
            # Never log the URL, it contains the bot token
            logger.error(f"Telegram request failed: {type(e).__name__}")
            raise TransportError(self.name, type(e).__name__) from e
        finally:
            multipart.close()

        if not is_success(response.status_code):
            logger.error(
                f"Telegram request failed - status: {response.status_code}, "
                f"response: {response.text[:1024]}"
            )
            raise UpstreamError(self.name, response.status_code, response.text)

        logger.info(f"Photo sent to chat {payload.chat_id}")
