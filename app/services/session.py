"""Shared HTTP session for outbound provider and Telegram calls."""

from curl_cffi.requests import AsyncSession

from app import __version__


USER_AGENT = f"meme-notifier/{__version__}"

_session: AsyncSession | None = None


async def get_session() -> AsyncSession:
    """Get or create the shared async session used by every activation."""
    global _session
    if _session is None:
        _session = AsyncSession(headers={"User-Agent": USER_AGENT})
    return _session


async def close_session() -> None:
    """Close the shared session once in-flight runs have settled."""
    global _session
    if _session is not None:
        await _session.close()
        _session = None


def is_success(status_code: int) -> bool:
    """Check if an HTTP status is in the 2xx range."""
    return 200 <= status_code < 300
