"""Error types raised by the meme pipeline."""


class NotifierError(Exception):
    """Base class for all pipeline errors."""


class ConfigurationError(NotifierError):
    """A required setting is missing."""


class AuthorizationError(NotifierError):
    """Manual trigger was refused."""

    status_code = 401

    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message)


class UpstreamError(NotifierError):
    """An external API answered with a non-success status."""

    def __init__(self, service: str, status_code: int, body: str | None = None):
        self.service = service
        self.status_code = status_code
        self.body = body
        if body is None:
            message = f"{service} failed: {status_code}"
        else:
            message = f"{service} API error: {status_code} - {body}"
        super().__init__(message)


class TransportError(NotifierError):
    """An external API could not be reached."""

    def __init__(self, service: str, reason: str):
        self.service = service
        self.reason = reason
        super().__init__(f"{service} request failed: {reason}")
