import json

from app.config import Settings


IMAGE_URL = "https://images.example.com/meme.png"
IMAGE_BYTES = b"\x89PNG\r\n\x1a\nfake-image"


class FakeResponse:
    """Minimal stand-in for a curl_cffi response."""

    def __init__(self, status_code: int = 200, text: str = "", content: bytes = b"", payload=None):
        self.status_code = status_code
        self.content = content
        self.text = json.dumps(payload) if payload is not None else text
        self._payload = payload

    def json(self):
        if self._payload is None:
            return json.loads(self.text)
        return self._payload


def generation_payload(url: str = IMAGE_URL, revised_prompt: str | None = "revised"):
    return {"data": [{"url": url, "revised_prompt": revised_prompt}]}


def make_settings(**overrides) -> Settings:
    values = {
        "openai_api_key": "k",
        "telegram_bot_token": "t",
        "telegram_chat_id": "c",
        "environment": "development",
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)
