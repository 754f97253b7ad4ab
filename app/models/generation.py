"""Models passed between pipeline stages."""

from pydantic import BaseModel, Field


class GenerationRequest(BaseModel):
    """Image generation request."""

    prompt: str = Field(..., description="Prompt sent to the image provider")


class GenerationResult(BaseModel):
    """Image generation result."""

    image_url: str = Field(..., description="URL of the generated image")
    revised_prompt: str | None = Field(
        default=None, description="Prompt as rewritten by the provider"
    )


class DeliveryPayload(BaseModel):
    """Photo message sent to Telegram."""

    image_bytes: bytes = Field(..., description="Raw image data")
    caption: str = Field(..., description="Photo caption")
    chat_id: str = Field(..., description="Destination chat ID")
