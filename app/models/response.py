"""Response models for trigger endpoints."""

from pydantic import BaseModel, Field


class OutcomeReport(BaseModel):
    """Result of a single pipeline run."""

    success: bool = Field(..., description="Whether the meme was delivered")
    message: str | None = Field(default=None, description="Success message")
    error: str | None = Field(default=None, description="Error message")
    prompt: str | None = Field(default=None, description="Prompt used for generation")
    revised_prompt: str | None = Field(
        default=None, description="Prompt as rewritten by the provider"
    )

    @classmethod
    def failure(cls, error: str) -> "OutcomeReport":
        return cls(success=False, error=error)

    def to_response(self) -> dict:
        """Build the JSON body returned to HTTP callers."""
        if not self.success:
            return {"success": False, "error": self.error}
        return {
            "success": True,
            "message": self.message,
            "prompt": self.prompt,
            "revisedPrompt": self.revised_prompt,
        }


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(default="healthy", description="Service status")
