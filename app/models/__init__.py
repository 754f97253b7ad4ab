"""Data models for the application."""

from .generation import GenerationRequest, GenerationResult, DeliveryPayload
from .response import OutcomeReport, HealthResponse

__all__ = [
    "GenerationRequest",
    "GenerationResult",
    "DeliveryPayload",
    "OutcomeReport",
    "HealthResponse",
]
