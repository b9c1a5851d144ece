"""
API request and response models.

Pydantic models for inbound payload validation and OpenAPI schema generation.
"""

from typing import Any

from pydantic import BaseModel, Field


class ChallengeData(BaseModel):
    """Device identity submitted during onboarding."""

    email: str = Field(..., min_length=1, description="HoloPort admin email")
    holochain_agent_id: str = Field(
        ..., min_length=1, description="Base36 holochain agent id, used as member name"
    )
    zerotier_address: str = Field(..., min_length=1, description="ZeroTier node address")
    holoport_url: str | None = Field(default=None, description="HoloPort URL (logged only)")


class ChallengeRequest(BaseModel):
    """Request model for device registration."""

    data: ChallengeData


class NotifyRequest(BaseModel):
    """Request model for failed-registration notifications."""

    email: str = Field(..., min_length=1, description="Recipient address")
    error: Any = Field(..., description="Error description shown in the email, any JSON value")


class ErrorResponse(BaseModel):
    """Standard error response model."""

    detail: str
