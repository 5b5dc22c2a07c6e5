"""Pydantic request schemas for API endpoints."""

from pydantic import BaseModel, Field

from ...config import DEFAULT_PROFILE


class CreateGameRequest(BaseModel):
    """Request to create a new game."""

    seed: int | None = Field(default=None, description="Optional RNG seed for determinism")
    profile: str = Field(
        default=DEFAULT_PROFILE, description="Tuning profile: 'classic' or 'extended'"
    )
    frameRate: float = Field(  # noqa: N815
        default=30.0, gt=0, le=240, description="Server-side frame loop rate (fps)"
    )


class TickRequest(BaseModel):
    """Advance the simulation by one client-driven frame."""

    elapsed: float = Field(description="Seconds since the previous frame")


class ClickRequest(BaseModel):
    """Pointer click in arena coordinates."""

    x: float
    y: float
