"""Pydantic response schemas for API endpoints."""

from pydantic import BaseModel


class GameStateResponse(BaseModel):
    """Response containing current game state."""

    gameId: str  # noqa: N815
    state: dict


class CreateGameResponse(BaseModel):
    """Response after creating a new game."""

    gameId: str  # noqa: N815
    seed: int
    profile: str
    state: dict


class TickResponse(BaseModel):
    """Response after advancing one frame."""

    gameId: str  # noqa: N815
    tick: dict
    state: dict


class CommandResponse(BaseModel):
    """Response after a player command.

    ``applied`` is False when the command was ignored (boost on cooldown,
    restart while the match is running, click that changed nothing).
    """

    applied: bool
    state: dict
    shipGroup: str | None = None  # noqa: N815
