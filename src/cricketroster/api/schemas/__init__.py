"""Pydantic models for API I/O."""

from .player import (
    PlayerFieldsRequest,
    PlayerMutationResponse,
    PlayerRequest,
    PlayerResponse,
    PlayerUpdateRequest,
    RoleResponse,
    RosterResponse,
)

__all__ = [
    "PlayerFieldsRequest",
    "PlayerMutationResponse",
    "PlayerRequest",
    "PlayerResponse",
    "PlayerUpdateRequest",
    "RoleResponse",
    "RosterResponse",
]
