from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field

from cricketroster.config.roles import DEFAULT_ROLE
from cricketroster.models import PlayerRecord


class PlayerUpdateRequest(BaseModel):
    name: str
    role: str = Field(default=DEFAULT_ROLE)
    matches_played: int
    stat_value: int


class PlayerRequest(PlayerUpdateRequest):
    player_id: int

    def to_record(self) -> PlayerRecord:
        return PlayerRecord(
            player_id=self.player_id,
            name=self.name.strip(),
            role=self.role.strip() or DEFAULT_ROLE,
            matches_played=self.matches_played,
            stat_value=self.stat_value,
        )


class PlayerFieldsRequest(BaseModel):
    id: str = ""
    name: str = ""
    role: str = ""
    matches: str = ""
    stat: str = ""


class PlayerResponse(BaseModel):
    player_id: int
    name: str
    role: str
    matches_played: int
    stat_value: int
    stat_label: str

    @classmethod
    def from_record(cls, record: PlayerRecord) -> "PlayerResponse":
        return cls(
            player_id=record.player_id,
            name=record.name,
            role=record.role,
            matches_played=record.matches_played,
            stat_value=record.stat_value,
            stat_label=record.stat_label,
        )


class PlayerMutationResponse(BaseModel):
    message: str
    total: int
    player: PlayerResponse | None = None


class RosterResponse(BaseModel):
    total: int
    matched: int
    players: List[PlayerResponse]


class RoleResponse(BaseModel):
    role: str
    stat_label: str
