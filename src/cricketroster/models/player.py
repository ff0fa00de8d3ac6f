"""Canonical player model shared by the roster manager and presentation layers."""

from __future__ import annotations

from typing import Tuple

from pydantic import BaseModel
from pydantic.config import ConfigDict

from cricketroster.config.roles import stat_label_for


class PlayerRecord(BaseModel):
    """Single roster entry; updates produce a new copy."""

    player_id: int
    name: str
    role: str
    matches_played: int
    stat_value: int

    model_config = ConfigDict(frozen=True)

    @property
    def stat_label(self) -> str:
        return stat_label_for(self.role)

    def to_row(self) -> Tuple[int, str, str, int, str]:
        """Return the display row used by table views."""

        return (
            self.player_id,
            self.name,
            self.role,
            self.matches_played,
            f"{self.stat_value} {self.stat_label}",
        )
