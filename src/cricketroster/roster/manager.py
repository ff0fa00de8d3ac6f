"""Last-in-first-out player roster with id-based access."""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, List, Optional

from cricketroster.models import PlayerRecord


logger = logging.getLogger(__name__)


class DuplicatePlayerError(ValueError):
    """Raised when inserting a player whose id is already on the roster."""

    def __init__(self, player_id: int):
        super().__init__(f"Player id {player_id} already exists")
        self.player_id = player_id


class RosterManager:
    """Owns the ordered roster.

    Storage is a single list whose end is the top of the stack. Push and pop
    work on that end; find, update and delete walk it from the top down so the
    first match is always the most recently inserted one.
    """

    def __init__(self, initial: Iterable[PlayerRecord] | None = None):
        self._players: List[PlayerRecord] = []
        for record in initial or ():
            self.insert_top(record)

    def __len__(self) -> int:
        return len(self._players)

    def __iter__(self) -> Iterator[PlayerRecord]:
        return iter(self.list_top_to_bottom())

    def __contains__(self, player_id: object) -> bool:
        return isinstance(player_id, int) and self._index_of(player_id) is not None

    def _index_of(self, player_id: int) -> Optional[int]:
        for idx in range(len(self._players) - 1, -1, -1):
            if self._players[idx].player_id == player_id:
                return idx
        return None

    def insert_top(self, record: PlayerRecord) -> None:
        if self._index_of(record.player_id) is not None:
            logger.warning("Rejected duplicate player id %s", record.player_id)
            raise DuplicatePlayerError(record.player_id)
        self._players.append(record)
        logger.info("Added player %s (%s); roster size %s", record.player_id, record.name, len(self._players))

    def remove_top(self) -> Optional[PlayerRecord]:
        """Pop the most recently inserted player, or return None when empty."""

        if not self._players:
            logger.warning("Remove requested on an empty roster")
            return None
        removed = self._players.pop()
        logger.info("Removed top player %s (%s)", removed.player_id, removed.name)
        return removed

    def find_by_id(self, player_id: int) -> Optional[PlayerRecord]:
        idx = self._index_of(player_id)
        if idx is None:
            return None
        return self._players[idx]

    def update_by_id(
        self,
        player_id: int,
        *,
        name: str,
        role: str,
        matches_played: int,
        stat_value: int,
    ) -> bool:
        """Replace the mutable fields of a player, keeping its roster position."""

        idx = self._index_of(player_id)
        if idx is None:
            logger.warning("Update skipped; player id %s not found", player_id)
            return False
        self._players[idx] = self._players[idx].model_copy(
            update={
                "name": name,
                "role": role,
                "matches_played": matches_played,
                "stat_value": stat_value,
            }
        )
        logger.info("Updated player %s", player_id)
        return True

    def delete_by_id(self, player_id: int) -> bool:
        idx = self._index_of(player_id)
        if idx is None:
            logger.warning("Delete skipped; player id %s not found", player_id)
            return False
        del self._players[idx]
        logger.info("Deleted player %s; roster size %s", player_id, len(self._players))
        return True

    def is_empty(self) -> bool:
        return not self._players

    def size(self) -> int:
        return len(self._players)

    def list_top_to_bottom(self) -> List[PlayerRecord]:
        """Snapshot of the roster, most recently inserted first."""

        return list(reversed(self._players))

    def clear(self) -> None:
        self._players.clear()
        logger.info("Cleared roster")
