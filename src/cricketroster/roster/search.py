"""Substring filtering over roster listings."""

from __future__ import annotations

from typing import Iterable, List

from cricketroster.models import PlayerRecord


def _matches(record: PlayerRecord, needle: str) -> bool:
    return needle in str(record.player_id) or needle in record.name.lower()


def filter_players(records: Iterable[PlayerRecord], query: str | None) -> List[PlayerRecord]:
    """Keep records whose id or name contains ``query`` (case-insensitive).

    A blank query returns every record. Input order is preserved.
    """

    needle = (query or "").strip().lower()
    if not needle:
        return list(records)
    return [record for record in records if _matches(record, needle)]
