"""Parse raw text fields into canonical player records."""

from __future__ import annotations

import csv
import logging
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel

from cricketroster.config.roles import DEFAULT_ROLE
from cricketroster.models import PlayerRecord


logger = logging.getLogger(__name__)

_CSV_COLUMNS = ("id", "name", "role", "matches", "stat")


class FieldValidationError(ValueError):
    """Raised when a numeric field does not parse as an integer."""

    def __init__(self, field: str, raw: Optional[str]):
        super().__init__(f"Field {field!r} must be a whole number, got {raw!r}")
        self.field = field
        self.raw = raw


class PlayerFields(BaseModel):
    """Raw, untrimmed values as typed into a player form."""

    raw_id: str = ""
    raw_name: str = ""
    raw_role: str = ""
    raw_matches: str = ""
    raw_stat: str = ""


def _parse_int(field: str, raw: Optional[str]) -> int:
    text = (raw or "").strip()
    # int() would also accept "1_000" and surrounding whitespace
    if "_" in text:
        raise FieldValidationError(field, raw)
    try:
        return int(text)
    except ValueError as exc:
        raise FieldValidationError(field, raw) from exc


def parse_player_id(raw: Optional[str]) -> int:
    return _parse_int("id", raw)


def fields_to_record(fields: PlayerFields) -> PlayerRecord:
    """Convert raw form text to a record, raising FieldValidationError on bad numbers."""

    player_id = parse_player_id(fields.raw_id)
    matches = _parse_int("matches", fields.raw_matches)
    stat = _parse_int("stat", fields.raw_stat)
    return PlayerRecord(
        player_id=player_id,
        name=fields.raw_name.strip(),
        role=fields.raw_role.strip() or DEFAULT_ROLE,
        matches_played=matches,
        stat_value=stat,
    )


def load_records_from_csv(path: Path) -> List[PlayerRecord]:
    """Read ``id,name,role,matches,stat`` rows into records in file order."""

    records: List[PlayerRecord] = []
    with path.open(newline="", encoding="utf-8") as f:
        reader = csv.DictReader(f)
        header = {name.strip().lower() for name in reader.fieldnames or []}
        missing = [column for column in _CSV_COLUMNS if column not in header]
        if missing:
            raise ValueError(f"{path} is missing columns: {', '.join(missing)}")
        for row in reader:
            normalized = {(key or "").strip().lower(): value for key, value in row.items()}
            fields = PlayerFields(
                raw_id=normalized.get("id") or "",
                raw_name=normalized.get("name") or "",
                raw_role=normalized.get("role") or "",
                raw_matches=normalized.get("matches") or "",
                raw_stat=normalized.get("stat") or "",
            )
            records.append(fields_to_record(fields))
    logger.info("Loaded %s players from %s", len(records), path)
    return records
