"""Table rows and CSV export for roster listings."""

from __future__ import annotations

import csv
from io import StringIO
from typing import Iterable, List, Sequence, Tuple

from cricketroster.models import PlayerRecord


TABLE_HEADERS: Tuple[str, ...] = ("ID", "Name", "Role", "Matches", "Runs/Wickets")


def roster_rows(records: Iterable[PlayerRecord]) -> List[Tuple[int, str, str, int, str]]:
    return [record.to_row() for record in records]


def export_roster_to_csv(records: Sequence[PlayerRecord]) -> str:
    """Convert a listing to CSV text, one row per player in the given order."""

    buffer = StringIO()
    writer = csv.writer(buffer)
    writer.writerow(TABLE_HEADERS)
    for row in roster_rows(records):
        writer.writerow(row)
    return buffer.getvalue()


__all__ = [
    "TABLE_HEADERS",
    "export_roster_to_csv",
    "roster_rows",
]
