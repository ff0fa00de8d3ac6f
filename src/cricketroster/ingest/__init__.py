"""Input adapters that turn raw form text into player records."""

from .fields import (
    FieldValidationError,
    PlayerFields,
    fields_to_record,
    load_records_from_csv,
    parse_player_id,
)

__all__ = [
    "FieldValidationError",
    "PlayerFields",
    "fields_to_record",
    "load_records_from_csv",
    "parse_player_id",
]
