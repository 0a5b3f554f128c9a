"""Record Engine - Pure logic for reward record validation and creation.

This engine provides stateless, pure Python functions for:
- Input validation for new records (trimmed names, integer amounts)
- Unique, strictly increasing record id assignment
- Building immutable record dicts
- Sanitizing records read back from storage

ARCHITECTURE: This is a pure logic engine with NO Home Assistant state.
All functions are static methods that operate on passed-in data.
State management and persistence belong in RecordManager.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from .. import const
from ..utils.dt_utils import dt_parse, dt_to_epoch_ms, dt_to_iso_z
from ..utils.math_utils import parse_amount

if TYPE_CHECKING:
    from datetime import datetime

    from ..type_defs import RecordData


@dataclass(frozen=True, slots=True)
class RecordInput:
    """Validated input for a new record."""

    registrant: str
    task_type: str
    amount: int


def _as_integral(value: Any) -> int | None:
    """Return value as int when it is an int or an integral float (not bool)."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return None


class RecordEngine:
    """Pure logic engine for reward records.

    All methods are static - no instance state. This enables easy unit testing
    without any Home Assistant mocking.
    """

    @staticmethod
    def normalize_text(value: Any) -> str | None:
        """Return the trimmed string, or None if it is not a non-blank string."""
        if not isinstance(value, str):
            return None
        trimmed = value.strip()
        return trimmed or None

    @staticmethod
    def validate_input(
        registrant: Any, task_type: Any, amount: Any
    ) -> RecordInput | None:
        """Validate raw form input for a new record.

        Args:
            registrant: Name of the person credited
            task_type: Free-text task description
            amount: Reward amount (int, float or numeric string)

        Returns:
            RecordInput with trimmed text and parsed amount, or None when any
            field is blank or the amount does not parse as an integer.
        """
        name = RecordEngine.normalize_text(registrant)
        kind = RecordEngine.normalize_text(task_type)
        value = parse_amount(amount)
        if name is None or kind is None or value is None:
            return None
        return RecordInput(registrant=name, task_type=kind, amount=value)

    @staticmethod
    def next_record_id(records: Sequence[RecordData], now_utc: datetime) -> int:
        """Return an id greater than every existing id.

        The creation time in epoch milliseconds is used when it is already
        greater; otherwise the largest existing id plus one.
        """
        candidate = dt_to_epoch_ms(now_utc)
        if records:
            highest = max(record[const.DATA_RECORD_ID] for record in records)
            if candidate <= highest:
                candidate = highest + 1
        return candidate

    @staticmethod
    def build_record(
        records: Sequence[RecordData], record_input: RecordInput, now_utc: datetime
    ) -> RecordData:
        """Build a new record dict. Does not modify `records`."""
        return {
            const.DATA_RECORD_ID: RecordEngine.next_record_id(records, now_utc),
            const.DATA_RECORD_REGISTRANT: record_input.registrant,
            const.DATA_RECORD_TYPE: record_input.task_type,
            const.DATA_RECORD_AMOUNT: record_input.amount,
            const.DATA_RECORD_DATE: dt_to_iso_z(now_utc),
        }

    @staticmethod
    def find_index(records: Sequence[RecordData], record_id: int) -> int | None:
        """Return the list position of the record with `record_id`, if any."""
        for idx, record in enumerate(records):
            if record[const.DATA_RECORD_ID] == record_id:
                return idx
        return None

    @staticmethod
    def sanitize_record(raw: Any) -> tuple[RecordData | None, str | None]:
        """Check one stored record.

        Returns:
            (record, None) for a usable record, with text trimmed and numbers
            as int; (None, reason) when the record must be dropped.
        """
        if not isinstance(raw, dict):
            return None, "not an object"

        record_id = _as_integral(raw.get(const.DATA_RECORD_ID))
        if record_id is None:
            return None, "id is not an integer"

        registrant = RecordEngine.normalize_text(raw.get(const.DATA_RECORD_REGISTRANT))
        if registrant is None:
            return None, "registrant is blank"

        task_type = RecordEngine.normalize_text(raw.get(const.DATA_RECORD_TYPE))
        if task_type is None:
            return None, "type is blank"

        amount = _as_integral(raw.get(const.DATA_RECORD_AMOUNT))
        if amount is None:
            return None, "amount is not an integer"

        date_value = raw.get(const.DATA_RECORD_DATE)
        if dt_parse(date_value) is None:
            return None, "date is not an ISO 8601 timestamp"

        return {
            const.DATA_RECORD_ID: record_id,
            const.DATA_RECORD_REGISTRANT: registrant,
            const.DATA_RECORD_TYPE: task_type,
            const.DATA_RECORD_AMOUNT: amount,
            const.DATA_RECORD_DATE: date_value,
        }, None

    @staticmethod
    def sanitize_records(raw_records: Any) -> list[RecordData]:
        """Return the usable records from a stored list, keeping their order.

        Records that cannot be interpreted, or that repeat an id already seen,
        are dropped with a warning. A non-list value yields an empty list.
        """
        if not isinstance(raw_records, list):
            if raw_records is not None:
                const.LOGGER.warning(
                    "WARNING: Stored records are not a list (%s); starting empty",
                    type(raw_records).__name__,
                )
            return []

        records: list[RecordData] = []
        seen_ids: set[int] = set()
        for position, raw in enumerate(raw_records):
            record, reason = RecordEngine.sanitize_record(raw)
            if record is None:
                const.LOGGER.warning(
                    "WARNING: Dropping stored record at position %s: %s",
                    position,
                    reason,
                )
                continue
            if record[const.DATA_RECORD_ID] in seen_ids:
                const.LOGGER.warning(
                    "WARNING: Dropping stored record at position %s: duplicate id %s",
                    position,
                    record[const.DATA_RECORD_ID],
                )
                continue
            seen_ids.add(record[const.DATA_RECORD_ID])
            records.append(record)
        return records
