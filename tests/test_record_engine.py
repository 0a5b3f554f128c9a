"""Tests for RecordEngine - pure logic, no HA fixtures needed.

These tests validate record validation, id assignment and storage
sanitizing without requiring Home Assistant setup.
"""

from __future__ import annotations

from datetime import UTC, datetime

from custom_components.otetsudai import const
from custom_components.otetsudai.engines.record_engine import (
    RecordEngine,
    RecordInput,
)
from tests.helpers import make_record

NOW = datetime(2025, 1, 15, 12, 0, tzinfo=UTC)
NOW_MS = 1736942400000

# =============================================================================
# TEST: INPUT VALIDATION
# =============================================================================


class TestValidateInput:
    """Test validation of new record input."""

    def test_trims_text_fields(self) -> None:
        """Registrant and type are stored trimmed."""
        result = RecordEngine.validate_input("  Kai ", "\tDishes\n", 500)
        assert result == RecordInput(registrant="Kai", task_type="Dishes", amount=500)

    def test_blank_registrant_rejected(self) -> None:
        """A registrant made of whitespace is rejected."""
        assert RecordEngine.validate_input("   ", "Dishes", 500) is None

    def test_empty_type_rejected(self) -> None:
        """An empty type is rejected."""
        assert RecordEngine.validate_input("Kai", "", 500) is None

    def test_nan_amount_rejected(self) -> None:
        """NaN does not parse as an integer."""
        assert RecordEngine.validate_input("Kai", "Dishes", float("nan")) is None

    def test_amount_string_parsed(self) -> None:
        """Numeric strings are parsed from their leading integer."""
        result = RecordEngine.validate_input("Kai", "Dishes", "300yen")
        assert result is not None
        assert result.amount == 300

    def test_non_string_registrant_rejected(self) -> None:
        """Only strings are accepted as names."""
        assert RecordEngine.validate_input(None, "Dishes", 500) is None
        assert RecordEngine.validate_input(42, "Dishes", 500) is None

    def test_zero_and_negative_amounts_allowed(self) -> None:
        """Amounts have no bounds beyond being integers."""
        assert RecordEngine.validate_input("Kai", "Fine", 0) is not None
        result = RecordEngine.validate_input("Kai", "Fine", -50)
        assert result is not None
        assert result.amount == -50


# =============================================================================
# TEST: ID ASSIGNMENT AND RECORD BUILDING
# =============================================================================


class TestRecordIds:
    """Test unique, strictly increasing ids."""

    def test_first_id_is_epoch_ms(self) -> None:
        """With no records the id is the creation time in milliseconds."""
        assert RecordEngine.next_record_id([], NOW) == NOW_MS

    def test_id_bumped_on_collision(self) -> None:
        """Same millisecond as an existing record gives the next integer."""
        records = [make_record(NOW_MS, "Kai", "Dishes", 1, "2025-01-15T12:00:00.000Z")]
        assert RecordEngine.next_record_id(records, NOW) == NOW_MS + 1

    def test_id_bumped_when_clock_went_backwards(self) -> None:
        """An id larger than now still forces max + 1."""
        future_id = NOW_MS + 10_000
        records = [make_record(future_id, "Kai", "Dishes", 1, "2025-01-15T12:00:10.000Z")]
        assert RecordEngine.next_record_id(records, NOW) == future_id + 1

    def test_later_time_wins_over_existing_ids(self) -> None:
        """A creation time past every id is used as is."""
        records = [make_record(5, "Kai", "Dishes", 1, "2025-01-15T12:00:00.000Z")]
        assert RecordEngine.next_record_id(records, NOW) == NOW_MS


class TestBuildRecord:
    """Test building the stored record dict."""

    def test_record_shape(self) -> None:
        """All five fields are present with a millisecond Z timestamp."""
        record = RecordEngine.build_record(
            [], RecordInput(registrant="Kai", task_type="Dishes", amount=500), NOW
        )
        assert record == {
            const.DATA_RECORD_ID: NOW_MS,
            const.DATA_RECORD_REGISTRANT: "Kai",
            const.DATA_RECORD_TYPE: "Dishes",
            const.DATA_RECORD_AMOUNT: 500,
            const.DATA_RECORD_DATE: "2025-01-15T12:00:00.000Z",
        }

    def test_does_not_modify_records(self) -> None:
        """Building a record leaves the passed list untouched."""
        records = [make_record(1, "Mio", "Laundry", 100, "2025-01-01T00:00:00.000Z")]
        snapshot = [dict(record) for record in records]
        RecordEngine.build_record(
            records, RecordInput(registrant="Kai", task_type="Dishes", amount=1), NOW
        )
        assert records == snapshot

    def test_find_index(self) -> None:
        """find_index returns the position or None."""
        records = [
            make_record(3, "Kai", "Dishes", 1, "2025-01-03T00:00:00.000Z"),
            make_record(2, "Mio", "Laundry", 1, "2025-01-02T00:00:00.000Z"),
        ]
        assert RecordEngine.find_index(records, 2) == 1
        assert RecordEngine.find_index(records, 99) is None


# =============================================================================
# TEST: STORAGE SANITIZING
# =============================================================================


class TestSanitizeRecords:
    """Test dropping records that cannot be interpreted."""

    def test_good_records_kept_in_order(self) -> None:
        """Valid records come back unchanged and in stored order."""
        raw = [
            make_record(2, "Mio", "Laundry", 100, "2025-01-02T00:00:00.000Z"),
            make_record(1, "Kai", "Dishes", 300, "2025-01-01T00:00:00.000Z"),
        ]
        assert RecordEngine.sanitize_records(raw) == raw

    def test_bad_records_dropped(self, caplog) -> None:
        """Malformed entries are dropped with a warning, the rest kept."""
        good = make_record(1, "Kai", "Dishes", 300, "2025-01-01T00:00:00.000Z")
        raw = [
            "not a record",
            make_record(2, "  ", "Dishes", 300, "2025-01-01T00:00:00.000Z"),
            make_record(3, "Kai", "", 300, "2025-01-01T00:00:00.000Z"),
            make_record(4, "Kai", "Dishes", "300", "2025-01-01T00:00:00.000Z"),
            make_record(5, "Kai", "Dishes", 300, "yesterday"),
            {**good, "id": "abc"},
            good,
        ]
        assert RecordEngine.sanitize_records(raw) == [good]
        assert caplog.text.count("Dropping stored record") == 6

    def test_duplicate_ids_keep_first(self) -> None:
        """A repeated id keeps only the first occurrence."""
        first = make_record(7, "Kai", "Dishes", 300, "2025-01-02T00:00:00.000Z")
        second = make_record(7, "Mio", "Laundry", 100, "2025-01-01T00:00:00.000Z")
        assert RecordEngine.sanitize_records([first, second]) == [first]

    def test_integral_floats_normalized(self) -> None:
        """Whole-number floats from hand-edited files become ints."""
        raw = [make_record(1, " Kai ", "Dishes", 300, "2025-01-01T00:00:00.000Z")]
        raw[0]["id"] = 1.0
        raw[0]["amount"] = 300.0
        (record,) = RecordEngine.sanitize_records(raw)
        assert record["id"] == 1
        assert isinstance(record["id"], int)
        assert record["amount"] == 300
        assert record["registrant"] == "Kai"

    def test_non_list_yields_empty(self) -> None:
        """A records value that is not a list loads as no records."""
        assert RecordEngine.sanitize_records({"id": 1}) == []
        assert RecordEngine.sanitize_records(None) == []
