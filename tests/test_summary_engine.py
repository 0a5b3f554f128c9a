"""Tests for SummaryEngine - monthly totals and per-registrant breakdown.

Pure logic tests: the reference date is always passed in explicitly.
"""

from __future__ import annotations

from datetime import UTC, datetime
from zoneinfo import ZoneInfo

from custom_components.otetsudai import const
from custom_components.otetsudai.engines.summary_engine import (
    MonthlySummary,
    SummaryEngine,
)
from tests.helpers import make_record

JANUARY = datetime(2025, 1, 20, 12, 0, tzinfo=UTC)
FEBRUARY = datetime(2025, 2, 10, 12, 0, tzinfo=UTC)


def _january_records() -> list[dict]:
    return [
        make_record(3, "Mio", "Laundry", 100, "2025-01-12T09:00:00.000Z"),
        make_record(2, "Kai", "Trash", 200, "2025-01-11T09:00:00.000Z"),
        make_record(1, "Kai", "Dishes", 300, "2025-01-10T09:00:00.000Z"),
    ]


class TestSummarize:
    """Test month filtering and aggregation."""

    def test_aggregation_descending(self) -> None:
        """Kai 300 + 200 and Mio 100 give total 600, Kai first."""
        summary = SummaryEngine.summarize(_january_records(), JANUARY)
        assert summary.total == 600
        assert summary.per_registrant == [("Kai", 500), ("Mio", 100)]
        assert summary.count == 3
        assert (summary.year, summary.month) == (2025, 1)

    def test_month_filter(self) -> None:
        """Only records dated in the reference month are counted."""
        records = [
            make_record(4, "Mio", "Dishes", 50, "2025-02-01T09:00:00.000Z"),
            *_january_records(),
        ]
        january = SummaryEngine.summarize(records, JANUARY)
        february = SummaryEngine.summarize(records, FEBRUARY)

        assert january.total == 600
        assert january.per_registrant == [("Kai", 500), ("Mio", 100)]
        assert february.total == 50
        assert february.per_registrant == [("Mio", 50)]

    def test_same_month_other_year_excluded(self) -> None:
        """January of another year is a different month."""
        records = [make_record(1, "Kai", "Dishes", 300, "2024-01-10T09:00:00.000Z")]
        assert SummaryEngine.summarize(records, JANUARY).total == 0

    def test_empty_month(self) -> None:
        """No records in the month gives total 0 and no registrants."""
        summary = SummaryEngine.summarize(_january_records(), FEBRUARY)
        assert summary == MonthlySummary(year=2025, month=2)
        assert summary.per_registrant == []

    def test_ties_keep_first_encounter_order(self) -> None:
        """Equal sums keep the order registrants appear in the records list."""
        records = [
            make_record(3, "Sora", "Dishes", 100, "2025-01-12T09:00:00.000Z"),
            make_record(2, "Aoi", "Dishes", 100, "2025-01-11T09:00:00.000Z"),
            make_record(1, "Kai", "Dishes", 300, "2025-01-10T09:00:00.000Z"),
        ]
        summary = SummaryEngine.summarize(records, JANUARY)
        assert summary.per_registrant == [("Kai", 300), ("Sora", 100), ("Aoi", 100)]

    def test_reference_timezone_decides_month(self) -> None:
        """A late-January UTC record is February in Tokyo."""
        records = [make_record(1, "Kai", "Dishes", 300, "2025-01-31T20:00:00.000Z")]
        tokyo_february = datetime(2025, 2, 10, 12, 0, tzinfo=ZoneInfo("Asia/Tokyo"))

        assert SummaryEngine.summarize(records, tokyo_february).total == 300
        assert SummaryEngine.summarize(records, JANUARY).total == 300
        assert SummaryEngine.summarize(records, FEBRUARY).total == 0

    def test_unparsable_dates_skipped(self) -> None:
        """Records whose date cannot be parsed are left out."""
        records = [
            make_record(2, "Kai", "Dishes", 999, "not a date"),
            make_record(1, "Kai", "Dishes", 300, "2025-01-10T09:00:00.000Z"),
        ]
        assert SummaryEngine.summarize(records, JANUARY).total == 300

    def test_does_not_modify_records(self) -> None:
        """Summarizing leaves the records list untouched."""
        records = _january_records()
        snapshot = [dict(record) for record in records]
        SummaryEngine.summarize(records, JANUARY)
        assert records == snapshot


class TestBarPercentages:
    """Test bar widths relative to the leader."""

    def test_relative_to_leader(self) -> None:
        """The leader is 100 and the rest scale against it."""
        assert SummaryEngine.bar_percentages([("Kai", 500), ("Mio", 100)]) == [
            100.0,
            20.0,
        ]

    def test_empty(self) -> None:
        """No registrants gives no bars."""
        assert SummaryEngine.bar_percentages([]) == []

    def test_non_positive_leader(self) -> None:
        """A zero or negative maximum gives 0 for everyone."""
        assert SummaryEngine.bar_percentages([("Kai", 0), ("Mio", -10)]) == [0.0, 0.0]


class TestSummaryData:
    """Test the JSON shape used by services and sensors."""

    def test_summary_data_shape(self) -> None:
        """Registrant rows carry amount, percent and hue."""
        summary = SummaryEngine.summarize(
            [
                make_record(2, "來夏", "Dishes", 100, "2025-01-11T09:00:00.000Z"),
                make_record(1, "Kai", "Dishes", 400, "2025-01-10T09:00:00.000Z"),
            ],
            JANUARY,
        )
        data = SummaryEngine.to_summary_data(summary, const.HUE_OVERRIDES)

        assert data[const.SUMMARY_YEAR] == 2025
        assert data[const.SUMMARY_MONTH] == 1
        assert data[const.SUMMARY_TOTAL] == 500
        assert data[const.SUMMARY_COUNT] == 2
        kai, raika = data[const.SUMMARY_REGISTRANTS]
        assert kai[const.SUMMARY_REGISTRANT_NAME] == "Kai"
        assert kai[const.SUMMARY_REGISTRANT_PERCENT] == 100.0
        assert 0 <= kai[const.SUMMARY_REGISTRANT_HUE] < 360
        assert raika[const.SUMMARY_REGISTRANT_AMOUNT] == 100
        assert raika[const.SUMMARY_REGISTRANT_PERCENT] == 25.0
        assert raika[const.SUMMARY_REGISTRANT_HUE] == 35
