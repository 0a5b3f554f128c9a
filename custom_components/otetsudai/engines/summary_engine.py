"""Summary Engine - Monthly totals and per-registrant breakdown.

This engine computes the dashboard view over the records list:
- Total reward amount for one calendar month
- Per-registrant sums, largest first
- Bar percentages relative to the leader
- Colour hue per registrant

Design Principles:
    - Stateless: No coordinator reference, operates on passed data structures
    - Pure: Never mutates the records it reads, results are not cached
    - Explicit time: The reference month is always passed in by the caller
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from .. import const
from ..utils.dt_utils import dt_parse, dt_same_month
from ..utils.hue_utils import string_to_hue
from ..utils.math_utils import calculate_percentage

if TYPE_CHECKING:
    from datetime import datetime

    from ..type_defs import RecordData, RegistrantSummary, SummaryData


@dataclass(frozen=True, slots=True)
class MonthlySummary:
    """Totals for one calendar month.

    Attributes:
        year: Calendar year of the reference month
        month: Calendar month (1-12) of the reference month
        total: Sum of amounts in the month
        per_registrant: (name, amount) pairs, descending by amount
        count: Number of records in the month
    """

    year: int
    month: int
    total: int = 0
    per_registrant: list[tuple[str, int]] = field(default_factory=list)
    count: int = 0


class SummaryEngine:
    """Unified engine for the monthly reward summary.

    Example:
        summary = SummaryEngine.summarize(records, dt_now_local())
        summary.total              # 600
        summary.per_registrant     # [("Kai", 500), ("Mio", 100)]
    """

    @staticmethod
    def records_in_month(
        records: Iterable[RecordData], reference_date: datetime
    ) -> list[RecordData]:
        """Return records dated in the reference date's calendar month.

        Records whose date cannot be parsed are skipped.
        """
        selected: list[RecordData] = []
        for record in records:
            record_date = dt_parse(record.get(const.DATA_RECORD_DATE))
            if record_date is None:
                continue
            if dt_same_month(record_date, reference_date):
                selected.append(record)
        return selected

    @staticmethod
    def summarize(
        records: Sequence[RecordData], reference_date: datetime
    ) -> MonthlySummary:
        """Compute total and per-registrant sums for the reference month.

        Args:
            records: Records in display order (newest first)
            reference_date: Any instant in the month to summarize; its
                timezone decides the month boundary

        Returns:
            MonthlySummary. Registrants with equal sums keep the order in
            which they were first met in `records`.
        """
        in_month = SummaryEngine.records_in_month(records, reference_date)

        per_user: dict[str, int] = {}
        total = 0
        for record in in_month:
            amount = record[const.DATA_RECORD_AMOUNT]
            total += amount
            name = record[const.DATA_RECORD_REGISTRANT]
            per_user[name] = per_user.get(name, 0) + amount

        ranked = sorted(per_user.items(), key=lambda item: item[1], reverse=True)
        return MonthlySummary(
            year=reference_date.year,
            month=reference_date.month,
            total=total,
            per_registrant=ranked,
            count=len(in_month),
        )

    @staticmethod
    def bar_percentages(per_registrant: Sequence[tuple[str, int]]) -> list[float]:
        """Return each amount as a percentage of the largest amount.

        The leader is 100.0. A non-positive maximum gives 0.0 for everyone.
        """
        if not per_registrant:
            return []
        highest = max(amount for _, amount in per_registrant)
        return [calculate_percentage(amount, highest) for _, amount in per_registrant]

    @staticmethod
    def to_summary_data(
        summary: MonthlySummary,
        hue_overrides: Mapping[str, int] | None = None,
    ) -> SummaryData:
        """Convert a summary into the JSON shape used by services and sensors."""
        percentages = SummaryEngine.bar_percentages(summary.per_registrant)
        registrants: list[RegistrantSummary] = [
            {
                const.SUMMARY_REGISTRANT_NAME: name,
                const.SUMMARY_REGISTRANT_AMOUNT: amount,
                const.SUMMARY_REGISTRANT_PERCENT: percent,
                const.SUMMARY_REGISTRANT_HUE: string_to_hue(name, hue_overrides),
            }
            for (name, amount), percent in zip(
                summary.per_registrant, percentages, strict=True
            )
        ]
        return {
            const.SUMMARY_YEAR: summary.year,
            const.SUMMARY_MONTH: summary.month,
            const.SUMMARY_TOTAL: summary.total,
            const.SUMMARY_COUNT: summary.count,
            const.SUMMARY_REGISTRANTS: registrants,
        }
