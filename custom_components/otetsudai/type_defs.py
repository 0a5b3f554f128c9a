"""Type definitions for Otetsudai data structures.

TypedDict describes the persisted shapes. They are STATIC ANALYSIS ONLY:
loaded data is checked at runtime by RecordEngine before it is trusted.

IMPORTANT: This file must NOT import from coordinator.py or any module that
imports the coordinator, to avoid circular dependencies.
"""

from typing import TypedDict

RecordId = int  # Millisecond UTC timestamp, bumped to stay unique
ISODatetime = str  # ISO 8601 datetime string "2026-01-18T12:30:00.000Z"


class RecordData(TypedDict):
    """One completed chore-reward event."""

    id: RecordId
    registrant: str
    type: str
    amount: int
    date: ISODatetime


class StoreData(TypedDict):
    """The single persisted blob."""

    records: list[RecordData]


class RegistrantSummary(TypedDict):
    """Per-registrant row exposed to the frontend."""

    name: str
    amount: int
    percent: float
    hue: int


class SummaryData(TypedDict):
    """Monthly summary exposed through services and sensor attributes."""

    year: int
    month: int
    total: int
    count: int
    registrants: list[RegistrantSummary]
