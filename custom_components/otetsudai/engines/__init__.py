"""Engine modules for Otetsudai integration.

Contains stateless computation engines:
- record_engine: Record validation, id assignment and storage sanitizing
- summary_engine: Monthly totals and per-registrant breakdown
"""

from .record_engine import RecordEngine, RecordInput
from .summary_engine import MonthlySummary, SummaryEngine

__all__ = [
    "MonthlySummary",
    "RecordEngine",
    "RecordInput",
    "SummaryEngine",
]
