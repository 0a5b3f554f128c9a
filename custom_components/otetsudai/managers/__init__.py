"""Manager modules for Otetsudai integration.

Managers own workflows that mutate state and persist it.
"""

from .base_manager import BaseManager
from .record_manager import RecordManager

__all__ = [
    "BaseManager",
    "RecordManager",
]
