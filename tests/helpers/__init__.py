"""Test helpers for Otetsudai.

Builders for stored records and storage blobs, plus coordinator lookup.

Usage:
    from tests.helpers import make_record, make_storage_blob, get_coordinator
"""

from typing import Any

from homeassistant.core import HomeAssistant
from pytest_homeassistant_custom_component.common import MockConfigEntry

from custom_components.otetsudai.const import (
    COORDINATOR,
    DOMAIN,
    STORAGE_KEY,
    STORAGE_VERSION,
)
from custom_components.otetsudai.coordinator import OtetsudaiDataCoordinator


def make_record(
    record_id: int, registrant: str, task_type: str, amount: int, date: str
) -> dict[str, Any]:
    """Build a stored record dict."""
    return {
        "id": record_id,
        "registrant": registrant,
        "type": task_type,
        "amount": amount,
        "date": date,
    }


def make_storage_blob(data: Any) -> dict[str, Any]:
    """Wrap data the way Home Assistant's Store writes it to disk."""
    return {
        "version": STORAGE_VERSION,
        "minor_version": 1,
        "key": STORAGE_KEY,
        "data": data,
    }


def get_coordinator(
    hass: HomeAssistant, entry: MockConfigEntry
) -> OtetsudaiDataCoordinator:
    """Return the coordinator of a loaded entry."""
    return hass.data[DOMAIN][entry.entry_id][COORDINATOR]


__all__ = [
    "get_coordinator",
    "make_record",
    "make_storage_blob",
]
