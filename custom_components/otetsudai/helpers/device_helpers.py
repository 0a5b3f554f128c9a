# File: helpers/device_helpers.py
"""Device registry helper functions for Otetsudai.

Functions that construct DeviceInfo objects for Home Assistant's device registry.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from homeassistant.helpers.device_registry import DeviceEntryType, DeviceInfo

from .. import const

if TYPE_CHECKING:
    from homeassistant.config_entries import ConfigEntry


def create_tracker_device_info(config_entry: ConfigEntry) -> DeviceInfo:
    """Create device info shared by all entities of one tracker.

    Args:
        config_entry: Config entry for this integration instance

    Returns:
        DeviceInfo dict for the tracker device
    """
    return DeviceInfo(
        identifiers={(const.DOMAIN, f"{config_entry.entry_id}_tracker")},
        name=config_entry.title,
        manufacturer=const.OTETSUDAI_TITLE,
        model="Reward Tracker",
        entry_type=DeviceEntryType.SERVICE,
    )
