"""Diagnostics support for Otetsudai integration.

The config entry diagnostics return the raw storage data, identical to the
otetsudai_data file, so a download can be pasted back as-is when restoring.
"""

from typing import Any

from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant
from homeassistant.helpers.device_registry import DeviceEntry

from . import const
from .coordinator import OtetsudaiDataCoordinator


async def async_get_config_entry_diagnostics(
    hass: HomeAssistant, entry: ConfigEntry
) -> dict[str, Any]:
    """Return diagnostics for a config entry.

    Returns the raw storage data directly with no transformation.
    """
    coordinator: OtetsudaiDataCoordinator = hass.data[const.DOMAIN][entry.entry_id][
        const.COORDINATOR
    ]
    return dict(coordinator.store.data)


async def async_get_device_diagnostics(
    hass: HomeAssistant, entry: ConfigEntry, device: DeviceEntry
) -> dict[str, Any]:
    """Return diagnostics for the tracker device.

    Provides the current month summary as the sensors see it.
    """
    coordinator: OtetsudaiDataCoordinator = hass.data[const.DOMAIN][entry.entry_id][
        const.COORDINATOR
    ]
    return {
        "device_identifiers": sorted(
            identifier[1]
            for identifier in device.identifiers
            if identifier[0] == const.DOMAIN
        ),
        "currency": coordinator.currency,
        "record_count": len(coordinator.records),
        "current_month": coordinator.summary_data(),
    }
