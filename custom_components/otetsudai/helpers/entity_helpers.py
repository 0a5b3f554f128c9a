# File: helpers/entity_helpers.py
"""Lookup helpers for Otetsudai.

Functions that locate the loaded integration instance from service handlers.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from homeassistant.exceptions import HomeAssistantError

from .. import const

if TYPE_CHECKING:
    from homeassistant.core import HomeAssistant

    from ..coordinator import OtetsudaiDataCoordinator


def get_first_entry_id(hass: HomeAssistant) -> str | None:
    """Retrieve the first loaded Otetsudai config entry ID."""
    domain_entries = hass.data.get(const.DOMAIN)
    if not domain_entries:
        return None
    return next(iter(domain_entries.keys()), None)


def get_loaded_coordinator(hass: HomeAssistant) -> OtetsudaiDataCoordinator:
    """Return the coordinator of the loaded Otetsudai entry.

    Raises:
        HomeAssistantError: When no entry is loaded.
    """
    entry_id = get_first_entry_id(hass)
    if not entry_id:
        const.LOGGER.warning("WARNING: %s", const.MSG_NO_ENTRY_FOUND)
        raise HomeAssistantError(const.ERROR_NO_LOADED_ENTRY)
    return hass.data[const.DOMAIN][entry_id][const.COORDINATOR]
