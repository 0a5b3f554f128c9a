# File: __init__.py
"""Initialization file for the Otetsudai integration.

Handles setting up the integration, including loading configuration entries,
initializing data storage, and preparing the coordinator for data handling.

Key Features:
- Config entry setup and unload support.
- Coordinator initialization for data synchronization.
- Storage management for persistent data handling.
"""

from __future__ import annotations

from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant
from homeassistant.exceptions import ConfigEntryNotReady
from homeassistant.util import dt as dt_util

from . import const
from .coordinator import OtetsudaiDataCoordinator
from .services import async_setup_services, async_unload_services
from .store import OtetsudaiStore
from .utils.dt_utils import set_default_timezone


async def async_setup_entry(hass: HomeAssistant, entry: ConfigEntry) -> bool:
    """Set up the integration from a config entry."""
    const.LOGGER.info("INFO: Starting setup for Otetsudai entry: %s", entry.entry_id)

    # Month boundaries follow the Home Assistant configured timezone
    time_zone = dt_util.get_time_zone(hass.config.time_zone)
    if time_zone is not None:
        set_default_timezone(time_zone)

    # Initialize the store to handle persistent data.
    store = OtetsudaiStore(hass, const.STORAGE_KEY)
    await store.async_initialize()

    # Create the data coordinator for managing updates and synchronization.
    coordinator = OtetsudaiDataCoordinator(hass, entry, store)
    await coordinator.async_setup()

    try:
        # Perform the first refresh to compute the current summary.
        await coordinator.async_config_entry_first_refresh()
    except ConfigEntryNotReady as e:
        const.LOGGER.error("ERROR: Failed to refresh coordinator data: %s", e)
        raise ConfigEntryNotReady from e

    # Store the coordinator and store in hass.data.
    hass.data.setdefault(const.DOMAIN, {})[entry.entry_id] = {
        const.COORDINATOR: coordinator,
        const.STORE: store,
    }

    # Set up services required by the integration.
    async_setup_services(hass)

    # Forward the setup to supported platforms.
    await hass.config_entries.async_forward_entry_setups(entry, const.PLATFORMS)

    # Reload when options (currency, update interval) change.
    entry.async_on_unload(entry.add_update_listener(async_update_options))

    const.LOGGER.info("INFO: Otetsudai setup complete for entry: %s", entry.entry_id)
    return True


async def async_update_options(hass: HomeAssistant, entry: ConfigEntry) -> None:
    """Reload the entry after its options changed."""
    const.LOGGER.debug("DEBUG: Options updated, reloading entry %s", entry.entry_id)
    await hass.config_entries.async_reload(entry.entry_id)


async def async_unload_entry(hass: HomeAssistant, entry: ConfigEntry) -> bool:
    """Unload a config entry."""
    const.LOGGER.info("INFO: Unloading Otetsudai entry: %s", entry.entry_id)

    # Unload platforms
    unload_ok = await hass.config_entries.async_unload_platforms(entry, const.PLATFORMS)

    if unload_ok:
        hass.data[const.DOMAIN].pop(entry.entry_id)

        # Await service unloading
        await async_unload_services(hass)

    return unload_ok


async def async_remove_entry(hass: HomeAssistant, entry: ConfigEntry) -> None:
    """Handle removal of a config entry by deleting its stored records."""
    const.LOGGER.info("INFO: Removing Otetsudai entry: %s", entry.entry_id)

    # The entry is unloaded by now, so reach the storage file directly
    store = OtetsudaiStore(hass, const.STORAGE_KEY)
    await store.async_delete_storage()

    const.LOGGER.info("INFO: Otetsudai entry data cleared: %s", entry.entry_id)
