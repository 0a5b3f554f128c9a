# File: store.py
"""Handles persistent data storage for the Otetsudai integration.

Uses Home Assistant's Storage helper to save and load the reward records,
ensuring the history survives restarts. The whole data set is one JSON blob
under a single storage key.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from homeassistant.exceptions import HomeAssistantError
from homeassistant.helpers.storage import Store

from . import const
from .engines.record_engine import RecordEngine

if TYPE_CHECKING:
    from homeassistant.core import HomeAssistant

    from .type_defs import RecordData, StoreData


class OtetsudaiStore:
    """Handles persistent storage operations for Otetsudai data.

    Thin wrapper around Home Assistant's Store API. Keeps the canonical
    in-memory copy of the records; every write replaces the whole blob.
    """

    def __init__(
        self, hass: HomeAssistant, storage_key: str = const.STORAGE_KEY
    ) -> None:
        """Initialize the store.

        Args:
            hass: Home Assistant core object.
            storage_key: Key to identify storage location (default: const.STORAGE_KEY).

        """
        self.hass = hass
        self._storage_key = storage_key
        self._store: Store[dict[str, Any]] = Store(
            hass, const.STORAGE_VERSION, storage_key
        )
        self._data: StoreData = OtetsudaiStore.get_default_structure()

    @staticmethod
    def get_default_structure() -> StoreData:
        """Return canonical empty data structure for fresh installations."""
        return {const.DATA_RECORDS: []}

    async def async_initialize(self) -> None:
        """Load data from storage during startup.

        Missing, unreadable or malformed data results in an empty record list.
        Never raises.
        """
        const.LOGGER.debug("DEBUG: OtetsudaiStore: Loading data from storage")
        try:
            existing_data = await self._store.async_load()
        except (HomeAssistantError, ValueError, OSError) as err:
            const.LOGGER.warning(
                "WARNING: Unable to read storage %s: %s. Starting with no records",
                self._storage_key,
                err,
            )
            existing_data = None

        if existing_data is None:
            const.LOGGER.info("INFO: No existing storage found. Initializing new data")
            self._data = OtetsudaiStore.get_default_structure()
            return

        if not isinstance(existing_data, dict):
            const.LOGGER.warning(
                "WARNING: Storage %s does not hold an object (%s). Starting with no records",
                self._storage_key,
                type(existing_data).__name__,
            )
            self._data = OtetsudaiStore.get_default_structure()
            return

        records = RecordEngine.sanitize_records(existing_data.get(const.DATA_RECORDS))
        self._data = {const.DATA_RECORDS: records}
        const.LOGGER.debug(
            "DEBUG: Loaded existing data from storage: %s records", len(records)
        )

    @property
    def data(self) -> StoreData:
        """Retrieve the in-memory data cache."""
        return self._data

    @property
    def records(self) -> list[RecordData]:
        """Retrieve the records list, newest first."""
        return self._data[const.DATA_RECORDS]

    def set_records(self, records: list[RecordData]) -> None:
        """Replace the in-memory records list."""
        const.LOGGER.debug("DEBUG: Store set_records called with %s records", len(records))
        self._data[const.DATA_RECORDS] = records

    async def async_save(self) -> None:
        """Save the current data structure to storage asynchronously.

        Raises:
            No exceptions raised - errors are logged but do not stop execution.
            OSError: Logged when file system issues prevent saving.
            TypeError: Logged when data contains non-serializable types.
            ValueError: Logged when data is invalid for JSON serialization.
        """
        try:
            await self._store.async_save(dict(self._data))
            const.LOGGER.debug("DEBUG: Data saved successfully to storage")
        except OSError as err:
            const.LOGGER.error(
                "ERROR: Failed to save storage due to file system error: %s. "
                "Check disk space and file permissions for %s",
                err,
                self._store.path,
            )
        except TypeError as err:
            const.LOGGER.error(
                "ERROR: Failed to save storage due to non-serializable data: %s. "
                "Data contains types that cannot be converted to JSON",
                err,
            )
        except ValueError as err:
            const.LOGGER.error(
                "ERROR: Failed to save storage due to invalid data format: %s. "
                "Data structure may be corrupted",
                err,
            )

    async def async_delete_storage(self) -> None:
        """Delete the storage file completely from disk.

        This clears all in-memory data and removes the storage file using
        Home Assistant's Store API for proper file handling.
        """
        self._data = OtetsudaiStore.get_default_structure()
        try:
            await self._store.async_remove()
            const.LOGGER.info(
                "INFO: Storage file removed successfully: %s",
                self._store.path,
            )
        except OSError as err:
            const.LOGGER.error(
                "ERROR: Failed to remove storage file %s: %s. Check file permissions",
                self._store.path,
                err,
            )
