"""Record Manager - Reward record lifecycle management.

This manager is the only writer of the records list:
- Create: validate input, assign id/timestamp, prepend, persist
- Delete: remove one record by id, persist
- Clear: remove every record, persist

Validation failures and unknown ids are silent no-ops: nothing is written
and no error reaches the caller. Confirmation before deleting belongs to
the frontend; the operations here are unconditional.

Event Flow:
    RecordManager.async_create_record() -> coordinator.async_persist_and_update()
                                        -> fire_event(EVENT_RECORD_CREATED)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .. import const
from ..engines.record_engine import RecordEngine
from ..utils.dt_utils import dt_now_utc
from .base_manager import BaseManager

if TYPE_CHECKING:
    from homeassistant.core import HomeAssistant

    from ..coordinator import OtetsudaiDataCoordinator
    from ..store import OtetsudaiStore
    from ..type_defs import RecordData


class RecordManager(BaseManager):
    """Manager for reward record create/delete/clear.

    Responsibilities:
    - Validate and build new records (via RecordEngine)
    - Keep insertion order (newest first)
    - Persist every mutation before returning

    NOT responsible for:
    - Aggregation (SummaryEngine via the coordinator)
    - Asking the user to confirm deletes
    """

    def __init__(
        self,
        hass: HomeAssistant,
        coordinator: OtetsudaiDataCoordinator,
        store: OtetsudaiStore,
    ) -> None:
        """Initialize the RecordManager.

        Args:
            hass: Home Assistant instance
            coordinator: The owning coordinator
            store: Storage wrapper holding the canonical records list
        """
        super().__init__(hass, coordinator)
        self._store = store

    async def async_setup(self) -> None:
        """Set up the RecordManager."""
        const.LOGGER.debug(
            "DEBUG: RecordManager initialized for entry %s with %s records",
            self.entry_id,
            len(self._store.records),
        )

    @property
    def records(self) -> list[RecordData]:
        """Return the records list, newest first."""
        return self._store.records

    async def async_create_record(
        self, registrant: Any, task_type: Any, amount: Any
    ) -> RecordData | None:
        """Create a record and persist it.

        Args:
            registrant: Name of the person credited (trimmed, must not be blank)
            task_type: Task description (trimmed, must not be blank)
            amount: Reward amount; must parse as an integer

        Returns:
            A copy of the new record, or None when the input is invalid.
        """
        record_input = RecordEngine.validate_input(registrant, task_type, amount)
        if record_input is None:
            const.LOGGER.debug(
                "DEBUG: Create Record: ignoring invalid input (registrant=%r, type=%r, amount=%r)",
                registrant,
                task_type,
                amount,
            )
            return None

        records = self._store.records
        record = RecordEngine.build_record(records, record_input, dt_now_utc())
        self._store.set_records([record, *records])
        await self.coordinator.async_persist_and_update()

        const.LOGGER.info(
            "INFO: Record %s created for '%s' (%s): %s",
            record[const.DATA_RECORD_ID],
            record[const.DATA_RECORD_REGISTRANT],
            record[const.DATA_RECORD_TYPE],
            record[const.DATA_RECORD_AMOUNT],
        )
        self.fire_event(const.EVENT_RECORD_CREATED, **record)
        return dict(record)  # type: ignore[return-value]

    async def async_delete_record(self, record_id: int) -> bool:
        """Delete the record with `record_id`.

        Returns:
            True when a record was removed; False (and no write) when the id
            is unknown.
        """
        records = self._store.records
        idx = RecordEngine.find_index(records, record_id)
        if idx is None:
            const.LOGGER.debug(
                "DEBUG: Delete Record: id %s not found, nothing to delete", record_id
            )
            return False

        removed = records[idx]
        self._store.set_records(records[:idx] + records[idx + 1 :])
        await self.coordinator.async_persist_and_update()

        const.LOGGER.info("INFO: Record %s deleted", record_id)
        self.fire_event(const.EVENT_RECORD_DELETED, **removed)
        return True

    async def async_clear_records(self) -> int:
        """Delete every record.

        Returns:
            Number of records removed. An already empty list is not rewritten.
        """
        count = len(self._store.records)
        if count == 0:
            const.LOGGER.debug("DEBUG: Clear Records: nothing to clear")
            return 0

        self._store.set_records([])
        await self.coordinator.async_persist_and_update()

        const.LOGGER.info("INFO: Cleared %s records", count)
        self.fire_event(const.EVENT_RECORDS_CLEARED, removed=count)
        return count
