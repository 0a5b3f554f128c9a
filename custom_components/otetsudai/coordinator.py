# File: coordinator.py
"""Coordinator for the Otetsudai integration.

Owns the record store for one config entry, recomputes the current month
summary after every change and on a timer (so the month roll-over is picked
up), and notifies entities.
"""

from __future__ import annotations

from datetime import datetime, timedelta

from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant
from homeassistant.helpers.update_coordinator import DataUpdateCoordinator, UpdateFailed

from . import const
from .engines.summary_engine import MonthlySummary, SummaryEngine
from .managers.record_manager import RecordManager
from .store import OtetsudaiStore
from .type_defs import RecordData, SummaryData
from .utils.dt_utils import dt_now_local, dt_shift_month


class OtetsudaiDataCoordinator(DataUpdateCoordinator[SummaryData]):
    """Coordinator for Otetsudai integration.

    `data` holds the current month summary (SummaryData). The canonical
    records list lives in the store and is reached through `records`.
    """

    config_entry: ConfigEntry

    def __init__(
        self,
        hass: HomeAssistant,
        config_entry: ConfigEntry,
        store: OtetsudaiStore,
    ):
        """Initialize the OtetsudaiDataCoordinator."""
        update_interval_minutes = config_entry.options.get(
            const.CONF_UPDATE_INTERVAL, const.DEFAULT_UPDATE_INTERVAL
        )

        super().__init__(
            hass,
            const.LOGGER,
            config_entry=config_entry,
            name=f"{const.DOMAIN}{const.COORDINATOR_SUFFIX}",
            update_interval=timedelta(minutes=update_interval_minutes),
        )
        self.config_entry = config_entry
        self.store = store
        self.record_manager = RecordManager(hass, self, store)

    # -------------------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------------------

    @property
    def records(self) -> list[RecordData]:
        """Return the records list, newest first."""
        return self.store.records

    @property
    def currency(self) -> str:
        """Return the configured currency code."""
        return self.config_entry.options.get(
            const.CONF_CURRENCY,
            self.config_entry.data.get(const.CONF_CURRENCY, const.DEFAULT_CURRENCY),
        )

    # -------------------------------------------------------------------------------------
    # Summary
    # -------------------------------------------------------------------------------------

    def summary(self, reference: datetime | None = None) -> MonthlySummary:
        """Summarize the month containing `reference` (default: now, local time)."""
        return SummaryEngine.summarize(self.records, reference or dt_now_local())

    def summary_data(
        self,
        reference: datetime | None = None,
    ) -> SummaryData:
        """Return the JSON-ready summary for the month containing `reference`."""
        return SummaryEngine.to_summary_data(
            self.summary(reference), const.HUE_OVERRIDES
        )

    def summary_data_for(
        self,
        year: int | None = None,
        month: int | None = None,
        month_offset: int = 0,
    ) -> SummaryData:
        """Return the summary for an explicit year/month or an offset from now.

        An explicit year and month win over month_offset. The reference
        instant is the middle of the target month in local time, so no
        timezone shift can move it into a neighbouring month.
        """
        now = dt_now_local()
        if year is not None and month is not None:
            reference = now.replace(year=year, month=month, day=15, hour=12)
        else:
            reference = dt_shift_month(now.replace(day=15, hour=12), month_offset)
        return self.summary_data(reference)

    # -------------------------------------------------------------------------------------
    # Setup + Periodic Refresh
    # -------------------------------------------------------------------------------------

    async def async_setup(self) -> None:
        """Set up managers before the first refresh."""
        await self.record_manager.async_setup()

    async def _async_update_data(self) -> SummaryData:
        """Periodic update."""
        try:
            return self.summary_data()
        except Exception as err:  # pylint: disable=broad-exception-caught
            raise UpdateFailed(f"Error updating Otetsudai data: {err}") from err

    # -------------------------------------------------------------------------------------
    # Persistence
    # -------------------------------------------------------------------------------------

    async def async_persist_and_update(self) -> None:
        """Write the store and push a fresh summary to listeners.

        The write is awaited so callers return only after the data is saved.
        """
        await self.store.async_save()
        self.async_set_updated_data(self.summary_data())
