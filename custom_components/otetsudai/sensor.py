# File: sensor.py
"""Sensors for the Otetsudai integration.

Sensors Defined in This File (2):
01. MonthlyTotalSensor
02. HistorySensor
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from homeassistant.components.sensor import (
    SensorDeviceClass,
    SensorEntity,
    SensorStateClass,
)
from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant
from homeassistant.helpers.entity_platform import AddEntitiesCallback

from . import const
from .coordinator import OtetsudaiDataCoordinator
from .entity import OtetsudaiCoordinatorEntity
from .utils.dt_utils import dt_month_start, dt_now_local


async def async_setup_entry(
    hass: HomeAssistant, entry: ConfigEntry, async_add_entities: AddEntitiesCallback
):
    """Set up sensors for Otetsudai integration."""
    data = hass.data[const.DOMAIN][entry.entry_id]
    coordinator: OtetsudaiDataCoordinator = data[const.COORDINATOR]

    async_add_entities(
        [
            MonthlyTotalSensor(coordinator, entry),
            HistorySensor(coordinator, entry),
        ]
    )


# ------------------------------------------------------------------------------------------
class MonthlyTotalSensor(OtetsudaiCoordinatorEntity, SensorEntity):
    """Sensor for the reward total of the current calendar month.

    The per-registrant breakdown (largest first, with bar percentage and
    colour hue) is exposed in attributes for dashboard cards.
    """

    _attr_device_class = SensorDeviceClass.MONETARY
    _attr_state_class = SensorStateClass.TOTAL
    _attr_translation_key = const.TRANS_KEY_SENSOR_MONTHLY_TOTAL
    _attr_icon = "mdi:piggy-bank"

    def __init__(self, coordinator: OtetsudaiDataCoordinator, entry: ConfigEntry):
        """Initialize the sensor.

        Args:
            coordinator: OtetsudaiDataCoordinator instance for data access.
            entry: ConfigEntry for this integration instance.
        """
        super().__init__(coordinator, entry)
        self._attr_unique_id = f"{entry.entry_id}{const.SENSOR_UID_SUFFIX_MONTHLY_TOTAL}"
        self.entity_id = (
            f"{const.SENSOR_EID_PREFIX}{const.SENSOR_UID_SUFFIX_MONTHLY_TOTAL}"
        )

    @property
    def native_value(self) -> int:
        """Return the current month total."""
        if not self.coordinator.data:
            return const.DEFAULT_ZERO
        return self.coordinator.data.get(const.SUMMARY_TOTAL, const.DEFAULT_ZERO)

    @property
    def native_unit_of_measurement(self) -> str:
        """Return the configured currency."""
        return self.coordinator.currency

    @property
    def last_reset(self) -> datetime:
        """Return the start of the month the current total belongs to."""
        month_start = dt_month_start(dt_now_local())
        summary = self.coordinator.data or {}
        year = summary.get(const.SUMMARY_YEAR)
        month = summary.get(const.SUMMARY_MONTH)
        if year is None or month is None:
            return month_start
        return month_start.replace(year=year, month=month)

    @property
    def extra_state_attributes(self) -> dict[str, Any]:
        """Expose the month and the per-registrant breakdown."""
        summary = self.coordinator.data or {}
        return {
            const.SUMMARY_YEAR: summary.get(const.SUMMARY_YEAR),
            const.SUMMARY_MONTH: summary.get(const.SUMMARY_MONTH),
            const.ATTR_RECORD_COUNT: summary.get(const.SUMMARY_COUNT, 0),
            const.SUMMARY_REGISTRANTS: summary.get(const.SUMMARY_REGISTRANTS, []),
        }


# ------------------------------------------------------------------------------------------
class HistorySensor(OtetsudaiCoordinatorEntity, SensorEntity):
    """Sensor listing the stored records.

    State is the number of stored records; the newest records are exposed
    as attributes (capped so the state machine stays small).
    """

    _attr_translation_key = const.TRANS_KEY_SENSOR_HISTORY
    _attr_icon = "mdi:history"

    def __init__(self, coordinator: OtetsudaiDataCoordinator, entry: ConfigEntry):
        """Initialize the sensor."""
        super().__init__(coordinator, entry)
        self._attr_unique_id = f"{entry.entry_id}{const.SENSOR_UID_SUFFIX_HISTORY}"
        self.entity_id = f"{const.SENSOR_EID_PREFIX}{const.SENSOR_UID_SUFFIX_HISTORY}"

    @property
    def native_value(self) -> int:
        """Return the number of stored records."""
        return len(self.coordinator.records)

    @property
    def extra_state_attributes(self) -> dict[str, Any]:
        """Expose the newest records and the latest one."""
        records = self.coordinator.records
        return {
            const.ATTR_LATEST_RECORD: dict(records[0]) if records else None,
            const.ATTR_RECENT_RECORDS: [
                dict(record) for record in records[: const.DEFAULT_HISTORY_ATTR_LIMIT]
            ],
        }
