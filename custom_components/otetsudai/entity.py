"""Base entity classes for Otetsudai integration."""

from __future__ import annotations

from homeassistant.config_entries import ConfigEntry
from homeassistant.helpers.update_coordinator import CoordinatorEntity

from .coordinator import OtetsudaiDataCoordinator
from .helpers.device_helpers import create_tracker_device_info


class OtetsudaiCoordinatorEntity(CoordinatorEntity[OtetsudaiDataCoordinator]):
    """Base entity class for Otetsudai sensors with typed coordinator access.

    Every entity of one config entry hangs off the same tracker device.
    """

    _attr_has_entity_name = True

    def __init__(
        self, coordinator: OtetsudaiDataCoordinator, entry: ConfigEntry
    ) -> None:
        """Initialize the entity and attach it to the tracker device."""
        super().__init__(coordinator)
        self._entry = entry
        self._attr_device_info = create_tracker_device_info(entry)

    @property
    def coordinator(self) -> OtetsudaiDataCoordinator:
        """Return typed coordinator.

        Uses object.__getattribute__ to access the private _coordinator attribute
        set through the setter below when CoordinatorEntity assigns it.
        """
        return object.__getattribute__(self, "_coordinator")

    @coordinator.setter
    def coordinator(self, value: OtetsudaiDataCoordinator) -> None:
        """Set coordinator with proper typing.

        Args:
            value: The OtetsudaiDataCoordinator instance to set.
        """
        object.__setattr__(self, "_coordinator", value)
