"""Base manager class for Otetsudai managers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

from .. import const

if TYPE_CHECKING:
    from homeassistant.core import HomeAssistant

    from ..coordinator import OtetsudaiDataCoordinator


class BaseManager(ABC):
    """Base class for all Otetsudai managers.

    Provides:
    - Access to hass and the owning coordinator
    - Instance-tagged event firing on the Home Assistant bus (fire_event)

    Data Persistence:
    - Use coordinator.async_persist_and_update() after every mutation so the
      write completes before the operation returns and entities refresh

    Subclasses must implement:
    - async_setup(): Initialize state
    """

    def __init__(
        self, hass: HomeAssistant, coordinator: OtetsudaiDataCoordinator
    ) -> None:
        """Initialize manager.

        Args:
            hass: Home Assistant instance
            coordinator: Parent coordinator managing this integration instance
        """
        self.hass = hass
        self.coordinator = coordinator
        self.entry_id = coordinator.config_entry.entry_id

    def fire_event(self, event_type: str, **payload: Any) -> None:
        """Fire an event on the Home Assistant bus tagged with this entry.

        Automations use these events for acknowledgements (e.g. a
        notification when a record is added).

        Args:
            event_type: Event name constant (e.g., const.EVENT_RECORD_CREATED)
            **payload: Event data (must be JSON-serializable)
        """
        const.LOGGER.debug(
            "DEBUG: Firing event '%s' for instance %s with payload keys: %s",
            event_type,
            self.entry_id,
            list(payload.keys()),
        )
        self.hass.bus.async_fire(
            event_type, {const.ATTR_ENTRY_ID: self.entry_id, **payload}
        )

    @abstractmethod
    async def async_setup(self) -> None:
        """Set up the manager.

        Called once during coordinator initialization.
        """
