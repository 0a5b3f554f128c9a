# File: options_flow.py
"""Options Flow for the Otetsudai integration.

Changes the display currency and the refresh interval. Saving the options
reloads the entry through the update listener registered in __init__.py.
"""

from __future__ import annotations

from typing import Any

from homeassistant import config_entries

from . import const
from .helpers import flow_helpers as fh


class OtetsudaiOptionsFlowHandler(config_entries.OptionsFlow):
    """Options Flow for general settings."""

    async def async_step_init(self, user_input: dict[str, Any] | None = None):
        """Manage general options: currency and update interval."""
        errors: dict[str, str] = {}
        if user_input is not None:
            errors = fh.validate_currency(user_input.get(const.CONF_CURRENCY))
            if not errors:
                options = fh.build_general_options_data(user_input)
                const.LOGGER.debug(
                    "DEBUG: General Options Updated: Currency=%s, Update Interval=%s",
                    options[const.CONF_CURRENCY],
                    options[const.CONF_UPDATE_INTERVAL],
                )
                return self.async_create_entry(title="", data=options)

        current = {
            const.CONF_CURRENCY: self.config_entry.data.get(
                const.CONF_CURRENCY, const.DEFAULT_CURRENCY
            ),
            **self.config_entry.options,
        }
        return self.async_show_form(
            step_id=const.OPTIONS_FLOW_STEP_INIT,
            data_schema=fh.build_general_options_schema(current),
            errors=errors,
        )
