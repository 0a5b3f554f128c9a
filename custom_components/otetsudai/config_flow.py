# File: config_flow.py
"""Config flow for the Otetsudai integration.

A single step asks for the tracker title and the currency used to display
reward amounts. Only one tracker is allowed per Home Assistant instance.
"""

from __future__ import annotations

from typing import Any

from homeassistant import config_entries
from homeassistant.core import callback

from . import const
from .helpers import flow_helpers as fh
from .options_flow import OtetsudaiOptionsFlowHandler


class OtetsudaiConfigFlow(config_entries.ConfigFlow, domain=const.DOMAIN):
    """Config Flow for Otetsudai."""

    VERSION = 1

    async def async_step_user(self, user_input: dict[str, Any] | None = None):
        """Ask for the tracker title and currency."""
        # Check if there's an existing Otetsudai entry
        if any(self._async_current_entries()):
            return self.async_abort(reason=const.TRANS_KEY_ERROR_SINGLE_INSTANCE)

        errors: dict[str, str] = {}
        if user_input is not None:
            errors = fh.validate_tracker_inputs(user_input)
            if not errors:
                title = user_input[const.CONF_TITLE].strip()
                const.LOGGER.debug(
                    "DEBUG: Config Flow: creating entry '%s' with currency %s",
                    title,
                    user_input[const.CONF_CURRENCY],
                )
                return self.async_create_entry(
                    title=title, data=fh.build_tracker_data(user_input)
                )

        defaults = user_input or {}
        return self.async_show_form(
            step_id=const.CONFIG_FLOW_STEP_USER,
            data_schema=fh.build_tracker_schema(
                default_title=defaults.get(const.CONF_TITLE, const.OTETSUDAI_TITLE),
                default_currency=defaults.get(
                    const.CONF_CURRENCY, const.DEFAULT_CURRENCY
                ),
            ),
            errors=errors,
        )

    @staticmethod
    @callback
    def async_get_options_flow(config_entry):
        """Return the Options Flow."""
        return OtetsudaiOptionsFlowHandler()
