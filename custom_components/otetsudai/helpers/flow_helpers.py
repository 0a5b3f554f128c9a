# File: helpers/flow_helpers.py
"""Helpers for the Otetsudai integration's Config and Options flow.

Provides schema builders and input-processing logic:
- validate_<step>_inputs(user_input) -> errors_dict (empty dict = no errors)
- build_<step>_schema(default) -> vol.Schema
- build_<step>_data(user_input) -> dict stored on the config entry
"""

from __future__ import annotations

from typing import Any

import voluptuous as vol
from homeassistant.helpers import config_validation as cv
from homeassistant.helpers import selector

from .. import const


def _normalize_currency(value: Any) -> str:
    """Return the currency code stripped and upper-cased."""
    return str(value or "").strip().upper()


def validate_currency(value: Any) -> dict[str, str]:
    """Validate an ISO 4217 currency code.

    Returns:
        Errors dict keyed by the form field; empty when valid.
    """
    try:
        cv.currency(_normalize_currency(value))
    except vol.Invalid:
        return {const.CONF_CURRENCY: const.TRANS_KEY_ERROR_INVALID_CURRENCY}
    return {}


# ----------------------------------------------------------------------------------
# Config flow: tracker setup
# ----------------------------------------------------------------------------------


def build_tracker_schema(
    default_title: str = const.OTETSUDAI_TITLE,
    default_currency: str = const.DEFAULT_CURRENCY,
) -> vol.Schema:
    """Build a schema for the tracker title & currency."""
    return vol.Schema(
        {
            vol.Required(const.CONF_TITLE, default=default_title): str,
            vol.Required(const.CONF_CURRENCY, default=default_currency): str,
        }
    )


def validate_tracker_inputs(user_input: dict[str, Any]) -> dict[str, str]:
    """Validate the tracker setup form."""
    errors: dict[str, str] = {}
    if not str(user_input.get(const.CONF_TITLE, "")).strip():
        errors[const.CONF_TITLE] = const.TRANS_KEY_ERROR_INVALID_TITLE
    errors.update(validate_currency(user_input.get(const.CONF_CURRENCY)))
    return errors


def build_tracker_data(user_input: dict[str, Any]) -> dict[str, Any]:
    """Build config entry data from the tracker setup form."""
    return {
        const.CONF_CURRENCY: _normalize_currency(user_input[const.CONF_CURRENCY]),
    }


# ----------------------------------------------------------------------------------
# Options flow: general options
# ----------------------------------------------------------------------------------


def build_general_options_schema(default: dict[str, Any] | None = None) -> vol.Schema:
    """Build schema for general options: currency and update interval."""
    default = default or {}
    default_currency = default.get(const.CONF_CURRENCY, const.DEFAULT_CURRENCY)
    default_interval = default.get(
        const.CONF_UPDATE_INTERVAL, const.DEFAULT_UPDATE_INTERVAL
    )

    return vol.Schema(
        {
            vol.Required(const.CONF_CURRENCY, default=default_currency): str,
            vol.Required(
                const.CONF_UPDATE_INTERVAL, default=default_interval
            ): selector.NumberSelector(
                selector.NumberSelectorConfig(
                    mode=selector.NumberSelectorMode.BOX,
                    min=const.MIN_UPDATE_INTERVAL,
                    max=const.MAX_UPDATE_INTERVAL,
                    step=1,
                )
            ),
        }
    )


def build_general_options_data(user_input: dict[str, Any]) -> dict[str, Any]:
    """Build config entry options from the general options form.

    NumberSelector hands back floats; the interval is stored as whole minutes.
    """
    interval = int(
        user_input.get(const.CONF_UPDATE_INTERVAL, const.DEFAULT_UPDATE_INTERVAL)
    )
    interval = max(const.MIN_UPDATE_INTERVAL, min(const.MAX_UPDATE_INTERVAL, interval))
    return {
        const.CONF_CURRENCY: _normalize_currency(user_input[const.CONF_CURRENCY]),
        const.CONF_UPDATE_INTERVAL: interval,
    }
