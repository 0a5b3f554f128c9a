# File: services.py
"""Defines custom services for the Otetsudai integration.

These services allow recording, deleting and reviewing reward records through
scripts, automations and dashboard buttons. Read-only services return their
result as a service response.
"""

from __future__ import annotations

import voluptuous as vol
from homeassistant.core import (
    HomeAssistant,
    ServiceCall,
    ServiceResponse,
    SupportsResponse,
)
from homeassistant.helpers import config_validation as cv

from . import const
from .helpers.entity_helpers import get_loaded_coordinator

# --- Service Schemas ---
CREATE_RECORD_SCHEMA = vol.Schema(
    {
        vol.Required(const.FIELD_REGISTRANT): cv.string,
        vol.Required(const.FIELD_TYPE): cv.string,
        vol.Required(const.FIELD_AMOUNT): vol.Any(int, float, str),
    }
)

DELETE_RECORD_SCHEMA = vol.Schema(
    {
        vol.Required(const.FIELD_RECORD_ID): vol.Coerce(int),
    }
)

CLEAR_RECORDS_SCHEMA = vol.Schema({})

LIST_RECORDS_SCHEMA = vol.Schema(
    {
        vol.Optional(const.FIELD_LIMIT): vol.All(vol.Coerce(int), vol.Range(min=1)),
    }
)

GET_SUMMARY_SCHEMA = vol.Schema(
    {
        vol.Inclusive(const.FIELD_YEAR, "explicit_month"): vol.All(
            vol.Coerce(int), vol.Range(min=1, max=9999)
        ),
        vol.Inclusive(const.FIELD_MONTH, "explicit_month"): vol.All(
            vol.Coerce(int), vol.Range(min=1, max=12)
        ),
        vol.Optional(const.FIELD_MONTH_OFFSET, default=0): vol.All(
            vol.Coerce(int),
            vol.Range(min=const.MIN_MONTH_OFFSET, max=const.MAX_MONTH_OFFSET),
        ),
    }
)


def async_setup_services(hass: HomeAssistant):
    """Register Otetsudai services."""

    async def handle_create_record(call: ServiceCall) -> ServiceResponse:
        """Handle recording a completed chore."""
        coordinator = get_loaded_coordinator(hass)
        record = await coordinator.record_manager.async_create_record(
            call.data[const.FIELD_REGISTRANT],
            call.data[const.FIELD_TYPE],
            call.data[const.FIELD_AMOUNT],
        )
        return {const.RESPONSE_RECORD: record}

    async def handle_delete_record(call: ServiceCall) -> ServiceResponse:
        """Handle deleting one record."""
        coordinator = get_loaded_coordinator(hass)
        deleted = await coordinator.record_manager.async_delete_record(
            call.data[const.FIELD_RECORD_ID]
        )
        return {const.RESPONSE_DELETED: deleted}

    async def handle_clear_records(call: ServiceCall) -> ServiceResponse:
        """Handle deleting every record."""
        coordinator = get_loaded_coordinator(hass)
        removed = await coordinator.record_manager.async_clear_records()
        return {const.RESPONSE_REMOVED: removed}

    async def handle_list_records(call: ServiceCall) -> ServiceResponse:
        """Return stored records, newest first."""
        coordinator = get_loaded_coordinator(hass)
        records = coordinator.records
        limit = call.data.get(const.FIELD_LIMIT)
        if limit is not None:
            records = records[:limit]
        return {const.RESPONSE_RECORDS: [dict(record) for record in records]}

    async def handle_get_summary(call: ServiceCall) -> ServiceResponse:
        """Return the monthly summary for the requested month."""
        coordinator = get_loaded_coordinator(hass)
        summary = coordinator.summary_data_for(
            year=call.data.get(const.FIELD_YEAR),
            month=call.data.get(const.FIELD_MONTH),
            month_offset=call.data[const.FIELD_MONTH_OFFSET],
        )
        const.LOGGER.debug(
            "DEBUG: Get Summary: %s-%s total=%s",
            summary[const.SUMMARY_YEAR],
            summary[const.SUMMARY_MONTH],
            summary[const.SUMMARY_TOTAL],
        )
        return dict(summary)

    # --- Register Services ---
    hass.services.async_register(
        const.DOMAIN,
        const.SERVICE_CREATE_RECORD,
        handle_create_record,
        schema=CREATE_RECORD_SCHEMA,
        supports_response=SupportsResponse.OPTIONAL,
    )
    hass.services.async_register(
        const.DOMAIN,
        const.SERVICE_DELETE_RECORD,
        handle_delete_record,
        schema=DELETE_RECORD_SCHEMA,
        supports_response=SupportsResponse.OPTIONAL,
    )
    hass.services.async_register(
        const.DOMAIN,
        const.SERVICE_CLEAR_RECORDS,
        handle_clear_records,
        schema=CLEAR_RECORDS_SCHEMA,
        supports_response=SupportsResponse.OPTIONAL,
    )
    hass.services.async_register(
        const.DOMAIN,
        const.SERVICE_LIST_RECORDS,
        handle_list_records,
        schema=LIST_RECORDS_SCHEMA,
        supports_response=SupportsResponse.ONLY,
    )
    hass.services.async_register(
        const.DOMAIN,
        const.SERVICE_GET_SUMMARY,
        handle_get_summary,
        schema=GET_SUMMARY_SCHEMA,
        supports_response=SupportsResponse.ONLY,
    )

    const.LOGGER.info("INFO: Otetsudai services have been registered successfully")


async def async_unload_services(hass: HomeAssistant):
    """Unregister Otetsudai services when unloading the integration."""
    services = [
        const.SERVICE_CREATE_RECORD,
        const.SERVICE_DELETE_RECORD,
        const.SERVICE_CLEAR_RECORDS,
        const.SERVICE_LIST_RECORDS,
        const.SERVICE_GET_SUMMARY,
    ]

    for service in services:
        if hass.services.has_service(const.DOMAIN, service):
            hass.services.async_remove(const.DOMAIN, service)

    const.LOGGER.info("INFO: Otetsudai services have been unregistered")
