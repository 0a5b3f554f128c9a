# File: const.py
"""Constants for the Otetsudai integration.

This file centralizes configuration keys, defaults, storage keys, service and
field names, and platform identifiers for consistency across the integration.
"""

import logging
from typing import Final

from homeassistant.const import Platform

# ------------------------------------------------------------------------------------------------
# General / Integration Information
# ------------------------------------------------------------------------------------------------
# Integration Name
OTETSUDAI_TITLE = "Otetsudai"

# Integration Domain
DOMAIN = "otetsudai"

# Logger
LOGGER = logging.getLogger(__package__)

# Supported Platforms
PLATFORMS = [
    Platform.SENSOR,
]

# Coordinator
COORDINATOR = "coordinator"
COORDINATOR_SUFFIX = "_coordinator"

# Storage and Versioning
STORE = "store"
STORAGE_KEY = "otetsudai_data"
STORAGE_VERSION = 1

# ------------------------------------------------------------------------------------------------
# Configuration Keys
# ------------------------------------------------------------------------------------------------
CONF_CURRENCY = "currency"
CONF_TITLE = "title"
CONF_UPDATE_INTERVAL = "update_interval"

# ConfigFlow / OptionsFlow Steps
CONFIG_FLOW_STEP_USER = "user"
OPTIONS_FLOW_STEP_INIT = "init"

# ------------------------------------------------------------------------------------------------
# Defaults
# ------------------------------------------------------------------------------------------------
DEFAULT_CURRENCY = "JPY"
DEFAULT_UPDATE_INTERVAL = 5  # minutes
DEFAULT_HISTORY_ATTR_LIMIT = 20
DEFAULT_ZERO = 0

MIN_UPDATE_INTERVAL = 1
MAX_UPDATE_INTERVAL = 60
MIN_MONTH_OFFSET = -1200
MAX_MONTH_OFFSET = 1200

# ------------------------------------------------------------------------------------------------
# Storage Data Keys
# ------------------------------------------------------------------------------------------------
DATA_RECORDS = "records"

DATA_RECORD_ID = "id"
DATA_RECORD_REGISTRANT = "registrant"
DATA_RECORD_TYPE = "type"
DATA_RECORD_AMOUNT = "amount"
DATA_RECORD_DATE = "date"

# ------------------------------------------------------------------------------------------------
# Summary Keys (service responses and sensor attributes)
# ------------------------------------------------------------------------------------------------
SUMMARY_YEAR = "year"
SUMMARY_MONTH = "month"
SUMMARY_TOTAL = "total"
SUMMARY_COUNT = "count"
SUMMARY_REGISTRANTS = "registrants"
SUMMARY_REGISTRANT_NAME = "name"
SUMMARY_REGISTRANT_AMOUNT = "amount"
SUMMARY_REGISTRANT_PERCENT = "percent"
SUMMARY_REGISTRANT_HUE = "hue"

# Colour hints for specific registrants (hue in degrees)
HUE_OVERRIDES: Final[dict[str, int]] = {
    "來夏": 35,  # Orange/Gold
    "湊斗": 210,  # Blue
    "和奏": 320,  # Pink/Magenta
}

# ------------------------------------------------------------------------------------------------
# Services
# ------------------------------------------------------------------------------------------------
SERVICE_CREATE_RECORD = "create_record"
SERVICE_DELETE_RECORD = "delete_record"
SERVICE_CLEAR_RECORDS = "clear_records"
SERVICE_LIST_RECORDS = "list_records"
SERVICE_GET_SUMMARY = "get_summary"

# Service Fields
FIELD_REGISTRANT = "registrant"
FIELD_TYPE = "type"
FIELD_AMOUNT = "amount"
FIELD_RECORD_ID = "record_id"
FIELD_LIMIT = "limit"
FIELD_YEAR = "year"
FIELD_MONTH = "month"
FIELD_MONTH_OFFSET = "month_offset"

# Service Response Keys
RESPONSE_RECORD = "record"
RESPONSE_RECORDS = "records"
RESPONSE_DELETED = "deleted"
RESPONSE_REMOVED = "removed"

# ------------------------------------------------------------------------------------------------
# Events (fired on the Home Assistant bus)
# ------------------------------------------------------------------------------------------------
EVENT_RECORD_CREATED = f"{DOMAIN}_record_created"
EVENT_RECORD_DELETED = f"{DOMAIN}_record_deleted"
EVENT_RECORDS_CLEARED = f"{DOMAIN}_records_cleared"

ATTR_ENTRY_ID = "entry_id"

# ------------------------------------------------------------------------------------------------
# Sensors
# ------------------------------------------------------------------------------------------------
SENSOR_EID_PREFIX = f"sensor.{DOMAIN}"
SENSOR_UID_SUFFIX_MONTHLY_TOTAL = "_monthly_total"
SENSOR_UID_SUFFIX_HISTORY = "_history"

ATTR_LATEST_RECORD = "latest_record"
ATTR_RECENT_RECORDS = "recent_records"
ATTR_RECORD_COUNT = "record_count"

# ------------------------------------------------------------------------------------------------
# Translation Keys
# ------------------------------------------------------------------------------------------------
TRANS_KEY_SENSOR_MONTHLY_TOTAL = "monthly_total"
TRANS_KEY_SENSOR_HISTORY = "history"
TRANS_KEY_ERROR_SINGLE_INSTANCE = "single_instance_allowed"
TRANS_KEY_ERROR_INVALID_CURRENCY = "invalid_currency"
TRANS_KEY_ERROR_INVALID_TITLE = "invalid_title"

# ------------------------------------------------------------------------------------------------
# Messages
# ------------------------------------------------------------------------------------------------
MSG_NO_ENTRY_FOUND = "No Otetsudai entry found"
ERROR_NO_LOADED_ENTRY = "Otetsudai is not set up or not loaded"
