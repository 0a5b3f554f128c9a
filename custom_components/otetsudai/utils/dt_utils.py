# File: utils/dt_utils.py
"""Date and time utilities for Otetsudai.

Pure Python date/time functions with ZERO Home Assistant dependencies.
Uses standard library datetime/zoneinfo and dateutil.

Functions:
    - set_default_timezone: Local timezone configuration
    - dt_now_utc: Current datetime in UTC
    - dt_now_local: Current datetime in local timezone
    - as_utc: Timezone conversion
    - dt_parse: Parse an ISO 8601 timestamp string
    - dt_to_iso_z: Format a datetime as a UTC ISO string with millisecond precision
    - dt_to_epoch_ms: Milliseconds since the Unix epoch
    - dt_same_month: Calendar month/year comparison
    - dt_month_start: First instant of the month
    - dt_shift_month: Move a datetime by whole calendar months
"""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
import logging
from zoneinfo import ZoneInfo

from dateutil.parser import isoparse
from dateutil.relativedelta import relativedelta

# Module-level logger (no HA dependency)
_LOGGER = logging.getLogger(__name__)

# Default timezone - replaced during integration setup
DEFAULT_TIME_ZONE: ZoneInfo = ZoneInfo("UTC")

_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)
_ONE_MS = timedelta(milliseconds=1)


# ==============================================================================
# Timezone Configuration
# ==============================================================================


def set_default_timezone(tz: ZoneInfo) -> None:
    """Set the default timezone for all dt_utils functions.

    Call this during integration setup to configure the user's timezone.

    Args:
        tz: ZoneInfo object representing the default timezone
    """
    global DEFAULT_TIME_ZONE  # noqa: PLW0603
    DEFAULT_TIME_ZONE = tz


# ==============================================================================
# Current Date/Time Functions
# ==============================================================================


def dt_now_utc() -> datetime:
    """Return the current datetime in UTC (timezone-aware)."""
    return datetime.now(UTC)


def dt_now_local(tz: ZoneInfo | None = None) -> datetime:
    """Return the current datetime in local timezone (timezone-aware).

    Args:
        tz: Optional timezone override. Uses DEFAULT_TIME_ZONE if not provided.
    """
    return datetime.now(tz or DEFAULT_TIME_ZONE)


# ==============================================================================
# Timezone Conversion
# ==============================================================================


def as_utc(dt_obj: datetime) -> datetime:
    """Convert a datetime to UTC. Naive datetimes are taken as UTC."""
    if dt_obj.tzinfo is None:
        dt_obj = dt_obj.replace(tzinfo=UTC)
    return dt_obj.astimezone(UTC)


# ==============================================================================
# Parsing / Formatting
# ==============================================================================


def dt_parse(value: str | None) -> datetime | None:
    """Parse an ISO 8601 timestamp into a UTC-aware datetime.

    Accepts the `Z` suffix and fractional seconds produced by browsers
    (e.g. "2025-01-15T12:00:00.000Z"). Naive values are taken as UTC.

    Returns:
        UTC-aware datetime, or None if the value is not a parsable string.
    """
    if not isinstance(value, str) or not value.strip():
        return None
    try:
        parsed = isoparse(value.strip())
    except (ValueError, OverflowError) as err:
        _LOGGER.debug("DEBUG: Unable to parse timestamp '%s': %s", value, err)
        return None
    return as_utc(parsed)


def dt_to_iso_z(dt_obj: datetime) -> str:
    """Format a datetime as UTC ISO 8601 with milliseconds and a `Z` suffix.

    Example:
        datetime(2025, 1, 15, 12, 0, tzinfo=UTC) → "2025-01-15T12:00:00.000Z"
    """
    return (
        as_utc(dt_obj).isoformat(timespec="milliseconds").replace("+00:00", "Z")
    )


def dt_to_epoch_ms(dt_obj: datetime) -> int:
    """Return whole milliseconds since the Unix epoch."""
    return (as_utc(dt_obj) - _EPOCH) // _ONE_MS


# ==============================================================================
# Calendar Month Helpers
# ==============================================================================


def dt_same_month(dt_obj: datetime, reference: datetime) -> bool:
    """Return True when both datetimes fall in the same calendar month and year.

    `dt_obj` is converted to the reference's timezone first, so the month
    boundary is the one the reference lives in. A naive reference compares
    in UTC.
    """
    if reference.tzinfo is not None:
        local = as_utc(dt_obj).astimezone(reference.tzinfo)
    else:
        local = as_utc(dt_obj).replace(tzinfo=None)
    return local.year == reference.year and local.month == reference.month


def dt_month_start(dt_obj: datetime) -> datetime:
    """Return midnight on the first day of `dt_obj`'s month (same tzinfo)."""
    return dt_obj.replace(day=1, hour=0, minute=0, second=0, microsecond=0)


def dt_shift_month(dt_obj: datetime, months: int) -> datetime:
    """Move a datetime by whole calendar months, clamping the day.

    Example:
        dt_shift_month(datetime(2025, 3, 31), -1) → datetime(2025, 2, 28)
    """
    return dt_obj + relativedelta(months=months)
