"""Shared fixtures for Otetsudai tests."""

from typing import Any

import pytest
from homeassistant.core import HomeAssistant
from pytest_homeassistant_custom_component.common import MockConfigEntry

from custom_components.otetsudai.const import (
    CONF_CURRENCY,
    CONF_UPDATE_INTERVAL,
    DATA_RECORDS,
    DEFAULT_CURRENCY,
    DEFAULT_UPDATE_INTERVAL,
    DOMAIN,
    STORAGE_KEY,
)
from tests.helpers import make_record, make_storage_blob

# pylint: disable=invalid-name
pytest_plugins = "pytest_homeassistant_custom_component"
# pylint: enable=invalid-name


@pytest.fixture(autouse=True)
def auto_enable_custom_integrations(enable_custom_integrations: Any) -> Any:
    """Enable custom integrations in tests."""
    # pylint: disable=unused-argument
    yield


@pytest.fixture
def mock_config_entry() -> MockConfigEntry:
    """Return a mock config entry."""
    return MockConfigEntry(
        domain=DOMAIN,
        title="Otetsudai",
        data={CONF_CURRENCY: DEFAULT_CURRENCY},
        options={CONF_UPDATE_INTERVAL: DEFAULT_UPDATE_INTERVAL},
        entry_id="test_entry_id",
    )


@pytest.fixture
def sample_records() -> list[dict[str, Any]]:
    """Return stored records, newest first: two in February 2025, one in January."""
    return [
        make_record(1738749600000, "Mio", "Laundry", 100, "2025-02-05T10:00:00.000Z"),
        make_record(1738576800000, "Kai", "Dishes", 300, "2025-02-03T10:00:00.000Z"),
        make_record(1737367200000, "Kai", "Trash", 200, "2025-01-20T10:00:00.000Z"),
    ]


@pytest.fixture
async def init_integration(
    hass: HomeAssistant,
    mock_config_entry: MockConfigEntry,  # pylint: disable=redefined-outer-name
) -> MockConfigEntry:
    """Set up the Otetsudai integration with whatever hass_storage holds."""
    mock_config_entry.add_to_hass(hass)
    assert await hass.config_entries.async_setup(mock_config_entry.entry_id)
    await hass.async_block_till_done()
    return mock_config_entry


@pytest.fixture
async def init_integration_with_records(
    hass: HomeAssistant,
    hass_storage: dict[str, Any],
    mock_config_entry: MockConfigEntry,  # pylint: disable=redefined-outer-name
    sample_records: list[dict[str, Any]],  # pylint: disable=redefined-outer-name
) -> MockConfigEntry:
    """Set up the Otetsudai integration with sample records in storage."""
    hass_storage[STORAGE_KEY] = make_storage_blob({DATA_RECORDS: sample_records})
    mock_config_entry.add_to_hass(hass)
    assert await hass.config_entries.async_setup(mock_config_entry.entry_id)
    await hass.async_block_till_done()
    return mock_config_entry
