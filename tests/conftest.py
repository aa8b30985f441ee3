"""Pytest configuration and fixtures for HTTP CO2 sensor tests."""

from __future__ import annotations

import asyncio
from typing import Any
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant

from custom_components.http_co2.const import DOMAIN
from custom_components.http_co2.models import RawResponse, SensorConfig

from .common import FakeResponse


@pytest.fixture
def mock_hass() -> HomeAssistant:
    """Mock Home Assistant instance."""
    hass = MagicMock(spec=HomeAssistant)
    hass.data = {DOMAIN: {}}
    hass.config_entries = MagicMock()
    hass.bus = MagicMock()
    hass.async_create_background_task = MagicMock(
        side_effect=lambda target, name, *args, **kwargs: asyncio.get_running_loop().create_task(target)
    )
    return hass


@pytest.fixture
def mock_track_interval():
    """Replace the interval timer; the test fires ticks through the captured action."""
    with patch("custom_components.http_co2.poller.async_track_time_interval") as mock_track:
        mock_track.return_value = MagicMock()
        yield mock_track


@pytest.fixture
def sensor_data() -> dict[str, Any]:
    """Flat sensor configuration as stored in a config entry."""
    return {
        "name": "Office",
        "url": "http://sensor.local/co2",
        "json_path": "co2",
        "enable_temperature": False,
        "enable_humidity": False,
    }


@pytest.fixture
def mock_config_entry(sensor_data) -> ConfigEntry:
    """Mock config entry."""
    entry = MagicMock(spec=ConfigEntry)
    entry.entry_id = "test_entry_id"
    entry.title = sensor_data["name"]
    entry.data = sensor_data
    entry.options = {}
    return entry


@pytest.fixture
def sensor_config(sensor_data) -> SensorConfig:
    return SensorConfig.from_dict(sensor_data)


@pytest.fixture
def mock_client():
    """Mock sensor HTTP client answering every request with a CO2 reading."""
    client = MagicMock()
    client.fetch = AsyncMock(return_value=RawResponse(status=200, body={"co2": 450}))
    return client


@pytest.fixture
def mock_session():
    """Mock aiohttp session returning a JSON CO2 reading."""
    session = MagicMock()
    session.request = MagicMock(return_value=FakeResponse(200, '{"co2": 450}'))
    return session
