"""Tests for the sensor HTTP client."""

from __future__ import annotations

import asyncio
from unittest.mock import MagicMock

import aiohttp
import pytest
from yarl import URL

from custom_components.http_co2.api import SensorHttpClient
from custom_components.http_co2.exceptions import FetchTimeoutError, TransportError
from custom_components.http_co2.models import AuthConfig, EffectiveFieldConfig

from .common import FakeResponse


def _effective(**kwargs) -> EffectiveFieldConfig:
    values = {
        "url": "http://sensor.local/co2",
        "json_path": "co2",
        "http_method": "GET",
        "headers": {},
        "body": None,
        "timeout": 5000,
    }
    values.update(kwargs)
    return EffectiveFieldConfig(**values)


@pytest.mark.asyncio
async def test_fetch_get_json(mock_session):
    """Test a GET returning JSON."""
    client = SensorHttpClient(mock_session)
    response = await client.fetch(_effective(headers={"Accept": "application/json"}))

    assert response.status == 200
    assert response.body == {"co2": 450}
    args, kwargs = mock_session.request.call_args
    assert args == ("GET", URL("http://sensor.local/co2"))
    assert kwargs["headers"] == {"Accept": "application/json"}
    assert kwargs["timeout"].total == 5.0
    assert "auth" not in kwargs
    assert "json" not in kwargs and "data" not in kwargs


@pytest.mark.asyncio
async def test_fetch_plain_number_body(mock_session):
    mock_session.request.return_value = FakeResponse(200, "450.5")
    response = await SensorHttpClient(mock_session).fetch(_effective(json_path=None))
    assert response.body == 450.5


@pytest.mark.asyncio
async def test_fetch_text_body(mock_session):
    mock_session.request.return_value = FakeResponse(200, "co2=450")
    response = await SensorHttpClient(mock_session).fetch(_effective())
    assert response.body == "co2=450"


@pytest.mark.asyncio
async def test_fetch_post_json_body(mock_session):
    await SensorHttpClient(mock_session).fetch(_effective(http_method="POST", body='{"sensor": 1}'))
    _, kwargs = mock_session.request.call_args
    assert kwargs["json"] == {"sensor": 1}
    assert "data" not in kwargs


@pytest.mark.asyncio
async def test_fetch_post_raw_body(mock_session):
    """Test an unparseable POST body is sent as-is."""
    await SensorHttpClient(mock_session).fetch(_effective(http_method="POST", body="sensor=1"))
    _, kwargs = mock_session.request.call_args
    assert kwargs["data"] == "sensor=1"
    assert "json" not in kwargs


@pytest.mark.asyncio
async def test_fetch_get_ignores_body(mock_session):
    await SensorHttpClient(mock_session).fetch(_effective(body='{"sensor": 1}'))
    _, kwargs = mock_session.request.call_args
    assert "json" not in kwargs and "data" not in kwargs


@pytest.mark.asyncio
async def test_fetch_basic_auth(mock_session):
    await SensorHttpClient(mock_session).fetch(_effective(), AuthConfig("user", "secret"))
    _, kwargs = mock_session.request.call_args
    assert kwargs["auth"] == aiohttp.BasicAuth("user", "secret")


@pytest.mark.asyncio
async def test_fetch_adds_missing_scheme(mock_session):
    await SensorHttpClient(mock_session).fetch(_effective(url="sensor.local/co2"))
    args, _ = mock_session.request.call_args
    assert args[1] == URL("http://sensor.local/co2")


@pytest.mark.asyncio
async def test_fetch_non_2xx_is_returned(mock_session):
    mock_session.request.return_value = FakeResponse(503, "Service Unavailable")
    response = await SensorHttpClient(mock_session).fetch(_effective())
    assert response.status == 503
    assert not response.ok
    assert response.body == "Service Unavailable"


@pytest.mark.asyncio
async def test_fetch_timeout(mock_session):
    mock_session.request.side_effect = asyncio.TimeoutError()
    with pytest.raises(FetchTimeoutError) as exc_info:
        await SensorHttpClient(mock_session).fetch(_effective(timeout=1500))
    assert exc_info.value.timeout == 1500


@pytest.mark.asyncio
async def test_fetch_transport_error():
    session = MagicMock()
    session.request.side_effect = aiohttp.ClientConnectionError("Connection refused")
    with pytest.raises(TransportError) as exc_info:
        await SensorHttpClient(session).fetch(_effective())
    assert exc_info.value.message == "Connection refused"


@pytest.mark.asyncio
async def test_fetch_undecodable_bytes(mock_session):
    """Test invalid UTF-8 in the payload is replaced instead of raising."""
    mock_session.request.return_value = FakeResponse(200, b"\xff\xfe450")
    response = await SensorHttpClient(mock_session).fetch(_effective())
    assert isinstance(response.body, str)
    assert response.body.endswith("450")
    assert "�" in response.body


@pytest.mark.asyncio
async def test_fetch_unknown_charset_falls_back_to_utf8(mock_session):
    mock_session.request.return_value = FakeResponse(200, b'{"co2": 451}', charset="x-unknown")
    response = await SensorHttpClient(mock_session).fetch(_effective())
    assert response.body == {"co2": 451}
