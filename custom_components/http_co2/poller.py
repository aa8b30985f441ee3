"""Scheduled polling of one HTTP sensor."""
from __future__ import annotations

import asyncio
from datetime import datetime, timedelta
import logging
from typing import Any, Callable, Optional

from homeassistant.core import CALLBACK_TYPE, HomeAssistant, callback
from homeassistant.helpers.event import async_track_time_interval

from .api import SensorHttpClient
from .exceptions import ExtractionError, HttpCo2Exception, UnparseableResponseError
from .extractor import extract_value
from .models import FieldFamily, SensorConfig, SensorField, SensorState
from .policy import clamp_co2, clamp_humidity, clamp_temperature, co2_detected
from .resolver import resolve_field

_LOGGER = logging.getLogger(__name__)

PushCallback = Callable[[SensorField, Any], None]

FAMILY_FIELDS = {
    FieldFamily.PRIMARY: (SensorField.CO2_LEVEL, SensorField.CO2_DETECTED),
    FieldFamily.TEMPERATURE: (SensorField.TEMPERATURE,),
    FieldFamily.HUMIDITY: (SensorField.HUMIDITY,),
}


class SensorPoller:
    """Owns the cached readings of one sensor and the timer refreshing them.

    Each tick fetches CO2 and, when enabled, temperature and humidity
    concurrently. A failing family keeps its previous value; the next tick
    is the retry.
    """

    def __init__(
        self,
        hass: HomeAssistant,
        client: SensorHttpClient,
        config: SensorConfig,
        push_callback: Optional[PushCallback] = None,
    ) -> None:
        self.hass = hass
        self._client = client
        self._config = config
        self._push = push_callback
        self._state = SensorState()
        self._remove_interval: Optional[CALLBACK_TYPE] = None
        # Bumped on start/stop; results of an older run are dropped
        self._run_id = 0

    @property
    def config(self) -> SensorConfig:
        return self._config

    @property
    def is_running(self) -> bool:
        return self._remove_interval is not None

    def start(self) -> None:
        """Reset the cache, run a first update now and then every interval."""
        if self._remove_interval is not None:
            return
        self._run_id += 1
        self._state = SensorState()
        self._schedule_tick()
        self._remove_interval = async_track_time_interval(
            self.hass, self._handle_interval, timedelta(seconds=self._config.update_interval)
        )
        _LOGGER.debug(
            "Started periodic updates for %s every %s seconds", self._config.name, self._config.update_interval
        )

    def stop(self) -> None:
        """Cancel future ticks. Requests already in flight finish but are ignored."""
        if self._remove_interval is None:
            return
        self._run_id += 1
        self._remove_interval()
        self._remove_interval = None
        _LOGGER.debug("Stopped periodic updates for %s", self._config.name)

    def get_current_value(self, sensor_field: SensorField) -> Any:
        """Cached value, None for a family that is not enabled."""
        _LOGGER.debug("Triggered GET %s for %s", sensor_field.value, self._config.name)
        if sensor_field is SensorField.TEMPERATURE and not self._config.enable_temperature:
            return None
        if sensor_field is SensorField.HUMIDITY and not self._config.enable_humidity:
            return None
        return self._state.get(sensor_field)

    async def async_refresh(self) -> None:
        """Run one full update cycle."""
        families = [f for f in FieldFamily if self._config.is_enabled(f)]
        await asyncio.gather(*(self._async_update_family(f) for f in families))

    @callback
    def _handle_interval(self, now: datetime) -> None:
        self._schedule_tick()

    def _schedule_tick(self) -> None:
        # Ticks are not tied to the interval listener so stop() does not cancel them
        self.hass.async_create_background_task(
            self.async_refresh(), f"http_co2 update {self._config.name}"
        )

    async def _async_fetch_value(self, family: FieldFamily) -> float:
        effective = resolve_field(self._config, family)
        response = await self._client.fetch(effective, self._config.auth)
        try:
            return extract_value(response.body, effective.json_path)
        except ExtractionError as err:
            if not response.ok:
                raise UnparseableResponseError(str(err), response.status) from err
            raise

    async def _async_update_family(self, family: FieldFamily) -> None:
        run_id = self._run_id
        try:
            raw = await self._async_fetch_value(family)
        except HttpCo2Exception as err:
            _LOGGER.error("Failed to update %s value for %s: %s", family.value, self._config.name, err)
            return
        except Exception:  # noqa: BLE001
            _LOGGER.exception("Unexpected error updating %s value for %s", family.value, self._config.name)
            return

        if run_id != self._run_id:
            _LOGGER.debug("Discarding %s reading for stopped sensor %s", family.value, self._config.name)
            return
        self._commit(family, raw)

    def _commit(self, family: FieldFamily, raw: float) -> None:
        cfg = self._config
        state = self._state
        if family is FieldFamily.PRIMARY:
            state.co2_level = clamp_co2(raw, cfg.min_co2, cfg.max_co2)
            state.co2_detected = co2_detected(state.co2_level, cfg.abnormal_threshold)
            _LOGGER.debug(
                "Updated %s: CO2 Level = %s ppm, Detected = %s",
                cfg.name,
                state.co2_level,
                "Abnormal" if state.co2_detected else "Normal",
            )
        elif family is FieldFamily.TEMPERATURE:
            state.temperature = clamp_temperature(raw, cfg.min_temperature, cfg.max_temperature)
            _LOGGER.debug("Updated %s: Temperature = %s°C", cfg.name, state.temperature)
        else:
            state.humidity = clamp_humidity(raw)
            _LOGGER.debug("Updated %s: Humidity = %s%%", cfg.name, state.humidity)

        if self._push is not None:
            for sensor_field in FAMILY_FIELDS[family]:
                self._push(sensor_field, state.get(sensor_field))
