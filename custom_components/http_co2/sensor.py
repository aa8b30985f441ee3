"""Sensor entities for the HTTP CO2 sensor integration."""
from __future__ import annotations

import logging

from homeassistant.components.sensor import (
    SensorDeviceClass,
    SensorEntity,
    SensorEntityDescription,
    SensorStateClass,
)
from homeassistant.config_entries import ConfigEntry
from homeassistant.const import CONCENTRATION_PARTS_PER_MILLION, PERCENTAGE, UnitOfTemperature
from homeassistant.core import HomeAssistant
from homeassistant.helpers.entity_platform import AddEntitiesCallback

from .const import DOMAIN
from .entity import HttpCo2Entity
from .models import SensorField
from .poller import SensorPoller

_LOGGER = logging.getLogger(__name__)

SENSOR_DESCRIPTIONS = {
    SensorField.CO2_LEVEL: SensorEntityDescription(
        key=SensorField.CO2_LEVEL.value,
        name="Carbon dioxide",
        device_class=SensorDeviceClass.CO2,
        state_class=SensorStateClass.MEASUREMENT,
        native_unit_of_measurement=CONCENTRATION_PARTS_PER_MILLION,
    ),
    SensorField.TEMPERATURE: SensorEntityDescription(
        key=SensorField.TEMPERATURE.value,
        name="Temperature",
        device_class=SensorDeviceClass.TEMPERATURE,
        state_class=SensorStateClass.MEASUREMENT,
        native_unit_of_measurement=UnitOfTemperature.CELSIUS,
    ),
    SensorField.HUMIDITY: SensorEntityDescription(
        key=SensorField.HUMIDITY.value,
        name="Humidity",
        device_class=SensorDeviceClass.HUMIDITY,
        state_class=SensorStateClass.MEASUREMENT,
        native_unit_of_measurement=PERCENTAGE,
    ),
}


async def async_setup_entry(hass: HomeAssistant, entry: ConfigEntry, async_add_entities: AddEntitiesCallback) -> None:
    poller: SensorPoller = hass.data[DOMAIN][entry.entry_id]["poller"]
    config = poller.config

    fields = [SensorField.CO2_LEVEL]
    if config.enable_temperature:
        fields.append(SensorField.TEMPERATURE)
    if config.enable_humidity:
        fields.append(SensorField.HUMIDITY)

    _LOGGER.debug("Adding sensors %s for %s", [f.value for f in fields], config.name)
    async_add_entities(HttpCo2Sensor(entry, poller, f) for f in fields)


class HttpCo2Sensor(HttpCo2Entity, SensorEntity):
    def __init__(self, entry: ConfigEntry, poller: SensorPoller, sensor_field: SensorField) -> None:
        super().__init__(entry, poller, sensor_field)
        self.entity_description = SENSOR_DESCRIPTIONS[sensor_field]

    @property
    def native_value(self):
        return self.current_value
