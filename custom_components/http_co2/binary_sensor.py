"""Binary sensor flagging abnormal CO2 levels."""
from __future__ import annotations

from homeassistant.components.binary_sensor import BinarySensorDeviceClass, BinarySensorEntity
from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant
from homeassistant.helpers.entity_platform import AddEntitiesCallback

from .const import DOMAIN
from .entity import HttpCo2Entity
from .models import SensorField
from .poller import SensorPoller


async def async_setup_entry(hass: HomeAssistant, entry: ConfigEntry, async_add_entities: AddEntitiesCallback) -> None:
    poller: SensorPoller = hass.data[DOMAIN][entry.entry_id]["poller"]
    async_add_entities([HttpCo2DetectedSensor(entry, poller)])


class HttpCo2DetectedSensor(HttpCo2Entity, BinarySensorEntity):
    """On while the CO2 level is above the abnormal threshold."""

    _attr_name = "Carbon dioxide abnormal"
    _attr_device_class = BinarySensorDeviceClass.PROBLEM

    def __init__(self, entry: ConfigEntry, poller: SensorPoller) -> None:
        super().__init__(entry, poller, SensorField.CO2_DETECTED)

    @property
    def is_on(self) -> bool:
        return bool(self.current_value)
