"""Data models for the HTTP CO2 sensor integration."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Mapping, Optional

from .const import (
    CONF_ABNORMAL_THRESHOLD,
    CONF_BODY,
    CONF_ENABLE_HUMIDITY,
    CONF_ENABLE_TEMPERATURE,
    CONF_FIRMWARE_REVISION,
    CONF_HEADERS,
    CONF_HTTP_METHOD,
    CONF_JSON_PATH,
    CONF_MANUFACTURER,
    CONF_MAX_CO2,
    CONF_MAX_TEMPERATURE,
    CONF_MIN_CO2,
    CONF_MIN_TEMPERATURE,
    CONF_MODEL,
    CONF_NAME,
    CONF_PASSWORD,
    CONF_SERIAL_NUMBER,
    CONF_TIMEOUT,
    CONF_UPDATE_INTERVAL,
    CONF_URL,
    CONF_USERNAME,
    DEFAULT_ABNORMAL_THRESHOLD,
    DEFAULT_FIRMWARE_REVISION,
    DEFAULT_MANUFACTURER,
    DEFAULT_MAX_CO2,
    DEFAULT_MAX_TEMPERATURE,
    DEFAULT_MIN_CO2,
    DEFAULT_MIN_TEMPERATURE,
    DEFAULT_MODEL,
    DEFAULT_SERIAL_NUMBER,
    DEFAULT_UPDATE_INTERVAL,
    FAMILY_HUMIDITY,
    FAMILY_TEMPERATURE,
    INITIAL_CO2_LEVEL,
    INITIAL_HUMIDITY,
    INITIAL_TEMPERATURE,
)


class FieldFamily(Enum):
    """Measured quantity sharing one fetch configuration."""

    PRIMARY = "co2"
    TEMPERATURE = FAMILY_TEMPERATURE
    HUMIDITY = FAMILY_HUMIDITY


class SensorField(Enum):
    """Value pushed to and read by the host."""

    CO2_LEVEL = "co2_level"
    CO2_DETECTED = "co2_detected"
    TEMPERATURE = "temperature"
    HUMIDITY = "humidity"


@dataclass(frozen=True)
class AuthConfig:
    username: str
    password: str


@dataclass(frozen=True)
class FamilyConfig:
    """Fetch settings of one family; unset fields are None."""

    url: Optional[str] = None
    json_path: Optional[str] = None
    http_method: Optional[str] = None
    headers: Optional[Dict[str, str]] = None
    body: Optional[str] = None
    timeout: Optional[int] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], prefix: str = "") -> "FamilyConfig":
        """Read the family keys, e.g. ``temperature_url`` for prefix ``temperature_``."""
        headers = data.get(f"{prefix}{CONF_HEADERS}")
        return cls(
            url=data.get(f"{prefix}{CONF_URL}"),
            json_path=data.get(f"{prefix}{CONF_JSON_PATH}"),
            http_method=data.get(f"{prefix}{CONF_HTTP_METHOD}"),
            headers=dict(headers) if headers is not None else None,
            body=data.get(f"{prefix}{CONF_BODY}"),
            timeout=data.get(f"{prefix}{CONF_TIMEOUT}"),
        )


@dataclass(frozen=True)
class SensorConfig:
    """Configuration of one sensor, replaced wholesale on reconfiguration."""

    name: str
    url: str
    primary: FamilyConfig = field(default_factory=FamilyConfig)
    temperature: FamilyConfig = field(default_factory=FamilyConfig)
    humidity: FamilyConfig = field(default_factory=FamilyConfig)
    enable_temperature: bool = False
    enable_humidity: bool = False
    min_co2: float = DEFAULT_MIN_CO2
    max_co2: float = DEFAULT_MAX_CO2
    abnormal_threshold: float = DEFAULT_ABNORMAL_THRESHOLD
    min_temperature: float = DEFAULT_MIN_TEMPERATURE
    max_temperature: float = DEFAULT_MAX_TEMPERATURE
    update_interval: float = DEFAULT_UPDATE_INTERVAL
    auth: Optional[AuthConfig] = None
    manufacturer: str = DEFAULT_MANUFACTURER
    model: str = DEFAULT_MODEL
    serial_number: str = DEFAULT_SERIAL_NUMBER
    firmware_revision: str = DEFAULT_FIRMWARE_REVISION

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SensorConfig":
        """Build from the flat configuration mapping stored in a config entry."""
        auth = None
        if data.get(CONF_USERNAME) is not None:
            auth = AuthConfig(data[CONF_USERNAME], data.get(CONF_PASSWORD) or "")

        def _get(key: str, default: Any) -> Any:
            value = data.get(key)
            return default if value is None else value

        primary = FamilyConfig.from_dict(data)
        return cls(
            name=data[CONF_NAME],
            url=data[CONF_URL],
            primary=primary,
            temperature=FamilyConfig.from_dict(data, f"{FAMILY_TEMPERATURE}_"),
            humidity=FamilyConfig.from_dict(data, f"{FAMILY_HUMIDITY}_"),
            enable_temperature=bool(data.get(CONF_ENABLE_TEMPERATURE, False)),
            enable_humidity=bool(data.get(CONF_ENABLE_HUMIDITY, False)),
            min_co2=_get(CONF_MIN_CO2, DEFAULT_MIN_CO2),
            max_co2=_get(CONF_MAX_CO2, DEFAULT_MAX_CO2),
            abnormal_threshold=_get(CONF_ABNORMAL_THRESHOLD, DEFAULT_ABNORMAL_THRESHOLD),
            min_temperature=_get(CONF_MIN_TEMPERATURE, DEFAULT_MIN_TEMPERATURE),
            max_temperature=_get(CONF_MAX_TEMPERATURE, DEFAULT_MAX_TEMPERATURE),
            update_interval=_get(CONF_UPDATE_INTERVAL, DEFAULT_UPDATE_INTERVAL),
            auth=auth,
            manufacturer=_get(CONF_MANUFACTURER, DEFAULT_MANUFACTURER),
            model=_get(CONF_MODEL, DEFAULT_MODEL),
            serial_number=_get(CONF_SERIAL_NUMBER, DEFAULT_SERIAL_NUMBER),
            firmware_revision=_get(CONF_FIRMWARE_REVISION, DEFAULT_FIRMWARE_REVISION),
        )

    def family(self, family: FieldFamily) -> FamilyConfig:
        if family is FieldFamily.TEMPERATURE:
            return self.temperature
        if family is FieldFamily.HUMIDITY:
            return self.humidity
        return self.primary

    def is_enabled(self, family: FieldFamily) -> bool:
        if family is FieldFamily.TEMPERATURE:
            return self.enable_temperature
        if family is FieldFamily.HUMIDITY:
            return self.enable_humidity
        return True


@dataclass(frozen=True)
class EffectiveFieldConfig:
    """Fully resolved fetch settings of one family."""

    url: str
    json_path: Optional[str]
    http_method: str
    headers: Dict[str, str]
    body: Optional[str]
    timeout: int


@dataclass(frozen=True)
class RawResponse:
    status: int
    body: Any

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300


@dataclass
class SensorState:
    """Cached readings of one sensor."""

    co2_level: float = INITIAL_CO2_LEVEL
    co2_detected: bool = False
    temperature: float = INITIAL_TEMPERATURE
    humidity: float = INITIAL_HUMIDITY

    def get(self, sensor_field: SensorField) -> Any:
        return getattr(self, sensor_field.value)
