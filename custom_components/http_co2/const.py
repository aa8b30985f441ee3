"""Constants for the HTTP CO2 sensor integration."""
from __future__ import annotations

DOMAIN = "http_co2"
PLATFORMS = ["sensor", "binary_sensor"]
SIGNAL_UPDATE_FORMAT = "http_co2_update_{entry_id}"

# Identity
CONF_NAME = "name"
CONF_URL = "url"
CONF_SENSORS = "sensors"

# Primary field config
CONF_JSON_PATH = "json_path"
CONF_HTTP_METHOD = "http_method"
CONF_HEADERS = "headers"
CONF_BODY = "body"
CONF_TIMEOUT = "timeout"

# Per-family overrides are the primary keys with a family prefix,
# e.g. temperature_url, humidity_json_path
FAMILY_FIELD_KEYS = (CONF_URL, CONF_JSON_PATH, CONF_HTTP_METHOD, CONF_HEADERS, CONF_BODY, CONF_TIMEOUT)
FAMILY_TEMPERATURE = "temperature"
FAMILY_HUMIDITY = "humidity"

CONF_ENABLE_TEMPERATURE = "enable_temperature"
CONF_ENABLE_HUMIDITY = "enable_humidity"

# Bounds
CONF_MIN_CO2 = "min_co2"
CONF_MAX_CO2 = "max_co2"
CONF_ABNORMAL_THRESHOLD = "abnormal_threshold"
CONF_MIN_TEMPERATURE = "min_temperature"
CONF_MAX_TEMPERATURE = "max_temperature"

CONF_UPDATE_INTERVAL = "update_interval"
CONF_USERNAME = "username"
CONF_PASSWORD = "password"

# Device information
CONF_MANUFACTURER = "manufacturer"
CONF_MODEL = "model"
CONF_SERIAL_NUMBER = "serial_number"
CONF_FIRMWARE_REVISION = "firmware_revision"

CONF_SOURCE_YAML = "imported_from_yaml"

HTTP_METHODS = ("GET", "POST")

DEFAULT_UPDATE_INTERVAL = 60  # seconds
DEFAULT_TIMEOUT = 5000  # milliseconds
DEFAULT_HTTP_METHOD = "GET"
DEFAULT_CO2_PATH = "co2"
DEFAULT_TEMPERATURE_PATH = "temp"
DEFAULT_HUMIDITY_PATH = "humidity"

DEFAULT_MIN_CO2 = 0
DEFAULT_MAX_CO2 = 5000
DEFAULT_ABNORMAL_THRESHOLD = 1000
DEFAULT_MIN_TEMPERATURE = -100
DEFAULT_MAX_TEMPERATURE = 100
MIN_HUMIDITY = 0
MAX_HUMIDITY = 100

# Cached values before the first successful read
INITIAL_CO2_LEVEL = 400
INITIAL_TEMPERATURE = 20
INITIAL_HUMIDITY = 50

DEFAULT_MANUFACTURER = "Custom"
DEFAULT_MODEL = "CO2 Sensor"
DEFAULT_SERIAL_NUMBER = "Default-Serial"
DEFAULT_FIRMWARE_REVISION = "1.0.0"
