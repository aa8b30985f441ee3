"""Helper utilities for the HTTP CO2 sensor integration."""
from __future__ import annotations

import re
import uuid

ASCII_SAFE = re.compile(r"[^a-z0-9_-]")


def sanitize(s: str | None) -> str:
    """Lowercase ASCII-only, spaces -> '-', remove invalid chars."""
    if s is None:
        s = ""
    s = s.strip().lower().replace(" ", "-")
    return ASCII_SAFE.sub("", s)


def build_sensor_unique_id(url: str, name: str) -> str:
    """Stable identity of a sensor, derived from its url and name.

    Format: <name>_<uuid5 of url+name>. Renaming or moving the endpoint
    yields a new sensor.
    """
    digest = uuid.uuid5(uuid.NAMESPACE_URL, url + name).hex
    return "_".join(p for p in (sanitize(name), digest) if p)


def build_entity_unique_id(base_unique: str, item: str) -> str:
    return f"{base_unique}_{sanitize(item)}"
