"""Clamping and threshold rules for readings."""
from __future__ import annotations

from .const import MAX_HUMIDITY, MIN_HUMIDITY


def clamp(raw: float, lower: float, upper: float) -> float:
    return max(lower, min(upper, raw))


def clamp_co2(raw: float, min_co2: float, max_co2: float) -> float:
    return clamp(raw, min_co2, max_co2)


def co2_detected(clamped: float, threshold: float) -> bool:
    """CO2 is abnormal strictly above the threshold."""
    return clamped > threshold


def clamp_temperature(raw: float, min_temperature: float, max_temperature: float) -> float:
    return clamp(raw, min_temperature, max_temperature)


def clamp_humidity(raw: float) -> float:
    return clamp(raw, MIN_HUMIDITY, MAX_HUMIDITY)
