"""Pull a numeric reading out of an HTTP response body."""
from __future__ import annotations

import math
import re
from typing import Any, Mapping, Optional

from .exceptions import (
    AmbiguousResponseError,
    NonNumericValueError,
    PathNotFoundError,
    UnparseableResponseError,
)

# Leading decimal number, the rest of the string is ignored ("21.5 C" -> 21.5)
_LEADING_FLOAT = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|[+-]?Infinity)")


def parse_float(text: str) -> float:
    """Parse the leading number of a string, NaN when there is none."""
    m = _LEADING_FLOAT.match(text)
    if not m:
        return math.nan
    return float(m.group(1).replace("Infinity", "inf"))


def _type_name(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, Mapping):
        return "object"
    if isinstance(value, list):
        return "array"
    if isinstance(value, str):
        return "string"
    return type(value).__name__


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _lookup(node: Any, keys: list[str], path: str) -> Any:
    if not keys:
        return node
    key, rest = keys[0], keys[1:]
    if isinstance(node, Mapping):
        if key not in node:
            raise PathNotFoundError(path, key)
        return _lookup(node[key], rest, path)
    if isinstance(node, list):
        try:
            index = int(key) if key.isdecimal() else -1
        except ValueError:
            index = -1
        if not 0 <= index < len(node):
            raise PathNotFoundError(path, key)
        return _lookup(node[index], rest, path)
    raise PathNotFoundError(path, key)


def _to_number(value: Any, path: Optional[str]) -> float:
    if _is_number(value):
        try:
            number = float(value)
        except OverflowError as err:
            raise NonNumericValueError(path, _type_name(value)) from err
    elif isinstance(value, str):
        number = parse_float(value)
    else:
        raise NonNumericValueError(path, _type_name(value))
    if math.isnan(number):
        raise NonNumericValueError(path, _type_name(value))
    return number


def extract_value(body: Any, path: Optional[str] = None) -> float:
    """Return the number found in ``body`` at dotted ``path``.

    Without a path the body itself must be a number or numeric string.
    Example: ``extract_value({"sensor": {"co2": 450}}, "sensor.co2") == 450``.
    Raises a subclass of ExtractionError when no number can be read.
    """
    if not path:
        if isinstance(body, Mapping):
            raise AmbiguousResponseError()
        if _is_number(body) or isinstance(body, str):
            return _to_number(body, None)
        raise UnparseableResponseError(_type_name(body))

    value = _lookup(body, path.split("."), path)
    return _to_number(value, path)
