"""Exceptions for the HTTP CO2 sensor integration."""
from __future__ import annotations


class HttpCo2Exception(Exception):
    """Base exception for the integration."""


class InvalidSensorConfig(HttpCo2Exception):
    """A sensor configuration failed validation."""


class FetchError(HttpCo2Exception):
    """The HTTP request for a field could not be completed."""


class FetchTimeoutError(FetchError):
    """The request did not complete within its timeout."""

    def __init__(self, url: str, timeout: int) -> None:
        super().__init__(f"Request to {url} timed out after {timeout} ms")
        self.url = url
        self.timeout = timeout


class TransportError(FetchError):
    """Connection or protocol failure below HTTP status level."""

    def __init__(self, url: str, message: str) -> None:
        super().__init__(f"Request to {url} failed: {message}")
        self.url = url
        self.message = message


class ExtractionError(HttpCo2Exception):
    """No numeric value could be pulled out of a response."""


class AmbiguousResponseError(ExtractionError):
    """Response is a JSON object but no path was configured."""

    def __init__(self) -> None:
        super().__init__("Response is JSON but no json_path is configured")


class UnparseableResponseError(ExtractionError):
    """Response body has a shape no value can be read from."""

    def __init__(self, detail: str, status: int | None = None) -> None:
        msg = f"Unable to parse value from response: {detail}"
        if status is not None:
            msg = f"{msg} (HTTP {status})"
        super().__init__(msg)
        self.detail = detail
        self.status = status


class PathNotFoundError(ExtractionError):
    """A key of the configured path is missing from the response."""

    def __init__(self, path: str, missing_key: str) -> None:
        super().__init__(f'Unable to extract value at path "{path}": key "{missing_key}" not found')
        self.path = path
        self.missing_key = missing_key


class NonNumericValueError(ExtractionError):
    """The value found is not a number."""

    def __init__(self, path: str | None, actual_type: str) -> None:
        where = f'at path "{path}"' if path else "in response"
        super().__init__(f"Value {where} is not a number, received: {actual_type}")
        self.path = path
        self.actual_type = actual_type
