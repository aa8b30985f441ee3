"""HTTP client for sensor endpoints."""
from __future__ import annotations

import asyncio
import json
import logging
from typing import Any, Dict, Optional

import aiohttp
from yarl import URL

from .exceptions import FetchTimeoutError, TransportError
from .models import AuthConfig, EffectiveFieldConfig, RawResponse

_LOGGER = logging.getLogger(__name__)


def _decode_text(raw: bytes, charset: Optional[str]) -> str:
    """Decode the payload, replacing bytes that are invalid in its charset."""
    try:
        return raw.decode(charset or "utf-8", errors="replace")
    except LookupError:
        return raw.decode("utf-8", errors="replace")


def _decode_body(text: str) -> Any:
    """JSON value when the payload parses as JSON, else the raw text."""
    try:
        return json.loads(text)
    except ValueError:
        return text


class SensorHttpClient:
    def __init__(self, session: aiohttp.ClientSession) -> None:
        self._session = session

    @staticmethod
    def _url(raw: str) -> URL:
        base = raw.strip()
        if not base.startswith("http://") and not base.startswith("https://"):
            base = f"http://{base}"
        return URL(base)

    @staticmethod
    def _payload(effective: EffectiveFieldConfig) -> Dict[str, Any]:
        """Request body for POST: structured JSON if it parses, raw string otherwise."""
        if effective.http_method != "POST" or not effective.body:
            return {}
        try:
            return {"json": json.loads(effective.body)}
        except ValueError:
            return {"data": effective.body}

    async def fetch(self, effective: EffectiveFieldConfig, auth: Optional[AuthConfig] = None) -> RawResponse:
        """Issue one request and return its status and decoded body.

        A non-2xx status is returned, not raised; the caller decides what
        the body is worth.
        """
        url = self._url(effective.url)
        kwargs: Dict[str, Any] = {
            "headers": effective.headers,
            "timeout": aiohttp.ClientTimeout(total=effective.timeout / 1000),
            **self._payload(effective),
        }
        if auth is not None:
            kwargs["auth"] = aiohttp.BasicAuth(auth.username, auth.password)

        _LOGGER.debug("Fetching %s %s", effective.http_method, url)
        try:
            async with self._session.request(effective.http_method, url, **kwargs) as resp:
                text = _decode_text(await resp.read(), resp.charset)
                return RawResponse(status=resp.status, body=_decode_body(text))
        except asyncio.TimeoutError as err:
            raise FetchTimeoutError(effective.url, effective.timeout) from err
        except aiohttp.ClientError as err:
            raise TransportError(effective.url, str(err) or type(err).__name__) from err
