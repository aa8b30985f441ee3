"""Shared test doubles."""

from __future__ import annotations

from typing import Any, Optional, Union


class FakeResponse:
    """Stand-in for an aiohttp response used as an async context manager."""

    def __init__(self, status: int, payload: Union[str, bytes], charset: Optional[str] = None) -> None:
        self.status = status
        self.charset = charset
        self._payload = payload.encode() if isinstance(payload, str) else payload

    async def read(self) -> bytes:
        return self._payload

    async def __aenter__(self) -> "FakeResponse":
        return self

    async def __aexit__(self, *exc: Any) -> bool:
        return False
