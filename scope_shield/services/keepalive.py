"""
Keep-alive pinger

Periodically GETs the service's own public URL so the hosting platform does
not idle it. Runs as an independent background task; failures are logged and
never reach the request path.
"""

import asyncio
from typing import Optional

import httpx
from loguru import logger


class KeepAlivePinger:
    """Background self-ping loop"""

    def __init__(
        self,
        url: str,
        interval_seconds: float = 180.0,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.url = url
        self.interval_seconds = interval_seconds
        self._client = client or httpx.AsyncClient(timeout=30.0)

    async def ping(self) -> bool:
        """Issue one ping; returns False (after logging) on failure"""
        try:
            response = await self._client.get(self.url)
            response.raise_for_status()
        except httpx.HTTPError as e:
            logger.error(f"Self-ping failed: {e}")
            return False
        logger.debug(f"Self-ping ok ({response.status_code})")
        return True

    async def run(self) -> None:
        """Ping forever on a fixed interval until cancelled"""
        while True:
            try:
                await asyncio.sleep(self.interval_seconds)
                await self.ping()
            except asyncio.CancelledError:
                logger.info("Keep-alive task cancelled")
                break
            except Exception as e:
                logger.error(f"Self-ping failed: {e}")

    async def close(self) -> None:
        await self._client.aclose()
