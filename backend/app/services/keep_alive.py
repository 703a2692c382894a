"""
Folio Backend - Keep-Alive Service
===================================

What:  Periodically calls this server's own /api/health endpoint over the network.
Why:   Free-tier hosts suspend idle instances; an outside request keeps the
       instance warm.
How:   An asyncio task owned by the application lifespan: started after
       startup, cancelled at shutdown. It never touches request state.

Timeline (defaults):
    t=0      app starts, task created
    t=5s     first ping
    t+20min  every subsequent ping

With SERVER_URL unset the task is not started at all.
"""

import asyncio
import logging
from datetime import datetime, timezone
from typing import Optional

import httpx

from app.config import settings

logger = logging.getLogger(__name__)


class KeepAliveService:
    """
    Args:
        base_url:      Public base URL of this server (None disables the task)
        interval:      Seconds between pings
        initial_delay: Seconds to wait before the first ping
        timeout:       HTTP timeout per ping
        transport:     httpx transport override (tests use httpx.MockTransport)
    """

    def __init__(
        self,
        base_url: Optional[str],
        interval: float,
        initial_delay: float = 5,
        timeout: float = 10,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/") if base_url else None
        self.interval = interval
        self.initial_delay = initial_delay
        self.timeout = timeout
        self.transport = transport
        self._task: Optional[asyncio.Task] = None

    @property
    def health_url(self) -> Optional[str]:
        return f"{self.base_url}/api/health" if self.base_url else None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        """Create the background task on the running event loop (idempotent)."""
        if not self.base_url:
            logger.info("SERVER_URL not set; keep-alive disabled")
            return
        if self.running:
            return
        self._task = asyncio.create_task(self._run(), name="keep-alive")
        logger.info(
            "Keep-alive configured: %s every %d minutes",
            self.health_url,
            self.interval // 60,
        )

    async def stop(self) -> None:
        """Cancel the background task and wait for it to finish."""
        if self._task is None:
            return
        self._task.cancel()
        try:
            await self._task
        except asyncio.CancelledError:
            pass
        self._task = None
        logger.info("Keep-alive stopped")

    async def ping(self) -> bool:
        """
        Call the health endpoint once.

        Returns True on a 2xx response. Errors are logged and reported as False.
        """
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.get(self.health_url)
        except httpx.HTTPError as e:
            logger.warning("Keep-alive ping error: %s", str(e))
            return False

        if response.is_success:
            logger.info("Keep-alive ping succeeded at %s", datetime.now(timezone.utc).isoformat())
            return True
        logger.warning("Keep-alive ping failed with status: %d", response.status_code)
        return False

    async def _run(self) -> None:
        await asyncio.sleep(self.initial_delay)
        logger.info("Starting keep-alive pings")
        while True:
            await self.ping()
            await asyncio.sleep(self.interval)


keep_alive_service = KeepAliveService(
    base_url=settings.server_url,
    interval=settings.keep_alive_interval,
    initial_delay=settings.keep_alive_initial_delay,
)
