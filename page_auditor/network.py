# page_auditor/network.py
"""
Network idle detection: "at most N requests in flight for a quiet period".

Playwright's own ``networkidle`` state waits for zero connections; pages with
analytics beacons or long polling may never reach it. The tracker counts
requests through page events instead and tolerates a few long-lived ones.
"""
from __future__ import annotations

import asyncio
from typing import Any

from page_auditor.errors import NavigationError
from page_auditor.logger import logger

__all__ = ["InflightTracker"]


class InflightTracker:
    """Counts in-flight requests of one page and waits for the network to settle."""

    def __init__(self, max_inflight: int = 2, quiet_period: float = 0.5) -> None:
        self.max_inflight = max_inflight
        self.quiet_period = quiet_period
        self._inflight = 0
        self._over = asyncio.Event()
        self._under = asyncio.Event()

    @property
    def inflight(self) -> int:
        return self._inflight

    def attach(self, page: Any) -> None:
        """Subscribe to request events; must happen before navigation starts."""
        page.on("request", self._on_request)
        page.on("requestfinished", self._on_request_done)
        page.on("requestfailed", self._on_request_done)

    def _on_request(self, _request: Any) -> None:
        self._inflight += 1
        if self._inflight > self.max_inflight:
            self._over.set()

    def _on_request_done(self, _request: Any) -> None:
        # requests started before attach() may still report completion
        self._inflight = max(0, self._inflight - 1)
        if self._inflight <= self.max_inflight:
            self._under.set()

    async def _settle(self) -> None:
        while True:
            if self._inflight > self.max_inflight:
                self._under.clear()
                await self._under.wait()
            self._over.clear()
            if self._inflight > self.max_inflight:
                continue
            try:
                await asyncio.wait_for(self._over.wait(), timeout=self.quiet_period)
            except asyncio.TimeoutError:
                return

    async def wait_for_idle(self, timeout: float) -> None:
        """Return once the network stayed quiet; raise NavigationError after *timeout* seconds."""
        try:
            await asyncio.wait_for(self._settle(), timeout=max(timeout, 0.0))
        except asyncio.TimeoutError as exc:
            raise NavigationError(
                f"Timeout {int(timeout * 1000)}ms exceeded waiting for network idle "
                f"({self._inflight} requests in flight)"
            ) from exc
        logger.debug("Network idle with %d requests in flight", self._inflight)
