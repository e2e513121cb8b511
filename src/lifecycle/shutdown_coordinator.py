"""
Shutdown coordinator

Owns the stop flag shared between OS signal handlers and the playlist
loop. Signal handlers only set the flag; the loop notices it at the top
of its next tick and unwinds through its own cleanup.
"""

import asyncio
import signal
from typing import Dict, Optional
from models.enums import LogCategory
from utils.logger import get_logger

log = get_logger().for_category(LogCategory.SYSTEM)


class ShutdownCoordinator:
    """
    Cooperative stop request for the render loop.

    Example:
        coordinator = ShutdownCoordinator()
        coordinator.setup_signal_handlers(asyncio.get_running_loop())

        scheduler = PlaylistScheduler(playlist, config, coordinator.stop_event)
        await scheduler.run()
    """

    def __init__(self):
        self._stop_event = asyncio.Event()
        self._shutdown_trigger: Dict[str, Optional[str]] = {"reason": None}

    @property
    def stop_event(self) -> asyncio.Event:
        return self._stop_event

    @property
    def reason(self) -> Optional[str]:
        return self._shutdown_trigger["reason"]

    def is_stopping(self) -> bool:
        return self._stop_event.is_set()

    def request_stop(self, reason: str = "REQUESTED") -> None:
        """
        Ask the loop to stop. The first reason recorded wins.
        """
        if self._shutdown_trigger["reason"] is None:
            self._shutdown_trigger["reason"] = reason
        log.info(f"Stop requested → {reason}")
        self._stop_event.set()

    def setup_signal_handlers(self, loop: asyncio.AbstractEventLoop) -> None:
        """
        Install OS signal handlers for graceful shutdown.

        Registers SIGINT (Ctrl+C) and SIGTERM.

        Args:
            loop: Running asyncio event loop
        """
        def signal_handler(sig: signal.Signals) -> None:
            self.request_stop(sig.name)

        for sig in (signal.SIGINT, signal.SIGTERM):
            loop.add_signal_handler(sig, lambda s=sig: signal_handler(s))

        log.info("Signal handlers installed (SIGINT, SIGTERM)")

    def remove_signal_handlers(self, loop: asyncio.AbstractEventLoop) -> None:
        for sig in (signal.SIGINT, signal.SIGTERM):
            loop.remove_signal_handler(sig)

    async def wait_for_shutdown(self) -> Optional[str]:
        """Block until a stop is requested; returns the reason"""
        await self._stop_event.wait()
        return self.reason
