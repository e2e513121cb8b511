"""
main.py - Application entry point for termshow
----------------------------------------------

Responsible for:
- loading configuration and configuring the logger
- building the playlist and the scheduler
- starting the async playlist loop
- graceful shutdown on Ctrl+C / SIGTERM or fatal errors
"""

import sys

# Set UTF-8 encoding for output BEFORE rendering (glyphs and µs in the overlay)
if hasattr(sys.stdout, 'reconfigure') and sys.stdout.encoding != 'UTF-8':
    sys.stdout.reconfigure(encoding='utf-8')  # type: ignore
if hasattr(sys.stderr, 'reconfigure') and sys.stderr.encoding != 'UTF-8':
    sys.stderr.reconfigure(encoding='utf-8')  # type: ignore

import asyncio

from engine.scheduler import PlaylistScheduler
from generators.registry import build_playlist
from lifecycle import ShutdownCoordinator
from managers import ConfigManager
from models.enums import LogCategory
from utils.logger import get_logger, configure_logger

log = get_logger().for_category(LogCategory.SYSTEM)


async def main() -> None:
    """Main async entry point (configuration, wiring and loop startup)."""

    log.info("Loading configuration...")
    config_manager = ConfigManager()
    config = config_manager.load()

    configure_logger(config.log_level)

    playlist = build_playlist(config.playlist)
    log.info(
        "Playlist ready",
        generators=", ".join(gen_id.name for gen_id in config.playlist),
    )

    coordinator = ShutdownCoordinator()
    loop = asyncio.get_running_loop()
    coordinator.setup_signal_handlers(loop)

    scheduler = PlaylistScheduler(playlist, config, coordinator.stop_event)

    try:
        await scheduler.run()
    finally:
        coordinator.remove_signal_handlers(loop)
        log.info("Shutdown complete", reason=coordinator.reason or "loop exited", **scheduler.get_metrics())


def run() -> None:
    """Console entry point"""
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        log.info("Keyboard interrupt received")
    except (OSError, ValueError) as e:
        log.error(f"Fatal error: {e}", error_type=type(e).__name__)
        sys.exit(1)


if __name__ == "__main__":
    run()
