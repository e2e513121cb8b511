"""
Lifecycle subsystem
-------------------

Exports the public API for graceful shutdown:
    from lifecycle import ShutdownCoordinator
"""

from .shutdown_coordinator import ShutdownCoordinator

__all__ = [
    "ShutdownCoordinator",
]
