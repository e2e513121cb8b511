"""
Enums for the playlist renderer
"""

from enum import Enum, auto


class GeneratorID(Enum):
    """Generator identifiers (playlist entries in config.yaml)"""
    HEXAGONS = auto()
    DROPS = auto()
    HILLS = auto()
    MOVING_BLOCKS = auto()
    RAINBOW = auto()
    GAME_OF_LIFE = auto()
    QR_CODE = auto()
    MATRIX = auto()
    MANDELBROT = auto()
    TRIANGLES = auto()
    RANDOM_WALKERS = auto()


class RunPhase(Enum):
    """
    Lifecycle of one playlist run

    STARTING -> RUNNING -> FADING_OUT -> FINISHED, then the next
    playlist entry enters STARTING.
    """
    STARTING = auto()    # Generator instantiated, start time recorded
    RUNNING = auto()     # Regular ticks
    FADING_OUT = auto()  # Remaining time < fade duration
    FINISHED = auto()    # Run duration elapsed, instance discarded


class TransitionType(Enum):
    """Types of run-to-run transitions"""
    NONE = auto()   # Hard cut to the next generator
    FADE = auto()   # Dissolve to blank near the end of the run


class LogLevel(Enum):
    """Log severity levels"""
    DEBUG = auto()
    INFO = auto()
    WARN = auto()
    ERROR = auto()


class LogCategory(Enum):
    """Log categories for grouping related events"""
    CONFIG = auto()      # Configuration loading, validation
    SYSTEM = auto()      # Startup, shutdown, errors
    RENDER = auto()      # Scheduler ticks, frame output
    GENERATOR = auto()   # Generator lifecycle and registry
    TRANSITION = auto()  # Fade-out transitions
