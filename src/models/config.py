"""
Show configuration model

Plain values consumed by the scheduler. Loaded from config.yaml by
ConfigManager; the defaults here are used when no file can be read.
"""

from dataclasses import dataclass, field
from typing import List
from models.enums import GeneratorID, LogLevel, TransitionType
from models.transition import TransitionConfig, EASING_FUNCTIONS


# Playlist used when config.yaml does not list one
DEFAULT_PLAYLIST: List[GeneratorID] = [
    GeneratorID.HEXAGONS,
    GeneratorID.DROPS,
    GeneratorID.HILLS,
    GeneratorID.MOVING_BLOCKS,
    GeneratorID.RAINBOW,
    GeneratorID.GAME_OF_LIFE,
    GeneratorID.QR_CODE,
    GeneratorID.MATRIX,
    GeneratorID.MANDELBROT,
]


@dataclass
class ShowConfig:
    run_duration_s: float = 60.0      # Time each generator is shown
    fade_duration_s: float = 2.0      # Fade-out at the end of each run
    frame_interval_ms: float = 16.0   # Tick budget
    debug_overlay: bool = False       # Render time / time remaining in the overlay
    fade_easing: str = "linear"       # Key of EASING_FUNCTIONS
    log_level: LogLevel = LogLevel.INFO
    playlist: List[GeneratorID] = field(default_factory=lambda: list(DEFAULT_PLAYLIST))

    def __post_init__(self):
        if self.run_duration_s < 0:
            raise ValueError(f"run_duration_s must be >= 0, got {self.run_duration_s}")
        if self.fade_duration_s < 0:
            raise ValueError(f"fade_duration_s must be >= 0, got {self.fade_duration_s}")
        if self.frame_interval_ms <= 0:
            raise ValueError(f"frame_interval_ms must be > 0, got {self.frame_interval_ms}")
        if self.fade_easing not in EASING_FUNCTIONS:
            raise ValueError(
                f"Unknown fade_easing: {self.fade_easing}. Available: {list(EASING_FUNCTIONS.keys())}"
            )
        if not self.playlist:
            raise ValueError("Playlist must contain at least one generator")

    @property
    def frame_interval_s(self) -> float:
        return self.frame_interval_ms / 1000.0

    def transition(self) -> TransitionConfig:
        """End-of-run transition built from the fade settings"""
        return TransitionConfig(
            type=TransitionType.FADE if self.fade_duration_s > 0 else TransitionType.NONE,
            duration_s=self.fade_duration_s,
            ease_function=EASING_FUNCTIONS[self.fade_easing],
        )
