import io
import sys
from pathlib import Path

import pytest

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from engine.frame_buffer import FrameBuffer
from generators.base import BaseGenerator
from models.cell import Cell
from models.color import Color
from models.config import ShowConfig


class FakeClock:
    """
    Manually advanced clock.

    sleep() moves time forward instead of waiting, so the scheduler
    sees exactly the frame budget pass between ticks.
    """

    def __init__(self, start: float = 0.0, step_per_call: float = 0.0):
        self.now = start
        self.step_per_call = step_per_call
        self.sleeps = []

    def __call__(self) -> float:
        value = self.now
        self.now += self.step_per_call
        return value

    async def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds


class RecordingGenerator(BaseGenerator):
    """Fills the frame with one glyph and counts render calls."""
    AUTHOR = "Tests"

    def __init__(self, name: str, glyph: str):
        super().__init__()
        self.NAME = name
        self.glyph = glyph
        self.renders = 0

    def render(self, buffer: FrameBuffer) -> None:
        self.renders += 1
        buffer.fill(Cell(glyph=self.glyph, color=Color.white()))


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def sink():
    return io.StringIO()


@pytest.fixture
def created():
    """Generators built by the playlist factories, in creation order."""
    return []


@pytest.fixture
def ab_playlist(created):
    def make(name, glyph):
        def factory():
            generator = RecordingGenerator(name, glyph)
            created.append(generator)
            return generator
        return factory

    return [make("A", "a"), make("B", "b")]


@pytest.fixture
def short_config():
    """Runs shorter than one frame: every tick after the first switches generator."""
    return ShowConfig(run_duration_s=0.01, fade_duration_s=0.0, frame_interval_ms=16.0)
