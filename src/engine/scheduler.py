"""
PlaylistScheduler - drives generators through time-boxed runs.

Architecture:
  - One generator instance per run, built from the current playlist factory
  - Each tick: fresh FrameBuffer at terminal size → generator.render()
    → fade-out near the end of the run → status overlay → sink
  - Fixed cadence: sleep the rest of the frame budget, skip the sleep
    when the tick overran (no catch-up, falling behind is absorbed)
  - Cooperative stop: the stop event is polled at the top of every tick;
    the cursor is made visible again on every exit path

Run phases:
  STARTING → RUNNING → FADING_OUT → FINISHED → (next entry) STARTING
"""

from __future__ import annotations
import asyncio
import sys
import time
from collections import deque
from typing import Awaitable, Callable, Deque, Dict, List, Optional, TextIO, Tuple

from engine.frame_buffer import FrameBuffer, CURSOR_SHOW
from engine.terminal import terminal_size
from generators.base import BaseGenerator
from generators.registry import GeneratorFactory
from generators.text_overlay import TextOverlay
from models.config import ShowConfig
from models.enums import LogCategory, RunPhase
from services.transition_service import TransitionService
from utils.logger import get_logger

log = get_logger().for_category(LogCategory.RENDER)

SizeSource = Callable[[], Tuple[int, int]]
Clock = Callable[[], float]
Sleep = Callable[[float], Awaitable[None]]


class PlaylistScheduler:
    """
    Playlist loop.

    Manages:
    - Playlist position and the active generator instance
    - Per-run phase (RunPhase) and timing
    - Fade-out transition and status overlay
    - Frame output and cadence
    - Performance metrics (ticks, overruns, measured FPS)

    Every external collaborator is injectable (size source, sink, clock,
    sleep) so the loop can be driven deterministically.
    """

    def __init__(
        self,
        playlist: List[GeneratorFactory],
        config: ShowConfig,
        stop_event: asyncio.Event,
        size_source: SizeSource = terminal_size,
        sink: Optional[TextIO] = None,
        clock: Clock = time.perf_counter,
        sleep: Sleep = asyncio.sleep,
    ):
        """
        Initialize the scheduler.

        Args:
            playlist: Ordered, non-empty list of zero-argument generator factories
            config: Run/fade durations, frame budget, overlay diagnostics
            stop_event: Set by the signal handler to request a stop
            size_source: Returns (width, height) in cells; failures propagate
            sink: Output stream (default: sys.stdout)
            clock: Monotonic time source in seconds
            sleep: Coroutine used for the end-of-tick sleep
        """
        if not playlist:
            raise ValueError("Playlist must contain at least one generator")

        self.playlist = list(playlist)
        self.config = config
        self.stop_event = stop_event
        self.size_source = size_source
        self.sink = sink or sys.stdout
        self.clock = clock
        self.sleep = sleep

        self.transition = TransitionService(config.transition())

        # Run state
        self.index = 0
        self.generator: Optional[BaseGenerator] = None
        self.phase = RunPhase.FINISHED
        self.run_started = 0.0
        self.run_ticks = 0

        # Metrics
        self.ticks = 0
        self.runs_started = 0
        self.overruns = 0
        self.frame_times: Deque[float] = deque(maxlen=300)

        log.info(
            "PlaylistScheduler initialized",
            entries=len(self.playlist),
            run=f"{config.run_duration_s}s",
            fade=f"{config.fade_duration_s}s",
            budget=f"{config.frame_interval_ms}ms",
        )

    # === Run lifecycle ===

    def _start_run(self, now: float) -> None:
        self.phase = RunPhase.STARTING
        self.generator = self.playlist[self.index]()
        self.run_started = now
        self.run_ticks = 0
        self.runs_started += 1

        log.info(
            "Run started",
            generator=self.generator.name(),
            author=self.generator.author(),
            index=self.index,
        )

    def _finish_run(self) -> None:
        self.phase = RunPhase.FINISHED

        if self.generator is not None:
            log.info(
                "Run finished",
                generator=self.generator.name(),
                ticks=self.run_ticks,
                fps=f"{self.get_actual_fps():.1f}",
            )

        self.generator = None
        self.index = (self.index + 1) % len(self.playlist)

    def _run_expired(self, now: float) -> bool:
        # Inclusive end: a run keeps ticking while now <= start + duration
        return now > self.run_started + self.config.run_duration_s

    # === Overlay ===

    def _status_text(self, width: int, height: int, render_time_s: float, remaining_s: float) -> str:
        lines = [
            f"Resolution: {width}, {height}",
            f"Generator: {self.generator.name()}",
            f"By: {self.generator.author()}",
        ]

        if self.config.debug_overlay:
            lines.append(
                f"Render Time: {int(render_time_s * 1_000_000)}/{int(self.config.frame_interval_ms * 1000)}µs"
            )
            lines.append(f"Time remaining: {int(max(0.0, remaining_s))}s")

        return "\n".join(lines)

    # === Tick ===

    async def tick(self) -> FrameBuffer:
        """
        Produce and emit one frame.

        Returns:
            The emitted buffer (already serialized to the sink)
        """
        tick_start = self.clock()

        if self.generator is None:
            self._start_run(tick_start)
        elif self._run_expired(tick_start):
            self._finish_run()
            self._start_run(tick_start)

        remaining = self.run_started + self.config.run_duration_s - tick_start

        width, height = self.size_source()
        buffer = FrameBuffer(width, height)

        self.generator.render(buffer)
        render_time = self.clock() - tick_start

        if self.transition.in_fade_window(remaining):
            if self.phase != RunPhase.FADING_OUT:
                log.debug("Fading out", generator=self.generator.name(), remaining=f"{remaining:.2f}s")
            self.phase = RunPhase.FADING_OUT
            self.transition.apply(buffer, remaining)
        else:
            self.phase = RunPhase.RUNNING

        TextOverlay(self._status_text(width, height, render_time, remaining)).render(buffer)

        buffer.render(self.sink)

        self.ticks += 1
        self.run_ticks += 1
        self.frame_times.append(tick_start)

        processing = self.clock() - tick_start
        sleep_time = self.config.frame_interval_s - processing
        if sleep_time > 0:
            await self.sleep(sleep_time)
        else:
            # Overruns are not caught up; the playlist drifts instead
            self.overruns += 1
            log.debug("Tick over budget", took=f"{processing * 1000:.2f}ms")

        return buffer

    # === Main loop ===

    async def run(self, max_ticks: Optional[int] = None) -> None:
        """
        Loop over the playlist until the stop event is set.

        Args:
            max_ticks: Stop after this many ticks (None = run forever)
        """
        log.info("Playlist loop started")

        try:
            while not self.stop_event.is_set():
                if max_ticks is not None and self.ticks >= max_ticks:
                    break
                await self.tick()
        finally:
            self.sink.write(CURSOR_SHOW)
            self.sink.flush()
            log.info("Playlist loop stopped", ticks=self.ticks, runs=self.runs_started, overruns=self.overruns)

    # === Metrics ===

    def get_actual_fps(self) -> float:
        """Measured FPS over recent ticks."""
        if len(self.frame_times) < 2:
            return 0.0
        duration = self.frame_times[-1] - self.frame_times[0]
        if duration <= 0:
            return 0.0
        return (len(self.frame_times) - 1) / duration

    def get_metrics(self) -> Dict:
        return {
            "ticks": self.ticks,
            "runs_started": self.runs_started,
            "overruns": self.overruns,
            "fps_target": 1000.0 / self.config.frame_interval_ms,
            "fps_actual": self.get_actual_fps(),
            "generator": self.generator.name() if self.generator else None,
            "phase": self.phase.name,
        }
