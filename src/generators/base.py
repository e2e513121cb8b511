"""
Base Generator Class

All generators inherit from BaseGenerator and implement render().
"""

from abc import ABC, abstractmethod
from typing import Optional, Tuple
from engine.frame_buffer import FrameBuffer


class BaseGenerator(ABC):
    """
    Base class for all visual generators

    Generators are stateful pattern producers driven by the scheduler:
    one instance per playlist run, render() called once per tick.

    IMPORTANT:
    - render() gets a fresh buffer every tick and the size can change
      between ticks. Size-dependent state must be rebuilt (see resized()).
    - render() must never raise and must return promptly (O(buffer size)).
    - Do not keep a reference to the buffer after render() returns.

    Subclasses set NAME and AUTHOR and implement render(buffer).
    """
    NAME: str = "Unnamed"
    AUTHOR: str = "Unknown"

    def __init__(self):
        self._last_size: Optional[Tuple[int, int]] = None

    def name(self) -> str:
        return self.NAME

    def author(self) -> str:
        return self.AUTHOR

    @abstractmethod
    def render(self, buffer: FrameBuffer) -> None:
        """Write the next step into the buffer."""
        raise NotImplementedError

    # ------------------------------------------------------------
    # Size tracking helper
    # ------------------------------------------------------------

    def resized(self, buffer: FrameBuffer) -> bool:
        """
        Record the buffer size and report whether it changed.

        Returns True on the first call as well, so generators can use it
        as their "initialize or reinitialize" trigger.
        """
        size = (buffer.width, buffer.height)
        if size == self._last_size:
            return False
        self._last_size = size
        return True

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name()!r})"
