"""
Terminal size source

Queried by the scheduler once per tick. There is no fallback size:
if the output is not a terminal, os.get_terminal_size raises OSError
and the show stops.
"""

import os
import sys
from typing import Optional, TextIO, Tuple


def terminal_size(stream: Optional[TextIO] = None) -> Tuple[int, int]:
    """
    Current size of the terminal behind the stream

    Args:
        stream: Stream attached to the terminal (default: sys.stdout)

    Returns:
        (columns, lines)

    Raises:
        OSError: the stream is not connected to a terminal
    """
    fd = (stream or sys.stdout).fileno()
    size = os.get_terminal_size(fd)
    return size.columns, size.lines
