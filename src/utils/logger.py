"""
Structured category logger

One line per message plus an indented tree of key/value details:

    [14:23:45] RENDER     ✓ Run started
               ├─ generator: Rainbow
               └─ index: 4

Frames are written to stdout, so log lines go to stderr unless another
stream is configured. Colors are switched off automatically when the
target stream is not a terminal.
"""

import sys
from datetime import datetime
from typing import Optional, TextIO
from models.enums import LogLevel, LogCategory


# === ANSI COLORS ===
class Colors:
    """ANSI escape codes used by the log formatter"""
    RESET = '\033[0m'
    DIM = '\033[2m'

    RED = '\033[31m'
    GREEN = '\033[32m'
    YELLOW = '\033[33m'
    MAGENTA = '\033[35m'
    CYAN = '\033[36m'
    WHITE = '\033[37m'

    BRIGHT_YELLOW = '\033[93m'
    BRIGHT_MAGENTA = '\033[95m'
    BRIGHT_WHITE = '\033[97m'


CATEGORY_COLORS = {
    LogCategory.CONFIG: Colors.CYAN,
    LogCategory.SYSTEM: Colors.BRIGHT_WHITE,
    LogCategory.RENDER: Colors.MAGENTA,
    LogCategory.GENERATOR: Colors.BRIGHT_YELLOW,
    LogCategory.TRANSITION: Colors.BRIGHT_MAGENTA,
}

LEVEL_SYMBOLS = {
    LogLevel.DEBUG: '·',
    LogLevel.INFO: '✓',
    LogLevel.WARN: '⚠',
    LogLevel.ERROR: '✗',
}

LEVEL_COLORS = {
    LogLevel.DEBUG: Colors.DIM,
    LogLevel.INFO: Colors.GREEN,
    LogLevel.WARN: Colors.YELLOW,
    LogLevel.ERROR: Colors.RED,
}

LEVEL_PRIORITY = {
    LogLevel.DEBUG: 0,
    LogLevel.INFO: 1,
    LogLevel.WARN: 2,
    LogLevel.ERROR: 3,
}

DETAIL_INDENT = " " * 11


def _stream_is_tty(stream: TextIO) -> bool:
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


# === CORE LOGGER ===
class Logger:
    """
    Level-filtered logger writing category-tagged lines

    Args:
        min_level: Messages below this level are dropped
        use_colors: True/False forces ANSI colors, None decides per write
            (colors only when the stream is a terminal)
        stream: Output stream (None = sys.stderr, looked up at write time)
    """

    def __init__(
        self,
        min_level: LogLevel = LogLevel.INFO,
        use_colors: Optional[bool] = None,
        stream: Optional[TextIO] = None
    ):
        self.min_level = min_level
        self.use_colors = use_colors
        self.stream = stream

    # === Formatting ===

    def _target(self) -> TextIO:
        return self.stream or sys.stderr

    def _colors_enabled(self) -> bool:
        if self.use_colors is None:
            return _stream_is_tty(self._target())
        return self.use_colors

    def _paint(self, text: str, color: str, enabled: bool) -> str:
        return f"{color}{text}{Colors.RESET}" if enabled else text

    def _format_header(self, category: LogCategory, level: LogLevel, message: str, colors: bool) -> str:
        timestamp = datetime.now().strftime('[%H:%M:%S]')
        cat = self._paint(category.name.ljust(10), CATEGORY_COLORS.get(category, Colors.WHITE), colors)
        sym = self._paint(LEVEL_SYMBOLS.get(level, '·'), LEVEL_COLORS.get(level, Colors.WHITE), colors)
        msg = self._paint(message, LEVEL_COLORS.get(level, Colors.WHITE), colors)
        return f"{timestamp} {cat} {sym} {msg}"

    @staticmethod
    def _format_value(value) -> str:
        if isinstance(value, BaseException):
            return f"{type(value).__name__}: {value}"
        return str(value)

    # === Output ===

    def is_enabled(self, level: LogLevel) -> bool:
        return LEVEL_PRIORITY[level] >= LEVEL_PRIORITY[self.min_level]

    def log(
        self,
        category: LogCategory,
        message: str,
        level: LogLevel = LogLevel.INFO,
        details: Optional[list] = None,
        **kwargs
    ):
        """
        Log a message with optional details

        Args:
            category: Log category (RENDER, CONFIG, ...)
            message: Main message text
            level: Log level (DEBUG, INFO, WARN, ERROR)
            details: Free-form detail lines shown below the message
            **kwargs: Key/value details; exceptions are shown as "Type: message"
        """
        if not self.is_enabled(level):
            return

        colors = self._colors_enabled()
        lines = [self._format_header(category, level, message, colors)]

        items = list(details or [])
        items.extend(f"{key}: {self._format_value(value)}" for key, value in kwargs.items())

        for index, item in enumerate(items):
            tree = "└─" if index == len(items) - 1 else "├─"
            lines.append(f"{DETAIL_INDENT}{self._paint(tree, Colors.DIM, colors)} {item}")

        stream = self._target()
        stream.write("\n".join(lines) + "\n")
        stream.flush()

    def debug(self, category: LogCategory, message: str, **kw): self.log(category, message, LogLevel.DEBUG, **kw)
    def info(self, category: LogCategory, message: str, **kw): self.log(category, message, LogLevel.INFO, **kw)
    def warn(self, category: LogCategory, message: str, **kw): self.log(category, message, LogLevel.WARN, **kw)
    def error(self, category: LogCategory, message: str, **kw): self.log(category, message, LogLevel.ERROR, **kw)

    def for_category(self, category: LogCategory) -> 'BoundLogger':
        """Logger that tags every message with the given category"""
        return BoundLogger(self, category)


class BoundLogger:
    """Logger bound to one category (override per call with category=...)."""

    def __init__(self, base: Logger, category: LogCategory):
        self._base = base
        self._category = category

    def log(self, message: str, level: LogLevel = LogLevel.INFO, category: Optional[LogCategory] = None, **kw):
        self._base.log(category or self._category, message, level, **kw)

    def debug(self, message: str, **kw): self.log(message, LogLevel.DEBUG, **kw)
    def info(self, message: str, **kw): self.log(message, LogLevel.INFO, **kw)
    def warn(self, message: str, **kw): self.log(message, LogLevel.WARN, **kw)
    def error(self, message: str, **kw): self.log(message, LogLevel.ERROR, **kw)


# === Global instance ===
_logger = Logger()


def get_logger() -> Logger:
    return _logger


def get_category_logger(category: LogCategory) -> BoundLogger:
    return _logger.for_category(category)


def configure_logger(
    min_level: LogLevel = LogLevel.INFO,
    use_colors: Optional[bool] = None,
    stream: Optional[TextIO] = None
):
    """
    Reconfigure the logger singleton in place.

    Module-level bound loggers hold a reference to the singleton,
    so it must never be replaced.
    """
    _logger.min_level = min_level
    _logger.use_colors = use_colors
    _logger.stream = stream
