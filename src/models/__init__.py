"""
Models package - Data models for the terminal pattern show
"""

from .enums import GeneratorID, RunPhase, TransitionType, LogLevel, LogCategory
from .color import Color, HSVColor
from .cell import Cell
from .transition import TransitionConfig
from .config import ShowConfig, DEFAULT_PLAYLIST

__all__ = [
    'GeneratorID',
    'RunPhase',
    'TransitionType',
    'LogLevel',
    'LogCategory',
    'Color',
    'HSVColor',
    'Cell',
    'TransitionConfig',
    'ShowConfig',
    'DEFAULT_PLAYLIST',
]
