"""
Visual generators

- base: BaseGenerator contract (name, author, render)
- registry: GeneratorID -> factory, playlist building
- text_overlay: status overlay drawn on top of every frame
- hexagons, drops, hills, moving_blocks, rainbow, game_of_life, qr_code,
  matrix, mandelbrot, triangles, random_walkers: playlist generators
- pixels: half-block bitmap drawing used by qr_code
"""

from .base import BaseGenerator
from .text_overlay import TextOverlay
from .registry import GENERATORS, DEFAULT_PLAYLIST, build_playlist, create

__all__ = [
    "BaseGenerator",
    "TextOverlay",
    "GENERATORS",
    "DEFAULT_PLAYLIST",
    "build_playlist",
    "create",
]
