"""
Generator registry

Maps GeneratorID to zero-argument factories. A playlist is an ordered
list of such factories; the scheduler calls one at the start of every
run so each run gets a fresh generator instance.
"""

from typing import Callable, Dict, Iterable, List
from generators.base import BaseGenerator
from generators.drops import Drops
from generators.game_of_life import GameOfLife
from generators.hexagons import Hexagons
from generators.hills import Hills
from generators.mandelbrot import Mandelbrot
from generators.matrix import Matrix
from generators.moving_blocks import MovingBlocks
from generators.qr_code import QrCode
from generators.rainbow import Rainbow
from generators.random_walkers import RandomWalkers
from generators.triangles import Triangles
from models.config import DEFAULT_PLAYLIST
from models.enums import GeneratorID, LogCategory
from utils.logger import get_category_logger

log = get_category_logger(LogCategory.GENERATOR)

GeneratorFactory = Callable[[], BaseGenerator]


def _build_generator_registry() -> Dict[GeneratorID, GeneratorFactory]:
    """Build generator registry from GeneratorID enum"""
    class_map = {
        GeneratorID.HEXAGONS: Hexagons,
        GeneratorID.DROPS: Drops,
        GeneratorID.HILLS: Hills,
        GeneratorID.MOVING_BLOCKS: MovingBlocks,
        GeneratorID.RAINBOW: Rainbow,
        GeneratorID.GAME_OF_LIFE: GameOfLife,
        GeneratorID.QR_CODE: QrCode,
        GeneratorID.MATRIX: Matrix,
        GeneratorID.MANDELBROT: Mandelbrot,
        GeneratorID.TRIANGLES: Triangles,
        GeneratorID.RANDOM_WALKERS: RandomWalkers,
    }

    return {gen_id: gen_class for gen_id, gen_class in class_map.items()}


GENERATORS: Dict[GeneratorID, GeneratorFactory] = _build_generator_registry()


def get_factory(gen_id: GeneratorID) -> GeneratorFactory:
    """Factory for a generator id (KeyError if not registered)"""
    return GENERATORS[gen_id]


def create(gen_id: GeneratorID) -> BaseGenerator:
    """Build a new instance of a registered generator"""
    return get_factory(gen_id)()


def build_playlist(gen_ids: Iterable[GeneratorID]) -> List[GeneratorFactory]:
    """
    Resolve generator ids into an ordered list of factories

    Raises:
        KeyError: an id is not registered
        ValueError: the playlist would be empty
    """
    playlist = [get_factory(gen_id) for gen_id in gen_ids]
    if not playlist:
        raise ValueError("Playlist must contain at least one generator")

    log.debug("Playlist built", entries=len(playlist))
    return playlist
