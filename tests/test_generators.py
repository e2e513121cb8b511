"""
Tests for the generator registry, shipped generators and the text overlay.
"""

import math
import random

import pytest

from engine.frame_buffer import FrameBuffer
from engine.rasterizer import value_to_glyph
from generators import GENERATORS, DEFAULT_PLAYLIST, BaseGenerator, TextOverlay, build_playlist, create
from generators.drops import Drops
from generators.game_of_life import GameOfLife
from generators.hills import Hills, nearest_wrapped
from generators.mandelbrot import BANDS, PALETTE, Mandelbrot
from generators.pixels import Pixels
from generators.qr_code import PROJECT_URL, QrCode, qr_bitmap
from models.cell import Cell
from models.color import Color, HSVColor
from models.enums import GeneratorID


def row_text(buffer, y):
    return "".join(buffer.get(x, y).glyph for x in range(buffer.width))


class TestRegistry:

    def test_every_id_registered(self):
        assert set(GENERATORS) == set(GeneratorID)

    def test_create_returns_fresh_instances(self):
        first = create(GeneratorID.RAINBOW)
        second = create(GeneratorID.RAINBOW)
        assert isinstance(first, BaseGenerator)
        assert first is not second

    def test_build_playlist_keeps_order(self):
        playlist = build_playlist([GeneratorID.MATRIX, GeneratorID.HILLS, GeneratorID.MATRIX])
        assert [factory().name() for factory in playlist] == ["The Matrix", "Hills", "The Matrix"]

    def test_build_playlist_rejects_empty(self):
        with pytest.raises(ValueError):
            build_playlist([])

    def test_default_playlist(self):
        playlist = build_playlist(DEFAULT_PLAYLIST)
        assert len(playlist) == len(DEFAULT_PLAYLIST)

    @pytest.mark.parametrize("gen_id", list(GeneratorID))
    def test_name_and_author(self, gen_id):
        generator = create(gen_id)
        assert generator.name()
        assert generator.author()


class TestGeneratorsRender:

    @pytest.mark.parametrize("gen_id", list(GeneratorID))
    def test_survives_resizes(self, gen_id):
        generator = create(gen_id)
        for width, height in [(80, 24), (1, 1), (3, 2), (120, 40), (80, 24)]:
            for _ in range(3):
                generator.render(FrameBuffer(width, height))

    @pytest.mark.parametrize("gen_id", list(GeneratorID))
    def test_writes_something(self, gen_id):
        generator = create(gen_id)
        buffer = FrameBuffer(60, 20)
        # Matrix columns start above the screen; give them time to fall in
        for _ in range(80):
            buffer = FrameBuffer(60, 20)
            generator.render(buffer)
            if any(cell != Cell.empty() for cell in buffer.cells):
                break

        assert any(cell != Cell.empty() for cell in buffer.cells)

    def test_game_of_life_reseeds_on_resize(self):
        generator = GameOfLife()
        generator.render(FrameBuffer(10, 10))
        assert len(generator.cells) == 100

        generator.render(FrameBuffer(7, 3))
        assert len(generator.cells) == 21

    def test_resized_tracking(self):
        generator = create(GeneratorID.RAINBOW)
        assert generator.resized(FrameBuffer(4, 4))
        assert not generator.resized(FrameBuffer(4, 4))
        assert generator.resized(FrameBuffer(5, 4))


class TestHills:

    @pytest.mark.parametrize("distance,expected", [
        (3.0, 3.0),
        (8.0, -2.0),
        (-7.0, 3.0),
        (10.5, 0.5),
    ])
    def test_nearest_wrapped(self, distance, expected):
        assert nearest_wrapped(distance, 10.0) == pytest.approx(expected)

    def test_eval_matches_every_wrapped_copy(self):
        random.seed(7)
        generator = Hills()
        generator.render(FrameBuffer(23, 9))
        width, height = generator.width, generator.height

        def tallest_copies(x, y):
            total = 0.0
            for hill in generator.hills:
                total += max(
                    math.exp(-(
                        ((hill.x - (x + ox * width)) / hill.size) ** 2
                        + ((hill.y - (y + oy * height)) / hill.size) ** 2
                    )) * hill.height
                    for ox in (-1, 0, 1)
                    for oy in (-1, 0, 1)
                )
            return total

        for y in range(9):
            for x in range(23):
                assert generator.eval(x, y) == pytest.approx(tallest_copies(x, y), rel=1e-9, abs=1e-12)

    def test_render_uses_eval(self):
        random.seed(3)
        generator = Hills()
        buffer = FrameBuffer(12, 5)
        generator.render(buffer)

        for y in range(5):
            for x in range(12):
                assert buffer.get(x, y).glyph == value_to_glyph(generator.eval(x, y))

    def test_one_exp_per_hill_and_cell(self, monkeypatch):
        generator = Hills()
        generator.render(FrameBuffer(20, 10))

        calls = []
        real_exp = math.exp

        def counting_exp(value):
            calls.append(value)
            return real_exp(value)

        monkeypatch.setattr(math, "exp", counting_exp)
        generator.render(FrameBuffer(20, 10))

        assert len(calls) == 20 * 10 * Hills.HILL_COUNT


class TestDrops:

    def test_every_cell_is_a_drop(self):
        buffer = FrameBuffer(30, 10)
        Drops().render(buffer)
        assert {cell.glyph for cell in buffer.cells} == {"@"}

    def test_first_frame_is_dark(self):
        buffer = FrameBuffer(30, 10)
        Drops().render(buffer)
        assert all(cell.color == Color.black() for cell in buffer.cells)

    def test_rings_appear(self):
        generator = Drops()
        for _ in range(120):
            buffer = FrameBuffer(30, 10)
            generator.render(buffer)

        assert generator.step == 120
        assert any(cell.color != Color.black() for cell in buffer.cells)

    def test_height_inside_and_outside_front(self):
        generator = Drops()
        generator.centers = [(0.5, 0.5)]

        # time 10 s: the front has grown to 1.0
        expected = math.sin(0.1 * 35.0) * 0.3 / 0.9 / 2.0
        assert generator.height_at(0.5, 1.4, 10.0) == pytest.approx(expected)
        assert generator.height_at(2.0, 0.5, 10.0) == 0.0

    def test_center_is_finite(self):
        generator = Drops()
        generator.centers = [(0.5, 0.5)]
        assert math.isfinite(generator.height_at(0.5, 0.5, 3.0))

    def test_negative_height_flips_hue(self):
        generator = Drops()
        generator.centers = [(0.5, 0.5)]

        height = generator.height_at(0.5, 1.4, 10.0)
        assert height < 0.0

        # Base hue at 10 s is 0.5, flipped to 0.0
        expected = HSVColor(0.0, 1.0, min(abs(height), 1.0)).to_color()
        assert generator.cell_at(0.5, 1.4, 10.0).color == expected


class TestMandelbrot:

    def test_zooms_every_frame(self):
        generator = Mandelbrot()
        generator.render(FrameBuffer(20, 10))
        assert generator.width == pytest.approx(8.0 * 0.985)

        generator.render(FrameBuffer(20, 10))
        assert generator.width == pytest.approx(8.0 * 0.985 ** 2)

    def test_max_iterations_grow_with_zoom(self):
        generator = Mandelbrot()
        assert generator.max_iterations() == 50

        generator.width = 0.04
        assert generator.max_iterations() == 54

    def test_palette(self):
        assert len(PALETTE) == BANDS + 1
        assert PALETTE[0].glyph == value_to_glyph(0.0)
        assert PALETTE[-1].glyph == value_to_glyph(1.0)

    def test_outside_escapes_immediately(self):
        generator = Mandelbrot()
        counts = generator.escape_counts(20, 10)
        assert counts.shape == (10, 20)
        # Left edge sits at re = -4.6, already past the bound
        assert (counts[:, 0] == 0).all()

        buffer = FrameBuffer(20, 10)
        generator.render(buffer)
        assert buffer.get(0, 5) == PALETTE[0]
        assert buffer.get(0, 5).color == HSVColor(0.0, 1.0, 1.0).to_color()

    def test_inside_uses_last_palette_entry(self):
        generator = Mandelbrot()
        # Deep inside the main cardioid
        generator.CENTER = complex(-0.1, 0.0)
        generator.width = 1e-3

        buffer = FrameBuffer(4, 3)
        generator.render(buffer)

        assert all(cell == PALETTE[BANDS] for cell in buffer.cells)


class TestPixels:

    IMAGE = [
        [True, False],
        [False, True],
        [True, True],
    ]

    def test_half_blocks(self):
        buffer = FrameBuffer(4, 3)
        Pixels(self.IMAGE, (1, 0)).render(buffer)

        assert row_text(buffer, 0) == " ▀▄ "
        # Last bitmap row has no partner below it
        assert row_text(buffer, 1) == " ▀▀ "
        assert row_text(buffer, 2) == "    "
        assert buffer.get(0, 0) == Cell.empty()

    def test_color(self):
        buffer = FrameBuffer(4, 3)
        Pixels(self.IMAGE).render(buffer)
        assert buffer.get(0, 0).color == HSVColor(0.0, 0.0, 0.4).to_color()

    def test_pixel_outside_image(self):
        pixels = Pixels(self.IMAGE)
        assert pixels.pixel(1, 1)
        assert not pixels.pixel(2, 0)
        assert not pixels.pixel(0, 3)
        assert not pixels.pixel(-1, 0)

    def test_clipped_to_buffer(self):
        buffer = FrameBuffer(1, 1)
        Pixels(self.IMAGE, (0, 0)).render(buffer)
        assert buffer.get(0, 0).glyph == "▀"


class TestQrCode:

    def test_bitmap_is_square_with_light_border(self):
        image = qr_bitmap(PROJECT_URL)
        size = len(image)

        assert all(len(row) == size for row in image)
        for index in (0, 1, size - 2, size - 1):
            assert all(image[index])
            assert all(row[index] for row in image)

    def test_finder_pattern_corner_is_dark(self):
        image = qr_bitmap(PROJECT_URL)
        assert image[2][2] is False

    def test_metadata(self):
        generator = QrCode()
        assert generator.name() == "QR Code"
        assert generator.author() == "Imarok"
        assert generator.text == PROJECT_URL

    def test_drawn_at_top_left(self):
        buffer = FrameBuffer(60, 40)
        QrCode().render(buffer)

        # First two bitmap rows are the light quiet zone
        assert buffer.get(5, 6).glyph == "█"
        assert buffer.get(4, 6) == Cell.empty()
        assert buffer.get(5, 5) == Cell.empty()


class TestTextOverlay:

    def test_lines(self):
        buffer = FrameBuffer(20, 3)
        TextOverlay("Generator: Hills\nBy: Jo").render(buffer)

        assert row_text(buffer, 0) == "Generator: Hills    "
        assert row_text(buffer, 1) == "By: Jo              "
        assert buffer.get(0, 0).color.r == 1.0

    def test_wraps_long_lines(self):
        buffer = FrameBuffer(4, 3)
        TextOverlay("abcdefg").render(buffer)

        assert row_text(buffer, 0) == "abcd"
        assert row_text(buffer, 1) == "efg "

    def test_drops_text_below_last_row(self):
        buffer = FrameBuffer(3, 1)
        TextOverlay("abc\ndef").render(buffer)

        assert row_text(buffer, 0) == "abc"
