"""Shared test fixtures: build programs from small color sketches."""

import io

import numpy as np
import pytest
from PIL import Image

from piet.colors import BLACK_RGB, RGB_OF, WHITE_RGB, Color, Hue, Lightness
from piet.engine import Machine
from piet.program import compile_image

HUE_CODES = {
    'R': Hue.RED, 'Y': Hue.YELLOW, 'G': Hue.GREEN,
    'C': Hue.CYAN, 'B': Hue.BLUE, 'M': Hue.MAGENTA,
}
LIGHTNESS_CODES = {'l': Lightness.LIGHT, 'd': Lightness.DARK}


def token_color(token: str) -> Color:
    """'R' -> normal red, 'lR' -> light red, 'dR' -> dark red."""
    if len(token) == 2:
        return Color(HUE_CODES[token[1]], LIGHTNESS_CODES[token[0]])
    return Color(HUE_CODES[token], Lightness.NORMAL)


def token_rgb(token: str):
    if token == 'W':
        return WHITE_RGB
    if token == 'K':
        return BLACK_RGB
    return RGB_OF[token_color(token)]


def sketch_image(rows, codel_size=1) -> Image.Image:
    """
    Render rows of tokens as an RGB image.

    Tokens: W white, K black, R/Y/G/C/B/M normal hues, l/d prefix for
    light/dark.
    """
    arr = np.array([[token_rgb(t) for t in row] for row in rows], dtype=np.uint8)
    if codel_size > 1:
        arr = arr.repeat(codel_size, axis=0).repeat(codel_size, axis=1)
    return Image.fromarray(arr)


def sketch_program(rows, codel_size=1):
    return compile_image(sketch_image(rows, codel_size), codel_size)


@pytest.fixture
def build():
    """Factory: rows of tokens -> Program."""
    return sketch_program


@pytest.fixture
def machine():
    """Factory: rows of tokens (+ stdin bytes) -> (Machine, output buffer)."""
    def make(rows, stdin=b''):
        out = io.StringIO()
        return Machine(sketch_program(rows), io.BytesIO(stdin), out), out
    return make


@pytest.fixture
def png_file(tmp_path):
    """Factory: rows of tokens -> path of a saved PNG."""
    def make(rows, codel_size=1, name='program.png'):
        path = tmp_path / name
        sketch_image(rows, codel_size).save(path)
        return str(path)
    return make
