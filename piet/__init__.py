"""
Piet image-program interpreter.

Typical use:

    from piet import compile_image, load_image, run_program
    program = compile_image(load_image('hello.png'), codel_size=1)
    run_program(program)
"""

from .classify import BLACK, WHITE, classify_image, classify_pixel
from .colors import Color, Hue, Lightness, Opcode, compare
from .engine import Halt, Machine, Registers, run_program
from .errors import (
    ImageLoadError,
    InvalidCharacterError,
    InvalidInputError,
    PietError,
    PietRuntimeError,
    PietZeroDivisionError,
)
from .geometry import Direction, Rotation
from .grid import Grid
from .loader import load_image
from .program import ColorBlock, Program, compile_image, segment

__version__ = '1.0.0'
