"""
Piet color model and the color-transition opcode table.

A color is a (hue, lightness) pair. Moving from one color block to the
next selects an opcode from the cyclic hue and lightness differences.
"""

from enum import Enum, IntEnum
from typing import Dict, NamedTuple, Tuple


class Hue(IntEnum):
    RED = 0
    YELLOW = 1
    GREEN = 2
    CYAN = 3
    BLUE = 4
    MAGENTA = 5


class Lightness(IntEnum):
    LIGHT = 0
    NORMAL = 1
    DARK = 2


class Color(NamedTuple):
    hue: Hue
    lightness: Lightness

    def __str__(self) -> str:
        return f"{self.lightness.name.lower()} {self.hue.name.lower()}"


class Arity(Enum):
    """How many stack values an opcode consumes before acting."""
    NONE = 0
    UNARY = 1
    BINARY = 2
    INPUT = 3


class Opcode(Enum):
    NOP = ('nop', Arity.NONE)
    PUSH = ('push', Arity.NONE)
    POP = ('pop', Arity.UNARY)
    ADD = ('add', Arity.BINARY)
    SUBTRACT = ('subtract', Arity.BINARY)
    MULTIPLY = ('multiply', Arity.BINARY)
    DIVIDE = ('divide', Arity.BINARY)
    MOD = ('mod', Arity.BINARY)
    NOT = ('not', Arity.UNARY)
    GREATER = ('greater', Arity.BINARY)
    POINTER = ('pointer', Arity.UNARY)
    SWITCH = ('switch', Arity.UNARY)
    DUPLICATE = ('duplicate', Arity.UNARY)
    ROLL = ('roll', Arity.BINARY)
    IN_NUMBER = ('in_number', Arity.INPUT)
    IN_CHAR = ('in_char', Arity.INPUT)
    OUT_NUMBER = ('out_number', Arity.UNARY)
    OUT_CHAR = ('out_char', Arity.UNARY)

    @property
    def mnemonic(self) -> str:
        return self.value[0]

    @property
    def arity(self) -> Arity:
        return self.value[1]


# Indexed [hue_delta][lightness_delta]
OPCODE_TABLE = (
    (Opcode.NOP, Opcode.PUSH, Opcode.POP),
    (Opcode.ADD, Opcode.SUBTRACT, Opcode.MULTIPLY),
    (Opcode.DIVIDE, Opcode.MOD, Opcode.NOT),
    (Opcode.GREATER, Opcode.POINTER, Opcode.SWITCH),
    (Opcode.DUPLICATE, Opcode.ROLL, Opcode.IN_NUMBER),
    (Opcode.IN_CHAR, Opcode.OUT_NUMBER, Opcode.OUT_CHAR),
)


def deltas(old: Color, new: Color) -> Tuple[int, int]:
    """Cyclic (hue, lightness) distance from old to new, both non-negative."""
    return (new.hue - old.hue) % len(Hue), (new.lightness - old.lightness) % len(Lightness)


def compare(old: Color, new: Color) -> Opcode:
    """Opcode selected by a transition from old to new."""
    hue_delta, lightness_delta = deltas(old, new)
    return OPCODE_TABLE[hue_delta][lightness_delta]


# Canonical palette (18 colors + black/white)
PALETTE: Dict[Tuple[int, int, int], Color] = {
    (0xFF, 0xC0, 0xC0): Color(Hue.RED, Lightness.LIGHT),
    (0xFF, 0x00, 0x00): Color(Hue.RED, Lightness.NORMAL),
    (0xC0, 0x00, 0x00): Color(Hue.RED, Lightness.DARK),
    (0xFF, 0xFF, 0xC0): Color(Hue.YELLOW, Lightness.LIGHT),
    (0xFF, 0xFF, 0x00): Color(Hue.YELLOW, Lightness.NORMAL),
    (0xC0, 0xC0, 0x00): Color(Hue.YELLOW, Lightness.DARK),
    (0xC0, 0xFF, 0xC0): Color(Hue.GREEN, Lightness.LIGHT),
    (0x00, 0xFF, 0x00): Color(Hue.GREEN, Lightness.NORMAL),
    (0x00, 0xC0, 0x00): Color(Hue.GREEN, Lightness.DARK),
    (0xC0, 0xFF, 0xFF): Color(Hue.CYAN, Lightness.LIGHT),
    (0x00, 0xFF, 0xFF): Color(Hue.CYAN, Lightness.NORMAL),
    (0x00, 0xC0, 0xC0): Color(Hue.CYAN, Lightness.DARK),
    (0xC0, 0xC0, 0xFF): Color(Hue.BLUE, Lightness.LIGHT),
    (0x00, 0x00, 0xFF): Color(Hue.BLUE, Lightness.NORMAL),
    (0x00, 0x00, 0xC0): Color(Hue.BLUE, Lightness.DARK),
    (0xFF, 0xC0, 0xFF): Color(Hue.MAGENTA, Lightness.LIGHT),
    (0xFF, 0x00, 0xFF): Color(Hue.MAGENTA, Lightness.NORMAL),
    (0xC0, 0x00, 0xC0): Color(Hue.MAGENTA, Lightness.DARK),
}

RGB_OF = {color: rgb for rgb, color in PALETTE.items()}

WHITE_RGB = (0xFF, 0xFF, 0xFF)
BLACK_RGB = (0x00, 0x00, 0x00)
