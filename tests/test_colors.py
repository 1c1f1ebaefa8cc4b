"""Tests for the color model and opcode table."""

import itertools

import pytest

from piet.colors import (
    OPCODE_TABLE, PALETTE, Arity, Color, Hue, Lightness, Opcode, compare, deltas,
)

ALL_COLORS = [Color(h, l) for h, l in itertools.product(Hue, Lightness)]


def test_palette_has_eighteen_distinct_colors():
    assert len(PALETTE) == 18
    assert set(PALETTE.values()) == set(ALL_COLORS)


@pytest.mark.parametrize('color', ALL_COLORS, ids=str)
def test_same_color_is_nop(color):
    assert compare(color, color) is Opcode.NOP


def test_opcode_depends_only_on_hue_delta_for_fixed_lightness():
    for lightness in Lightness:
        for shift in range(6):
            seen = {
                compare(Color(Hue(h), lightness), Color(Hue((h + shift) % 6), lightness))
                for h in range(6)
            }
            assert seen == {OPCODE_TABLE[shift][0]}


def test_deltas_wrap_negative_differences():
    assert deltas(Color(Hue.MAGENTA, Lightness.DARK), Color(Hue.RED, Lightness.LIGHT)) == (1, 1)
    assert deltas(Color(Hue.CYAN, Lightness.NORMAL), Color(Hue.RED, Lightness.NORMAL)) == (3, 0)


@pytest.mark.parametrize('old, new, expected', [
    (Color(Hue.RED, Lightness.LIGHT), Color(Hue.RED, Lightness.NORMAL), Opcode.PUSH),
    (Color(Hue.RED, Lightness.LIGHT), Color(Hue.RED, Lightness.DARK), Opcode.POP),
    (Color(Hue.RED, Lightness.NORMAL), Color(Hue.YELLOW, Lightness.NORMAL), Opcode.ADD),
    (Color(Hue.RED, Lightness.NORMAL), Color(Hue.GREEN, Lightness.LIGHT), Opcode.NOT),
    (Color(Hue.RED, Lightness.NORMAL), Color(Hue.GREEN, Lightness.DARK), Opcode.MOD),
    (Color(Hue.RED, Lightness.NORMAL), Color(Hue.BLUE, Lightness.DARK), Opcode.ROLL),
    (Color(Hue.RED, Lightness.NORMAL), Color(Hue.CYAN, Lightness.NORMAL), Opcode.GREATER),
    (Color(Hue.RED, Lightness.NORMAL), Color(Hue.BLUE, Lightness.LIGHT), Opcode.IN_NUMBER),
    (Color(Hue.RED, Lightness.NORMAL), Color(Hue.MAGENTA, Lightness.DARK), Opcode.OUT_NUMBER),
    (Color(Hue.BLUE, Lightness.DARK), Color(Hue.RED, Lightness.DARK), Opcode.DIVIDE),
    (Color(Hue.YELLOW, Lightness.DARK), Color(Hue.RED, Lightness.NORMAL), Opcode.OUT_CHAR),
])
def test_compare(old, new, expected):
    assert compare(old, new) is expected


def test_every_opcode_appears_once_in_table():
    flat = [op for row in OPCODE_TABLE for op in row]
    assert sorted(flat, key=lambda op: op.mnemonic) == sorted(Opcode, key=lambda op: op.mnemonic)


def test_arity():
    assert Opcode.ROLL.arity is Arity.BINARY
    assert Opcode.DUPLICATE.arity is Arity.UNARY
    assert Opcode.IN_CHAR.arity is Arity.INPUT
    assert Opcode.PUSH.arity is Arity.NONE
