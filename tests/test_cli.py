"""Tests for the command-line entry point."""

import pytest

import piet_interpreter


def test_runs_program(png_file, capsys):
    path = png_file([
        ['lR', 'lR', 'lR', 'lR', 'lR', 'R', 'dM'],
        ['K', 'K', 'K', 'K', 'K', 'dM', 'dM'],
    ])
    assert piet_interpreter.main([path]) == 0
    assert capsys.readouterr().out == '5 '


def test_codel_size(png_file, capsys):
    path = png_file([
        ['lR', 'lR', 'lR', 'lR', 'lR', 'R', 'dM'],
        ['K', 'K', 'K', 'K', 'K', 'dM', 'dM'],
    ], codel_size=3)
    assert piet_interpreter.main(['-c', '3', path]) == 0
    assert capsys.readouterr().out == '5 '


def test_dump(png_file, capsys):
    path = png_file([['R', 'W', 'dG']])
    assert piet_interpreter.main(['--dump', path]) == 0
    out = capsys.readouterr().out
    assert '3x1 codels, 2 color blocks' in out
    assert 'dark green' in out


def test_missing_image(capsys):
    assert piet_interpreter.main(['/nonexistent.png']) == 1
    assert 'Error:' in capsys.readouterr().err


def test_runtime_error_exit_code(png_file, capsys):
    # push 1, push 1, not -> [1, 0], divide -> division by zero
    path = png_file([['R', 'dR', 'lR', 'dG', 'dB']])
    assert piet_interpreter.main([path]) == 1
    assert 'Division by zero' in capsys.readouterr().err


def test_bad_codel_size(png_file):
    with pytest.raises(SystemExit):
        piet_interpreter.main(['-c', '0', png_file([['R']])])
