import argparse

import pytest

from colorluma.shared.sanitizer import INPUT_HANDLERS


@pytest.mark.parametrize("raw, expected", [
    ("#fff", "#fff"),
    ("'#AA5522'", "#AA5522"),
    ("rgb(1, 2, 3)", "rgb(1, 2, 3)"),
    ("255,0,0", [255, 0, 0]),
    ("[255, 0, 0, 1]", [255, 0, 0, 1]),
    ("127.5, 0, 0", [127.5, 0, 0]),
])
def test_handle_color(raw, expected):
    assert INPUT_HANDLERS["color"](raw) == expected


@pytest.mark.parametrize("raw, reason", [
    ("red", "unsupported format"),
    ("#ffffff66", "needs alpha blending"),
    ("255,0,0,0.5", "needs alpha blending"),
    ("300,0,0", "unsupported format"),
])
def test_handle_color_rejects(raw, reason):
    with pytest.raises(argparse.ArgumentTypeError, match=reason):
        INPUT_HANDLERS["color"](raw)


@pytest.mark.parametrize("raw, expected", [
    ("aa", "AA"),
    ("AAA", "AAA"),
    ("aa-large", "AA-Large"),
    ("AAA_Large", "AAA-Large"),
])
def test_handle_level(raw, expected):
    assert INPUT_HANDLERS["level"](raw) == expected


def test_handle_level_rejects():
    with pytest.raises(argparse.ArgumentTypeError, match="invalid level"):
        INPUT_HANDLERS["level"]("a")


def test_handle_float_range():
    validator = INPUT_HANDLERS["float_0_1"]
    assert validator("0.5") == 0.5
    assert validator(" 1 ") == 1.0
    with pytest.raises(argparse.ArgumentTypeError, match="out of range"):
        validator("1.5")
    with pytest.raises(argparse.ArgumentTypeError, match="invalid float"):
        validator("half")
