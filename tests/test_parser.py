import pytest

from colorluma.core.errors import ColorError, ErrorKind
from colorluma.core.parser import hex_to_byte, parse_color


def test_hex_to_byte():
    assert hex_to_byte("00") == 0
    assert hex_to_byte("ff") == 255
    assert hex_to_byte("A5") == 165


@pytest.mark.parametrize("color", ["#A52", "#AA5522", "#aa5522", "#AA5522FF", "#aa5522ff"])
def test_hex_forms(color):
    assert parse_color(color) == (170, 85, 34)


@pytest.mark.parametrize("color", [
    "rgb(170, 85, 34)",
    "rgb(170,85,34)",
    "rgba(170,  85,  34, 1)",
    "rgb(170, 85, 34, 1)",
    " rgb( 170 , 85 , 34 ) ",
])
def test_functional_forms(color):
    assert parse_color(color) == (170, 85, 34)


@pytest.mark.parametrize("color", [[170, 85, 34], (170, 85, 34), [170, 85, 34, 1], [170.0, 85, 34, 1.0]])
def test_sequence_forms(color):
    rgb = parse_color(color)
    assert rgb == (170, 85, 34)
    assert all(isinstance(v, int) for v in rgb)


def test_sequence_keeps_fractional_channels():
    assert parse_color([127.5, 0, 255]) == (127.5, 0, 255)


@pytest.mark.parametrize("color", [
    "#", "#f", "#ff", "#ffff", "#fffff", "#fffffff", "#fffffffff",
    "#ggg", "#12345z",
    "red", "transparent", "", "hsla(0, 0, 0, 1)", "hsl(0, 0%, 0%)",
    "rgb(1, 2)", "rgb(1, 2, 3, 4, 5)", "rgb(-1, 2, 3)", "rgb(1.5, 2, 3)",
    "rgb(300, 0, 0)", "rgb(1, 2, 3) trailing", "xrgb(1, 2, 3)",
    "rgba(1, 2, 3, 0.5", "rgba(1, 2, 3, 2)", "rgba(1, 2, 3, .)",
])
def test_unsupported_strings(color):
    with pytest.raises(ColorError) as exc:
        parse_color(color)
    assert exc.value.kind is ErrorKind.UNSUPPORTED_FORMAT
    assert exc.value.color == color
    assert exc.value.alpha is None


@pytest.mark.parametrize("color, rendered", [
    ([0, 0], "[0, 0]"),
    ([0, 0, 0, 1, 0], "[0, 0, 0, 1, 0]"),
    ([256, 0, 0], "[256, 0, 0]"),
    ([-1, 0, 0], "[-1, 0, 0]"),
    ([0, 0, 0, 300], "[0, 0, 0, 300]"),
    ([0, "0", 0], "[0, 0, 0]"),
    ([True, 0, 0], "[True, 0, 0]"),
    ([float("nan"), 0, 0], "[nan, 0, 0]"),
])
def test_unsupported_sequences(color, rendered):
    with pytest.raises(ColorError) as exc:
        parse_color(color)
    assert exc.value.kind is ErrorKind.UNSUPPORTED_FORMAT
    assert exc.value.color == rendered


def test_unsupported_types():
    for color in (None, 0xFFFFFF, {"r": 0}):
        with pytest.raises(ColorError) as exc:
            parse_color(color)
        assert exc.value.kind is ErrorKind.UNSUPPORTED_FORMAT


@pytest.mark.parametrize("color, alpha", [
    ("#ffffff66", 0x66),
    ("#00000000", 0),
    ("rgba(255, 255, 255, .4)", 0.4),
    ("rgba(255, 255, 255, 0.4)", 0.4),
    ("rgba(0, 0, 0, 0)", 0.0),
    ("rgba(0, 0, 0, 0.)", 0.0),
    ("rgb(0, 0, 0, 0.999)", 0.999),
])
def test_translucent_strings(color, alpha):
    with pytest.raises(ColorError) as exc:
        parse_color(color)
    assert exc.value.kind is ErrorKind.NEEDS_ALPHA_BLENDING
    assert exc.value.color == color
    assert exc.value.alpha == pytest.approx(alpha)


def test_translucent_sequence():
    with pytest.raises(ColorError) as exc:
        parse_color([255, 255, 255, 0.4])
    assert exc.value.kind is ErrorKind.NEEDS_ALPHA_BLENDING
    assert exc.value.color == "[255, 255, 255, 0.4]"
    assert exc.value.alpha == 0.4


def test_error_messages():
    with pytest.raises(ColorError) as exc:
        parse_color("red")
    message = str(exc.value)
    assert "Expected color to be in a supported format, actual: red." in message
    assert "#rrggbbFF" in message
    assert "Keyword/system colors are not supported" in message

    with pytest.raises(ColorError) as exc:
        parse_color([255, 255, 255, 0.4])
    message = str(exc.value)
    assert "Expected a fully opaque color, actual: [255, 255, 255, 0.4], with alpha: 0.4." in message
    assert "alpha-blend" in message


def test_color_error_is_value_error():
    with pytest.raises(ValueError):
        parse_color("#12")


@pytest.mark.parametrize("color", [
    "rgb(" + "9" * 5000 + ",0,0)",
    "rgb(0,0,1000)",
])
def test_oversized_channels_are_unsupported(color):
    with pytest.raises(ColorError) as exc:
        parse_color(color)
    assert exc.value.kind is ErrorKind.UNSUPPORTED_FORMAT


def test_leading_zeros_in_channels():
    assert parse_color("rgb(000255, 0000, 007)") == (255, 0, 7)
