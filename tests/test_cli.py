import sys

import pytest

from colorluma import __version__
from colorluma.main import main


@pytest.fixture(autouse=True)
def truecolor(monkeypatch):
    monkeypatch.setenv("COLORTERM", "truecolor")


def run_cli(monkeypatch, *argv):
    monkeypatch.setattr(sys, "argv", ["colorluma", *argv])
    main()


def test_inspect_dark_color(monkeypatch, capsys):
    run_cli(monkeypatch, "-c", "#000", "-hb")
    out = capsys.readouterr().out
    assert "#000000" in out
    assert "0.0000 (relative)" in out
    assert "dark (threshold 0.35)" in out


def test_inspect_light_color_with_contrast(monkeypatch, capsys):
    run_cli(monkeypatch, "-c", "rgb(255, 255, 255)", "-wcag")
    out = capsys.readouterr().out
    assert "light" in out
    assert "1.0000" in out
    assert "21.00:1" in out
    assert " 1.00:1" in out


def test_inspect_perceived_and_threshold(monkeypatch, capsys):
    run_cli(monkeypatch, "-c", "255,0,0", "-p", "-t", "0.2", "-hb")
    out = capsys.readouterr().out
    assert "0.2990 (perceived)" in out
    assert "light (threshold 0.2)" in out


def test_inspect_requires_color(monkeypatch, capsys):
    with pytest.raises(SystemExit) as exc:
        run_cli(monkeypatch)
    assert exc.value.code == 2
    assert "-c/--color is required" in capsys.readouterr().err


def test_inspect_rejects_translucent_color(monkeypatch, capsys):
    with pytest.raises(SystemExit) as exc:
        run_cli(monkeypatch, "-c", "rgba(255, 255, 255, .4)")
    assert exc.value.code == 2
    assert "needs alpha blending" in capsys.readouterr().err


def test_misplaced_subcommand(monkeypatch, capsys):
    with pytest.raises(SystemExit) as exc:
        run_cli(monkeypatch, "-c", "#fff", "contrast")
    assert exc.value.code == 2
    assert "must be the first argument" in capsys.readouterr().err


def test_version(monkeypatch, capsys):
    with pytest.raises(SystemExit) as exc:
        run_cli(monkeypatch, "--version")
    assert exc.value.code == 0
    assert __version__ in capsys.readouterr().out


def test_contrast_all_levels(monkeypatch, capsys):
    with pytest.raises(SystemExit) as exc:
        run_cli(monkeypatch, "contrast", "-c", "#000")
    assert exc.value.code == 0
    out = capsys.readouterr().out
    assert "21.00:1" in out
    for level in ("AA-Large", "AA", "AAA-Large", "AAA"):
        assert level in out
    assert "Fail" not in out


def test_contrast_single_level_pass(monkeypatch, capsys):
    with pytest.raises(SystemExit) as exc:
        run_cli(monkeypatch, "contrast", "-c", "#f00", "-b", "#000", "-l", "aa")
    assert exc.value.code == 0
    out = capsys.readouterr().out
    assert "5.25:1" in out
    assert "Pass" in out


def test_contrast_single_level_fail(monkeypatch, capsys):
    with pytest.raises(SystemExit) as exc:
        run_cli(monkeypatch, "contrast", "-c", "#777", "-l", "AAA")
    assert exc.value.code == 1
    assert "Fail" in capsys.readouterr().out


def test_contrast_bad_background(monkeypatch, capsys):
    with pytest.raises(SystemExit) as exc:
        run_cli(monkeypatch, "contrast", "-c", "#000", "-b", "white")
    assert exc.value.code == 2
    assert "invalid color 'white'" in capsys.readouterr().err


def test_inspect_fractional_channels_render_valid_escapes(monkeypatch, capsys):
    run_cli(monkeypatch, "-c", "127.5,0,0", "-wcag", "-hb")
    out = capsys.readouterr().out
    assert "rgb(127.5, 0, 0)" in out
    assert "\033[48;2;128;0;0m" in out
    assert "48;2;127.5" not in out
