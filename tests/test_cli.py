"""Tests for the extract_palette command line."""

from __future__ import annotations

from pathlib import Path

import numpy as np
import pytest
from PIL import Image

import extract_palette


def _two_colour_png(path: Path) -> Path:
    rgb = np.array([[[255, 0, 0], [0, 0, 255]]], dtype=np.uint8)
    Image.fromarray(rgb).save(path)
    return path


def test_single_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = _two_colour_png(tmp_path / "two.png")

    code = extract_palette.main([str(path), "-k", "2"])

    out = capsys.readouterr().out
    assert code == 0
    assert "=== two.png ===" in out
    assert "Palette (2 colours):" in out
    assert "#ff0000  rgb(255, 0, 0)  pixels=1  share=50.0%" in out
    assert "#0000ff  rgb(0, 0, 255)  pixels=1  share=50.0%" in out
    assert out.index("#ff0000") < out.index("#0000ff")


def test_warns_when_fewer_colours_than_asked(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    path = _two_colour_png(tmp_path / "two.png")

    assert extract_palette.main([str(path), "--colours", "8"]) == 0

    assert "[warn] only 2 distinct buckets (asked for 8)" in capsys.readouterr().out


def test_debug_output(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = _two_colour_png(tmp_path / "two.png")

    extract_palette.main([str(path), "-k", "2", "--debug"])

    out = capsys.readouterr().out
    assert "[debug] Visible pixels: 2" in out
    assert "[debug] Round: 1" in out
    assert "Extent lo: #000000  Extent hi: #ff00ff" in out


def test_missing_source(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    code = extract_palette.main([str(tmp_path / "nope.png")])

    assert code == 2
    assert "[error] not found" in capsys.readouterr().err


def test_folder_skips_unreadable_files(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    _two_colour_png(tmp_path / "b_good.png")
    (tmp_path / "a_bad.png").write_text("garbage")
    (tmp_path / "notes.txt").write_text("ignored")

    code = extract_palette.main([str(tmp_path), "-k", "1"])

    captured = capsys.readouterr()
    assert code == 0
    assert "[warn] skipped a_bad.png: not a readable image" in captured.out
    assert "=== a_bad.png ===" not in captured.out
    assert "=== b_good.png ===" in captured.out
    assert "notes.txt" not in captured.out
    assert captured.err == ""


def test_folder_continues_past_failing_image(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    Image.new("RGBA", (2, 2), (0, 0, 0, 0)).save(tmp_path / "a_clear.png")
    _two_colour_png(tmp_path / "b_good.png")

    code = extract_palette.main([str(tmp_path), "-k", "1"])

    captured = capsys.readouterr()
    assert code == 1
    assert "[error] a_clear.png: no visible pixels" in captured.err
    assert "=== b_good.png ===" in captured.out


def test_unreadable_single_file_fails(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    path = tmp_path / "bad.png"
    path.write_text("garbage")

    assert extract_palette.main([str(path)]) == 1
    assert "[error] bad.png" in capsys.readouterr().err


def test_alpha_threshold_bounds_accepted(tmp_path: Path) -> None:
    path = _two_colour_png(tmp_path / "two.png")

    assert extract_palette.main([str(path), "--alpha-threshold", "0"]) == 0
    assert extract_palette.main([str(path), "--alpha-threshold", "255"]) == 0


@pytest.mark.parametrize("value", ["300", "256", "-1", "half"])
def test_rejects_bad_alpha_threshold(value: str) -> None:
    with pytest.raises(SystemExit) as exc:
        extract_palette.main(["x.png", "--alpha-threshold", value])
    assert exc.value.code == 2


def test_empty_folder(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert extract_palette.main([str(tmp_path)]) == 0
    assert "[warn] no images" in capsys.readouterr().out


@pytest.mark.parametrize("value", ["300", "-1", "many"])
def test_rejects_bad_colour_count(value: str) -> None:
    with pytest.raises(SystemExit) as exc:
        extract_palette.parse_cli_args(["x.png", "-k", value])
    assert exc.value.code == 2
