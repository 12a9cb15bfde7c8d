"""Tests for novafetch.compose."""

from pathlib import Path

import pytest
from PIL import Image

from novafetch.ansi import RESET, gradient, solid
from novafetch.compose import HALF_BLOCK, ImageLogoError, color_logo, compose, image_lines
from novafetch.config import from_dict
from novafetch.fmt import display_width
from novafetch.theme import ThemeManager


class TestCompose:
    def test_info_longer_than_logo(self) -> None:
        assert compose(["ab", "abcd"], ["x", "y", "z"], 2) == ["ab    x", "abcd  y", "      z"]

    def test_logo_longer_than_info(self) -> None:
        assert compose(["ab", "abcd"], [], 4) == ["ab      ", "abcd    "]

    def test_line_count(self) -> None:
        assert len(compose(["a"] * 3, ["b"] * 7)) == 7
        assert len(compose(["a"] * 9, ["b"] * 2)) == 9

    def test_colored_logo_aligned(self) -> None:
        logo = [solid("ab", (1, 2, 3)), gradient("abcd", (0, 0, 0), (9, 9, 9))]
        out = compose(logo, ["x", "y"], 4)
        columns = [display_width(line) - 1 for line in out]
        assert columns == [8, 8]
        assert all(line.endswith(info) for line, info in zip(out, ["x", "y"]))

    def test_empty(self) -> None:
        assert compose([], []) == []


class TestColorLogo:
    def test_no_color(self) -> None:
        tm = ThemeManager(from_dict({}), no_color=True)
        assert color_logo(["a", ""], (1, 2, 3), tm) == ["a", ""]

    def test_solid_uses_logo_color(self) -> None:
        tm = ThemeManager(from_dict({"theme": {"mode": "solid"}}))
        assert color_logo(["ab", ""], (1, 2, 3), tm) == [solid("ab", (1, 2, 3)), ""]

    def test_gradient_uses_theme(self) -> None:
        cfg = from_dict({})
        tm = ThemeManager(cfg)
        out = color_logo(["ab"], (1, 2, 3), tm)
        assert out == [gradient("ab", cfg.theme.primary_color, cfg.theme.secondary_color)]


class TestImageLines:
    def test_half_blocks(self, tmp_path: Path) -> None:
        path = tmp_path / "logo.png"
        Image.new("RGB", (4, 4), (255, 0, 0)).save(path)
        lines = image_lines(path, width=4)
        assert len(lines) == 2
        for line in lines:
            assert line.count(HALF_BLOCK) == 4
            assert display_width(line) == 4
            assert line.endswith(RESET)
            assert "\x1b[38;2;255;0;0m\x1b[48;2;255;0;0m" in line

    def test_odd_height_rounded_up(self, tmp_path: Path) -> None:
        path = tmp_path / "logo.png"
        Image.new("RGB", (4, 3), (0, 0, 255)).save(path)
        assert len(image_lines(path, width=4)) == 2

    def test_default_width(self, tmp_path: Path) -> None:
        path = tmp_path / "logo.png"
        Image.new("RGBA", (8, 8), (0, 255, 0, 128)).save(path)
        lines = image_lines(str(path))
        assert display_width(lines[0]) == 36

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ImageLogoError):
            image_lines(tmp_path / "nope.png")

    def test_not_an_image(self, tmp_path: Path) -> None:
        path = tmp_path / "logo.png"
        path.write_text("definitely not a png")
        with pytest.raises(ImageLogoError):
            image_lines(path)
