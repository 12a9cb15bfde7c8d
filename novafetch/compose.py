"""Side-by-side composition of the logo column and the info column.

Also renders a raster image logo as ANSI half-block cells (``▀`` with a
truecolor foreground for the top pixel and background for the bottom one).
"""

from __future__ import annotations

from pathlib import Path

from PIL import Image

from novafetch.ansi import RESET, RGB, gradient, solid
from novafetch.fmt import display_width
from novafetch.theme import ThemeManager

DEFAULT_MARGIN = 4
DEFAULT_IMAGE_WIDTH = 36
HALF_BLOCK = "▀"


class ImageLogoError(Exception):
    """The image logo could not be loaded or decoded."""


def compose(logo_lines: list[str], info_lines: list[str], margin: int = DEFAULT_MARGIN) -> list[str]:
    """Pad every logo line to the logo column width, add *margin*, then the info line.

    The output has ``max(len(logo_lines), len(info_lines))`` lines; when the
    logo runs out its column is filled with spaces.
    """
    logo_width = max((display_width(line) for line in logo_lines), default=0)
    gap = " " * margin
    out: list[str] = []
    for i in range(max(len(logo_lines), len(info_lines))):
        logo = logo_lines[i] if i < len(logo_lines) else ""
        line = f"{logo}{' ' * (logo_width - display_width(logo))}{gap}"
        if i < len(info_lines):
            line += info_lines[i]
        out.append(line)
    return out


def color_logo(lines: list[str], logo_color: RGB, theme: ThemeManager) -> list[str]:
    """Gradient each line in gradient mode, otherwise use the logo's own color."""
    if theme.no_color:
        return list(lines)
    if theme.gradient_mode:
        return [gradient(line, theme.theme.primary_color, theme.theme.secondary_color) for line in lines]
    return [solid(line, logo_color) if line else line for line in lines]


def _sgr_pair(top: RGB, bottom: RGB) -> str:
    return f"\x1b[38;2;{top[0]};{top[1]};{top[2]}m\x1b[48;2;{bottom[0]};{bottom[1]};{bottom[2]}m"


def image_lines(path: str | Path, width: int | None = None) -> list[str]:
    """Render the image at *path* as rows of half-block cells *width* cells wide.

    Raises:
        ImageLogoError: If the file is missing or cannot be decoded.
    """
    cells = width if width and width > 0 else DEFAULT_IMAGE_WIDTH
    try:
        with Image.open(Path(path).expanduser()) as img:
            rgb = img.convert("RGB")
    except (OSError, ValueError, Image.DecompressionBombError) as e:
        raise ImageLogoError(str(e)) from e

    # each cell is one pixel wide and two pixels tall
    height = max(2, round(rgb.height * cells / rgb.width))
    height += height % 2
    rgb = rgb.resize((cells, height), Image.Resampling.LANCZOS)
    px = rgb.load()

    lines: list[str] = []
    for y in range(0, height, 2):
        row = [_sgr_pair(px[x, y], px[x, y + 1]) + HALF_BLOCK for x in range(cells)]
        lines.append("".join(row) + RESET)
    return lines
