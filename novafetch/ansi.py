"""ANSI truecolor helpers and textual progress bars."""

from __future__ import annotations

from dataclasses import dataclass

RGB = tuple[int, int, int]

RESET = "\x1b[0m"
ACCENT = "\x1b[38;5;214m"  # tree glyphs and group headers


def rgb_sgr(rgb: RGB) -> str:
    """Foreground truecolor SGR: ``ESC[38;2;R;G;Bm``."""
    r, g, b = rgb
    return f"\x1b[38;2;{r};{g};{b}m"


def _lerp(a: int, b: int, t: float) -> int:
    v = int((1.0 - t) * a + t * b + 0.5)
    return max(0, min(255, v))


def gradient(text: str, start: RGB, end: RGB) -> str:
    """Color each codepoint of *text* on a linear ramp from *start* to *end*."""
    if not text:
        return ""
    n = len(text)
    out: list[str] = []
    for i, ch in enumerate(text):
        t = i / (n - 1) if n > 1 else 1.0
        rgb = (_lerp(start[0], end[0], t), _lerp(start[1], end[1], t), _lerp(start[2], end[2], t))
        out.append(f"{rgb_sgr(rgb)}{ch}")
    out.append(RESET)
    return "".join(out)


def solid(text: str, rgb: RGB) -> str:
    return f"{rgb_sgr(rgb)}{text}{RESET}"


# ── Bars ────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class BarStyle:
    filled: str
    empty: str
    bracketed: bool


BAR_STYLES: dict[str, BarStyle] = {
    "block": BarStyle("█", "░", True),
    "dots":  BarStyle("●", "○", False),
    "ascii": BarStyle("|", ".", True),
}
DEFAULT_BAR_STYLE = BAR_STYLES["block"]


def bar_style(name: str) -> BarStyle:
    return BAR_STYLES.get(name.lower(), DEFAULT_BAR_STYLE)


def bar(used: float, total: float, width: int, style: BarStyle = DEFAULT_BAR_STYLE) -> str:
    """Glyph run of exactly *width* cells; empty when *total* or *width* is 0."""
    if total <= 0 or width <= 0:
        return ""
    filled = int(used / total * width + 0.5)
    filled = max(0, min(width, filled))
    return style.filled * filled + style.empty * (width - filled)


def framed_bar(used: float, total: float, width: int, style: BarStyle = DEFAULT_BAR_STYLE) -> str:
    """``bar()`` wrapped in ``[...]`` when the style is bracketed."""
    glyphs = bar(used, total, width, style)
    if glyphs and style.bracketed:
        return f"[{glyphs}]"
    return glyphs
