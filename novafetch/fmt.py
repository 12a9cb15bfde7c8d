"""Formatting helpers: byte counts, durations, clock speeds and visible width."""

from __future__ import annotations

import time

_UNITS: dict[str, tuple[int, tuple[str, ...]]] = {
    "iec":      (1024, ("B", "KiB", "MiB", "GiB", "TiB")),
    "si":       (1000, ("B", "KB", "MB", "GB", "TB")),
    "standard": (1024, ("B", "KB", "MB", "GB", "TB")),
}

_DAY = 86400


def format_bytes(n: int | float, unit_type: str = "standard") -> str:
    """Human-readable byte count with two decimals.

    ``iec`` uses base 1024 with KiB/MiB labels, ``si`` base 1000 with KB/MB,
    anything else falls back to ``standard`` (base 1024, KB/MB labels).
    """
    base, units = _UNITS.get(unit_type.lower(), _UNITS["standard"])
    if n <= 0:
        return f"0 {units[0]}"
    v = float(n)
    idx = 0
    while v >= base and idx < len(units) - 1:
        v /= base
        idx += 1
    return f"{v:.2f} {units[idx]}"


def format_freq(mhz: float) -> str:
    """``1.23GHz`` at or above 1000 MHz, else ``987MHz``."""
    if mhz >= 1000:
        return f"{mhz / 1000:.2f}GHz"
    return f"{mhz:.0f}MHz"


def format_uptime(seconds: float) -> str:
    """Compact uptime: ``2d 3h 14m``, ``3h 14m`` or ``14m``."""
    minutes = max(0, int(seconds // 60))
    days, minutes = divmod(minutes, 1440)
    hours, minutes = divmod(minutes, 60)
    parts: list[str] = []
    if days:
        parts.append(f"{days}d")
    if days or hours:
        parts.append(f"{hours}h")
    parts.append(f"{minutes}m")
    return " ".join(parts)


def format_age(created: float, now: float | None = None) -> str:
    """Elapsed time since *created* as ``"Y years, M months, D days"``.

    Months are 30 days and years 365 days. Zero components are dropped;
    under one day yields ``"Less than a day"``.
    """
    if now is None:
        now = time.time()
    days = max(0, int(now - created)) // _DAY
    years, rem = divmod(days, 365)
    months, days = divmod(rem, 30)
    parts = []
    for n, unit in ((years, "year"), (months, "month"), (days, "day")):
        if n == 1:
            parts.append(f"1 {unit}")
        elif n > 1:
            parts.append(f"{n} {unit}s")
    return ", ".join(parts) if parts else "Less than a day"


def display_width(s: str) -> int:
    """Visible column count of *s*, skipping ``ESC [ ... m`` sequences.

    Every other codepoint counts as one cell; wide glyphs are not doubled.
    """
    width = 0
    i = 0
    n = len(s)
    while i < n:
        if s[i] == "\x1b" and i + 1 < n and s[i + 1] == "[":
            end = s.find("m", i + 2)
            i = n if end == -1 else end + 1
            continue
        width += 1
        i += 1
    return width
