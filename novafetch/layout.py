"""Layout engine: walk the configured module keys, run probes, and format rows.

Rows can be presented flat (``label<sep>value``, optionally aligned) or as a
tree grouped into Hardware / Software / Status sections.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from novafetch import probes
from novafetch.ansi import ACCENT, RESET, BarStyle, bar_style
from novafetch.config import AppConfig
from novafetch.fmt import display_width
from novafetch.probes import Row, SystemSnapshot
from novafetch.theme import ThemeManager

# Keys that read the shared CPU / memory snapshot
SNAPSHOT_KEYS = frozenset({"cpu", "memory", "swap"})


@dataclass
class ProbeContext:
    config: AppConfig
    snapshot: SystemSnapshot | None
    no_color: bool

    @property
    def unit_type(self) -> str:
        return self.config.general.unit_type

    @property
    def style(self) -> BarStyle:
        return bar_style(self.config.general.bar_style)


ProbeResult = Row | list[Row] | None

PROBES: dict[str, Callable[[ProbeContext], ProbeResult]] = {
    "user_host": lambda ctx: probes.user_host(),
    "os": lambda ctx: probes.os_info(),
    "kernel": lambda ctx: probes.kernel(),
    "uptime": lambda ctx: probes.uptime(),
    "shell": lambda ctx: probes.shell(),
    "de": lambda ctx: probes.desktop(),
    "cpu": lambda ctx: probes.cpu(ctx.snapshot, ctx.config.general.show_cpu_bar, ctx.style),
    "gpu": lambda ctx: probes.gpu_row(),
    "memory": lambda ctx: probes.memory(
        ctx.snapshot, ctx.config.general.show_memory_bar, ctx.unit_type, ctx.style
    ),
    "disk": lambda ctx: probes.disk(ctx.config.general.show_disk_bar, ctx.unit_type, ctx.style),
    "swap": lambda ctx: probes.swap(ctx.snapshot, ctx.unit_type),
    "packages": lambda ctx: probes.packages(),
    "terminal": lambda ctx: probes.terminal(),
    "terminal_font": lambda ctx: probes.terminal_font(),
    "resolution": lambda ctx: probes.resolution(),
    "os_age": lambda ctx: probes.os_age(),
    "theme": lambda ctx: probes.theme(),
    "media": lambda ctx: probes.media(),
    "local_ip": lambda ctx: probes.local_ip(),
    "palette": lambda ctx: probes.palette(ctx.no_color),
}


def _as_rows(result: ProbeResult) -> list[Row]:
    if result is None:
        return []
    if isinstance(result, Row):
        return [result]
    return list(result)


def layout_keys(config: AppConfig) -> list[str]:
    return [k.strip() for k in config.layout if k.strip()]


def collect_rows(config: AppConfig, no_color: bool = False) -> tuple[list[Row], SystemSnapshot | None]:
    """Run the probe for every layout key, in order. Unknown keys are skipped."""
    keys = layout_keys(config)
    snapshot = probes.take_snapshot() if SNAPSHOT_KEYS.intersection(keys) else None
    ctx = ProbeContext(config=config, snapshot=snapshot, no_color=no_color)

    rows: list[Row] = []
    for key in keys:
        probe = PROBES.get(key)
        if probe is None:
            continue
        rows.extend(_as_rows(probe(ctx)))
    return rows, snapshot


# ── Flat presentation ───────────────────────────────────────────────────────

def _plain_label(theme: ThemeManager, row: Row) -> str:
    return f"{theme.icon(row.key)}{row.label}"


def render_flat(rows: list[Row], theme: ThemeManager) -> list[str]:
    sep = theme.general.separator
    labelled = [r for r in rows if r.label]
    width = max((display_width(_plain_label(theme, r)) for r in labelled), default=0)

    lines: list[str] = []
    for row in rows:
        if row.key == "palette":
            lines.append(row.value)
        elif not row.label:
            lines.append(theme.colorize(row.value))
        else:
            pad = ""
            if theme.general.align_values:
                pad = " " * (width - display_width(_plain_label(theme, row)))
            lines.append(f"{theme.format_label(row.key, row.label)}{pad}{sep}{theme.format_value(row.value)}")
    return lines


# ── Tree presentation ───────────────────────────────────────────────────────

CATEGORIES: tuple[tuple[str, frozenset[str]], ...] = (
    ("Hardware", frozenset({"user_host", "cpu", "gpu", "memory", "disk", "resolution", "swap"})),
    ("Software", frozenset({
        "os", "kernel", "de", "shell", "terminal", "terminal_font", "packages", "theme", "os_age",
    })),
    ("Status", frozenset({"uptime", "local_ip", "media"})),
)
TREE_HEADER_WIDTH = 24
TREE_FIRST = " "
TREE_MIDDLE = " ├─ "
TREE_LAST = " └─ "


def group_header(name: str, width: int = TREE_HEADER_WIDTH) -> str:
    """``name`` centered in a run of ``─`` at least *width* cells wide."""
    dashes = max(0, width - len(name))
    left = dashes // 2
    return f"{'─' * left}{name}{'─' * (dashes - left)}"


def _tree_label(row: Row) -> str:
    if row.label:
        return row.label
    return "Host" if row.key == "user_host" else row.key


def render_tree(rows: list[Row], theme: ThemeManager) -> list[str]:
    sep = theme.general.separator
    accent = "" if theme.no_color else ACCENT
    reset = "" if theme.no_color else RESET

    groups: list[tuple[str, list[Row]]] = []
    for name, keys in CATEGORIES:
        members = [r for r in rows if r.key in keys]
        if members:
            groups.append((name, members))
    palette = [r for r in rows if r.key == "palette"]

    def prefix(i: int, count: int) -> str:
        if i == 0:
            return TREE_FIRST
        return TREE_LAST if i == count - 1 else TREE_MIDDLE

    width = 0
    for _, members in groups:
        for i, row in enumerate(members):
            label = f"{theme.icon(row.key)}{_tree_label(row)}"
            width = max(width, len(prefix(i, len(members))) + display_width(label))

    lines: list[str] = []
    for name, members in groups:
        lines.append(f"{accent}{group_header(name)}{reset}")
        for i, row in enumerate(members):
            glyph = prefix(i, len(members))
            label = _tree_label(row)
            pad = ""
            if theme.general.align_values:
                used = len(glyph) + display_width(f"{theme.icon(row.key)}{label}")
                pad = " " * (width - used)
            lead = glyph if i == 0 else f"{accent}{glyph}{reset}"
            lines.append(
                f"{lead}{theme.format_label(row.key, label)}{pad}{sep}{theme.format_value(row.value)}"
            )
        lines.append("")

    lines.extend(r.value for r in palette)
    return lines


def render_info(rows: list[Row], theme: ThemeManager) -> list[str]:
    if theme.general.layout_mode.lower() == "tree":
        return render_tree(rows, theme)
    return render_flat(rows, theme)


# ── JSON ────────────────────────────────────────────────────────────────────

def rows_to_json(rows: list[Row], snapshot: SystemSnapshot | None, config: AppConfig) -> dict[str, Any]:
    """Label → value mapping; header and palette rows are keyed by module key."""
    data: dict[str, Any] = {}
    for row in rows:
        key = row.label or row.key
        if row.key == "palette" and key in data:
            data[key] = f"{data[key]}\n{row.value}"
        else:
            data[key] = row.value

    keys = layout_keys(config)
    if snapshot is not None:
        if "memory" in keys and snapshot.mem_total is not None:
            data["memory_used_bytes"] = snapshot.mem_used
            data["memory_total_bytes"] = snapshot.mem_total
        if "swap" in keys and snapshot.swap_total is not None:
            data["swap_used_bytes"] = snapshot.swap_used
            data["swap_total_bytes"] = snapshot.swap_total
    return data
