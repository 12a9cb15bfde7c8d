"""Configuration loading for novafetch.

Loads settings from a TOML config file with sensible defaults.
Search order: explicit --config path → ~/.config/novafetch/config.toml.
A missing or unparsable file is replaced by the defaults, written back once.
"""

from __future__ import annotations

import copy
import os
import sys
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from novafetch.ansi import RGB

DEFAULT_LAYOUT: tuple[str, ...] = (
    "user_host",
    "os",
    "kernel",
    "uptime",
    "shell",
    "de",
    "cpu",
    "gpu",
    "memory",
    "disk",
    "terminal",
    "terminal_font",
    "packages",
    "resolution",
    "swap",
    "os_age",
    "theme",
    "media",
    "local_ip",
)

DEFAULT_CONFIG: dict[str, Any] = {
    "general": {
        "separator": "  ",
        "use_nerd_fonts": True,
        "align_values": True,
        "unit_type": "standard",
        "show_memory_bar": True,
        "show_cpu_bar": True,
        "show_disk_bar": True,
        "bar_style": "block",
        "layout_mode": "flat",
        "margin": 4,
        "image_path": None,
        "image_width": None,
    },
    "theme": {
        "primary_color": [59, 130, 246],
        "secondary_color": [147, 51, 234],
        "text_color": [255, 255, 255],
        "mode": "gradient",
    },
    "layout": list(DEFAULT_LAYOUT),
    "ascii": {
        "distro_override": None,
        "print_ascii": True,
    },
}


def default_config_path() -> Path:
    """$XDG_CONFIG_HOME/novafetch/config.toml, or ~/.config/novafetch/config.toml."""
    base = os.environ.get("XDG_CONFIG_HOME") or os.path.expanduser("~/.config")
    return Path(base) / "novafetch" / "config.toml"


# ── Frozen config bundle ────────────────────────────────────────────────────

@dataclass(frozen=True)
class GeneralConfig:
    separator: str
    use_nerd_fonts: bool
    align_values: bool
    unit_type: str
    show_memory_bar: bool
    show_cpu_bar: bool
    show_disk_bar: bool
    bar_style: str
    layout_mode: str
    margin: int
    image_path: str | None
    image_width: int | None


@dataclass(frozen=True)
class ThemeConfig:
    primary_color: RGB
    secondary_color: RGB
    text_color: RGB
    mode: str


@dataclass(frozen=True)
class AsciiConfig:
    distro_override: str | None
    print_ascii: bool


@dataclass(frozen=True)
class AppConfig:
    general: GeneralConfig
    theme: ThemeConfig
    layout: tuple[str, ...]
    ascii: AsciiConfig


def _deep_merge(base: dict[str, Any], overlay: dict[str, Any]) -> dict[str, Any]:
    """Merge overlay into base. Nested dicts are merged at the first level only."""
    merged = copy.deepcopy(base)
    for key, value in overlay.items():
        if key not in merged:
            continue  # unknown top-level keys are ignored
        if isinstance(merged[key], dict) and isinstance(value, dict):
            merged[key] = {**merged[key], **value}
        else:
            merged[key] = value
    return merged


def _typed(section: dict[str, Any], defaults: dict[str, Any], key: str, kind: type) -> Any:
    value = section.get(key)
    # bool is a subclass of int; keep them apart
    if isinstance(value, kind) and not (kind is int and isinstance(value, bool)):
        return value
    return defaults[key]


def _optional(section: dict[str, Any], key: str, kind: type) -> Any:
    value = section.get(key)
    if isinstance(value, kind) and not isinstance(value, bool):
        return value
    return None


def _rgb(value: Any, default: list[int]) -> RGB:
    if (
        isinstance(value, list)
        and len(value) == 3
        and all(isinstance(c, int) and not isinstance(c, bool) and 0 <= c <= 255 for c in value)
    ):
        return (value[0], value[1], value[2])
    return (default[0], default[1], default[2])


def from_dict(raw: dict[str, Any]) -> AppConfig:
    """Freeze a (possibly partial) config dict, defaulting anything missing or mistyped."""
    merged = _deep_merge(DEFAULT_CONFIG, raw)
    g, dg = merged["general"], DEFAULT_CONFIG["general"]
    if not isinstance(g, dict):
        g = dg
    t, dt = merged["theme"], DEFAULT_CONFIG["theme"]
    if not isinstance(t, dict):
        t = dt
    a, da = merged["ascii"], DEFAULT_CONFIG["ascii"]
    if not isinstance(a, dict):
        a = da

    layout = merged["layout"]
    if not isinstance(layout, list):
        layout = DEFAULT_CONFIG["layout"]

    return AppConfig(
        general=GeneralConfig(
            separator=_typed(g, dg, "separator", str),
            use_nerd_fonts=_typed(g, dg, "use_nerd_fonts", bool),
            align_values=_typed(g, dg, "align_values", bool),
            unit_type=_typed(g, dg, "unit_type", str),
            show_memory_bar=_typed(g, dg, "show_memory_bar", bool),
            show_cpu_bar=_typed(g, dg, "show_cpu_bar", bool),
            show_disk_bar=_typed(g, dg, "show_disk_bar", bool),
            bar_style=_typed(g, dg, "bar_style", str),
            layout_mode=_typed(g, dg, "layout_mode", str),
            margin=max(0, _typed(g, dg, "margin", int)),
            image_path=_optional(g, "image_path", str),
            image_width=_optional(g, "image_width", int),
        ),
        theme=ThemeConfig(
            primary_color=_rgb(t.get("primary_color"), dt["primary_color"]),
            secondary_color=_rgb(t.get("secondary_color"), dt["secondary_color"]),
            text_color=_rgb(t.get("text_color"), dt["text_color"]),
            mode=_typed(t, dt, "mode", str),
        ),
        layout=tuple(str(k) for k in layout if isinstance(k, str)),
        ascii=AsciiConfig(
            distro_override=_optional(a, "distro_override", str),
            print_ascii=_typed(a, da, "print_ascii", bool),
        ),
    )


def default_config() -> AppConfig:
    return from_dict({})


# ── TOML output ─────────────────────────────────────────────────────────────

def _toml_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, str):
        escaped = value.replace("\\", "\\\\").replace('"', '\\"')
        return f'"{escaped}"'
    if isinstance(value, (list, tuple)):
        return "[" + ", ".join(_toml_value(v) for v in value) + "]"
    raise TypeError(f"cannot render {type(value).__name__} as TOML")


def dump_config(config: AppConfig) -> str:
    """Render *config* as a TOML document. Unset optional values are omitted."""
    lines = [
        "# novafetch configuration",
        "# Place this file at ~/.config/novafetch/config.toml",
        "",
        "layout = [",
    ]
    lines.extend(f"    {_toml_value(key)}," for key in config.layout)
    lines.append("]")
    lines.append("")

    for name, section in (
        ("general", config.general),
        ("theme", config.theme),
        ("ascii", config.ascii),
    ):
        lines.append(f"[{name}]")
        for key, value in vars(section).items():
            if value is None:
                continue
            lines.append(f"{key} = {_toml_value(value)}")
        lines.append("")

    return "\n".join(lines)


def write_config(config: AppConfig, path: Path) -> None:
    """Write *config* to *path*, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(dump_config(config), encoding="utf-8")


def load_config(path: Path | None = None) -> AppConfig:
    """Load configuration, merging user TOML over defaults.

    Args:
        path: Explicit config file path (from --config). If None, uses the
              default location from default_config_path().

    Returns:
        The frozen configuration. When the file is missing or is not valid
        TOML, the defaults are returned and written to *path*.
    """
    if path is None:
        path = default_config_path()

    try:
        user_config = tomllib.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError):
        config = default_config()
        try:
            write_config(config, path)
        except OSError as e:
            print(f"novafetch: warning: could not write config to {path}: {e}", file=sys.stderr)
        return config

    return from_dict(user_config)
