"""Label and value styling: Nerd Font icons, gradient or solid label color."""

from __future__ import annotations

from novafetch.ansi import RESET, gradient, rgb_sgr, solid
from novafetch.config import AppConfig

# Nerd Font glyphs (Unicode private use area) per layout key
NERD_ICONS: dict[str, str] = {
    "user_host":     "\uf007",
    "os":            "\uf17c",
    "kernel":        "\uf109",
    "uptime":        "\uf017",
    "shell":         "\uf489",
    "de":            "\uf1e6",
    "cpu":           "\uf0e4",
    "gpu":           "\uf108",
    "memory":        "\uf2db",
    "disk":          "\uf0a0",
    "terminal":      "\uf120",
    "terminal_font": "\uf031",
    "packages":      "\uf187",
    "resolution":    "\uf108",
    "swap":          "\uf2db",
    "os_age":        "\uf073",
    "theme":         "\uf53f",
    "media":         "\uf001",
    "local_ip":      "\uf0ac",
}


class ThemeManager:
    def __init__(self, config: AppConfig, no_color: bool = False) -> None:
        self.general = config.general
        self.theme = config.theme
        self.no_color = no_color

    @property
    def gradient_mode(self) -> bool:
        return self.theme.mode.lower() == "gradient"

    def colorize(self, text: str) -> str:
        """Primary→secondary gradient, or solid primary, per the theme mode."""
        if self.no_color or not text:
            return text
        if self.gradient_mode:
            return gradient(text, self.theme.primary_color, self.theme.secondary_color)
        return solid(text, self.theme.primary_color)

    def icon(self, key: str) -> str:
        if self.no_color or not self.general.use_nerd_fonts:
            return ""
        glyph = NERD_ICONS.get(key, "")
        return f"{glyph} " if glyph else ""

    def format_label(self, key: str, text: str) -> str:
        if self.no_color:
            return text
        return self.colorize(f"{self.icon(key)}{text}")

    def format_value(self, text: str) -> str:
        if self.no_color:
            return text
        return f"{rgb_sgr(self.theme.text_color)}{text}{RESET}"
