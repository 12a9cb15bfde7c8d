"""novafetch: print system facts next to a distribution logo.

Usage:
    novafetch
    novafetch --logo arch --no-color
    novafetch --json --config path/to/config.toml
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from novafetch import probes
from novafetch.compose import ImageLogoError, color_logo, compose, image_lines
from novafetch.config import AppConfig, load_config
from novafetch.layout import collect_rows, render_info, rows_to_json
from novafetch.logos import get_logo
from novafetch.theme import ThemeManager


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="novafetch",
        description="A fast, rice-ready system fetch tool.",
    )
    parser.add_argument(
        "--logo", metavar="NAME", default=None,
        help="Override the logo (e.g. arch, ubuntu, fedora, macos, fallback)",
    )
    parser.add_argument(
        "--no-color", action="store_true",
        help="Disable colored output",
    )
    parser.add_argument(
        "--config", type=Path, default=None, metavar="PATH",
        help="Path to config file (default: ~/.config/novafetch/config.toml)",
    )
    parser.add_argument(
        "--json", action="store_true",
        help="Print collected info as JSON (no logo, no colors)",
    )
    return parser


def _emit(lines: list[str]) -> None:
    sys.stdout.write("".join(f"{line}\n" for line in lines))


def _logo_slug(args: argparse.Namespace, config: AppConfig) -> str:
    slug = (args.logo or config.ascii.distro_override or probes.distro_slug()).strip()
    return slug or "fallback"


def run(args: argparse.Namespace) -> None:
    config = load_config(args.config)

    if args.json:
        rows, snapshot = collect_rows(config, no_color=True)
        try:
            print(json.dumps(rows_to_json(rows, snapshot, config), indent=2, ensure_ascii=False))
        except (TypeError, ValueError) as e:
            print(f"novafetch: json error: {e}", file=sys.stderr)
        return

    rows, _ = collect_rows(config, no_color=args.no_color)
    theme = ThemeManager(config, no_color=args.no_color)
    info = render_info(rows, theme)

    image_path = (config.general.image_path or "").strip()
    if image_path and args.no_color:
        print(f"novafetch: image '{image_path}' skipped with --no-color, using ASCII logo", file=sys.stderr)
    elif image_path:
        try:
            picture = image_lines(image_path, config.general.image_width)
        except ImageLogoError as e:
            print(f"novafetch: image '{image_path}' failed ({e}), using ASCII logo", file=sys.stderr)
        else:
            _emit(picture)
            _emit([""])
            _emit(info)
            return

    if not config.ascii.print_ascii:
        _emit(info)
        return

    art, logo_color = get_logo(_logo_slug(args, config))
    logo = color_logo(art, logo_color, theme)
    _emit(compose(logo, info, config.general.margin))


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    run(args)


if __name__ == "__main__":
    main()
