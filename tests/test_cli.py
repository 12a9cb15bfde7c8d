"""Tests for novafetch.cli."""

import json
import re
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
from PIL import Image

from novafetch.ansi import RESET
from novafetch.cli import build_parser, main
from novafetch.logos import ARCH, DEBIAN, split_art
from novafetch.probes import Row, SystemSnapshot

_SGR = re.compile(r"\x1b\[38;2;\d+;\d+;\d+m")


def _config(tmp_path: Path, body: str) -> Path:
    path = tmp_path / "config.toml"
    path.write_text(body)
    return path


@pytest.fixture
def identity():
    with patch("novafetch.probes.user_host", return_value=Row("user_host", "", "alice@box")), \
            patch("novafetch.probes.os_info", return_value=Row("os", "OS", "Arch Linux x86_64")), \
            patch("novafetch.probes.kernel", return_value=Row("kernel", "Kernel", "Linux 6.6.1")):
        yield


class TestParser:
    def test_defaults(self) -> None:
        args = build_parser().parse_args([])
        assert args.logo is None
        assert args.no_color is False
        assert args.config is None
        assert args.json is False

    def test_unknown_argument(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as excinfo:
            main(["--bogus"])
        assert excinfo.value.code == 2
        assert "--bogus" in capsys.readouterr().err


class TestTextOutput:
    def test_info_only(self, tmp_path: Path, identity: None, capsys: pytest.CaptureFixture[str]) -> None:
        cfg = _config(tmp_path, 'layout = ["user_host", "os", "kernel"]\n[ascii]\nprint_ascii = false\n')
        main(["--no-color", "--config", str(cfg)])
        assert capsys.readouterr().out == (
            "alice@box\n"
            "OS      Arch Linux x86_64\n"
            "Kernel  Linux 6.6.1\n"
        )

    def test_logo_only(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        cfg = _config(tmp_path, "layout = []\n")
        main(["--logo", "arch", "--no-color", "--config", str(cfg)])
        art = split_art(ARCH)
        width = max(len(line) for line in art)
        expected = [f"{line.ljust(width)}    " for line in art]
        assert capsys.readouterr().out.splitlines() == expected

    def test_distro_override(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        cfg = _config(tmp_path, 'layout = []\n[ascii]\ndistro_override = "debian"\n')
        main(["--no-color", "--config", str(cfg)])
        out = capsys.readouterr().out.splitlines()
        assert [line.rstrip() for line in out] == [line.rstrip() for line in split_art(DEBIAN)]

    def test_logo_beside_info(self, tmp_path: Path, identity: None, capsys: pytest.CaptureFixture[str]) -> None:
        cfg = _config(tmp_path, 'layout = ["user_host", "os"]\n[general]\nmargin = 2\n')
        main(["--logo", "arch", "--no-color", "--config", str(cfg)])
        out = capsys.readouterr().out.splitlines()
        width = max(len(line) for line in split_art(ARCH))
        assert len(out) == len(split_art(ARCH))
        assert out[0][width + 2:] == "alice@box"
        assert out[1][width + 2:] == "OS  Arch Linux x86_64"

    def test_gradient_header(self, tmp_path: Path, identity: None, capsys: pytest.CaptureFixture[str]) -> None:
        cfg = _config(tmp_path, 'layout = ["user_host"]\n[theme]\nmode = "gradient"\n[ascii]\nprint_ascii = false\n')
        main(["--config", str(cfg)])
        line = capsys.readouterr().out.rstrip("\n")
        assert len(_SGR.findall(line)) == len("alice@box")
        assert _SGR.sub("", line) == f"alice@box{RESET}"
        assert line.endswith(RESET)

    def test_missing_config_created(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        path = tmp_path / "sub" / "config.toml"
        with patch("novafetch.cli.collect_rows", return_value=([], None)):
            main(["--no-color", "--logo", "fallback", "--config", str(path)])
        assert path.is_file()
        assert capsys.readouterr().out


class TestImageLogo:
    def test_renders_image(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        image = tmp_path / "logo.png"
        Image.new("RGB", (4, 4), (10, 20, 30)).save(image)
        cfg = _config(tmp_path, f'layout = []\n[general]\nimage_path = "{image.as_posix()}"\nimage_width = 4\n')
        main(["--config", str(cfg)])
        out = capsys.readouterr().out.splitlines()
        assert out[0].count("▀") == 4
        assert out[2] == ""

    def test_bad_image_falls_back(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        cfg = _config(tmp_path, f'layout = []\n[general]\nimage_path = "{(tmp_path / "nope.png").as_posix()}"\n')
        main(["--logo", "arch", "--config", str(cfg)])
        captured = capsys.readouterr()
        assert "using ASCII logo" in captured.err
        assert len(captured.out.splitlines()) == len(split_art(ARCH))

    def test_skipped_without_color(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        cfg = _config(tmp_path, 'layout = []\n[general]\nimage_path = "/nonexistent.png"\n')
        main(["--logo", "arch", "--no-color", "--config", str(cfg)])
        captured = capsys.readouterr()
        assert "skipped with --no-color" in captured.err
        assert "▀" not in captured.out
        assert len(captured.out.splitlines()) == len(split_art(ARCH))


class TestJsonOutput:
    @patch("novafetch.probes.take_snapshot")
    def test_memory_and_swap(self, mock_snap: MagicMock, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        mock_snap.return_value = SystemSnapshot(mem_used=1024, mem_total=4096, swap_used=0, swap_total=2048)
        cfg = _config(tmp_path, 'layout = ["memory", "swap"]\n')
        main(["--json", "--config", str(cfg)])
        data = json.loads(capsys.readouterr().out)
        assert set(data) == {
            "Memory", "Swap",
            "memory_used_bytes", "memory_total_bytes", "swap_used_bytes", "swap_total_bytes",
        }
        assert data["memory_total_bytes"] == 4096
        assert "\x1b" not in data["Memory"]

    def test_plain_values(self, tmp_path: Path, identity: None, capsys: pytest.CaptureFixture[str]) -> None:
        cfg = _config(tmp_path, 'layout = ["user_host", "os", "palette"]\n')
        main(["--json", "--config", str(cfg)])
        data = json.loads(capsys.readouterr().out)
        assert data["user_host"] == "alice@box"
        assert data["OS"] == "Arch Linux x86_64"
        assert "\x1b" not in data["palette"]
