"""Per-fact probes.

Every probe returns a ``Row``, a list of rows, or None, and never raises for
an unavailable source: it falls back to the failure value documented next to
it. Platform-specific sources are picked once at import time.
"""

from __future__ import annotations

import getpass
import os
import platform
import socket
import sys
import time
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

import psutil

from novafetch import gpu, sensors
from novafetch.ansi import RESET, BarStyle, framed_bar
from novafetch.commands import run
from novafetch.fmt import format_age, format_bytes, format_freq, format_uptime

NOT_AVAILABLE = "N/A"
UNKNOWN = "Unknown"
NONE_FOUND = "—"

_LINUX = sys.platform.startswith("linux")


@dataclass(frozen=True)
class Row:
    """One output line. An empty label marks a header row (``user@host``)."""
    key: str
    label: str
    value: str


# ── Shared system snapshot (cpu / memory / swap) ────────────────────────────

MIN_CPU_INTERVAL = 0.2  # psutil needs two samples this far apart for a real reading


@dataclass
class SystemSnapshot:
    cpu_percent: float | None = None
    cpu_freq_mhz: float | None = None
    mem_used: int | None = None
    mem_total: int | None = None
    swap_used: int | None = None
    swap_total: int | None = None


def take_snapshot() -> SystemSnapshot:
    """Sample CPU utilization over MIN_CPU_INTERVAL plus memory and swap totals."""
    snap = SystemSnapshot()
    try:
        psutil.cpu_percent(interval=None)
        time.sleep(MIN_CPU_INTERVAL)
        snap.cpu_percent = float(psutil.cpu_percent(interval=None))
    except (psutil.Error, OSError):
        pass
    try:
        freq = psutil.cpu_freq()
        if freq is not None and freq.current > 0:
            snap.cpu_freq_mhz = float(freq.current)
    except (psutil.Error, OSError, NotImplementedError, AttributeError):
        pass
    try:
        vm = psutil.virtual_memory()
        snap.mem_total = int(vm.total)
        snap.mem_used = int(vm.total - vm.available)
    except (psutil.Error, OSError):
        pass
    try:
        sw = psutil.swap_memory()
        snap.swap_total = int(sw.total)
        snap.swap_used = int(sw.used)
    except (psutil.Error, OSError, RuntimeError):
        pass
    return snap


# ── Identity ────────────────────────────────────────────────────────────────

def user_host() -> Row:
    try:
        user = getpass.getuser()
    except (KeyError, OSError):
        user = "user"
    try:
        host = socket.gethostname() or "unknown"
    except OSError:
        host = "unknown"
    return Row("user_host", "", f"{user}@{host}")


def _os_release() -> dict[str, str]:
    try:
        return platform.freedesktop_os_release()
    except OSError:
        return {}


def _os_name_linux() -> str | None:
    info = _os_release()
    if info.get("PRETTY_NAME"):
        return info["PRETTY_NAME"]
    if info.get("NAME"):
        return f"{info['NAME']} {info.get('VERSION_ID', '')}".strip()
    return None


def _os_name_macos() -> str | None:
    version = platform.mac_ver()[0]
    return f"macOS {version}" if version else "macOS"


def _os_name_generic() -> str | None:
    name = platform.system()
    if not name:
        return None
    return f"{name} {platform.release()}".strip()


if _LINUX:
    _os_name: Callable[[], str | None] = _os_name_linux
elif sys.platform == "darwin":
    _os_name = _os_name_macos
else:
    _os_name = _os_name_generic


def os_info() -> Row:
    name = _os_name() or _os_name_generic() or "unknown"
    arch = platform.machine()
    if arch and arch.lower() not in name.lower():
        name = f"{name} {arch}"
    return Row("os", "OS", name)


def kernel() -> Row:
    value = f"{platform.system()} {platform.release()}".strip()
    return Row("kernel", "Kernel", value or "unknown")


def distro_slug() -> str:
    """Identifier used to pick a logo, e.g. ``arch``, ``ubuntu``, ``macos``."""
    if _LINUX:
        return _os_release().get("ID", "linux")
    if sys.platform == "darwin":
        return "macos"
    if sys.platform == "win32":
        build = platform.version().rsplit(".", 1)[-1]
        return "windows11" if build.isdigit() and int(build) >= 22000 else "windows"
    return platform.system().lower() or "fallback"


def uptime() -> Row | None:
    try:
        boot = psutil.boot_time()
    except (psutil.Error, OSError):
        return None
    return Row("uptime", "Uptime", format_uptime(time.time() - boot))


# ── Shell / desktop ─────────────────────────────────────────────────────────

def _version_token(text: str) -> str:
    first_line = text.splitlines()[0] if text else ""
    for word in first_line.split():
        if word[0].isdigit():
            version = ""
            for ch in word:
                if not (ch.isdigit() or ch == "."):
                    break
                version += ch
            return version
    return ""


def shell() -> Row:
    path = os.environ.get("SHELL", "")
    if not path:
        return Row("shell", "Shell", "unknown")
    name = Path(path).name or path
    out = run([path, "--version"])
    version = _version_token(out) if out else ""
    return Row("shell", "Shell", f"{name} {version}" if version else name)


def desktop() -> Row:
    value = os.environ.get("XDG_CURRENT_DESKTOP") or os.environ.get("DESKTOP_SESSION")
    return Row("de", "DE/WM", value or NOT_AVAILABLE)


# ── CPU / GPU / memory ──────────────────────────────────────────────────────

def _cpu_name_linux() -> str | None:
    try:
        text = Path("/proc/cpuinfo").read_text(encoding="utf-8", errors="replace")
    except OSError:
        return None
    for key in ("model name", "Hardware", "Model", "cpu model"):
        for line in text.splitlines():
            field, sep, value = line.partition(":")
            if sep and field.strip() == key and value.strip():
                return value.strip()
    return platform.processor() or None


def _cpu_name_macos() -> str | None:
    out = run(["sysctl", "-n", "machdep.cpu.brand_string"])
    return out.strip() if out and out.strip() else platform.processor() or None


def _cpu_name_generic() -> str | None:
    return platform.processor() or None


if _LINUX:
    _cpu_name: Callable[[], str | None] = _cpu_name_linux
elif sys.platform == "darwin":
    _cpu_name = _cpu_name_macos
else:
    _cpu_name = _cpu_name_generic


def cpu(snapshot: SystemSnapshot | None, show_bar: bool, style: BarStyle) -> Row:
    name = " ".join((_cpu_name() or "").split()) or NOT_AVAILABLE
    parts: list[str] = []
    if show_bar and snapshot is not None and snapshot.cpu_percent is not None:
        pct = snapshot.cpu_percent
        parts.append(framed_bar(pct, 100.0, 10, style))
        parts.append(f"{pct:.0f}%")
        if snapshot.cpu_freq_mhz:
            parts.append(format_freq(snapshot.cpu_freq_mhz))
    parts.append(name)
    value = " ".join(parts)
    temp = sensors.cpu_temperature()
    if temp is not None:
        value = f"{value} ({temp:.1f}°C)"
    return Row("cpu", "CPU", value)


def gpu_row() -> Row:
    readings = sensors.read_sensors()
    value = gpu.gpu_name(readings)
    temp = sensors.gpu_temperature(readings)
    if temp is not None:
        value = f"{value} ({temp:.1f}°C)"
    return Row("gpu", "GPU", value)


def memory(snapshot: SystemSnapshot | None, show_bar: bool, unit_type: str, style: BarStyle) -> Row | None:
    if snapshot is None or snapshot.mem_total is None or snapshot.mem_used is None:
        return None
    used, total = snapshot.mem_used, snapshot.mem_total
    value = f"{format_bytes(used, unit_type)} / {format_bytes(total, unit_type)}"
    if show_bar and total > 0:
        value = f"{value} {framed_bar(used, total, 10, style)}"
    return Row("memory", "Memory", value)


def swap(snapshot: SystemSnapshot | None, unit_type: str) -> Row | None:
    if snapshot is None or snapshot.swap_total is None or snapshot.swap_used is None:
        return None
    used, total = snapshot.swap_used, snapshot.swap_total
    pct = int(used / total * 100 + 0.5) if total > 0 else 0
    value = f"{format_bytes(used, unit_type)} / {format_bytes(total, unit_type)} ({pct}%)"
    return Row("swap", "Swap", value)


# ── Disks ───────────────────────────────────────────────────────────────────

def _disk_kind(device: str) -> str:
    """``ssd``, ``hdd`` or ``unknown`` from the block queue's rotational flag."""
    name = Path(device).name
    try:
        flag = Path(f"/sys/block/{name}/queue/rotational").read_text(encoding="utf-8").strip()
    except OSError:
        return "unknown"
    return {"0": "ssd", "1": "hdd"}.get(flag, "unknown")


def is_relevant_mount(mount: str, device: str, kind: str) -> bool:
    """Skip snaps, tmpfs-style mounts, pseudo filesystems and plain loop devices."""
    if "snap" in mount:
        return False
    lower = mount.lower()
    if lower in ("/tmp", "/run", "/dev/shm"):
        return False
    if lower.startswith(("/sys", "/proc")) or "/run/" in lower or "overlay" in lower:
        return False
    if "loop" in device.lower():
        return kind in ("ssd", "hdd")
    return True


def _is_root_mount(mount: str) -> bool:
    return mount == "/" or mount.rstrip("\\/").upper() == "C:"


def disk(show_bar: bool, unit_type: str, style: BarStyle) -> list[Row]:
    try:
        partitions = psutil.disk_partitions(all=False)
    except (psutil.Error, OSError):
        return []

    found: list[tuple[str, Row]] = []
    for part in partitions:
        mount = part.mountpoint or "/"
        if not is_relevant_mount(mount, part.device, _disk_kind(part.device)):
            continue
        try:
            usage = psutil.disk_usage(mount)
        except (psutil.Error, OSError):
            continue
        total = int(usage.total)
        used = max(0, total - int(usage.free))
        pct = int(used / total * 100 + 0.5) if total > 0 else 0
        value = f"{pct}% ({format_bytes(used, unit_type)} / {format_bytes(total, unit_type)})"
        if show_bar and total > 0:
            value = f"{value} {framed_bar(used, total, 10, style)}"
        label = f"Disk ({mount}, {part.fstype})" if part.fstype else f"Disk ({mount})"
        found.append((mount, Row("disk", label, value)))

    found.sort(key=lambda item: (0 if _is_root_mount(item[0]) else 1, item[0]))
    return [row for _, row in found]


# ── Packages ────────────────────────────────────────────────────────────────

def _count_lines(out: str | None, skip_header: bool = False) -> int | None:
    if out is None:
        return None
    lines = [line for line in out.splitlines() if line.strip()]
    if skip_header:
        lines = lines[1:]
    return len(lines)


def _count_pacman() -> int | None:
    if _LINUX:
        try:
            return sum(1 for p in Path("/var/lib/pacman/local").iterdir() if p.is_dir())
        except OSError:
            return None
    return _count_lines(run(["pacman", "-Qq"]))


def _count_dpkg() -> int | None:
    if _LINUX:
        try:
            with open("/var/lib/dpkg/status", encoding="utf-8", errors="replace") as f:
                return sum(1 for line in f if line.startswith("Package:"))
        except OSError:
            return None
    return _count_lines(run(["dpkg-query", "-f", "${binary:Package}\n", "-W"]))


PACKAGE_MANAGERS: tuple[tuple[str, Callable[[], int | None]], ...] = (
    ("pacman", _count_pacman),
    ("dpkg", _count_dpkg),
    ("rpm", lambda: _count_lines(run(["rpm", "-qa"]))),
    ("flatpak", lambda: _count_lines(run(["flatpak", "list"]), skip_header=True)),
    ("snap", lambda: _count_lines(run(["snap", "list"]), skip_header=True)),
)


def packages() -> Row:
    parts = []
    for name, count in PACKAGE_MANAGERS:
        n = count()
        if n:
            parts.append(f"{n} ({name})")
    return Row("packages", "Packages", ", ".join(parts) or NONE_FOUND)


# ── Terminal ────────────────────────────────────────────────────────────────

KNOWN_TERMINALS = (
    "terminal",
    "alacritty",
    "kitty",
    "konsole",
    "xfce4-terminal",
    "urxvt",
    "rxvt",
    "wezterm",
    "foot",
    "wayst",
    "hyper",
    "ghostty",
    "tilix",
    "terminator",
)


def _is_terminal(name: str) -> bool:
    lower = name.lower()
    return lower == "st" or any(t in lower for t in KNOWN_TERMINALS)


def _terminal_from_env() -> str | None:
    if os.environ.get("TERM_PROGRAM"):
        return os.environ["TERM_PROGRAM"]
    if "ALACRITTY_LOG" in os.environ:
        return "Alacritty"
    if "KITTY_PID" in os.environ:
        return "Kitty"
    return None


def _terminal_from_parents(max_hops: int = 20) -> str | None:
    try:
        proc: psutil.Process | None = psutil.Process(os.getpid())
        for _ in range(max_hops):
            if proc is None:
                return None
            name = proc.name()
            if _is_terminal(name):
                return name.strip().rstrip("-") or None
            proc = proc.parent()
    except (psutil.Error, OSError):
        return None
    return None


def terminal() -> Row:
    name = _terminal_from_env() or _terminal_from_parents()
    return Row("terminal", "Terminal", name or NONE_FOUND)


def terminal_font() -> Row:
    out = run(["gsettings", "get", "org.gnome.desktop.interface", "monospace-font-name"])
    value = out.strip().strip("'") if out else ""
    return Row("terminal_font", "Terminal Font", value or "Unknown (Terminal-specific)")


# ── Display ─────────────────────────────────────────────────────────────────

def _format_mode(width: str, height: str, hz: float | None) -> str:
    if hz and hz > 0:
        return f"{width}x{height} @ {int(hz)}Hz"
    return f"{width}x{height}"


def parse_xrandr(out: str) -> list[str]:
    """Current mode of every connected output, from ``xrandr --current``."""
    modes: list[str] = []
    for line in out.splitlines():
        if not line.startswith(" ") or "*" not in line:
            continue
        tokens = line.split()
        width, sep, height = tokens[0].partition("x")
        if not sep:
            continue
        height = height.rstrip("i")  # interlaced modes
        hz = None
        for token in tokens[1:]:
            if "*" in token:
                try:
                    hz = float(token.rstrip("*+"))
                except ValueError:
                    hz = None
                break
        modes.append(_format_mode(width, height, hz))
    return modes


def _resolutions_linux() -> list[str]:
    out = run(["xrandr", "--current"])
    return parse_xrandr(out) if out else []


def _resolutions_macos() -> list[str]:
    out = run(["system_profiler", "SPDisplaysDataType"])
    if not out:
        return []
    modes = []
    for line in out.splitlines():
        line = line.strip()
        if not line.startswith("Resolution:"):
            continue
        fields = line.removeprefix("Resolution:").split()
        # "2560 x 1440 @ 60.00Hz" or "3024 x 1964 Retina"
        if len(fields) >= 3 and fields[1] == "x":
            hz = None
            if "@" in fields:
                try:
                    hz = float(fields[fields.index("@") + 1].removesuffix("Hz"))
                except (IndexError, ValueError):
                    hz = None
            modes.append(_format_mode(fields[0], fields[2], hz))
    return modes


def _resolutions_windows() -> list[str]:
    out = run([
        "wmic", "path", "Win32_VideoController", "get",
        "CurrentHorizontalResolution,CurrentRefreshRate,CurrentVerticalResolution",
    ])
    if not out:
        return []
    modes = []
    for line in out.splitlines():
        fields = line.split()
        if len(fields) == 3 and all(f.isdigit() for f in fields):
            width, rate, height = fields
            modes.append(_format_mode(width, height, float(rate)))
    return modes


def _no_resolutions() -> list[str]:
    return []


if _LINUX:
    _resolutions: Callable[[], list[str]] = _resolutions_linux
elif sys.platform == "darwin":
    _resolutions = _resolutions_macos
elif sys.platform == "win32":
    _resolutions = _resolutions_windows
else:
    _resolutions = _no_resolutions


def resolution() -> Row:
    return Row("resolution", "Resolution", ", ".join(_resolutions()) or NONE_FOUND)


# ── OS age ──────────────────────────────────────────────────────────────────

OS_AGE_PATHS = ("/", "/var/log/installer", "/etc", "/var/log")


def _birth_time(path: str) -> float | None:
    try:
        st = os.stat(path)
    except OSError:
        return None
    birth = getattr(st, "st_birthtime", None)
    if birth:
        return float(birth)
    if _LINUX:
        # os.stat does not expose statx birth time on Linux; GNU stat does
        out = run(["stat", "-c", "%W", path])
        if out and out.strip().isdigit() and int(out.strip()) > 0:
            return float(out.strip())
    return None


def os_age() -> Row:
    for path in OS_AGE_PATHS:
        created = _birth_time(path)
        if created is not None:
            return Row("os_age", "OS Age", format_age(created))
    return Row("os_age", "OS Age", UNKNOWN)


# ── GTK theme ───────────────────────────────────────────────────────────────

_GTK_KEYS = {
    "gtk-theme-name": "Theme",
    "gtk-icon-theme-name": "Icons",
    "gtk-font-name": "Font",
}


def _unquote(value: str) -> str:
    value = value.strip()
    if len(value) >= 2 and value[0] == value[-1] == '"':
        return value[1:-1].strip()
    return value


def _read_gtk_settings(path: Path) -> dict[str, str] | None:
    """Known keys from a GTK settings.ini; lines that are not key=value are skipped."""
    try:
        text = path.read_text(encoding="utf-8", errors="replace")
    except OSError:
        return None
    found: dict[str, str] = {}
    for line in text.splitlines():
        key, sep, value = line.partition("=")
        label = _GTK_KEYS.get(key.strip())
        if sep and label:
            found[label] = _unquote(value)
    return found


def theme() -> list[Row]:
    home = Path(os.environ.get("HOME") or Path.home())
    values = {"Theme": UNKNOWN, "Icons": UNKNOWN, "Font": UNKNOWN}
    for subdir in ("gtk-3.0", "gtk-4.0"):
        found = _read_gtk_settings(home / ".config" / subdir / "settings.ini")
        if found is not None:
            values.update({k: v for k, v in found.items() if v})
            break
    if values["Theme"] == UNKNOWN and os.environ.get("GTK_THEME", "").strip():
        values["Theme"] = os.environ["GTK_THEME"].strip()
    return [Row("theme", label, value) for label, value in values.items()]


# ── Media / network ─────────────────────────────────────────────────────────

def media() -> Row | None:
    """Now playing, via the first MPRIS player ``playerctl`` reports."""
    out = run(["playerctl", "metadata", "--format", "{{artist}}\t{{title}}"])
    if not out or not out.strip():
        return None
    artist, _, title = out.strip("\n").partition("\t")
    return Row("media", "Media", f"🎵 {artist.strip() or UNKNOWN} - {title.strip() or UNKNOWN}")


_VIRTUAL_IFACES = ("lo", "docker", "veth", "br-", "virbr", "vmnet", "tun", "tap")


def _route_ip() -> str | None:
    """Source address the kernel would use for an outbound IPv4 packet.

    Connecting a UDP socket only selects a route; nothing is sent.
    """
    try:
        with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as s:
            s.connect(("10.254.254.254", 1))
            ip = s.getsockname()[0]
    except OSError:
        return None
    return None if ip.startswith(("0.", "127.")) else ip


def _interface_ip() -> str | None:
    try:
        addrs = psutil.net_if_addrs()
        stats = psutil.net_if_stats()
    except (psutil.Error, OSError):
        return None
    for name in sorted(addrs):
        if name.startswith(_VIRTUAL_IFACES):
            continue
        if name in stats and not stats[name].isup:
            continue
        for addr in addrs[name]:
            if addr.family == socket.AF_INET and not addr.address.startswith("127."):
                return addr.address
    return None


def local_ip() -> Row | None:
    ip = _route_ip() or _interface_ip()
    return Row("local_ip", "Local IP", ip) if ip else None


# ── Palette ─────────────────────────────────────────────────────────────────

BLOCK = "██"


def palette(no_color: bool) -> list[Row]:
    if no_color:
        # no trailing space, so the plain rows are one cell narrower than the colored ones
        plain = " ".join([BLOCK] * 8)
        return [Row("palette", "", plain), Row("palette", "", plain)]
    normal = "".join(f"\x1b[{code}m{BLOCK} {RESET}" for code in range(30, 38))
    bright = "".join(f"\x1b[{code}m{BLOCK} {RESET}" for code in range(90, 98))
    return [Row("palette", "", normal), Row("palette", "", bright)]
