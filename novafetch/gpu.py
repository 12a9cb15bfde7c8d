"""GPU detection: vendor listing tools first, sysfs and sensor labels as fallbacks.

The listing source is chosen once per platform: ``lspci`` on Linux,
``wmic`` on Windows, ``system_profiler`` on macOS.
"""

from __future__ import annotations

import re
import sys
from collections.abc import Callable
from pathlib import Path

from novafetch import sensors
from novafetch.commands import run

GENERIC_GPU = "Generic GPU"

# Substrings that mark an integrated GPU; anything else counts as dedicated
INTEGRATED_MARKERS = (
    "Intel UHD",
    "Intel HD",
    "Intel Graphics",
    "Intel Iris",
    "AMD Radeon Graphics",
    "Mesa",
)

_NOISE_WORDS = (
    "Corporation",
    "Inc.",
    "Co.",
    "Ltd.",
    "Limited",
    "Advanced Micro Devices, ",
    "Advanced Micro Devices",
)

_ATI_RE = re.compile(r"\bati\b")


# ── Name cleaning ───────────────────────────────────────────────────────────

def _last_bracketed(s: str) -> str | None:
    start = s.rfind("[")
    if start == -1:
        return None
    end = s.find("]", start + 1)
    if end == -1:
        return None
    inner = s[start + 1:end].strip()
    return inner or None


def _vendor_prefix(cleaned: str, raw: str) -> str:
    lc = cleaned.lower()
    lr = raw.lower()
    if ("nvidia" in lr or any(k in lc for k in ("geforce", "rtx", "gtx"))) and not lc.startswith("nvidia"):
        return f"NVIDIA {cleaned}"
    if (
        "advanced micro devices" in lr
        or _ATI_RE.search(lr)
        or "radeon" in lc
        or "navi" in lc
    ) and not lc.startswith("amd"):
        return f"AMD {cleaned}"
    if (
        "intel" in lr
        or any(k in lc for k in ("arc", "iris", "uhd", "hd graphics"))
    ) and not lc.startswith("intel"):
        return f"Intel {cleaned}"
    return cleaned


def clean_gpu_name(raw: str) -> str:
    """Turn a raw listing string into a marketing name.

    >>> clean_gpu_name("NVIDIA Corporation GA102 [GeForce RTX 3080] (rev a1)")
    'NVIDIA GeForce RTX 3080'
    """
    s = raw.strip()
    rev = s.rfind("(rev ")
    if rev != -1:
        s = s[:rev].strip()

    cleaned = _last_bracketed(s)
    if cleaned is None:
        cleaned = s
        for word in _NOISE_WORDS:
            cleaned = cleaned.replace(word, "")
    cleaned = _vendor_prefix(cleaned.strip(), raw)
    return " ".join(cleaned.split())


def pick_gpu(names: list[str]) -> str | None:
    """Prefer the first dedicated GPU; otherwise join the unique names."""
    if not names:
        return None
    for name in names:
        if not any(marker in name for marker in INTEGRATED_MARKERS):
            return name
    unique = list(dict.fromkeys(names))
    return ", ".join(unique)


# ── Listing sources ─────────────────────────────────────────────────────────

def _lspci_gpus() -> list[str]:
    out = run(["lspci"])
    if out is None:
        return []
    names: list[str] = []
    for line in out.splitlines():
        parts = line.strip().split(":", 2)
        if len(parts) < 3:
            continue
        device_class = parts[1]
        if not any(k in device_class for k in ("VGA", "3D", "Display")):
            continue
        name = parts[2].strip()
        if name and not sensors.is_generic_gpu_name(name):
            names.append(name)
    return names


def _wmic_gpus() -> list[str]:
    out = run(["wmic", "path", "win32_videocontroller", "get", "name"])
    if out is None:
        return []
    return [
        line.strip() for line in out.splitlines()
        if line.strip() and line.strip().lower() != "name"
    ]


def _system_profiler_gpus() -> list[str]:
    out = run(["system_profiler", "SPDisplaysDataType"])
    if out is None:
        return []
    names: list[str] = []
    for line in out.splitlines():
        line = line.strip()
        if line.startswith("Chipset Model:"):
            name = line.removeprefix("Chipset Model:").strip()
            if name:
                names.append(name)
    return names


def _no_gpus() -> list[str]:
    return []


_DRM_ROOT = Path("/sys/class/drm")


def _sysfs_gpu() -> str | None:
    """Linux only: first non-empty product/model/name file under a DRM card."""
    for i in range(8):
        device = _DRM_ROOT / f"card{i}" / "device"
        for attr in ("product_name", "model", "name"):
            try:
                value = (device / attr).read_text(encoding="utf-8").strip()
            except OSError:
                continue
            if value:
                return value
    return None


def _no_sysfs() -> str | None:
    return None


if sys.platform.startswith("linux"):
    _list_gpus: Callable[[], list[str]] = _lspci_gpus
    _fallback_gpu: Callable[[], str | None] = _sysfs_gpu
elif sys.platform == "win32":
    _list_gpus = _wmic_gpus
    _fallback_gpu = _no_sysfs
elif sys.platform == "darwin":
    _list_gpus = _system_profiler_gpus
    _fallback_gpu = _no_sysfs
else:
    _list_gpus = _no_gpus
    _fallback_gpu = _no_sysfs


def gpu_name(readings: list[sensors.Reading] | None = None) -> str:
    """Cleaned GPU name, or ``"Generic GPU"`` when every source fails."""
    picked = pick_gpu([clean_gpu_name(n) for n in _list_gpus()])
    if picked:
        return picked
    raw = _fallback_gpu()
    if raw:
        return clean_gpu_name(raw)
    from_sensors = sensors.gpu_name_from_sensors(readings)
    if from_sensors:
        return from_sensors
    return GENERIC_GPU
