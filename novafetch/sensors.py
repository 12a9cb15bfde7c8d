"""Thermal sensor selection on top of ``psutil.sensors_temperatures``.

Each reading is identified by ``"<chip> <label>"`` (e.g. ``"amdgpu edge"``,
``"coretemp Package id 0"``) so keyword filters see both the driver name and
the sensor label.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

import psutil

CPU_KEYWORDS = ("k10temp", "coretemp", "package", "die")
GPU_KEYWORDS = ("amdgpu", "nvidia", "radeon")


@dataclass
class Reading:
    chip: str
    label: str
    current: float

    @property
    def name(self) -> str:
        return f"{self.chip} {self.label}".strip()


def read_sensors() -> list[Reading]:
    """Refreshed list of every temperature sensor psutil can see."""
    try:
        temps = psutil.sensors_temperatures()
    except (AttributeError, OSError):
        return []  # not supported on this platform
    readings: list[Reading] = []
    for chip, entries in (temps or {}).items():
        for entry in entries:
            current = entry.current
            if current is None:
                continue
            readings.append(Reading(chip=chip, label=entry.label or "", current=float(current)))
    return readings


def _valid(t: float) -> bool:
    return math.isfinite(t) and 0.0 < t < 200.0


def _average(values: list[float]) -> float | None:
    if not values:
        return None
    return sum(values) / len(values)


def cpu_temperature(readings: list[Reading] | None = None) -> float | None:
    """Average of CPU package/die sensors, or None when none match."""
    if readings is None:
        readings = read_sensors()
    temps = [
        r.current for r in readings
        if any(k in r.name.lower() for k in CPU_KEYWORDS) and _valid(r.current)
    ]
    return _average(temps)


def gpu_temperature(readings: list[Reading] | None = None) -> float | None:
    """GPU temperature: edge/composite average, else other sensors, junction last."""
    if readings is None:
        readings = read_sensors()
    edge: list[float] = []
    junction: list[float] = []
    other: list[float] = []
    for r in readings:
        name = r.name.lower()
        if not any(k in name for k in GPU_KEYWORDS) or not _valid(r.current):
            continue
        if "edge" in name or "composite" in name:
            edge.append(r.current)
        elif "junction" in name:
            junction.append(r.current)
        else:
            other.append(r.current)
    return _average(edge) or _average(other) or _average(junction)


# Sensor labels that describe a probe point rather than the device itself
_SENSOR_WORDS = ("junction", "edge", "mem", "sensor", "fan", "temp", "power")


def is_generic_gpu_name(name: str) -> bool:
    lower = name.lower()
    return (
        not lower
        or lower == "gpu"
        or "generic" in lower
        or "unknown" in lower
        or len(lower) < 4
    )


def gpu_name_from_sensors(readings: list[Reading] | None = None) -> str | None:
    """Best-effort GPU name from sensor labels (last resort)."""
    if readings is None:
        readings = read_sensors()
    for r in readings:
        label = r.label.strip()
        lower = label.lower()
        if any(w in lower for w in _SENSOR_WORDS):
            continue
        chip = r.chip.lower()
        if "gpu" in lower or "gpu" in chip or "nvidia" in lower or "radeon" in lower:
            if not is_generic_gpu_name(label):
                return label
    return None
