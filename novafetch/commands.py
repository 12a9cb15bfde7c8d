"""Subprocess helper shared by the probes."""

from __future__ import annotations

import subprocess

COMMAND_TIMEOUT = 10  # seconds


def run(args: list[str], timeout: float = COMMAND_TIMEOUT) -> str | None:
    """Run *args* and return its stdout, or None on any failure.

    A missing executable, a non-zero exit status and a timeout are all
    treated the same way.
    """
    try:
        result = subprocess.run(
            args,
            capture_output=True,
            text=True,
            errors="replace",
            timeout=timeout,
            check=False,
        )
    except (OSError, subprocess.TimeoutExpired):
        return None
    if result.returncode != 0:
        return None
    return result.stdout
