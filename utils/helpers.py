"""Utility helper functions."""

from __future__ import annotations

import json
import subprocess
from typing import Any, List, Sequence

from loguru import logger


class CommandError(RuntimeError):
    """An external command (az / azd) exited with a non-zero status."""

    def __init__(self, cmd: Sequence[str], returncode: int, stderr: str = "") -> None:
        self.cmd = list(cmd)
        self.returncode = returncode
        self.stderr = stderr.strip()
        super().__init__(
            f"Command {' '.join(self.cmd)!r} failed with exit code {returncode}: {self.stderr}"
        )


class ConfigurationError(RuntimeError):
    """A required ambient setting is missing."""


def run_command(cmd: Sequence[str]) -> str:
    """Run a command and return its stdout; raise CommandError on failure."""
    logger.debug(f"Executing: {' '.join(cmd)}")
    result = subprocess.run(list(cmd), text=True, capture_output=True, check=False)
    if result.returncode != 0:
        raise CommandError(cmd, result.returncode, result.stderr or "")
    return result.stdout


def parse_json_output(raw: str) -> Any:
    """Parse JSON printed by the Azure CLI; blank output means an empty list."""
    raw = raw.strip()
    if not raw:
        return []
    return json.loads(raw)


def is_set(value: Any) -> bool:
    """True for a non-empty, non-whitespace string value."""
    return value is not None and str(value).strip() != ""


def format_columns(values: List[str], width: int = 4) -> str:
    """Lay out a list of short strings in fixed-width rows."""
    if not values:
        return ""
    col = max(len(v) for v in values) + 2
    rows = [values[i : i + width] for i in range(0, len(values), width)]
    return "\n".join("".join(v.ljust(col) for v in row).rstrip() for row in rows)
