"""Write-once key/value store backed by the azd environment."""

from __future__ import annotations

import os
from typing import Callable, Dict, Mapping, Optional, Protocol

from loguru import logger

from utils.helpers import is_set


class EnvWriter(Protocol):
    def set(self, key: str, value: str) -> None: ...


class EnvStore:
    """
    Configuration context for one wizard run.

    The ambient environment is snapshotted at construction and never re-read.
    Values persisted during the run are kept alongside the snapshot so later
    look-ups see them. A key that already holds a non-empty value is never
    written again.
    """

    def __init__(self, writer: EnvWriter, environ: Optional[Mapping[str, str]] = None) -> None:
        self._writer = writer
        self._ambient: Dict[str, str] = dict(os.environ if environ is None else environ)
        self._written: Dict[str, str] = {}

    # ── Look-ups ──────────────────────────────────────────────────────────────

    def get(self, key: str) -> Optional[str]:
        """Current value of *key*; empty strings count as unset."""
        value = self._written.get(key, self._ambient.get(key))
        return value if is_set(value) else None

    def is_set(self, key: str) -> bool:
        return self.get(key) is not None

    def get_or_prompt(self, key: str, prompt: Callable[[], str]) -> str:
        """Existing value of *key*, or whatever *prompt* returns (not persisted)."""
        value = self.get(key)
        return value if value is not None else prompt()

    @property
    def written(self) -> Dict[str, str]:
        """Keys persisted during this run, in write order."""
        return dict(self._written)

    # ── Persistence ───────────────────────────────────────────────────────────

    def set(self, key: str, value: str) -> str:
        """Persist *value* unless *key* already has one; return the stored value."""
        existing = self.get(key)
        if existing is not None:
            logger.debug(f"{key} already set to {existing!r}, leaving it unchanged.")
            return existing
        self._writer.set(key, value)
        self._written[key] = value
        return value

    def ensure(self, key: str, derive: Callable[[], str]) -> str:
        """Return the value of *key*, deriving and persisting it first if absent."""
        existing = self.get(key)
        if existing is not None:
            return existing
        return self.set(key, derive())
