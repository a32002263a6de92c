"""Azure Developer CLI environment writer."""

from __future__ import annotations

from typing import Optional

from loguru import logger

from config.settings import settings
from utils.helpers import run_command


class AzdEnvClient:
    """Persists values into the active azd environment (`azd env set`)."""

    def __init__(self, executable: Optional[str] = None) -> None:
        self._azd = executable or settings.azd_executable

    def set(self, key: str, value: str) -> None:
        run_command([self._azd, "env", "set", key, value])
        logger.info(f"azd env set {key}={value}")
