"""
AI demos pre-provisioning wizard – main entry point.

Registered as the azd ``preprovision`` hook; azd exports the environment
(AZURE_ENV_NAME, AZURE_LOCATION and every value set earlier) before running it.

Usage
-----
python main.py
"""

from __future__ import annotations

import pathlib
import sys

from dotenv import load_dotenv
from loguru import logger

load_dotenv()

from config.settings import settings  # noqa: E402 – must be after load_dotenv


def _configure_logging() -> None:
    logger.remove()
    # stderr keeps log lines apart from the prompts written to stdout.
    logger.add(
        sys.stderr,
        level=settings.log_level,
        format="{time:HH:mm:ss} | {level: <8} | {message}",
    )
    if settings.log_file:
        pathlib.Path(settings.log_file).parent.mkdir(parents=True, exist_ok=True)
        logger.add(settings.log_file, level="DEBUG", rotation="10 MB", retention="7 days")


def main() -> None:
    _configure_logging()

    from clients.azd_client import AzdEnvClient
    from clients.azure_cli import AzureCliClient
    from storage.env_store import EnvStore
    from wizard import Prompter, ProvisioningWizard

    wizard = ProvisioningWizard(
        prompter=Prompter(),
        store=EnvStore(AzdEnvClient()),
        az=AzureCliClient(),
        env_name=settings.azure_env_name,
        location_hint=settings.azure_location,
    )
    wizard.run()


if __name__ == "__main__":
    main()
