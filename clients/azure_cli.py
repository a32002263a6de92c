"""Thin wrapper around the Azure CLI queries the wizard depends on."""

from __future__ import annotations

from typing import List, Optional

from loguru import logger

from config.settings import settings
from models.demo import ResourceKind, SkuRecord
from utils.helpers import parse_json_output, run_command


class AzureCliClient:
    """Runs `az` and parses its JSON / TSV output.

    Failures are not retried: a non-zero exit raises CommandError and ends the run.
    """

    def __init__(self, executable: Optional[str] = None) -> None:
        self._az = executable or settings.az_executable

    def signed_in_user_id(self) -> Optional[str]:
        """Object id of the signed-in user, or None when az reports nothing."""
        out = run_command(
            [self._az, "ad", "signed-in-user", "show", "--query", "id", "-o", "tsv"]
        ).strip()
        return out or None

    def list_locations(self) -> List[str]:
        """Sorted names of every region available to the subscription."""
        raw = run_command(
            [self._az, "account", "list-locations", "--query", "[].name", "-o", "json"]
        )
        locations = sorted(parse_json_output(raw))
        logger.info(f"Fetched {len(locations)} Azure regions.")
        return locations

    def list_skus(self, kind: ResourceKind, location: Optional[str] = None) -> List[SkuRecord]:
        """SKUs of a Cognitive Services kind, optionally restricted to one region."""
        cmd = [
            self._az, "cognitiveservices", "account", "list-skus",
            "--kind", kind.value,
        ]
        if location:
            cmd += ["--location", location]
        cmd += ["-o", "json"]
        records = [SkuRecord(**raw) for raw in parse_json_output(run_command(cmd))]
        logger.debug(f"{kind.value} @ {location or 'all regions'}: {len(records)} SKUs")
        return records
