"""Region selection validated against the catalog and regional SKU capacity."""

from __future__ import annotations

from typing import List, Optional, Sequence

from loguru import logger

from clients.azure_cli import AzureCliClient
from models.demo import ResourceKind, SkuRecord
from storage.env_store import EnvStore
from utils.helpers import format_columns
from wizard.prompts import Prompter


def available_alternatives(kind: ResourceKind, skus: Sequence[SkuRecord]) -> List[SkuRecord]:
    """Paid SKUs of *kind*, ordered by the regions they are offered in."""
    matching = [s for s in skus if s.kind == kind.value and not s.is_free]
    return sorted(matching, key=lambda s: [loc.lower() for loc in s.locations])


class LocationSelector:
    """Prompts for a region until one is valid and can host the resource kind."""

    def __init__(self, prompter: Prompter, store: EnvStore, az: AzureCliClient) -> None:
        self._prompter = prompter
        self._store = store
        self._az = az

    def select(
        self,
        key: str,
        alias: str,
        kind: ResourceKind,
        catalog: Sequence[str],
        default: Optional[str] = None,
    ) -> str:
        """
        Ask for the region of *alias* and persist it under *key*.

        Loops until the answer is in *catalog* and at least one SKU of *kind*
        exists there. Rejected answers are never persisted.
        """
        while True:
            location = self._read_location(alias, default)

            if location not in catalog:
                logger.warning(f"{alias}: '{location}' is not a valid region.")
                self._prompter.error(f"'{location}' is not a valid Azure region. Valid regions are:")
                self._prompter.info(format_columns(list(catalog)))
                continue

            if not self._az.list_skus(kind, location=location):
                logger.warning(f"{alias}: {kind.value} is not available in {location}.")
                self._prompter.warn(
                    f"{alias} ({kind.value}) is not available in '{location}'. "
                    "Regions offering it:"
                )
                self._show_alternatives(kind)
                continue

            self._store.set(key, location)
            self._prompter.success(f"{alias} will be deployed to '{location}'.")
            return location

    def _read_location(self, alias: str, default: Optional[str]) -> str:
        if default:
            answer = self._prompter.ask(f"Enter the location for {alias} [{default}]:")
            return answer.strip() or default
        return self._prompter.ask(f"Enter the location for {alias}:").strip()

    def _show_alternatives(self, kind: ResourceKind) -> None:
        for sku in available_alternatives(kind, self._az.list_skus(kind)):
            self._prompter.info(
                f"  {sku.kind:<16} {sku.tier:<10} {sku.name:<6} {', '.join(sku.locations)}"
            )
