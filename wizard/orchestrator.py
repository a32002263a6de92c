"""Provisioning wizard.

Runs as the azd ``preprovision`` hook and fills in every value the
infrastructure templates need before deployment:

1. YOUR_OBJECT_ID        – signed-in user, confirmed or typed in
2. MULTI_RESOURCE_GROUP  – derived from the environment name
3. DEFAULT_LOCATION      – validated against the live region catalog
4. demo features         – enabled flag, resource group and, for
                           region-bound services, a location with capacity
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from loguru import logger

from clients.azure_cli import AzureCliClient
from models.demo import DEMO_FEATURES, DemoFeature
from storage.env_store import EnvStore
from utils.helpers import ConfigurationError, format_columns, is_set
from wizard.location_selector import LocationSelector
from wizard.prompts import Prompter

OBJECT_ID_KEY = "YOUR_OBJECT_ID"
MULTI_RESOURCE_GROUP_KEY = "MULTI_RESOURCE_GROUP"
DEFAULT_LOCATION_KEY = "DEFAULT_LOCATION"

TRUE = "true"
FALSE = "false"


class ProvisioningWizard:
    """Interactive flow that resolves and persists the deployment settings."""

    def __init__(
        self,
        prompter: Prompter,
        store: EnvStore,
        az: AzureCliClient,
        env_name: str,
        location_hint: Optional[str] = None,
        features: Sequence[DemoFeature] = DEMO_FEATURES,
    ) -> None:
        if not is_set(env_name):
            raise ConfigurationError(
                "AZURE_ENV_NAME is not set. Run this script through 'azd provision' "
                "or export AZURE_ENV_NAME first."
            )
        self._prompter = prompter
        self._store = store
        self._az = az
        self._env_name = env_name
        self._location_hint = location_hint if is_set(location_hint) else None
        self._features = list(features)
        self._locations = LocationSelector(prompter, store, az)
        self._catalog: Optional[List[str]] = None

    # ── Entry point ───────────────────────────────────────────────────────────

    def run(self) -> None:
        logger.info(f"ProvisioningWizard: starting for environment '{self._env_name}'")

        self._store.set(
            OBJECT_ID_KEY,
            self._store.get_or_prompt(OBJECT_ID_KEY, self._resolve_object_id),
        )
        self._store.ensure(MULTI_RESOURCE_GROUP_KEY, lambda: f"rg-{self._env_name}-multi")
        self._store.set(
            DEFAULT_LOCATION_KEY,
            self._store.get_or_prompt(DEFAULT_LOCATION_KEY, self._resolve_default_location),
        )
        self._configure_features()

        logger.success(f"ProvisioningWizard: {len(self._store.written)} values persisted.")
        self._prompter.banner("Pre-provisioning complete")

    # ── Region catalog ────────────────────────────────────────────────────────

    @property
    def catalog(self) -> List[str]:
        """Region names, fetched from az on first use and kept for the run."""
        if self._catalog is None:
            self._catalog = self._az.list_locations()
        return self._catalog

    # ── Steps ─────────────────────────────────────────────────────────────────

    def _resolve_object_id(self) -> str:
        object_id = self._az.signed_in_user_id()
        if not object_id:
            self._prompter.warn("Could not determine the signed-in user's object id.")
            return self._read_object_id()
        if self._prompter.confirm(f"Use object id '{object_id}'?"):
            return object_id
        return self._read_object_id()

    def _read_object_id(self) -> str:
        object_id = self._prompter.ask("Enter your Azure AD object id:").strip()
        while not object_id:
            self._prompter.error("The object id cannot be empty.")
            object_id = self._prompter.ask("Enter your Azure AD object id:").strip()
        return object_id

    def _resolve_default_location(self) -> str:
        if self._location_hint and self._prompter.confirm(
            f"Use '{self._location_hint}' as the default location?"
        ):
            location = self._location_hint
        else:
            location = self._prompter.ask("Enter the default location:").strip()

        while location not in self.catalog:
            logger.warning(f"Default location '{location}' is not a valid region.")
            self._prompter.error(f"'{location}' is not a valid Azure region. Valid regions are:")
            self._prompter.info(format_columns(self.catalog))
            location = self._prompter.ask("Enter the default location:").strip()
        return location

    def _configure_features(self) -> None:
        pending = [f for f in self._features if not self._store.is_set(f.flag_key)]
        provision_all = bool(pending) and self._prompter.confirm("Provision all demos?")

        for feature in self._features:
            if self._store.is_set(feature.flag_key):
                enabled = self._store.get(feature.flag_key) == TRUE
            elif provision_all:
                enabled = True
            else:
                enabled = self._prompter.confirm(f"Provision the {feature.alias} demo?")
            self._store.set(feature.flag_key, TRUE if enabled else FALSE)

            if enabled:
                self._configure_feature(feature)
            else:
                logger.info(f"Skipping {feature.name} demo.")

    def _configure_feature(self, feature: DemoFeature) -> None:
        self._store.ensure(
            feature.resource_group_key,
            lambda: feature.resource_group_name(self._env_name),
        )
        if feature.region_bound and not self._store.is_set(feature.location_key):
            self._locations.select(
                feature.location_key,
                feature.alias,
                feature.kind,
                self.catalog,
                default=self._store.get(DEFAULT_LOCATION_KEY),
            )
        logger.info(f"{feature.name} demo configured.")
