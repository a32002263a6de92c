"""Shared fakes for the wizard tests - no test touches az, azd or the network."""

import io
from typing import Dict, List, Optional, Tuple

import pytest
from rich.console import Console

from models.demo import ResourceKind, SkuRecord
from storage.env_store import EnvStore
from wizard.prompts import Prompter


class ScriptedInput:
    """Feeds canned answers to a Prompter and records every prompt shown."""

    def __init__(self, answers: List[str]):
        self.answers = list(answers)
        self.prompts: List[str] = []

    def __call__(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.answers:
            raise AssertionError(f"Unexpected prompt: {prompt!r}")
        return self.answers.pop(0)


class RecordingWriter:
    """Stands in for `azd env set`."""

    def __init__(self):
        self.calls: List[Tuple[str, str]] = []

    def set(self, key: str, value: str) -> None:
        self.calls.append((key, value))


def sku(kind: ResourceKind, tier: str, locations: List[str], name: str = "S0") -> SkuRecord:
    return SkuRecord(kind=kind.value, tier=tier, name=name, locations=locations, resourceType="accounts")


class FakeAzureCli:
    """Answers the az queries from in-memory data."""

    def __init__(
        self,
        locations: Optional[List[str]] = None,
        regional_skus: Optional[Dict[Tuple[ResourceKind, str], List[SkuRecord]]] = None,
        all_skus: Optional[Dict[ResourceKind, List[SkuRecord]]] = None,
        user_id: Optional[str] = "00000000-0000-0000-0000-000000000001",
    ):
        self.locations = locations if locations is not None else ["eastus", "westus"]
        self.regional_skus = regional_skus
        self.all_skus = all_skus or {}
        self.user_id = user_id
        self.calls: List[tuple] = []

    def signed_in_user_id(self):
        self.calls.append(("signed_in_user_id",))
        return self.user_id

    def list_locations(self):
        self.calls.append(("list_locations",))
        return sorted(self.locations)

    def list_skus(self, kind, location=None):
        self.calls.append(("list_skus", kind, location))
        if location is None:
            return list(self.all_skus.get(kind, []))
        if self.regional_skus is None:
            return [sku(kind, "Standard", [location.upper()])]
        return list(self.regional_skus.get((kind, location), []))


def make_prompter(answers: List[str]) -> Tuple[Prompter, ScriptedInput, Console]:
    console = Console(file=io.StringIO(), width=120, highlight=False)
    scripted = ScriptedInput(answers)
    return Prompter(console=console, reader=scripted), scripted, console


def output_of(console: Console) -> str:
    return console.file.getvalue()


@pytest.fixture
def writer():
    return RecordingWriter()


@pytest.fixture
def store(writer):
    return EnvStore(writer, environ={})
