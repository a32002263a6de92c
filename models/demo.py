"""Pydantic models for the demo features and Azure capacity records."""

from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

FREE_TIER = "Free"


class ResourceKind(str, Enum):
    """Cognitive Services account kinds that need a regional capacity check."""

    COMPUTER_VISION = "ComputerVision"
    OPENAI = "OpenAI"
    FORM_RECOGNIZER = "FormRecognizer"


class DemoFeature(BaseModel):
    """One optional demo of the deployment and the keys it owns."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Short feature slug, e.g. 'vision'")
    stem: str = Field(..., description="Upper-case key stem, e.g. 'VISION'")
    alias: str = Field(..., description="Human-readable name shown in prompts")
    kind: Optional[ResourceKind] = Field(
        default=None,
        description="Account kind checked for regional availability, if region-bound",
    )
    location_key: Optional[str] = Field(default=None)

    @property
    def region_bound(self) -> bool:
        return self.kind is not None

    @property
    def flag_key(self) -> str:
        return f"{self.stem}_DEMO"

    @property
    def resource_group_key(self) -> str:
        return f"{self.stem}_RESOURCE_GROUP"

    def resource_group_name(self, env_name: str) -> str:
        return f"rg-{env_name}-{self.name}"


# Order matters: features are always offered and configured in this sequence.
DEMO_FEATURES: List[DemoFeature] = [
    DemoFeature(name="intro", stem="INTRO", alias="Intro"),
    DemoFeature(
        name="vision",
        stem="VISION",
        alias="Azure AI Vision",
        kind=ResourceKind.COMPUTER_VISION,
        location_key="VISION_LOCATION",
    ),
    DemoFeature(name="language", stem="LANGUAGE", alias="Azure AI Language"),
    DemoFeature(
        name="openai",
        stem="OPENAI",
        alias="Azure OpenAI",
        kind=ResourceKind.OPENAI,
        location_key="AOAI_LOCATION",
    ),
    DemoFeature(name="search", stem="SEARCH", alias="Azure AI Search"),
    DemoFeature(
        name="docintel",
        stem="DOCINTEL",
        alias="Azure AI Document Intelligence",
        kind=ResourceKind.FORM_RECOGNIZER,
        location_key="DOCINTEL_LOCATION",
    ),
]


class SkuRecord(BaseModel):
    """A single entry of `az cognitiveservices account list-skus`."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    kind: str
    tier: str = ""
    name: str = ""
    locations: List[str] = Field(default_factory=list)
    resource_type: str = Field(default="", alias="resourceType")
    restrictions: List[dict] = Field(default_factory=list)

    @property
    def is_free(self) -> bool:
        return self.tier == FREE_TIER
