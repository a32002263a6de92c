from .demo import (
    DEMO_FEATURES,
    FREE_TIER,
    DemoFeature,
    ResourceKind,
    SkuRecord,
)
from .chat import ChatAnswer, Citation

__all__ = [
    "DEMO_FEATURES",
    "FREE_TIER",
    "DemoFeature",
    "ResourceKind",
    "SkuRecord",
    "ChatAnswer",
    "Citation",
]
