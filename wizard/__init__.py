from .prompts import Prompter
from .location_selector import LocationSelector, available_alternatives
from .orchestrator import ProvisioningWizard

__all__ = [
    "Prompter",
    "LocationSelector",
    "available_alternatives",
    "ProvisioningWizard",
]
