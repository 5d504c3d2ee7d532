__version__ = "1.0.0"

from .model import SetupRequest, Variant
from .orchestrator import State, scaffold
from .runner import CommandFailure, InvalidSelection, IoFailure, ScaffoldError
from .variants import LABELS, VARIANTS, get_variant

__all__ = [
    "SetupRequest", "Variant", "State", "scaffold", "CommandFailure", "InvalidSelection",
    "IoFailure", "ScaffoldError", "LABELS", "VARIANTS", "get_variant",
]
