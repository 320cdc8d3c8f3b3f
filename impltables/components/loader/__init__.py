"""
Loader component - Build implementor tables and hand them to the renderer.
"""

from ._impl import ImplementorLoader, build_table, select_channel
from .component import run_load
from .models import DeliveryChannel, LoadInput, LoadOutput
from .ports import PendingSlotPort, RegistrationHook, RegistrationHookPort

__all__ = [
    # Entry points
    "run_load",
    # Models
    "LoadInput",
    "LoadOutput",
    "DeliveryChannel",
    # Ports
    "RegistrationHook",
    "RegistrationHookPort",
    "PendingSlotPort",
    # Service
    "ImplementorLoader",
    "build_table",
    "select_channel",
]
