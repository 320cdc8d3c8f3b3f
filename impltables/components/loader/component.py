"""
Loader component - Implementor table loading.

Shell Layer - wires the ports into the loader for one load.
"""

from __future__ import annotations

from ._impl import ImplementorLoader
from .models import LoadInput, LoadOutput
from .ports import PendingSlotPort, RegistrationHookPort


def run_load(
    input_data: LoadInput,
    hooks: RegistrationHookPort,
    pending: PendingSlotPort,
) -> LoadOutput:
    """Build the table in ``input_data`` and deliver it."""
    loader = ImplementorLoader(hooks=hooks, pending=pending)
    return loader.load(input_data.literal, trait=input_data.trait)
