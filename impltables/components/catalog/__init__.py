"""
Catalog component - Per-trait index of delivered implementor tables.
"""

from ._impl import ImplementorCatalog
from .component import run_catalog
from .models import CrateSummary, TraitSummary

__all__ = [
    "run_catalog",
    "ImplementorCatalog",
    "CrateSummary",
    "TraitSummary",
]
