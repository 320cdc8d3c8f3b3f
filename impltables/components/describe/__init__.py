"""
Describe component - Plain-text views of implementor entries.
"""

from ._impl import describe_entry
from .component import run_describe
from .models import EntryDescription, LinkedItem

__all__ = [
    "run_describe",
    "describe_entry",
    "EntryDescription",
    "LinkedItem",
]
