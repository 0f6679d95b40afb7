"""
Utility helpers for selector-generator.
"""

from selector_generator.utils.attributes import AttributeCollector, ExtraMarks
from selector_generator.utils.blacklist import BlacklistMatcher

__all__ = [
    "AttributeCollector",
    "ExtraMarks",
    "BlacklistMatcher",
]
