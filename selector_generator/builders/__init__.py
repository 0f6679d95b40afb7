"""
Selector builders for selector-generator.
"""

from selector_generator.builders.builder import TYPE_ORDER, SelectorBuilder

__all__ = [
    "SelectorBuilder",
    "TYPE_ORDER",
]
