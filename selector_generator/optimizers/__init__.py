"""
Descriptor set optimizers.
"""

from selector_generator.optimizers.base import SelectorOptimizer
from selector_generator.optimizers.bottom_up import BottomUpSelectorOptimizer
from selector_generator.optimizers.debug import DebugOptimizer
from selector_generator.optimizers.top_down import TopDownSelectorOptimizer

__all__ = [
    "SelectorOptimizer",
    "TopDownSelectorOptimizer",
    "BottomUpSelectorOptimizer",
    "DebugOptimizer",
]
