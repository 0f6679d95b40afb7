"""
Descriptor generators.

Each generator turns one or more target elements into candidate selector
descriptors that are valid for every target.
"""

from selector_generator.generators.base import DescriptorGenerator
from selector_generator.generators.children import ChildrenSelectorGenerator
from selector_generator.generators.children_exclusion import ChildrenExclusionGenerator
from selector_generator.generators.local import LocalSelectorGenerator
from selector_generator.generators.local_exclusion import LocalExclusionGenerator
from selector_generator.generators.parent import ParentSelectorGenerator
from selector_generator.generators.sibling import SiblingSelectorGenerator

__all__ = [
    "DescriptorGenerator",
    "LocalSelectorGenerator",
    "LocalExclusionGenerator",
    "ChildrenSelectorGenerator",
    "ChildrenExclusionGenerator",
    "SiblingSelectorGenerator",
    "ParentSelectorGenerator",
]
