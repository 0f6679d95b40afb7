"""
Lifts ancestor descriptors to positive levels.
"""

from __future__ import annotations

from typing import Optional

from bs4.element import Tag

from selector_generator.config.options import GeneratorOptions
from selector_generator.dom.nodes import ancestors
from selector_generator.generators.base import DescriptorGenerator
from selector_generator.generators.local import LocalSelectorGenerator
from selector_generator.generators.local_exclusion import LocalExclusionGenerator
from selector_generator.generators.sibling import SiblingSelectorGenerator
from selector_generator.models import SelectorDescriptor


class ParentSelectorGenerator(DescriptorGenerator):
    """Ancestor descriptors.

    For the ancestor ``n`` hops up, its local, local exclusion and sibling
    descriptors are re-emitted at level ``n`` with ``n * distance + parent``
    added to their cost.
    """

    def __init__(
        self,
        local_generator: LocalSelectorGenerator,
        exclusion_generator: LocalExclusionGenerator,
        sibling_generator: SiblingSelectorGenerator,
        options: Optional[GeneratorOptions] = None,
    ) -> None:
        super().__init__(options)
        self.local_generator = local_generator
        self.exclusion_generator = exclusion_generator
        self.sibling_generator = sibling_generator

    def generate_for(self, node: Tag) -> list[SelectorDescriptor]:
        costs = self.costs
        descriptors: list[SelectorDescriptor] = []

        for level, ancestor in enumerate(ancestors(node), start=1):
            extra_cost = level * costs.distance + costs.parent
            for generator in (
                self.local_generator,
                self.exclusion_generator,
                self.sibling_generator,
            ):
                descriptors.extend(
                    d.with_level(level, extra_cost) for d in generator.generate([ancestor])
                )

        return descriptors
