"""
Generates :not() descriptors that rule out look-alike elements.
"""

from __future__ import annotations

from typing import Optional

from bs4.element import Tag

from selector_generator.builders.builder import SelectorBuilder
from selector_generator.config.options import GeneratorOptions
from selector_generator.dom.service import DocumentService
from selector_generator.generators.base import DescriptorGenerator
from selector_generator.generators.local import LocalSelectorGenerator
from selector_generator.models import SelectorDescriptor, SelectorType
from selector_generator.utils.attributes import AttributeCollector


class LocalExclusionGenerator(DescriptorGenerator):
    """Exclusions against elements sharing the target's local selector.

    The target's local descriptors are built into a base selector and
    queried. Every id, class or attribute found on another match but not on
    the target becomes ``:not(#id)``, ``:not(.class)`` or ``:not([attr])``.
    """

    def __init__(
        self,
        document: DocumentService,
        local_generator: LocalSelectorGenerator,
        builder: SelectorBuilder,
        options: Optional[GeneratorOptions] = None,
    ) -> None:
        """Initialize the generator.

        Args:
            document: Service used to find look-alike elements.
            local_generator: Source of the base selector.
            builder: Renders the base selector.
            options: Costs, blacklists and ignore lists.
        """
        super().__init__(options)
        self.document = document
        self.local_generator = local_generator
        self.builder = builder

    def generate_for(self, node: Tag) -> list[SelectorDescriptor]:
        costs = self.costs
        base_selector = self.builder.build(self.local_generator.generate([node]))
        matches = self.document.query_all(base_selector)

        collector = AttributeCollector(
            node,
            self.blacklist,
            ignored_attributes=self.options.ignored_attributes_for_exclusion,
        )
        marks = collector.collect_all(matches)

        descriptors = [
            SelectorDescriptor(
                costs.negation + costs.id, 0, SelectorType.PSEUDO, f":not(#{value})"
            )
            for value in marks.ids
        ]
        descriptors.extend(
            SelectorDescriptor(
                costs.negation + costs.class_name, 0, SelectorType.PSEUDO, f":not(.{value})"
            )
            for value in marks.classes
        )
        descriptors.extend(
            SelectorDescriptor(
                costs.negation + costs.attr, 0, SelectorType.PSEUDO, f":not([{value}])"
            )
            for value in marks.attributes
        )
        return descriptors
