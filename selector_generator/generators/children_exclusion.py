"""
Generates :not(:has()) descriptors from descendants of look-alike elements.
"""

from __future__ import annotations

import logging
from typing import Optional

import soupsieve as sv
from bs4.element import Tag

from selector_generator.builders.builder import SelectorBuilder
from selector_generator.config.options import GeneratorOptions
from selector_generator.dom.nodes import attribute_names, class_list, contains, element_id
from selector_generator.dom.service import DocumentService
from selector_generator.generators.base import DescriptorGenerator
from selector_generator.generators.local import LocalSelectorGenerator
from selector_generator.models import SelectorDescriptor, SelectorType
from selector_generator.utils.blacklist import BlacklistMatcher

logger = logging.getLogger(__name__)


class ChildrenExclusionGenerator(DescriptorGenerator):
    """Exclusions based on what look-alike elements contain.

    Every descendant of an element matching the target's local selector is
    inspected, except those inside the target itself. An id, class or
    attribute that such a descendant carries and that nothing in the
    target's subtree exposes becomes ``:not(:has(...))``.
    """

    def __init__(
        self,
        document: DocumentService,
        local_generator: LocalSelectorGenerator,
        builder: SelectorBuilder,
        options: Optional[GeneratorOptions] = None,
    ) -> None:
        super().__init__(options)
        self.document = document
        self.local_generator = local_generator
        self.builder = builder

    def _exposed(self, node: Tag, selector: str) -> bool:
        return self.document.query_first_within(node, selector) is not None

    def generate_for(self, node: Tag) -> list[SelectorDescriptor]:
        costs = self.costs
        blacklist = self.blacklist
        ignored = set(self.options.ignored_attributes_for_exclusion)

        base_selector = self.builder.build(self.local_generator.generate([node]))
        descendants = self.document.query_all(f"{base_selector} *")

        ids: list[str] = []
        classes: list[str] = []
        attributes: list[str] = []

        for descendant in descendants:
            if contains(node, descendant):
                continue

            value = element_id(descendant)
            if value and not BlacklistMatcher.matches(value, blacklist.ids):
                selector = "#" + sv.escape(value)
                if selector not in ids and not self._exposed(node, selector):
                    ids.append(selector)

            for class_name in class_list(descendant):
                if BlacklistMatcher.matches(class_name, blacklist.classes):
                    continue
                selector = "." + sv.escape(class_name)
                if selector not in classes and not self._exposed(node, selector):
                    classes.append(selector)

            for name in attribute_names(descendant):
                if name.lower() in ignored:
                    continue
                if BlacklistMatcher.matches(name, blacklist.attributes):
                    continue
                selector = "[" + sv.escape(name) + "]"
                if selector not in attributes and not self._exposed(node, selector):
                    attributes.append(selector)

        logger.debug(
            f"Children exclusion over {len(descendants)} descendant(s): "
            f"{len(ids)} id(s), {len(classes)} class(es), {len(attributes)} attribute(s)"
        )

        base_cost = costs.negation + costs.is_has + costs.children
        descriptors = [
            SelectorDescriptor(base_cost + costs.id, 0, SelectorType.PSEUDO, f":not(:has({s}))")
            for s in ids
        ]
        descriptors.extend(
            SelectorDescriptor(
                base_cost + costs.class_name, 0, SelectorType.PSEUDO, f":not(:has({s}))"
            )
            for s in classes
        )
        descriptors.extend(
            SelectorDescriptor(base_cost + costs.attr, 0, SelectorType.PSEUDO, f":not(:has({s}))")
            for s in attributes
        )
        return descriptors
