"""
Generates positional and sibling-relation descriptors.
"""

from __future__ import annotations

from typing import Optional

from bs4.element import Tag

from selector_generator.config.options import GeneratorOptions
from selector_generator.dom.nodes import (
    next_element_siblings,
    previous_element_siblings,
)
from selector_generator.generators.base import DescriptorGenerator
from selector_generator.generators.local import LocalSelectorGenerator
from selector_generator.models import SelectorDescriptor, SelectorType


class SiblingSelectorGenerator(DescriptorGenerator):
    """Position among siblings and the shape of the surrounding siblings.

    Emits ``:first-child``, ``:last-child``, ``:only-child``,
    ``:nth-child(n)`` and ``:nth-last-child(n)`` as they apply, then
    ``:is(X ~ *)`` for every local descriptor ``X`` of an earlier sibling
    and ``:has(~ X)`` for every local descriptor of a later sibling.
    """

    def __init__(
        self,
        local_generator: LocalSelectorGenerator,
        options: Optional[GeneratorOptions] = None,
    ) -> None:
        super().__init__(options)
        self.local_generator = local_generator

    def generate_for(self, node: Tag) -> list[SelectorDescriptor]:
        costs = self.costs
        previous = list(previous_element_siblings(node))
        following = list(next_element_siblings(node))
        descriptors: list[SelectorDescriptor] = []

        def add(cost: float, selector: str) -> None:
            descriptors.append(SelectorDescriptor(cost, 0, SelectorType.PSEUDO, selector))

        prev_count = index = len(previous)
        # 1-based position counted from the end
        next_count = len(following) + 1 if following else 0

        if not previous:
            add((next_count + 1) * costs.distance + costs.sibling, ":first-child")
        else:
            add((prev_count + 1) * costs.distance + costs.sibling, f":nth-child({index + 1})")

        if not following:
            add((prev_count + 1) * costs.distance + costs.sibling, ":last-child")
        elif prev_count > 0:
            add(
                (next_count + 1) * costs.distance + costs.sibling,
                f":nth-last-child({next_count})",
            )

        if not previous and not following:
            add(costs.sibling, ":only-child")

        relation_cost = costs.sibling + costs.is_has
        seen: set[str] = set()
        for sibling in previous:
            for local in self.local_generator.generate([sibling]):
                selector = f":is({local.selector} ~ *)"
                if selector not in seen:
                    seen.add(selector)
                    add(relation_cost + local.cost, selector)

        for sibling in following:
            for local in self.local_generator.generate([sibling]):
                selector = f":has(~ {local.selector})"
                if selector not in seen:
                    seen.add(selector)
                    add(relation_cost + local.cost, selector)

        return descriptors
