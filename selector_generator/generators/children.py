"""
Generates :has() descriptors from an element's descendant structure.
"""

from __future__ import annotations

from typing import Optional

from bs4.element import Tag

from selector_generator.config.options import GeneratorOptions
from selector_generator.dom.nodes import child_nodes, element_children
from selector_generator.generators.base import DescriptorGenerator
from selector_generator.generators.local import LocalSelectorGenerator
from selector_generator.models import SelectorDescriptor, SelectorType


class ChildrenSelectorGenerator(DescriptorGenerator):
    """Descendant-shape descriptors.

    Walks the whole subtree of the target. At depth ``d`` (0 for the
    target's own children) the path to the current element is ``>*``
    repeated ``d`` times, and every descriptor is emitted in an exact
    form (``:has(>*>.x)``) and, below the first level, in a looser
    descendant form (``:has(* .x)``).
    """

    def __init__(
        self,
        local_generator: LocalSelectorGenerator,
        options: Optional[GeneratorOptions] = None,
    ) -> None:
        super().__init__(options)
        self.local_generator = local_generator

    def generate_for(self, node: Tag) -> list[SelectorDescriptor]:
        descriptors: list[SelectorDescriptor] = []
        self._process_children(node, 0, descriptors)
        return descriptors

    def _process_children(
        self, node: Tag, depth: int, descriptors: list[SelectorDescriptor]
    ) -> None:
        costs = self.costs
        path = ">*" * depth
        base_cost = costs.is_has + costs.children
        exact_cost = depth * costs.distance + base_cost
        loose_cost = costs.distance + base_cost

        def add(cost: float, selector: str) -> None:
            descriptors.append(SelectorDescriptor(cost, 0, SelectorType.PSEUDO, selector))

        children = element_children(node)

        if not children:
            node_count = len(child_nodes(node))
            if node_count > 0 and depth == 0:
                # text or comments only
                add(exact_cost + costs.negation, ":not(:has(>*))")
            elif node_count == 0:
                if depth > 0:
                    add(exact_cost, f":has({path}:empty)")
                    add(loose_cost, ":has(:empty)")
                else:
                    add(exact_cost, ":empty")
            return

        count = len(children)
        if depth > 0:
            add(exact_cost, f":has({path}>*:nth-child({count}):last-child)")
            add(loose_cost, f":has(* :nth-child({count}):last-child)")
        else:
            add(exact_cost, f":has(:nth-child({count}):last-child)")

        for child in children:
            for local in self.local_generator.generate([child]):
                if depth > 0:
                    add(exact_cost + local.cost, f":has({path}>{local.selector})")
                    add(loose_cost + local.cost, f":has(* {local.selector})")
                else:
                    add(exact_cost + local.cost, f":has(>{local.selector})")
            self._process_children(child, depth + 1, descriptors)
