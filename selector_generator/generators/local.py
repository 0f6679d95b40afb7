"""
Generates descriptors from an element's own id, tag, classes and attributes.
"""

from __future__ import annotations

import soupsieve as sv
from bs4.element import Tag

from selector_generator.dom.nodes import (
    attribute_names,
    class_list,
    element_id,
    local_name,
)
from selector_generator.generators.base import DescriptorGenerator
from selector_generator.models import SelectorDescriptor, SelectorType, by_key
from selector_generator.utils.blacklist import BlacklistMatcher


class LocalSelectorGenerator(DescriptorGenerator):
    """Local identity descriptors.

    For ``<button id="go" class="btn primary" type="submit">``:
    ``#go``, ``button``, ``.btn``, ``.primary``, ``[type]``.

    Multiple targets keep the descriptors whose level, type and selector
    are shared by all of them.
    """

    intersection_key = staticmethod(by_key)

    def generate_for(self, node: Tag) -> list[SelectorDescriptor]:
        costs = self.costs
        blacklist = self.blacklist
        ignored = set(self.options.ignored_attributes)
        descriptors = []

        node_id = element_id(node)
        if node_id and not BlacklistMatcher.matches(node_id, blacklist.ids):
            descriptors.append(
                SelectorDescriptor(costs.id, 0, SelectorType.ID, "#" + sv.escape(node_id))
            )

        # always present
        descriptors.append(
            SelectorDescriptor(costs.tag, 0, SelectorType.TAG, local_name(node))
        )

        for name in attribute_names(node):
            if name.lower() in ignored:
                continue

            if name == "class":
                for class_name in class_list(node):
                    if not BlacklistMatcher.matches(class_name, blacklist.classes):
                        descriptors.append(
                            SelectorDescriptor(
                                costs.class_name,
                                0,
                                SelectorType.CLASS,
                                "." + sv.escape(class_name),
                            )
                        )
                continue

            if not BlacklistMatcher.matches(name, blacklist.attributes):
                descriptors.append(
                    SelectorDescriptor(
                        costs.attr, 0, SelectorType.ATTR, "[" + sv.escape(name) + "]"
                    )
                )

        return descriptors
