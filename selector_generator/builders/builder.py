"""
Builds CSS selector strings from selector descriptor sets.
"""

from __future__ import annotations

from collections import defaultdict
from typing import Iterable, Sequence

from selector_generator.models import SelectorDescriptor, SelectorType

# Order of simple selectors inside one compound selector
TYPE_ORDER: tuple[SelectorType, ...] = (
    SelectorType.TAG,
    SelectorType.ID,
    SelectorType.CLASS,
    SelectorType.ATTR,
    SelectorType.PSEUDO,
)


class SelectorBuilder:
    """Linearizes descriptor sets into selector strings.

    Descriptors with ``level <= 0`` form the target's own compound selector.
    Ancestor levels are prepended in ascending order, joined with ``>`` when
    a level directly follows the previous one and with a space otherwise.

    Example:
        [div@1, #app@1, button@0, .primary@0] -> "div#app > button.primary"
        [body@2, button@0]                    -> "body button"
    """

    @staticmethod
    def build_compound(descriptors: Iterable[SelectorDescriptor]) -> str:
        """Join fragments of one level in tag, id, class, attr, pseudo order."""
        descriptors = list(descriptors)
        return "".join(
            d.selector
            for selector_type in TYPE_ORDER
            for d in descriptors
            if d.type == selector_type
        )

    def build(self, descriptors: Sequence[SelectorDescriptor]) -> str:
        """Build a complete CSS selector string.

        Args:
            descriptors: Descriptor set, in any order.

        Returns:
            The selector. An empty own selector renders as ``*``.
        """
        own = [d for d in descriptors if d.level <= 0]
        selector = self.build_compound(own) or "*"

        by_level: dict[int, list[SelectorDescriptor]] = defaultdict(list)
        for d in descriptors:
            if d.level > 0:
                by_level[d.level].append(d)

        previous_level = 0
        for level in sorted(by_level):
            level_selector = self.build_compound(by_level[level])
            combinator = " > " if level == previous_level + 1 else " "
            selector = level_selector + combinator + selector
            previous_level = level

        return selector
