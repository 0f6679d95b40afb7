"""
Shrinks a failing descriptor set to the part that still fails.
"""

from __future__ import annotations

from typing import Sequence

from bs4.element import Tag

from selector_generator.builders.builder import SelectorBuilder
from selector_generator.dom.nodes import contains_node
from selector_generator.dom.service import DocumentService
from selector_generator.models import SelectorDescriptor


class DebugOptimizer:
    """Diagnostic helper for descriptor sets that do not match a node.

    Descriptors are dropped from last to first whenever the remainder
    still fails to match, leaving a small set that reproduces the failure.
    """

    def __init__(self, document: DocumentService, builder: SelectorBuilder) -> None:
        self.document = document
        self.builder = builder

    def matches(self, node: Tag, descriptors: Sequence[SelectorDescriptor]) -> bool:
        selector = self.builder.build(descriptors)
        if not selector:
            return False
        return contains_node(self.document.query_all(selector), node)

    def find_minimal_non_matching_set(
        self, node: Tag, descriptors: Sequence[SelectorDescriptor]
    ) -> list[SelectorDescriptor]:
        result = list(descriptors)
        for index in range(len(result) - 1, -1, -1):
            trial = result[:index] + result[index + 1:]
            if not self.matches(node, trial):
                result = trial
        return result
