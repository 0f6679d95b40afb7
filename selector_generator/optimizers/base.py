"""
Base class for descriptor set optimizers.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Optional, Sequence

from bs4.element import Tag

from selector_generator.builders.builder import SelectorBuilder
from selector_generator.dom.nodes import all_present
from selector_generator.dom.service import DocumentService
from selector_generator.models import SelectorDescriptor

logger = logging.getLogger(__name__)


class SelectorOptimizer(ABC):
    """Reduces a descriptor set while it keeps matching the targets."""

    def __init__(self, document: DocumentService, builder: SelectorBuilder) -> None:
        self.document = document
        self.builder = builder

    def count_matches(
        self, targets: Sequence[Tag], descriptors: Sequence[SelectorDescriptor]
    ) -> Optional[int]:
        """Count the elements matched by a descriptor set.

        Returns:
            The match count, or None when the selector is empty, matches
            nothing, or misses one of the targets.
        """
        selector = self.builder.build(descriptors)
        if not selector:
            return None

        matches = self.document.query_all(selector)
        if not matches:
            return None
        if not all_present(targets, matches):
            logger.debug(f"Selector {selector!r} misses a target")
            return None

        return len(matches)

    @abstractmethod
    def find_best(
        self, targets: Sequence[Tag], descriptors: Sequence[SelectorDescriptor]
    ) -> list[SelectorDescriptor]:
        """Return the reduced descriptor set."""
        ...
