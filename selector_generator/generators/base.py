"""
Base class shared by all descriptor generators.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Optional, Sequence, Union

from bs4.element import Tag

from selector_generator.config.options import GeneratorOptions
from selector_generator.dom.validator import ElementValidator
from selector_generator.models import (
    DescriptorKey,
    SelectorDescriptor,
    by_selector,
    intersect_descriptors,
)

logger = logging.getLogger(__name__)

Targets = Union[Tag, Sequence[Tag]]


class DescriptorGenerator(ABC):
    """Generates descriptors for one node and intersects them across nodes.

    Subclasses implement :meth:`generate_for`; :meth:`generate` validates the
    targets and keeps only the descriptors every target produced, compared
    with :attr:`intersection_key`.
    """

    intersection_key: DescriptorKey = staticmethod(by_selector)

    def __init__(self, options: Optional[GeneratorOptions] = None) -> None:
        self.options = options or GeneratorOptions()

    @property
    def costs(self):
        return self.options.costs

    @property
    def blacklist(self):
        return self.options.blacklist

    def generate(self, nodes: Targets) -> list[SelectorDescriptor]:
        """Generate descriptors valid for all target nodes.

        Args:
            nodes: One element or a sequence of elements.

        Returns:
            Descriptors common to every target.

        Raises:
            InvalidNodeKindError: If a target is not an element.
        """
        if isinstance(nodes, Tag):
            nodes = [nodes]
        for node in nodes:
            ElementValidator.assert_valid(node)

        per_node = [self.generate_for(node) for node in nodes]
        descriptors = intersect_descriptors(per_node, key=self.intersection_key)

        logger.debug(
            f"{type(self).__name__}: {len(descriptors)} descriptor(s) "
            f"for {len(per_node)} node(s)"
        )
        return descriptors

    @abstractmethod
    def generate_for(self, node: Tag) -> list[SelectorDescriptor]:
        """Generate descriptors for a single validated node."""
        ...
