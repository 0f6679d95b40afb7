"""
SelectorGenerator - wires generators, builder and optimizer together.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Optional, Union

from bs4.element import Tag

from selector_generator.builders.builder import SelectorBuilder
from selector_generator.config.options import GeneratorOptions, OptimizerStrategy
from selector_generator.dom.nodes import owner_document, unique_nodes
from selector_generator.dom.service import DocumentService, SoupDocumentService
from selector_generator.dom.validator import ElementValidator
from selector_generator.errors import IncompatibleTargetsError
from selector_generator.generators import (
    ChildrenExclusionGenerator,
    ChildrenSelectorGenerator,
    LocalExclusionGenerator,
    LocalSelectorGenerator,
    ParentSelectorGenerator,
    SiblingSelectorGenerator,
)
from selector_generator.models import SelectorDescriptor, dedupe_descriptors
from selector_generator.optimizers import (
    BottomUpSelectorOptimizer,
    DebugOptimizer,
    SelectorOptimizer,
    TopDownSelectorOptimizer,
)

logger = logging.getLogger(__name__)

Nodes = Union[Tag, Iterable[Tag]]


def normalize_targets(nodes: Nodes) -> list[Tag]:
    """Turn one node or an iterable of nodes into a validated target list.

    Raises:
        InvalidNodeKindError: If a target is not an element.
        IncompatibleTargetsError: If there are no targets or they belong
            to different documents.
    """
    if isinstance(nodes, (Tag, str)) or not isinstance(nodes, Iterable):
        nodes = [nodes]

    targets = unique_nodes(nodes)
    if not targets:
        raise IncompatibleTargetsError("At least one target element is required")

    for target in targets:
        ElementValidator.assert_valid(target)

    document = owner_document(targets[0])
    if any(owner_document(target) is not document for target in targets[1:]):
        raise IncompatibleTargetsError("Targets belong to different documents")

    return targets


class SelectorGenerator:
    """Generates minimal unique CSS selectors for elements of one document.

    Example:
        document = SoupDocumentService.from_html(html)
        generator = SelectorGenerator(document)
        selector = generator.get_selector(document.query_first("button"))
    """

    def __init__(
        self,
        document: DocumentService,
        options: Optional[GeneratorOptions] = None,
    ) -> None:
        """Initialize the generator.

        Args:
            document: Service used to evaluate selectors.
            options: Costs, blacklists, ignore lists and optimizer choice.
        """
        self.document = document
        self.options = options or GeneratorOptions()
        self.builder = SelectorBuilder()

        self.local_generator = LocalSelectorGenerator(self.options)
        self.exclusion_generator = LocalExclusionGenerator(
            document, self.local_generator, self.builder, self.options
        )
        self.children_generator = ChildrenSelectorGenerator(self.local_generator, self.options)
        self.children_exclusion_generator = ChildrenExclusionGenerator(
            document, self.local_generator, self.builder, self.options
        )
        self.sibling_generator = SiblingSelectorGenerator(self.local_generator, self.options)
        self.parent_generator = ParentSelectorGenerator(
            self.local_generator,
            self.exclusion_generator,
            self.sibling_generator,
            self.options,
        )

        self.optimizer = self._create_optimizer()

    def _create_optimizer(self) -> SelectorOptimizer:
        if self.options.optimizer == OptimizerStrategy.BOTTOM_UP:
            return BottomUpSelectorOptimizer(
                self.document, self.builder, self.options.bottom_up_threshold
            )
        return TopDownSelectorOptimizer(
            self.document, self.builder, DebugOptimizer(self.document, self.builder)
        )

    def generate_descriptors(self, nodes: Nodes) -> list[SelectorDescriptor]:
        """Collect every candidate descriptor valid for all targets."""
        targets = normalize_targets(nodes)

        descriptors: list[SelectorDescriptor] = []
        for generator in (
            self.local_generator,
            self.exclusion_generator,
            self.children_generator,
            self.sibling_generator,
            self.parent_generator,
            self.children_exclusion_generator,
        ):
            descriptors.extend(generator.generate(targets))

        unique = [
            d for d in dedupe_descriptors(descriptors)
            if self.document.is_valid_selector(d.selector)
        ]
        logger.debug(
            f"Generated {len(unique)} candidate descriptor(s) "
            f"({len(descriptors)} before dedupe) for {len(targets)} target(s)"
        )
        return unique

    def find_best(self, nodes: Nodes) -> list[SelectorDescriptor]:
        """Return the optimized descriptor set for the targets."""
        targets = normalize_targets(nodes)
        return self.optimizer.find_best(targets, self.generate_descriptors(targets))

    def get_selector(self, nodes: Nodes) -> str:
        """Return a CSS selector matching exactly the targets.

        Args:
            nodes: One element or an iterable of elements.

        Returns:
            The selector string.

        Raises:
            InvalidNodeKindError: If a target is not an element.
            IncompatibleTargetsError: If there are no targets or they belong
                to different documents.
        """
        selector = self.builder.build(self.find_best(nodes))
        logger.debug(f"Selector: {selector!r}")
        return selector


def get_selector(
    nodes: Nodes,
    document: Optional[DocumentService] = None,
    options: Optional[GeneratorOptions] = None,
) -> str:
    """Return a minimal CSS selector matching exactly the given elements.

    Args:
        nodes: One element or an iterable of elements of the same document.
        document: Service used to evaluate selectors. Defaults to a
            SoupDocumentService over the targets' document.
        options: Generator options.

    Example:
        soup = BeautifulSoup(html, "lxml")
        get_selector(soup.find("button", class_="primary"))
        # -> "button.primary"
    """
    targets = normalize_targets(nodes)
    if document is None:
        soup = owner_document(targets[0])
        if soup is None:
            raise IncompatibleTargetsError("Target is not attached to a document")
        document = SoupDocumentService(soup)
    return SelectorGenerator(document, options).get_selector(targets)
