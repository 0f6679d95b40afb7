"""
Top-down optimizer: start from every descriptor and remove greedily.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from bs4.element import Tag

from selector_generator.builders.builder import SelectorBuilder
from selector_generator.dom.service import DocumentService
from selector_generator.models import SelectorDescriptor, SelectorType, total_cost
from selector_generator.optimizers.base import SelectorOptimizer
from selector_generator.optimizers.debug import DebugOptimizer

logger = logging.getLogger(__name__)


def _contains_descriptor(
    descriptors: Sequence[SelectorDescriptor], descriptor: SelectorDescriptor
) -> bool:
    return any(d is descriptor for d in descriptors)


class TopDownSelectorOptimizer(SelectorOptimizer):
    """Greedy removal, most expensive descriptor first.

    The full set must match exactly the targets. Descriptors are then tried
    for removal in descending cost order; the first removal that keeps the
    match exact is committed and the scan restarts. The target's own tag is
    never removed.

    If the full set does not match exactly the targets, the set is returned
    unchanged and a warning is logged. When it misses a target, the warning
    also names the smallest subset that still fails to match.
    """

    def __init__(
        self,
        document: DocumentService,
        builder: SelectorBuilder,
        debug_optimizer: Optional[DebugOptimizer] = None,
    ) -> None:
        super().__init__(document, builder)
        self.debug_optimizer = debug_optimizer or DebugOptimizer(document, builder)

    def find_best(
        self, targets: Sequence[Tag], descriptors: Sequence[SelectorDescriptor]
    ) -> list[SelectorDescriptor]:
        targets = list(targets)
        target_count = len(targets)
        current = list(descriptors)

        count = self.count_matches(targets, current)
        if count is None:
            logger.warning(
                f"Full descriptor set misses the targets: {self.builder.build(current)!r}"
            )
            minimal = self.debug_optimizer.find_minimal_non_matching_set(targets[0], current)
            logger.warning(f"Smallest non-matching subset: {self.builder.build(minimal)!r}")
            return current
        if count != target_count:
            logger.warning(
                f"Full descriptor set matches {count} element(s) "
                f"instead of {target_count}: {self.builder.build(current)!r}"
            )
            return current

        ordered = sorted(current, key=lambda d: d.cost, reverse=True)

        improved = True
        while improved and len(current) > 1:
            improved = False
            for candidate in ordered:
                if not _contains_descriptor(current, candidate):
                    continue
                if candidate.level == 0 and candidate.type == SelectorType.TAG:
                    continue

                trial = [d for d in current if d is not candidate]
                if self.count_matches(targets, trial) == target_count:
                    current = trial
                    improved = True
                    break

        logger.debug(
            f"Top-down kept {len(current)} of {len(descriptors)} descriptor(s), "
            f"cost {total_cost(current)}: {self.builder.build(current)!r}"
        )
        return current
