"""
Bottom-up optimizer: start from nothing and add greedily.
"""

from __future__ import annotations

import logging
import math
from typing import Sequence

from bs4.element import Tag

from selector_generator.builders.builder import SelectorBuilder
from selector_generator.config.defaults import DEFAULT_BOTTOM_UP_THRESHOLD
from selector_generator.dom.service import DocumentService
from selector_generator.models import SelectorDescriptor
from selector_generator.optimizers.base import SelectorOptimizer

logger = logging.getLogger(__name__)


class BottomUpSelectorOptimizer(SelectorOptimizer):
    """Greedy construction with a shrinking improvement threshold.

    Candidates are scanned in ascending cost order. A round adds the
    candidate that lowers the match count by at least ``threshold``
    compared to the best trial seen so far in that round. When no candidate
    qualifies the threshold is halved, down to 1. An ancestor descriptor is
    never the first one added.

    The result may still match more than the targets when no combination
    narrows the match count further.
    """

    def __init__(
        self,
        document: DocumentService,
        builder: SelectorBuilder,
        threshold: float = DEFAULT_BOTTOM_UP_THRESHOLD,
    ) -> None:
        super().__init__(document, builder)
        self.threshold = threshold

    def _value(self, targets: Sequence[Tag], descriptors: Sequence[SelectorDescriptor]) -> float:
        count = self.count_matches(targets, descriptors)
        return math.inf if count is None else count

    def find_best(
        self, targets: Sequence[Tag], descriptors: Sequence[SelectorDescriptor]
    ) -> list[SelectorDescriptor]:
        targets = list(targets)
        target_count = len(targets)
        ordered = sorted(descriptors, key=lambda d: d.cost)

        best: list[SelectorDescriptor] = []
        best_value = math.inf
        threshold = self.threshold

        while threshold >= 1:
            improving = True
            while improving:
                improving = False
                local_best, local_value = best, best_value

                for candidate in ordered:
                    if any(d is candidate for d in best):
                        continue
                    if not best and candidate.level > 0:
                        continue

                    trial = best + [candidate]
                    value = self._value(targets, trial)
                    if local_value - value >= threshold:
                        local_best, local_value = trial, value
                    if value == target_count:
                        break

                if best_value - local_value > 0:
                    best, best_value = local_best, local_value
                    if best_value == target_count:
                        logger.debug(f"Bottom-up found {self.builder.build(best)!r}")
                        return best
                    improving = True

                if local_value == target_count:
                    break

            threshold /= 2

        logger.debug(
            f"Bottom-up stopped at {best_value} match(es) for {target_count} target(s)"
        )
        return best
