"""
Core data models for selector-generator.

This module defines the selector descriptor, the unit of currency shared by
every generator, the builder and the optimizers.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Callable, Hashable, Iterable, Sequence


class SelectorType(str, Enum):
    """Kind of CSS fragment a descriptor contributes.

    The declaration order is also the order in which the builder joins
    fragments of one compound selector.
    """

    TAG = "tag"
    ID = "id"
    CLASS = "class"
    ATTR = "attr"
    PSEUDO = "pseudo"


@dataclass(frozen=True)
class SelectorDescriptor:
    """One candidate CSS fragment plus its cost, level and type.

    Attributes:
        cost: Non-negative, lower is better. Costs add up across a set.
        level: 0 for the target itself, n for the n-th ancestor.
        type: Fragment kind, drives builder ordering.
        selector: Literal CSS fragment (e.g. ``#foo``, ``:nth-child(2)``).
    """

    cost: float
    level: int
    type: SelectorType
    selector: str

    def with_level(self, level: int, extra_cost: float = 0) -> "SelectorDescriptor":
        """Return a copy moved to ``level`` with ``extra_cost`` added."""
        return replace(self, level=level, cost=self.cost + extra_cost)

    def key(self) -> tuple[int, str, str]:
        """Identity of the fragment regardless of its cost."""
        return (self.level, self.type.value, self.selector)

    def __str__(self) -> str:
        return self.selector


DescriptorKey = Callable[[SelectorDescriptor], Hashable]


def by_selector(descriptor: SelectorDescriptor) -> Hashable:
    return descriptor.selector


def by_key(descriptor: SelectorDescriptor) -> Hashable:
    return descriptor.key()


def intersect_descriptors(
    per_node: Sequence[Sequence[SelectorDescriptor]],
    key: DescriptorKey = by_selector,
) -> list[SelectorDescriptor]:
    """Keep the descriptors of the first set that every other set shares.

    Args:
        per_node: One descriptor list per target node.
        key: Function deciding when two descriptors are "the same".

    Returns:
        Descriptors from ``per_node[0]`` (in order) whose key occurs in
        every set.
    """
    if not per_node:
        return []

    first, *rest = per_node
    if not rest:
        return list(first)

    other_keys = [{key(d) for d in descriptors} for descriptors in rest]
    return [d for d in first if all(key(d) in keys for keys in other_keys)]


def total_cost(descriptors: Iterable[SelectorDescriptor]) -> float:
    """Sum of the costs of a descriptor set."""
    return sum(d.cost for d in descriptors)


def dedupe_descriptors(
    descriptors: Iterable[SelectorDescriptor],
) -> list[SelectorDescriptor]:
    """Collapse descriptors sharing ``(level, type, selector)``.

    The cheapest occurrence wins; the position of the first occurrence is
    kept so the result stays deterministic.
    """
    best: dict[tuple[int, str, str], SelectorDescriptor] = {}
    for descriptor in descriptors:
        current = best.get(descriptor.key())
        # reassigning an existing key keeps its insertion position
        if current is None or descriptor.cost < current.cost:
            best[descriptor.key()] = descriptor
    return list(best.values())


__all__ = [
    "SelectorType",
    "SelectorDescriptor",
    "DescriptorKey",
    "by_selector",
    "by_key",
    "intersect_descriptors",
    "total_cost",
    "dedupe_descriptors",
]
