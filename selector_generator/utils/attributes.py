"""
Collects identifying marks other elements carry and a target lacks.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

import soupsieve as sv
from bs4.element import Tag

from selector_generator.config.options import BlacklistOptions
from selector_generator.dom.nodes import (
    attribute_names,
    class_list,
    element_id,
    has_attribute,
)
from selector_generator.utils.blacklist import BlacklistMatcher


@dataclass
class ExtraMarks:
    """CSS-escaped ids, classes and attribute names found on other elements."""

    ids: list[str] = field(default_factory=list)
    classes: list[str] = field(default_factory=list)
    attributes: list[str] = field(default_factory=list)


class AttributeCollector:
    """Compares elements against a target element.

    Every collector skips the target itself, drops blacklisted values and
    returns each value once.
    """

    def __init__(
        self,
        target: Tag,
        blacklist: BlacklistOptions,
        ignored_attributes: Iterable[str] = (),
    ) -> None:
        """Initialize the collector.

        Args:
            target: Element to compare against.
            blacklist: Patterns for ids, classes and attribute names.
            ignored_attributes: Attribute names never collected.
        """
        self.target = target
        self.blacklist = blacklist
        self.ignored_attributes = {name.lower() for name in ignored_attributes}

    def _others(self, elements: Iterable[Tag]) -> Iterable[Tag]:
        return (element for element in elements if element is not self.target)

    def collect_extra_ids(self, elements: Iterable[Tag]) -> list[str]:
        """Ids of other elements, the target's own id excluded."""
        own_id = element_id(self.target)
        extra: list[str] = []

        for element in self._others(elements):
            value = element_id(element)
            if (
                value
                and value != own_id
                and value not in extra
                and not BlacklistMatcher.matches(value, self.blacklist.ids)
            ):
                extra.append(value)

        return [sv.escape(value) for value in extra]

    def collect_extra_classes(self, elements: Iterable[Tag]) -> list[str]:
        """Classes of other elements the target does not have."""
        own_classes = set(class_list(self.target))
        extra: list[str] = []

        for element in self._others(elements):
            for value in class_list(element):
                if (
                    value not in own_classes
                    and value not in extra
                    and not BlacklistMatcher.matches(value, self.blacklist.classes)
                ):
                    extra.append(value)

        return [sv.escape(value) for value in extra]

    def collect_extra_attributes(self, elements: Iterable[Tag]) -> list[str]:
        """Attribute names of other elements the target does not have."""
        extra: list[str] = []

        for element in self._others(elements):
            for name in attribute_names(element):
                if (
                    name.lower() not in self.ignored_attributes
                    and not has_attribute(self.target, name)
                    and name not in extra
                    and not BlacklistMatcher.matches(name, self.blacklist.attributes)
                ):
                    extra.append(name)

        return [sv.escape(name) for name in extra]

    def collect_all(self, elements: Iterable[Tag]) -> ExtraMarks:
        """Collect ids, classes and attributes at once."""
        elements = list(elements)
        return ExtraMarks(
            ids=self.collect_extra_ids(elements),
            classes=self.collect_extra_classes(elements),
            attributes=self.collect_extra_attributes(elements),
        )
