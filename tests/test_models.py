"""Tests for selector descriptor models."""

from dataclasses import FrozenInstanceError

import pytest

from selector_generator.models import (
    SelectorDescriptor,
    SelectorType,
    by_key,
    by_selector,
    dedupe_descriptors,
    intersect_descriptors,
    total_cost,
)


def d(selector, cost=1, level=0, type_=SelectorType.CLASS):
    return SelectorDescriptor(cost, level, type_, selector)


class TestSelectorDescriptor:
    """Tests for SelectorDescriptor."""

    def test_fields(self):
        """Test descriptor fields."""
        descriptor = SelectorDescriptor(0, 0, SelectorType.ID, "#go")
        assert descriptor.cost == 0
        assert descriptor.level == 0
        assert descriptor.type == SelectorType.ID
        assert str(descriptor) == "#go"

    def test_frozen(self):
        """Test descriptors are immutable."""
        descriptor = d(".a")
        with pytest.raises(FrozenInstanceError):
            descriptor.cost = 5

    def test_with_level(self):
        """Test lifting a descriptor to an ancestor level."""
        descriptor = SelectorDescriptor(2, 0, SelectorType.TAG, "div")
        lifted = descriptor.with_level(2, 12)

        assert lifted.level == 2
        assert lifted.cost == 14
        assert lifted.selector == "div"
        assert descriptor.level == 0

    def test_key_ignores_cost(self):
        """Test key only covers level, type and selector."""
        assert d(".a", cost=1).key() == d(".a", cost=9).key()
        assert d(".a", level=0).key() != d(".a", level=1).key()

    def test_type_values(self):
        """Test SelectorType string values."""
        assert SelectorType.PSEUDO == "pseudo"
        assert SelectorType("tag") == SelectorType.TAG


class TestIntersection:
    """Tests for intersect_descriptors()."""

    def test_empty(self):
        """Test no sets."""
        assert intersect_descriptors([]) == []

    def test_single_set(self):
        """Test a single set is returned unchanged."""
        first = [d(".a"), d(".b")]
        result = intersect_descriptors([first])
        assert result == first
        assert result is not first

    def test_keeps_first_set_order(self):
        """Test result follows the first set."""
        first = [d(".c"), d(".a"), d(".b")]
        second = [d(".b"), d(".c")]
        assert [x.selector for x in intersect_descriptors([first, second])] == [".c", ".b"]

    def test_by_selector_ignores_level(self):
        """Test default comparison only uses the selector string."""
        first = [d("div", level=1)]
        second = [d("div", level=2)]
        assert intersect_descriptors([first, second], key=by_selector) == first

    def test_by_key_uses_level(self):
        """Test key comparison distinguishes levels."""
        first = [d("div", level=1)]
        second = [d("div", level=2)]
        assert intersect_descriptors([first, second], key=by_key) == []


class TestHelpers:
    """Tests for total_cost() and dedupe_descriptors()."""

    def test_total_cost(self):
        """Test costs add up."""
        assert total_cost([d(".a", cost=1), d(".b", cost=2.5)]) == 3.5
        assert total_cost([]) == 0

    def test_dedupe_keeps_cheapest(self):
        """Test the cheapest duplicate wins at the first position."""
        descriptors = [d(".a", cost=5), d(".b", cost=1), d(".a", cost=2)]
        result = dedupe_descriptors(descriptors)

        assert [x.selector for x in result] == [".a", ".b"]
        assert result[0].cost == 2

    def test_dedupe_respects_level(self):
        """Test equal selectors on different levels are kept."""
        result = dedupe_descriptors([d("div", level=0), d("div", level=1)])
        assert len(result) == 2
