"""Tests for SelectorGenerator and get_selector()."""

import pytest
from bs4 import BeautifulSoup

from selector_generator import (
    GeneratorOptions,
    IncompatibleTargetsError,
    InvalidNodeKindError,
    OptimizerStrategy,
    SelectorGenerator,
    SoupDocumentService,
    get_selector,
)
from selector_generator.optimizers import BottomUpSelectorOptimizer, TopDownSelectorOptimizer

PAGE_HTML = (
    '<div id="app">'
    '<header class="top"><h1>Title</h1><nav><a href="/a">A</a><a href="/b" class="on">B</a></nav></header>'
    '<ul class="list"><li>a</li><li class="x">b</li><li>c</li><li></li></ul>'
    '<form><input name="q" type="text"><input type="submit"></form>'
    "<p></p><p>text</p>"
    "</div>"
)


def matches_only(document, selector, nodes):
    found = document.query_all(selector)
    return len(found) == len(nodes) and all(any(f is n for f in found) for n in nodes)


class NoHasDocumentService(SoupDocumentService):
    """Document service that cannot evaluate :has()."""

    def is_valid_selector(self, selector):
        return ":has(" not in selector and super().is_valid_selector(selector)


class TestScenarios:
    """End-to-end selector generation."""

    def test_primary_button(self, buttons_document):
        """Test the cheapest discriminator wins over position."""
        target = buttons_document.query_first(".primary")
        selector = SelectorGenerator(buttons_document).get_selector(target)

        assert selector == "button.primary"
        assert matches_only(buttons_document, selector, [target])

    def test_identical_siblings(self, make_document):
        """Test falling back to position."""
        document = make_document("<ul><li></li><li></li></ul>")
        target = document.query_all("li")[1]
        selector = SelectorGenerator(document).get_selector(target)

        assert selector == "li:last-child"

    def test_multiple_targets(self, make_document):
        """Test one selector for several targets."""
        document = make_document(
            '<ul><li class="item">a</li><li class="item">b</li><li>c</li></ul>'
        )
        targets = document.query_all("li.item")
        selector = SelectorGenerator(document).get_selector(targets)

        assert selector == "li.item"
        assert matches_only(document, selector, targets)

    def test_empty_element(self, make_document):
        """Test an empty element under an identifiable parent."""
        document = make_document(
            '<div id="box"><span>a</span><span></span></div>'
            "<div><span>b</span><span>c</span></div>"
        )
        target = document.query_all("#box span")[1]
        generator = SelectorGenerator(document)

        assert ":empty" in [d.selector for d in generator.generate_descriptors(target)]
        assert matches_only(document, generator.get_selector(target), [target])

    def test_round_trip(self, make_document):
        """Test every element gets a selector matching only itself."""
        document = make_document(PAGE_HTML)
        generator = SelectorGenerator(document)

        for node in document.query_all("#app, #app *"):
            selector = generator.get_selector(node)
            assert matches_only(document, selector, [node]), selector

    def test_round_trip_bottom_up(self, make_document):
        """Test bottom-up selectors match the targets they were built for."""
        document = make_document(PAGE_HTML)
        options = GeneratorOptions(optimizer=OptimizerStrategy.BOTTOM_UP)
        generator = SelectorGenerator(document, options)

        for node in document.query_all("#app *"):
            selector = generator.get_selector(node)
            assert any(f is node for f in document.query_all(selector)), selector

    def test_nested_descendants(self, make_document):
        """Test targets told apart by their grandchildren."""
        document = make_document(
            '<div class="card"><section><span>a</span></section></div>'
            '<div class="card"><section><b>b</b></section></div>'
        )
        target = document.query_first(".card")
        selector = SelectorGenerator(document).get_selector(target)

        assert matches_only(document, selector, [target])
        assert matches_only(document, get_selector(target), [target])

    def test_custom_costs(self, buttons_document):
        """Test costs steer the result."""
        options = GeneratorOptions(costs={"class_name": 500})
        target = buttons_document.query_first(".primary")
        selector = SelectorGenerator(buttons_document, options).get_selector(target)

        assert ".primary" not in selector
        assert matches_only(buttons_document, selector, [target])


class TestSelectorGenerator:
    """Tests for SelectorGenerator wiring."""

    def test_optimizer_choice(self, buttons_document):
        """Test the configured optimizer is used."""
        assert isinstance(SelectorGenerator(buttons_document).optimizer, TopDownSelectorOptimizer)

        options = GeneratorOptions(optimizer="bottom_up", bottom_up_threshold=4)
        optimizer = SelectorGenerator(buttons_document, options).optimizer
        assert isinstance(optimizer, BottomUpSelectorOptimizer)
        assert optimizer.threshold == 4

    def test_generate_descriptors(self, buttons_document):
        """Test candidates are unique and valid for the target."""
        target = buttons_document.query_first(".primary")
        descriptors = SelectorGenerator(buttons_document).generate_descriptors(target)
        keys = [d.key() for d in descriptors]

        assert len(keys) == len(set(keys))
        assert {"button", ".btn", ".primary"} <= {d.selector for d in descriptors}
        assert any(d.level > 0 for d in descriptors)

    def test_find_best(self, buttons_document):
        """Test the optimized descriptor set."""
        target = buttons_document.query_first(".primary")
        result = SelectorGenerator(buttons_document).find_best(target)
        assert [d.selector for d in result] == ["button", ".primary"]

    def test_skips_unsupported_candidates(self):
        """Test candidates the document cannot evaluate are dropped."""
        document = NoHasDocumentService.from_html(
            '<div id="app"><button class="btn primary">Go</button>'
            '<button class="btn">Stop</button></div>'
        )
        target = document.query_first(".primary")
        generator = SelectorGenerator(document)

        assert not any(":has(" in d.selector for d in generator.generate_descriptors(target))
        assert generator.get_selector(target) == "button.primary"

    def test_duplicate_targets(self, buttons_document):
        """Test the same target twice counts once."""
        target = buttons_document.query_first(".primary")
        generator = SelectorGenerator(buttons_document)
        assert generator.get_selector([target, target]) == generator.get_selector(target)


class TestGetSelector:
    """Tests for the get_selector() entry point."""

    def test_from_soup(self):
        """Test building the document service from the targets."""
        soup = BeautifulSoup(
            '<div id="app"><button class="btn primary">Go</button>'
            '<button class="btn">Stop</button></div>',
            "lxml",
        )
        assert get_selector(soup.find("button", class_="primary")) == "button.primary"

    def test_generator(self, buttons_document):
        """Test targets given as a generator."""
        targets = (b for b in buttons_document.query_all("button"))
        assert get_selector(targets, document=buttons_document) == "button"

    def test_no_targets(self):
        """Test an empty target list."""
        with pytest.raises(IncompatibleTargetsError):
            get_selector([])

    def test_invalid_targets(self, buttons_document):
        """Test non-element targets."""
        text = buttons_document.query_first("button").contents[0]
        with pytest.raises(InvalidNodeKindError):
            get_selector(text)
        with pytest.raises(InvalidNodeKindError):
            get_selector("button")
        with pytest.raises(TypeError):
            get_selector(buttons_document.soup)

    def test_different_documents(self):
        """Test targets from two documents."""
        first = SoupDocumentService.from_html("<p>1</p>").query_first("p")
        second = SoupDocumentService.from_html("<p>2</p>").query_first("p")

        with pytest.raises(IncompatibleTargetsError):
            get_selector([first, second])
        with pytest.raises(ValueError):
            get_selector([first, second])

    def test_detached_target(self):
        """Test a target removed from its document."""
        p = SoupDocumentService.from_html("<p>1</p>").query_first("p")
        p.extract()
        with pytest.raises(IncompatibleTargetsError):
            get_selector(p)
