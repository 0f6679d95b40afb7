"""Shared fixtures for selector-generator tests."""

import pytest

from selector_generator import SoupDocumentService

BUTTONS_HTML = (
    '<div id="app">'
    '<button class="btn primary">Go</button>'
    '<button class="btn">Stop</button>'
    "</div>"
)


@pytest.fixture
def make_document():
    """Factory building a document service from HTML markup."""

    def _make(markup: str) -> SoupDocumentService:
        return SoupDocumentService.from_html(markup)

    return _make


@pytest.fixture
def buttons_document():
    """Two buttons sharing the .btn class, only the first is .primary."""
    return SoupDocumentService.from_html(BUTTONS_HTML)
