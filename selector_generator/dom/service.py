"""
Document service for selector-generator.

The generators and optimizers never walk the document to evaluate a
selector themselves; they go through a DocumentService. The default
implementation wraps a BeautifulSoup tree and evaluates selectors with
soupsieve, which supports the relational pseudo-classes the generators emit
(``:has()``, ``:is()``, ``:not()``, ``:nth-child()``, ``:empty``).
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Optional

import soupsieve as sv
from bs4 import BeautifulSoup
from bs4.element import Tag

from selector_generator.config.defaults import DEFAULT_HTML_PARSER

logger = logging.getLogger(__name__)

# Candidate fragments nest :has() inside :has()
QUERY_FLAGS = sv.NOSTRICT


class DocumentService(ABC):
    """Read-only query interface over one document snapshot."""

    @abstractmethod
    def query_all(self, selector: str) -> list[Tag]:
        """Query for all elements matching ``selector``, in document order."""
        ...

    @abstractmethod
    def query_first(self, selector: str) -> Optional[Tag]:
        """Query for the first element matching ``selector``."""
        ...

    @abstractmethod
    def query_first_within(self, root: Tag, selector: str) -> Optional[Tag]:
        """Query for the first descendant of ``root`` matching ``selector``.

        ``root`` itself is never a candidate, like ``Element.querySelector``.
        """
        ...

    def is_valid_selector(self, selector: str) -> bool:
        """Whether ``selector`` can be evaluated by this service."""
        return True


class SoupDocumentService(DocumentService):
    """DocumentService over a BeautifulSoup tree.

    Example:
        document = SoupDocumentService.from_html(markup)
        buttons = document.query_all("button.primary")
        first = document.query_first("#app > :first-child")
    """

    def __init__(
        self,
        soup: BeautifulSoup,
        namespaces: Optional[dict[str, str]] = None,
    ) -> None:
        """Initialize the service.

        Args:
            soup: Parsed document.
            namespaces: Prefix to namespace URI mapping for XML documents.
        """
        self._soup = soup
        self._namespaces = namespaces

    @classmethod
    def from_html(cls, markup: str, parser: str = DEFAULT_HTML_PARSER) -> "SoupDocumentService":
        """Parse an HTML string (lxml by default)."""
        return cls(BeautifulSoup(markup, parser))

    @classmethod
    def from_xml(
        cls,
        markup: str,
        namespaces: Optional[dict[str, str]] = None,
    ) -> "SoupDocumentService":
        """Parse an XML/SVG string with lxml's XML builder."""
        return cls(BeautifulSoup(markup, "xml"), namespaces=namespaces)

    @property
    def soup(self) -> BeautifulSoup:
        """The underlying document."""
        return self._soup

    def query_all(self, selector: str) -> list[Tag]:
        try:
            return sv.select(
                selector, self._soup, namespaces=self._namespaces, flags=QUERY_FLAGS
            )
        except sv.SelectorSyntaxError as e:
            logger.debug(f"Query all failed for {selector!r}: {e}")
            return []

    def query_first(self, selector: str) -> Optional[Tag]:
        try:
            return sv.select_one(
                selector, self._soup, namespaces=self._namespaces, flags=QUERY_FLAGS
            )
        except sv.SelectorSyntaxError as e:
            logger.debug(f"Query failed for {selector!r}: {e}")
            return None

    def query_first_within(self, root: Tag, selector: str) -> Optional[Tag]:
        try:
            return sv.select_one(
                selector, root, namespaces=self._namespaces, flags=QUERY_FLAGS
            )
        except sv.SelectorSyntaxError as e:
            logger.debug(f"Scoped query failed for {selector!r}: {e}")
            return None

    def is_valid_selector(self, selector: str) -> bool:
        try:
            sv.compile(selector, namespaces=self._namespaces, flags=QUERY_FLAGS)
        except sv.SelectorSyntaxError as e:
            logger.debug(f"Unsupported selector {selector!r}: {e}")
            return False
        return True

    def __repr__(self) -> str:
        return f"<SoupDocumentService root={self._soup.name!r}>"
