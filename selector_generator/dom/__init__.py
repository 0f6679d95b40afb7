"""
DOM access module for selector-generator.

This module provides:
- DocumentService: Abstract read-only query interface over a document
- SoupDocumentService: BeautifulSoup/soupsieve implementation (lxml parser)
- ElementValidator: Element node checks
- nodes: DOM-style navigation helpers for bs4 tags
"""

from selector_generator.dom import nodes
from selector_generator.dom.service import DocumentService, SoupDocumentService
from selector_generator.dom.validator import ElementValidator

__all__ = [
    "nodes",
    "DocumentService",
    "SoupDocumentService",
    "ElementValidator",
]
