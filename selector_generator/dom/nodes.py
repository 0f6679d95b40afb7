"""
Node access helpers for BeautifulSoup trees.

Mirrors the subset of the DOM element API the generators rely on
(``parentElement``, ``children``, ``previousElementSibling``, ...).

bs4 compares tags structurally (``Tag.__eq__``), so two identical
``<li></li>`` are "equal". Every membership test in this package must use
object identity; use :func:`contains_node` and :func:`unique_nodes` instead
of ``in`` / ``set()``.
"""

from __future__ import annotations

from typing import Iterable, Iterator, Optional, Sequence

from bs4 import BeautifulSoup
from bs4.element import PageElement, Tag


def is_element(value: object) -> bool:
    """True for element tags, False for strings and the document object."""
    return isinstance(value, Tag) and not isinstance(value, BeautifulSoup)


def local_name(node: Tag) -> str:
    """Element name without namespace prefix."""
    return node.name


def parent_element(node: Tag) -> Optional[Tag]:
    """Parent element, or None at the document root."""
    parent = node.parent
    if parent is None or not is_element(parent):
        return None
    return parent


def ancestors(node: Tag) -> Iterator[Tag]:
    """Yield ancestor elements from the parent up to the root element."""
    current = parent_element(node)
    while current is not None:
        yield current
        current = parent_element(current)


def child_nodes(node: Tag) -> list[PageElement]:
    """All child nodes, including text and comments."""
    return list(node.contents)


def element_children(node: Tag) -> list[Tag]:
    """Child elements only."""
    return [child for child in node.contents if is_element(child)]


def previous_element_siblings(node: Tag) -> Iterator[Tag]:
    """Yield earlier element siblings, nearest first."""
    for sibling in node.previous_siblings:
        if is_element(sibling):
            yield sibling


def next_element_siblings(node: Tag) -> Iterator[Tag]:
    """Yield later element siblings, nearest first."""
    for sibling in node.next_siblings:
        if is_element(sibling):
            yield sibling


def class_list(node: Tag) -> list[str]:
    """Class tokens of ``node`` in document order, without duplicates.

    HTML tree builders store ``class`` as a list, XML builders as a string.
    """
    raw = node.get("class")
    if raw is None:
        return []
    if isinstance(raw, str):
        tokens = raw.split()
    else:
        tokens = [token for value in raw for token in str(value).split()]
    return list(dict.fromkeys(tokens))


def attribute_names(node: Tag) -> list[str]:
    """Attribute names of ``node`` in source order."""
    return list(node.attrs.keys())


def has_attribute(node: Tag, name: str) -> bool:
    return name in node.attrs


def element_id(node: Tag) -> str:
    """The ``id`` attribute, or an empty string."""
    value = node.get("id")
    if value is None:
        return ""
    if not isinstance(value, str):
        value = " ".join(value)
    return value


def contains(node: Tag, other: PageElement) -> bool:
    """Inclusive descendant test, like ``Node.contains``."""
    if other is node:
        return True
    return any(parent is node for parent in other.parents)


def owner_document(node: PageElement) -> Optional[BeautifulSoup]:
    """The BeautifulSoup document ``node`` belongs to, if attached."""
    top = node
    while top.parent is not None:
        top = top.parent
    return top if isinstance(top, BeautifulSoup) else None


def contains_node(nodes: Iterable[PageElement], node: PageElement) -> bool:
    """Identity-based ``node in nodes``."""
    return any(candidate is node for candidate in nodes)


def unique_nodes(nodes: Iterable[Tag]) -> list[Tag]:
    """Drop repeated objects, keeping the first occurrence."""
    seen: set[int] = set()
    result = []
    for node in nodes:
        if id(node) not in seen:
            seen.add(id(node))
            result.append(node)
    return result


def all_present(nodes: Sequence[PageElement], matches: Sequence[PageElement]) -> bool:
    """True if every node of ``nodes`` is one of ``matches``."""
    matched = {id(match) for match in matches}
    return all(id(node) in matched for node in nodes)
