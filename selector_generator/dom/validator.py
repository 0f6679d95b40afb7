"""
Validates that values are element nodes selector generation can describe.
"""

from selector_generator.dom.nodes import is_element
from selector_generator.errors import InvalidNodeKindError


class ElementValidator:
    """Checks for HTML/SVG element tags."""

    @staticmethod
    def is_valid(value: object) -> bool:
        """Check if ``value`` is an element tag.

        Strings, comments and the BeautifulSoup document object are not.
        """
        return is_element(value)

    @classmethod
    def assert_valid(cls, value: object) -> None:
        """Raise InvalidNodeKindError unless ``value`` is an element tag."""
        if not cls.is_valid(value):
            raise InvalidNodeKindError(value)
