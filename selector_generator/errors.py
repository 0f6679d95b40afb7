"""
Exceptions raised by selector-generator.
"""


class SelectorGeneratorError(Exception):
    """Base class for all selector generation errors."""

    pass


class InvalidNodeKindError(SelectorGeneratorError, TypeError):
    """A target is not an element-like document node."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(
            f"Not an HTML/SVG element: {type(value).__name__}"
        )


class IncompatibleTargetsError(SelectorGeneratorError, ValueError):
    """The targets cannot be described by one selector.

    Raised for an empty target list or for targets that do not belong to
    the same document.
    """

    pass


__all__ = [
    "SelectorGeneratorError",
    "InvalidNodeKindError",
    "IncompatibleTargetsError",
]
