"""
Wildcard matching for blacklisted ids, classes and attribute names.

Only ``*`` is special; every other character, including ``[`` and ``?``,
matches itself, so ``*[*px]*`` matches ``w-[10px]``.
"""

from __future__ import annotations

import re
from functools import lru_cache
from typing import Iterable, Optional, Pattern


@lru_cache(maxsize=256)
def _pattern_to_regex(pattern: str) -> Pattern[str]:
    escaped = "".join(".*" if part == "*" else re.escape(part) for part in re.split(r"(\*)", pattern))
    return re.compile(f"^{escaped}$", re.DOTALL)


class BlacklistMatcher:
    """Matches strings against anchored ``*`` wildcard patterns.

    Example:
        >>> BlacklistMatcher.matches("lottie-player-3", ["*lottie*"])
        True
        >>> BlacklistMatcher.filter(["ng-scope", "card"], ["ng-*"])
        ['card']
    """

    @staticmethod
    def matches(value: Optional[str], patterns: Optional[Iterable[str]]) -> bool:
        """Check if ``value`` matches any pattern.

        Args:
            value: Value to check.
            patterns: Wildcard patterns.

        Returns:
            True if value matches any pattern. Empty values and empty
            pattern lists never match.
        """
        if not value or not patterns:
            return False

        return any(_pattern_to_regex(pattern).match(value) for pattern in patterns)

    @classmethod
    def filter(cls, values: Iterable[str], patterns: Optional[Iterable[str]]) -> list[str]:
        """Return the values that match none of the patterns."""
        patterns = list(patterns or [])
        return [value for value in values if not cls.matches(value, patterns)]
