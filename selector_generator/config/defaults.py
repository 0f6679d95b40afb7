"""
Default configuration values for selector-generator.

This module contains all default values used throughout the configuration system.
Lower costs indicate higher quality when the optimizers choose descriptors.

local: id, tag, class, attr
structural: parent, child, sibling
modifier: not, has
"""

from typing import Any

# Local costs
COST_ID = 0
COST_CLASS = 1
COST_TAG = 2
COST_ATTR = 3

# Structural costs
COST_PARENT = 10
COST_SIBLING = 100
COST_CHILDREN = 100
COST_DISTANCE = 1

# Modifier costs
COST_IS_HAS = 5  # contains :is(), :has()
COST_NOT = 10  # contains :not()

# Attributes never turned into local [attr] descriptors
IGNORED_ATTRIBUTES: list[str] = ["id", "style"]

# Attributes never turned into exclusion descriptors
IGNORED_ATTRIBUTES_FOR_EXCLUSION: list[str] = ["class", "style"]

# Blacklist patterns, "*" matches any sequence of characters:
#   "*-ng-*" matches "app-ng-content"
#   "temp-*" matches "temp-123"
BLACKLIST_IDS: list[str] = [
    "*lottie*",
    "selector-generator",
]

BLACKLIST_CLASSES: list[str] = [
    "*-ng-*",  # Angular generated classes
    "ng-*",  # Angular directives
    "*tw-*",
    "*[*px]*",
]

BLACKLIST_ATTRIBUTES: list[str] = [
    "*-ng-*",
    "ng-*",
    "*tw-*",
    "xmlns*",
]

# Optimizer defaults
DEFAULT_OPTIMIZER = "top_down"
DEFAULT_BOTTOM_UP_THRESHOLD = 16

# Document defaults
DEFAULT_HTML_PARSER = "lxml"

# File config defaults
DEFAULT_CONFIG_FILENAME = "selector-generator.config"
DEFAULT_CONFIG_EXTENSIONS = [".json", ".yaml", ".yml", ".toml"]
DEFAULT_CONFIG_SEARCH_PATHS = [
    ".",
    "~/.config/selector-generator",
]

# Environment variable prefix
ENV_PREFIX = "SELECTOR_GENERATOR_"


def get_default_costs() -> dict[str, float]:
    """Get default costs as a dictionary."""
    return {
        "id": COST_ID,
        "class_name": COST_CLASS,
        "tag": COST_TAG,
        "attr": COST_ATTR,
        "parent": COST_PARENT,
        "sibling": COST_SIBLING,
        "children": COST_CHILDREN,
        "distance": COST_DISTANCE,
        "is_has": COST_IS_HAS,
        "negation": COST_NOT,
    }


def get_default_blacklist() -> dict[str, Any]:
    """Get default blacklist patterns as a dictionary."""
    return {
        "ids": BLACKLIST_IDS.copy(),
        "classes": BLACKLIST_CLASSES.copy(),
        "attributes": BLACKLIST_ATTRIBUTES.copy(),
    }
