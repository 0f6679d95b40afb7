"""
Environment variable support for selector-generator options.

Every option has a variable named after its dotted key:

    optimizer               SELECTOR_GENERATOR_OPTIMIZER
    bottom_up_threshold     SELECTOR_GENERATOR_BOTTOM_UP_THRESHOLD
    costs.sibling           SELECTOR_GENERATOR_COSTS_SIBLING
    blacklist.ids           SELECTOR_GENERATOR_BLACKLIST_IDS (comma-separated)
"""

import os
from typing import Any, Optional, TypeVar, Union

from .defaults import ENV_PREFIX, get_default_costs

T = TypeVar("T")

_TRUE_VALUES = frozenset({"true", "1", "yes", "on", "enabled"})


def get_env_key(key: str, prefix: str = ENV_PREFIX) -> str:
    """``costs.sibling`` -> ``SELECTOR_GENERATOR_COSTS_SIBLING``."""
    return prefix + key.upper().replace(".", "_").replace("-", "_")


def parse_bool(value: str) -> bool:
    return value.strip().lower() in _TRUE_VALUES


def parse_list(value: str) -> list[str]:
    """Split a comma-separated value, dropping blanks."""
    return [item.strip() for item in value.split(",") if item.strip()]


def parse_value(value: str, target_type: Any) -> Any:
    """Convert a raw variable to ``bool``, ``int``, ``float`` or ``list[str]``.

    Any other type leaves the string unchanged.
    """
    if target_type is list or getattr(target_type, "__origin__", None) is list:
        return parse_list(value)
    if target_type is bool:
        return parse_bool(value)
    if target_type in (int, float):
        return target_type(value)
    return value


def get_env(
    key: str,
    default: Optional[T] = None,
    target_type: Optional[type] = None,
    prefix: str = ENV_PREFIX,
) -> Optional[Union[T, Any]]:
    """Read one option from the environment.

    The value is converted to ``target_type``, or to the type of
    ``default`` when no type is given.
    """
    raw = os.environ.get(get_env_key(key, prefix))
    if raw is None:
        return default

    if target_type is None and default is not None:
        target_type = type(default)
    return parse_value(raw, target_type) if target_type else raw


# dotted option key -> value type
ENV_OPTIONS: dict[str, Any] = {
    "optimizer": str,
    "bottom_up_threshold": int,
    "ignored_attributes": list[str],
    "ignored_attributes_for_exclusion": list[str],
    "blacklist.ids": list[str],
    "blacklist.classes": list[str],
    "blacklist.attributes": list[str],
    **{f"costs.{name}": float for name in get_default_costs()},
}


def load_env_config(prefix: str = ENV_PREFIX) -> dict[str, Any]:
    """Collect the options set in the environment as a nested dictionary."""
    result: dict[str, Any] = {}

    for key, target_type in ENV_OPTIONS.items():
        value = get_env(key, target_type=target_type, prefix=prefix)
        if value is None:
            continue

        section, _, option = key.rpartition(".")
        target = result.setdefault(section, {}) if section else result
        target[option] = value

    return result
