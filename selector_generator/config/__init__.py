"""
Configuration module for selector-generator.

This module provides:
- Strongly-typed option classes (CostOptions, BlacklistOptions, GeneratorOptions)
- Configuration file loading (JSON, YAML, TOML)
- Environment variable support
- Validation and type checking via Pydantic

Example usage:
    from selector_generator.config import GeneratorOptions, CostOptions, load_config

    # Load from file with environment overrides
    options = load_config("selector-generator.config.json")

    # Create programmatically
    options = GeneratorOptions(costs=CostOptions(sibling=50))

Environment variables:
    SELECTOR_GENERATOR_OPTIMIZER=bottom_up
    SELECTOR_GENERATOR_BLACKLIST_IDS=*lottie*,*generated*
    SELECTOR_GENERATOR_COSTS_SIBLING=50
"""

from .defaults import (
    BLACKLIST_ATTRIBUTES,
    BLACKLIST_CLASSES,
    BLACKLIST_IDS,
    ENV_PREFIX,
    IGNORED_ATTRIBUTES,
    IGNORED_ATTRIBUTES_FOR_EXCLUSION,
)
from .env import get_env, get_env_key, load_env_config
from .loader import (
    ConfigLoader,
    ConfigurationError,
    find_config_file,
    load_config,
    load_file,
    merge_configs,
    save_config,
)
from .options import (
    BlacklistOptions,
    CostOptions,
    GeneratorOptions,
    OptimizerStrategy,
)

__all__ = [
    # Defaults
    "BLACKLIST_ATTRIBUTES",
    "BLACKLIST_CLASSES",
    "BLACKLIST_IDS",
    "ENV_PREFIX",
    "IGNORED_ATTRIBUTES",
    "IGNORED_ATTRIBUTES_FOR_EXCLUSION",
    # Options
    "BlacklistOptions",
    "CostOptions",
    "GeneratorOptions",
    "OptimizerStrategy",
    # Loading
    "ConfigLoader",
    "ConfigurationError",
    "find_config_file",
    "load_config",
    "load_file",
    "merge_configs",
    "save_config",
    # Environment
    "get_env",
    "get_env_key",
    "load_env_config",
]
