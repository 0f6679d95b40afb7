"""
Loads GeneratorOptions from files, environment variables and overrides.

Supported file formats are JSON, TOML and, when PyYAML is installed, YAML.
A file named ``selector-generator.config.<ext>`` is looked up in the
current directory and in ``~/.config/selector-generator`` when
``auto_find`` is enabled.
"""

import json
import logging
import tomllib
from pathlib import Path
from typing import Any, Callable, Optional, Union

from pydantic import ValidationError

from .defaults import (
    DEFAULT_CONFIG_EXTENSIONS,
    DEFAULT_CONFIG_FILENAME,
    DEFAULT_CONFIG_SEARCH_PATHS,
)
from .env import load_env_config
from .options import GeneratorOptions

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class ConfigurationError(Exception):
    """Options could not be read, parsed or validated."""

    pass


def _yaml_module():
    try:
        import yaml
    except ImportError:
        raise ConfigurationError(
            "PyYAML is required for YAML option files. "
            "Install with: pip install selector-generator[yaml]"
        )
    return yaml


def _read_json(path: Path) -> dict[str, Any]:
    return json.loads(path.read_text(encoding="utf-8"))


def _read_toml(path: Path) -> dict[str, Any]:
    return tomllib.loads(path.read_text(encoding="utf-8"))


def _read_yaml(path: Path) -> dict[str, Any]:
    return _yaml_module().safe_load(path.read_text(encoding="utf-8")) or {}


_READERS: dict[str, Callable[[Path], dict[str, Any]]] = {
    ".json": _read_json,
    ".toml": _read_toml,
    ".yaml": _read_yaml,
    ".yml": _read_yaml,
}


def load_file(path: PathLike) -> dict[str, Any]:
    """Read an option file, picking the parser from its extension.

    Raises:
        ConfigurationError: If the file is missing, has an unknown extension
            or cannot be parsed.
    """
    path = Path(path)
    if not path.is_file():
        raise ConfigurationError(f"Configuration file not found: {path}")

    reader = _READERS.get(path.suffix.lower())
    if reader is None:
        raise ConfigurationError(f"Unsupported configuration format: {path.suffix}")

    try:
        data = reader(path)
    except ConfigurationError:
        raise
    except (ValueError, OSError) as e:
        # JSONDecodeError and TOMLDecodeError are ValueErrors
        raise ConfigurationError(f"Invalid configuration file {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError(f"Configuration file {path} must contain a mapping")
    return data


def find_config_file(
    filename: str = DEFAULT_CONFIG_FILENAME,
    search_paths: Optional[list[str]] = None,
    extensions: Optional[list[str]] = None,
) -> Optional[Path]:
    """Return the first existing ``<dir>/<filename><ext>``, or None."""
    candidates = (
        Path(directory).expanduser() / f"{filename}{ext}"
        for directory in (search_paths or DEFAULT_CONFIG_SEARCH_PATHS)
        for ext in (extensions or DEFAULT_CONFIG_EXTENSIONS)
    )
    return next((path for path in candidates if path.is_file()), None)


def merge_configs(*configs: dict[str, Any]) -> dict[str, Any]:
    """Merge option dictionaries; nested sections merge key by key.

    Later dictionaries win. The inputs are not modified.
    """
    merged: dict[str, Any] = {}
    for config in configs:
        for key, value in config.items():
            current = merged.get(key)
            if isinstance(current, dict) and isinstance(value, dict):
                merged[key] = merge_configs(current, value)
            elif isinstance(value, dict):
                merged[key] = merge_configs(value)
            else:
                merged[key] = value
    return merged


class ConfigLoader:
    """Builds GeneratorOptions from every configured source.

    Sources, lowest priority first: defaults, option file, environment
    variables (``SELECTOR_GENERATOR_*``), programmatic overrides.
    """

    def __init__(
        self,
        config_file: Optional[PathLike] = None,
        search_paths: Optional[list[str]] = None,
        load_env: bool = True,
        auto_find: bool = False,
    ):
        """Initialize the loader.

        Args:
            config_file: Explicit option file
            search_paths: Directories searched when auto_find is set
            load_env: Whether to read environment variables
            auto_find: Whether to look for an option file when none is given
        """
        self.config_file = Path(config_file) if config_file else None
        self.search_paths = search_paths or DEFAULT_CONFIG_SEARCH_PATHS
        self.load_env = load_env
        self.auto_find = auto_find

    def _resolve_file(self) -> Optional[Path]:
        if self.config_file is not None:
            return self.config_file
        if self.auto_find:
            return find_config_file(search_paths=self.search_paths)
        return None

    def load(self, overrides: Optional[dict[str, Any]] = None) -> GeneratorOptions:
        """Load and validate options.

        Raises:
            ConfigurationError: If a file cannot be read or the merged
                values fail validation.
        """
        layers: list[dict[str, Any]] = []

        path = self._resolve_file()
        if path is not None:
            logger.debug(f"Loading options from {path}")
            layers.append(load_file(path))

        if self.load_env:
            env_values = load_env_config()
            if env_values:
                logger.debug(f"Options from environment: {sorted(env_values)}")
            layers.append(env_values)

        if overrides:
            layers.append(overrides)

        try:
            return GeneratorOptions.from_dict(merge_configs(*layers))
        except ValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e


def load_config(
    config_file: Optional[PathLike] = None,
    overrides: Optional[dict[str, Any]] = None,
    load_env: bool = True,
) -> GeneratorOptions:
    """Shortcut for ``ConfigLoader(config_file, load_env=load_env).load(overrides)``."""
    return ConfigLoader(config_file=config_file, load_env=load_env).load(overrides=overrides)


def save_config(
    options: GeneratorOptions,
    path: PathLike,
    format: str = "json",
) -> None:
    """Write options to a JSON or YAML file.

    Raises:
        ConfigurationError: If the format is not supported.
    """
    data = options.to_dict()

    if format == "json":
        text = json.dumps(data, indent=2)
    elif format in ("yaml", "yml"):
        text = _yaml_module().safe_dump(data, default_flow_style=False)
    else:
        raise ConfigurationError(f"Unsupported output format: {format}")

    Path(path).write_text(text, encoding="utf-8")
