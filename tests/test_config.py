"""
Tests for selector-generator configuration system.
"""

import json
import os
import tempfile

import pytest

from selector_generator.config import (
    BlacklistOptions,
    ConfigLoader,
    ConfigurationError,
    CostOptions,
    GeneratorOptions,
    OptimizerStrategy,
    find_config_file,
    get_env,
    get_env_key,
    load_config,
    load_env_config,
    load_file,
    merge_configs,
    save_config,
)
from selector_generator.config.defaults import get_default_blacklist, get_default_costs


class TestCostOptions:
    """Tests for CostOptions class."""

    def test_default_values(self):
        """Test default costs."""
        costs = CostOptions()
        assert costs.id == 0
        assert costs.class_name == 1
        assert costs.tag == 2
        assert costs.attr == 3
        assert costs.parent == 10
        assert costs.sibling == 100
        assert costs.children == 100
        assert costs.distance == 1
        assert costs.is_has == 5
        assert costs.negation == 10

    def test_matches_defaults_module(self):
        """Test model defaults agree with the defaults module."""
        assert CostOptions().model_dump() == get_default_costs()

    def test_validation(self):
        """Test negative costs are rejected."""
        with pytest.raises(ValueError):
            CostOptions(sibling=-1)


class TestBlacklistOptions:
    """Tests for BlacklistOptions class."""

    def test_default_values(self):
        """Test default blacklists."""
        blacklist = BlacklistOptions()
        assert blacklist.model_dump() == get_default_blacklist()
        assert "*lottie*" in blacklist.ids

    def test_comma_separated(self):
        """Test comma-separated pattern strings."""
        blacklist = BlacklistOptions(ids="*generated*, temp-*")
        assert blacklist.ids == ["*generated*", "temp-*"]


class TestGeneratorOptions:
    """Tests for GeneratorOptions class."""

    def test_default_values(self):
        """Test default options."""
        options = GeneratorOptions()
        assert options.optimizer == OptimizerStrategy.TOP_DOWN
        assert options.bottom_up_threshold == 16
        assert options.ignored_attributes == ["id", "style"]
        assert options.ignored_attributes_for_exclusion == ["class", "style"]

    def test_lowercases_ignored_attributes(self):
        """Test ignored attribute names are normalized."""
        options = GeneratorOptions(ignored_attributes=["ID", " Data-X ", ""])
        assert options.ignored_attributes == ["id", "data-x"]

    def test_threshold_validation(self):
        """Test threshold must be at least 1."""
        with pytest.raises(ValueError):
            GeneratorOptions(bottom_up_threshold=0)

    def test_from_dict(self):
        """Test creating options from dictionary."""
        options = GeneratorOptions.from_dict(
            {"optimizer": "bottom_up", "costs": {"sibling": 50}}
        )
        assert options.optimizer == OptimizerStrategy.BOTTOM_UP
        assert options.costs.sibling == 50
        assert options.costs.parent == 10

    def test_to_dict(self):
        """Test converting options to dictionary."""
        data = GeneratorOptions().to_dict()
        assert data["optimizer"] == "top_down"
        assert data["costs"]["is_has"] == 5
        assert data["blacklist"]["classes"][0] == "*-ng-*"

    def test_merge(self):
        """Test merging options keeps unset nested values."""
        base = GeneratorOptions(costs=CostOptions(sibling=50))
        override = GeneratorOptions(costs={"parent": 20}, optimizer="bottom_up")
        merged = base.merge(override)

        assert merged.optimizer == OptimizerStrategy.BOTTOM_UP
        assert merged.costs.parent == 20
        assert merged.costs.sibling == 50


class TestEnvironmentVariables:
    """Tests for environment variable support."""

    def test_get_env_key(self):
        """Test converting config key to env var name."""
        assert get_env_key("costs.sibling") == "SELECTOR_GENERATOR_COSTS_SIBLING"
        assert get_env_key("bottom_up_threshold") == "SELECTOR_GENERATOR_BOTTOM_UP_THRESHOLD"

    def test_get_env_typed(self):
        """Test value parsing from the default's type."""
        os.environ["SELECTOR_GENERATOR_TEST_INT"] = "42"
        try:
            assert get_env("test.int", default=0) == 42
        finally:
            del os.environ["SELECTOR_GENERATOR_TEST_INT"]

    def test_get_env_default(self):
        """Test environment variable default value."""
        assert get_env("nonexistent.key", default="default") == "default"

    def test_load_env_config(self, monkeypatch):
        """Test nested values from environment variables."""
        monkeypatch.setenv("SELECTOR_GENERATOR_OPTIMIZER", "bottom_up")
        monkeypatch.setenv("SELECTOR_GENERATOR_COSTS_SIBLING", "50")
        monkeypatch.setenv("SELECTOR_GENERATOR_BLACKLIST_IDS", "*a*,*b*")

        data = load_env_config()
        assert data["optimizer"] == "bottom_up"
        assert data["costs"] == {"sibling": 50.0}
        assert data["blacklist"] == {"ids": ["*a*", "*b*"]}


class TestConfigLoader:
    """Tests for configuration file loading."""

    def test_load_json(self):
        """Test loading JSON configuration."""
        with tempfile.NamedTemporaryFile(mode="w", suffix=".json", delete=False) as f:
            json.dump({"costs": {"sibling": 50}}, f)
            f.flush()

            try:
                data = load_file(f.name)
                assert data["costs"]["sibling"] == 50
            finally:
                os.unlink(f.name)

    def test_load_toml(self):
        """Test loading TOML configuration."""
        with tempfile.NamedTemporaryFile(mode="w", suffix=".toml", delete=False) as f:
            f.write('optimizer = "bottom_up"\n\n[costs]\nparent = 20\n')
            f.flush()

            try:
                options = load_config(f.name, load_env=False)
                assert options.optimizer == OptimizerStrategy.BOTTOM_UP
                assert options.costs.parent == 20
            finally:
                os.unlink(f.name)

    def test_missing_file(self):
        """Test loading a file that does not exist."""
        with pytest.raises(ConfigurationError):
            load_file("/nonexistent/selector-generator.config.json")

    def test_unsupported_format(self):
        """Test loading an unknown extension."""
        with tempfile.NamedTemporaryFile(mode="w", suffix=".ini", delete=False) as f:
            f.write("[costs]\n")
            f.flush()

            try:
                with pytest.raises(ConfigurationError):
                    load_file(f.name)
            finally:
                os.unlink(f.name)

    def test_load_with_overrides(self):
        """Test programmatic overrides."""
        options = load_config(overrides={"costs": {"sibling": 7}}, load_env=False)
        assert options.costs.sibling == 7

    def test_env_beats_file(self, monkeypatch):
        """Test environment variables override file values."""
        monkeypatch.setenv("SELECTOR_GENERATOR_COSTS_PARENT", "30")
        with tempfile.NamedTemporaryFile(mode="w", suffix=".json", delete=False) as f:
            json.dump({"costs": {"parent": 20, "sibling": 60}}, f)
            f.flush()

            try:
                options = ConfigLoader(config_file=f.name).load()
                assert options.costs.parent == 30
                assert options.costs.sibling == 60
            finally:
                os.unlink(f.name)

    def test_invalid_values(self):
        """Test invalid values raise ConfigurationError."""
        with pytest.raises(ConfigurationError):
            load_config(overrides={"optimizer": "sideways"}, load_env=False)

    def test_auto_find(self, tmp_path):
        """Test finding an option file in the search paths."""
        (tmp_path / "selector-generator.config.json").write_text('{"bottom_up_threshold": 8}')

        assert find_config_file(search_paths=[str(tmp_path)]).suffix == ".json"
        options = ConfigLoader(search_paths=[str(tmp_path)], load_env=False, auto_find=True).load()
        assert options.bottom_up_threshold == 8

    def test_no_file_found(self, tmp_path):
        """Test searching an empty directory."""
        assert find_config_file(search_paths=[str(tmp_path)]) is None

    def test_merge_configs(self):
        """Test merging multiple configurations."""
        merged = merge_configs(
            {"costs": {"sibling": 50}},
            {"costs": {"parent": 20}, "optimizer": "bottom_up"},
        )
        assert merged["costs"] == {"sibling": 50, "parent": 20}
        assert merged["optimizer"] == "bottom_up"


class TestSaveConfig:
    """Tests for saving configuration."""

    def test_save_json(self):
        """Test saving configuration as JSON."""
        options = GeneratorOptions(costs=CostOptions(sibling=42))
        with tempfile.NamedTemporaryFile(mode="w", suffix=".json", delete=False) as f:
            f.close()
            try:
                save_config(options, f.name, format="json")
                loaded = load_file(f.name)
                assert loaded["costs"]["sibling"] == 42
            finally:
                os.unlink(f.name)

    def test_save_yaml(self):
        """Test saving configuration as YAML."""
        pytest.importorskip("yaml")
        options = GeneratorOptions(optimizer=OptimizerStrategy.BOTTOM_UP)
        with tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False) as f:
            f.close()
            try:
                save_config(options, f.name, format="yaml")
                assert load_config(f.name, load_env=False).optimizer == OptimizerStrategy.BOTTOM_UP
            finally:
                os.unlink(f.name)

    def test_unsupported_format(self):
        """Test saving to an unknown format."""
        with pytest.raises(ConfigurationError):
            save_config(GeneratorOptions(), "out.xml", format="xml")
