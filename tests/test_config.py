"""
Tests for configuration loading and resolution.
"""

import pytest

from linkwalk.config import (
    CONFIG_ENV_VAR,
    TraversalConfig,
    config_from_mapping,
    default_config,
    load_config,
    resolve_config,
)
from linkwalk.errors import ConfigError, SafetyLimitExceeded
from linkwalk.graph import bfs


class TestTraversalConfig:
    """Tests for TraversalConfig defaults and validation."""

    def test_defaults(self):
        """Defaults validate inputs, warn on recursion, and set no cap."""
        config = TraversalConfig()
        assert config.validate_inputs is True
        assert config.recursion_guard == "warn"
        assert config.recursion_headroom == 50
        assert config.max_vertices is None

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"recursion_guard": "sometimes"},
            {"recursion_headroom": -1},
            {"max_vertices": -5},
            {"max_vertices": "lots"},
            {"max_vertices": True},
            {"recursion_headroom": 2.5},
            {"validate_inputs": "no"},
            {"recursion_guard": True},
        ],
    )
    def test_invalid_values(self, kwargs):
        """Bad values are rejected at construction."""
        with pytest.raises(ConfigError):
            TraversalConfig(**kwargs)


class TestLoadConfig:
    """Tests for YAML loading."""

    def test_nested_section(self, tmp_path):
        """Settings under a top-level linkwalk key are read."""
        path = tmp_path / "linkwalk.yaml"
        path.write_text("linkwalk:\n  recursion_guard: raise\n  max_vertices: 100\n")

        config = load_config(path)
        assert config.recursion_guard == "raise"
        assert config.max_vertices == 100
        assert config.validate_inputs is True

    def test_flat_mapping(self, tmp_path):
        """Settings may also sit at the top level."""
        path = tmp_path / "flat.yaml"
        path.write_text("validate_inputs: false\n")
        assert load_config(str(path)).validate_inputs is False

    def test_empty_file_gives_defaults(self, tmp_path):
        """An empty file means all defaults."""
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_config(path) == TraversalConfig()

    def test_missing_file(self, tmp_path):
        """A missing file raises ConfigError."""
        with pytest.raises(ConfigError, match="not found"):
            load_config(tmp_path / "nope.yaml")

    def test_unparseable_file(self, tmp_path):
        """Broken YAML raises ConfigError."""
        path = tmp_path / "broken.yaml"
        path.write_text("linkwalk: [unclosed\n")
        with pytest.raises(ConfigError, match="Could not parse"):
            load_config(path)

    def test_unquoted_off_policy(self, tmp_path):
        """YAML reads a bare `off` as false; it still selects the off policy."""
        path = tmp_path / "off.yaml"
        path.write_text("linkwalk:\n  recursion_guard: off\n")
        assert load_config(path).recursion_guard == "off"

    def test_non_integer_max_vertices(self, tmp_path):
        """A non-numeric limit raises ConfigError rather than TypeError."""
        path = tmp_path / "lots.yaml"
        path.write_text("linkwalk:\n  max_vertices: lots\n")
        with pytest.raises(ConfigError, match="max_vertices must be an integer"):
            load_config(path)

    def test_non_bool_validate_inputs(self, tmp_path):
        """A quoted string is not accepted as a boolean switch."""
        path = tmp_path / "quoted.yaml"
        path.write_text('linkwalk:\n  validate_inputs: "no"\n')
        with pytest.raises(ConfigError, match="validate_inputs must be true or false"):
            load_config(path)

    def test_unknown_keys(self):
        """Unknown settings are reported by name."""
        with pytest.raises(ConfigError, match="max_depth"):
            config_from_mapping({"linkwalk": {"max_depth": 3}})

    def test_non_mapping(self):
        """A top-level list is not a configuration."""
        with pytest.raises(ConfigError, match="mapping"):
            config_from_mapping([1, 2])


class TestDefaultConfig:
    """Tests for environment-driven defaults."""

    def test_without_env_var(self, monkeypatch):
        """No environment variable means plain defaults."""
        monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
        assert default_config() == TraversalConfig()

    def test_env_var_points_at_file(self, monkeypatch, tmp_path):
        """The environment variable names a YAML file to load."""
        path = tmp_path / "env.yaml"
        path.write_text("linkwalk:\n  max_vertices: 3\n")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(path))

        assert default_config().max_vertices == 3
        # Applied to calls that pass no config
        with pytest.raises(SafetyLimitExceeded, match="exceeds limit 3"):
            bfs([[1], [2], [3], []], 0)

    def test_explicit_config_wins(self, monkeypatch):
        """An explicit config is used as-is, ignoring the environment."""
        monkeypatch.setenv(CONFIG_ENV_VAR, "/does/not/exist.yaml")
        config = TraversalConfig(max_vertices=10)
        assert resolve_config(config) is config
        assert bfs([[1], []], 0, config=config) == [0, 1]

    def test_not_cached(self, monkeypatch, tmp_path):
        """Each call re-reads the environment."""
        path = tmp_path / "env.yaml"
        path.write_text("max_vertices: 1\n")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(path))
        assert default_config().max_vertices == 1

        path.write_text("max_vertices: 2\n")
        assert default_config().max_vertices == 2
