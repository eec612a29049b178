"""Tests for mockobject configuration."""

from pathlib import Path

import yaml

from mockobject.core.config import MockObjectConfig, get_config, reset_config


class TestMockObjectConfig:
    """Tests for MockObjectConfig."""

    def test_default_values(self):
        """Test default configuration values."""
        config = MockObjectConfig()

        assert config.suppress_real_load is False
        assert config.fixtures_path == "tests/mocks.yaml"

    def test_from_dict(self):
        """Test loading settings from a dictionary."""
        config = MockObjectConfig.from_dict(
            {"suppress_real_load": True, "fixtures": {"path": "fixtures/mocks.yaml"}}
        )

        assert config.suppress_real_load is True
        assert config.fixtures_path == "fixtures/mocks.yaml"

    def test_from_missing_file(self, tmp_path):
        """Test a missing file gives defaults."""
        config = MockObjectConfig.from_file(tmp_path / "missing.yaml")
        assert config == MockObjectConfig()

    def test_save_and_load(self, tmp_path):
        """Test a saved config loads back the same."""
        path = tmp_path / ".mockobject" / "config.yaml"
        MockObjectConfig(suppress_real_load=True, fixtures_path="x.yaml").save(path)

        loaded = MockObjectConfig.from_file(path)

        assert loaded.suppress_real_load is True
        assert loaded.fixtures_path == "x.yaml"

    def test_to_dict(self):
        """Test serialization is nested under the project key."""
        data = MockObjectConfig().to_dict()
        assert data == {
            "mockobject": {
                "suppress_real_load": False,
                "fixtures": {"path": "tests/mocks.yaml"},
            }
        }

    def test_env_overrides(self, monkeypatch):
        """Test environment variables win over file settings."""
        monkeypatch.setenv("MOCKOBJECT_SUPPRESS_REAL_LOAD", "yes")
        monkeypatch.setenv("MOCKOBJECT_FIXTURES", "env/mocks.yaml")

        config = MockObjectConfig().apply_env()

        assert config.suppress_real_load is True
        assert config.fixtures_path == "env/mocks.yaml"

    def test_env_false(self, monkeypatch):
        """Test a false-looking value turns the flag off."""
        monkeypatch.setenv("MOCKOBJECT_SUPPRESS_REAL_LOAD", "0")
        config = MockObjectConfig(suppress_real_load=True).apply_env()
        assert config.suppress_real_load is False


class TestGetConfig:
    """Tests for the cached global config."""

    def test_loads_project_file(self, tmp_path):
        """Test the project's .mockobject/config.yaml is read."""
        config_dir = tmp_path / ".mockobject"
        config_dir.mkdir()
        (config_dir / "config.yaml").write_text(
            yaml.dump({"mockobject": {"suppress_real_load": True}})
        )

        assert get_config(tmp_path).suppress_real_load is True

    def test_cached(self, tmp_path):
        """Test the first load is reused until reset."""
        first = get_config(tmp_path)
        assert get_config(Path("/elsewhere")) is first

        reset_config()
        assert get_config(tmp_path) is not first
