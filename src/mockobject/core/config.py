"""
mockobject configuration management.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

_TRUE_VALUES = {"1", "true", "yes", "on"}


@dataclass
class MockObjectConfig:
    """
    Complete mockobject configuration.

    Loaded from .mockobject/config.yaml, then overridden by environment
    variables.
    """

    # Default for create_mock(suppress_real_load=None)
    suppress_real_load: bool = False

    # YAML fixtures read by `mockobject inspect` when no path is given
    fixtures_path: str = "tests/mocks.yaml"

    @classmethod
    def from_file(cls, path: Path) -> "MockObjectConfig":
        """Load configuration from YAML file."""
        if not path.exists():
            return cls()

        with open(path) as f:
            data = yaml.safe_load(f) or {}

        return cls.from_dict(data.get("mockobject", data))

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "MockObjectConfig":
        """Create config from dictionary."""
        config = cls()

        if "suppress_real_load" in data:
            config.suppress_real_load = bool(data["suppress_real_load"])

        if "fixtures" in data:
            fx = data["fixtures"] or {}
            config.fixtures_path = str(fx.get("path", config.fixtures_path))

        return config

    def apply_env(self) -> "MockObjectConfig":
        """Override settings from MOCKOBJECT_* environment variables."""
        suppress = os.getenv("MOCKOBJECT_SUPPRESS_REAL_LOAD")
        if suppress is not None:
            self.suppress_real_load = suppress.strip().lower() in _TRUE_VALUES

        fixtures = os.getenv("MOCKOBJECT_FIXTURES")
        if fixtures:
            self.fixtures_path = fixtures

        return self

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "mockobject": {
                "suppress_real_load": self.suppress_real_load,
                "fixtures": {
                    "path": self.fixtures_path,
                },
            }
        }

    def save(self, path: Path) -> None:
        """Save configuration to YAML file."""
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w") as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False)


# Global config instance
_config: MockObjectConfig | None = None


def get_config(project_path: Path | None = None) -> MockObjectConfig:
    """
    Get mockobject configuration.

    Loads from .mockobject/config.yaml in the project directory.
    Falls back to defaults if not found.
    """
    global _config

    if _config is not None:
        return _config

    if project_path is None:
        project_path = Path.cwd()

    config_path = project_path / ".mockobject" / "config.yaml"
    _config = MockObjectConfig.from_file(config_path).apply_env()

    return _config


def reset_config() -> None:
    """Forget the cached configuration so the next get_config() reloads it."""
    global _config
    _config = None
