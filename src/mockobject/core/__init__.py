"""Core settings for mockobject."""

from mockobject.core.config import MockObjectConfig, get_config, reset_config

__all__ = ["MockObjectConfig", "get_config", "reset_config"]
