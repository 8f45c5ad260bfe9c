"""
Configuration management with typed Pydantic models.

Scoping setups (scope name, keys, base features) are declared in YAML
and validated on load.
"""

from scoped_aggregates.config.loader import load_config
from scoped_aggregates.config.settings import BaseFeatureConfig, ScopingConfig

__all__ = [
    "BaseFeatureConfig",
    "ScopingConfig",
    "load_config",
]
