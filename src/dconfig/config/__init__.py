"""Workspace configuration package.

This package provides versioned configuration handling with:
- Schema models for every config version
- Default generation per version
- Version-aware value resolution over older configs
- YAML persistence, backups and migration
"""

from .defaults import gen_default_config
from .resolver import get_config, get_prop
from .store import ConfigStore, MigrationResult

__all__ = [
    "ConfigStore",
    "MigrationResult",
    "gen_default_config",
    "get_config",
    "get_prop",
]
