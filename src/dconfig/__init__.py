"""Versioned workspace configuration engine.

Resolves values from `dendron.yml` files written at any schema version,
generates per-version defaults, edits hook registrations and takes
timestamped backups before rewrites.
"""

from .config import ConfigStore, gen_default_config, get_config, get_prop
from .constants import CURRENT_CONFIG_VERSION
from .exceptions import DendronError

__all__ = [
    "CURRENT_CONFIG_VERSION",
    "ConfigStore",
    "DendronError",
    "gen_default_config",
    "get_config",
    "get_prop",
]
