"""Configuration version definitions.

Each version module contains the complete definition of that config version:
- Default values
- Validation rules
- Upgrade logic from previous version
"""

from .registry import ConfigVersion, VersionRegistry

__all__ = ["ConfigVersion", "VersionRegistry"]
