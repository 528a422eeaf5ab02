"""Registry for configuration versions."""

import importlib
from pathlib import Path
from typing import Any, Protocol

from dconfig.exceptions import UnknownConfigVersionError


class ConfigVersion(Protocol):
    """Protocol for configuration version handlers."""

    version: int
    previous_version: int | None

    @property
    def defaults(self) -> dict[str, Any]:
        """Complete default config for this version."""
        ...

    def apply_defaults(self, config: dict[str, Any]) -> dict[str, Any]:
        """Apply version-specific defaults to config."""
        ...

    def upgrade_from_previous(self, config: dict[str, Any]) -> dict[str, Any]:
        """Upgrade config from previous version."""
        ...

    def validate(self, config: dict[str, Any]) -> list[str]:
        """Validate config for this version."""
        ...


class VersionRegistry:
    """Manages configuration versions and upgrade paths."""

    def __init__(self) -> None:
        """Initialize the version registry."""
        self._versions: dict[int, ConfigVersion] = {}
        self._load_versions()

    def _load_versions(self) -> None:
        """Dynamically load all version modules."""
        versions_dir = Path(__file__).parent

        for version_file in sorted(versions_dir.glob("v*.py")):
            module_name = version_file.stem
            # Version modules come from this package directory, never from user input
            module = importlib.import_module(f"dconfig.config.versions.{module_name}")

            for attr_name in dir(module):
                if attr_name.startswith("ConfigVersion_"):
                    version_class = getattr(module, attr_name)
                    version_instance = version_class()
                    self._versions[version_instance.version] = version_instance

    @property
    def versions(self) -> list[int]:
        """All known versions, oldest first."""
        return sorted(self._versions)

    def get_version(self, version: int) -> ConfigVersion:
        """Get the version handler for a specific version.

        Args:
            version: Schema version number (e.g. 2)

        Returns:
            ConfigVersion: Version handler for the specified version

        Raises:
            UnknownConfigVersionError: If version is not found
        """
        if version not in self._versions:
            raise UnknownConfigVersionError(version)

        return self._versions[version]

    def get_upgrade_path(self, from_version: int, to_version: int) -> list[ConfigVersion]:
        """Get the upgrade path between two versions.

        Args:
            from_version: Starting version
            to_version: Target version

        Returns:
            list[ConfigVersion]: Handlers to apply in order. Each one upgrades
            from its previous_version.

        Raises:
            UnknownConfigVersionError: If the target version is unknown
            ValueError: If the target version is older than the start
        """
        if from_version == to_version:
            return []

        if to_version not in self._versions:
            raise UnknownConfigVersionError(to_version)
        if to_version < from_version:
            raise ValueError(f"Cannot downgrade config from {from_version} to {to_version}")

        if from_version not in self._versions:
            # Unknown starting version, start from oldest
            from_version = min(self._versions)

        return [
            self._versions[version]
            for version in self.versions
            if from_version < version <= to_version
        ]

    def get_current_version(self) -> ConfigVersion:
        """Get the current/latest version handler.

        Returns:
            ConfigVersion: Handler for the latest version
        """
        if not self._versions:
            raise ValueError("No configuration versions found")

        return self._versions[max(self._versions)]
