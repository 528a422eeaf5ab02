"""File-level access to a workspace's `dendron.yml`."""

import shutil
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Any

import structlog

from dconfig.config.defaults import gen_default_config
from dconfig.config.schema import config_version
from dconfig.config.versions import VersionRegistry
from dconfig.constants import BACKUP_TIMESTAMP_FORMAT, CURRENT_CONFIG_VERSION
from dconfig.exceptions import ConfigValidationError
from dconfig.system.path_resolver import PathResolver
from dconfig.utils.yaml_io import read_yaml, write_yaml

logger = structlog.get_logger(__name__)


def backup_name(infix: str, now: datetime) -> str:
    """Backup file name, e.g. `dendron.2024.01.02.030405006.foo.yml`."""
    stamp = f"{now.strftime(BACKUP_TIMESTAMP_FORMAT)}{now.microsecond // 1000:03d}"
    maybe_infix = f"{infix}." if infix else ""
    return f"dendron.{stamp}.{maybe_infix}yml"


@dataclass
class MigrationResult:
    """Outcome of migrating an on-disk config."""

    from_version: int
    to_version: int
    backup_path: Path | None
    config: dict[str, Any]

    @property
    def migrated(self) -> bool:
        return self.from_version != self.to_version


class ConfigStore:
    """Reads, creates, writes and backs up a workspace config file.

    Nothing is cached between calls; every read goes to disk and every
    returned dict belongs to the caller.
    """

    def __init__(self, path_resolver: PathResolver | Path | str | None = None):
        """Initialize ConfigStore.

        Args:
            path_resolver: PathResolver for the workspace, or a workspace root
                to build one from. If None, the resolver's defaults apply.
        """
        if not isinstance(path_resolver, PathResolver):
            path_resolver = PathResolver(path_resolver)
        self.path_resolver = path_resolver
        self.ws_root = path_resolver.ws_root
        self.config_path = path_resolver.get_config_path()

    def exists(self) -> bool:
        return self.config_path.exists()

    def get_raw(self) -> dict[str, Any]:
        """Read the config without filling in defaults.

        Raises:
            FileNotFoundError: If the workspace has no config file.
            InvalidConfigFileError: If the file does not hold a mapping.
        """
        return read_yaml(self.config_path)

    def get_or_create(self, defaults: dict[str, Any] | None = None) -> dict[str, Any]:
        """Load the config, creating it from defaults if missing.

        The generated defaults take precedence over `defaults`, and on-disk
        values take precedence over both. Both merges are shallow: an on-disk
        nested section replaces the default section wholesale.

        Args:
            defaults: Extra top-level values for keys the generated defaults lack.

        Returns:
            dict: The effective configuration
        """
        config = {**(defaults or {}), **gen_default_config()}

        if not self.exists():
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            write_yaml(self.config_path, config)
            logger.info("Created default config", path=str(self.config_path))
            return config

        return {**config, **self.get_raw()}

    def write_config(self, config: dict[str, Any]) -> None:
        """Serialize the config and overwrite the file."""
        write_yaml(self.config_path, config)
        logger.info("Configuration saved", path=str(self.config_path))

    def create_backup(self, infix: str = "", now: datetime | None = None) -> Path:
        """Copy the current config file next to itself with a timestamped name.

        Args:
            infix: Optional label placed before the extension
            now: Timestamp to use; defaults to the current local time

        Returns:
            Path: Location of the backup

        Raises:
            FileNotFoundError: If there is no config file to back up.
        """
        backup_path = self.ws_root / backup_name(infix, now or datetime.now())
        shutil.copyfile(self.config_path, backup_path)
        logger.info("Config backup created", path=str(backup_path))
        return backup_path

    def migrate(
        self,
        to_version: int = CURRENT_CONFIG_VERSION,
        registry: VersionRegistry | None = None,
    ) -> MigrationResult:
        """Upgrade the on-disk config to `to_version`, backing it up first.

        Returns:
            MigrationResult: What was migrated and where the backup went

        Raises:
            FileNotFoundError: If the workspace has no config file.
            UnknownConfigVersionError: If the target version has no handler.
            ValueError: If the target is older than the on-disk version.
            ConfigValidationError: If the upgraded config fails validation;
                the file is left untouched.
        """
        registry = registry or VersionRegistry()
        raw_config = self.get_raw()
        from_version = config_version(raw_config)

        if from_version == to_version:
            return MigrationResult(from_version, to_version, None, raw_config)

        upgrade_path = registry.get_upgrade_path(from_version, to_version)
        config = registry.get_version(from_version).apply_defaults(raw_config)

        for version_handler in upgrade_path:
            config = version_handler.upgrade_from_previous(config)
            config["version"] = version_handler.version
            logger.info("Upgraded config", version=version_handler.version)

        errors = registry.get_version(to_version).validate(config)
        if errors:
            raise ConfigValidationError(errors)

        backup_path = self.create_backup("migrate")
        self.write_config(config)
        logger.info(
            "Config migrated",
            from_version=from_version,
            to_version=to_version,
            backup=str(backup_path),
        )
        return MigrationResult(from_version, to_version, backup_path, config)
