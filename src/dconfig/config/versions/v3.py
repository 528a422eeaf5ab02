"""Configuration version 3 definition."""

from typing import Any

import structlog

from dconfig.config.defaults import (
    deep_merge,
    gen_default_command_config,
    gen_default_config,
    gen_default_workspace_config,
)
from dconfig.config.schema import validate_config

logger = structlog.get_logger(__name__)

# Root fields that live under `workspace` from version 3 on
MOVED_TO_WORKSPACE = ("vaults", "journal", "scratch", "hooks")

# (v2 root key, v3 workspace key, negate)
RENAMED_TO_WORKSPACE = (
    ("noAutoCreateOnDefinition", "enableAutoCreateOnDefinition", True),
    ("noXVaultWikiLink", "enableXVaultWikiLink", True),
    ("autoFoldFrontmatter", "enableAutoFoldFrontmatter", False),
    ("maxPreviewsCached", "maxPreviewsCached", False),
    ("initializeRemoteVaults", "enableRemoteVaultInit", False),
)


class ConfigVersion_3:  # noqa: N801
    """Configuration version 3 - current version, workspace concerns nested."""

    version = 3
    previous_version = 2

    @property
    def defaults(self) -> dict[str, Any]:
        """Default values for version 3."""
        return gen_default_config(self.version)

    def apply_defaults(self, config: dict[str, Any]) -> dict[str, Any]:
        """Apply version 3 defaults to config."""
        return deep_merge(self.defaults, config)

    def upgrade_from_previous(self, config: dict[str, Any]) -> dict[str, Any]:
        """Upgrade config from 2 to 3."""
        workspace = deep_merge(gen_default_workspace_config(), config.get("workspace") or {})

        for key in MOVED_TO_WORKSPACE:
            if key in config:
                workspace[key] = config.pop(key)
                logger.info("Moved config field", source=key, target=f"workspace.{key}")

        for old_key, new_key, negate in RENAMED_TO_WORKSPACE:
            if old_key in config:
                value = config.pop(old_key)
                workspace[new_key] = not value if negate else value
                logger.info("Renamed config field", source=old_key, target=f"workspace.{new_key}")

        if "commands" not in config:
            config["commands"] = gen_default_command_config()

        config["workspace"] = workspace
        return config

    def validate(self, config: dict[str, Any]) -> list[str]:
        """Validate a version 3 config."""
        errors = validate_config(config, self.version)

        for key in MOVED_TO_WORKSPACE:
            if key in config:
                errors.append(f"{key} must be nested under workspace in version 3")

        return errors
