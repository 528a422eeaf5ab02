"""Configuration version 1 definition."""

from typing import Any

from dconfig.config.defaults import deep_merge, gen_default_config
from dconfig.config.schema import validate_config


class ConfigVersion_1:  # noqa: N801
    """Configuration version 1 - original flat schema."""

    version = 1
    previous_version = None  # This is our oldest tracked version

    @property
    def defaults(self) -> dict[str, Any]:
        """Default values for version 1."""
        return gen_default_config(self.version)

    def apply_defaults(self, config: dict[str, Any]) -> dict[str, Any]:
        """Apply version 1 defaults to config."""
        return deep_merge(self.defaults, config)

    def upgrade_from_previous(self, config: dict[str, Any]) -> dict[str, Any]:
        """No upgrade needed as this is the oldest version."""
        return config

    def validate(self, config: dict[str, Any]) -> list[str]:
        """Validate a version 1 config."""
        return validate_config(config, self.version)
