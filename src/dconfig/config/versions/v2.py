"""Configuration version 2 definition."""

from typing import Any

import structlog

from dconfig.config.defaults import deep_merge, gen_default_command_config, gen_default_config
from dconfig.config.schema import validate_config

logger = structlog.get_logger(__name__)

# v1 lookup.note.selectionType -> v2 commands.lookup.note.selectionMode
SELECTION_MODES = {
    "selectionExtract": "extract",
    "selection2link": "link",
    "none": "none",
}


class ConfigVersion_2:  # noqa: N801
    """Configuration version 2 - command settings move under `commands`."""

    version = 2
    previous_version = 1

    @property
    def defaults(self) -> dict[str, Any]:
        """Default values for version 2."""
        return gen_default_config(self.version)

    def apply_defaults(self, config: dict[str, Any]) -> dict[str, Any]:
        """Apply version 2 defaults to config."""
        return deep_merge(self.defaults, config)

    def upgrade_from_previous(self, config: dict[str, Any]) -> dict[str, Any]:
        """Upgrade config from 1 to 2."""
        commands = deep_merge(gen_default_command_config(), config.get("commands") or {})

        self._migrate_lookup(config, commands)
        self._migrate_insert_note(config, commands)
        self._migrate_command_sections(config, commands)

        config["commands"] = commands
        return config

    def _migrate_lookup(self, config: dict[str, Any], commands: dict[str, Any]) -> None:
        """Move the flat lookup flags into `commands.lookup.note`."""
        note = commands["lookup"]["note"]

        if "lookupConfirmVaultOnCreate" in config:
            note["confirmVaultOnCreate"] = config.pop("lookupConfirmVaultOnCreate")
            logger.info(
                "Moved config field",
                source="lookupConfirmVaultOnCreate",
                target="commands.lookup.note.confirmVaultOnCreate",
            )

        legacy_lookup = config.pop("lookup", None)
        if not isinstance(legacy_lookup, dict):
            return
        legacy_note = legacy_lookup.get("note") or {}

        if "selectionType" in legacy_note:
            selection_type = legacy_note["selectionType"]
            note["selectionMode"] = SELECTION_MODES.get(selection_type, note["selectionMode"])
        if "leaveTrace" in legacy_note:
            note["leaveTrace"] = legacy_note["leaveTrace"]

    def _migrate_insert_note(self, config: dict[str, Any], commands: dict[str, Any]) -> None:
        if "defaultInsertHierarchy" in config:
            commands["insertNote"]["initialValue"] = config.pop("defaultInsertHierarchy")
            logger.info(
                "Moved config field",
                source="defaultInsertHierarchy",
                target="commands.insertNote.initialValue",
            )

    def _migrate_command_sections(self, config: dict[str, Any], commands: dict[str, Any]) -> None:
        """Move whole command sections that kept their shape."""
        for key in ("insertNoteLink", "insertNoteIndex", "randomNote"):
            if key not in config:
                continue
            section = config.pop(key)
            if isinstance(section, dict):
                commands[key] = deep_merge(commands[key], section)
            logger.info("Moved config field", source=key, target=f"commands.{key}")

    def validate(self, config: dict[str, Any]) -> list[str]:
        """Validate a version 2 config."""
        errors = validate_config(config, self.version)

        for key in ("lookupConfirmVaultOnCreate", "lookup"):
            if key in config:
                errors.append(f"{key} was replaced by commands.lookup in version 2")

        return errors
