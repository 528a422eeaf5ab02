"""Version-tagged configuration shapes.

The engine passes configs around as plain dicts loaded from YAML. These
Pydantic models are the single source of truth for what each version must
contain, and validate a dict at the schema boundary.
"""

from enum import StrEnum
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from dconfig.constants import OLDEST_CONFIG_VERSION


class HookType(StrEnum):
    """Lifecycle events a hook can be registered for."""

    ON_CREATE = "onCreate"


class HookScriptType(StrEnum):
    """Script kinds a hook entry can point at."""

    JS = "js"


class _Section(BaseModel):
    """Base for config sections; unknown keys are preserved."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)


class HookEntry(BaseModel):
    """A registered lifecycle script."""

    model_config = ConfigDict(extra="forbid")

    id: str
    type: HookScriptType = HookScriptType.JS


class HooksConfig(_Section):
    on_create: list[HookEntry] = Field(default_factory=list, alias="onCreate")


class VaultConfig(_Section):
    fs_path: str = Field(alias="fsPath")
    name: str | None = None


class JournalConfig(_Section):
    daily_domain: str = Field(alias="dailyDomain")
    name: str
    date_format: str = Field(alias="dateFormat")
    add_behavior: str = Field(alias="addBehavior")
    daily_vault: str | None = Field(default=None, alias="dailyVault")
    first_day_of_week: int | None = Field(default=None, alias="firstDayOfWeek")


class ScratchConfig(_Section):
    name: str
    date_format: str = Field(alias="dateFormat")
    add_behavior: str = Field(alias="addBehavior")


class SiteConfig(_Section):
    site_hierarchies: list[str] = Field(alias="siteHierarchies")
    site_root_dir: str = Field(alias="siteRootDir")
    site_url: str | None = Field(default=None, alias="siteUrl")
    site_index: str | None = Field(default=None, alias="siteIndex")
    use_pretty_refs: bool | None = Field(default=None, alias="usePrettyRefs")


class LegacyLookupNoteConfig(_Section):
    selection_type: str | None = Field(default=None, alias="selectionType")
    leave_trace: bool | None = Field(default=None, alias="leaveTrace")


class LegacyLookupConfig(_Section):
    note: LegacyLookupNoteConfig


class LookupNoteConfig(_Section):
    selection_mode: str | None = Field(default=None, alias="selectionMode")
    confirm_vault_on_create: bool | None = Field(default=None, alias="confirmVaultOnCreate")
    leave_trace: bool | None = Field(default=None, alias="leaveTrace")
    bubble_up_create_new: bool | None = Field(default=None, alias="bubbleUpCreateNew")
    fuzz_threshold: float | None = Field(default=None, alias="fuzzThreshold")


class LookupConfig(_Section):
    note: LookupNoteConfig


class CommandConfig(_Section):
    lookup: LookupConfig | None = None
    random_note: dict[str, Any] | None = Field(default=None, alias="randomNote")
    insert_note: dict[str, Any] | None = Field(default=None, alias="insertNote")
    insert_note_link: dict[str, Any] | None = Field(default=None, alias="insertNoteLink")
    insert_note_index: dict[str, Any] | None = Field(default=None, alias="insertNoteIndex")
    copy_note_link: dict[str, Any] | None = Field(default=None, alias="copyNoteLink")


class WorkspaceConfig(_Section):
    vaults: list[VaultConfig]
    journal: JournalConfig
    scratch: ScratchConfig
    hooks: HooksConfig | None = None


class _CommonConfig(_Section):
    """Fields shared by every schema version."""

    site: SiteConfig
    use_fm_title: bool | None = Field(default=None, alias="useFMTitle")
    use_note_title_for_link: bool | None = Field(default=None, alias="useNoteTitleForLink")
    no_legacy_note_ref: bool | None = Field(default=None, alias="noLegacyNoteRef")
    mermaid: bool | None = None
    use_katex: bool | None = Field(default=None, alias="useKatex")
    use_pretty_refs: bool | None = Field(default=None, alias="usePrettyRefs")
    dev: dict[str, Any] | None = None


class ConfigV1(_CommonConfig):
    """Original flat schema."""

    version: Literal[1]
    vaults: list[VaultConfig]
    journal: JournalConfig
    scratch: ScratchConfig
    lookup: LegacyLookupConfig
    lookup_confirm_vault_on_create: bool = Field(alias="lookupConfirmVaultOnCreate")
    hooks: HooksConfig | None = None


class ConfigV2(_CommonConfig):
    """Flat schema with the `commands` namespace."""

    version: Literal[2]
    vaults: list[VaultConfig]
    journal: JournalConfig
    scratch: ScratchConfig
    commands: CommandConfig
    hooks: HooksConfig | None = None


class ConfigV3(_CommonConfig):
    """Current schema: workspace concerns nested under `workspace`."""

    version: Literal[3]
    commands: CommandConfig
    workspace: WorkspaceConfig


StrictConfig = Annotated[ConfigV1 | ConfigV2 | ConfigV3, Field(discriminator="version")]

CONFIG_MODELS: dict[int, type[_CommonConfig]] = {1: ConfigV1, 2: ConfigV2, 3: ConfigV3}

_strict_adapter = TypeAdapter(StrictConfig)


def config_version(config: dict[str, Any]) -> int:
    """Return the schema version of a raw config.

    Unset, non-integer and unknown versions all read as the oldest version.
    """
    version = config.get("version")
    if isinstance(version, bool) or not isinstance(version, int):
        return OLDEST_CONFIG_VERSION
    return version if version in CONFIG_MODELS else OLDEST_CONFIG_VERSION


def required_fields(version: int) -> list[str]:
    """Top-level keys that must be present for a config at `version`."""
    model = CONFIG_MODELS[version]
    return [
        field.alias or name for name, field in model.model_fields.items() if field.is_required()
    ]


def parse_config(config: dict[str, Any]) -> ConfigV1 | ConfigV2 | ConfigV3:
    """Validate a raw config and return the typed variant for its version.

    Raises:
        pydantic.ValidationError: If the config does not match its version's shape.
    """
    return _strict_adapter.validate_python({**config, "version": config_version(config)})


def validate_config(config: dict[str, Any], version: int | None = None) -> list[str]:
    """Check a raw config against the shape for `version`.

    Args:
        config: Raw configuration dict
        version: Version to validate against. Defaults to the config's own version.

    Returns:
        list[str]: Human-readable errors; empty when the config is valid.
    """
    if version is None:
        version = config_version(config)
    model = CONFIG_MODELS.get(version)
    if model is None:
        return [f"version: unknown config version {version}"]

    try:
        model.model_validate({**config, "version": version})
    except ValidationError as e:
        return [
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
            for error in e.errors()
        ]
    return []
