"""Default configuration blocks and generators for every schema version."""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from dconfig.constants import CURRENT_CONFIG_VERSION


def _freeze(value: Any) -> Any:
    """Recursively convert dicts and lists into read-only equivalents."""
    if isinstance(value, Mapping):
        return MappingProxyType({key: _freeze(item) for key, item in value.items()})
    if isinstance(value, list | tuple):
        return tuple(_freeze(item) for item in value)
    return value


def thaw(value: Any) -> Any:
    """Return a fresh, mutable deep copy of a frozen default block."""
    if isinstance(value, Mapping):
        return {key: thaw(item) for key, item in value.items()}
    if isinstance(value, list | tuple):
        return [thaw(item) for item in value]
    return value


COMMON_DEFAULTS = _freeze(
    {
        "useFMTitle": True,
        "useNoteTitleForLink": True,
        "noLegacyNoteRef": True,
        "mermaid": True,
        "useKatex": True,
        "usePrettyRefs": True,
        "dev": {
            "enablePreviewV2": True,
        },
        "site": {
            "copyAssets": True,
            "siteHierarchies": ["root"],
            "siteRootDir": "docs",
            "usePrettyRefs": True,
            "title": "Dendron",
            "description": "Personal knowledge space",
            "siteLastModified": True,
            "gh_edit_branch": "main",
        },
    }
)

# Legacy lookup behaviour, replaced by `commands.lookup` in v2
OMITTED_FROM_V2 = _freeze(
    {
        "lookupConfirmVaultOnCreate": False,
        "lookup": {
            "note": {
                "selectionType": "selectionExtract",
                "leaveTrace": False,
            },
        },
    }
)

# Workspace concerns, nested under `workspace` in v3
OMITTED_FROM_V3 = _freeze(
    {
        "vaults": [],
        "journal": {
            "dailyDomain": "daily",
            "name": "journal",
            "dateFormat": "y.MM.dd",
            "addBehavior": "childOfDomain",
            "firstDayOfWeek": 1,
        },
        "scratch": {
            "name": "scratch",
            "dateFormat": "y.MM.dd.HHmmss",
            "addBehavior": "asOwnDomain",
        },
        "noAutoCreateOnDefinition": True,
        "noXVaultWikiLink": True,
        "autoFoldFrontmatter": True,
        "maxPreviewsCached": 10,
    }
)

_COMMAND_DEFAULTS = _freeze(
    {
        "lookup": {
            "note": {
                "selectionMode": "extract",
                "confirmVaultOnCreate": True,
                "leaveTrace": False,
                "bubbleUpCreateNew": True,
                "fuzzThreshold": 0.2,
            },
        },
        "randomNote": {},
        "insertNote": {
            "initialValue": "templates",
        },
        "insertNoteLink": {
            "aliasMode": "none",
            "enableMultiSelect": False,
        },
        "insertNoteIndex": {
            "enableMarker": False,
        },
        "copyNoteLink": {},
    }
)

_WORKSPACE_DEFAULTS = _freeze(
    {
        "vaults": [],
        "journal": {
            "dailyDomain": "daily",
            "name": "journal",
            "dateFormat": "y.MM.dd",
            "addBehavior": "childOfDomain",
        },
        "scratch": {
            "name": "scratch",
            "dateFormat": "y.MM.dd.HHmmss",
            "addBehavior": "asOwnDomain",
        },
        "graph": {
            "zoomSpeed": 1,
        },
        "enableAutoCreateOnDefinition": False,
        "enableXVaultWikiLink": False,
        "enableRemoteVaultInit": True,
        "workspaceVaultSyncMode": "noCommit",
        "enableAutoFoldFrontmatter": False,
        "maxPreviewsCached": 10,
        "maxNoteLength": 204800,
    }
)


def gen_default_command_config() -> dict[str, Any]:
    """Default `commands` namespace."""
    return thaw(_COMMAND_DEFAULTS)


def gen_default_workspace_config() -> dict[str, Any]:
    """Default `workspace` namespace. Hooks are absent until one is registered."""
    return thaw(_WORKSPACE_DEFAULTS)


def gen_default_config(version: int | None = None) -> dict[str, Any]:
    """Generate a complete default configuration for a schema version.

    Args:
        version: Schema version. None falls back to 1, the oldest schema,
            which is what legacy callers expect.

    Returns:
        dict: A fresh config that is structurally complete for its version.
    """
    if version is None:
        version = 1

    if version == CURRENT_CONFIG_VERSION:
        return {
            "version": 3,
            **thaw(COMMON_DEFAULTS),
            "commands": gen_default_command_config(),
            "workspace": gen_default_workspace_config(),
        }
    if version == 2:
        return {
            "version": 2,
            **thaw(COMMON_DEFAULTS),
            **thaw(OMITTED_FROM_V3),
            "commands": gen_default_command_config(),
        }
    return {
        "version": 1,
        **thaw(COMMON_DEFAULTS),
        **thaw(OMITTED_FROM_V3),
        **thaw(OMITTED_FROM_V2),
    }


def deep_merge(base: dict[str, Any], overlay: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge two dictionaries; overlay values win."""
    result = base.copy()

    for key, value in overlay.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value

    return result
