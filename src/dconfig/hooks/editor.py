"""Registration of lifecycle hooks inside a workspace config.

Hooks live under `workspace.hooks` from version 3 on and under a root-level
`hooks` before that. This module only manages the registry; running the
scripts is up to the caller.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import structlog

from dconfig.config.schema import HookEntry, HookScriptType, HookType, config_version
from dconfig.constants import CURRENT_CONFIG_VERSION
from dconfig.exceptions import MissingHookScriptError
from dconfig.system.path_resolver import PathResolver

logger = structlog.get_logger(__name__)


@dataclass
class HookValidation:
    """Result of checking a hook's script on disk."""

    valid: bool
    error: MissingHookScriptError | None = None


def _hooks_container(config: dict[str, Any]) -> dict[str, Any]:
    """Return the hooks mapping for the config's version, creating it if absent.

    A newly created container always starts as `{"onCreate": []}`.
    """
    if config_version(config) == CURRENT_CONFIG_VERSION:
        if config.get("workspace") is None:
            config["workspace"] = {}
        parent = config["workspace"]
    else:
        parent = config
    if parent.get("hooks") is None:
        parent["hooks"] = {HookType.ON_CREATE.value: []}
    return parent["hooks"]


def _entry_dict(hook_entry: HookEntry | Mapping[str, Any]) -> dict[str, Any]:
    if isinstance(hook_entry, HookEntry):
        return hook_entry.model_dump(mode="json")
    return dict(hook_entry)


def get_hooks(config: dict[str, Any], hook_type: str = HookType.ON_CREATE) -> list[dict[str, Any]]:
    """Registered entries for a hook type, without modifying the config."""
    if config_version(config) == CURRENT_CONFIG_VERSION:
        hooks = (config.get("workspace") or {}).get("hooks")
    else:
        hooks = config.get("hooks")
    return list((hooks or {}).get(str(hook_type)) or [])


def add_to_config(
    config: dict[str, Any],
    hook_type: str,
    hook_entry: HookEntry | Mapping[str, Any],
) -> dict[str, Any]:
    """Append a hook entry to the list for `hook_type`.

    Id uniqueness is not checked. Mutates and returns `config`.
    """
    container = _hooks_container(config)
    container[str(hook_type)] = list(container.get(str(hook_type)) or []) + [
        _entry_dict(hook_entry)
    ]
    return config


def remove_from_config(config: dict[str, Any], hook_type: str, hook_id: str) -> dict[str, Any]:
    """Remove every entry with `hook_id` from the list for `hook_type`.

    Mutates and returns `config`.
    """
    container = _hooks_container(config)
    container[str(hook_type)] = [
        entry for entry in container.get(str(hook_type)) or [] if entry.get("id") != hook_id
    ]
    return config


def get_hook_dir(ws_root: Path | str) -> Path:
    return PathResolver(ws_root).get_hooks_dir()


def get_hook_script_path(ws_root: Path | str, basename: str) -> Path:
    return get_hook_dir(ws_root) / basename


def validate_hook(ws_root: Path | str, hook: HookEntry | Mapping[str, Any]) -> HookValidation:
    """Check that the script for a registered hook exists.

    A missing script is reported as a minor error rather than raised, so
    callers can warn and carry on.
    """
    entry = _entry_dict(hook)
    script_type = entry.get("type") or HookScriptType.JS.value
    hook_path = get_hook_script_path(ws_root, f"{entry['id']}.{script_type}")
    if not hook_path.exists():
        logger.warning("Hook script missing", hook_id=entry["id"], path=str(hook_path))
        return HookValidation(
            valid=False,
            error=MissingHookScriptError(
                f"hook {entry['id']} has missing script. {hook_path} doesn't exist"
            ),
        )
    return HookValidation(valid=True)
