"""Lifecycle hook registry management."""

from .editor import (
    HookValidation,
    add_to_config,
    get_hook_dir,
    get_hook_script_path,
    get_hooks,
    remove_from_config,
    validate_hook,
)

__all__ = [
    "HookValidation",
    "add_to_config",
    "get_hook_dir",
    "get_hook_script_path",
    "get_hooks",
    "remove_from_config",
    "validate_hook",
]
