"""Version-aware lookup of configuration values.

Call sites address values with canonical (current schema) dotted paths such as
``workspace.journal``. The resolver absorbs the differences between schema
versions so callers never branch on ``config["version"]`` themselves.
"""

from typing import Any

from dconfig.config.defaults import gen_default_config
from dconfig.config.legacy import is_required, legacy_key
from dconfig.config.schema import config_version
from dconfig.constants import CURRENT_CONFIG_VERSION

_MISSING = object()


def get_path(config: dict[str, Any], path: str, default: Any = None) -> Any:
    """Walk a dotted path through nested dicts."""
    node: Any = config
    for part in path.split("."):
        if not isinstance(node, dict):
            return default
        node = node.get(part, _MISSING)
        if node is _MISSING:
            return default
    return node


def set_path(config: dict[str, Any], path: str, value: Any) -> dict[str, Any]:
    """Set a dotted path, creating intermediate dicts as needed."""
    *parents, leaf = path.split(".")
    node = config
    for part in parents:
        child = node.get(part)
        if not isinstance(child, dict):
            child = {}
            node[part] = child
        node = child
    node[leaf] = value
    return config


def is_current_config(config: dict[str, Any]) -> bool:
    """Whether the config is already at the current schema version."""
    return config_version(config) == CURRENT_CONFIG_VERSION


def get_prop(config: dict[str, Any], key: str) -> Any:
    """Get a top-level value, filling any missing top-level key from v1 defaults.

    This is direct top-level access only; no legacy path mapping is applied.
    The caller's dict is left untouched.
    """
    return {**gen_default_config(), **config}.get(key)


def get_legacy_config(config: dict[str, Any], path: str) -> Any:
    """Resolve a canonical path against the flat v1 shape."""
    key = legacy_key(path)
    if key is None:
        return None
    return get_prop(config, key)


def get_config(config: dict[str, Any], path: str) -> Any:
    """Resolve the effective value of a canonical path.

    Args:
        config: Raw configuration at any schema version
        path: Dotted path in the current schema's vocabulary

    Returns:
        The configured value, a version default for required paths, or None
        when the path is simply not configured.
    """
    value = get_path(config, path)
    if value is not None:
        return value

    version = config_version(config)
    if version == CURRENT_CONFIG_VERSION or version == 2:
        if is_required(path):
            return get_path(gen_default_config(version), path)
        return None

    return get_legacy_config(config, path)


def use_pretty_refs(config: dict[str, Any]) -> bool:
    """Whether note refs render in pretty mode; root setting wins over site."""
    for value in (config.get("usePrettyRefs"), get_path(config, "site.usePrettyRefs")):
        if value is not None:
            return value
    return True


def apply_remote_vault_defaults(config: dict[str, Any]) -> dict[str, Any]:
    """Turn on remote vault initialization unless the config says otherwise."""
    if config_version(config) == CURRENT_CONFIG_VERSION:
        config.setdefault("enableRemoteVaultInit", True)
    else:
        config.setdefault("initializeRemoteVaults", True)
    return config
