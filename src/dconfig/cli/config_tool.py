#!/usr/bin/env python3
"""Command-line tool for inspecting and maintaining a workspace's dendron.yml.

This script provides:
- Creating a default config for a fresh workspace
- Resolving values by canonical path regardless of config version
- Timestamped backups and migration to the current schema
- Registering, removing and checking lifecycle hooks
"""

import sys
from pathlib import Path
from typing import NoReturn

import click
import yaml

from dconfig.config.resolver import get_config
from dconfig.config.schema import HookEntry, HookScriptType, HookType, config_version
from dconfig.config.store import ConfigStore
from dconfig.config.versions import VersionRegistry
from dconfig.constants import CURRENT_CONFIG_VERSION
from dconfig.exceptions import DendronError
from dconfig.hooks.editor import add_to_config, get_hooks, remove_from_config, validate_hook
from dconfig.system.path_resolver import PathResolver
from dconfig.utils.structlog_configurator import configure_structlog


def _fail(message: str) -> NoReturn:
    click.echo(click.style(f"✗ {message}", fg="red", bold=True), err=True)
    sys.exit(1)


def _dump(value: object) -> str:
    return yaml.safe_dump(value, default_flow_style=False, sort_keys=False).rstrip()


def _read_raw(store: ConfigStore) -> dict:
    """Read the raw config, exiting with a message if it is missing or malformed."""
    try:
        return store.get_raw()
    except FileNotFoundError:
        _fail(f"No config found at {store.config_path}")
    except DendronError as e:
        _fail(e.message)


@click.group()
@click.option(
    "--ws-root",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Workspace root (defaults to $DENDRON_WS_ROOT or the current directory)",
)
@click.option("--log-level", default=None, help="Log level (defaults to $DCONFIG_LOG_LEVEL)")
@click.pass_context
def cli(ctx: click.Context, ws_root: Path | None, log_level: str | None) -> None:
    """Workspace configuration tool.

    Read, migrate and back up dendron.yml across schema versions.
    """
    path_resolver = PathResolver(ws_root)
    configure_structlog(
        level=log_level or path_resolver.get_log_level(),
        json_logs=path_resolver.use_json_logs(),
    )
    ctx.ensure_object(dict)
    ctx.obj["path_resolver"] = path_resolver
    ctx.obj["store"] = ConfigStore(path_resolver)


@cli.command()
@click.pass_context
def init(ctx: click.Context) -> None:
    """Create dendron.yml with defaults if it does not exist."""
    store: ConfigStore = ctx.obj["store"]
    existed = store.exists()
    try:
        config = store.get_or_create()
    except DendronError as e:
        _fail(e.message)
    if existed:
        click.echo(f"Config already exists at {store.config_path} (version {config['version']})")
    else:
        click.echo(click.style(f"✓ Created {store.config_path}", fg="green"))


@cli.command()
@click.argument("path")
@click.pass_context
def get(ctx: click.Context, path: str) -> None:
    """Resolve PATH (e.g. 'workspace.journal') against the current config.

    PATH is always written in the current schema's vocabulary; older configs
    are resolved through their legacy fields.
    """
    store: ConfigStore = ctx.obj["store"]
    value = get_config(_read_raw(store), path)
    if value is None:
        _fail(f"{path} is not configured")
    click.echo(_dump(value))


@cli.command()
@click.option("--infix", default="", help="Label added to the backup file name")
@click.pass_context
def backup(ctx: click.Context, infix: str) -> None:
    """Copy dendron.yml to a timestamped backup beside it."""
    store: ConfigStore = ctx.obj["store"]
    try:
        backup_path = store.create_backup(infix)
    except FileNotFoundError:
        _fail(f"No config found at {store.config_path}")
    click.echo(str(backup_path))


@cli.command()
@click.option(
    "--to",
    "to_version",
    type=int,
    default=CURRENT_CONFIG_VERSION,
    show_default=True,
    help="Target schema version",
)
@click.pass_context
def migrate(ctx: click.Context, to_version: int) -> None:
    """Upgrade dendron.yml to a newer schema version."""
    store: ConfigStore = ctx.obj["store"]
    try:
        result = store.migrate(to_version)
    except FileNotFoundError:
        _fail(f"No config found at {store.config_path}")
    except DendronError as e:
        _fail(e.message)
    except ValueError as e:
        _fail(str(e))

    if not result.migrated:
        click.echo(f"Config is already at version {result.to_version}")
        return
    click.echo(
        click.style(
            f"✓ Migrated config from version {result.from_version} to {result.to_version}",
            fg="green",
        )
    )
    click.echo(f"  Backup: {result.backup_path}")


@cli.command()
@click.pass_context
def validate(ctx: click.Context) -> None:
    """Check dendron.yml against the schema for its version."""
    raw_config = _read_raw(ctx.obj["store"])

    version = config_version(raw_config)
    errors = VersionRegistry().get_version(version).validate(raw_config)
    if errors:
        for error in errors:
            click.echo(click.style(f"  • {error}", fg="yellow"), err=True)
        _fail(f"Config is not a valid version {version} config")
    click.echo(click.style(f"✓ Config is a valid version {version} config", fg="green"))


@cli.group()
def hooks() -> None:
    """Manage lifecycle hook registrations."""


_hook_type_option = click.option(
    "--hook-type",
    type=click.Choice([member.value for member in HookType]),
    default=HookType.ON_CREATE.value,
    show_default=True,
)


@hooks.command("add")
@click.argument("hook_id")
@click.option(
    "--type",
    "script_type",
    type=click.Choice([member.value for member in HookScriptType]),
    default=HookScriptType.JS.value,
    show_default=True,
)
@_hook_type_option
@click.pass_context
def hooks_add(ctx: click.Context, hook_id: str, script_type: str, hook_type: str) -> None:
    """Register HOOK_ID for a lifecycle event."""
    store: ConfigStore = ctx.obj["store"]
    # Raw read so generated defaults are not written back into the file
    config = _read_raw(store) if store.exists() else store.get_or_create()
    entry = HookEntry(id=hook_id, type=HookScriptType(script_type))
    store.write_config(add_to_config(config, hook_type, entry))

    result = validate_hook(store.ws_root, entry)
    click.echo(click.style(f"✓ Registered {hook_type} hook {hook_id}", fg="green"))
    if not result.valid:
        click.echo(click.style(f"Warning: {result.error.message}", fg="yellow"), err=True)


@hooks.command("remove")
@click.argument("hook_id")
@_hook_type_option
@click.pass_context
def hooks_remove(ctx: click.Context, hook_id: str, hook_type: str) -> None:
    """Unregister every hook with HOOK_ID."""
    store: ConfigStore = ctx.obj["store"]
    config = _read_raw(store)
    store.write_config(remove_from_config(config, hook_type, hook_id))
    click.echo(f"Removed {hook_type} hook {hook_id}")


@hooks.command("list")
@_hook_type_option
@click.pass_context
def hooks_list(ctx: click.Context, hook_type: str) -> None:
    """List registered hooks."""
    entries = get_hooks(_read_raw(ctx.obj["store"]), hook_type)
    if not entries:
        click.echo(f"No {hook_type} hooks registered.")
        return
    for entry in entries:
        click.echo(f"{entry['id']}\t{entry.get('type', '')}")


@hooks.command("check")
@_hook_type_option
@click.pass_context
def hooks_check(ctx: click.Context, hook_type: str) -> None:
    """Warn about registered hooks whose script is missing."""
    path_resolver: PathResolver = ctx.obj["path_resolver"]
    entries = get_hooks(_read_raw(ctx.obj["store"]), hook_type)

    missing = 0
    for entry in entries:
        result = validate_hook(path_resolver.ws_root, entry)
        if not result.valid:
            missing += 1
            click.echo(click.style(f"Warning: {result.error.message}", fg="yellow"), err=True)

    click.echo(
        f"{len(entries) - missing}/{len(entries)} hook scripts present "
        f"in {path_resolver.get_hooks_dir()}"
    )


def main() -> None:
    """Entry point for the config tool CLI."""
    cli()


if __name__ == "__main__":
    main()
