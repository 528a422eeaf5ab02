from pathlib import Path
from typing import Any

import pytest
import yaml

from dconfig.config.store import ConfigStore
from dconfig.system.path_resolver import PathResolver


@pytest.fixture
def ws_root(tmp_path: Path) -> Path:
    """Provide an empty workspace root in a temporary directory."""
    root = tmp_path / "workspace"
    root.mkdir()
    return root


@pytest.fixture
def path_resolver(ws_root: Path) -> PathResolver:
    """Provide a PathResolver pinned to the temporary workspace."""
    return PathResolver(ws_root)


@pytest.fixture
def store(path_resolver: PathResolver) -> ConfigStore:
    """Provide a ConfigStore for the temporary workspace."""
    return ConfigStore(path_resolver)


@pytest.fixture
def write_config_file(ws_root: Path):
    """Write a raw mapping to the workspace's dendron.yml."""

    def _write(data: dict[str, Any]) -> Path:
        config_path = ws_root / "dendron.yml"
        with open(config_path, "w") as f:
            yaml.dump(data, f)
        return config_path

    return _write


@pytest.fixture
def v1_config() -> dict[str, Any]:
    """A hand-written version 1 config as found in older workspaces."""
    return {
        "version": 1,
        "site": {"siteHierarchies": ["root"], "siteRootDir": "docs"},
        "vaults": [{"fsPath": "vault"}],
        "journal": {
            "dailyDomain": "daily",
            "name": "j1",
            "dateFormat": "y.MM.dd",
            "addBehavior": "childOfDomain",
        },
        "lookupConfirmVaultOnCreate": True,
        "lookup": {"note": {"selectionType": "selection2link", "leaveTrace": True}},
        "noAutoCreateOnDefinition": True,
        "hooks": {"onCreate": [{"id": "h1", "type": "js"}]},
    }
