from pathlib import Path
from typing import Any

import yaml

from dconfig.exceptions import InvalidConfigFileError


def read_yaml(path: Path) -> dict[str, Any]:
    """Read a YAML mapping from disk.

    Raises:
        FileNotFoundError: If the file does not exist.
        InvalidConfigFileError: If the document is not a mapping.
    """
    config_text = Path(path).read_text()
    data = yaml.safe_load(config_text) or {}
    if not isinstance(data, dict):
        raise InvalidConfigFileError(
            f"{path} must contain a YAML mapping, got {type(data).__name__}"
        )
    return data


def write_yaml(path: Path, data: dict[str, Any]) -> None:
    """Serialize a mapping to YAML, overwriting any existing file."""
    config_yaml = yaml.safe_dump(data, default_flow_style=False, sort_keys=False)
    Path(path).write_text(config_yaml)
