import os
from pathlib import Path

from dconfig.constants import DENDRON_CONFIG_FILE, DENDRON_HOOKS_BASE


class PathResolver:
    """Central authority for workspace file path resolution.

    Uses environment variables for configuration with sensible defaults.
    """

    def __init__(self, ws_root: Path | str | None = None) -> None:
        """Initialize PathResolver.

        Args:
            ws_root: Explicit workspace root. If None, DENDRON_WS_ROOT is checked
                before falling back to the current working directory.
        """
        if ws_root is None:
            ws_root = os.getenv("DENDRON_WS_ROOT") or Path.cwd()
        self.ws_root = Path(ws_root)

    def get_config_path(self) -> Path:
        """Get the path to the workspace configuration file."""
        return self.ws_root / DENDRON_CONFIG_FILE

    def get_hooks_dir(self) -> Path:
        """Get the directory holding lifecycle hook scripts."""
        return self.ws_root / DENDRON_HOOKS_BASE

    def get_log_level(self) -> str:
        """Get the log level name from DCONFIG_LOG_LEVEL."""
        return os.getenv("DCONFIG_LOG_LEVEL", "INFO").upper()

    def use_json_logs(self) -> bool:
        """Whether DCONFIG_JSON_LOGS requests JSON log output."""
        return os.getenv("DCONFIG_JSON_LOGS", "false").lower() == "true"
