"""Workspace file names and version markers."""

DENDRON_CONFIG_FILE = "dendron.yml"
DENDRON_HOOKS_BASE = "hooks"

CURRENT_CONFIG_VERSION = 3
OLDEST_CONFIG_VERSION = 1

# Milliseconds are appended as three digits after the seconds
BACKUP_TIMESTAMP_FORMAT = "%Y.%m.%d.%H%M%S"
