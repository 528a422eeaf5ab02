"""Canonical config paths and the top-level keys they had before migration.

Every path listed here is "required": it always resolves to a concrete value,
even from a config written before the concept existed. Migrating another field
means adding one entry here and its default in `defaults`.
"""

from types import MappingProxyType

LEGACY_PATHS = MappingProxyType(
    {
        "commands.insertNote.initialValue": "defaultInsertHierarchy",
        "commands.insertNoteLink": "insertNoteLink",
        "commands.insertNoteIndex": "insertNoteIndex",
        "commands.randomNote": "randomNote",
        "commands.lookup": "lookup",
        "workspace.journal": "journal",
        "workspace.vaults": "vaults",
    }
)


def is_required(path: str) -> bool:
    """Whether a canonical path must always resolve to a value."""
    return path in LEGACY_PATHS


def legacy_key(path: str) -> str | None:
    """Pre-migration top-level key for a canonical path, if it has one."""
    return LEGACY_PATHS.get(path)
