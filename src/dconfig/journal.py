"""Daily journal settings resolved from a config of any version."""

from dataclasses import dataclass
from typing import Any

from dconfig.config.resolver import get_config, get_prop


@dataclass
class DailyJournalSettings:
    """What the daily journal command needs to create today's note."""

    domain: str
    name: str
    daily_vault: str | None
    confirm_vault_on_create: bool

    @property
    def should_prompt_vault(self) -> bool:
        """Ask the user for a vault only when none is pinned and confirmation is on."""
        return self.daily_vault is None and self.confirm_vault_on_create


def resolve_daily_journal(config: dict[str, Any]) -> DailyJournalSettings:
    journal_config = get_config(config, "workspace.journal") or {}
    lookup_config = get_config(config, "commands.lookup") or {}
    note_lookup_config = lookup_config.get("note") or {}

    # v1 lookup.note has no confirmVaultOnCreate; the flag lived at the root
    if "confirmVaultOnCreate" in note_lookup_config:
        confirm_vault_on_create = note_lookup_config["confirmVaultOnCreate"]
    else:
        confirm_vault_on_create = get_prop(config, "lookupConfirmVaultOnCreate")

    return DailyJournalSettings(
        domain=journal_config.get("dailyDomain"),
        name=journal_config.get("name"),
        daily_vault=journal_config.get("dailyVault"),
        confirm_vault_on_create=bool(confirm_vault_on_create),
    )
