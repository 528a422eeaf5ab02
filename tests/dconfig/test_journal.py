"""Tests for daily journal resolution."""

from dconfig.config.defaults import gen_default_config
from dconfig.journal import DailyJournalSettings, resolve_daily_journal


class TestResolveDailyJournal:
    """Test resolve_daily_journal across schema versions."""

    def test_v1_reads_root_fields(self, v1_config):
        """Should read the root journal and root confirmation flag."""
        settings = resolve_daily_journal(v1_config)

        assert settings.domain == "daily"
        assert settings.name == "j1"
        assert settings.daily_vault is None
        assert settings.confirm_vault_on_create is True
        assert settings.should_prompt_vault

    def test_v1_defaults(self):
        """Should fall back to v1 defaults for a bare config."""
        settings = resolve_daily_journal({"version": 1})

        assert settings.name == "journal"
        assert settings.confirm_vault_on_create is False
        assert not settings.should_prompt_vault

    def test_v3_reads_workspace_and_commands(self):
        """Should read nested workspace and commands fields."""
        config = gen_default_config(3)
        config["workspace"]["journal"]["dailyVault"] = "main"
        config["commands"]["lookup"]["note"]["confirmVaultOnCreate"] = True

        settings = resolve_daily_journal(config)

        assert settings.domain == "daily"
        assert settings.daily_vault == "main"
        assert settings.confirm_vault_on_create is True
        assert not settings.should_prompt_vault

    def test_v3_missing_sections_use_defaults(self):
        """Should use v3 defaults when the sections are missing."""
        settings = resolve_daily_journal({"version": 3})

        assert settings.name == "journal"
        assert settings.confirm_vault_on_create is True
        assert settings.should_prompt_vault


class TestDailyJournalSettings:
    """Test the settings value object."""

    def test_no_prompt_without_confirmation(self):
        """Should not prompt when confirmation is off."""
        settings = DailyJournalSettings(
            domain="daily", name="journal", daily_vault=None, confirm_vault_on_create=False
        )

        assert not settings.should_prompt_vault
