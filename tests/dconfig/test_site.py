"""Tests for site config normalization."""

import pytest

from dconfig.exceptions import ErrorStatus, InvalidSiteConfigError
from dconfig.site import (
    DEV_SITE_URL,
    SITE_DEFAULTS,
    SITE_URL_HELP,
    clean_site_config,
    get_site_index,
    get_stage,
)


@pytest.fixture
def site_config():
    """A minimal publishable site config."""
    return {
        "siteHierarchies": ["root", "blog"],
        "siteRootDir": "docs",
        "siteUrl": "https://example.com",
    }


class TestCleanSiteConfig:
    """Test clean_site_config defaulting and validation."""

    def test_applies_defaults(self, site_config):
        """Should fill every default the input lacks."""
        cleaned = clean_site_config(site_config, stage="prod", env={})

        for key, value in SITE_DEFAULTS.items():
            assert cleaned[key] == value
        assert cleaned["siteUrl"] == "https://example.com"
        assert cleaned["siteIndex"] == "root"

    def test_input_values_win(self, site_config):
        """Should keep values the caller set."""
        site_config["copyAssets"] = False

        cleaned = clean_site_config(site_config, stage="prod", env={})

        assert cleaned["copyAssets"] is False

    def test_none_values_fall_back_to_defaults(self, site_config):
        """Should treat explicit None like an absent key."""
        site_config["siteNotesDir"] = None

        cleaned = clean_site_config(site_config, stage="prod", env={})

        assert cleaned["siteNotesDir"] == "notes"

    def test_does_not_mutate_input(self, site_config):
        """Should return a new mapping."""
        original = dict(site_config)

        clean_site_config(site_config, stage="prod", env={})

        assert site_config == original

    def test_explicit_site_index(self, site_config):
        """Should keep an explicit siteIndex."""
        site_config["siteIndex"] = "blog"

        assert clean_site_config(site_config, stage="prod", env={})["siteIndex"] == "blog"

    def test_env_site_url_overrides_config(self, site_config):
        """Should prefer SITE_URL from the environment."""
        cleaned = clean_site_config(
            site_config, stage="prod", env={"SITE_URL": "https://override.dev"}
        )

        assert cleaned["siteUrl"] == "https://override.dev"

    def test_dev_stage_uses_placeholder_url(self, site_config):
        """Should substitute a placeholder URL in dev."""
        del site_config["siteUrl"]

        cleaned = clean_site_config(site_config, stage="dev", env={})

        assert cleaned["siteUrl"] == DEV_SITE_URL

    def test_stage_read_from_env(self, site_config):
        """Should read the stage from the environment when not given."""
        del site_config["siteUrl"]

        cleaned = clean_site_config(site_config, env={"STAGE": "dev"})

        assert cleaned["siteUrl"] == DEV_SITE_URL

    def test_missing_url_outside_dev(self, site_config):
        """Should reject a missing siteUrl outside dev with a help link."""
        del site_config["siteUrl"]

        with pytest.raises(InvalidSiteConfigError) as exc_info:
            clean_site_config(site_config, stage="prod", env={})

        assert exc_info.value.message == SITE_URL_HELP
        assert exc_info.value.status == ErrorStatus.INVALID_CONFIG

    def test_missing_root_dir(self, site_config):
        """Should reject a config without siteRootDir."""
        del site_config["siteRootDir"]

        with pytest.raises(InvalidSiteConfigError, match="siteRootDir is undefined"):
            clean_site_config(site_config, stage="prod", env={})

    @pytest.mark.parametrize("stage", ["dev", "prod"])
    def test_empty_hierarchies_rejected(self, site_config, stage):
        """Should reject an empty siteHierarchies in every stage."""
        site_config["siteHierarchies"] = []

        with pytest.raises(InvalidSiteConfigError, match="at least one hierarchy"):
            clean_site_config(site_config, stage=stage, env={})

    def test_missing_hierarchies_rejected(self, site_config):
        """Should reject a config with no siteHierarchies at all."""
        del site_config["siteHierarchies"]

        with pytest.raises(InvalidSiteConfigError, match="at least one hierarchy"):
            clean_site_config(site_config, stage="prod", env={})


class TestSiteHelpers:
    """Test get_stage and get_site_index."""

    @pytest.mark.parametrize(
        "env,expected",
        [
            ({}, "prod"),
            ({"STAGE": "dev"}, "dev"),
            ({"BUILD_STAGE": "test"}, "test"),
            ({"STAGE": "dev", "BUILD_STAGE": "test"}, "dev"),
        ],
    )
    def test_get_stage(self, env, expected):
        """Should read STAGE, then BUILD_STAGE, else prod."""
        assert get_stage(env) == expected

    def test_get_stage_uses_os_environ(self, monkeypatch):
        """Should fall back to the process environment."""
        monkeypatch.delenv("STAGE", raising=False)
        monkeypatch.setenv("BUILD_STAGE", "test")

        assert get_stage() == "test"

    def test_get_site_index(self):
        """Should prefer siteIndex, then the first hierarchy."""
        assert get_site_index({"siteIndex": "home", "siteHierarchies": ["root"]}) == "home"
        assert get_site_index({"siteHierarchies": ["root", "blog"]}) == "root"
        assert get_site_index({}) is None
