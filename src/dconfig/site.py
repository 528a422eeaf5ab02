"""Defaulting and validation of the site publishing config."""

import os
from collections.abc import Mapping
from typing import Any

from dconfig.exceptions import InvalidSiteConfigError

SITE_DEFAULTS = {
    "copyAssets": True,
    "usePrettyRefs": True,
    "siteNotesDir": "notes",
    "siteFaviconPath": "favicon.ico",
    "gh_edit_link": True,
    "gh_edit_link_text": "Edit this page on GitHub",
    "gh_edit_branch": "main",
    "gh_root": "docs/",
    "gh_edit_view_mode": "edit",
    "writeStubs": True,
    "description": "Personal knowledge space",
}

# Stands in for the real URL in dev, where it gets overridden anyway
DEV_SITE_URL = "https://foo"

SITE_URL_HELP = (
    "siteUrl is undefined. See "
    "https://dendron.so/notes/f2ed8639-a604-4a9d-b76c-41e205fb8713.html#siteurl "
    "for more details"
)


def get_stage(env: Mapping[str, str] | None = None) -> str:
    """Current execution stage: STAGE, then BUILD_STAGE, else "prod"."""
    env = os.environ if env is None else env
    return env.get("STAGE") or env.get("BUILD_STAGE") or "prod"


def get_site_index(site_config: Mapping[str, Any]) -> str | None:
    """Explicit siteIndex, else the first site hierarchy."""
    site_index = site_config.get("siteIndex")
    if site_index:
        return site_index
    hierarchies = site_config.get("siteHierarchies") or []
    return hierarchies[0] if hierarchies else None


def clean_site_config(
    site_config: Mapping[str, Any],
    stage: str | None = None,
    env: Mapping[str, str] | None = None,
) -> dict[str, Any]:
    """Fill in site defaults and validate the result.

    Args:
        site_config: The `site` section of a workspace config
        stage: Execution stage; read from the environment when None
        env: Environment mapping; defaults to os.environ

    Returns:
        dict: A new config with defaults applied and `siteIndex`/`siteUrl` set

    Raises:
        InvalidSiteConfigError: If siteRootDir is missing, siteUrl cannot be
            resolved outside the dev stage, or siteHierarchies is empty.
    """
    env = os.environ if env is None else env
    stage = stage or get_stage(env)

    out = {**SITE_DEFAULTS}
    out.update({key: value for key, value in site_config.items() if value is not None})

    site_url = env.get("SITE_URL") or out.get("siteUrl")

    if not out.get("siteRootDir"):
        raise InvalidSiteConfigError("siteRootDir is undefined")
    if not site_url and stage == "dev":
        site_url = DEV_SITE_URL
    if not site_url:
        raise InvalidSiteConfigError(SITE_URL_HELP)
    if len(out.get("siteHierarchies") or []) < 1:
        raise InvalidSiteConfigError("siteHierarchies must have at least one hierarchy")

    return {**out, "siteIndex": get_site_index(out), "siteUrl": site_url}
