"""Load and validate site configuration YAML for blog builds.

This subpackage parses the blog's ``site.yaml`` file and produces strongly
typed dataclasses (:class:`SiteConfig`, :class:`Section`, :class:`Page`, etc.)
that the metadata resolver and page generator consume. The primary entry point
is :func:`load_site_config`, which ensures required fields are present,
validates navigation entries, merges theme palette overrides, and returns a
:class:`SiteConfig` ready for rendering.

Examples
--------
>>> from pathlib import Path
>>> from blog_pages.config import load_site_config
>>> site = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
>>> [item.name for item in site.extra.header_nav]  # doctest: +SKIP
['Posts', 'About']
"""

from .loader import load_site_config
from .models import (
    DARK_PALETTE,
    LIGHT_PALETTE,
    Extra,
    NavItem,
    Page,
    Section,
    SiteConfig,
    SiteConfigError,
    SiteExtra,
    ThemePalette,
)

__all__ = [
    "DARK_PALETTE",
    "LIGHT_PALETTE",
    "Extra",
    "NavItem",
    "Page",
    "Section",
    "SiteConfig",
    "SiteConfigError",
    "SiteExtra",
    "ThemePalette",
    "load_site_config",
]
