"""Typed dataclasses describing blog site, section, and page structures."""

from __future__ import annotations

import dataclasses as dc
import datetime as dt  # noqa: TC003 - used for runtime type metadata
from pathlib import Path


class SiteConfigError(ValueError):
    """Raised when the site configuration is invalid or incomplete."""


@dc.dataclass(slots=True)
class Extra:
    """Free-form ``extra`` metadata shared by pages and sections."""

    author: str | None = None
    thumbnail: str | None = None
    image: str | None = None


@dc.dataclass(slots=True)
class NavItem:
    """Navigation link rendered in the header or footer."""

    name: str
    url: str
    new_tab: bool = False


@dc.dataclass(slots=True)
class ThemePalette:
    """Colour values bound to the stylesheet custom properties of one theme."""

    background_color: str
    text_color: str
    code_background: str
    code_color: str
    border_color: str


LIGHT_PALETTE = ThemePalette(
    background_color="#fdfdfd",
    text_color="#222222",
    code_background="#f2f2f2",
    code_color="#b3124f",
    border_color="#dddddd",
)
DARK_PALETTE = ThemePalette(
    background_color="#1d1f21",
    text_color="#e0e0e0",
    code_background="#2b2d30",
    code_color="#f0a6c0",
    border_color="#3a3d41",
)


@dc.dataclass(slots=True)
class SiteExtra(Extra):
    """Site-wide ``extra`` block: author/image fallbacks plus theme chrome."""

    logo: str | None = None
    twitter_card: bool = False
    header_nav: list[NavItem] = dc.field(default_factory=list)
    footer_nav: list[NavItem] = dc.field(default_factory=list)
    palettes: dict[str, ThemePalette] = dc.field(
        default_factory=lambda: {"light": LIGHT_PALETTE, "dark": DARK_PALETTE}
    )


@dc.dataclass(slots=True)
class Page:
    """A single post parsed from Markdown with YAML front matter."""

    slug: str
    title: str | None = None
    description: str | None = None
    permalink: str | None = None
    extra: Extra = dc.field(default_factory=Extra)
    date: dt.datetime | None = None
    draft: bool = False
    body: str = ""
    source_path: Path | None = None
    section: str = ""
    path: str = ""


@dc.dataclass(slots=True)
class Section:
    """A content directory described by its ``_index.md`` file."""

    path: str
    title: str | None = None
    description: str | None = None
    permalink: str | None = None
    extra: Extra = dc.field(default_factory=Extra)
    body: str = ""
    sort_by: str = "date"
    pages: list[Page] = dc.field(default_factory=list)
    source_path: Path | None = None


@dc.dataclass(slots=True)
class SiteConfig:
    """Global configuration and fallback metadata for the whole blog."""

    title: str
    base_url: str
    description: str | None = None
    generate_feed: bool = False
    feed_filename: str = "atom.xml"
    extra: SiteExtra = dc.field(default_factory=SiteExtra)
    content_dir: Path = Path("content")
    output_dir: Path = Path("public")
    static_dir: Path | None = None
    pygments_style: str = "monokai"

    @property
    def feed_url(self) -> str | None:
        """Return the absolute feed URL when feed generation is enabled."""
        if not self.generate_feed:
            return None
        return f"{self.base_url.rstrip('/')}/{self.feed_filename}"


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
]
