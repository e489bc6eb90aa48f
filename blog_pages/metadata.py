"""Resolve the effective head metadata for a rendered page.

Every field is looked up through an ordered tuple of accessors covering the
page, its section, and the site configuration. The first accessor returning a
present value wins; when none does the field stays ``None`` and the template
omits the tag entirely.

Examples
--------
>>> from blog_pages.config import Page, SiteConfig
>>> site = SiteConfig(title="Allocations", base_url="https://blog.example.com")
>>> resolve_metadata(site, page=Page(slug="arena", title="Arenas")).title
'Arenas'
>>> resolve_metadata(site).title
'Allocations'
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import posixpath
import typing as typ
from urllib.parse import urlsplit

from ._constants import DESCRIPTION_LIMIT
from .config.helpers import _optional_str

if typ.TYPE_CHECKING:
    from .config import Page, Section, SiteConfig


@dc.dataclass(slots=True, frozen=True)
class MetadataSources:
    """The page/section/site hierarchy consulted during resolution."""

    site: SiteConfig
    section: Section | None = None
    page: Page | None = None


Accessor = cabc.Callable[[MetadataSources], object | None]


def _page_attr(name: str) -> Accessor:
    return lambda src: getattr(src.page, name) if src.page else None


def _page_extra(name: str) -> Accessor:
    return lambda src: getattr(src.page.extra, name) if src.page else None


def _section_attr(name: str) -> Accessor:
    return lambda src: getattr(src.section, name) if src.section else None


def _section_extra(name: str) -> Accessor:
    return lambda src: getattr(src.section.extra, name) if src.section else None


def _site_attr(name: str) -> Accessor:
    return lambda src: getattr(src.site, name)


def _site_extra(name: str) -> Accessor:
    return lambda src: getattr(src.site.extra, name)


TITLE_SOURCES: tuple[Accessor, ...] = (
    _page_attr("title"),
    _section_attr("title"),
    _site_attr("title"),
)
AUTHOR_SOURCES: tuple[Accessor, ...] = (
    _page_extra("author"),
    _section_extra("author"),
    _site_extra("author"),
)
DESCRIPTION_SOURCES: tuple[Accessor, ...] = (
    _page_attr("description"),
    _section_attr("description"),
    _site_attr("description"),
)
IMAGE_SOURCES: tuple[Accessor, ...] = (
    _page_extra("thumbnail"),
    _page_extra("image"),
    _section_extra("image"),
    _site_extra("logo"),
)
URL_SOURCES: tuple[Accessor, ...] = (
    _page_attr("permalink"),
    _section_attr("permalink"),
    _site_attr("base_url"),
)


def first_present(
    sources: cabc.Iterable[Accessor], context: MetadataSources
) -> str | None:
    """Return the first non-blank value produced by ``sources``, or None."""
    for accessor in sources:
        value = _optional_str(accessor(context))
        if value is not None:
            return value
    return None


def truncate(text: str | None, limit: int = DESCRIPTION_LIMIT) -> str | None:
    """Cut ``text`` to at most ``limit`` characters; None passes through."""
    if text is None:
        return None
    return text[:limit]


def absolute_url(base_url: str, path: str) -> str:
    """Join ``path`` onto ``base_url`` unless it already names a full URL.

    >>> absolute_url("https://blog.example.com/", "/images/logo.png")
    'https://blog.example.com/images/logo.png'
    >>> absolute_url("https://blog.example.com", "https://cdn.example.com/a.png")
    'https://cdn.example.com/a.png'
    >>> absolute_url("https://blog.example.com", "//cdn.example.com/a.png")
    'https://cdn.example.com/a.png'
    """
    target = urlsplit(path)
    if target.scheme:
        return path
    parts = urlsplit(base_url)
    if target.netloc:
        return f"{parts.scheme}:{path}"
    joined = posixpath.join(parts.path or "/", path.lstrip("/"))
    return parts._replace(path=joined, query="", fragment="").geturl()


@dc.dataclass(slots=True, frozen=True)
class PageMetadata:
    """Effective metadata emitted into the page ``<head>``.

    Attributes
    ----------
    title : str or None
        Document title.
    author : str or None
        Author name for the ``author`` meta tag.
    description : str or None
        Summary text, already truncated to the description limit.
    image : str or None
        Absolute URL of the social preview image.
    url : str or None
        Canonical URL of the document.
    twitter_card : bool
        Whether Twitter card tags should be emitted.
    feed_url : str or None
        Absolute Atom feed URL when the site publishes one.
    """

    title: str | None = None
    author: str | None = None
    description: str | None = None
    image: str | None = None
    url: str | None = None
    twitter_card: bool = False
    feed_url: str | None = None

    def as_meta_tags(self) -> list[tuple[str, str, str]]:
        """Return ``(attribute, key, content)`` triples for present fields."""
        candidates: list[tuple[str, str, str | None]] = [
            ("name", "description", self.description),
            ("name", "author", self.author),
            ("property", "og:title", self.title),
            ("property", "og:description", self.description),
            ("property", "og:url", self.url),
            ("property", "og:image", self.image),
        ]
        if self.twitter_card:
            candidates.extend(
                [
                    (
                        "name",
                        "twitter:card",
                        "summary_large_image" if self.image else "summary",
                    ),
                    ("name", "twitter:title", self.title),
                    ("name", "twitter:description", self.description),
                    ("name", "twitter:image", self.image),
                ]
            )
        return [(attr, key, value) for attr, key, value in candidates if value]


def resolve_metadata(
    site: SiteConfig,
    section: Section | None = None,
    page: Page | None = None,
) -> PageMetadata:
    """Resolve title, author, description, image, and URL for one document.

    Parameters
    ----------
    site : SiteConfig
        Global configuration used as the last fallback.
    section : Section, optional
        Section being rendered, or the section that owns ``page``.
    page : Page, optional
        Page being rendered; omitted when rendering a section listing.

    Returns
    -------
    PageMetadata
        Resolved values; fields with no source are ``None``.
    """
    context = MetadataSources(site=site, section=section, page=page)
    image = first_present(IMAGE_SOURCES, context)
    return PageMetadata(
        title=first_present(TITLE_SOURCES, context),
        author=first_present(AUTHOR_SOURCES, context),
        description=truncate(first_present(DESCRIPTION_SOURCES, context)),
        image=absolute_url(site.base_url, image) if image else None,
        url=first_present(URL_SOURCES, context),
        twitter_card=site.extra.twitter_card,
        feed_url=site.feed_url,
    )


__all__ = [
    "AUTHOR_SOURCES",
    "DESCRIPTION_SOURCES",
    "IMAGE_SOURCES",
    "TITLE_SOURCES",
    "URL_SOURCES",
    "MetadataSources",
    "PageMetadata",
    "absolute_url",
    "first_present",
    "resolve_metadata",
    "truncate",
]
