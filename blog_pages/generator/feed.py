"""Render the site-wide Atom feed."""

from __future__ import annotations

import typing as typ

from blog_pages.metadata import (
    AUTHOR_SOURCES,
    MetadataSources,
    first_present,
    truncate,
)

if typ.TYPE_CHECKING:
    import datetime as dt

    from jinja2 import Environment

    from blog_pages.config import SiteConfig
    from blog_pages.content import ContentTree

FEED_TEMPLATE = "atom.xml.jinja"


def render_feed(
    env: Environment,
    site: SiteConfig,
    tree: ContentTree,
    *,
    updated: dt.datetime,
) -> str:
    """Render an Atom document listing every page of ``tree``, newest first.

    The feed ``updated`` stamp is the newest page date, or ``updated`` when no
    page carries a date.
    """
    pages = tree.pages
    entries = [
        {
            "title": page.title or page.slug,
            "url": page.permalink,
            "updated": page.date or updated,
            "summary": truncate(page.description),
            "author": first_present(
                AUTHOR_SOURCES,
                MetadataSources(site=site, section=tree.section_for(page), page=page),
            ),
        }
        for page in pages
    ]
    dated = [page.date for page in pages if page.date]
    return env.get_template(FEED_TEMPLATE).render(
        site=site,
        entries=entries,
        updated=max(dated) if dated else updated,
    )


__all__ = ["FEED_TEMPLATE", "render_feed"]
