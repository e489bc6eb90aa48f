"""Discover sections and posts under the configured content directory.

Each directory holding an ``_index.md`` becomes a :class:`Section`; every
other Markdown file is a :class:`Page` attached to the nearest enclosing
section. Output paths mirror the directory layout (``posts/arena/``) and
permalinks are those paths joined onto ``base_url``.

Example
-------
>>> from pathlib import Path
>>> from blog_pages.config import load_site_config
>>> from blog_pages.content import load_content
>>> site = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
>>> tree = load_content(site)  # doctest: +SKIP
>>> [page.slug for page in tree.sections[""].pages]  # doctest: +SKIP
['writing-a-zig-interpreter', 'arena-allocators']
"""

from __future__ import annotations

import dataclasses as dc
import datetime as dt
import logging
import typing as typ
from pathlib import Path, PurePosixPath

from ._constants import SECTION_INDEX
from .config import Page, Section
from .config.helpers import _as_bool, _build_extra, _optional_str, _parse_timestamp
from .markdown_parser import ContentError, split_front_matter, slugify
from .metadata import absolute_url

if typ.TYPE_CHECKING:
    from .config import SiteConfig

logger = logging.getLogger(__name__)

_OLDEST = dt.datetime.min.replace(tzinfo=dt.UTC)


@dc.dataclass(slots=True)
class ContentTree:
    """All sections keyed by their output path plus a flat page list."""

    sections: dict[str, Section]

    @property
    def pages(self) -> list[Page]:
        """Every published page, newest first."""
        collected = [page for section in self.sections.values() for page in section.pages]
        return sorted(collected, key=_date_key, reverse=True)

    def section_for(self, page: Page) -> Section | None:
        return self.sections.get(page.section)


def load_content(site: SiteConfig) -> ContentTree:
    """Walk ``site.content_dir`` and build the section/page tree.

    Raises
    ------
    FileNotFoundError
        If the content directory does not exist.
    ContentError
        If a content file has invalid front matter, or a page would render
        to the same path as a section.
    """
    root = site.content_dir
    if not root.is_dir():
        msg = f"Content directory '{root}' not found."
        raise FileNotFoundError(msg)

    sections: dict[str, Section] = {}
    for index_path in sorted(root.rglob(SECTION_INDEX)):
        section = _load_section(site, root, index_path)
        sections[section.path] = section
    if "" not in sections:
        sections[""] = Section(path="", permalink=_permalink(site, ""))

    for source in sorted(root.rglob("*.md")):
        if source.name == SECTION_INDEX:
            continue
        page = _load_page(site, root, source, sections)
        if page.draft:
            logger.info("Skipping draft %s", source)
            continue
        if page.path in sections:
            msg = (
                f"{source}: page path '{page.path}' collides with the section "
                f"defined by {sections[page.path].source_path}."
            )
            raise ContentError(msg)
        sections[page.section].pages.append(page)

    for section in sections.values():
        _sort_pages(section)
    return ContentTree(sections=sections)


def _read(source: Path) -> tuple[dict[str, typ.Any], str]:
    try:
        document = split_front_matter(source.read_text(encoding="utf-8"))
    except ContentError as exc:
        msg = f"{source}: {exc}"
        raise ContentError(msg) from exc
    return document.front_matter, document.body


def _relative_dir(root: Path, path: Path) -> str:
    relative = path.parent.relative_to(root)
    return "" if relative == Path(".") else relative.as_posix()


def _permalink(site: SiteConfig, path: str) -> str:
    return absolute_url(site.base_url, f"{path}/" if path else "")


def _load_section(site: SiteConfig, root: Path, index_path: Path) -> Section:
    front_matter, body = _read(index_path)
    path = _relative_dir(root, index_path)
    sort_by = str(front_matter.get("sort_by", "date")).lower()
    if sort_by not in {"date", "title"}:
        msg = f"{index_path}: sort_by must be 'date' or 'title', got {sort_by!r}."
        raise ContentError(msg)
    return Section(
        path=path,
        title=_optional_str(front_matter.get("title")),
        description=_optional_str(front_matter.get("description")),
        permalink=_permalink(site, path),
        extra=_build_extra(front_matter.get("extra")),
        body=body,
        sort_by=sort_by,
        source_path=index_path,
    )


def _owning_section(directory: str, sections: dict[str, Section]) -> str:
    """Return the nearest ancestor directory that defines a section."""
    if not directory:
        return ""
    current = PurePosixPath(directory)
    for candidate in (current, *current.parents):
        key = candidate.as_posix()
        if key in sections:
            return key
    return ""


def _load_page(
    site: SiteConfig, root: Path, source: Path, sections: dict[str, Section]
) -> Page:
    front_matter, body = _read(source)
    directory = _relative_dir(root, source)
    slug = _optional_str(front_matter.get("slug")) or slugify(source.stem)
    if not slug:
        msg = f"{source}: unable to derive a slug from the filename."
        raise ContentError(msg)
    path = f"{directory}/{slug}" if directory else slug
    return Page(
        slug=slug,
        title=_optional_str(front_matter.get("title")),
        description=_optional_str(front_matter.get("description")),
        permalink=_permalink(site, path),
        extra=_build_extra(front_matter.get("extra")),
        date=_parse_timestamp(front_matter.get("date")),
        draft=_as_bool(front_matter.get("draft")),
        body=body,
        source_path=source,
        section=_owning_section(directory, sections),
        path=path,
    )


def _date_key(page: Page) -> dt.datetime:
    return page.date or _OLDEST


def _sort_pages(section: Section) -> None:
    if section.sort_by == "title":
        section.pages.sort(key=lambda page: (page.title or page.slug).lower())
    else:
        section.pages.sort(key=_date_key, reverse=True)


__all__ = ["ContentTree", "load_content"]
