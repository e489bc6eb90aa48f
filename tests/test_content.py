"""Unit tests for front matter parsing and content tree discovery."""

from __future__ import annotations

import datetime as dt
import typing as typ
from textwrap import dedent

import pytest

from blog_pages.config import SiteConfig
from blog_pages.content import load_content
from blog_pages.markdown_parser import ContentError, slugify, split_front_matter

if typ.TYPE_CHECKING:
    from pathlib import Path


def _write(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(dedent(text).lstrip(), encoding="utf-8")


@pytest.fixture
def site(tmp_path: Path) -> SiteConfig:
    """Site rooted in a temporary content tree with two sections."""
    content = tmp_path / "content"
    _write(
        content / "_index.md",
        """
        ---
        title: Home
        ---
        Welcome.
        """,
    )
    _write(
        content / "posts" / "_index.md",
        """
        ---
        title: Posts
        extra:
          image: images/posts.png
        ---
        """,
    )
    _write(
        content / "posts" / "older.md",
        """
        ---
        title: Older post
        date: 2023-01-05
        ---
        Old.
        """,
    )
    _write(
        content / "posts" / "Newer Post.md",
        """
        ---
        title: Newer post
        date: 2024-06-01T12:00:00Z
        extra:
          author: Guest
        ---
        New.
        """,
    )
    _write(
        content / "posts" / "nested" / "deep.md",
        """
        ---
        title: Deep post
        ---
        """,
    )
    _write(
        content / "posts" / "wip.md",
        """
        ---
        title: Work in progress
        draft: true
        ---
        """,
    )
    _write(content / "about.md", "No front matter here.\n")
    return SiteConfig(
        title="Fixture", base_url="https://blog.example.com", content_dir=content
    )


def test_split_front_matter_without_block() -> None:
    document = split_front_matter("Just text\n")
    assert document.front_matter == {}
    assert document.body == "Just text\n"


def test_split_front_matter_rejects_non_mapping() -> None:
    with pytest.raises(ContentError):
        split_front_matter("---\n- a\n- b\n---\nBody\n")


def test_split_front_matter_rejects_invalid_yaml() -> None:
    with pytest.raises(ContentError):
        split_front_matter("---\ntitle: [unclosed\n---\nBody\n")


def test_slugify() -> None:
    assert slugify("Newer Post") == "newer-post"
    assert slugify("  Zig & Allocators!  ") == "zig-allocators"


def test_sections_and_permalinks(site: SiteConfig) -> None:
    tree = load_content(site)
    assert set(tree.sections) == {"", "posts"}
    assert tree.sections[""].permalink == "https://blog.example.com/"
    posts = tree.sections["posts"]
    assert posts.permalink == "https://blog.example.com/posts/"
    assert posts.extra.image == "images/posts.png"


def test_pages_sorted_newest_first_and_drafts_skipped(site: SiteConfig) -> None:
    tree = load_content(site)
    slugs = [page.slug for page in tree.sections["posts"].pages]
    assert slugs == ["newer-post", "older", "deep"]
    newer = tree.sections["posts"].pages[0]
    assert newer.date == dt.datetime(2024, 6, 1, 12, tzinfo=dt.UTC)
    assert newer.extra.author == "Guest"
    assert newer.permalink == "https://blog.example.com/posts/newer-post/"


def test_nested_page_belongs_to_nearest_section(site: SiteConfig) -> None:
    tree = load_content(site)
    deep = next(page for page in tree.pages if page.slug == "deep")
    assert deep.section == "posts"
    assert deep.path == "posts/nested/deep"
    assert tree.section_for(deep) is tree.sections["posts"]


def test_root_pages_attach_to_root_section(site: SiteConfig) -> None:
    tree = load_content(site)
    about = next(page for page in tree.sections[""].pages)
    assert about.slug == "about"
    assert about.title is None
    assert about.body == "No front matter here.\n"


def test_missing_content_dir(tmp_path: Path) -> None:
    site = SiteConfig(
        title="Empty", base_url="https://x.example", content_dir=tmp_path / "nope"
    )
    with pytest.raises(FileNotFoundError):
        load_content(site)


def test_invalid_sort_by(tmp_path: Path) -> None:
    _write(tmp_path / "c" / "_index.md", "---\nsort_by: weight\n---\n")
    site = SiteConfig(title="T", base_url="https://x.example", content_dir=tmp_path / "c")
    with pytest.raises(ContentError, match="sort_by"):
        load_content(site)


def test_page_colliding_with_section_is_rejected(tmp_path: Path) -> None:
    content = tmp_path / "c"
    _write(content / "posts" / "_index.md", "---\ntitle: Posts\n---\n")
    _write(content / "posts" / "series.md", "---\ntitle: Series page\n---\n")
    _write(content / "posts" / "series" / "_index.md", "---\ntitle: Series\n---\n")
    site = SiteConfig(title="T", base_url="https://x.example", content_dir=content)
    with pytest.raises(ContentError, match="collides"):
        load_content(site)
