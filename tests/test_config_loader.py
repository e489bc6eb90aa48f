"""Unit tests for loading ``site.yaml`` into :class:`SiteConfig`."""

from __future__ import annotations

import typing as typ
from textwrap import dedent

import pytest

from blog_pages.config import (
    DARK_PALETTE,
    LIGHT_PALETTE,
    NavItem,
    SiteConfigError,
    load_site_config,
)

if typ.TYPE_CHECKING:
    from pathlib import Path


def _write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "site.yaml"
    path.write_text(dedent(text).strip() + "\n", encoding="utf-8")
    return path


def test_loads_full_configuration(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        """
        title: Allocations
        base_url: https://blog.example.com
        description: Allocator notes
        generate_feed: true
        content_dir: posts-src
        extra:
          author: Blog Author
          logo: images/logo.svg
          twitter_card: true
          header_nav:
            - name: Posts
              url: /posts/
          footer_nav:
            - name: Source
              url: https://github.com/example/blog
              new_tab: true
          palettes:
            dark:
              background_color: "#000000"
        """,
    )
    site = load_site_config(path)
    assert site.title == "Allocations"
    assert site.generate_feed is True
    assert site.content_dir == tmp_path / "posts-src"
    assert site.extra.author == "Blog Author"
    assert site.extra.twitter_card is True
    assert site.extra.header_nav == [NavItem(name="Posts", url="/posts/")]
    assert site.extra.footer_nav[0].new_tab is True
    assert site.extra.palettes["dark"].background_color == "#000000"
    assert site.extra.palettes["dark"].text_color == DARK_PALETTE.text_color
    assert site.extra.palettes["light"] == LIGHT_PALETTE


def test_minimal_configuration_uses_defaults(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        """
        title: Minimal
        base_url: https://blog.example.com
        """,
    )
    site = load_site_config(path)
    assert site.description is None
    assert site.generate_feed is False
    assert site.feed_url is None
    assert site.static_dir is None
    assert site.extra.header_nav == []
    assert site.extra.logo is None


def test_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_site_config(tmp_path / "absent.yaml")


@pytest.mark.parametrize(
    "text",
    [
        "base_url: https://blog.example.com",
        "title: No URL",
    ],
)
def test_required_fields(tmp_path: Path, text: str) -> None:
    with pytest.raises(SiteConfigError):
        load_site_config(_write(tmp_path, text))


def test_nav_items_require_name_and_url(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        """
        title: Broken nav
        base_url: https://blog.example.com
        extra:
          header_nav:
            - name: Posts
        """,
    )
    with pytest.raises(SiteConfigError, match="name"):
        load_site_config(path)


def test_unknown_palette_rejected(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        """
        title: Sepia
        base_url: https://blog.example.com
        extra:
          palettes:
            sepia:
              background_color: "#f4ecd8"
        """,
    )
    with pytest.raises(SiteConfigError, match="sepia"):
        load_site_config(path)


def test_palette_must_be_a_mapping(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        """
        title: Flat palette
        base_url: https://blog.example.com
        extra:
          palettes:
            dark: "#000000"
        """,
    )
    with pytest.raises(SiteConfigError, match="dark"):
        load_site_config(path)


def test_palette_values_are_strings(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        """
        title: Numeric colour
        base_url: https://blog.example.com
        extra:
          palettes:
            light:
              border_color: 000000
        """,
    )
    palette = load_site_config(path).extra.palettes["light"]
    assert isinstance(palette.border_color, str)
    assert palette.text_color == LIGHT_PALETTE.text_color
