"""Unit tests for Markdown rendering of fenced code blocks.

These tests cover the fence normalisation in
:class:`blog_pages.generator.HtmlContentRenderer`: fences indented under list
items are pulled back to the margin, and rustdoc-style labels such as
``rust,no_run`` are reduced to the lexer name so Pygments highlights the block
and the ``data-language`` attribute names the language.
"""

from __future__ import annotations

from bs4 import BeautifulSoup

from blog_pages.generator import HtmlContentRenderer

INDENTED_LABELLED = (
    "- **Arena setup** uses a scoped allocator:\n"
    "\n"
    "  ```rust,no_run\n"
    "  let arena = Arena::new();\n"
    "  ```\n"
)


def test_normalize_strips_indent_and_label_extras() -> None:
    normalized = HtmlContentRenderer._normalize_fenced_blocks(INDENTED_LABELLED)
    assert "```rust\n" in normalized
    assert "no_run" not in normalized
    assert "\n```\n" in normalized


def test_indented_labelled_fence_is_highlighted() -> None:
    html = HtmlContentRenderer().markdown(INDENTED_LABELLED)
    soup = BeautifulSoup(html, "html.parser")
    block = soup.find("div", class_="codehilite")
    assert block is not None, "Expected a highlighted code block"
    assert block["data-language"] == "rust"
    assert "Arena::new" in block.get_text()
    assert "no_run" not in html


def test_empty_markdown_renders_nothing() -> None:
    assert HtmlContentRenderer().markdown("   \n") == ""
