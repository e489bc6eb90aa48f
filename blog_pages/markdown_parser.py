r"""Split Markdown content files into YAML front matter and body text.

Posts and section indexes start with a ``---`` delimited YAML block holding
their metadata; everything after the closing delimiter is Markdown handed to
the HTML renderer.

Example
-------
>>> from blog_pages.markdown_parser import split_front_matter
>>> document = split_front_matter("---\ntitle: Arenas\n---\nBody text\n")
>>> document.front_matter["title"]
'Arenas'
>>> document.body
'Body text\n'
"""

from __future__ import annotations

import dataclasses as dc
import io
import re
import typing as typ

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

FRONT_MATTER_PATTERN = re.compile(
    r"\A\ufeff?---[ \t]*\r?\n(.*?)^---[ \t]*\r?\n?", re.DOTALL | re.MULTILINE
)
SLUG_STRIP_PATTERN = re.compile(r"[^a-z0-9]+")


class ContentError(ValueError):
    """Raised when a content file cannot be parsed."""


@dc.dataclass(slots=True)
class ContentDocument:
    """Parsed content file.

    Attributes
    ----------
    front_matter : dict[str, Any]
        Metadata mapping from the YAML block; empty when the file has none.
    body : str
        Markdown following the front matter.
    """

    front_matter: dict[str, typ.Any]
    body: str


def split_front_matter(text: str) -> ContentDocument:
    """Separate the leading YAML block from the Markdown body."""
    match = FRONT_MATTER_PATTERN.match(text)
    if match is None:
        return ContentDocument(front_matter={}, body=text)
    loader = YAML(typ="safe")
    loader.version = (1, 2)
    try:
        loaded = loader.load(io.StringIO(match.group(1))) or {}
    except YAMLError as exc:
        msg = f"Invalid front matter: {exc}"
        raise ContentError(msg) from exc
    if not isinstance(loaded, dict):
        msg = "Front matter must be a mapping."
        raise ContentError(msg)
    return ContentDocument(front_matter=dict(loaded), body=text[match.end() :])


def slugify(text: str) -> str:
    """Lowercase ``text`` and collapse non-alphanumerics into hyphens.

    >>> slugify("Writing a Zig Interpreter!")
    'writing-a-zig-interpreter'
    """
    return SLUG_STRIP_PATTERN.sub("-", text.lower()).strip("-")


__all__ = ["ContentDocument", "ContentError", "slugify", "split_front_matter"]
