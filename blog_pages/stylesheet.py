"""Generate the theme stylesheet keyed on the ``data-theme`` attribute."""

from __future__ import annotations

import typing as typ

from ._constants import THEME_ATTRIBUTE

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .config import ThemePalette

PALETTE_PROPERTIES: tuple[str, ...] = (
    "background_color",
    "text_color",
    "code_background",
    "code_color",
    "border_color",
)

BASE_RULES = """\
body {
  background-color: var(--background-color);
  color: var(--text-color);
}

code {
  background-color: var(--code-background);
  color: var(--code-color);
}

pre,
hr,
.site-header,
.site-footer {
  border-color: var(--border-color);
}
"""


def custom_properties(palette: ThemePalette) -> list[str]:
    """Return ``--name: value;`` declarations for every palette colour."""
    return [
        f"--{name.replace('_', '-')}: {getattr(palette, name)};"
        for name in PALETTE_PROPERTIES
    ]


def render_stylesheet(
    palettes: cabc.Mapping[str, ThemePalette], highlight_css: str = ""
) -> str:
    """Render CSS variable blocks per theme followed by the shared rules.

    The light palette also applies to ``:root`` so documents render correctly
    before the toggle script has set the attribute.
    """
    blocks: list[str] = []
    for name in ("light", "dark"):
        palette = palettes.get(name)
        if palette is None:
            continue
        selector = f'[{THEME_ATTRIBUTE}="{name}"]'
        if name == "light":
            selector = f":root,\n{selector}"
        body = "\n".join(f"  {line}" for line in custom_properties(palette))
        blocks.append(f"{selector} {{\n{body}\n}}\n")
    blocks.append(BASE_RULES)
    if highlight_css:
        blocks.append(highlight_css.rstrip("\n") + "\n")
    return "\n".join(blocks)


__all__ = ["PALETTE_PROPERTIES", "custom_properties", "render_stylesheet"]
