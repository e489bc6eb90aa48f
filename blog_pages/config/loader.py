"""Load site configuration YAML into typed dataclasses."""

from __future__ import annotations

import logging
import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from .helpers import (
    _as_bool,
    _build_nav_items,
    _merge_palettes,
    _optional_str,
)
from .models import SiteConfig, SiteConfigError, SiteExtra

logger = logging.getLogger(__name__)


def load_site_config(path: Path) -> SiteConfig:
    """Load the YAML configuration describing the blog and its theme.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML site configuration file (for example,
        ``config/site.yaml``). Relative ``content_dir`` and ``static_dir``
        entries are resolved against the file's parent directory.

    Returns
    -------
    SiteConfig
        Parsed site configuration, including fallback metadata, navigation,
        theme palettes, and build directories.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    SiteConfigError
        If required fields are missing or invalid (for example, no
        ``base_url`` is configured).
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from blog_pages.config import load_site_config
    >>> site = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
    >>> site.base_url  # doctest: +SKIP
    'https://blog.example.com'
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):  # pragma: no cover - config error guard
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    raw: dict[str, typ.Any] = dict(loaded)
    logger.debug("Loaded site configuration from %s", path)

    title = _optional_str(raw.get("title"))
    if not title:
        msg = "Site configuration requires a 'title'."
        raise SiteConfigError(msg)
    base_url = _optional_str(raw.get("base_url"))
    if not base_url:
        msg = "Site configuration requires a 'base_url'."
        raise SiteConfigError(msg)

    root = path.parent
    static_raw = _optional_str(raw.get("static_dir"))
    return SiteConfig(
        title=title,
        base_url=base_url,
        description=_optional_str(raw.get("description")),
        generate_feed=_as_bool(raw.get("generate_feed")),
        feed_filename=raw.get("feed_filename", "atom.xml"),
        extra=_build_site_extra(raw.get("extra")),
        content_dir=_resolve_dir(root, raw.get("content_dir", "content")),
        output_dir=Path(raw.get("output_dir", "public")),
        static_dir=_resolve_dir(root, static_raw) if static_raw else None,
        pygments_style=raw.get("pygments_style", "monokai"),
    )


def _resolve_dir(root: Path, value: str | Path) -> Path:
    """Resolve ``value`` relative to the configuration directory."""
    candidate = Path(value)
    if candidate.is_absolute():
        return candidate
    return root / candidate


def _build_site_extra(payload: typ.Mapping[str, typ.Any] | None) -> SiteExtra:
    """Build the site-level ``extra`` block from the provided payload."""
    match payload:
        case None:
            return SiteExtra()
        case dict() as data:
            pass
        case _:
            msg = "Site 'extra' configuration must be a mapping."
            raise SiteConfigError(msg)
    return SiteExtra(
        author=_optional_str(data.get("author")),
        thumbnail=_optional_str(data.get("thumbnail")),
        image=_optional_str(data.get("image")),
        logo=_optional_str(data.get("logo")),
        twitter_card=_as_bool(data.get("twitter_card")),
        header_nav=_build_nav_items(data.get("header_nav"), location="header_nav"),
        footer_nav=_build_nav_items(data.get("footer_nav"), location="footer_nav"),
        palettes=_merge_palettes(data.get("palettes")),
    )


__all__ = ["load_site_config"]
