"""Utility helpers shared by the blog configuration and content loaders."""

from __future__ import annotations

import dataclasses as dc
import datetime as dt
import typing as typ

from .models import (
    DARK_PALETTE,
    LIGHT_PALETTE,
    Extra,
    NavItem,
    SiteConfigError,
    ThemePalette,
)

DEFAULT_PALETTES: dict[str, ThemePalette] = {
    "light": LIGHT_PALETTE,
    "dark": DARK_PALETTE,
}


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _as_bool(value: object | None, *, default: bool = False) -> bool:
    """Interpret YAML scalars such as ``true``/``"yes"`` as booleans."""
    match value:
        case None:
            return default
        case bool():
            return value
        case str() as text:
            return text.strip().lower() in {"1", "true", "yes", "on"}
        case _:
            return bool(value)


def _build_extra(payload: typ.Mapping[str, typ.Any] | None) -> Extra:
    """Build the shared ``extra`` block used by pages and sections."""
    if not payload:
        return Extra()
    return Extra(
        author=_optional_str(payload.get("author")),
        thumbnail=_optional_str(payload.get("thumbnail")),
        image=_optional_str(payload.get("image")),
    )


def _build_nav_items(
    entries: list[typ.Mapping[str, object]] | None, *, location: str
) -> list[NavItem]:
    """Build navigation items for the header or footer."""
    items: list[NavItem] = []
    match entries:
        case list() as values:
            iterable = values
        case None:
            return items
        case _:
            msg = f"Navigation '{location}' must be a list of links."
            raise SiteConfigError(msg)
    for entry in iterable:
        match entry:
            case {"name": name, "url": url, **rest}:
                pass
            case _:
                msg = f"Navigation '{location}' entries require 'name' and 'url'."
                raise SiteConfigError(msg)
        if not _optional_str(name) or not _optional_str(url):
            msg = f"Navigation '{location}' entries require 'name' and 'url'."
            raise SiteConfigError(msg)
        items.append(
            NavItem(
                name=str(name).strip(),
                url=str(url).strip(),
                new_tab=_as_bool(rest.get("new_tab")),
            )
        )
    return items


def _merge_palettes(
    override: typ.Mapping[str, typ.Any] | None,
) -> dict[str, ThemePalette]:
    """Merge per-theme colour overrides into the default palettes."""
    result = dict(DEFAULT_PALETTES)
    if not override:
        return result
    for name, payload in override.items():
        if name not in DEFAULT_PALETTES:
            msg = f"Unknown theme palette '{name}'; expected 'light' or 'dark'."
            raise SiteConfigError(msg)
        if not isinstance(payload, dict):
            msg = f"Theme palette '{name}' must be a mapping of colours."
            raise SiteConfigError(msg)
        base = DEFAULT_PALETTES[name]
        result[name] = ThemePalette(
            **{
                field.name: str(payload.get(field.name, getattr(base, field.name)))
                for field in dc.fields(ThemePalette)
            }
        )
    return result


def _parse_timestamp(value: dt.datetime | dt.date | str | None) -> dt.datetime | None:
    """Return a timezone-aware UTC datetime parsed from ``value``, or None."""
    match value:
        case dt.datetime():
            parsed = value
        case dt.date():
            parsed = dt.datetime(value.year, value.month, value.day)
        case str() as text:
            sanitized = text.strip()
            if not sanitized:
                return None
            if sanitized.endswith("Z"):
                sanitized = sanitized[:-1] + "+00:00"
            try:
                parsed = dt.datetime.fromisoformat(sanitized)
            except ValueError:
                return None
        case _:
            return None
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=dt.UTC)
    return parsed.astimezone(dt.UTC)


__all__ = [
    "DEFAULT_PALETTES",
    "_as_bool",
    "_build_extra",
    "_build_nav_items",
    "_merge_palettes",
    "_optional_str",
    "_parse_timestamp",
]
