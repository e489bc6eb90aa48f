"""Unit tests for the theme preference state machine and its storage."""

from __future__ import annotations

import typing as typ

import pytest

from blog_pages.theme import (
    JsonFileThemeStorage,
    MemoryThemeStorage,
    ThemePreference,
    ThemeStorageError,
    ThemeToggle,
    load_preference,
    save_preference,
)

if typ.TYPE_CHECKING:
    from pathlib import Path


class _BrokenStorage:
    """Storage whose every access fails, like a browser with storage disabled."""

    def get(self, key: str) -> str | None:
        msg = f"storage disabled for {key}"
        raise ThemeStorageError(msg)

    def set(self, key: str, value: str) -> None:
        msg = f"storage disabled for {key}={value}"
        raise ThemeStorageError(msg)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("light", ThemePreference.LIGHT),
        ("dark", ThemePreference.DARK),
        (" DARK ", ThemePreference.DARK),
        ("auto", ThemePreference.LIGHT),
        ("", ThemePreference.LIGHT),
        (None, ThemePreference.LIGHT),
        (42, ThemePreference.LIGHT),
    ],
)
def test_parse_always_yields_a_known_theme(
    raw: object, expected: ThemePreference
) -> None:
    assert ThemePreference.parse(raw) is expected


def test_complement_flips_between_states() -> None:
    assert ThemePreference.LIGHT.complement is ThemePreference.DARK
    assert ThemePreference.DARK.complement is ThemePreference.LIGHT


def test_first_load_defaults_to_light() -> None:
    toggle = ThemeToggle(MemoryThemeStorage())
    assert toggle.preference is ThemePreference.LIGHT
    assert toggle.attributes == {"data-theme": "light"}


def test_toggle_persists_and_survives_reload() -> None:
    storage = MemoryThemeStorage()
    toggle = ThemeToggle(storage)
    assert toggle.toggle() is ThemePreference.DARK
    assert storage.get("theme") == "dark"
    assert ThemeToggle(storage).preference is ThemePreference.DARK


def test_toggling_twice_restores_original_state() -> None:
    storage = MemoryThemeStorage({"theme": "dark"})
    toggle = ThemeToggle(storage)
    toggle.toggle()
    toggle.toggle()
    assert toggle.preference is ThemePreference.DARK
    assert storage.get("theme") == "dark"


def test_toggle_without_storage_is_ephemeral() -> None:
    toggle = ThemeToggle()
    assert toggle.toggle() is ThemePreference.DARK
    assert ThemeToggle().preference is ThemePreference.LIGHT


def test_broken_storage_falls_back_to_light() -> None:
    storage = _BrokenStorage()
    assert load_preference(storage) is ThemePreference.LIGHT
    assert save_preference(storage, ThemePreference.DARK) is False
    toggle = ThemeToggle(storage)
    assert toggle.toggle() is ThemePreference.DARK


def test_json_storage_round_trips_through_file(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "prefs.json"
    storage = JsonFileThemeStorage(path)
    assert storage.get("theme") is None
    assert save_preference(storage, ThemePreference.DARK) is True
    assert path.exists()
    assert JsonFileThemeStorage(path).get("theme") == "dark"


def test_json_storage_rejects_corrupt_file(tmp_path: Path) -> None:
    path = tmp_path / "prefs.json"
    path.write_text("[1, 2, 3]", encoding="utf-8")
    storage = JsonFileThemeStorage(path)
    with pytest.raises(ThemeStorageError):
        storage.get("theme")
    assert load_preference(storage) is ThemePreference.LIGHT


def test_json_storage_keeps_unrelated_keys(tmp_path: Path) -> None:
    path = tmp_path / "prefs.json"
    path.write_text('{"font": "serif"}', encoding="utf-8")
    storage = JsonFileThemeStorage(path)
    storage.set("theme", "dark")
    assert storage.get("font") == "serif"
    assert storage.get("theme") == "dark"


def test_json_storage_overwrites_corrupt_file_on_toggle(tmp_path: Path) -> None:
    path = tmp_path / "prefs.json"
    path.write_text("not json", encoding="utf-8")
    toggle = ThemeToggle(JsonFileThemeStorage(path))
    assert toggle.preference is ThemePreference.LIGHT
    assert toggle.toggle() is ThemePreference.DARK
    assert ThemeToggle(JsonFileThemeStorage(path)).preference is ThemePreference.DARK
