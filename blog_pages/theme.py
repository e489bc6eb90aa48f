"""Light/dark theme preference and its persisted toggle.

The browser keeps a single string under the ``theme`` storage key and mirrors
it onto the ``data-theme`` document attribute read by the stylesheet. This
module models the same two-state machine on the Python side so the build can
render an explicit initial state and so the behaviour can be exercised
without a browser. :class:`ThemeToggle` is the state object handed to the
page templates; :class:`JsonFileThemeStorage` stands in for browser storage
when the preference is managed from the CLI.

Examples
--------
>>> storage = MemoryThemeStorage()
>>> toggle = ThemeToggle(storage)
>>> toggle.preference
<ThemePreference.LIGHT: 'light'>
>>> toggle.toggle()
<ThemePreference.DARK: 'dark'>
>>> ThemeToggle(storage).attributes
{'data-theme': 'dark'}
"""

from __future__ import annotations

import enum
import logging
import typing as typ

import msgspec
import msgspec.json as msgspec_json

from ._constants import THEME_ATTRIBUTE, THEME_STORAGE_KEY

if typ.TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)


class ThemeStorageError(RuntimeError):
    """Raised when the preference storage cannot be read or written."""


class ThemePreference(enum.StrEnum):
    """Display theme chosen by the reader."""

    LIGHT = "light"
    DARK = "dark"

    @classmethod
    def default(cls) -> ThemePreference:
        return cls.LIGHT

    @classmethod
    def parse(cls, value: object | None) -> ThemePreference:
        """Normalize a stored value; anything unrecognised means ``light``.

        ``auto`` has no state of its own and collapses into the default.
        """
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        return cls.default()

    @property
    def complement(self) -> ThemePreference:
        if self is ThemePreference.LIGHT:
            return ThemePreference.DARK
        return ThemePreference.LIGHT


class ThemeStorage(typ.Protocol):
    """Key/value storage holding the persisted preference."""

    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...


class MemoryThemeStorage:
    """Ephemeral in-process storage."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._values: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value


class JsonFileThemeStorage:
    """Persist preference keys in a small JSON document on disk."""

    def __init__(self, path: Path) -> None:
        self.path = path

    def _read(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            raw = self.path.read_bytes()
        except OSError as exc:
            msg = f"Unable to read theme storage '{self.path}': {exc}"
            raise ThemeStorageError(msg) from exc
        if not raw.strip():
            return {}
        try:
            return msgspec_json.decode(raw, type=dict[str, str])
        except msgspec.DecodeError as exc:
            msg = f"Theme storage '{self.path}' is not a JSON object of strings."
            raise ThemeStorageError(msg) from exc

    def get(self, key: str) -> str | None:
        return self._read().get(key)

    def set(self, key: str, value: str) -> None:
        try:
            values = self._read()
        except ThemeStorageError as exc:
            logger.warning("Overwriting unreadable theme storage: %s", exc)
            values = {}
        values[key] = value
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_bytes(msgspec_json.format(msgspec_json.encode(values)))
        except OSError as exc:
            msg = f"Unable to write theme storage '{self.path}': {exc}"
            raise ThemeStorageError(msg) from exc


def load_preference(storage: ThemeStorage | None) -> ThemePreference:
    """Read the persisted preference, defaulting to ``light``.

    Inaccessible storage is treated as empty rather than raising.
    """
    if storage is None:
        return ThemePreference.default()
    try:
        stored = storage.get(THEME_STORAGE_KEY)
    except (ThemeStorageError, OSError) as exc:
        logger.warning("Theme storage unavailable, using default: %s", exc)
        return ThemePreference.default()
    return ThemePreference.parse(stored)


def save_preference(storage: ThemeStorage | None, preference: ThemePreference) -> bool:
    """Persist ``preference``; return False when storage refuses the write."""
    if storage is None:
        return False
    try:
        storage.set(THEME_STORAGE_KEY, preference.value)
    except (ThemeStorageError, OSError) as exc:
        logger.warning("Theme preference not persisted: %s", exc)
        return False
    logger.debug("Persisted theme preference %s", preference.value)
    return True


class ThemeToggle:
    """Two-state light/dark toggle backed by optional persistent storage."""

    def __init__(self, storage: ThemeStorage | None = None) -> None:
        self.storage = storage
        self.preference = load_preference(storage)

    def toggle(self) -> ThemePreference:
        """Flip to the complementary theme and persist it."""
        self.preference = self.preference.complement
        save_preference(self.storage, self.preference)
        return self.preference

    @property
    def attributes(self) -> dict[str, str]:
        """Document attributes that select the stylesheet variables."""
        return {THEME_ATTRIBUTE: self.preference.value}


__all__ = [
    "JsonFileThemeStorage",
    "MemoryThemeStorage",
    "ThemePreference",
    "ThemeStorage",
    "ThemeStorageError",
    "ThemeToggle",
    "load_preference",
    "save_preference",
]
