"""Cyclopts CLI entrypoint for building the blog and managing its theme.

The ``blog`` console script defined here renders the static site from the
YAML configuration and Markdown content tree, and inspects or flips the
persisted light/dark preference. Typical usage involves running
``blog generate`` locally or in CI to rebuild ``public/``.

Examples
--------
Build the site with the default configuration:

>>> from blog_pages.cli import main
>>> main()  # doctest: +SKIP

Build into a custom directory:

>>> from blog_pages.cli import app
>>> app(["generate", "--output-dir", "dist"])  # doctest: +SKIP
"""

from __future__ import annotations

import logging
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .config import load_site_config
from .generator import SiteGenerator
from .theme import JsonFileThemeStorage, ThemeToggle

DEFAULT_CONFIG = Path("config/site.yaml")
DEFAULT_THEME_STORAGE = Path(".blog-theme.json")

app = App(name="blog", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
    )


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


@app.command(help="Render the blog into static HTML, CSS, and feed files.")
def generate(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
    output_dir: typ.Annotated[
        Path | None,
        Parameter(help="Override the output folder", env_var="INPUT_OUTPUT_DIR"),
    ] = None,
    theme_storage: typ.Annotated[
        Path | None,
        Parameter(
            help="Preference file whose theme is rendered as the default",
            env_var="INPUT_THEME_STORAGE",
        ),
    ] = None,
    verbose: typ.Annotated[bool, Parameter(help="Enable debug logging")] = False,
) -> None:
    """Build every section and post described by the site configuration.

    Parameters
    ----------
    config : Path, optional
        Path to the ``site.yaml`` configuration file (overridable via
        ``INPUT_CONFIG``).
    output_dir : Path or None, optional
        Override for ``output_dir`` from the configuration.
    theme_storage : Path or None, optional
        JSON preference file; when given its stored theme becomes the
        initial ``data-theme`` attribute instead of ``light``.
    verbose : bool, optional
        Emit debug logging for each rendered file.

    Returns
    -------
    None
        Writes rendered artifacts and prints the generated paths.
    """
    _configure_logging(verbose)
    site = load_site_config(config)
    storage = JsonFileThemeStorage(theme_storage) if theme_storage else None
    generator = SiteGenerator(
        site, output_dir=output_dir, theme=ThemeToggle(storage)
    )
    for path in generator.run():
        print(f"wrote {_format_path(path)}")


@app.command(help="Show the persisted theme preference, optionally toggling it.")
def theme(
    *,
    storage: typ.Annotated[
        Path, Parameter(help="Preference file", env_var="INPUT_THEME_STORAGE")
    ] = DEFAULT_THEME_STORAGE,
    toggle: typ.Annotated[
        bool, Parameter(help="Flip the preference before printing it")
    ] = False,
) -> None:
    """Print the stored preference, flipping and persisting it first if asked."""
    _configure_logging(verbose=False)
    state = ThemeToggle(JsonFileThemeStorage(storage))
    if toggle:
        state.toggle()
    print(state.preference.value)


def main() -> None:
    """Invoke the Cyclopts application that powers the `blog` console command."""
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
