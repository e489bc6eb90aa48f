"""Static site generator for a personal blog and its light/dark theme.

This package exposes the CLI entry points used by ``blog generate`` to render
posts and sections, and ``blog theme`` to inspect the persisted theme
preference.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from blog_pages import main
>>> main()  # doctest: +SKIP
>>> from blog_pages import app
>>> app.name
('blog',)
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]
