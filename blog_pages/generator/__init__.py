"""Utilities for rendering Markdown content into the static blog."""

from .feed import render_feed
from .renderer import HtmlContentRenderer
from .site_generator import SiteGenerator, build_environment

__all__ = [
    "HtmlContentRenderer",
    "SiteGenerator",
    "build_environment",
    "render_feed",
]
