"""High-level orchestration for building the static blog.

This module coordinates loading the content tree, resolving per-document head
metadata, rendering sections and posts through the shared Jinja templates, and
writing the theme stylesheet, the theme toggle script, static assets, and the
optional Atom feed. It exposes :class:`SiteGenerator`, which consumes a
:class:`~blog_pages.config.SiteConfig` and returns every path it wrote.

Example
-------
>>> from pathlib import Path
>>> from blog_pages.config import load_site_config
>>> from blog_pages.generator import SiteGenerator
>>> site = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
>>> SiteGenerator(site).run()  # doctest: +SKIP
[PosixPath('public/index.html'), PosixPath('public/posts/index.html'), ...]
"""

from __future__ import annotations

import datetime as dt
import logging
import shutil
import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from blog_pages._constants import THEME_ATTRIBUTE, THEME_STORAGE_KEY
from blog_pages.content import ContentTree, load_content
from blog_pages.generator.feed import render_feed
from blog_pages.generator.renderer import HtmlContentRenderer
from blog_pages.metadata import absolute_url, resolve_metadata
from blog_pages.stylesheet import render_stylesheet
from blog_pages.theme import ThemePreference, ThemeToggle

if typ.TYPE_CHECKING:
    from blog_pages.config import Page, Section, SiteConfig

logger = logging.getLogger(__name__)

DEFAULT_TEMPLATES_DIR = Path(__file__).resolve().parents[1] / "templates"
STYLESHEET_NAME = "style.css"
THEME_SCRIPT_NAME = "theme.js"


def build_environment(templates_dir: Path | None = None) -> Environment:
    """Return the Jinja environment shared by page, script, and feed templates."""
    return Environment(
        loader=FileSystemLoader(str(templates_dir or DEFAULT_TEMPLATES_DIR)),
        autoescape=True,
        trim_blocks=True,
        lstrip_blocks=True,
    )


class SiteGenerator:
    """Render every section and post of the blog into ``output_dir``."""

    def __init__(
        self,
        site: SiteConfig,
        *,
        templates_dir: Path | None = None,
        output_dir: Path | None = None,
        theme: ThemeToggle | None = None,
    ) -> None:
        """Initialize the generator with configuration and template context.

        Parameters
        ----------
        site : SiteConfig
            Parsed site configuration providing fallback metadata and paths.
        templates_dir : Path, optional
            Directory containing Jinja templates; defaults to the package templates.
        output_dir : Path, optional
            Override for the output directory; defaults to ``site.output_dir``.
        theme : ThemeToggle, optional
            Theme state rendered as the initial ``data-theme`` attribute;
            defaults to a toggle without storage, which yields ``light``.
        """
        self.site = site
        self.output_dir = output_dir or site.output_dir
        self.theme = theme or ThemeToggle()
        self.renderer = HtmlContentRenderer(site.pygments_style)
        self.env = build_environment(templates_dir)
        self.page_template = self.env.get_template("page.jinja")
        self.section_template = self.env.get_template("section.jinja")
        self.script_template = self.env.get_template("theme.js.jinja")

    def run(self) -> list[Path]:
        """Build the whole site and return the written paths.

        Raises
        ------
        FileNotFoundError
            If the content directory is missing.
        ContentError
            If any content file has invalid front matter.
        """
        tree = load_content(self.site)
        self.output_dir.mkdir(parents=True, exist_ok=True)
        generated_at = dt.datetime.now(dt.UTC)
        written: list[Path] = []

        for section in tree.sections.values():
            written.append(self._render_section(section, generated_at))
            for page in section.pages:
                written.append(self._render_page(page, section, generated_at))

        written.append(self._write_stylesheet())
        written.append(self._write_theme_script())
        if self.site.generate_feed:
            written.append(self._write_feed(tree, generated_at))
        self._copy_static()
        logger.info("Built %d files into %s", len(written), self.output_dir)
        return written

    def _base_context(self, generated_at: dt.datetime) -> dict[str, typ.Any]:
        return {
            "site": self.site,
            "theme": self.theme,
            "generated_at": generated_at,
            "stylesheet_url": absolute_url(self.site.base_url, STYLESHEET_NAME),
            "theme_script_url": absolute_url(self.site.base_url, THEME_SCRIPT_NAME),
            "logo_url": (
                absolute_url(self.site.base_url, self.site.extra.logo)
                if self.site.extra.logo
                else None
            ),
        }

    def _render_section(self, section: Section, generated_at: dt.datetime) -> Path:
        context = self._base_context(generated_at)
        context.update(
            {
                "meta": resolve_metadata(self.site, section=section),
                "section": section,
                "content_html": self.renderer.markdown(section.body),
            }
        )
        target = self._target_for(section.path)
        return self._write(target, self.section_template.render(**context))

    def _render_page(
        self, page: Page, section: Section, generated_at: dt.datetime
    ) -> Path:
        context = self._base_context(generated_at)
        context.update(
            {
                "meta": resolve_metadata(self.site, section=section, page=page),
                "section": section,
                "page": page,
                "content_html": self.renderer.markdown(page.body),
            }
        )
        target = self._target_for(page.path)
        return self._write(target, self.page_template.render(**context))

    def _target_for(self, path: str) -> Path:
        directory = self.output_dir / path if path else self.output_dir
        return directory / "index.html"

    @staticmethod
    def _write(target: Path, text: str) -> Path:
        if not text.endswith("\n"):
            text += "\n"
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(text, encoding="utf-8")
        logger.debug("Rendered %s", target)
        return target

    def _write_stylesheet(self) -> Path:
        css = render_stylesheet(self.site.extra.palettes, self.renderer.stylesheet)
        return self._write(self.output_dir / STYLESHEET_NAME, css)

    def _write_theme_script(self) -> Path:
        script = self.script_template.render(
            storage_key=THEME_STORAGE_KEY,
            attribute=THEME_ATTRIBUTE,
            default_theme=ThemePreference.default().value,
        )
        return self._write(self.output_dir / THEME_SCRIPT_NAME, script)

    def _write_feed(self, tree: ContentTree, generated_at: dt.datetime) -> Path:
        xml = render_feed(self.env, self.site, tree, updated=generated_at)
        return self._write(self.output_dir / self.site.feed_filename, xml)

    def _copy_static(self) -> None:
        static_dir = self.site.static_dir
        if static_dir is None:
            return
        if not static_dir.is_dir():
            logger.warning("Static directory %s does not exist; skipping", static_dir)
            return
        shutil.copytree(static_dir, self.output_dir, dirs_exist_ok=True)
        logger.debug("Copied static assets from %s", static_dir)


__all__ = ["SiteGenerator", "build_environment"]
