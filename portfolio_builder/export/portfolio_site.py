"""
Export a portfolio as a static website bundle (ZIP).

Layout inside the archive:
- index.html
- css/styles.css
- js/main.js
- README.md

generate_site() is pure apart from the footer year and README date, both
of which can be pinned through keyword arguments. It never touches disk;
delivery (download, preview frame, file on disk) is the caller's job.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import List, Optional

from portfolio_builder.constants import INDEX_HTML_PATH, MAIN_JS_PATH, README_PATH, STYLES_CSS_PATH
from portfolio_builder.models import PortfolioDocument
from portfolio_builder.export.archive import ArchiveEntry, build_archive
from portfolio_builder.export.errors import GenerationError
from portfolio_builder.export.site_helpers import archive_filename
from portfolio_builder.export.site_render import render_css, render_html, render_js, render_preview, render_readme

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GeneratedSite:
    index_html: str
    styles_css: str
    main_js: str
    readme: str
    archive: bytes
    filename: str

    def entries(self) -> List[ArchiveEntry]:
        return site_entries(self.index_html, self.styles_css, self.main_js, self.readme)


def site_entries(index_html: str, styles_css: str, main_js: str, readme: str) -> List[ArchiveEntry]:
    return [
        ArchiveEntry(INDEX_HTML_PATH, index_html),
        ArchiveEntry(STYLES_CSS_PATH, styles_css),
        ArchiveEntry(MAIN_JS_PATH, main_js),
        ArchiveEntry(README_PATH, readme),
    ]


def generate_site(
    portfolio: PortfolioDocument,
    template_name: str,
    *,
    year: Optional[int] = None,
    generated_on: Optional[date] = None,
) -> GeneratedSite:
    """
    Render every file of the site and package them.

    Raises GenerationError if any renderer fails and lets ArchiveError from
    packaging through untouched.
    """
    try:
        index_html = render_html(portfolio, template_name, mode="linked", year=year)
        styles_css = render_css(portfolio)
        main_js = render_js()
        readme = render_readme(portfolio, template_name, generated_on=generated_on)
    except Exception as e:
        logger.exception("Site generation failed for portfolio '%s'", portfolio.name)
        raise GenerationError(f"Failed to generate portfolio site: {e}") from e

    archive = build_archive(site_entries(index_html, styles_css, main_js, readme))

    return GeneratedSite(
        index_html=index_html,
        styles_css=styles_css,
        main_js=main_js,
        readme=readme,
        archive=archive,
        filename=archive_filename(portfolio),
    )


def generate_preview(portfolio: PortfolioDocument, template_name: str, *, year: Optional[int] = None) -> str:
    """Inline-mode page (CSS and JS embedded) for the live preview frame."""
    try:
        return render_preview(portfolio, template_name, year=year)
    except Exception as e:
        logger.exception("Preview generation failed for portfolio '%s'", portfolio.name)
        raise GenerationError(f"Failed to generate portfolio preview: {e}") from e


def export_portfolio_zip(portfolio: PortfolioDocument, template_name: str) -> tuple[str, bytes]:
    """Convenience for delivery code: (download filename, archive bytes)."""
    site = generate_site(portfolio, template_name)
    return site.filename, site.archive


__all__ = ["GeneratedSite", "site_entries", "generate_site", "generate_preview", "export_portfolio_zip"]
