"""
Static site export: render a portfolio to HTML/CSS/JS and zip it.
"""

from .errors import SiteExportError, GenerationError, ArchiveError
from .archive import ArchiveEntry, build_archive
from .site_helpers import (
    sanitize_filename,
    archive_filename,
    classify_education_entry,
    education_css_class,
    group_skills_by_category,
    social_icon_class,
)
from .site_render import render_css, render_html, render_js, render_preview, render_readme
from .portfolio_site import GeneratedSite, generate_site, generate_preview, export_portfolio_zip

__all__ = [
    "SiteExportError",
    "GenerationError",
    "ArchiveError",
    "ArchiveEntry",
    "build_archive",
    "sanitize_filename",
    "archive_filename",
    "classify_education_entry",
    "education_css_class",
    "group_skills_by_category",
    "social_icon_class",
    "render_css",
    "render_html",
    "render_js",
    "render_preview",
    "render_readme",
    "GeneratedSite",
    "generate_site",
    "generate_preview",
    "export_portfolio_zip",
]
