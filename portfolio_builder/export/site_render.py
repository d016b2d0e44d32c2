"""
Render a portfolio document into the files of a static website (Jinja2).

One template per output file under `templates/`:
- index.html  (+ sections/*.html, one partial per page section)
- styles.css
- main.js
- README.md

HTML output has two wirings:
- "linked": references css/styles.css and js/main.js (the exported bundle)
- "inline": CSS and JS embedded in the page (the in-app live preview)

Only *.html templates are autoescaped. Color values land in the stylesheet
verbatim; nothing here validates them.
"""

from __future__ import annotations

from datetime import date, datetime
from pathlib import Path
from typing import Any, Dict, Optional, Sequence

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

from portfolio_builder.constants import (
    BRAND_NAME,
    DEFAULT_HEADLINE,
    DEFAULT_META_DESCRIPTION,
    DEFAULT_PAGE_TITLE_SUFFIX,
    DEFAULT_PORTFOLIO_TITLE,
    EXPERIENCE_MARKERS,
    MAIN_JS_PATH,
    NO_ABOUT_TEXT,
    NO_EDUCATION_TEXT,
    NO_PROJECTS_TEXT,
    NO_SKILLS_TEXT,
    RENDER_MODES,
    STYLES_CSS_PATH,
)
from portfolio_builder.models import PortfolioDocument
from portfolio_builder.export.site_helpers import (
    css_comment_text,
    education_css_class,
    full_name,
    group_skills_by_category,
    inline_block_text,
    social_icon_class,
    truncate,
)

TEMPLATES_DIR = Path(__file__).parent / "templates"

_env = Environment(
    loader=FileSystemLoader(str(TEMPLATES_DIR)),
    autoescape=select_autoescape(enabled_extensions=("html",), default_for_string=False),
    undefined=StrictUndefined,
    trim_blocks=True,
    lstrip_blocks=True,
    keep_trailing_newline=True,
)


def _render(path: str, **context: Any) -> str:
    return _env.get_template(path).render(**context)


# -------------------------
# CSS / JS
# -------------------------

def render_css(portfolio: PortfolioDocument) -> str:
    """Stylesheet for the portfolio. Reads only `name` and `color_scheme`."""
    return _render(
        "styles.css",
        portfolio_name=css_comment_text(portfolio.name),
        colors=portfolio.color_scheme,
    )


def render_js() -> str:
    """Nav behaviour script; the same text for every portfolio."""
    return _render("main.js")


# -------------------------
# HTML
# -------------------------

def _html_context(
    portfolio: PortfolioDocument,
    template_name: str,
    *,
    mode: str,
    year: int,
    experience_markers: Sequence[str],
) -> Dict[str, Any]:
    info = portfolio.personal_info

    return {
        "mode": mode,
        "info": info,
        "full_name": full_name(info, placeholders=(mode == "inline")),
        "meta_description": truncate(info.about) or DEFAULT_META_DESCRIPTION,
        "page_title_suffix": DEFAULT_PAGE_TITLE_SUFFIX,
        "default_headline": DEFAULT_HEADLINE,
        "skill_groups": group_skills_by_category(portfolio.skills),
        "projects": portfolio.projects,
        "education_items": [
            (item, education_css_class(item, experience_markers)) for item in portfolio.education
        ],
        "social_links": [(link, social_icon_class(link.platform)) for link in info.social_links],
        "no_about_text": NO_ABOUT_TEXT,
        "no_skills_text": NO_SKILLS_TEXT,
        "no_projects_text": NO_PROJECTS_TEXT,
        "no_education_text": NO_EDUCATION_TEXT,
        "year": year,
        "brand_name": BRAND_NAME,
        "template_name": template_name,
        "styles_path": STYLES_CSS_PATH,
        "script_path": MAIN_JS_PATH,
        "css": inline_block_text(render_css(portfolio)) if mode == "inline" else "",
        "js": inline_block_text(render_js()) if mode == "inline" else "",
    }


def render_html(
    portfolio: PortfolioDocument,
    template_name: str,
    *,
    mode: str = "linked",
    year: Optional[int] = None,
    experience_markers: Sequence[str] = EXPERIENCE_MARKERS,
) -> str:
    """
    Full HTML5 document for the portfolio.

    `template_name` only shows up in the footer credit; every template
    shares this layout and differs by color scheme alone.
    `year` defaults to the current year (footer copyright line).
    """
    if mode not in RENDER_MODES:
        raise ValueError(f"Unknown render mode {mode!r}; expected one of {RENDER_MODES}")

    context = _html_context(
        portfolio,
        template_name,
        mode=mode,
        year=year if year is not None else datetime.now().year,
        experience_markers=experience_markers,
    )
    return _render("index.html", **context)


def render_preview(portfolio: PortfolioDocument, template_name: str, *, year: Optional[int] = None) -> str:
    """Single self-contained page for the in-app preview frame."""
    return render_html(portfolio, template_name, mode="inline", year=year)


# -------------------------
# README
# -------------------------

def render_readme(
    portfolio: PortfolioDocument,
    template_name: str,
    *,
    generated_on: Optional[date] = None,
) -> str:
    info = portfolio.personal_info
    when = generated_on or date.today()
    return _render(
        "README.md",
        title=portfolio.name or DEFAULT_PORTFOLIO_TITLE,
        brand_name=BRAND_NAME,
        owner_name=full_name(info),
        template_name=template_name,
        generated_on=when.isoformat(),
    )


__all__ = [
    "TEMPLATES_DIR",
    "render_css",
    "render_js",
    "render_html",
    "render_preview",
    "render_readme",
]
