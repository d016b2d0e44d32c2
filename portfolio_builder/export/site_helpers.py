# portfolio_builder/export/site_helpers.py
from __future__ import annotations

import re
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

from portfolio_builder.constants import (
    DEFAULT_ARCHIVE_BASENAME,
    DEFAULT_SKILL_CATEGORY,
    DEFAULT_SOCIAL_ICON,
    EXPERIENCE_MARKERS,
    META_DESCRIPTION_MAX,
    PREVIEW_FIRST_NAME,
    PREVIEW_LAST_NAME,
    SOCIAL_ICONS,
    X_ICON,
)
from portfolio_builder.models import EducationEntry, PersonalInfo, PortfolioDocument, Skill

# -------------------------
# Filenames
# -------------------------

_NON_ALNUM_RE = re.compile(r"[^a-z0-9]+")


def sanitize_filename(name: Optional[str]) -> str:
    """
    "My Cool Portfolio!!" -> "my-cool-portfolio"
    "  --Test--  "        -> "test"
    Never raises; the result only contains [a-z0-9-].
    """
    s = (name or "").lower()
    s = _NON_ALNUM_RE.sub("-", s)
    return s.strip("-")


def archive_filename(portfolio: PortfolioDocument) -> str:
    base = sanitize_filename(portfolio.name or DEFAULT_ARCHIVE_BASENAME)
    return f"{base or DEFAULT_ARCHIVE_BASENAME}.zip"


# -------------------------
# Names / text
# -------------------------

def full_name(info: PersonalInfo, *, placeholders: bool = False) -> str:
    """
    Exported sites join whatever is there (possibly ""),
    the live preview fills blanks with "Your" / "Name".
    """
    first = (info.first_name or "").strip()
    last = (info.last_name or "").strip()
    if placeholders:
        first = first or PREVIEW_FIRST_NAME
        last = last or PREVIEW_LAST_NAME
    return f"{first} {last}".strip()


def truncate(text: Optional[str], limit: int = META_DESCRIPTION_MAX) -> str:
    return (text or "")[:limit]


# -------------------------
# Education vs. experience
# -------------------------

def is_experience_entry(institution: Optional[str], markers: Sequence[str] = EXPERIENCE_MARKERS) -> bool:
    s = institution or ""
    return any(m in s for m in markers)


def classify_education_entry(entry: EducationEntry, markers: Sequence[str] = EXPERIENCE_MARKERS) -> str:
    """
    "Harvard University" -> "education"
    "Google, Inc."       -> "experience"
    """
    return "experience" if is_experience_entry(entry.institution, markers) else "education"


def education_css_class(entry: EducationEntry, markers: Sequence[str] = EXPERIENCE_MARKERS) -> str:
    return f"{classify_education_entry(entry, markers)}-item"


# -------------------------
# Skills
# -------------------------

def group_skills_by_category(
    skills: Iterable[Skill],
    default_category: str = DEFAULT_SKILL_CATEGORY,
) -> List[Tuple[str, List[Skill]]]:
    """
    Groups keep first-seen order; skills keep their order inside a group.
    A missing or empty category counts as `default_category`.
    """
    groups: Dict[str, List[Skill]] = {}
    for skill in skills:
        category = skill.category or default_category
        groups.setdefault(category, []).append(skill)
    return list(groups.items())


# -------------------------
# Social links
# -------------------------

def social_icon_class(platform: Optional[str], icons: Sequence[Tuple[str, str]] = SOCIAL_ICONS) -> str:
    p = (platform or "").strip().lower()
    if p in ("x", "x.com"):
        return X_ICON
    # later table entries override earlier ones ("LinkedIn/GitHub" -> linkedin)
    icon_class = DEFAULT_SOCIAL_ICON
    for needle, icon in icons:
        if needle in p:
            icon_class = icon
    return icon_class


def css_comment_text(value: Any) -> str:
    # user text must not close the surrounding /* ... */ or an enclosing <style> tag
    return str(value or "").replace("*/", "* /").replace("<", "\\3c ")


def inline_block_text(text: str) -> str:
    """Make stylesheet or script text safe to embed between <style> or <script> tags."""
    return text.replace("</", "<\\/")


__all__ = [
    "sanitize_filename",
    "archive_filename",
    "full_name",
    "truncate",
    "is_experience_entry",
    "classify_education_entry",
    "education_css_class",
    "group_skills_by_category",
    "social_icon_class",
    "css_comment_text",
    "inline_block_text",
]
