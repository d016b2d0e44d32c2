"""
portfolio_builder/constants.py

Static configuration shared by the site generator, the template catalog
and the builder API. Everything here is read-only: tuples and
MappingProxyType views, never mutated at runtime.
"""

import os
from types import MappingProxyType

# Branding used in the generated footer and README
BRAND_NAME = os.getenv("SITE_BRAND_NAME", "Portfolio Builder")

# Skills without a category land in this bucket
DEFAULT_SKILL_CATEGORY = "Other"

# An education entry whose institution contains any of these is rendered as work experience.
# Case-sensitive substring match.
EXPERIENCE_MARKERS = (",", "Inc", "LLC")

# (platform substring, Font Awesome class); first match wins
SOCIAL_ICONS = (
    ("github", "fab fa-github"),
    ("linked", "fab fa-linkedin"),
    ("twitter", "fab fa-twitter"),
    ("facebook", "fab fa-facebook"),
    ("instagram", "fab fa-instagram"),
)
X_ICON = "fab fa-x-twitter"
DEFAULT_SOCIAL_ICON = "fas fa-link"

COLOR_PRESETS = MappingProxyType({
    "Blue Professional": MappingProxyType({
        "primary": "#3b82f6",
        "secondary": "#4f46e5",
        "accent": "#8b5cf6",
        "background": "#ffffff",
        "text": "#1e293b",
    }),
    "Green Nature": MappingProxyType({
        "primary": "#10b981",
        "secondary": "#059669",
        "accent": "#06b6d4",
        "background": "#f8fafc",
        "text": "#1e293b",
    }),
    "Dark Mode": MappingProxyType({
        "primary": "#6366f1",
        "secondary": "#4f46e5",
        "accent": "#a855f7",
        "background": "#0f172a",
        "text": "#f8fafc",
    }),
    "Sunset": MappingProxyType({
        "primary": "#f59e0b",
        "secondary": "#d97706",
        "accent": "#ef4444",
        "background": "#ffffff",
        "text": "#1e293b",
    }),
    "Minimalist": MappingProxyType({
        "primary": "#334155",
        "secondary": "#475569",
        "accent": "#64748b",
        "background": "#f8fafc",
        "text": "#1e293b",
    }),
})
DEFAULT_COLOR_PRESET = "Blue Professional"

# Placeholder copy for empty sections
NO_ABOUT_TEXT = "No information provided."
NO_SKILLS_TEXT = "No skills listed yet."
NO_PROJECTS_TEXT = "No projects listed yet."
NO_EDUCATION_TEXT = "No education or experience listed yet."

DEFAULT_HEADLINE = "Developer"
DEFAULT_PAGE_TITLE_SUFFIX = "Developer Portfolio"
DEFAULT_META_DESCRIPTION = "Developer portfolio showcasing projects and skills"
META_DESCRIPTION_MAX = 160

# The live preview fills blank name parts; the exported site does not
PREVIEW_FIRST_NAME = "Your"
PREVIEW_LAST_NAME = "Name"

DEFAULT_PORTFOLIO_TITLE = "My Developer Portfolio"
DEFAULT_ARCHIVE_BASENAME = "my-portfolio"

# Fixed archive layout
INDEX_HTML_PATH = "index.html"
STYLES_CSS_PATH = "css/styles.css"
MAIN_JS_PATH = "js/main.js"
README_PATH = "README.md"

RENDER_MODES = ("linked", "inline")

# Templates seeded into an empty catalog
DEFAULT_TEMPLATES = (
    MappingProxyType({
        "name": "Minimalist",
        "description": "A clean single-page layout that puts your projects first.",
        "thumbnail_url": "/thumbnails/minimalist.png",
        "is_premium": False,
        "price": 0,
        "category": "General",
        "popularity": 120,
    }),
    MappingProxyType({
        "name": "Developer",
        "description": "Skill tags and a project grid tuned for software engineers.",
        "thumbnail_url": "/thumbnails/developer.png",
        "is_premium": False,
        "price": 0,
        "category": "Developer",
        "popularity": 95,
    }),
    MappingProxyType({
        "name": "Professional",
        "description": "A polished layout for senior engineers and consultants.",
        "thumbnail_url": "/thumbnails/professional.png",
        "is_premium": True,
        "price": 1999,
        "category": "Professional",
        "popularity": 80,
    }),
    MappingProxyType({
        "name": "Creative",
        "description": "Bold colors and large imagery for designers.",
        "thumbnail_url": "/thumbnails/creative.png",
        "is_premium": True,
        "price": 2499,
        "category": "Creative",
        "popularity": 60,
    }),
)
