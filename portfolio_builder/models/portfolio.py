from __future__ import annotations

from typing import Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from portfolio_builder.constants import COLOR_PRESETS, DEFAULT_COLOR_PRESET


class _Document(BaseModel):
    # Accepts both builder-style camelCase keys and snake_case keys.
    # Frozen so a render pass can never alter the caller's document.
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class SocialLink(_Document):
    platform: str = ""
    url: str = ""


class PersonalInfo(_Document):
    first_name: str = ""
    last_name: str = ""
    headline: str = ""
    about: str = ""
    profile_photo_url: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    social_links: Tuple[SocialLink, ...] = ()


class Skill(_Document):
    name: str
    proficiency: int = Field(default=3, ge=1, le=5)
    category: Optional[str] = None


class Project(_Document):
    title: str = ""
    description: str = ""
    technologies: Tuple[str, ...] = ()
    image_url: Optional[str] = None
    live_url: Optional[str] = None
    code_url: Optional[str] = None


class EducationEntry(_Document):
    institution: str = ""
    degree: str = ""
    start_date: str = ""
    end_date: Optional[str] = None
    description: Optional[str] = None


_DEFAULT_COLORS = COLOR_PRESETS[DEFAULT_COLOR_PRESET]


class ColorScheme(_Document):
    # Any CSS color string; values are not validated
    primary: str = _DEFAULT_COLORS["primary"]
    secondary: str = _DEFAULT_COLORS["secondary"]
    accent: str = _DEFAULT_COLORS["accent"]
    background: str = _DEFAULT_COLORS["background"]
    text: str = _DEFAULT_COLORS["text"]

    @classmethod
    def from_preset(cls, preset_name: str) -> "ColorScheme":
        """Build a scheme from one of the named presets (KeyError if unknown)."""
        return cls(**COLOR_PRESETS[preset_name])


class PortfolioDocument(_Document):
    """
    Everything the site generator reads.

    `template_id` is carried for the export service (catalog lookup and
    premium check); the renderers ignore it.
    """
    name: str = ""
    template_id: Optional[Union[int, str]] = None
    personal_info: PersonalInfo = Field(default_factory=PersonalInfo)
    skills: Tuple[Skill, ...] = ()
    projects: Tuple[Project, ...] = ()
    education: Tuple[EducationEntry, ...] = ()
    color_scheme: ColorScheme = Field(default_factory=ColorScheme)
    is_published: bool = False


__all__ = [
    "SocialLink",
    "PersonalInfo",
    "Skill",
    "Project",
    "EducationEntry",
    "ColorScheme",
    "PortfolioDocument",
]
