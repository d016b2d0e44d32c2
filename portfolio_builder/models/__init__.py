from .portfolio import (
    SocialLink,
    PersonalInfo,
    Skill,
    Project,
    EducationEntry,
    ColorScheme,
    PortfolioDocument,
)

__all__ = [
    "SocialLink",
    "PersonalInfo",
    "Skill",
    "Project",
    "EducationEntry",
    "ColorScheme",
    "PortfolioDocument",
]
