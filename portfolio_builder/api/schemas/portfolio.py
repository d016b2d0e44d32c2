from pydantic import Field
from typing import List, Optional, Union
from pydantic import BaseModel

from portfolio_builder.models import (
    ColorScheme,
    EducationEntry,
    PersonalInfo,
    PortfolioDocument,
    Project,
    Skill,
)


class PortfolioUpsertRequestDTO(PortfolioDocument):
    """Request body for create/replace; camelCase or snake_case keys."""
    name: str = Field(..., min_length=1, max_length=200)
    template_id: Optional[Union[int, str]] = None


class PortfolioListItemDTO(BaseModel):
    portfolio_id: int
    name: str
    template_id: Optional[int] = None
    is_published: bool = False
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class PortfolioListDTO(BaseModel):
    portfolios: List[PortfolioListItemDTO] = []


class PortfolioDetailDTO(BaseModel):
    portfolio_id: int
    name: str
    template_id: Optional[int] = None
    personal_info: PersonalInfo
    skills: List[Skill] = []
    projects: List[Project] = []
    education: List[EducationEntry] = []
    color_scheme: ColorScheme
    is_published: bool = False
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
