from pydantic import BaseModel, Field
from typing import List, Literal, Optional


class TemplateDTO(BaseModel):
    template_id: int
    name: str
    description: str = ""
    thumbnail_url: str = ""
    is_premium: bool = False
    price: int = 0
    category: str = "General"
    popularity: int = 0
    created_at: Optional[str] = None


class TemplateListDTO(BaseModel):
    templates: List[TemplateDTO] = []


class TemplateUpsertDTO(BaseModel):
    """Admin create/replace body. Price is in cents and forced to 0 for free templates."""
    name: str = Field(..., min_length=1, max_length=100)
    description: str = Field("", max_length=1000)
    thumbnail_url: str = ""
    is_premium: bool = False
    price: int = Field(0, ge=0)
    category: str = Field("General", min_length=1, max_length=100)
    popularity: int = Field(0, ge=0)


class PurchaseRequestDTO(BaseModel):
    template_id: int
    portfolio_id: Optional[int] = None


class PurchaseDTO(BaseModel):
    purchase_id: int
    user_id: int
    username: Optional[str] = None
    template_id: int
    template_name: Optional[str] = None
    portfolio_id: Optional[int] = None
    status: Literal["pending", "approved", "rejected"]
    requested_at: Optional[str] = None
    decided_at: Optional[str] = None
    decided_by: Optional[int] = None


class PurchaseListDTO(BaseModel):
    purchases: List[PurchaseDTO] = []
