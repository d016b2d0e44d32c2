from typing import Literal, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlite3 import Connection

from portfolio_builder.api.dependencies import get_db
from portfolio_builder.api.schemas.common import ApiResponse
from portfolio_builder.api.schemas.templates import TemplateDTO, TemplateListDTO
from portfolio_builder.services.templates_service import TemplateNotFoundError, get_template, list_catalog

router = APIRouter(prefix="/templates", tags=["templates"])


@router.get("", response_model=ApiResponse[TemplateListDTO])
def get_templates(
    category: Optional[str] = Query(None, max_length=100),
    pricing: Literal["all", "free", "premium"] = "all",
    sort_by: Literal["newest", "popular", "name"] = "newest",
    conn: Connection = Depends(get_db),
):
    """Public catalog; filter by category / pricing and sort."""
    rows = list_catalog(conn, category=category, pricing=pricing, sort_by=sort_by)
    dto = TemplateListDTO(templates=[TemplateDTO(**row) for row in rows])
    return ApiResponse.ok(dto)


@router.get("/{template_id}", response_model=ApiResponse[TemplateDTO])
def get_single_template(
    template_id: int,
    conn: Connection = Depends(get_db),
):
    try:
        template = get_template(conn, template_id)
    except TemplateNotFoundError:
        raise HTTPException(status_code=404, detail="Template not found")

    return ApiResponse.ok(TemplateDTO(**template))
