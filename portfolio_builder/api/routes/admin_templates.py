from fastapi import APIRouter, Depends, HTTPException, status
from sqlite3 import Connection

from portfolio_builder.api.dependencies import get_db, require_admin
from portfolio_builder.api.schemas.common import ApiResponse, DeleteResultDTO
from portfolio_builder.api.schemas.templates import TemplateDTO, TemplateUpsertDTO
from portfolio_builder.services.templates_service import (
    TemplateConflictError,
    TemplateNotFoundError,
    create_catalog_template,
    delete_catalog_template,
    update_catalog_template,
)

router = APIRouter(prefix="/admin/templates", tags=["admin"])


@router.post("", response_model=ApiResponse[TemplateDTO], status_code=status.HTTP_201_CREATED)
def post_template(
    request: TemplateUpsertDTO,
    admin: dict = Depends(require_admin),
    conn: Connection = Depends(get_db),
):
    try:
        template = create_catalog_template(conn, admin["id"], request.model_dump())
    except TemplateConflictError as e:
        raise HTTPException(status_code=409, detail=str(e))

    return ApiResponse.ok(TemplateDTO(**template))


@router.put("/{template_id}", response_model=ApiResponse[TemplateDTO])
def put_template(
    template_id: int,
    request: TemplateUpsertDTO,
    admin: dict = Depends(require_admin),
    conn: Connection = Depends(get_db),
):
    try:
        template = update_catalog_template(conn, template_id, request.model_dump())
    except TemplateNotFoundError:
        raise HTTPException(status_code=404, detail="Template not found")
    except TemplateConflictError as e:
        raise HTTPException(status_code=409, detail=str(e))

    return ApiResponse.ok(TemplateDTO(**template))


@router.delete("/{template_id}", response_model=ApiResponse[DeleteResultDTO])
def delete_single_template(
    template_id: int,
    admin: dict = Depends(require_admin),
    conn: Connection = Depends(get_db),
):
    try:
        delete_catalog_template(conn, template_id)
    except TemplateNotFoundError:
        raise HTTPException(status_code=404, detail="Template not found")

    return ApiResponse.ok(DeleteResultDTO(deleted_count=1))
