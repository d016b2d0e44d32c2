from typing import Literal, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlite3 import Connection

from portfolio_builder.api.dependencies import get_db, get_current_user_id, require_admin
from portfolio_builder.api.schemas.common import ApiResponse
from portfolio_builder.api.schemas.templates import PurchaseDTO, PurchaseListDTO, PurchaseRequestDTO
from portfolio_builder.services.templates_service import (
    PurchaseNotFoundError,
    PurchaseRequestError,
    TemplateNotFoundError,
    decide_purchase,
    list_purchase_requests,
    list_purchases_for_user,
    request_template_purchase,
)

router = APIRouter(tags=["template-purchases"])


# ------------------------------------------------------------------------------
# User endpoints
# ------------------------------------------------------------------------------

@router.post(
    "/template-purchases",
    response_model=ApiResponse[PurchaseDTO],
    status_code=status.HTTP_201_CREATED,
)
def post_template_purchase(
    request: PurchaseRequestDTO,
    user_id: int = Depends(get_current_user_id),
    conn: Connection = Depends(get_db),
):
    """Ask an admin to unlock a premium template. No payment is taken here."""
    try:
        purchase = request_template_purchase(conn, user_id, request.template_id, request.portfolio_id)
    except TemplateNotFoundError:
        raise HTTPException(status_code=404, detail="Template not found")
    except PurchaseRequestError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return ApiResponse.ok(PurchaseDTO(**purchase))


@router.get("/user/template-purchases", response_model=ApiResponse[PurchaseListDTO])
def get_my_template_purchases(
    user_id: int = Depends(get_current_user_id),
    conn: Connection = Depends(get_db),
):
    rows = list_purchases_for_user(conn, user_id)
    dto = PurchaseListDTO(purchases=[PurchaseDTO(**row) for row in rows])
    return ApiResponse.ok(dto)


# ------------------------------------------------------------------------------
# Admin endpoints
# ------------------------------------------------------------------------------

@router.get("/admin/template-purchases", response_model=ApiResponse[PurchaseListDTO])
def get_purchase_queue(
    status_filter: Optional[Literal["pending", "approved", "rejected"]] = Query(None, alias="status"),
    admin: dict = Depends(require_admin),
    conn: Connection = Depends(get_db),
):
    rows = list_purchase_requests(conn, status_filter)
    dto = PurchaseListDTO(purchases=[PurchaseDTO(**row) for row in rows])
    return ApiResponse.ok(dto)


def _decide(conn: Connection, purchase_id: int, admin: dict, approve: bool) -> ApiResponse[PurchaseDTO]:
    try:
        purchase = decide_purchase(conn, purchase_id, admin["id"], approve=approve)
    except PurchaseNotFoundError:
        raise HTTPException(status_code=404, detail="Purchase not found")
    return ApiResponse.ok(PurchaseDTO(**purchase))


@router.post("/admin/template-purchases/{purchase_id}/approve", response_model=ApiResponse[PurchaseDTO])
def approve_template_purchase(
    purchase_id: int,
    admin: dict = Depends(require_admin),
    conn: Connection = Depends(get_db),
):
    return _decide(conn, purchase_id, admin, approve=True)


@router.post("/admin/template-purchases/{purchase_id}/reject", response_model=ApiResponse[PurchaseDTO])
def reject_template_purchase(
    purchase_id: int,
    admin: dict = Depends(require_admin),
    conn: Connection = Depends(get_db),
):
    return _decide(conn, purchase_id, admin, approve=False)
