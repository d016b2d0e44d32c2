from fastapi import APIRouter, Depends, HTTPException, status
from sqlite3 import Connection

from portfolio_builder.api.dependencies import get_db, get_current_user_id
from portfolio_builder.api.schemas.common import ApiResponse, DeleteResultDTO
from portfolio_builder.api.schemas.portfolio import (
    PortfolioDetailDTO,
    PortfolioListDTO,
    PortfolioListItemDTO,
    PortfolioUpsertRequestDTO,
)
from portfolio_builder.services.portfolios_service import (
    CorruptPortfolioDataError,
    PortfolioNotFoundError,
    create_portfolio,
    get_portfolio,
    list_user_portfolios,
    remove_portfolio,
    replace_portfolio,
)
from portfolio_builder.services.templates_service import TemplateNotFoundError

router = APIRouter(prefix="/portfolios", tags=["portfolios"])


@router.post(
    "",
    response_model=ApiResponse[PortfolioDetailDTO],
    response_model_by_alias=False,
    status_code=status.HTTP_201_CREATED,
)
def post_portfolio(
    request: PortfolioUpsertRequestDTO,
    user_id: int = Depends(get_current_user_id),
    conn: Connection = Depends(get_db),
):
    try:
        result = create_portfolio(conn, user_id, request)
    except TemplateNotFoundError:
        raise HTTPException(status_code=404, detail="Template not found")

    return ApiResponse.ok(PortfolioDetailDTO(**result))


@router.get("", response_model=ApiResponse[PortfolioListDTO])
def get_portfolios(
    user_id: int = Depends(get_current_user_id),
    conn: Connection = Depends(get_db),
):
    rows = list_user_portfolios(conn, user_id)
    dto = PortfolioListDTO(portfolios=[PortfolioListItemDTO(**row) for row in rows])
    return ApiResponse.ok(dto)


@router.get("/{portfolio_id}", response_model=ApiResponse[PortfolioDetailDTO], response_model_by_alias=False)
def get_single_portfolio(
    portfolio_id: int,
    user_id: int = Depends(get_current_user_id),
    conn: Connection = Depends(get_db),
):
    try:
        result = get_portfolio(conn, user_id, portfolio_id)
    except PortfolioNotFoundError:
        raise HTTPException(status_code=404, detail="Portfolio not found")
    except CorruptPortfolioDataError:
        raise HTTPException(status_code=500, detail="Portfolio data is corrupted")

    return ApiResponse.ok(PortfolioDetailDTO(**result))


@router.put("/{portfolio_id}", response_model=ApiResponse[PortfolioDetailDTO], response_model_by_alias=False)
def put_portfolio(
    portfolio_id: int,
    request: PortfolioUpsertRequestDTO,
    user_id: int = Depends(get_current_user_id),
    conn: Connection = Depends(get_db),
):
    try:
        result = replace_portfolio(conn, user_id, portfolio_id, request)
    except PortfolioNotFoundError:
        raise HTTPException(status_code=404, detail="Portfolio not found")
    except TemplateNotFoundError:
        raise HTTPException(status_code=404, detail="Template not found")

    return ApiResponse.ok(PortfolioDetailDTO(**result))


@router.delete("/{portfolio_id}", response_model=ApiResponse[DeleteResultDTO])
def delete_single_portfolio(
    portfolio_id: int,
    user_id: int = Depends(get_current_user_id),
    conn: Connection = Depends(get_db),
):
    try:
        remove_portfolio(conn, user_id, portfolio_id)
    except PortfolioNotFoundError:
        raise HTTPException(status_code=404, detail="Portfolio not found")

    return ApiResponse.ok(DeleteResultDTO(deleted_count=1))
