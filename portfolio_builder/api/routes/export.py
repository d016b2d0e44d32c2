"""
Delivery endpoints for generated portfolio websites.

- GET /portfolios/{portfolio_id}/export   -> ZIP download (index.html, css/, js/, README.md)
- GET /portfolios/{portfolio_id}/preview  -> single inline HTML page for the preview frame

The archive is built in memory and streamed straight back; nothing is
written to disk or kept after the response.
"""

import logging
from sqlite3 import Connection

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import HTMLResponse, Response

from portfolio_builder.api.dependencies import get_current_user_id, get_db
from portfolio_builder.export import SiteExportError
from portfolio_builder.services.export_service import (
    TemplateLockedError,
    TemplateNotSelectedError,
    export_portfolio_site,
    preview_portfolio,
)
from portfolio_builder.services.portfolios_service import CorruptPortfolioDataError, PortfolioNotFoundError
from portfolio_builder.services.templates_service import TemplateNotFoundError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/portfolios", tags=["export"])

ZIP_MIME = "application/zip"


def _raise_for_lookup_error(e: Exception) -> None:
    if isinstance(e, PortfolioNotFoundError):
        raise HTTPException(status_code=404, detail="Portfolio not found")
    if isinstance(e, TemplateNotSelectedError):
        raise HTTPException(status_code=400, detail=str(e))
    if isinstance(e, TemplateNotFoundError):
        raise HTTPException(status_code=404, detail="Template not found")
    if isinstance(e, TemplateLockedError):
        raise HTTPException(status_code=403, detail=str(e))
    if isinstance(e, CorruptPortfolioDataError):
        raise HTTPException(status_code=500, detail="Portfolio data is corrupted")
    raise e


@router.get("/{portfolio_id}/export", response_class=Response)
def get_portfolio_export(
    portfolio_id: int,
    user_id: int = Depends(get_current_user_id),
    conn: Connection = Depends(get_db),
):
    """Download the portfolio as a static website ZIP."""
    try:
        site = export_portfolio_site(conn, user_id, portfolio_id)
    except (
        PortfolioNotFoundError,
        TemplateNotSelectedError,
        TemplateNotFoundError,
        TemplateLockedError,
        CorruptPortfolioDataError,
    ) as e:
        _raise_for_lookup_error(e)
    except SiteExportError:
        logger.exception("Export failed for portfolio %s", portfolio_id)
        raise HTTPException(status_code=500, detail="Export failed")

    return Response(
        content=site.archive,
        media_type=ZIP_MIME,
        headers={"Content-Disposition": f'attachment; filename="{site.filename}"'},
    )


@router.get("/{portfolio_id}/preview", response_class=HTMLResponse)
def get_portfolio_preview(
    portfolio_id: int,
    user_id: int = Depends(get_current_user_id),
    conn: Connection = Depends(get_db),
):
    """Self-contained HTML (CSS and JS inlined) for the live preview frame."""
    try:
        html = preview_portfolio(conn, user_id, portfolio_id)
    except (
        PortfolioNotFoundError,
        TemplateNotSelectedError,
        TemplateNotFoundError,
        CorruptPortfolioDataError,
    ) as e:
        _raise_for_lookup_error(e)
    except SiteExportError:
        logger.exception("Preview failed for portfolio %s", portfolio_id)
        raise HTTPException(status_code=500, detail="Preview failed")

    return HTMLResponse(content=html)
