"""
Glue between stored portfolios and the static site generator.

The portfolio is loaded just-in-time, the template is resolved through the
catalog and checked against the purchase gate, and the generated site is
handed back to the caller for delivery. Nothing generated is stored.
"""

from typing import Any, Dict, Tuple
import logging

from portfolio_builder.export import GeneratedSite, generate_preview, generate_site
from portfolio_builder.models import PortfolioDocument
from portfolio_builder.services.portfolios_service import load_portfolio_document
from portfolio_builder.services.templates_service import can_export_template, get_template

logger = logging.getLogger(__name__)


class TemplateNotSelectedError(Exception):
    pass


class TemplateLockedError(Exception):
    pass


def resolve_template(conn, doc: PortfolioDocument) -> Dict[str, Any]:
    if doc.template_id in (None, ""):
        raise TemplateNotSelectedError("Please select a template before exporting your portfolio")
    return get_template(conn, doc.template_id)


def load_for_export(conn, user_id: int, portfolio_id: int) -> Tuple[PortfolioDocument, Dict[str, Any]]:
    """
    Load the portfolio and its template, enforcing the premium gate.
    Raises PortfolioNotFoundError, TemplateNotSelectedError,
    TemplateNotFoundError or TemplateLockedError.
    """
    _row, doc = load_portfolio_document(conn, user_id, portfolio_id)
    template = resolve_template(conn, doc)
    if not can_export_template(conn, user_id, template):
        raise TemplateLockedError(
            "You need to purchase this template before you can export your portfolio"
        )
    return doc, template


def export_portfolio_site(conn, user_id: int, portfolio_id: int) -> GeneratedSite:
    doc, template = load_for_export(conn, user_id, portfolio_id)
    site = generate_site(doc, template["name"])
    logger.info(
        "Exported portfolio %s for user %s as %s (%d bytes)",
        portfolio_id, user_id, site.filename, len(site.archive),
    )
    return site


def preview_portfolio(conn, user_id: int, portfolio_id: int) -> str:
    """Inline preview HTML. Premium templates can be previewed without a purchase."""
    _row, doc = load_portfolio_document(conn, user_id, portfolio_id)
    template = resolve_template(conn, doc)
    html = generate_preview(doc, template["name"])
    logger.info("Rendered preview for portfolio %s (%d chars)", portfolio_id, len(html))
    return html
