"""
Template catalog and the premium purchase-approval gate.

Free templates can always be exported. Premium templates need an
'approved' purchase request for the exporting user; requests are filed
by users and decided by admins. Nothing here takes payment.
"""

from typing import Any, Dict, List, Optional, Union
import logging
import sqlite3

from portfolio_builder.db import (
    get_portfolio_row,
    list_templates,
    get_template_by_id,
    insert_template,
    update_template,
    delete_template,
    insert_purchase_request,
    get_purchase,
    list_user_purchases,
    list_purchases,
    get_latest_user_purchase,
    has_approved_purchase,
    set_purchase_status,
)

logger = logging.getLogger(__name__)

PRICING_FILTERS = ("all", "free", "premium")
SORT_ORDERS = ("newest", "popular", "name")


class TemplateNotFoundError(Exception):
    pass


class TemplateConflictError(Exception):
    pass


class PurchaseRequestError(Exception):
    pass


class PurchaseNotFoundError(Exception):
    pass


# -------------------------
# Catalog
# -------------------------

def list_catalog(
    conn,
    category: Optional[str] = None,
    pricing: str = "all",
    sort_by: str = "newest",
) -> List[Dict[str, Any]]:
    """
    pricing: all | free | premium
    sort_by: newest (highest id first) | popular | name
    Raises ValueError for any other pricing or sort_by value.
    """
    if pricing not in PRICING_FILTERS:
        raise ValueError(f"Unknown pricing filter: {pricing!r}")
    if sort_by not in SORT_ORDERS:
        raise ValueError(f"Unknown sort order: {sort_by!r}")

    templates = list_templates(conn, None if category in (None, "", "all") else category)

    if pricing == "free":
        templates = [t for t in templates if not t["is_premium"]]
    elif pricing == "premium":
        templates = [t for t in templates if t["is_premium"]]

    if sort_by == "popular":
        templates.sort(key=lambda t: (-t["popularity"], t["template_id"]))
    elif sort_by == "name":
        templates.sort(key=lambda t: t["name"].lower())
    else:
        templates.sort(key=lambda t: -t["template_id"])
    return templates


def get_template(conn, template_id: Union[int, str]) -> Dict[str, Any]:
    try:
        tid = int(template_id)
    except (TypeError, ValueError):
        raise TemplateNotFoundError(f"Template {template_id!r} not found")

    template = get_template_by_id(conn, tid)
    if template is None:
        raise TemplateNotFoundError(f"Template {template_id!r} not found")
    return template


# -------------------------
# Admin catalog management
# -------------------------

def create_catalog_template(conn, admin_user_id: int, fields: Dict[str, Any]) -> Dict[str, Any]:
    """Add a template. Raises TemplateConflictError if the name is taken."""
    try:
        template_id = insert_template(conn, created_by=admin_user_id, **fields)
    except sqlite3.IntegrityError as e:
        conn.rollback()
        raise TemplateConflictError(f"Template name {fields.get('name')!r} is already taken") from e
    logger.info("Admin %s created template %s (%s)", admin_user_id, template_id, fields.get("name"))
    return get_template(conn, template_id)


def update_catalog_template(conn, template_id: int, fields: Dict[str, Any]) -> Dict[str, Any]:
    """
    Replace a template's editable fields. A free template always has price 0.
    Raises TemplateNotFoundError or TemplateConflictError.
    """
    try:
        updated = update_template(conn, template_id, fields)
    except sqlite3.IntegrityError as e:
        conn.rollback()
        raise TemplateConflictError(f"Template name {fields.get('name')!r} is already taken") from e
    if not updated:
        raise TemplateNotFoundError(f"Template {template_id!r} not found")
    logger.info("Updated template %s", template_id)
    return get_template(conn, template_id)


def delete_catalog_template(conn, template_id: int) -> None:
    """
    Remove a template. Portfolios using it keep their content but lose the
    template choice; its purchase requests are deleted with it.
    """
    if not delete_template(conn, template_id):
        raise TemplateNotFoundError(f"Template {template_id!r} not found")
    logger.info("Deleted template %s", template_id)


# -------------------------
# Purchase gate
# -------------------------

def can_export_template(conn, user_id: int, template: Dict[str, Any]) -> bool:
    if not template["is_premium"]:
        return True
    return has_approved_purchase(conn, user_id, template["template_id"])


def request_template_purchase(
    conn,
    user_id: int,
    template_id: int,
    portfolio_id: Optional[int] = None,
) -> Dict[str, Any]:
    """
    File a purchase request for a premium template.
    An existing pending or approved request is returned as-is instead of duplicated;
    a rejected one may be re-requested. `portfolio_id`, when given, must be
    one of the user's own portfolios.
    """
    template = get_template(conn, template_id)
    if not template["is_premium"]:
        raise PurchaseRequestError("Template is free and does not need to be purchased")
    if portfolio_id is not None and get_portfolio_row(conn, user_id, portfolio_id) is None:
        raise PurchaseRequestError(f"Portfolio {portfolio_id} not found")

    existing = get_latest_user_purchase(conn, user_id, template["template_id"])
    if existing and existing["status"] in ("pending", "approved"):
        return existing

    purchase_id = insert_purchase_request(conn, user_id, template["template_id"], portfolio_id)
    logger.info("User %s requested premium template %s (purchase %s)", user_id, template["template_id"], purchase_id)
    return get_purchase(conn, purchase_id)


def list_purchases_for_user(conn, user_id: int) -> List[Dict[str, Any]]:
    return list_user_purchases(conn, user_id)


def list_purchase_requests(conn, status: Optional[str] = None) -> List[Dict[str, Any]]:
    return list_purchases(conn, status)


def decide_purchase(conn, purchase_id: int, admin_user_id: int, approve: bool) -> Dict[str, Any]:
    """Approve or reject a purchase request (admin action)."""
    status = "approved" if approve else "rejected"
    if not set_purchase_status(conn, purchase_id, status, admin_user_id):
        raise PurchaseNotFoundError(f"Purchase {purchase_id} not found")
    logger.info("Purchase %s %s by admin %s", purchase_id, status, admin_user_id)
    return get_purchase(conn, purchase_id)
