from typing import Any, Dict, List, Optional, Tuple
import json
import logging

from pydantic import ValidationError

from portfolio_builder.db import (
    SECTION_COLUMNS,
    insert_portfolio,
    list_portfolios,
    get_portfolio_row,
    update_portfolio,
    delete_portfolio,
    increment_template_popularity,
)
from portfolio_builder.services.templates_service import get_template
from portfolio_builder.models import (
    ColorScheme,
    EducationEntry,
    PersonalInfo,
    PortfolioDocument,
    Project,
    Skill,
)

logger = logging.getLogger(__name__)


class PortfolioNotFoundError(Exception):
    pass


class CorruptPortfolioDataError(Exception):
    pass


def _template_id_for_storage(conn, doc: PortfolioDocument) -> Optional[int]:
    """Stored template id, or None when no template was picked. Raises TemplateNotFoundError."""
    if doc.template_id in (None, ""):
        return None
    return get_template(conn, doc.template_id)["template_id"]


def document_to_sections(doc: PortfolioDocument) -> Dict[str, str]:
    """Serialize each document section to the JSON string stored in its column."""
    data = doc.model_dump(mode="json")
    return {
        "personal_info_json": json.dumps(data["personal_info"]),
        "skills_json": json.dumps(data["skills"]),
        "projects_json": json.dumps(data["projects"]),
        "education_json": json.dumps(data["education"]),
        "color_scheme_json": json.dumps(data["color_scheme"]),
    }


def row_to_document(row: Dict[str, Any]) -> PortfolioDocument:
    """
    Rebuild a PortfolioDocument from a stored row.
    Raises CorruptPortfolioDataError if a JSON column cannot be parsed or validated.
    """
    try:
        sections = {c: json.loads(row[c] or "null") for c in SECTION_COLUMNS}
        return PortfolioDocument(
            name=row["name"],
            template_id=row["template_id"],
            personal_info=PersonalInfo.model_validate(sections["personal_info_json"] or {}),
            skills=[Skill.model_validate(s) for s in sections["skills_json"] or []],
            projects=[Project.model_validate(p) for p in sections["projects_json"] or []],
            education=[EducationEntry.model_validate(e) for e in sections["education_json"] or []],
            color_scheme=ColorScheme.model_validate(sections["color_scheme_json"] or {}),
            is_published=row.get("is_published", False),
        )
    except (json.JSONDecodeError, TypeError, ValidationError) as e:
        logger.error(f"Corrupt portfolio data for portfolio {row.get('portfolio_id')}: {e}")
        raise CorruptPortfolioDataError(str(e)) from e


def _detail(row: Dict[str, Any], doc: PortfolioDocument) -> Dict[str, Any]:
    return {
        "portfolio_id": row["portfolio_id"],
        "created_at": row["created_at"],
        "updated_at": row["updated_at"],
        **doc.model_dump(mode="json"),
        "template_id": row["template_id"],
    }


def load_portfolio_document(conn, user_id: int, portfolio_id: int) -> Tuple[Dict[str, Any], PortfolioDocument]:
    """Fetch a user's portfolio just before rendering. Raises PortfolioNotFoundError."""
    row = get_portfolio_row(conn, user_id, portfolio_id)
    if row is None:
        raise PortfolioNotFoundError(f"Portfolio {portfolio_id} not found")
    return row, row_to_document(row)


def create_portfolio(conn, user_id: int, doc: PortfolioDocument) -> Dict[str, Any]:
    """Store a new portfolio; picking a template counts towards its popularity."""
    template_id = _template_id_for_storage(conn, doc)
    portfolio_id = insert_portfolio(
        conn,
        user_id,
        doc.name,
        template_id,
        document_to_sections(doc),
        is_published=doc.is_published,
    )
    if template_id is not None:
        increment_template_popularity(conn, template_id)
    logger.info("Created portfolio %s for user %s", portfolio_id, user_id)
    return get_portfolio(conn, user_id, portfolio_id)


def list_user_portfolios(conn, user_id: int) -> List[Dict[str, Any]]:
    return list_portfolios(conn, user_id)


def get_portfolio(conn, user_id: int, portfolio_id: int) -> Dict[str, Any]:
    row, doc = load_portfolio_document(conn, user_id, portfolio_id)
    return _detail(row, doc)


def replace_portfolio(conn, user_id: int, portfolio_id: int, doc: PortfolioDocument) -> Dict[str, Any]:
    updated = update_portfolio(
        conn,
        user_id,
        portfolio_id,
        doc.name,
        _template_id_for_storage(conn, doc),
        document_to_sections(doc),
        is_published=doc.is_published,
    )
    if not updated:
        raise PortfolioNotFoundError(f"Portfolio {portfolio_id} not found")
    return get_portfolio(conn, user_id, portfolio_id)


def remove_portfolio(conn, user_id: int, portfolio_id: int) -> None:
    if not delete_portfolio(conn, user_id, portfolio_id):
        raise PortfolioNotFoundError(f"Portfolio {portfolio_id} not found")
