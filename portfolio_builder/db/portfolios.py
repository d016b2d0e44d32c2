"""
portfolio_builder/db/portfolios.py

Storage for portfolio documents. Each document section lives in its own
JSON column; callers pass and receive the JSON strings unchanged.
"""

from __future__ import annotations

import sqlite3
from typing import Any, Dict, List, Optional

SECTION_COLUMNS = (
    "personal_info_json",
    "skills_json",
    "projects_json",
    "education_json",
    "color_scheme_json",
)

_SELECT_COLUMNS = """
    portfolio_id, user_id, name, template_id,
    personal_info_json, skills_json, projects_json, education_json, color_scheme_json,
    is_published, created_at, updated_at
"""


def _row_to_dict(row) -> Dict[str, Any]:
    return {
        "portfolio_id": row[0],
        "user_id": row[1],
        "name": row[2],
        "template_id": row[3],
        "personal_info_json": row[4],
        "skills_json": row[5],
        "projects_json": row[6],
        "education_json": row[7],
        "color_scheme_json": row[8],
        "is_published": bool(row[9]),
        "created_at": row[10],
        "updated_at": row[11],
    }


def insert_portfolio(
    conn: sqlite3.Connection,
    user_id: int,
    name: str,
    template_id: Optional[int],
    sections: Dict[str, str],
    is_published: bool = False,
) -> int:
    """
    Insert a new portfolio. `sections` maps each SECTION_COLUMNS name to a JSON string.
    Returns the inserted row id.
    """
    cur = conn.execute(
        """
        INSERT INTO portfolios (
            user_id, name, template_id,
            personal_info_json, skills_json, projects_json, education_json, color_scheme_json,
            is_published
        ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)
        """,
        (
            user_id,
            name,
            template_id,
            *(sections[c] for c in SECTION_COLUMNS),
            int(is_published),
        ),
    )
    conn.commit()
    return cur.lastrowid


def list_portfolios(conn: sqlite3.Connection, user_id: int) -> List[Dict[str, Any]]:
    """Summary rows for a user, most recently updated first."""
    rows = conn.execute(
        """
        SELECT portfolio_id, name, template_id, is_published, created_at, updated_at
        FROM portfolios
        WHERE user_id = ?
        ORDER BY updated_at DESC, portfolio_id DESC
        """,
        (user_id,),
    ).fetchall()
    return [
        {
            "portfolio_id": r[0],
            "name": r[1],
            "template_id": r[2],
            "is_published": bool(r[3]),
            "created_at": r[4],
            "updated_at": r[5],
        }
        for r in rows
    ]


def get_portfolio_row(conn: sqlite3.Connection, user_id: int, portfolio_id: int) -> Optional[Dict[str, Any]]:
    """Fetch one portfolio owned by `user_id` (None for missing or foreign ids)."""
    row = conn.execute(
        f"SELECT {_SELECT_COLUMNS} FROM portfolios WHERE user_id = ? AND portfolio_id = ?",
        (user_id, portfolio_id),
    ).fetchone()
    return _row_to_dict(row) if row else None


def update_portfolio(
    conn: sqlite3.Connection,
    user_id: int,
    portfolio_id: int,
    name: str,
    template_id: Optional[int],
    sections: Dict[str, str],
    is_published: bool = False,
) -> bool:
    """Replace a stored portfolio. Returns False if nothing matched."""
    cur = conn.execute(
        """
        UPDATE portfolios
        SET name = ?,
            template_id = ?,
            personal_info_json = ?,
            skills_json = ?,
            projects_json = ?,
            education_json = ?,
            color_scheme_json = ?,
            is_published = ?,
            updated_at = CURRENT_TIMESTAMP
        WHERE user_id = ? AND portfolio_id = ?
        """,
        (
            name,
            template_id,
            *(sections[c] for c in SECTION_COLUMNS),
            int(is_published),
            user_id,
            portfolio_id,
        ),
    )
    conn.commit()
    return cur.rowcount > 0


def delete_portfolio(conn: sqlite3.Connection, user_id: int, portfolio_id: int) -> bool:
    cur = conn.execute(
        "DELETE FROM portfolios WHERE user_id = ? AND portfolio_id = ?",
        (user_id, portfolio_id),
    )
    conn.commit()
    return cur.rowcount > 0
