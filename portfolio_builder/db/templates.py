"""
portfolio_builder/db/templates.py

Template catalog: metadata only (name, premium flag, price, category).
Every template shares one page layout, so no markup is stored here.
"""

from __future__ import annotations

import sqlite3
from typing import Any, Dict, List, Optional

from portfolio_builder.constants import DEFAULT_TEMPLATES

_COLUMNS = "template_id, name, description, thumbnail_url, is_premium, price, category, popularity, created_at"


def _row_to_dict(row) -> Dict[str, Any]:
    return {
        "template_id": row[0],
        "name": row[1],
        "description": row[2],
        "thumbnail_url": row[3],
        "is_premium": bool(row[4]),
        "price": row[5],
        "category": row[6],
        "popularity": row[7],
        "created_at": row[8],
    }


def list_templates(conn: sqlite3.Connection, category: Optional[str] = None) -> List[Dict[str, Any]]:
    if category:
        rows = conn.execute(
            f"SELECT {_COLUMNS} FROM templates WHERE LOWER(category) = LOWER(?) ORDER BY template_id",
            (category,),
        ).fetchall()
    else:
        rows = conn.execute(f"SELECT {_COLUMNS} FROM templates ORDER BY template_id").fetchall()
    return [_row_to_dict(r) for r in rows]


def get_template_by_id(conn: sqlite3.Connection, template_id: int) -> Optional[Dict[str, Any]]:
    row = conn.execute(
        f"SELECT {_COLUMNS} FROM templates WHERE template_id = ?",
        (template_id,),
    ).fetchone()
    return _row_to_dict(row) if row else None


def insert_template(
    conn: sqlite3.Connection,
    name: str,
    description: str = "",
    thumbnail_url: str = "",
    is_premium: bool = False,
    price: int = 0,
    category: str = "General",
    popularity: int = 0,
    created_by: Optional[int] = None,
) -> int:
    cur = conn.execute(
        """
        INSERT INTO templates (name, description, thumbnail_url, is_premium, price, category, popularity, created_by)
        VALUES (?, ?, ?, ?, ?, ?, ?, ?)
        """,
        (name, description, thumbnail_url, int(is_premium), price if is_premium else 0, category, popularity, created_by),
    )
    conn.commit()
    return cur.lastrowid


def seed_default_templates(conn: sqlite3.Connection) -> int:
    """Insert the built-in templates into an empty catalog. Returns how many were added."""
    (count,) = conn.execute("SELECT COUNT(*) FROM templates").fetchone()
    if count:
        return 0

    for t in DEFAULT_TEMPLATES:
        conn.execute(
            """
            INSERT INTO templates (name, description, thumbnail_url, is_premium, price, category, popularity)
            VALUES (?, ?, ?, ?, ?, ?, ?)
            """,
            (
                t["name"],
                t["description"],
                t["thumbnail_url"],
                int(t["is_premium"]),
                t["price"],
                t["category"],
                t["popularity"],
            ),
        )
    return len(DEFAULT_TEMPLATES)


# Columns an admin may change through update_template()
EDITABLE_COLUMNS = ("name", "description", "thumbnail_url", "is_premium", "price", "category", "popularity")


def update_template(conn: sqlite3.Connection, template_id: int, fields: Dict[str, Any]) -> bool:
    """Update the given editable columns. Returns False if the template does not exist."""
    unknown = set(fields) - set(EDITABLE_COLUMNS)
    if unknown:
        raise ValueError(f"Not editable: {sorted(unknown)}")

    values = dict(fields)
    if "is_premium" in values:
        values["is_premium"] = int(values["is_premium"])
    if not values:
        return get_template_by_id(conn, template_id) is not None

    assignments = ", ".join(f"{col} = ?" for col in values)
    cur = conn.execute(
        f"UPDATE templates SET {assignments} WHERE template_id = ?",
        (*values.values(), template_id),
    )
    # a free template never carries a price
    conn.execute("UPDATE templates SET price = 0 WHERE template_id = ? AND is_premium = 0", (template_id,))
    conn.commit()
    return cur.rowcount > 0


def delete_template(conn: sqlite3.Connection, template_id: int) -> bool:
    cur = conn.execute("DELETE FROM templates WHERE template_id = ?", (template_id,))
    conn.commit()
    return cur.rowcount > 0


def increment_template_popularity(conn: sqlite3.Connection, template_id: int) -> None:
    conn.execute("UPDATE templates SET popularity = popularity + 1 WHERE template_id = ?", (template_id,))
    conn.commit()
