"""
portfolio_builder/db/template_purchases.py

Purchase requests for premium templates. A request starts 'pending' and
an admin moves it to 'approved' or 'rejected'. No payment data is stored.
"""

from __future__ import annotations

import sqlite3
from typing import Any, Dict, List, Optional

PURCHASE_STATUSES = ("pending", "approved", "rejected")

_SELECT = """
    SELECT p.purchase_id, p.user_id, p.template_id, p.portfolio_id, p.status,
           p.requested_at, p.decided_at, p.decided_by, t.name, u.username
    FROM template_purchases p
    JOIN templates t ON t.template_id = p.template_id
    JOIN users u ON u.user_id = p.user_id
"""


def _row_to_dict(row) -> Dict[str, Any]:
    return {
        "purchase_id": row[0],
        "user_id": row[1],
        "template_id": row[2],
        "portfolio_id": row[3],
        "status": row[4],
        "requested_at": row[5],
        "decided_at": row[6],
        "decided_by": row[7],
        "template_name": row[8],
        "username": row[9],
    }


def insert_purchase_request(
    conn: sqlite3.Connection,
    user_id: int,
    template_id: int,
    portfolio_id: Optional[int] = None,
) -> int:
    cur = conn.execute(
        """
        INSERT INTO template_purchases (user_id, template_id, portfolio_id, status)
        VALUES (?, ?, ?, 'pending')
        """,
        (user_id, template_id, portfolio_id),
    )
    conn.commit()
    return cur.lastrowid


def get_purchase(conn: sqlite3.Connection, purchase_id: int) -> Optional[Dict[str, Any]]:
    row = conn.execute(f"{_SELECT} WHERE p.purchase_id = ?", (purchase_id,)).fetchone()
    return _row_to_dict(row) if row else None


def list_user_purchases(conn: sqlite3.Connection, user_id: int) -> List[Dict[str, Any]]:
    rows = conn.execute(
        f"{_SELECT} WHERE p.user_id = ? ORDER BY p.purchase_id DESC",
        (user_id,),
    ).fetchall()
    return [_row_to_dict(r) for r in rows]


def list_purchases(conn: sqlite3.Connection, status: Optional[str] = None) -> List[Dict[str, Any]]:
    if status:
        rows = conn.execute(
            f"{_SELECT} WHERE p.status = ? ORDER BY p.purchase_id",
            (status,),
        ).fetchall()
    else:
        rows = conn.execute(f"{_SELECT} ORDER BY p.purchase_id").fetchall()
    return [_row_to_dict(r) for r in rows]


def get_latest_user_purchase(conn: sqlite3.Connection, user_id: int, template_id: int) -> Optional[Dict[str, Any]]:
    row = conn.execute(
        f"{_SELECT} WHERE p.user_id = ? AND p.template_id = ? ORDER BY p.purchase_id DESC LIMIT 1",
        (user_id, template_id),
    ).fetchone()
    return _row_to_dict(row) if row else None


def has_approved_purchase(conn: sqlite3.Connection, user_id: int, template_id: int) -> bool:
    row = conn.execute(
        """
        SELECT 1 FROM template_purchases
        WHERE user_id = ? AND template_id = ? AND status = 'approved'
        LIMIT 1
        """,
        (user_id, template_id),
    ).fetchone()
    return row is not None


def set_purchase_status(
    conn: sqlite3.Connection,
    purchase_id: int,
    status: str,
    decided_by: Optional[int],
) -> bool:
    """Record an admin decision. Returns False if the purchase does not exist."""
    if status not in PURCHASE_STATUSES:
        raise ValueError(f"Unknown purchase status: {status!r}")
    cur = conn.execute(
        """
        UPDATE template_purchases
        SET status = ?, decided_at = CURRENT_TIMESTAMP, decided_by = ?
        WHERE purchase_id = ?
        """,
        (status, decided_by, purchase_id),
    )
    conn.commit()
    return cur.rowcount > 0
