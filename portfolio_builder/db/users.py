"""
portfolio_builder/db/users.py

Handles all database operations related to users:
 - Creating new users (with password hash and role)
 - Fetching existing users
 - Normalizing usernames for lookups
"""

import sqlite3
from typing import Any, Dict, Optional


def _normalize_username(username: str) -> str:
    """Trim whitespace and prepare username for case-insensitive lookups."""
    return username.strip()


def _user_row_to_dict(row) -> Dict[str, Any]:
    return {"user_id": row[0], "username": row[1], "email": row[2], "role": row[3]}


def get_user_by_id(conn: sqlite3.Connection, user_id: int) -> Optional[Dict[str, Any]]:
    row = conn.execute(
        "SELECT user_id, username, email, role FROM users WHERE user_id = ?",
        (user_id,),
    ).fetchone()
    return _user_row_to_dict(row) if row else None


def get_user_by_username(conn: sqlite3.Connection, username: str) -> Optional[Dict[str, Any]]:
    """Case-insensitive lookup."""
    row = conn.execute(
        "SELECT user_id, username, email, role FROM users WHERE LOWER(username)=LOWER(?)",
        (_normalize_username(username),),
    ).fetchone()
    return _user_row_to_dict(row) if row else None


def get_user_auth_by_username(conn: sqlite3.Connection, username: str) -> Optional[Dict[str, Any]]:
    """Lookup including the password hash, for login only."""
    row = conn.execute(
        """
        SELECT user_id, username, email, role, password_hash
        FROM users
        WHERE LOWER(username)=LOWER(?)
        """,
        (_normalize_username(username),),
    ).fetchone()
    if not row:
        return None
    user = _user_row_to_dict(row)
    user["password_hash"] = row[4]
    return user


def create_user_with_password(
    conn: sqlite3.Connection,
    username: str,
    email: Optional[str],
    password_hash: str,
    role: str = "user",
) -> int:
    cur = conn.execute(
        "INSERT INTO users (username, email, password_hash, role) VALUES (?, ?, ?, ?)",
        (_normalize_username(username), email, password_hash, role),
    )
    conn.commit()
    return cur.lastrowid


def get_or_create_user(conn: sqlite3.Connection, username: str, email: Optional[str] = None) -> int:
    """Return existing user_id or create new user (no password)."""
    existing = get_user_by_username(conn, username)
    if existing:
        return existing["user_id"]
    cur = conn.execute(
        "INSERT INTO users (username, email) VALUES (?, ?)",
        (_normalize_username(username), email),
    )
    conn.commit()
    return cur.lastrowid


def set_user_role(conn: sqlite3.Connection, user_id: int, role: str) -> None:
    conn.execute("UPDATE users SET role = ? WHERE user_id = ?", (role, user_id))
    conn.commit()
