"""
Account bootstrap. Admins are never created through the public register
endpoint; an operator promotes or creates them from the command line.
"""

import logging
from typing import Any, Dict, Optional

from portfolio_builder.api.auth.security import hash_password, validate_password_strength
from portfolio_builder.db import (
    create_user_with_password,
    get_user_by_id,
    get_user_by_username,
    set_user_role,
)

logger = logging.getLogger(__name__)


class AdminBootstrapError(Exception):
    pass


def ensure_admin_user(
    conn,
    username: str,
    password: Optional[str] = None,
    email: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Promote `username` to admin, creating the account first if it does not exist.
    A new account needs a password that passes the usual strength rules;
    an existing account keeps its password.
    """
    if not username or not username.strip():
        raise AdminBootstrapError("Username cannot be empty")

    user = get_user_by_username(conn, username)
    if user:
        if user["role"] != "admin":
            set_user_role(conn, user["user_id"], "admin")
            logger.info("Promoted user %s to admin", user["user_id"])
        return get_user_by_id(conn, user["user_id"])

    if password is None:
        raise AdminBootstrapError(f"User {username.strip()!r} does not exist; a password is required to create it")
    try:
        validate_password_strength(password)
    except ValueError as e:
        raise AdminBootstrapError(str(e)) from e

    user_id = create_user_with_password(conn, username, email, hash_password(password), role="admin")
    logger.info("Created admin user %s", user_id)
    return get_user_by_id(conn, user_id)
