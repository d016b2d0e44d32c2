from typing import Any, Dict, Generator
from sqlite3 import Connection
import os
import jwt

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer

from portfolio_builder.db import connect, init_schema
from portfolio_builder.db.users import get_user_by_id
from portfolio_builder.api.auth.security import decode_access_token


def get_db() -> Generator[Connection, None, None]:
    conn = connect()
    init_schema(conn)  # ensure tables exist for API requests
    try:
        yield conn
    finally:
        conn.close()

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/auth/login")

def get_jwt_secret() -> str:
    secret = os.getenv("JWT_SECRET")
    if not secret:
        raise RuntimeError("JWT_SECRET is not set")
    return secret

def get_current_user(
    token: str = Depends(oauth2_scheme),
    conn: Connection = Depends(get_db),
    secret: str = Depends(get_jwt_secret),
) -> Dict[str, Any]:
    try:
        payload = decode_access_token(secret=secret, token=token)
        user_id = int(payload["sub"])
    except (KeyError, ValueError, jwt.PyJWTError):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Could not validate credentials",
        )

    user = get_user_by_id(conn, user_id)
    if not user:
        raise HTTPException(status_code=401, detail="User not found")

    return {"id": user["user_id"], "username": user["username"], "role": user["role"]}

def get_current_user_id(
    current_user: dict = Depends(get_current_user),
) -> int:
    """Extract user_id from the current authenticated user."""
    return current_user["id"]

def require_admin(
    current_user: dict = Depends(get_current_user),
) -> Dict[str, Any]:
    # role is read from the users table, not trusted from the token
    if current_user.get("role") != "admin":
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Admin access required")
    return current_user
