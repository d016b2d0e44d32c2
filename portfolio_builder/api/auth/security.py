from datetime import datetime, timedelta, timezone
from typing import Any
import os

import jwt
from passlib.context import CryptContext

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

JWT_ALGORITHM = "HS256"
DEFAULT_TOKEN_MINUTES = 60

# bcrypt only looks at the first 72 bytes
BCRYPT_MAX_BYTES = 72


def token_lifetime_minutes() -> int:
    try:
        return int(os.getenv("JWT_EXPIRES_MINUTES", DEFAULT_TOKEN_MINUTES))
    except ValueError:
        return DEFAULT_TOKEN_MINUTES


def validate_password_strength(password: str) -> str:
    """
    Password rules for builder accounts:
    - at least 8 characters
    - at least one lowercase letter, one uppercase letter and one digit
    """
    if password is None:
        raise ValueError("Password cannot be empty")

    if len(password) < 8:
        raise ValueError("Password must be at least 8 characters long")

    has_lower = any(c.islower() for c in password)
    has_upper = any(c.isupper() for c in password)
    has_digit = any(c.isdigit() for c in password)

    if not (has_lower and has_upper and has_digit):
        raise ValueError(
            "Password must include at least one uppercase letter, one lowercase letter, and one number"
        )

    return password


def _bcrypt_safe(password: str) -> str:
    """Cut to 72 bytes without splitting a UTF-8 sequence."""
    raw = password.encode("utf-8")
    if len(raw) <= BCRYPT_MAX_BYTES:
        return password
    return raw[:BCRYPT_MAX_BYTES].decode("utf-8", errors="ignore")


def hash_password(password: str) -> str:
    return pwd_context.hash(_bcrypt_safe(password))


def verify_password(password: str, password_hash: str) -> bool:
    if not password_hash:
        return False
    return pwd_context.verify(_bcrypt_safe(password), password_hash)


def create_access_token(
    *,
    secret: str,
    user_id: int,
    username: str,
    role: str = "user",
    expires_minutes: int = DEFAULT_TOKEN_MINUTES,
) -> str:
    now = datetime.now(timezone.utc)
    payload: dict[str, Any] = {
        "sub": str(user_id),
        "username": username,
        "role": role,
        "iat": int(now.timestamp()),
        "exp": int((now + timedelta(minutes=expires_minutes)).timestamp()),
    }
    return jwt.encode(payload, secret, algorithm=JWT_ALGORITHM)


def decode_access_token(*, secret: str, token: str) -> dict[str, Any]:
    # raises jwt.PyJWTError subclasses if invalid/expired
    return jwt.decode(token, secret, algorithms=[JWT_ALGORITHM])
