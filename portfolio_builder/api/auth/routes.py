from fastapi import APIRouter, HTTPException, Depends, status
import sqlite3

from .security import hash_password, verify_password, create_access_token, token_lifetime_minutes
from ..dependencies import get_db, get_jwt_secret
from ..schemas.auth import RegisterIn, LoginIn, RegisterOut, TokenOut
from ...db.users import get_user_auth_by_username, create_user_with_password

router = APIRouter(prefix="/auth", tags=["auth"])

@router.post("/register", response_model=RegisterOut, status_code=status.HTTP_201_CREATED)
def register(payload: RegisterIn, conn: sqlite3.Connection = Depends(get_db)):
    existing = get_user_auth_by_username(conn, payload.username)
    if existing:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Username already taken")

    password_hash = hash_password(payload.password)
    user_id = create_user_with_password(conn, payload.username, payload.email, password_hash)

    return RegisterOut(user_id=user_id, username=payload.username)

@router.post("/login", response_model=TokenOut)
def login(
    payload: LoginIn,
    conn: sqlite3.Connection = Depends(get_db),
    secret: str = Depends(get_jwt_secret),
):
    user = get_user_auth_by_username(conn, payload.username)
    if not user or not verify_password(payload.password, user["password_hash"]):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")

    token = create_access_token(
        secret=secret,
        user_id=user["user_id"],
        username=user["username"],
        role=user["role"],
        expires_minutes=token_lifetime_minutes(),
    )
    return TokenOut(access_token=token)
