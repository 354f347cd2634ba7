# minitwit/users/service.py
from __future__ import annotations

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from minitwit.core.errors import AuthError, ConflictError
from minitwit.core.security import hash_password, create_access_token, verify_password
from minitwit.simulator.validation import validate_registration
from minitwit.users.models import User
from minitwit.users.repository import get_by_username, create_user
from minitwit.users.schemas import RegisterRequest, LoginOut

log = logging.getLogger("uvicorn")

USERNAME_TAKEN = "The username is already taken"
UNKNOWN_USERNAME = "Username does not match a user"
BAD_CREDENTIALS = "Incorrect password or username"


async def register_user(db: AsyncSession, data: RegisterRequest) -> User:
    validate_registration(data.username, data.email, data.pwd)
    if await get_by_username(db, data.username):
        raise ConflictError(USERNAME_TAKEN)

    hashed = hash_password(data.pwd)
    try:
        user = await create_user(db, data.username, data.email, hashed)
    except IntegrityError as e:
        # otro request registró el mismo username entre el check y el insert
        log.warning(f"⚠️ registro concurrente de {data.username!r}: {e.orig!r}")
        raise ConflictError(USERNAME_TAKEN) from e

    # El commit lo hace el caller
    return user


async def authenticate_user(db: AsyncSession, username: str | None, password: str | None) -> User:
    user = await get_by_username(db, username) if username else None
    if not user:
        raise AuthError(UNKNOWN_USERNAME)
    if not password or not verify_password(password, user.hashed_password):
        raise AuthError(BAD_CREDENTIALS)
    return user


async def login_user(
    db: AsyncSession,
    username: str | None,
    password: str | None,
    *,
    secret_key: str | None = None,
    expires_minutes: int | None = None,
) -> dict:
    user = await authenticate_user(db, username, password)
    token = create_access_token(
        sub=str(user.id),
        expires_minutes=expires_minutes,
        secret_key=secret_key,
    )
    return LoginOut(access_token=token, user_id=user.id, username=user.username).model_dump()
