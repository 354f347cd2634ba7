# minitwit/followers/service.py
from __future__ import annotations

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from minitwit.core.errors import NotFoundError, StateError, ValidationError
from minitwit.followers.repository import (
    add_follow,
    is_following,
    list_follows,
    remove_follow,
)
from minitwit.followers.schemas import FollowRequest, FollowsOut
from minitwit.simulator.validation import validate_follow_action
from minitwit.users.repository import get_user_id_by_username

log = logging.getLogger("uvicorn")


async def _resolve(db: AsyncSession, username: str) -> int:
    user_id = await get_user_id_by_username(db, username)
    if user_id is None:
        raise NotFoundError(f"User {username!r} does not exist")
    return user_id


async def change_follow(
    db: AsyncSession,
    username: str,
    data: FollowRequest,
    *,
    allow_self_follow: bool = False,
    duplicate_is_error: bool = False,
) -> None:
    """
    Aplica follow/unfollow sobre la lista de `username`.
    No hace commit (lo hace el caller), salvo el rollback del insert repetido.
    """
    action, other = validate_follow_action(data.follow, data.unfollow)
    user_id = await _resolve(db, username)
    other_id = await _resolve(db, other)

    if action == "unfollow":
        removed = await remove_follow(db, user_id, other_id)
        if not removed:
            raise StateError(f"{username!r} is not following {other!r}")
        return

    if user_id == other_id and not allow_self_follow:
        raise ValidationError("You cannot follow yourself")

    if await is_following(db, user_id, other_id):
        if duplicate_is_error:
            raise StateError(f"{username!r} is already following {other!r}")
        return

    try:
        await add_follow(db, user_id, other_id)
    except IntegrityError as e:
        # otro request insertó la misma arista entre el check y el insert
        await db.rollback()
        log.warning(f"⚠️ follow concurrente {user_id}->{other_id}: {e.orig!r}")
        if duplicate_is_error:
            raise StateError(f"{username!r} is already following {other!r}") from e


async def follows_of(db: AsyncSession, username: str, limit: int) -> dict:
    user_id = await _resolve(db, username)
    names = await list_follows(db, user_id, limit=limit)
    return FollowsOut(follows=names).model_dump()
