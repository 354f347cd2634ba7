"""Conteos directos sobre la DB para las aserciones de los tests."""
from sqlalchemy import func, select

from minitwit.followers.models import Follower
from minitwit.messages.models import Message


async def count_rows(db, model) -> int:
    res = await db.execute(select(func.count()).select_from(model))
    return int(res.scalar_one())


async def count_edges(db, user_id: int, follows_id: int) -> int:
    q = select(func.count()).select_from(Follower).where(
        Follower.user_id == user_id,
        Follower.follows_id == follows_id,
    )
    res = await db.execute(q)
    return int(res.scalar_one())


async def count_by_author(db, author_id: int) -> int:
    q = select(func.count()).select_from(Message).where(Message.author_id == author_id)
    res = await db.execute(q)
    return int(res.scalar_one())
