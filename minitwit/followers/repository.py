# minitwit/followers/repository.py
from sqlalchemy import select, delete
from sqlalchemy.ext.asyncio import AsyncSession
from minitwit.followers.models import Follower
from minitwit.users.models import User


async def is_following(db: AsyncSession, user_id: int, follows_id: int) -> bool:
    q = select(Follower.id).where(
        Follower.user_id == user_id,
        Follower.follows_id == follows_id,
    )
    res = await db.execute(q)
    return res.scalar_one_or_none() is not None


async def add_follow(db: AsyncSession, user_id: int, follows_id: int) -> Follower:
    edge = Follower(user_id=user_id, follows_id=follows_id)
    db.add(edge)
    await db.flush()
    return edge


async def remove_follow(db: AsyncSession, user_id: int, follows_id: int) -> int:
    """Borra la arista y devuelve cuántas filas se fueron (0 o 1)."""
    res = await db.execute(
        delete(Follower).where(
            Follower.user_id == user_id,
            Follower.follows_id == follows_id,
        )
    )
    await db.flush()
    return res.rowcount or 0


async def list_follows(db: AsyncSession, user_id: int, limit: int = 100) -> list[str]:
    """Usernames a los que sigue user_id, en el orden en que los siguió."""
    q = (
        select(User.username)
        .join(Follower, Follower.follows_id == User.id)
        .where(Follower.user_id == user_id)
        .order_by(Follower.id)
        .limit(limit)
    )
    res = await db.execute(q)
    return list(res.scalars())
