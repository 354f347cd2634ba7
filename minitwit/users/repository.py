# minitwit/users/repository.py
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from minitwit.users.models import User

async def get_by_username(db: AsyncSession, username: str) -> User | None:
    res = await db.execute(select(User).where(User.username == username))
    return res.scalar_one_or_none()

async def get_user_id_by_username(db: AsyncSession, username: str) -> int | None:
    res = await db.execute(select(User.id).where(User.username == username))
    return res.scalar_one_or_none()

async def create_user(db: AsyncSession, username: str, email: str, hashed_password: str) -> User:
    user = User(username=username, email=email, hashed_password=hashed_password)
    db.add(user)
    await db.flush()
    await db.refresh(user)
    return user
