# minitwit/simulator/repository.py
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from minitwit.simulator.models import Latest

LATEST_ROW_ID = 1


async def get_latest(db: AsyncSession) -> int | None:
    res = await db.execute(select(Latest.value).where(Latest.id == LATEST_ROW_ID))
    return res.scalar_one_or_none()


async def set_latest(db: AsyncSession, value: int) -> None:
    row = await db.get(Latest, LATEST_ROW_ID)
    if row is None:
        db.add(Latest(id=LATEST_ROW_ID, value=value))
    else:
        row.value = value
    await db.flush()
