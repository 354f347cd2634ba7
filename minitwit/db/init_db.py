import logging

from sqlalchemy.ext.asyncio import AsyncEngine

from minitwit.db.base import Base

# 👇 importa todos los modelos que deben existir en la DB
from minitwit.users.models import User  # noqa: F401
from minitwit.messages.models import Message  # noqa: F401
from minitwit.followers.models import Follower  # noqa: F401
from minitwit.simulator.models import Latest  # noqa: F401

log = logging.getLogger("uvicorn")


async def init_models(bind: AsyncEngine):
    """
    Crea/verifica todas las tablas declaradas en Base.metadata
    """
    try:
        async with bind.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        log.info("✅ DB init: tablas creadas/verificadas.")
    except Exception as e:
        log.error(f"❌ DB init falló: {e!r}")
        raise
