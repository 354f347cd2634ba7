# minitwit/db/session.py
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from minitwit.core.config import settings


def build_engine(db_url: str) -> AsyncEngine:
    """
    Crea el engine según el driver. Los tests construyen el suyo con
    "sqlite+aiosqlite:///:memory:" y lo descartan al terminar.
    """
    # Timeouts cortos: si la DB no responde → falla rápido (5s)
    if db_url.startswith("postgresql+psycopg"):
        return create_async_engine(
            db_url,
            pool_pre_ping=True,
            pool_recycle=300,
            pool_size=5,
            max_overflow=10,
            connect_args={"connect_timeout": 5},
        )
    if db_url.startswith("postgresql+asyncpg"):
        return create_async_engine(
            db_url,
            pool_pre_ping=True,
            pool_recycle=300,
            pool_size=5,
            max_overflow=10,
            connect_args={
                "timeout": 5,
                "server_settings": {"client_encoding": "UTF8"},
            },
        )
    if db_url.startswith("sqlite") and ":memory:" in db_url:
        # una sola conexión compartida, si no cada conexión ve una DB vacía
        return create_async_engine(
            db_url,
            poolclass=StaticPool,
            connect_args={"check_same_thread": False},
        )
    return create_async_engine(db_url, pool_pre_ping=True)


def build_sessionmaker(bind: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        bind,
        class_=AsyncSession,
        expire_on_commit=False,
    )


engine = build_engine(settings.DATABASE_URL)
AsyncSessionLocal = build_sessionmaker(engine)


async def get_session() -> AsyncSession:
    async with AsyncSessionLocal() as session:
        try:
            yield session
        finally:
            await session.close()
