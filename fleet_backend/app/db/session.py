"""
Database engine and sessions for the fleet store.

One async engine per process, pooled against the hosted PostgreSQL
database; one session per request.
"""

from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.orm import declarative_base
from fleet_backend.app.core.config import settings

# Hosted databases drop idle connections, hence pre-ping
engine = create_async_engine(
    settings.database_url,
    echo=settings.db_echo,
    pool_size=settings.db_pool_size,
    max_overflow=settings.db_max_overflow,
    pool_pre_ping=True,
    future=True,
)

AsyncSessionLocal = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autocommit=False,
    autoflush=False,
)

Base = declarative_base()


async def get_db():
    """Yield the session a request's ``FleetStore`` runs its queries on."""
    async with AsyncSessionLocal() as session:
        try:
            yield session
        finally:
            await session.close()
