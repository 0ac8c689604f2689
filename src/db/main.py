import logging
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import NullPool
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from src.config import Config

logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)


def _engine_options(url: str) -> dict:
    # SQLite connections cannot be shared between event loops
    if url.startswith("sqlite"):
        return {"poolclass": NullPool}

    return {
        "pool_size": 10,
        "max_overflow": 20,
        "pool_timeout": 60,
    }


async_engine = create_async_engine(
    Config.DATABASE_URL,
    echo=False,
    future=True,
    **_engine_options(Config.DATABASE_URL)
)


async def init_db() -> None:
    # table models must be registered on the metadata before create_all
    from src.db import models  # noqa: F401

    async with async_engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)


async def drop_db() -> None:
    async with async_engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)


async def get_session() -> AsyncSession: # type: ignore
    Session = sessionmaker(
        async_engine,
        class_=AsyncSession,
        expire_on_commit=False
    )

    async with Session() as session:
        try:
            yield session
        except Exception as e:
            logger.error(f"Session error: {e}")
            raise
