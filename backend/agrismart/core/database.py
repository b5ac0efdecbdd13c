from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession
from sqlalchemy.orm import sessionmaker, declarative_base

from .config import settings
from .errors import PersistenceError
from .logger import logger
from .utils_logging import error_detail

DATABASE_URL = settings.DATABASE_URL
if not DATABASE_URL:
    raise RuntimeError("DATABASE_URL must be set in environment")

engine = create_async_engine(DATABASE_URL, echo=False, future=True)
AsyncSessionLocal = sessionmaker(bind=engine, expire_on_commit=False, class_=AsyncSession)
Base = declarative_base()


def make_session_factory(url: str):
    """Engine + session factory for an arbitrary URL (scripts, tests)."""
    other_engine = create_async_engine(url, echo=False, future=True)
    return other_engine, sessionmaker(bind=other_engine, expire_on_commit=False, class_=AsyncSession)


async def create_tables(bind=None):
    async with (bind or engine).begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def commit_or_rollback(db: AsyncSession, what: str) -> None:
    """
    Commit the pending unit of work. On any store error roll back
    everything added since the last commit and raise PersistenceError.
    """
    try:
        await db.commit()
    except SQLAlchemyError as exc:
        await db.rollback()
        logger.error(f"Failed to persist {what}", extra=error_detail(exc))
        raise PersistenceError(f"could not persist {what}: {exc}") from exc


# Dependency for FastAPI
async def get_db():
    async with AsyncSessionLocal() as session:
        yield session
