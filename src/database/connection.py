from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from src.database.models import Base
from src.utils.logger import get_logger
from src.utils.settings.database import DatabaseSettings

logger = get_logger(__name__)


def create_engine_from_settings(settings: DatabaseSettings) -> AsyncEngine:
    """Create the process-wide async engine for the SQLite file.

    Every new DBAPI connection is switched to WAL journaling with full
    synchronous commits, so an acknowledged write survives a crash.
    """
    settings.database_file.parent.mkdir(parents=True, exist_ok=True)

    engine = create_async_engine(settings.DATABASE_URL_ASYNC, echo=settings.DB_ECHO)
    busy_timeout = settings.DB_BUSY_TIMEOUT_MS

    @event.listens_for(engine.sync_engine, "connect")
    def _set_sqlite_pragmas(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA journal_mode=WAL")
        cursor.execute("PRAGMA synchronous=FULL")
        cursor.execute(f"PRAGMA busy_timeout={int(busy_timeout)}")
        cursor.close()

    return engine


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)


async def init_schema(engine: AsyncEngine) -> None:
    """Create missing tables and indexes."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database schema ready", url=str(engine.url))
