from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional
import logging

from fastapi import HTTPException, Request
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from app.core.config import Settings
from app.core.exceptions import NotFoundError
from app.db.base_class import Base

logger = logging.getLogger(__name__)


def _display_url(url: str) -> str:
    # Ocultar credenciales en el log
    if "@" in url:
        scheme = url.split("://")[0]
        host_info = url.split("@", 1)[1]
        return f"{scheme}://***@{host_info}"
    return url


class Database:
    """
    Cliente del almacén de datos.

    Se construye una sola vez al iniciar el proceso (lifespan de FastAPI) y se
    pasa explícitamente a quien lo necesite; no hay engine global de módulo.
    """

    def __init__(self, url: str, *, echo: bool = False, pool_size: int = 10,
                 max_overflow: int = 20, pool_timeout: int = 30):
        if url.startswith("sqlite") and ":memory:" in url:
            # SQLite en memoria: una sola conexión compartida o se pierden los datos
            self.engine: AsyncEngine = create_async_engine(
                url,
                echo=echo,
                connect_args={"check_same_thread": False},
                poolclass=StaticPool,
            )
        elif url.startswith("sqlite"):
            self.engine = create_async_engine(url, echo=echo)
        else:
            self.engine = create_async_engine(
                url,
                echo=echo,
                pool_size=pool_size,
                max_overflow=max_overflow,
                pool_timeout=pool_timeout,
                pool_recycle=280,
            )
        self.session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )
        logger.info(f"Async engine creado correctamente: {_display_url(url)}")

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        return cls(
            settings.DATABASE_URL,
            echo=settings.DB_ECHO,
            pool_size=settings.DB_POOL_SIZE,
            max_overflow=settings.DB_MAX_OVERFLOW,
            pool_timeout=settings.DB_POOL_TIMEOUT,
        )

    async def create_all(self) -> None:
        # Registrar todos los modelos antes de crear las tablas
        import app.db.base  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Tablas creadas/verificadas")

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """
        Context manager que garantiza rollback en error y cierre de la sesión.

        Uso:
            async with database.session() as db:
                result = await db.execute(select(Member))
        """
        async with self.session_factory() as session:
            try:
                yield session
            except SQLAlchemyError as e:
                logger.error(f"Error SQLAlchemy en sesión async: {e}", exc_info=True)
                await session.rollback()
                raise
            except Exception:
                await session.rollback()
                raise

    async def dispose(self) -> None:
        await self.engine.dispose()
        logger.info("Async engine cerrado")


# ==========================================
# DEPENDENCIAS
# ==========================================

def get_database(request: Request) -> Database:
    database: Optional[Database] = getattr(request.app.state, "database", None)
    if database is None:
        raise RuntimeError("Database no inicializada")
    return database


async def get_async_db(request: Request) -> AsyncIterator[AsyncSession]:
    """
    Dependencia async para obtener sesión de base de datos.

    Uso en endpoints:
        @router.get("/endpoint")
        async def my_endpoint(db: AsyncSession = Depends(get_async_db)):
            result = await db.execute(select(Member))
    """
    database = get_database(request)
    async with database.session_factory() as session:
        try:
            yield session
        except SQLAlchemyError as e:
            logger.error(f"Error SQLAlchemy en sesión async: {e}", exc_info=True)
            await session.rollback()
            raise
        except Exception as e:
            await session.rollback()
            if isinstance(e, (HTTPException, NotFoundError)):
                raise
            logger.error(f"Error inesperado en get_async_db: {e}", exc_info=True)
            raise
