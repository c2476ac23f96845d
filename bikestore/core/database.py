"""
Conexión a base de datos (PostgreSQL por defecto)

Este módulo centraliza el acceso a la base de datos:
- SQLAlchemy engine y session factory
- get_session(): sesión de solo lectura con verificación de conexión
- get_db(): dependencia FastAPI

Author: TM3
Updated: 2025-10-17
"""
import logging
from contextlib import contextmanager
from typing import Iterator, Optional

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.exc import InterfaceError, OperationalError
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from .config import settings
from .exceptions import ConnectionFailure

logger = logging.getLogger(__name__)


# ============================================================================
# SQLAlchemy Configuration
# ============================================================================

def create_db_engine(database_url: str, echo: bool = False) -> Engine:
    """
    Create a SQLAlchemy engine for the given URL

    Pool sizing only applies to server databases; SQLite uses its own pool.
    """
    url = make_url(database_url)
    options = {
        "echo": echo,
        "pool_pre_ping": True,  # Verificar conexión antes de usar
    }
    if url.get_backend_name() != "sqlite":
        options["pool_size"] = 5
        options["max_overflow"] = 10

    return create_engine(url, **options)


# SQLAlchemy Engine
engine = create_db_engine(settings.DATABASE_URL, echo=settings.DB_ECHO)

# Session Factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Base para modelos
Base = declarative_base()


@contextmanager
def get_session(bind: Optional[Engine] = None) -> Iterator[Session]:
    """
    Open one session for a whole report run and always close it

    The connection is probed with SELECT 1 before anything is yielded, so an
    unreachable database fails here and not halfway through a report.

    Args:
        bind: Engine to use instead of the configured one

    Raises:
        ConnectionFailure: If the database cannot be reached

    Example:
        with get_session() as session:
            rows = CustomerRepository(session).find_contacts()
    """
    session = SessionLocal(bind=bind) if bind is not None else SessionLocal()

    try:
        try:
            session.execute(text("SELECT 1"))
        except (OperationalError, InterfaceError) as e:
            logger.error(f"Database connection failed: {e}")
            raise ConnectionFailure(f"Cannot connect to database: {e}", cause=e) from e

        logger.debug("Database session opened")
        yield session

    finally:
        session.close()
        logger.debug("Database session closed")


def get_db():
    """
    FastAPI dependency para obtener sesión de SQLAlchemy

    Usage:
        @router.get("/items")
        def read_items(db: Session = Depends(get_db)):
            ...
    """
    with get_session() as session:
        yield session
