"""
Database utilities and engine management.

This module provides the core database engine that can be used by any layer:
- API routes
- Repositories
- Migrations

No dependencies on higher-level modules (api, services, agents).
"""

import logging
from functools import lru_cache
from typing import Generator

from sqlalchemy.engine import Engine
from sqlmodel import SQLModel, Session, create_engine

from config.settings import settings

logger = logging.getLogger(__name__)


@lru_cache()
def get_engine() -> Engine:
    """
    Get cached database engine.

    Returns:
        SQLAlchemy engine singleton

    Note:
        SQLite (the default) needs check_same_thread=False because FastAPI
        runs sync routes on a thread pool.
    """
    db_url = settings.DATABASE_URL

    connect_args = {}
    if db_url.startswith("sqlite"):
        connect_args["check_same_thread"] = False
        connect_args["timeout"] = settings.UPSTREAM_TIMEOUT_SECONDS

    return create_engine(
        db_url,
        connect_args=connect_args,
        pool_pre_ping=True,  # Verify connection before use
    )


def init_db(engine: Engine = None) -> None:
    """Create the hr_home table if it does not exist."""
    # Register table metadata
    import models  # noqa: F401

    engine = engine or get_engine()
    SQLModel.metadata.create_all(engine)
    logger.info("Table hr_home is ready")


def get_db() -> Generator[Session, None, None]:
    """
    Database session dependency for FastAPI.

    Yields:
        SQLModel Session that auto-closes after request

    Usage:
        @router.get("/example")
        def example(db: Session = Depends(get_db)):
            ...
    """
    engine = get_engine()
    with Session(engine) as session:
        yield session
