"""Database setup for users, categories, colors and post-its."""

import logging

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, declarative_base

from .config import settings

logger = logging.getLogger(__name__)

DATABASE_URL = settings.database_url

_connect_args = {"check_same_thread": False} if DATABASE_URL.startswith("sqlite") else {}

engine = create_engine(DATABASE_URL, connect_args=_connect_args, future=True)
SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)
Base = declarative_base()


def init_db(bind: Engine | None = None, reset: bool = False) -> None:
    """Create tables if they do not exist and seed the color palette.

    With ``reset`` every table is dropped first.
    """
    # Import models to register them with Base.metadata
    from . import models  # noqa: F401
    from .services.colors import seed_palette

    bind = bind or engine
    if reset:
        Base.metadata.drop_all(bind=bind)
        logger.info("tables dropped")
    Base.metadata.create_all(bind=bind)
    logger.info("tables created/exist")

    session = sessionmaker(bind=bind, autoflush=False, autocommit=False, future=True)()
    try:
        seed_palette(session)
    finally:
        session.close()
