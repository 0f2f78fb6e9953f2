"""Helpers shared by the service modules."""

import logging
from typing import NoReturn

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..errors import DatabaseError, InvalidInputError, StickItError

logger = logging.getLogger(__name__)


def handle_service_error(session: Session, exc: Exception) -> NoReturn:
    """Rollback the transaction and re-raise as a service error."""
    session.rollback()
    if isinstance(exc, StickItError):
        raise exc
    logger.exception("service layer error", exc_info=exc)
    if isinstance(exc, SQLAlchemyError):
        raise DatabaseError("Database error") from exc
    raise exc


def is_blank(value) -> bool:
    return not isinstance(value, str) or not value.strip()


def require_text(message: str, *values) -> None:
    """Raise InvalidInputError when any value is not a non-blank string."""
    if any(is_blank(v) for v in values):
        logger.info(message)
        raise InvalidInputError(message)


def require_length(message: str, limit: int, *values) -> None:
    """Raise InvalidInputError when a string value is longer than ``limit``."""
    if any(isinstance(v, str) and len(v) > limit for v in values):
        logger.info("%s (longer than %s characters)", message, limit)
        raise InvalidInputError(message)
