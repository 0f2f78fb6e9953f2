from typing import Generator

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from .config import settings
from .database import SessionLocal
from .errors import AuthenticationError, NotFoundError
from .models import User
from .services import users
from .sessions import UserSession, sessions


def get_db() -> Generator[Session, None, None]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_session_token(request: Request) -> str | None:
    return request.cookies.get(settings.session_cookie_name)


def get_optional_session(request: Request) -> UserSession | None:
    return sessions.check(get_session_token(request))


def get_current_session(
    session: UserSession | None = Depends(get_optional_session),
) -> UserSession:
    if session is None:
        raise AuthenticationError("Unauthorized access")
    return session


def get_current_user(
    session: UserSession = Depends(get_current_session),
    db: Session = Depends(get_db),
) -> User:
    try:
        return users.find_by_username(db, session.username)
    except NotFoundError:
        sessions.destroy(session.token)
        raise AuthenticationError("Unauthorized access")
