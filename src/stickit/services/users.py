"""Service functions for user accounts."""

import hashlib
import logging
from typing import List

from prometheus_client import Counter
from sqlalchemy.orm import Session

from ..config import settings
from ..errors import AuthenticationError, DuplicateError, NotFoundError
from ..models import Category, PostIt, User
from . import colors
from .common import handle_service_error, is_blank, require_length, require_text

logger = logging.getLogger(__name__)

USER_COUNTER = Counter("users_registered_total", "Total users registered")


def hash_password(password: str) -> str:
    return hashlib.sha256(password.encode()).hexdigest()


def create_user(
    db: Session, username: str, email: str, password: str, icon: str | None = None
) -> User:
    """Insert a new user after checking username and email are unused."""
    require_text("Unable to add user, information is invalid", username, email, password)
    require_length("Unable to add user, information is too long", 30, username)
    require_length("Unable to add user, information is too long", 50, email)
    require_length("Unable to add user, information is too long", 400, icon)
    username = username.strip()
    email = email.strip()
    if is_blank(icon):
        icon = settings.default_icon

    try:
        duplicate = (
            db.query(User)
            .filter((User.username == username) | (User.email == email))
            .first()
        )
        if duplicate:
            logger.info("unable to add user %s, user already exists", username)
            raise DuplicateError("Unable to add user, user already exists")

        db.add(
            User(
                username=username,
                email=email,
                password_hash=hash_password(password),
                icon=icon,
            )
        )
        db.commit()
        user = db.query(User).filter(User.username == username).first()
        if user is None:
            raise NotFoundError("User was not added to database")
        USER_COUNTER.inc()
        logger.info("user added id=%s username=%s", user.id, username)
        return user
    except Exception as exc:
        handle_service_error(db, exc)


def login(db: Session, email: str, password: str) -> User:
    """Return the user matching the credentials."""
    require_text("Cannot log in: Missing email or password.", email, password)
    try:
        user = db.query(User).filter(User.email == email.strip()).first()
        if user is None or user.password_hash != hash_password(password):
            logger.info("invalid credentials for %s", email)
            raise AuthenticationError("Cannot log in: Invalid credentials.")
        logger.info("user logged in username=%s", user.username)
        return user
    except Exception as exc:
        handle_service_error(db, exc)


def find_by_username(db: Session, username: str) -> User:
    require_text("Username is not valid", username)
    try:
        user = db.query(User).filter(User.username == username).first()
        if user is None:
            logger.info("user %s does not exist in database", username)
            raise NotFoundError("User does not exist in database")
        return user
    except Exception as exc:
        handle_service_error(db, exc)


def find_by_email(db: Session, email: str) -> User:
    require_text("Email is not valid", email)
    try:
        user = db.query(User).filter(User.email == email).first()
        if user is None:
            logger.info("user with email %s does not exist in database", email)
            raise NotFoundError("User does not exist in database")
        return user
    except Exception as exc:
        handle_service_error(db, exc)


def find_by_id(db: Session, user_id: int) -> User:
    try:
        user = db.get(User, user_id)
        if user is None:
            logger.info("user id=%s does not exist in database", user_id)
            raise NotFoundError("User does not exist in database")
        return user
    except Exception as exc:
        handle_service_error(db, exc)


def find_all(db: Session) -> List[User]:
    try:
        users = db.query(User).order_by(User.id).all()
        if not users:
            raise NotFoundError("Users not found in database")
        return users
    except Exception as exc:
        handle_service_error(db, exc)


def update_user(
    db: Session,
    email: str,
    new_username: str,
    new_password: str,
    new_icon: str | None = None,
) -> User:
    """Update username, password and icon of the user identified by email."""
    require_text("User update failed, new information is invalid", new_username, new_password)
    require_length("User update failed, new information is too long", 30, new_username)
    require_length("User update failed, new information is too long", 400, new_icon)
    new_username = new_username.strip()
    if is_blank(new_icon):
        new_icon = settings.default_icon

    try:
        user = db.query(User).filter(User.email == email).first()
        if user is None:
            logger.info("user update failed, unable to find %s", email)
            raise NotFoundError("User update failed, unable to find user")

        taken = (
            db.query(User)
            .filter(User.username == new_username, User.id != user.id)
            .first()
        )
        if taken:
            raise DuplicateError("User update failed, username already exists")

        user.username = new_username
        user.password_hash = hash_password(new_password)
        user.icon = new_icon
        db.commit()
        logger.info("user %s updated", email)
        return db.query(User).filter(User.email == email).first()
    except Exception as exc:
        handle_service_error(db, exc)


def delete_user(db: Session, email: str) -> bool:
    """Delete a user with their post-its and categories.

    Colors held by the user's categories become available again.
    """
    require_text("User delete failed, information is invalid.", email)
    try:
        user = db.query(User).filter(User.email == email).first()
        if user is None:
            raise NotFoundError("User delete failed, unable to find user")

        category_ids = [
            row[0] for row in db.query(Category.id).filter(Category.user_id == user.id).all()
        ]
        db.query(PostIt).filter(PostIt.user_id == user.id).delete(synchronize_session=False)
        for category_id in category_ids:
            colors.release_category_color(db, category_id, commit=False)
        if category_ids:
            db.query(Category).filter(Category.id.in_(category_ids)).delete(
                synchronize_session=False
            )
        db.delete(user)
        db.commit()

        remaining = db.query(User).filter(User.email == email).count()
        if remaining:
            logger.info("user %s NOT deleted", email)
            return False
        logger.info("user %s deleted", email)
        return True
    except Exception as exc:
        handle_service_error(db, exc)
