"""Service functions for post-its."""

import logging
from datetime import date
from typing import List

from prometheus_client import Counter
from sqlalchemy.orm import Session

from ..errors import DuplicateError, InvalidInputError, NotFoundError
from ..models import PostIt
from . import categories, users
from .common import handle_service_error, require_length, require_text

logger = logging.getLogger(__name__)

WEEKDAYS = ("sunday", "monday", "tuesday", "wednesday", "thursday", "friday", "saturday")

POST_IT_COUNTER = Counter("post_its_created_total", "Total post-its created")
COMPLETED_COUNTER = Counter("post_its_completed_total", "Total post-its marked as completed")


def current_weekday(today: date | None = None) -> str:
    """Lower-case name of the current day of the week."""
    today = today or date.today()
    # date.weekday() counts from Monday, WEEKDAYS from Sunday
    return WEEKDAYS[(today.weekday() + 1) % 7]


def normalize_weekday(day) -> str | None:
    if not isinstance(day, str):
        return None
    day = day.strip().lower()
    return day if day in WEEKDAYS else None


def _flag(value) -> str:
    if isinstance(value, str):
        return "T" if value.strip().upper() in ("T", "ON", "TRUE", "1") else "F"
    return "T" if value else "F"


def _owned(db: Session, post_id: int, user_id: int | None) -> PostIt | None:
    query = db.query(PostIt).filter(PostIt.id == post_id)
    if user_id is not None:
        query = query.filter(PostIt.user_id == user_id)
    return query.first()


def create_post_it(
    db: Session,
    user_id: int,
    category_id: int,
    title: str,
    description: str,
    pinned,
    weekday: str,
) -> PostIt:
    """Insert a post-it for the user in one of their categories."""
    require_text("Unable to add post-it, information is invalid", title, description)
    require_length("Unable to add post-it, information is too long", 50, title, description)
    day = normalize_weekday(weekday)
    if day is None:
        logger.info("unable to add post-it %s, invalid weekday %s", title, weekday)
        raise InvalidInputError("Unable to add post-it, information is invalid")
    title = title.strip()

    try:
        duplicate = (
            db.query(PostIt)
            .filter(PostIt.user_id == user_id, PostIt.title == title)
            .first()
        )
        if duplicate:
            logger.info("unable to add post-it %s, post-it already exists", title)
            raise DuplicateError("Unable to add post-it, post-it already exists")

        users.find_by_id(db, user_id)
        categories.find_by_id(db, category_id, user_id)

        db.add(
            PostIt(
                user_id=user_id,
                category_id=category_id,
                title=title,
                description=description,
                pinned=_flag(pinned),
                day_of_week=day,
                completed="F",
            )
        )
        db.commit()

        post_it = (
            db.query(PostIt)
            .filter(PostIt.user_id == user_id, PostIt.title == title)
            .first()
        )
        if post_it is None:
            raise NotFoundError("Post-it was not added to database")
        POST_IT_COUNTER.inc()
        logger.info("post-it added id=%s title=%s day=%s", post_it.id, title, day)
        return post_it
    except Exception as exc:
        handle_service_error(db, exc)


def find_by_title(db: Session, user_id: int, title: str) -> PostIt:
    require_text("Title is not valid", title)
    try:
        post_it = (
            db.query(PostIt)
            .filter(PostIt.user_id == user_id, PostIt.title == title.strip())
            .first()
        )
        if post_it is None:
            raise NotFoundError("Post-it does not exist in database")
        return post_it
    except Exception as exc:
        handle_service_error(db, exc)


def find_by_id(db: Session, post_id: int, user_id: int | None = None) -> PostIt:
    try:
        post_it = _owned(db, post_id, user_id)
        if post_it is None:
            logger.info("post-it id=%s does not exist in database", post_id)
            raise NotFoundError("Post-it does not exist in database")
        return post_it
    except Exception as exc:
        handle_service_error(db, exc)


def find_by_weekday_and_user_id(db: Session, weekday: str, user_id: int) -> List[PostIt]:
    """Incomplete post-its of a user for one day, pinned ones first."""
    day = normalize_weekday(weekday)
    if day is None:
        raise InvalidInputError("Weekday or UserId is not valid")
    try:
        return (
            db.query(PostIt)
            .filter(
                PostIt.day_of_week == day,
                PostIt.user_id == user_id,
                PostIt.completed == "F",
            )
            .order_by(PostIt.pinned.desc(), PostIt.id)
            .all()
        )
    except Exception as exc:
        handle_service_error(db, exc)


def find_all(db: Session) -> List[PostIt]:
    try:
        return db.query(PostIt).order_by(PostIt.id).all()
    except Exception as exc:
        handle_service_error(db, exc)


def find_all_by_user_id(db: Session, user_id: int, completed: bool = False) -> List[PostIt]:
    try:
        return (
            db.query(PostIt)
            .filter(PostIt.user_id == user_id, PostIt.completed == _flag(completed))
            .order_by(PostIt.pinned.desc(), PostIt.id)
            .all()
        )
    except Exception as exc:
        handle_service_error(db, exc)


def find_all_completed(db: Session, user_id: int) -> List[PostIt]:
    return find_all_by_user_id(db, user_id, completed=True)


def update_post_it(
    db: Session,
    user_id: int,
    post_id: int,
    description: str,
    weekday: str,
    category_title: str,
    pinned,
) -> PostIt:
    """Change description, day, category and pinned flag of a post-it."""
    require_text("Post-it update failed, new information is invalid", description, category_title)
    require_length("Post-it update failed, new information is too long", 50, description)
    day = normalize_weekday(weekday)
    if day is None:
        raise InvalidInputError("Post-it update failed, new information is invalid")

    try:
        post_it = _owned(db, post_id, user_id)
        if post_it is None:
            logger.info("post-it update failed, unable to find id=%s", post_id)
            raise NotFoundError("Post-it update failed, unable to find post-it")

        category = categories.find_by_title(db, user_id, category_title)

        post_it.description = description
        post_it.day_of_week = day
        post_it.category_id = category.id
        post_it.pinned = _flag(pinned)
        db.commit()
        logger.info("post-it id=%s updated", post_id)
        return _owned(db, post_id, user_id)
    except Exception as exc:
        handle_service_error(db, exc)


def set_completed(db: Session, user_id: int, post_id: int) -> PostIt:
    try:
        post_it = _owned(db, post_id, user_id)
        if post_it is None:
            raise NotFoundError("Post-it update failed, unable to find post-it")
        if post_it.is_completed:
            logger.info("post-it id=%s is already completed", post_id)
            return post_it
        post_it.completed = "T"
        db.commit()
        COMPLETED_COUNTER.inc()
        logger.info("post-it id=%s marked as completed", post_id)
        return _owned(db, post_id, user_id)
    except Exception as exc:
        handle_service_error(db, exc)


def _delete(db: Session, post_it: PostIt) -> bool:
    post_id = post_it.id
    db.delete(post_it)
    db.commit()
    if db.query(PostIt).filter(PostIt.id == post_id).count():
        logger.info("post-it id=%s was NOT deleted", post_id)
        return False
    logger.info("post-it id=%s deleted", post_id)
    return True


def delete_post_it(db: Session, user_id: int, title: str) -> bool:
    require_text("Post-it delete failed, information is invalid.", title)
    try:
        post_it = (
            db.query(PostIt)
            .filter(PostIt.user_id == user_id, PostIt.title == title.strip())
            .first()
        )
        if post_it is None:
            raise NotFoundError("Post-it delete failed, unable to find post-it")
        return _delete(db, post_it)
    except Exception as exc:
        handle_service_error(db, exc)


def delete_post_it_by_id(db: Session, user_id: int, post_id: int) -> bool:
    try:
        post_it = _owned(db, post_id, user_id)
        if post_it is None:
            raise NotFoundError("Post-it delete failed, unable to find post-it")
        return _delete(db, post_it)
    except Exception as exc:
        handle_service_error(db, exc)
