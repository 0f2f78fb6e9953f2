"""Service functions for categories and their colors."""

import logging
from typing import List

from prometheus_client import Counter
from sqlalchemy.orm import Session

from ..errors import DuplicateError, InvalidInputError, NotFoundError
from ..models import Category, PostIt
from . import colors, users
from .common import handle_service_error, require_length, require_text

logger = logging.getLogger(__name__)

CATEGORY_COUNTER = Counter("categories_created_total", "Total categories created")


def create_category(
    db: Session, user_id: int, title: str, description: str, color_code: str
) -> Category:
    """Insert a category for the user and reserve its color."""
    require_text("Unable to add category, information is invalid", title, description)
    require_length("Unable to add category, information is too long", 50, title, description)
    if not colors.is_palette_code(color_code):
        logger.info("unable to add category %s, invalid color %s", title, color_code)
        raise InvalidInputError("Unable to add category, color code is invalid")
    title = title.strip()
    code = colors.normalize_color_code(color_code)

    try:
        users.find_by_id(db, user_id)

        duplicate = (
            db.query(Category)
            .filter(Category.user_id == user_id, Category.title == title)
            .first()
        )
        if duplicate:
            logger.info("unable to add category %s, category already exists", title)
            raise DuplicateError("Unable to add category, category already exists")

        category = Category(
            user_id=user_id, title=title, description=description, color_code=code
        )
        db.add(category)
        db.flush()
        colors.assign_category_to_color(db, category.id, code, commit=False)
        db.commit()

        category = (
            db.query(Category)
            .filter(Category.user_id == user_id, Category.title == title)
            .first()
        )
        if category is None:
            raise NotFoundError("Category was not added to database")
        CATEGORY_COUNTER.inc()
        logger.info("category added id=%s title=%s color=%s", category.id, title, code)
        return category
    except Exception as exc:
        handle_service_error(db, exc)


def find_by_title(db: Session, user_id: int, title: str) -> Category:
    require_text("Title is not valid", title)
    try:
        category = (
            db.query(Category)
            .filter(Category.user_id == user_id, Category.title == title.strip())
            .first()
        )
        if category is None:
            logger.info("category %s does not exist in database", title)
            raise NotFoundError("Category does not exist in database")
        return category
    except Exception as exc:
        handle_service_error(db, exc)


def find_by_id(db: Session, category_id: int, user_id: int | None = None) -> Category:
    """Category by id, restricted to one owner when ``user_id`` is given."""
    try:
        category = db.get(Category, category_id)
        if category is None or (user_id is not None and category.user_id != user_id):
            logger.info("category id=%s does not exist in database", category_id)
            raise NotFoundError("Category does not exist in database")
        return category
    except Exception as exc:
        handle_service_error(db, exc)


def find_all(db: Session) -> List[Category]:
    try:
        return db.query(Category).order_by(Category.id).all()
    except Exception as exc:
        handle_service_error(db, exc)


def find_all_by_user_id(db: Session, user_id: int) -> List[Category]:
    try:
        return (
            db.query(Category)
            .filter(Category.user_id == user_id)
            .order_by(Category.title)
            .all()
        )
    except Exception as exc:
        handle_service_error(db, exc)


def update_category(db: Session, user_id: int, title: str, new_description: str) -> Category:
    """Replace the description of the category with the given title."""
    require_text("Category update failed, new information is invalid", title, new_description)
    require_length("Category update failed, new information is too long", 50, new_description)
    title = title.strip()
    try:
        category = (
            db.query(Category)
            .filter(Category.user_id == user_id, Category.title == title)
            .first()
        )
        if category is None:
            logger.info("category update failed, unable to find %s", title)
            raise NotFoundError("Category update failed, unable to find category")

        category.description = new_description
        db.commit()
        logger.info("category %s description updated", title)
        return (
            db.query(Category)
            .filter(Category.user_id == user_id, Category.title == title)
            .first()
        )
    except Exception as exc:
        handle_service_error(db, exc)


def _delete(db: Session, category: Category) -> bool:
    category_id = category.id
    db.query(PostIt).filter(PostIt.category_id == category_id).delete(
        synchronize_session=False
    )
    colors.release_category_color(db, category_id, commit=False)
    db.delete(category)
    db.commit()

    if db.query(Category).filter(Category.id == category_id).count():
        logger.info("category %s was NOT deleted", category_id)
        return False
    logger.info("category %s deleted", category_id)
    return True


def delete_category(db: Session, user_id: int, title: str) -> bool:
    """Delete a category by title with its post-its, releasing its color."""
    require_text("Category delete failed, information is invalid.", title)
    try:
        category = (
            db.query(Category)
            .filter(Category.user_id == user_id, Category.title == title.strip())
            .first()
        )
        if category is None:
            raise NotFoundError("Category delete failed, unable to find category")
        return _delete(db, category)
    except Exception as exc:
        handle_service_error(db, exc)


def delete_category_by_id(db: Session, user_id: int, category_id: int) -> bool:
    try:
        category = find_by_id(db, category_id, user_id)
        return _delete(db, category)
    except Exception as exc:
        handle_service_error(db, exc)
