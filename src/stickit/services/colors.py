"""Fixed color palette and category assignment."""

import logging
from typing import List

from sqlalchemy.orm import Session

from ..errors import InvalidInputError, NotFoundError
from ..models import Color
from .common import handle_service_error

logger = logging.getLogger(__name__)

PALETTE = (
    ("Red", "FE0000"),
    ("Orange", "EF8906"),
    ("Yellow", "FFD100"),
    ("Green", "A9E59E"),
    ("Blue", "94CAEE"),
    ("Purple", "D39AFF"),
    ("Pink", "ECC8FC"),
    ("White", "FFFFFF"),
)

PALETTE_CODES = frozenset(code for _, code in PALETTE)


def normalize_color_code(code) -> str:
    """Return ``code`` without a leading ``#`` and in upper case."""
    if not isinstance(code, str):
        return ""
    return code.strip().lstrip("#").upper()


def is_palette_code(code) -> bool:
    return normalize_color_code(code) in PALETTE_CODES


def seed_palette(db: Session) -> int:
    """Insert palette colors missing from the table. Returns the number added."""
    try:
        existing = {row[0] for row in db.query(Color.color_code).all()}
        added = 0
        for name, code in PALETTE:
            if code in existing:
                continue
            db.add(Color(color_name=name, color_code=code))
            added += 1
            logger.info("%s added to color table", name)
        db.commit()
        return added
    except Exception as exc:
        handle_service_error(db, exc)


def get_all_colors(db: Session) -> List[Color]:
    try:
        return db.query(Color).order_by(Color.id).all()
    except Exception as exc:
        handle_service_error(db, exc)


def get_available_colors(db: Session) -> List[Color]:
    """Colors not yet assigned to a category."""
    try:
        return (
            db.query(Color)
            .filter(Color.category_id.is_(None))
            .order_by(Color.id)
            .all()
        )
    except Exception as exc:
        handle_service_error(db, exc)


def get_color_by_category(db: Session, category_id: int) -> Color:
    try:
        color = db.query(Color).filter(Color.category_id == category_id).first()
        if color is None:
            raise NotFoundError("Category not assigned to any color.")
        return color
    except Exception as exc:
        handle_service_error(db, exc)


def assign_category_to_color(
    db: Session, category_id: int, color_code: str, commit: bool = True
) -> Color:
    """Link the color to a category, marking it unavailable."""
    code = normalize_color_code(color_code)
    try:
        color = db.query(Color).filter(Color.color_code == code).first()
        if color is None:
            raise InvalidInputError(f"Color {color_code} is not in the palette")
        if color.category_id is not None and color.category_id != category_id:
            raise InvalidInputError(f"Color {color.color_name} is already in use")
        color.category_id = category_id
        if not commit:
            db.flush()
            return color
        db.commit()
        logger.info("color %s assigned to category %s", code, category_id)
        return (
            db.query(Color)
            .filter(Color.color_code == code, Color.category_id == category_id)
            .first()
        )
    except Exception as exc:
        handle_service_error(db, exc)


def release_category_color(db: Session, category_id: int, commit: bool = True) -> None:
    """Make the color held by a category available again.

    With ``commit=False`` the change joins the caller's transaction.
    """
    try:
        db.query(Color).filter(Color.category_id == category_id).update(
            {Color.category_id: None}, synchronize_session=False
        )
        if commit:
            db.commit()
            logger.info("category %s removed from color table", category_id)
    except Exception as exc:
        handle_service_error(db, exc)
