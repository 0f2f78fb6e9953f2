from sqlalchemy import Column, ForeignKey, Integer, String

from ..database import Base


class Color(Base):
    """Palette entry; ``category_id`` is NULL while the color is available."""

    __tablename__ = "color"

    id = Column(Integer, primary_key=True, index=True)
    color_name = Column(String(20), nullable=False)
    color_code = Column(String(8), unique=True, nullable=False)
    category_id = Column(Integer, ForeignKey("category.id"), nullable=True)
