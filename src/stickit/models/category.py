from sqlalchemy import Column, ForeignKey, Integer, String

from ..database import Base


class Category(Base):
    """A user-defined grouping of post-its with an associated color."""

    __tablename__ = "category"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("user.id"), index=True, nullable=False)
    title = Column(String(50), nullable=False)
    description = Column(String(50))
    color_code = Column(String(8), nullable=False)
