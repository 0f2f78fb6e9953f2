from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from ..database import Base


class PostIt(Base):
    """A task tied to a user, a category and a day of the week."""

    __tablename__ = "post_it"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("user.id"), index=True, nullable=False)
    category_id = Column(Integer, ForeignKey("category.id"), index=True, nullable=False)
    title = Column(String(50), nullable=False)
    description = Column(String(50))
    pinned = Column(String(1), default="F", nullable=False)
    day_of_week = Column(String(11), nullable=False)
    completed = Column(String(1), default="F", nullable=False)

    category = relationship("Category", lazy="joined")

    @property
    def is_pinned(self) -> bool:
        return self.pinned == "T"

    @property
    def is_completed(self) -> bool:
        return self.completed == "T"
