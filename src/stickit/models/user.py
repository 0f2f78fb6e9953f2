from sqlalchemy import Column, Integer, String

from ..database import Base


class User(Base):
    """SQLAlchemy model for application users."""

    __tablename__ = "user"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(30), unique=True, index=True, nullable=False)
    email = Column(String(50), unique=True, index=True, nullable=False)
    password_hash = Column(String(64), nullable=False)
    icon = Column(String(400))
