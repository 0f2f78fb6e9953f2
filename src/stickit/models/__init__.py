"""SQLAlchemy models for the bulletin board tables."""

from .user import User
from .category import Category
from .color import Color
from .post_it import PostIt

__all__ = ["User", "Category", "Color", "PostIt"]
