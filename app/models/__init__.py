"""SQLAlchemy ORM models."""

from app.models.base import Base
from app.models.prompt import Prompt
from app.models.user import User

__all__ = ["Base", "Prompt", "User"]
