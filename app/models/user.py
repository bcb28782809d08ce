"""ORM model for registered accounts."""

from sqlalchemy import Column, Integer, String

from app.models.base import Base


class User(Base):
    """
    Registered account. Username is unique and never changes after registration.

    role: 'User' or 'Admin'
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
    role = Column(String(32), nullable=False, default="User")
