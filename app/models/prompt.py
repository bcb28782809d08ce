"""ORM model for stored prompts."""

from sqlalchemy import Column, DateTime, Integer, String, Text, func

from app.models.base import Base


class Prompt(Base):
    """
    A prompt submitted by a user, with the category/source derived at creation.

    user_id holds the owner's username (the token's subject), not users.id.
    """

    __tablename__ = "prompts"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(String(255), nullable=False, index=True)
    input_text = Column(String(1000), nullable=False)
    response_text = Column(Text, nullable=True)
    category = Column(String(64), nullable=True)
    source = Column(String(64), nullable=True)
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        index=True,
    )
