from sqlalchemy import Column, Integer, ForeignKey, DateTime, func
from sqlalchemy.orm import relationship
from app.db.base import Base


class UserDeck(Base):
    """Link between a user and a deck; one row is written per created deck."""
    __tablename__ = "user_decks"

    user_id = Column(Integer, primary_key=True)
    deck_id = Column(Integer, ForeignKey("decks.id", ondelete="CASCADE"), primary_key=True)
    added_at = Column(DateTime(timezone=True), server_default=func.now())

    deck = relationship("Deck", back_populates="user_decks")
