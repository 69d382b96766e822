from sqlalchemy import Column, Integer, String, Boolean, DateTime, func
from sqlalchemy.orm import relationship
from app.db.base import Base


class Deck(Base):
    __tablename__ = "decks"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), unique=True, nullable=False, index=True)
    description = Column(String(500), nullable=True)
    is_public = Column(Boolean, default=False, nullable=False)
    creator_id = Column(Integer, nullable=True, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    last_edited = Column(DateTime(timezone=True), nullable=True)

    cards = relationship("Card", back_populates="deck", cascade="all, delete-orphan")
    user_decks = relationship("UserDeck", back_populates="deck", cascade="all, delete-orphan")

    def __repr__(self):
        return f"<Deck(id={self.id}, name={self.name})>"
