import logging
from fastapi import Depends
from asyncpg import Connection

from app.db.session import get_db_connection
from app.repositories.deck_repo import DeckRepository, DeckRepositoryProtocol
from app.repositories.user_deck_repo import UserDeckRepository
from app.services.deck_service import DeckService, log_deck_event
from app.services.user_deck_service import UserDeckService


def get_deck_logger() -> logging.Logger:
    return logging.getLogger("app.decks")


def get_deck_repo(conn: Connection = Depends(get_db_connection)) -> DeckRepositoryProtocol:
    return DeckRepository(conn)


def get_user_deck_repo(conn: Connection = Depends(get_db_connection)) -> UserDeckRepository:
    return UserDeckRepository(conn)


def get_deck_service(
        deck_repo: DeckRepositoryProtocol = Depends(get_deck_repo),
        logger: logging.Logger = Depends(get_deck_logger),
) -> DeckService:
    return DeckService(
        deck_repo,
        on_created=[log_deck_event(logger, "created")],
        on_updated=[log_deck_event(logger, "updated")],
    )


def get_user_deck_service(
        user_deck_repo: UserDeckRepository = Depends(get_user_deck_repo),
) -> UserDeckService:
    return UserDeckService(user_deck_repo)
