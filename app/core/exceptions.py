from typing import Any

from fastapi import HTTPException, status


class EntityValidationException(Exception):
    """Raised when a domain entity fails a business rule check.

    Translated to a 400 response by the handler registered in ``app.main``.
    """

    def __init__(self, entity: Any, message: str):
        self.entity = entity
        self.message = message
        super().__init__(message)


class DeckNotFoundException(HTTPException):
    def __init__(self):
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Deck not found."
        )


class PersistenceException(HTTPException):
    def __init__(self, note: str):
        super().__init__(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=note
        )
