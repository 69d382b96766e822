from app.models.deck import UserDeck
from app.repositories.user_deck_repo import UserDeckRepository


class UserDeckService:
    def __init__(self, user_deck_repo: UserDeckRepository):
        self.user_deck_repo = user_deck_repo

    async def add_user_deck(self, user_deck: UserDeck) -> bool:
        return await self.user_deck_repo.add_user_deck(user_deck)
