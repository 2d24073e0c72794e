from __future__ import annotations

from auradeck_backend.engine.errors import DeckConflict, DeckNotFound
from auradeck_backend.engine.models import DeckRecord
from auradeck_backend.repo.base import DeckRepository


class InMemoryDeckRepository(DeckRepository):
    def __init__(self) -> None:
        self._decks: dict[str, DeckRecord] = {}

    def create(self, deck: DeckRecord) -> None:
        existing = self._decks.get(deck.client_id)
        if existing is not None and existing != deck:
            raise DeckConflict(deck.client_id)
        self._decks[deck.client_id] = deck

    def get(self, client_id: str) -> DeckRecord:
        if client_id not in self._decks:
            raise DeckNotFound(client_id)
        return self._decks[client_id]

    def exists(self, client_id: str) -> bool:
        return client_id in self._decks

    def all_ids(self) -> list[str]:
        return sorted(self._decks)
