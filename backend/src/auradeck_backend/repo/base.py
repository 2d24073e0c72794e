from __future__ import annotations

from abc import ABC, abstractmethod

from auradeck_backend.engine.models import DeckRecord


class DeckRepository(ABC):
    @abstractmethod
    def create(self, deck: DeckRecord) -> None:
        raise NotImplementedError

    @abstractmethod
    def get(self, client_id: str) -> DeckRecord:
        raise NotImplementedError

    @abstractmethod
    def exists(self, client_id: str) -> bool:
        raise NotImplementedError

    @abstractmethod
    def all_ids(self) -> list[str]:
        raise NotImplementedError
