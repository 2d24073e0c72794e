from __future__ import annotations

from auradeck_backend.config import Settings, settings
from auradeck_backend.engine.service import DeckService
from auradeck_backend.repo.base import DeckRepository
from auradeck_backend.repo.in_memory import InMemoryDeckRepository
from auradeck_backend.repo.json_file import JsonFileDeckRepository


def build_repository(config: Settings) -> DeckRepository:
    if config.storage_backend == "json":
        return JsonFileDeckRepository(config.storage_dir)
    if config.storage_backend == "memory":
        return InMemoryDeckRepository()
    raise ValueError(f"unknown storage backend {config.storage_backend!r}")


def build_service(config: Settings) -> DeckService:
    return DeckService(
        build_repository(config),
        config.layout(),
        scheme=config.allocation_scheme,
        asset_root=config.asset_root,
    )


deck_service = build_service(settings)


def get_deck_service() -> DeckService:
    return deck_service
