from __future__ import annotations

import logging

from auradeck_backend.engine.assembler import generate_deck, record_hash_for
from auradeck_backend.engine.digest import client_id_for, normalize_intake
from auradeck_backend.engine.errors import DeckGenerationError
from auradeck_backend.engine.models import (
    AllocationScheme,
    Arcana,
    DeckRecord,
    IntakeRecord,
    IntakeRequest,
    LayoutMetadata,
    RenderJob,
    RenderManifest,
    VerificationResult,
)
from auradeck_backend.repo.base import DeckRepository
from auradeck_backend.utils.cards import DEFAULT_TABLES, DeckTables


logger = logging.getLogger(__name__)


class DeckService:
    def __init__(
        self,
        repository: DeckRepository,
        layout: LayoutMetadata,
        *,
        scheme: AllocationScheme = AllocationScheme.LINEAR,
        asset_root: str = "assets/decks",
        tables: DeckTables = DEFAULT_TABLES,
    ) -> None:
        self._repo = repository
        self._layout = layout
        self._scheme = scheme
        self._asset_root = asset_root
        self._tables = tables

    def generate(
        self,
        intake: IntakeRecord | IntakeRequest | dict,
        scheme: AllocationScheme | None = None,
    ) -> DeckRecord:
        intake = normalize_intake(intake)
        try:
            return generate_deck(
                intake,
                layout=self._layout,
                scheme=scheme or self._scheme,
                asset_root=self._asset_root,
                tables=self._tables,
            )
        except DeckGenerationError as exc:
            logger.error(
                "Deck generation failed for %s at stage %s: %s",
                exc.client_id,
                exc.stage,
                exc.message,
            )
            raise

    async def create_deck(self, request: IntakeRequest | dict) -> DeckRecord:
        intake = normalize_intake(request)
        client_id = client_id_for(intake)
        if self._repo.exists(client_id):
            logger.info("Reusing stored deck %s", client_id)
            return self._repo.get(client_id)

        deck = self.generate(intake)
        self._repo.create(deck)
        logger.info(
            "Created deck %s (%d cards, scheme=%s)",
            deck.client_id,
            len(deck.cards),
            deck.allocation_scheme.value,
        )
        return deck

    async def get_deck(self, client_id: str) -> DeckRecord:
        return self._repo.get(client_id)

    async def render_manifest(self, client_id: str) -> RenderManifest:
        deck = self._repo.get(client_id)
        return build_render_manifest(deck)

    async def verify_deck(self, client_id: str) -> VerificationResult:
        deck = self._repo.get(client_id)
        result = self.verify_record(deck)
        logger.info("Verified deck %s: %s", client_id, "ok" if result.ok else result.invariant_checks)
        return result

    def verify_record(self, deck: DeckRecord) -> VerificationResult:
        rederived = generate_deck(
            deck.intake,
            layout=deck.layout,
            scheme=deck.allocation_scheme,
            asset_root=self._asset_root_of(deck),
            tables=self._tables,
        )
        mismatched = [
            stored.position
            for stored, fresh in zip(deck.cards, rederived.cards)
            if stored != fresh
        ]
        same_length = len(deck.cards) == len(rederived.cards)

        checks = {
            "bijection": check_bijection(deck, self._tables),
            "major_order": check_major_order(deck, self._tables),
            "record_hash_match": deck.record_hash == record_hash_for(deck),
            "rederivation_match": (
                deck.client_id == rederived.client_id and same_length and not mismatched
            ),
        }
        return VerificationResult(
            client_id=deck.client_id,
            invariant_checks=checks,
            mismatched_positions=mismatched,
        )

    def _asset_root_of(self, deck: DeckRecord) -> str:
        # Stored paths look like <asset_root>/<client_id>/cards/<file>.
        if deck.cards:
            marker = f"/{deck.client_id}/cards/"
            path = deck.cards[0].image_path
            if marker in path:
                return path.split(marker, 1)[0]
        return self._asset_root


def build_render_manifest(deck: DeckRecord) -> RenderManifest:
    return RenderManifest(
        client_id=deck.client_id,
        jobs=[
            RenderJob(
                position=card.position,
                name=card.name,
                prompt=card.prompt,
                image_path=card.image_path,
            )
            for card in deck.cards
        ],
    )


def check_bijection(deck: DeckRecord, tables: DeckTables = DEFAULT_TABLES) -> bool:
    pairs = [(card.slot.suit, card.slot.rank) for card in deck.cards if card.slot.arcana is Arcana.MINOR]
    return len(pairs) == tables.pair_count and set(pairs) == set(tables.all_pairs())


def check_major_order(deck: DeckRecord, tables: DeckTables = DEFAULT_TABLES) -> bool:
    majors = [card.name for card in deck.cards if card.slot.arcana is Arcana.MAJOR]
    return tuple(majors) == tables.majors
