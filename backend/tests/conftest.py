from __future__ import annotations

import pytest

from auradeck_backend.engine.digest import normalize_intake
from auradeck_backend.engine.models import IntakeRecord, LayoutMetadata
from auradeck_backend.engine.service import DeckService
from auradeck_backend.repo.in_memory import InMemoryDeckRepository


ARIA = {
    "name": "Aria Lumen",
    "dob": "2004-09-12",
    "time": "18:45",
    "location": "Portland, USA",
    "intention": "align my art with my purpose",
}


@pytest.fixture
def layout() -> LayoutMetadata:
    return LayoutMetadata(
        sheet_size="13x19in",
        card_size="2.75x4.75in",
        cards_per_sheet=12,
        bleed_in=0.125,
        margin_in=0.25,
    )


@pytest.fixture
def aria_request() -> dict[str, str]:
    return dict(ARIA)


@pytest.fixture
def aria_intake() -> IntakeRecord:
    return normalize_intake(ARIA)


@pytest.fixture
def service(layout: LayoutMetadata) -> DeckService:
    return DeckService(InMemoryDeckRepository(), layout, asset_root="assets/decks")
