from __future__ import annotations

from auradeck_backend.engine.allocator import allocate
from auradeck_backend.engine.attributes import derive_attributes
from auradeck_backend.engine.digest import compute_digest, segment_digest
from auradeck_backend.engine.errors import DeckGenerationError
from auradeck_backend.engine.internal import Allocation
from auradeck_backend.engine.models import (
    AllocationScheme,
    Arcana,
    CardRecord,
    CardSlot,
    DeckRecord,
    IntakeRecord,
    LayoutMetadata,
)
from auradeck_backend.engine.prompts import compose_prompt
from auradeck_backend.engine.text import synthesize_text
from auradeck_backend.utils.cards import DEFAULT_TABLES, DeckTables, minor_name
from auradeck_backend.utils.hashing import stable_hash


def card_slug(name: str) -> str:
    return name.lower().replace(" ", "_").replace("'", "")


def asset_paths(asset_root: str, client_id: str, position: int, name: str) -> tuple[str, str]:
    stem = f"{position:02d}_{card_slug(name)}"
    base = f"{asset_root.rstrip('/')}/{client_id}"
    return f"{base}/cards/{stem}.png", f"{base}/print/{stem}.png"


def build_card(
    *,
    position: int,
    name: str,
    slot: CardSlot,
    value: int,
    intake: IntakeRecord,
    client_id: str,
    asset_root: str,
    numeral: str | None = None,
    tables: DeckTables = DEFAULT_TABLES,
) -> CardRecord:
    attributes = derive_attributes(value, tables)
    text = synthesize_text(name, attributes.tone, intake.intention, intake.name)
    image_path, print_path = asset_paths(asset_root, client_id, position, name)
    return CardRecord(
        position=position,
        name=name,
        numeral=numeral,
        slot=slot,
        attributes=attributes,
        text=text,
        prompt=compose_prompt(name, slot, attributes, intake.intention),
        hash_signature=value,
        image_path=image_path,
        print_path=print_path,
    )


def assemble_cards(
    allocation: Allocation,
    intake: IntakeRecord,
    client_id: str,
    asset_root: str,
    tables: DeckTables = DEFAULT_TABLES,
) -> tuple[CardRecord, ...]:
    cards: list[CardRecord] = []
    for index, (name, value) in enumerate(zip(tables.majors, allocation.major_values)):
        cards.append(
            build_card(
                position=index,
                name=name,
                numeral=tables.numerals[index],
                slot=CardSlot(arcana=Arcana.MAJOR, canonical_index=index),
                value=value,
                intake=intake,
                client_id=client_id,
                asset_root=asset_root,
                tables=tables,
            ),
        )

    offset = len(cards)
    for assignment in allocation.minors:
        cards.append(
            build_card(
                position=offset + assignment.slot,
                name=minor_name(assignment.suit, assignment.rank),
                slot=CardSlot(
                    arcana=Arcana.MINOR,
                    canonical_index=assignment.slot,
                    suit=assignment.suit,
                    rank=assignment.rank,
                ),
                value=assignment.hash_signature,
                intake=intake,
                client_id=client_id,
                asset_root=asset_root,
                tables=tables,
            ),
        )
    return tuple(cards)


def record_hash_for(deck: DeckRecord) -> str:
    return stable_hash(deck.model_dump(mode="json", exclude={"record_hash"}))


def generate_deck(
    intake: IntakeRecord,
    *,
    layout: LayoutMetadata,
    scheme: AllocationScheme = AllocationScheme.LINEAR,
    asset_root: str = "assets/decks",
    tables: DeckTables = DEFAULT_TABLES,
) -> DeckRecord:
    digest = compute_digest(intake)
    client_id = digest.hex()

    stage = "segment"
    try:
        segments = segment_digest(digest)
        stage = "allocate"
        allocation = allocate(segments, scheme, tables)
        stage = "assemble"
        cards = assemble_cards(allocation, intake, client_id, asset_root, tables)
    except DeckGenerationError as exc:
        raise exc.with_context(client_id=client_id, stage=stage)

    deck = DeckRecord(
        client_id=client_id,
        intake=intake,
        cards=cards,
        layout=layout,
        allocation_scheme=scheme,
    )
    return deck.model_copy(update={"record_hash": record_hash_for(deck)})
