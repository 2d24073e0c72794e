from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

from auradeck_backend.utils.hashing import FIELD_SEPARATOR


ENGINE_VERSION = "0.1.0"
DEFAULT_TIME = "00:00"


class Arcana(str, Enum):
    MAJOR = "major"
    MINOR = "minor"


class AllocationScheme(str, Enum):
    LINEAR = "linear"
    PERMUTATION = "permutation"
    MODULAR = "modular"


class IntakeRequest(BaseModel):
    name: str | None = None
    dob: str | None = None
    time: str | None = None
    location: str | None = None
    intention: str | None = None

    model_config = ConfigDict(extra="forbid")


class IntakeRecord(BaseModel):
    name: str = Field(min_length=1)
    dob: str = Field(min_length=1)
    time: str = Field(default=DEFAULT_TIME, min_length=1)
    location: str = Field(min_length=1)
    intention: str = Field(min_length=1)

    model_config = ConfigDict(extra="forbid", frozen=True)

    @field_validator("name", "dob", "time", "location", "intention")
    @classmethod
    def _canonical_text(cls, value: str) -> str:
        if value != value.strip():
            raise ValueError("must not have leading or trailing whitespace")
        if FIELD_SEPARATOR in value:
            raise ValueError(f"must not contain {FIELD_SEPARATOR!r}")
        return value

    def canonical_fields(self) -> tuple[str, ...]:
        return (self.name, self.dob, self.time, self.location, self.intention)


class CardAttributes(BaseModel):
    hue: int = Field(ge=0, lt=360)
    saturation: int = Field(ge=55, le=75)
    lightness: int = Field(ge=40, le=65)
    element: str
    tone: str
    sigils: tuple[str, ...]

    model_config = ConfigDict(extra="forbid", frozen=True)

    @property
    def hsl(self) -> tuple[int, int, int]:
        return (self.hue, self.saturation, self.lightness)


class CardText(BaseModel):
    keywords: tuple[str, ...]
    upright: str
    reversed: str
    client_note: str

    model_config = ConfigDict(extra="forbid", frozen=True)


class CardSlot(BaseModel):
    arcana: Arcana
    canonical_index: int
    suit: str | None = None
    rank: str | None = None

    model_config = ConfigDict(extra="forbid", frozen=True)


class CardRecord(BaseModel):
    position: int
    name: str
    numeral: str | None = None
    slot: CardSlot
    attributes: CardAttributes
    text: CardText
    prompt: str
    hash_signature: int = Field(ge=0, le=255)
    image_path: str
    print_path: str

    model_config = ConfigDict(extra="forbid", frozen=True)


class LayoutMetadata(BaseModel):
    sheet_size: str
    card_size: str
    cards_per_sheet: int
    bleed_in: float
    margin_in: float

    model_config = ConfigDict(extra="forbid", frozen=True)


class DeckRecord(BaseModel):
    client_id: str = Field(pattern=r"^[0-9a-f]{64}$")
    intake: IntakeRecord
    cards: tuple[CardRecord, ...]
    layout: LayoutMetadata
    engine_version: str = ENGINE_VERSION
    allocation_scheme: AllocationScheme
    record_hash: str = ""

    model_config = ConfigDict(extra="forbid", frozen=True)

    @property
    def majors(self) -> tuple[CardRecord, ...]:
        return tuple(card for card in self.cards if card.slot.arcana is Arcana.MAJOR)

    @property
    def minors(self) -> tuple[CardRecord, ...]:
        return tuple(card for card in self.cards if card.slot.arcana is Arcana.MINOR)


class RenderJob(BaseModel):
    position: int
    name: str
    prompt: str
    image_path: str

    model_config = ConfigDict(extra="forbid")


class RenderManifest(BaseModel):
    client_id: str
    jobs: list[RenderJob]

    model_config = ConfigDict(extra="forbid")


class VerificationResult(BaseModel):
    client_id: str
    invariant_checks: dict[str, bool]
    mismatched_positions: list[int] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid")

    @property
    def ok(self) -> bool:
        return all(self.invariant_checks.values())
