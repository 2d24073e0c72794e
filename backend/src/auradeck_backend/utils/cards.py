from __future__ import annotations

import hashlib
import random
from dataclasses import dataclass


SUITS: tuple[str, ...] = ("Wands", "Cups", "Swords", "Pentacles")
RANKS: tuple[str, ...] = (
    "Ace",
    "Two",
    "Three",
    "Four",
    "Five",
    "Six",
    "Seven",
    "Eight",
    "Nine",
    "Ten",
    "Page",
    "Knight",
    "Queen",
    "King",
)
MAJORS: tuple[str, ...] = (
    "The Fool",
    "The Magician",
    "The High Priestess",
    "The Empress",
    "The Emperor",
    "The Hierophant",
    "The Lovers",
    "The Chariot",
    "Strength",
    "The Hermit",
    "Wheel of Fortune",
    "Justice",
    "The Hanged Man",
    "Death",
    "Temperance",
    "The Devil",
    "The Tower",
    "The Star",
    "The Moon",
    "The Sun",
    "Judgement",
    "The World",
)
NUMERALS: tuple[str, ...] = (
    "0", "I", "II", "III", "IV", "V", "VI", "VII", "VIII", "IX", "X",
    "XI", "XII", "XIII", "XIV", "XV", "XVI", "XVII", "XVIII", "XIX", "XX", "XXI",
)
ELEMENTS: tuple[str, ...] = ("Fire", "Water", "Air", "Earth")
TONES: tuple[str, ...] = ("nurturing", "analytical", "chaotic", "visionary")
TONE_UPPER_BOUNDS: tuple[int, ...] = (63, 127, 191, 255)
SIGIL_VOCABULARY: tuple[str, ...] = (
    "crescent",
    "spiral",
    "eye",
    "key",
    "serpent",
    "flame",
    "wave",
    "feather",
    "star",
    "hourglass",
    "triquetra",
    "ankh",
    "lotus",
    "compass",
    "labyrinth",
    "sun wheel",
)

MAJOR_COUNT = len(MAJORS)
MINOR_COUNT = len(SUITS) * len(RANKS)
DECK_SIZE = MAJOR_COUNT + MINOR_COUNT


@dataclass(frozen=True)
class DeckTables:
    suits: tuple[str, ...] = SUITS
    ranks: tuple[str, ...] = RANKS
    majors: tuple[str, ...] = MAJORS
    numerals: tuple[str, ...] = NUMERALS
    elements: tuple[str, ...] = ELEMENTS
    tones: tuple[str, ...] = TONES
    tone_upper_bounds: tuple[int, ...] = TONE_UPPER_BOUNDS
    sigils: tuple[str, ...] = SIGIL_VOCABULARY

    @property
    def pair_count(self) -> int:
        return len(self.suits) * len(self.ranks)

    def all_pairs(self) -> list[tuple[str, str]]:
        return [(suit, rank) for suit in self.suits for rank in self.ranks]


DEFAULT_TABLES = DeckTables()


def minor_name(suit: str, rank: str) -> str:
    return f"{rank} of {suit}"


def build_shuffled_pairs(seed: int, tables: DeckTables = DEFAULT_TABLES) -> list[tuple[str, str]]:
    pairs = tables.all_pairs()
    rng = random.Random(seed)
    rng.shuffle(pairs)
    return pairs


def derive_seed(base: bytes | int | str, label: str) -> int:
    if isinstance(base, bytes):
        base = base.hex()
    raw = f"{base}:{label}".encode("utf-8")
    digest = hashlib.sha256(raw).digest()
    return int.from_bytes(digest[:8], byteorder="big", signed=False)
