from __future__ import annotations

import re
from typing import Mapping

from auradeck_backend.engine.errors import UnknownCardName
from auradeck_backend.engine.meanings import CANONICAL_MEANINGS, CardMeaning
from auradeck_backend.engine.models import CardText


MAX_INTENTION_TOKENS = 2
FALLBACK_TOKEN = "intention"

STOP_WORDS = frozenset(
    {
        "a", "an", "and", "are", "as", "at", "be", "but", "by", "for", "from",
        "have", "how", "i", "in", "into", "is", "it", "its", "me", "mine", "my",
        "myself", "of", "on", "or", "our", "so", "that", "the", "their", "this",
        "to", "up", "want", "was", "we", "will", "with", "would", "you", "your",
    },
)

PRONOUN_SWAPS = {
    "i": "you",
    "me": "you",
    "my": "your",
    "mine": "yours",
    "myself": "yourself",
    "am": "are",
    "i'm": "you're",
    "i've": "you've",
    "i'll": "you'll",
}

TONE_CLAUSES: dict[str, tuple[str, str]] = {
    "nurturing": (
        "held with a nurturing warmth that lets it grow slowly",
        "asking for the gentleness you give others to turn inward",
    ),
    "analytical": (
        "seen through a clear analytical lens that maps each step",
        "where overthinking the map keeps you from walking it",
    ),
    "chaotic": (
        "charged with a chaotic spark that breaks old patterns",
        "where restless energy scatters before it can land",
    ),
    "visionary": (
        "lit by a visionary glow that sees the far horizon",
        "where the far horizon distracts from the ground underfoot",
    ),
}

WORD_RE = re.compile(r"[a-z0-9']+")
SWAP_RE = re.compile(r"\b[A-Za-z']+\b")


def intention_tokens(intention: str, exclude: tuple[str, ...] = ()) -> tuple[str, ...]:
    tokens: list[str] = []
    for word in WORD_RE.findall(intention.lower()):
        word = word.strip("'")
        if len(word) < 3 or word in STOP_WORDS or word in tokens or word in exclude:
            continue
        tokens.append(word)
        if len(tokens) == MAX_INTENTION_TOKENS:
            break
    return tuple(tokens) or (FALLBACK_TOKEN,)


def paraphrase_intention(intention: str) -> str:
    def swap(match: re.Match[str]) -> str:
        word = match.group(0)
        return PRONOUN_SWAPS.get(word.lower(), word)

    text = SWAP_RE.sub(swap, intention.strip()).rstrip(".!?")
    if not text or text[1:2].isupper():
        return text
    return text[0].lower() + text[1:]


def lookup_meaning(
    card_name: str,
    meanings: Mapping[str, CardMeaning] = CANONICAL_MEANINGS,
) -> CardMeaning:
    try:
        return meanings[card_name]
    except KeyError as exc:
        raise UnknownCardName(card_name) from exc


def synthesize_text(
    card_name: str,
    tone: str,
    intention: str,
    client_name: str,
    meanings: Mapping[str, CardMeaning] = CANONICAL_MEANINGS,
) -> CardText:
    meaning = lookup_meaning(card_name, meanings)
    upright_clause, reversed_clause = TONE_CLAUSES[tone]
    tokens = intention_tokens(intention, exclude=meaning.keywords)
    keywords = meaning.keywords + tokens

    first_name = client_name.split()[0] if client_name.split() else client_name
    focus = meaning.keywords[0]
    note = (
        f"{first_name}, as you {paraphrase_intention(intention)}, "
        f"{card_name} asks you to bring {focus} to it; "
        f"let {tokens[0]} be the thread you follow."
    )

    return CardText(
        keywords=keywords,
        upright=f"{meaning.upright}, {upright_clause}.",
        reversed=f"{meaning.reversed}, {reversed_clause}.",
        client_note=note,
    )
