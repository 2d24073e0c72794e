from __future__ import annotations

import random
from functools import lru_cache

from auradeck_backend.engine.models import CardAttributes
from auradeck_backend.utils.cards import DEFAULT_TABLES, DeckTables, derive_seed


MIN_SIGILS = 3
MAX_SIGILS = 5


def _scale(value: int, low: int, high: int) -> int:
    return low + round(value * (high - low) / 255)


def tone_for(value: int, tables: DeckTables = DEFAULT_TABLES) -> str:
    for tone, upper in zip(tables.tones, tables.tone_upper_bounds):
        if value <= upper:
            return tone
    raise ValueError(f"byte value out of range: {value}")


def sigils_for(value: int, tables: DeckTables = DEFAULT_TABLES) -> tuple[str, ...]:
    rng = random.Random(derive_seed(value, "sigils"))
    count = MIN_SIGILS + rng.randrange(MAX_SIGILS - MIN_SIGILS + 1)
    return tuple(rng.sample(list(tables.sigils), count))


def derive_attributes(value: int, tables: DeckTables = DEFAULT_TABLES) -> CardAttributes:
    if not 0 <= value <= 255:
        raise ValueError(f"byte value out of range: {value}")
    if tables is DEFAULT_TABLES:
        return _cached_attributes(value)
    return _derive(value, tables)


def _derive(value: int, tables: DeckTables) -> CardAttributes:
    return CardAttributes(
        hue=round(value / 255 * 360) % 360,
        saturation=_scale(value, 55, 75),
        lightness=_scale(value, 40, 65),
        element=tables.elements[value % len(tables.elements)],
        tone=tone_for(value, tables),
        sigils=sigils_for(value, tables),
    )


@lru_cache(maxsize=256)
def _cached_attributes(value: int) -> CardAttributes:
    return _derive(value, DEFAULT_TABLES)
