"""Assign byte values to majors and a bijective (suit, rank) to every minor slot.

Minor slots are allocated by open addressing over the byte domain: the slot's
raw byte picks the first candidate pair, and a collision moves the byte
forward by one (mod 256) until an unused pair turns up. The byte that finally
lands is kept as the card's ``hash_signature``.

``value mod 4`` / ``value mod 14`` only ever reaches 28 of the 56 pairs
(both moduli are even, so the pair repeats every 28 steps). The linear scheme
therefore reads the pair index as ``value mod 56``, which every run of 56
consecutive bytes covers completely. The modular scheme keeps the old mapping
for auditing legacy decks and raises ``AllocationExhausted`` when it stalls.
"""

from __future__ import annotations

import logging
from typing import Callable

from auradeck_backend.engine.errors import AllocationExhausted
from auradeck_backend.engine.internal import Allocation, MinorAssignment, Segments
from auradeck_backend.engine.models import AllocationScheme
from auradeck_backend.utils.cards import DEFAULT_TABLES, DeckTables, build_shuffled_pairs, derive_seed


logger = logging.getLogger(__name__)

BYTE_SPACE = 256

PairMapper = Callable[[int, DeckTables], tuple[str, str]]


def linear_pair(value: int, tables: DeckTables = DEFAULT_TABLES) -> tuple[str, str]:
    index = value % tables.pair_count
    return tables.suits[index // len(tables.ranks)], tables.ranks[index % len(tables.ranks)]


def modular_pair(value: int, tables: DeckTables = DEFAULT_TABLES) -> tuple[str, str]:
    return tables.suits[value % len(tables.suits)], tables.ranks[value % len(tables.ranks)]


def probe_pair(
    slot: int,
    start_value: int,
    used: set[tuple[str, str]],
    mapper: PairMapper,
    tables: DeckTables = DEFAULT_TABLES,
) -> MinorAssignment:
    value = start_value
    for probes in range(BYTE_SPACE):
        pair = mapper(value, tables)
        if pair not in used:
            used.add(pair)
            if probes:
                logger.debug(
                    "slot %d: byte %d collided %d times, settled on %d (%s of %s)",
                    slot,
                    start_value,
                    probes,
                    value,
                    pair[1],
                    pair[0],
                )
            return MinorAssignment(
                slot=slot,
                suit=pair[0],
                rank=pair[1],
                start_value=start_value,
                hash_signature=value,
                probes=probes,
            )
        value = (value + 1) % BYTE_SPACE
    raise AllocationExhausted(slot, start_value)


def allocate_minors_probing(
    minor_raw: tuple[int, ...],
    mapper: PairMapper = linear_pair,
    tables: DeckTables = DEFAULT_TABLES,
) -> tuple[MinorAssignment, ...]:
    if len(minor_raw) != tables.pair_count:
        raise ValueError(f"expected {tables.pair_count} minor values, got {len(minor_raw)}")

    used: set[tuple[str, str]] = set()
    return tuple(
        probe_pair(slot, start_value, used, mapper, tables)
        for slot, start_value in enumerate(minor_raw)
    )


def allocate_minors_permutation(
    minor_seed: tuple[int, ...],
    minor_raw: tuple[int, ...],
    tables: DeckTables = DEFAULT_TABLES,
) -> tuple[MinorAssignment, ...]:
    pairs = build_shuffled_pairs(derive_seed(bytes(minor_seed), "minor_permutation"), tables)
    if len(minor_raw) != len(pairs):
        raise ValueError(f"expected {len(pairs)} minor values, got {len(minor_raw)}")
    return tuple(
        MinorAssignment(
            slot=slot,
            suit=suit,
            rank=rank,
            start_value=value,
            hash_signature=value,
        )
        for slot, ((suit, rank), value) in enumerate(zip(pairs, minor_raw))
    )


def allocate(
    segments: Segments,
    scheme: AllocationScheme = AllocationScheme.LINEAR,
    tables: DeckTables = DEFAULT_TABLES,
) -> Allocation:
    if len(segments.major_values) != len(tables.majors):
        raise ValueError(
            f"expected {len(tables.majors)} major values, got {len(segments.major_values)}",
        )

    if scheme is AllocationScheme.PERMUTATION:
        minors = allocate_minors_permutation(segments.minor_seed, segments.minor_raw, tables)
    elif scheme is AllocationScheme.MODULAR:
        minors = allocate_minors_probing(segments.minor_raw, modular_pair, tables)
    else:
        minors = allocate_minors_probing(segments.minor_raw, linear_pair, tables)

    allocation = Allocation(major_values=segments.major_values, minors=minors)
    logger.debug("allocated %d minors with %d collisions (%s)", len(minors), allocation.collisions, scheme.value)
    return allocation
