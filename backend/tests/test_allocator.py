from __future__ import annotations

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from auradeck_backend.engine.allocator import (
    allocate,
    allocate_minors_permutation,
    allocate_minors_probing,
    linear_pair,
    modular_pair,
)
from auradeck_backend.engine.digest import segment_digest
from auradeck_backend.engine.errors import AllocationExhausted
from auradeck_backend.engine.internal import Segments
from auradeck_backend.engine.models import AllocationScheme
from auradeck_backend.utils.cards import DEFAULT_TABLES


ALL_PAIRS = set(DEFAULT_TABLES.all_pairs())


def _pairs(minors) -> list[tuple[str, str]]:
    return [(assignment.suit, assignment.rank) for assignment in minors]


def test_linear_pair_covers_every_pair_in_56_consecutive_bytes() -> None:
    assert {linear_pair(value) for value in range(56)} == ALL_PAIRS
    assert linear_pair(0) == ("Wands", "Ace")
    assert linear_pair(15) == ("Cups", "Two")
    assert linear_pair(55) == ("Pentacles", "King")
    assert linear_pair(56) == linear_pair(0)


def test_modular_pair_only_reaches_half_of_the_pairs() -> None:
    reachable = {modular_pair(value) for value in range(256)}
    assert len(reachable) == 28


def test_collision_moves_signature_forward() -> None:
    raw = (7, 7) + tuple(range(100, 154))
    minors = allocate_minors_probing(raw)
    assert minors[0].hash_signature == 7
    assert minors[1].start_value == 7
    assert minors[1].hash_signature == 8
    assert minors[1].probes == 1
    assert len(set(_pairs(minors))) == 56


def test_identical_raw_values_still_form_a_bijection() -> None:
    raw = (200,) * 56
    minors = allocate_minors_probing(raw)
    assert set(_pairs(minors)) == ALL_PAIRS
    assert [m.hash_signature for m in minors] == [(200 + i) % 256 for i in range(56)]


def test_modular_mapping_exhausts_instead_of_duplicating() -> None:
    with pytest.raises(AllocationExhausted) as exc_info:
        allocate_minors_probing((200,) * 56, modular_pair)
    assert exc_info.value.slot == 28
    assert exc_info.value.start_value == 200
    assert exc_info.value.stage == "allocate"


@settings(max_examples=200, deadline=None)
@given(digest=st.binary(min_size=32, max_size=32))
def test_linear_allocation_is_bijective_for_any_digest(digest: bytes) -> None:
    allocation = allocate(segment_digest(digest))
    pairs = _pairs(allocation.minors)
    assert len(pairs) == 56
    assert set(pairs) == ALL_PAIRS
    assert allocation.major_values == tuple(digest[:22])
    for assignment in allocation.minors:
        assert linear_pair(assignment.hash_signature) == (assignment.suit, assignment.rank)


@settings(max_examples=100, deadline=None)
@given(digest=st.binary(min_size=32, max_size=32))
def test_modular_allocation_never_emits_duplicates(digest: bytes) -> None:
    with pytest.raises(AllocationExhausted):
        allocate(segment_digest(digest), AllocationScheme.MODULAR)


@settings(max_examples=100, deadline=None)
@given(digest=st.binary(min_size=32, max_size=32))
def test_permutation_allocation_is_bijective_and_unadjusted(digest: bytes) -> None:
    segments = segment_digest(digest)
    allocation = allocate(segments, AllocationScheme.PERMUTATION)
    assert set(_pairs(allocation.minors)) == ALL_PAIRS
    assert tuple(m.hash_signature for m in allocation.minors) == segments.minor_raw


def test_permutation_is_deterministic_per_seed() -> None:
    seed = tuple(range(10))
    raw = tuple(seed[i % 10] for i in range(56))
    first = allocate_minors_permutation(seed, raw)
    second = allocate_minors_permutation(seed, raw)
    assert first == second
    other = allocate_minors_permutation(tuple(range(1, 11)), raw)
    assert _pairs(first) != _pairs(other)


def test_allocate_rejects_short_blocks() -> None:
    with pytest.raises(ValueError):
        allocate(Segments(major_values=(1,) * 21, minor_seed=(0,) * 10, minor_raw=(0,) * 56))
    with pytest.raises(ValueError):
        allocate_minors_probing((0,) * 55)
