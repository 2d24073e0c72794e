from __future__ import annotations

from dataclasses import dataclass


MAJOR_BLOCK = 22
MINOR_SEED_BLOCK = 10


@dataclass(frozen=True)
class Segments:
    major_values: tuple[int, ...]
    minor_seed: tuple[int, ...]
    minor_raw: tuple[int, ...]


@dataclass(frozen=True)
class MinorAssignment:
    slot: int
    suit: str
    rank: str
    start_value: int
    hash_signature: int
    probes: int = 0


@dataclass(frozen=True)
class Allocation:
    major_values: tuple[int, ...]
    minors: tuple[MinorAssignment, ...]

    @property
    def collisions(self) -> int:
        return sum(assignment.probes for assignment in self.minors)
