from __future__ import annotations

import hashlib
import json
from typing import Any


FIELD_SEPARATOR = "|"


def stable_hash(payload: Any) -> str:
    encoded = json.dumps(payload, sort_keys=True, separators=(",", ":")).encode(
        "utf-8",
    )
    return hashlib.sha256(encoded).hexdigest()


def canonical_bytes(fields: tuple[str, ...]) -> bytes:
    return FIELD_SEPARATOR.join(fields).encode("utf-8")


def sha256_digest(data: bytes) -> bytes:
    return hashlib.sha256(data).digest()
