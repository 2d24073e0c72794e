from __future__ import annotations

from pydantic import ValidationError

from auradeck_backend.engine.errors import IntakeValidationError
from auradeck_backend.engine.internal import MAJOR_BLOCK, MINOR_SEED_BLOCK, Segments
from auradeck_backend.engine.models import DEFAULT_TIME, IntakeRecord, IntakeRequest
from auradeck_backend.utils.cards import MINOR_COUNT
from auradeck_backend.utils.hashing import FIELD_SEPARATOR, canonical_bytes, sha256_digest


def normalize_intake(request: IntakeRecord | IntakeRequest | dict) -> IntakeRecord:
    if isinstance(request, IntakeRecord):
        request = request.model_dump()
    if isinstance(request, dict):
        try:
            request = IntakeRequest.model_validate(request)
        except ValidationError as exc:
            error = exc.errors()[0]
            field_name = str(error["loc"][0]) if error["loc"] else "intake"
            raise IntakeValidationError(field_name, f"{field_name}: {error['msg']}") from exc

    cleaned: dict[str, str] = {}
    for field_name in ("name", "dob", "time", "location", "intention"):
        raw = getattr(request, field_name)
        value = raw.strip() if raw is not None else ""
        if not value:
            if field_name == "time":
                value = DEFAULT_TIME
            else:
                raise IntakeValidationError(field_name, f"{field_name} is required")
        if FIELD_SEPARATOR in value:
            raise IntakeValidationError(
                field_name,
                f"{field_name} may not contain {FIELD_SEPARATOR!r}",
            )
        try:
            value.encode("utf-8")
        except UnicodeEncodeError as exc:
            raise IntakeValidationError(field_name, f"{field_name} is not valid text") from exc
        cleaned[field_name] = value

    return IntakeRecord(**cleaned)


def compute_digest(intake: IntakeRecord) -> bytes:
    return sha256_digest(canonical_bytes(intake.canonical_fields()))


def client_id_for(intake: IntakeRecord) -> str:
    return compute_digest(intake).hex()


def segment_digest(digest: bytes) -> Segments:
    if len(digest) != MAJOR_BLOCK + MINOR_SEED_BLOCK:
        raise ValueError(f"expected a 32-byte digest, got {len(digest)} bytes")

    values = tuple(digest)
    major_values = values[:MAJOR_BLOCK]
    minor_seed = values[MAJOR_BLOCK:]
    minor_raw = tuple(minor_seed[i % MINOR_SEED_BLOCK] for i in range(MINOR_COUNT))
    return Segments(major_values=major_values, minor_seed=minor_seed, minor_raw=minor_raw)
