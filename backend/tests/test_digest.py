from __future__ import annotations

import hashlib

import pytest
from pydantic import ValidationError

from auradeck_backend.engine.digest import (
    client_id_for,
    compute_digest,
    normalize_intake,
    segment_digest,
)
from auradeck_backend.engine.errors import IntakeValidationError
from auradeck_backend.engine.models import IntakeRecord, IntakeRequest


def test_normalize_trims_and_preserves_case(aria_request: dict[str, str]) -> None:
    aria_request["name"] = "  Aria Lumen \t"
    intake = normalize_intake(aria_request)
    assert intake.name == "Aria Lumen"
    assert intake.intention == "align my art with my purpose"


@pytest.mark.parametrize("missing", [None, "", "   "])
def test_missing_time_defaults_to_midnight(aria_request: dict[str, str], missing: str | None) -> None:
    aria_request["time"] = missing
    assert normalize_intake(aria_request).time == "00:00"


@pytest.mark.parametrize("field", ["name", "dob", "location", "intention"])
def test_required_fields_reject_blank(aria_request: dict[str, str], field: str) -> None:
    aria_request[field] = "   "
    with pytest.raises(IntakeValidationError) as exc_info:
        normalize_intake(aria_request)
    assert exc_info.value.field == field
    assert exc_info.value.stage == "normalize"


def test_separator_in_field_is_rejected(aria_request: dict[str, str]) -> None:
    aria_request["location"] = "Portland|USA"
    with pytest.raises(IntakeValidationError) as exc_info:
        normalize_intake(aria_request)
    assert exc_info.value.field == "location"


def test_unencodable_text_is_rejected(aria_request: dict[str, str]) -> None:
    aria_request["name"] = "Aria \ud800"
    with pytest.raises(IntakeValidationError):
        normalize_intake(IntakeRequest.model_construct(**aria_request))


def test_digest_is_sha256_of_pipe_joined_fields(aria_intake: IntakeRecord) -> None:
    expected = hashlib.sha256(
        b"Aria Lumen|2004-09-12|18:45|Portland, USA|align my art with my purpose",
    ).digest()
    assert compute_digest(aria_intake) == expected
    assert client_id_for(aria_intake) == expected.hex()
    assert len(client_id_for(aria_intake)) == 64


def test_single_character_change_changes_digest(aria_request: dict[str, str]) -> None:
    base = client_id_for(normalize_intake(aria_request))
    for field in aria_request:
        changed = dict(aria_request)
        changed[field] = changed[field] + "x"
        assert client_id_for(normalize_intake(changed)) != base


def test_segment_split_and_cyclic_expansion() -> None:
    digest = bytes(range(32))
    segments = segment_digest(digest)
    assert segments.major_values == tuple(range(22))
    assert segments.minor_seed == tuple(range(22, 32))
    assert len(segments.minor_raw) == 56
    assert segments.minor_raw[:10] == segments.minor_seed
    assert segments.minor_raw[55] == segments.minor_seed[5]


def test_segment_rejects_wrong_length() -> None:
    with pytest.raises(ValueError):
        segment_digest(b"\x00" * 31)


@pytest.mark.parametrize(
    "overrides",
    [
        {"name": ""},
        {"name": " Aria"},
        {"dob": "2004-09-12\n"},
        {"name": "a|b"},
        {"intention": "art|purpose"},
    ],
)
def test_intake_record_rejects_non_canonical_fields(overrides: dict[str, str]) -> None:
    fields = {"name": "Aria", "dob": "2004-09-12", "location": "Portland", "intention": "create"}
    fields.update(overrides)
    with pytest.raises(ValidationError):
        IntakeRecord(**fields)


def test_shifting_a_separator_between_fields_cannot_collide() -> None:
    with pytest.raises(ValidationError):
        IntakeRecord(name="a|b", dob="c", location="d", intention="e")
    with pytest.raises(ValidationError):
        IntakeRecord(name="a", dob="b|c", location="d", intention="e")
    left = IntakeRecord(name="ab", dob="c", location="d", intention="e")
    right = IntakeRecord(name="a", dob="bc", location="d", intention="e")
    assert client_id_for(left) != client_id_for(right)


def test_constructed_record_is_renormalized() -> None:
    bypassed = IntakeRecord.model_construct(name="a|b", dob="c", time="00:00", location="d", intention="e")
    with pytest.raises(IntakeValidationError) as exc_info:
        normalize_intake(bypassed)
    assert exc_info.value.field == "name"


@pytest.mark.parametrize(
    ("overrides", "field"),
    [
        ({"dob": 20040912}, "dob"),
        ({"email": "aria@example.com"}, "email"),
    ],
)
def test_malformed_request_becomes_intake_error(
    aria_request: dict[str, str],
    overrides: dict,
    field: str,
) -> None:
    aria_request.update(overrides)
    with pytest.raises(IntakeValidationError) as exc_info:
        normalize_intake(aria_request)
    assert exc_info.value.field == field
    assert exc_info.value.code == "INVALID_INTAKE"
