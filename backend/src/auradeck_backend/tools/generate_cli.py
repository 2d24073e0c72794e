from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from auradeck_backend.api.deps import build_service
from auradeck_backend.config import settings
from auradeck_backend.engine.errors import DeckGenerationError
from auradeck_backend.engine.models import AllocationScheme, DeckRecord
from auradeck_backend.engine.service import build_render_manifest


def _intake_from_args(args: argparse.Namespace) -> dict:
    if args.intake_file is not None:
        return json.loads(args.intake_file.read_text(encoding="utf-8"))
    return {
        "name": args.name,
        "dob": args.dob,
        "time": args.time,
        "location": args.location,
        "intention": args.intention,
    }


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate or verify a personalised tarot deck record")
    parser.add_argument("--intake-file", type=Path, help="JSON file with name/dob/time/location/intention")
    parser.add_argument("--name")
    parser.add_argument("--dob")
    parser.add_argument("--time")
    parser.add_argument("--location")
    parser.add_argument("--intention")
    parser.add_argument(
        "--scheme",
        choices=[scheme.value for scheme in AllocationScheme],
        default=settings.allocation_scheme.value,
    )
    parser.add_argument("--manifest", action="store_true", help="print the render manifest instead")
    parser.add_argument("--verify", type=Path, metavar="DECK_FILE", help="re-derive a stored deck record")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=settings.log_level.upper(), stream=sys.stderr)

    service = build_service(settings.model_copy(update={"storage_backend": "memory"}))

    try:
        if args.verify is not None:
            try:
                deck = DeckRecord.model_validate_json(args.verify.read_text(encoding="utf-8"))
            except ValidationError as exc:
                detail = {"code": "INVALID_DECK_RECORD", "message": str(exc), "stage": "load"}
                print(json.dumps(detail, indent=2), file=sys.stderr)
                return 2
            result = service.verify_record(deck)
            print(json.dumps(result.model_dump(mode="json"), indent=2))
            return 0 if result.ok else 1

        deck = service.generate(_intake_from_args(args), AllocationScheme(args.scheme))
    except DeckGenerationError as exc:
        print(json.dumps(exc.to_detail(), indent=2), file=sys.stderr)
        return 2

    payload = build_render_manifest(deck) if args.manifest else deck
    print(json.dumps(payload.model_dump(mode="json"), indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
