from __future__ import annotations

import logging
import os
import re
from pathlib import Path

from pydantic import ValidationError

from auradeck_backend.engine.errors import DeckConflict, DeckCorrupted, DeckNotFound
from auradeck_backend.engine.models import DeckRecord
from auradeck_backend.repo.base import DeckRepository


logger = logging.getLogger(__name__)

CLIENT_ID_RE = re.compile(r"^[0-9a-f]{64}$")


class JsonFileDeckRepository(DeckRepository):
    """One ``<client_id>.json`` file per deck; files are never rewritten."""

    def __init__(self, root: Path) -> None:
        self._root = Path(root)
        self._root.mkdir(parents=True, exist_ok=True)

    def _path(self, client_id: str) -> Path | None:
        if not CLIENT_ID_RE.match(client_id):
            return None
        return self._root / f"{client_id}.json"

    def create(self, deck: DeckRecord) -> None:
        path = self._path(deck.client_id)
        if path is None:
            raise DeckNotFound(deck.client_id)
        if path.exists():
            if self.get(deck.client_id) != deck:
                raise DeckConflict(deck.client_id)
            return

        tmp_path = path.with_suffix(".json.tmp")
        try:
            tmp_path.write_text(deck.model_dump_json(indent=2), encoding="utf-8")
            os.replace(tmp_path, path)
        finally:
            tmp_path.unlink(missing_ok=True)
        logger.info("Wrote deck record %s", path)

    def get(self, client_id: str) -> DeckRecord:
        path = self._path(client_id)
        if path is None or not path.exists():
            raise DeckNotFound(client_id)
        try:
            deck = DeckRecord.model_validate_json(path.read_text(encoding="utf-8"))
        except ValidationError as exc:
            logger.error("Stored deck %s failed validation: %s", client_id, exc)
            raise DeckCorrupted(client_id, f"{exc.error_count()} validation errors") from exc
        if deck.client_id != client_id:
            raise DeckCorrupted(client_id, f"record holds client_id {deck.client_id}")
        return deck

    def exists(self, client_id: str) -> bool:
        path = self._path(client_id)
        return path is not None and path.exists()

    def all_ids(self) -> list[str]:
        return sorted(path.stem for path in self._root.glob("*.json") if CLIENT_ID_RE.match(path.stem))
