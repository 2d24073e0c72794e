from __future__ import annotations

from typing import Any


class DeckGenerationError(Exception):
    code = "DECK_GENERATION_FAILED"

    def __init__(
        self,
        message: str,
        *,
        client_id: str | None = None,
        stage: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.client_id = client_id
        self.stage = stage

    def with_context(self, *, client_id: str | None, stage: str) -> DeckGenerationError:
        if self.client_id is None:
            self.client_id = client_id
        if self.stage is None:
            self.stage = stage
        return self

    def to_detail(self) -> dict[str, Any]:
        return {
            "code": self.code,
            "message": self.message,
            "client_id": self.client_id,
            "stage": self.stage,
        }

    def __str__(self) -> str:
        context = ", ".join(
            f"{key}={value}"
            for key, value in (("client_id", self.client_id), ("stage", self.stage))
            if value is not None
        )
        return f"{self.message} ({context})" if context else self.message


class IntakeValidationError(DeckGenerationError):
    code = "INVALID_INTAKE"

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message, stage="normalize")
        self.field = field

    def to_detail(self) -> dict[str, Any]:
        detail = super().to_detail()
        detail["field"] = self.field
        return detail


class AllocationExhausted(DeckGenerationError):
    code = "ALLOCATION_EXHAUSTED"

    def __init__(self, slot: int, start_value: int) -> None:
        super().__init__(
            f"No unused (suit, rank) pair reachable for minor slot {slot} "
            f"from byte value {start_value}",
            stage="allocate",
        )
        self.slot = slot
        self.start_value = start_value


class UnknownCardName(DeckGenerationError):
    code = "UNKNOWN_CARD_NAME"

    def __init__(self, card_name: str) -> None:
        super().__init__(f"No canonical meaning for card {card_name!r}", stage="synthesize_text")
        self.card_name = card_name


class DeckNotFound(DeckGenerationError):
    code = "DECK_NOT_FOUND"

    def __init__(self, client_id: str) -> None:
        super().__init__(f"deck {client_id} not found", client_id=client_id, stage="load")


class DeckConflict(DeckGenerationError):
    code = "DECK_CONFLICT"

    def __init__(self, client_id: str) -> None:
        super().__init__(
            f"a different deck is already stored under {client_id}",
            client_id=client_id,
            stage="persist",
        )


class DeckCorrupted(DeckGenerationError):
    code = "DECK_CORRUPTED"

    def __init__(self, client_id: str, reason: str) -> None:
        super().__init__(
            f"stored deck {client_id} is unreadable: {reason}",
            client_id=client_id,
            stage="load",
        )
