from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException

from auradeck_backend.api.deps import get_deck_service
from auradeck_backend.engine.errors import (
    DeckConflict,
    DeckGenerationError,
    DeckNotFound,
    IntakeValidationError,
)
from auradeck_backend.engine.models import (
    DeckRecord,
    IntakeRequest,
    RenderManifest,
    VerificationResult,
)
from auradeck_backend.engine.service import DeckService


router = APIRouter(prefix="/api")

ServiceDep = Annotated[DeckService, Depends(get_deck_service)]


def _status_for(exc: DeckGenerationError) -> int:
    if isinstance(exc, IntakeValidationError):
        return 422
    if isinstance(exc, DeckNotFound):
        return 404
    if isinstance(exc, DeckConflict):
        return 409
    return 500


def _http_error(exc: DeckGenerationError) -> HTTPException:
    return HTTPException(status_code=_status_for(exc), detail=exc.to_detail())


@router.post("/decks", response_model=DeckRecord, status_code=201)
async def create_deck(request: IntakeRequest, service: ServiceDep) -> DeckRecord:
    try:
        return await service.create_deck(request)
    except DeckGenerationError as exc:
        raise _http_error(exc) from exc


@router.get("/decks/{client_id}", response_model=DeckRecord)
async def get_deck(client_id: str, service: ServiceDep) -> DeckRecord:
    try:
        return await service.get_deck(client_id)
    except DeckGenerationError as exc:
        raise _http_error(exc) from exc


@router.get("/decks/{client_id}/manifest", response_model=RenderManifest)
async def get_manifest(client_id: str, service: ServiceDep) -> RenderManifest:
    try:
        return await service.render_manifest(client_id)
    except DeckGenerationError as exc:
        raise _http_error(exc) from exc


@router.post("/decks/{client_id}/verify", response_model=VerificationResult)
async def verify_deck(client_id: str, service: ServiceDep) -> VerificationResult:
    try:
        return await service.verify_deck(client_id)
    except DeckGenerationError as exc:
        raise _http_error(exc) from exc
