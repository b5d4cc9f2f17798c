"""Civilization metadata and event log endpoints."""

from fastapi import APIRouter, Depends, HTTPException
from pydantic import ValidationError

from living_chronicle.ingest import MalformedEventError
from living_chronicle.service import ChronicleService

from .deps import get_service, malformed
from .models import AppendEvents, CreateCivilization

router = APIRouter()


@router.get("/civilizations")
async def list_civilizations(service: ChronicleService = Depends(get_service)):
    """List all stored civilizations."""
    return service.storage.list_civilizations()


@router.post("/civilizations", status_code=201)
async def create_civilization(body: CreateCivilization, service: ChronicleService = Depends(get_service)):
    """Register a civilization (metadata only; events are appended separately)."""
    if service.storage.get_civilization(body.id):
        raise HTTPException(409, "Civilization already exists")
    try:
        return service.storage.create_civilization(body.id, body.name, body.description)
    except (ValueError, ValidationError) as e:
        raise HTTPException(422, str(e))


@router.get("/civilizations/{civ_id}/events")
async def get_events(civ_id: str, service: ChronicleService = Depends(get_service)):
    """Get the raw event records of a civilization."""
    if not service.storage.get_civilization(civ_id):
        raise HTTPException(404, "Civilization not found")
    try:
        return service.storage.get_event_records(civ_id)
    except MalformedEventError as e:
        raise malformed(e)


@router.post("/civilizations/{civ_id}/events")
async def append_events(civ_id: str, body: AppendEvents, service: ChronicleService = Depends(get_service)):
    """Upsert event records by id. Records are validated when compiled."""
    if not service.storage.get_civilization(civ_id):
        raise HTTPException(404, "Civilization not found")
    if any(not isinstance(record.get("id"), str) for record in body.events):
        raise HTTPException(422, "Every event record needs a string id")
    try:
        service.storage.append_events(civ_id, body.events)
        return service.storage.get_event_records(civ_id)
    except MalformedEventError as e:
        raise malformed(e)
