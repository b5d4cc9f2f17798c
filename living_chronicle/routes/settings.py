"""Health check and engine settings endpoints."""

from fastapi import APIRouter, Depends, HTTPException
from pydantic import ValidationError

from living_chronicle.config import load_config, update_config
from living_chronicle.service import ChronicleService

from .deps import get_service

router = APIRouter()


@router.get("/health")
async def health():
    """Health check."""
    return {"status": "ok"}


@router.get("/settings")
async def get_settings(service: ChronicleService = Depends(get_service)):
    """Get the engine configuration (defaults merged with config.json)."""
    return load_config(service.storage.config_path)


@router.patch("/settings")
async def update_settings(body: dict, service: ChronicleService = Depends(get_service)):
    """Update engine settings (partial merge). Applies to the next app start."""
    try:
        return update_config(service.storage.config_path, body)
    except ValidationError as e:
        raise HTTPException(422, str(e))
