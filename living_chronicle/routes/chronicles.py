"""Chronicle compilation endpoints."""

from fastapi import APIRouter, Depends, HTTPException

from living_chronicle.ingest import MalformedEventError
from living_chronicle.pipeline import compile_chronicle
from living_chronicle.service import ChronicleService, CivilizationNotFound

from .deps import get_service, malformed
from .models import CompileBatchBody, PreviewBody

router = APIRouter()


@router.get("/civilizations/{civ_id}/chronicle")
async def get_chronicle(civ_id: str, service: ChronicleService = Depends(get_service)):
    """Compile (or reuse the cached) chronicle of one civilization."""
    try:
        return service.compile_chronicle(civ_id)
    except CivilizationNotFound:
        raise HTTPException(404, "Civilization not found")
    except MalformedEventError as e:
        raise malformed(e)


@router.post("/chronicles")
async def compile_batch(body: CompileBatchBody, service: ChronicleService = Depends(get_service)):
    """Compile several chronicles; all stored civilizations when civ_ids is omitted."""
    try:
        return service.compile_all(body.civ_ids)
    except CivilizationNotFound as e:
        raise HTTPException(404, str(e))
    except MalformedEventError as e:
        raise malformed(e)


@router.post("/chronicles/preview")
async def preview_chronicle(body: PreviewBody, service: ChronicleService = Depends(get_service)):
    """Compile an ad hoc event snapshot without touching storage."""
    try:
        return compile_chronicle(body.civ_id, body.civ_name, body.events, service.config)
    except MalformedEventError as e:
        raise malformed(e)
