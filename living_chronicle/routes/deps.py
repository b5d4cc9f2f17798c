"""Shared endpoint helpers."""

from fastapi import HTTPException, Request

from living_chronicle.ingest import MalformedEventError
from living_chronicle.service import ChronicleService


def get_service(request: Request) -> ChronicleService:
    return request.app.state.service


def malformed(e: MalformedEventError) -> HTTPException:
    """422 with a plain-language message plus the offending record's context."""
    return HTTPException(422, {
        "message": "The chronicle could not be compiled because an event record is invalid.",
        "error": str(e),
        **e.to_dict(),
    })
