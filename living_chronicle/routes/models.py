"""Pydantic request/response models for API endpoints."""

from typing import Any

from pydantic import BaseModel, Field


class CompileBatchBody(BaseModel):
    civ_ids: list[str] | None = None  # None compiles every stored civilization


class PreviewBody(BaseModel):
    civ_id: str
    civ_name: str
    events: list[dict[str, Any]] = Field(default_factory=list)


class CreateCivilization(BaseModel):
    id: str
    name: str
    description: str = ""


class AppendEvents(BaseModel):
    events: list[dict[str, Any]]
