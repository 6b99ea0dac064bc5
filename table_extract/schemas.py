# table_extract/schemas.py
# Pydantic models for the HTTP API.

from __future__ import annotations

from typing import Dict, List, Optional
from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = Field(..., examples=["ok"])
    parser: str


class ErrorResponse(BaseModel):
    detail: str


class TableRequest(BaseModel):
    """
    Markup to search plus an optional discovery criterion.
    `id` takes precedence over `headers`; with neither, the first table is returned.
    """
    html: str
    id: Optional[str] = None
    headers: List[str] = Field(default_factory=list, description="Header names the first row must contain.")


class TableResponse(BaseModel):
    headers: Dict[str, int] = Field(..., description="Header text -> zero-based column position.")
    rows: List[List[str]]
    records: List[Dict[str, str]]
