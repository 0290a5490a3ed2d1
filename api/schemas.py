"""
schemas.py — Request/Response modele FastAPI.
Oddzielone od contracts.py żeby API mogło ewoluować niezależnie.
"""
from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, Field

from contracts import Affordance, EntityRef, ExtractedValue, QueryRule


# ─────────────────────────── /bind ───────────────────────────────

class BindRequest(BaseModel):
    page_html: str = Field(..., min_length=1)
    entity: dict[str, Any] = Field(default_factory=dict)  # rekord encji (JSON Wikibase)
    namespace: Optional[int] = None       # nadpisuje wgNamespaceNumber ze strony
    user_language: Optional[str] = None   # nadpisuje wgUserLanguage ze strony
    verbose: bool = False                 # wyświetla affordancje na stdout serwera


class BindResponse(BaseModel):
    entity: Optional[EntityRef]
    user_language: Optional[str]
    statement_groups: int
    values: int                   # wartości główne, bez kwalifikatorów
    affordances: list[Affordance]


# ─────────────────────────── /extract ────────────────────────────

class ExtractRequest(BaseModel):
    markup: str
    entity: dict[str, Any] = Field(default_factory=dict)
    property_id: str
    statement_index: int = Field(default=0, ge=0)


class ExtractResponse(BaseModel):
    property_id: str
    value: ExtractedValue


# ─────────────────────────── /render ─────────────────────────────

class RenderRequest(BaseModel):
    template: str
    bindings: dict[str, str] = Field(default_factory=dict)
    strict: bool = False


class RenderResponse(BaseModel):
    query: str
    query_string: str
    missing: list[str]


# ─────────────────────────── /rules ──────────────────────────────

class RulesResponse(BaseModel):
    count: int
    rules: list[QueryRule]


# ─────────────────────────── /health ─────────────────────────────

class HealthResponse(BaseModel):
    status: str
    rules: int
    version: str
