"""
Router: POST /extract
Ustala tożsamość jednej wartości: markup + rekord encji → ExtractedValue.
"""
from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from api.dependencies import get_value_extractor
from api.schemas import ExtractRequest, ExtractResponse
from contracts import is_property_id

router = APIRouter(prefix="/extract", tags=["extract"])


@router.post("", response_model=ExtractResponse)
async def extract_value(
    body: ExtractRequest,
    extractor=Depends(get_value_extractor),
) -> ExtractResponse:
    if not is_property_id(body.property_id):
        raise HTTPException(status_code=422, detail=f"Invalid property id: {body.property_id!r}")

    value = extractor.extract(body.markup, body.entity, body.property_id, body.statement_index)
    return ExtractResponse(property_id=body.property_id, value=value)
