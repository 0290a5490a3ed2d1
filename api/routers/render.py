"""
Router: POST /render
Renderuje szablon zapytania (stałe konfiguracji + wiązania) i koduje do "#...".
"""
from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from adapters.template_engine.placeholder_engine import UnresolvedPlaceholderError
from api.dependencies import get_template_engine
from api.schemas import RenderRequest, RenderResponse

router = APIRouter(prefix="/render", tags=["render"])


@router.post("", response_model=RenderResponse)
async def render_query(
    body: RenderRequest,
    engine=Depends(get_template_engine),
) -> RenderResponse:
    try:
        query = engine.render(body.template, body.bindings, strict=body.strict)
    except UnresolvedPlaceholderError as exc:
        raise HTTPException(status_code=422, detail={"message": str(exc), "missing": exc.missing})

    return RenderResponse(
        query=query,
        query_string=engine.encode_for_transport(query),
        missing=engine.missing_placeholders(body.template, body.bindings),
    )
