"""
Router: POST /bind
Dla wyrenderowanej strony encji:
  1. Parsuje HTML do PageSnapshot (tytuł, przestrzeń nazw, grupy wyrażeń)
  2. Etap 1: wiąże encję (reguły tytułu)
  3. Etap 2: wiąże grupy wyrażeń z rekordem encji
  4. Zwraca affordancje w kolejności strony
"""
from __future__ import annotations

from fastapi import APIRouter, Depends

from adapters.page_binder._printer import print_affordances
from api.dependencies import get_page_binder, get_page_parser
from api.schemas import BindRequest, BindResponse

router = APIRouter(prefix="/bind", tags=["bind"])


@router.post("", response_model=BindResponse)
async def bind_page(
    body: BindRequest,
    parser=Depends(get_page_parser),
    binder=Depends(get_page_binder),
) -> BindResponse:
    page = parser.parse(body.page_html)

    overrides = {}
    if body.namespace is not None:
        overrides["namespace"] = body.namespace
    if body.user_language:
        overrides["user_language"] = body.user_language
    if overrides:
        page = page.model_copy(update=overrides)

    values = sum(1 for group in page.statement_groups for snak in group.snaks if not snak.qualifier)

    binding = binder.bind_entity(page)
    if binding is None:
        return BindResponse(
            entity=page.entity,
            user_language=page.user_language,
            statement_groups=len(page.statement_groups),
            values=values,
            affordances=[],
        )

    affordances = [
        *binding.affordances,
        *binder.bind_statements(binding, page.statement_groups, body.entity),
    ]
    if body.verbose:
        print_affordances(binding.entity, affordances)

    return BindResponse(
        entity=binding.entity,
        user_language=binding.user_language,
        statement_groups=len(page.statement_groups),
        values=values,
        affordances=affordances,
    )
