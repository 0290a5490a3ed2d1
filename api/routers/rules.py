"""
Router: GET /rules
Zwraca załadowaną tabelę reguł (tylko do odczytu).
"""
from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends

from api.dependencies import get_rule_table
from api.schemas import RulesResponse
from contracts import RuleLevel

router = APIRouter(prefix="/rules", tags=["rules"])


@router.get("", response_model=RulesResponse)
async def list_rules(
    level: Optional[RuleLevel] = None,
    rule_table=Depends(get_rule_table),
) -> RulesResponse:
    rules = [r for r in rule_table.all_rules() if level is None or r.level == level]
    return RulesResponse(count=len(rules), rules=rules)
