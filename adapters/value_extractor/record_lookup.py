"""
Odczyt datavalue snaka głównego z rekordu encji.

Akceptowane kształty:
  - pełny dokument encji: {"id": "Q42", "claims": {"P569": [...]}, ...}
  - samo mapowanie: {"P569": [...]}

Zwraca LookupOk / LookupErr zamiast rzucać wyjątek.
"""
from __future__ import annotations

from typing import Any, Mapping

from contracts import LookupErr, LookupErrorKind, LookupOk, LookupResult


def _claims(record: Mapping[str, Any]) -> Mapping[str, Any]:
    nested = record.get("claims")
    if isinstance(nested, Mapping):
        return nested
    return record


def lookup_datavalue(
    record: Mapping[str, Any] | None,
    property_id: str,
    statement_index: int = 0,
) -> LookupResult:
    if not isinstance(record, Mapping):
        return LookupErr(kind=LookupErrorKind.MALFORMED, detail="record is not a mapping")

    claims = _claims(record)
    statements = claims.get(property_id)
    if statements is None:
        return LookupErr(
            kind=LookupErrorKind.MISSING_PROPERTY,
            detail=f"no statements for {property_id}",
        )
    if not isinstance(statements, (list, tuple)):
        return LookupErr(
            kind=LookupErrorKind.MALFORMED,
            detail=f"statements for {property_id} are not a list",
        )
    if statement_index < 0 or statement_index >= len(statements):
        return LookupErr(
            kind=LookupErrorKind.MISSING_STATEMENT,
            detail=f"{property_id} has no statement #{statement_index}",
        )

    statement = statements[statement_index]
    mainsnak = statement.get("mainsnak") if isinstance(statement, Mapping) else None
    if not isinstance(mainsnak, Mapping):
        return LookupErr(
            kind=LookupErrorKind.MALFORMED,
            detail=f"{property_id}[{statement_index}] has no mainsnak",
        )

    # somevalue / novalue nie mają datavalue
    datavalue = mainsnak.get("datavalue")
    if datavalue is None:
        return LookupErr(
            kind=LookupErrorKind.MISSING_DATAVALUE,
            detail=f"{property_id}[{statement_index}] snaktype={mainsnak.get('snaktype')!r}",
        )
    if not isinstance(datavalue, Mapping) or not isinstance(datavalue.get("type"), str):
        return LookupErr(
            kind=LookupErrorKind.MALFORMED,
            detail=f"{property_id}[{statement_index}] datavalue has no type",
        )

    return LookupOk(datatype=datavalue["type"], value=datavalue.get("value"))
