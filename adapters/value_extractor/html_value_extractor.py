"""
Adapter: HtmlValueExtractor
Ustala tożsamość wyrenderowanej wartości wyrażenia.

Kolejność (pierwsze trafienie wygrywa):
1) link z atrybutem title = identyfikator encji (opcjonalnie "Q42: etykieta")
2) brak linku + element .wb-monolingualtext-value → literał bez identyfikatora
3) rekord encji: typ datavalue (time / quantity / inny)
4) błąd odczytu rekordu → Unresolved (nigdy wyjątek)
"""
from __future__ import annotations

import logging
import re
from typing import Any, Mapping

from bs4 import BeautifulSoup

from adapters.value_extractor.record_lookup import lookup_datavalue
from contracts import (
    EntityValue,
    ExtractedValue,
    LookupErr,
    StringLiteral,
    TypedLiteral,
    Unresolved,
)

logger = logging.getLogger("useful_queries.value_extractor")

_ENTITY_TITLE_RE = re.compile(r"^(Q[1-9]\d*)(?:\s*:.*)?$", re.DOTALL)
_MONOLINGUAL_SELECTOR = ".wb-monolingualtext-value"


def entity_id_from_title(title: str | None) -> str | None:
    """'Q42: Douglas Adams' → 'Q42'; cokolwiek innego → None."""
    if not title:
        return None
    m = _ENTITY_TITLE_RE.match(title.strip())
    return m.group(1) if m else None


def quote_literal(text: str) -> str:
    escaped = text.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


class HtmlValueExtractor:
    def extract(
        self,
        markup: str,
        record: Mapping[str, Any],
        property_id: str,
        statement_index: int = 0,
    ) -> ExtractedValue:
        soup = BeautifulSoup(markup or "", "html.parser")

        link = soup.find("a")
        if link is not None:
            entity_id = entity_id_from_title(link.get("title"))
            if entity_id:
                return EntityValue(entity_id=entity_id, label=link.get_text().strip())
        else:
            mono = soup.select_one(_MONOLINGUAL_SELECTOR)
            if mono is not None:
                return StringLiteral(label=mono.decode_contents(), literal=None)

        return self._from_record(soup, markup, record, property_id, statement_index)

    def _from_record(
        self,
        soup: BeautifulSoup,
        markup: str,
        record: Mapping[str, Any],
        property_id: str,
        statement_index: int,
    ) -> ExtractedValue:
        result = lookup_datavalue(record, property_id, statement_index)
        if isinstance(result, LookupErr):
            logger.warning(
                "Could not extract datavalue type for %s[%d]: %s (%s)",
                property_id, statement_index, result.kind.value, result.detail,
            )
            return Unresolved(label=markup, reason=result.kind.value)

        value = result.value
        if result.datatype == "time":
            time = value.get("time") if isinstance(value, Mapping) else None
            if not isinstance(time, str):
                return self._malformed(markup, property_id, statement_index, "time")
            return TypedLiteral(datatype="time", raw_value=time, label=markup)

        if result.datatype == "quantity":
            amount = value.get("amount") if isinstance(value, Mapping) else None
            if amount is None or isinstance(amount, (bool, dict, list)):
                return self._malformed(markup, property_id, statement_index, "amount")
            return TypedLiteral(datatype="quantity", raw_value=str(amount), label=markup)

        text = soup.get_text().strip()
        return StringLiteral(label=text, literal=quote_literal(text))

    @staticmethod
    def _malformed(markup: str, property_id: str, statement_index: int, field: str) -> Unresolved:
        logger.warning("Datavalue of %s[%d] has no %r", property_id, statement_index, field)
        return Unresolved(label=markup, reason="malformed")
