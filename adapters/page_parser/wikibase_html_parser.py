"""
Adapter: WikibaseHtmlParser
Wyrenderowana strona encji Wikibase → PageSnapshot.

Selektory według markupu widoku encji Wikibase:
  .wikibase-title (-id, -label)          identyfikator i etykieta encji
  .wikibase-statementgroupview[id]       jedna grupa na właściwość
  .wikibase-statementview                jedno wyrażenie (numer = pozycja w claims[pid])
  .wikibase-statementview-mainsnak-container .wikibase-snakview-value
                                         wartość główna i jej kwalifikatory
Wartości mw.config (wgNamespaceNumber, wgUserLanguage) z osadzonych skryptów.
"""
from __future__ import annotations

import logging
import re

from bs4 import BeautifulSoup, Tag

from contracts import (
    EntityRef,
    PageSnapshot,
    PropertyRef,
    Snak,
    StatementGroup,
    is_entity_id,
    is_property_id,
)

logger = logging.getLogger("useful_queries.page_parser")

_NAMESPACE_RE = re.compile(r'"wgNamespaceNumber"\s*:\s*(-?\d+)')
_USER_LANGUAGE_RE = re.compile(r'"wgUserLanguage"\s*:\s*"([^"]+)"')

_VALUE_SELECTOR = ".wikibase-statementview-mainsnak-container .wikibase-snakview-value"
_QUALIFIERS_CLASS = "wikibase-statementview-qualifiers"


def _text(tag: Tag | None) -> str:
    return tag.get_text().strip() if tag is not None else ""


class WikibaseHtmlParser:
    def parse(self, html: str) -> PageSnapshot:
        soup = BeautifulSoup(html or "", "html.parser")
        groups = tuple(
            group
            for group in (self._parse_group(el) for el in soup.select(".wikibase-statementgroupview"))
            if group is not None
        )
        return PageSnapshot(
            entity=self.parse_entity(soup),
            namespace=self._namespace(html or ""),
            user_language=self._user_language(html or ""),
            statement_groups=groups,
        )

    def parse_entity(self, soup: BeautifulSoup) -> EntityRef | None:
        title = soup.select_one(".wikibase-title")
        if title is None:
            return None
        entity_id = re.sub(r"[()]", "", _text(title.select_one(".wikibase-title-id"))).strip()
        if not is_entity_id(entity_id):
            logger.debug("Title id %r is not an entity id", entity_id)
            return None
        return EntityRef(entity_id=entity_id, label=_text(title.select_one(".wikibase-title-label")))

    def _parse_group(self, el: Tag) -> StatementGroup | None:
        property_id = el.get("id")
        if not is_property_id(property_id):
            logger.debug("Skipping statement group with id %r", property_id)
            return None
        label = _text(el.select_one(".wikibase-statementgroupview-property-label"))
        snaks: list[Snak] = []
        # Kontener snaka głównego zawiera też kwalifikatory; numer wyrażenia
        # pochodzi z jego .wikibase-statementview, nie z kolejności wartości.
        for position, statement in enumerate(el.select(".wikibase-statementview")):
            for value in statement.select(_VALUE_SELECTOR):
                snaks.append(Snak(
                    index=len(snaks),
                    statement_index=position,
                    qualifier=value.find_parent(class_=_QUALIFIERS_CLASS) is not None,
                    markup=value.decode_contents(),
                    property_id=self._snak_property(value),
                ))
        return StatementGroup(property=PropertyRef(property_id=property_id, label=label), snaks=tuple(snaks))

    @staticmethod
    def _snak_property(value: Tag) -> str | None:
        snakview = value.find_parent(class_="wikibase-snakview")
        if snakview is None:
            return None
        link = snakview.select_one(".wikibase-snakview-property a")
        if link is None:
            return None
        title = link.get("title") or ""
        # "Property:P585" → "P585"
        parts = title.split(":")
        candidate = parts[1].strip() if len(parts) > 1 else ""
        return candidate if is_property_id(candidate) else None

    @staticmethod
    def _namespace(html: str) -> int | None:
        m = _NAMESPACE_RE.search(html)
        return int(m.group(1)) if m else None

    @staticmethod
    def _user_language(html: str) -> str | None:
        m = _USER_LANGUAGE_RE.search(html)
        return m.group(1) if m else None
