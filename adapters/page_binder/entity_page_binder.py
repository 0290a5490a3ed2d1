"""
Adapter: EntityPageBinder
Dwuetapowe wiązanie strony encji z tabelą reguł.

Etap 1 bind_entity(page):
  - sprawdza przestrzeń nazw i identyfikator encji
  - reguły poziomu encji (graf encji przy tytule)
Etap 2 bind_statements(binding, groups, record):
  - grupy w kolejności strony
  - reguły właściwości: raz na grupę
  - reguły wartości: raz na snak główny, w kolejności renderowania
    (kwalifikatory nie są wartościami właściwości grupy)
Binder nie renderuje UI: zwraca listę Affordance.
"""
from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping, Optional

from adapters.page_binder._printer import print_affordances
from adapters.template_engine.placeholder_engine import UnresolvedPlaceholderError
from config import Settings
from contracts import (
    Affordance,
    AffordanceKind,
    Anchor,
    AnchorKind,
    EntityBinding,
    EntityValue,
    ExtractedValue,
    PageSnapshot,
    RuleFiring,
    StatementGroup,
)
from ports.rule_table import RuleTable
from ports.template_engine import TemplateEngine
from ports.value_extractor import ValueExtractor

logger = logging.getLogger("useful_queries.page_binder")


class EntityPageBinder:
    def __init__(
        self,
        settings: Settings,
        rule_table: RuleTable,
        template_engine: TemplateEngine,
        value_extractor: ValueExtractor,
        verbose: bool = False,
    ) -> None:
        self._settings = settings
        self._rules = rule_table
        self._engine = template_engine
        self._extractor = value_extractor
        self._verbose = verbose

    # -- PageBinder protocol ---------------------------------

    def bind_entity(self, page: PageSnapshot) -> Optional[EntityBinding]:
        if page.namespace is not None and page.namespace != self._settings.main_namespace:
            logger.info("Namespace %d is not the entity namespace, skipping page", page.namespace)
            return None
        if page.entity is None:
            logger.warning("Could not extract entity QID, aborting")
            return None

        user_language = page.user_language or self._settings.default_user_language
        binding = EntityBinding(entity=page.entity, user_language=user_language)
        context = self._entity_context(binding)
        anchor = Anchor(kind=AnchorKind.ENTITY_TITLE)
        for rule in self._rules.entity_rules():
            self._append(binding.affordances, self._rules.fire(rule, context, anchor), context)

        if self._verbose:
            print_affordances(binding.entity, binding.affordances)
        return binding

    def bind_statements(
        self,
        binding: EntityBinding,
        groups: Iterable[StatementGroup],
        record: Mapping[str, Any],
    ) -> list[Affordance]:
        affordances: list[Affordance] = []
        for group in groups:
            affordances.extend(self._bind_group(binding, group, record))

        if self._verbose:
            print_affordances(binding.entity, affordances)
        return affordances

    # -- Publiczne pomocnicze ------------------------------

    def bind_page(self, page: PageSnapshot, record: Mapping[str, Any]) -> list[Affordance]:
        """Oba etapy; affordancje encji są pierwsze."""
        binding = self.bind_entity(page)
        if binding is None:
            return []
        return [*binding.affordances, *self.bind_statements(binding, page.statement_groups, record)]

    def extract_value(
        self,
        group: StatementGroup,
        snak_index: int,
        record: Mapping[str, Any],
    ) -> ExtractedValue:
        snak = group.snaks[snak_index]
        group_pid = group.property.property_id
        lookup_pid = snak.property_id or group_pid
        # Kwalifikator albo nadpisana właściwość: claims[pid][0] własnej właściwości
        if snak.qualifier or lookup_pid != group_pid:
            statement_index = 0
        else:
            statement_index = snak.statement_index
        return self._extractor.extract(snak.markup, record, lookup_pid, statement_index)

    # -- Prywatne ------------------------------------------

    def _bind_group(
        self,
        binding: EntityBinding,
        group: StatementGroup,
        record: Mapping[str, Any],
    ) -> list[Affordance]:
        pid = group.property.property_id
        out: list[Affordance] = []

        context = {
            **self._entity_context(binding),
            "propertyId": pid,
            "propertyLabel": group.property.label,
        }
        anchor = Anchor(kind=AnchorKind.PROPERTY_LABEL, property_id=pid)
        for rule in self._rules.property_rules(pid):
            self._append(out, self._rules.fire(rule, context, anchor), context)

        for i, snak in enumerate(group.snaks):
            if snak.qualifier:
                continue
            value = self.extract_value(group, i, record)
            if not isinstance(value, EntityValue):
                continue
            rules = self._rules.value_rules(pid, value.entity_id)
            if not rules:
                continue
            value_context = {
                **context,
                "targetEntityQid": value.entity_id,
                "targetEntityLabel": value.label,
            }
            value_anchor = Anchor(kind=AnchorKind.VALUE_INDICATOR, property_id=pid, value_index=snak.index)
            for rule in rules:
                self._append(out, self._rules.fire(rule, value_context, value_anchor), value_context)
        return out

    @staticmethod
    def _entity_context(binding: EntityBinding) -> dict[str, str]:
        return {
            "entityQid": binding.entity.entity_id,
            "entityLabel": binding.entity.label,
            "userLanguage": binding.user_language,
        }

    def _append(self, out: list[Affordance], firing: RuleFiring, context: Mapping[str, str]) -> None:
        try:
            out.append(self._to_affordance(firing, context))
        except UnresolvedPlaceholderError as exc:
            logger.error("Rule %s skipped: %s", firing.rule.rule_id, exc)

    def _to_affordance(self, firing: RuleFiring, context: Mapping[str, str]) -> Affordance:
        rule = firing.rule
        title = self._engine.render(rule.presentation.title, context, rule_bindings=rule.bindings)

        if firing.url is not None:
            return Affordance(
                rule_id=rule.rule_id,
                kind=AffordanceKind.LINK,
                anchor=firing.anchor,
                url=firing.url,
                icon=rule.presentation.icon,
                tooltip=rule.presentation.tooltip,
                title=title,
            )

        query = self._engine.render(
            firing.template or "",
            firing.bindings,
            rule_bindings=rule.bindings,
            strict=self._settings.strict_templates,
        )
        query_string = self._engine.encode_for_transport(query)
        return Affordance(
            rule_id=rule.rule_id,
            kind=AffordanceKind.POPUP,
            anchor=firing.anchor,
            url=self._settings.query_service_url + query_string,
            query_string=query_string,
            embed_url=self._settings.query_embed_url + query_string,
            icon=rule.presentation.icon,
            tooltip=rule.presentation.tooltip,
            title=title,
        )
