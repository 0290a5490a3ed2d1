"""
Adapter: StaticRuleTable
Implementuje port RuleTable: tabela reguł budowana raz z Settings,
potem tylko do odczytu.

Dispatch:
  - entity_rules()                 → reguły tytułu strony
  - property_rules(pid)            → raz na grupę wyrażeń
  - value_rules(pid, qid)          → raz na wartość (dokładne + wildcard)
Brak dopasowania = pusta krotka, nie błąd.
"""
from __future__ import annotations

import logging
from collections import defaultdict
from types import MappingProxyType
from typing import Iterable, Mapping

from adapters.rule_table.default_rules import DEFAULT_RULES, RuleDefinition
from config import Settings
from contracts import Anchor, QueryRule, RuleFiring, RuleLevel

logger = logging.getLogger("useful_queries.rule_table")


class StaticRuleTable:
    def __init__(
        self,
        rules: Iterable[QueryRule],
        external_services: Mapping[str, str],
    ) -> None:
        self._rules: tuple[QueryRule, ...] = tuple(rules)
        self._services = MappingProxyType(dict(external_services))

        entity: list[QueryRule] = []
        by_property: dict[str, list[QueryRule]] = defaultdict(list)
        by_value: dict[str, list[QueryRule]] = defaultdict(list)
        for rule in self._rules:
            if rule.link is not None and rule.link.service not in self._services:
                raise KeyError(f"Unknown external service {rule.link.service!r} in rule {rule.rule_id!r}")
            if rule.level == RuleLevel.ENTITY:
                entity.append(rule)
            elif rule.level == RuleLevel.PROPERTY:
                by_property[rule.match_property].append(rule)
            else:
                by_value[rule.match_property].append(rule)

        self._entity = tuple(entity)
        self._by_property = MappingProxyType({k: tuple(v) for k, v in by_property.items()})
        self._by_value = MappingProxyType({k: tuple(v) for k, v in by_value.items()})

    # -- RuleTable protocol ---------------------------------

    def entity_rules(self) -> tuple[QueryRule, ...]:
        return self._entity

    def property_rules(self, property_id: str) -> tuple[QueryRule, ...]:
        return self._by_property.get(property_id, ())

    def value_rules(self, property_id: str, entity_id: str) -> tuple[QueryRule, ...]:
        candidates = self._by_value.get(property_id, ())
        return tuple(
            rule for rule in candidates
            if rule.match_value is None or rule.match_value == entity_id
        )

    def fire(self, rule: QueryRule, context: Mapping[str, str], anchor: Anchor) -> RuleFiring:
        if rule.link is not None:
            # Serwisy zewnętrzne są kluczowane identyfikatorem głównej encji
            url = self._services[rule.link.service] + context["entityQid"] + rule.link.suffix
            return RuleFiring(rule=rule, anchor=anchor, url=url)
        return RuleFiring(
            rule=rule,
            anchor=anchor,
            template=rule.template,
            bindings=dict(context),
        )

    def all_rules(self) -> tuple[QueryRule, ...]:
        return self._rules

    def __len__(self) -> int:
        return len(self._rules)


def resolve_definitions(
    definitions: Iterable[RuleDefinition],
    settings: Settings,
) -> list[QueryRule]:
    """
    Zamienia klucze PropertyKey/EntityKey na identyfikatory z Settings.
    Definicja z kilkoma właściwościami daje jedną regułę na właściwość.
    Nieznany klucz → KeyError (błąd startu, nie strony).
    """
    rules: list[QueryRule] = []
    for definition in definitions:
        match_value = None
        if definition.value is not None:
            match_value = _lookup(settings.entities, definition.value.value, definition.rule_id)

        common = dict(
            rule_id=definition.rule_id,
            level=definition.level,
            template=definition.template,
            link=definition.link,
            bindings=dict(definition.bindings),
            presentation=definition.presentation,
        )
        if definition.level == RuleLevel.ENTITY:
            rules.append(QueryRule(**common))
            continue
        for key in definition.properties:
            rules.append(QueryRule(
                **common,
                match_property=_lookup(settings.properties, key.value, definition.rule_id),
                match_value=match_value,
            ))
    return rules


def _lookup(mapping: Mapping[str, str], key: str, rule_id: str) -> str:
    try:
        return mapping[key]
    except KeyError:
        raise KeyError(f"Rule {rule_id!r} references unconfigured key {key!r}")


def build_rule_table(
    settings: Settings,
    definitions: Iterable[RuleDefinition] = DEFAULT_RULES,
) -> StaticRuleTable:
    rules = resolve_definitions(definitions, settings)
    table = StaticRuleTable(rules, settings.external_services)
    logger.info("Rule table loaded: %d rules", len(table))
    return table
