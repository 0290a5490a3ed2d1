"""
Port: RuleTable
Odpowiedzialność: statyczna tabela reguł i dispatch na poziomie encji,
właściwości i wartości.
"""
from typing import Mapping, Protocol, runtime_checkable

from contracts import Anchor, QueryRule, RuleFiring


@runtime_checkable
class RuleTable(Protocol):
    def entity_rules(self) -> tuple[QueryRule, ...]:
        """Rules attached to the entity title."""
        ...

    def property_rules(self, property_id: str) -> tuple[QueryRule, ...]:
        """Rules keyed solely by property id. Empty tuple = no match."""
        ...

    def value_rules(self, property_id: str, entity_id: str) -> tuple[QueryRule, ...]:
        """Rules keyed by (property id, value entity id), wildcards included."""
        ...

    def fire(self, rule: QueryRule, context: Mapping[str, str], anchor: Anchor) -> RuleFiring:
        """Builds the direct URL or the template + bindings for one firing."""
        ...

    def all_rules(self) -> tuple[QueryRule, ...]:
        ...
