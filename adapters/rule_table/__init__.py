"""
Pakiet adaptera tabeli reguł.

Publiczny import:
    from adapters.rule_table import build_rule_table
"""

from adapters.rule_table.static_rule_table import StaticRuleTable, build_rule_table

__all__ = ["StaticRuleTable", "build_rule_table"]
