"""
_printer.py — wyświetlanie affordancji na stdout (tryb verbose).
"""
from __future__ import annotations

from contracts import Affordance, EntityRef

_BAR = "─" * 64


def print_affordances(entity: EntityRef | None, affordances: list[Affordance]) -> None:
    """Drukuje encję i listę affordancji na stdout."""
    print(_BAR)
    if entity is None:
        print("ENTITY » (brak)")
    else:
        print(f"ENTITY » {entity.entity_id} {entity.label}")
    if not affordances:
        print("  (brak affordancji)")
        print(_BAR)
        return
    for i, aff in enumerate(affordances, 1):
        where = aff.anchor.kind.value
        if aff.anchor.property_id:
            where += f":{aff.anchor.property_id}"
        if aff.anchor.value_index is not None:
            where += f"[{aff.anchor.value_index}]"
        url = aff.url[:80] + ("…" if len(aff.url) > 80 else "")
        print(f"  [{i}] {aff.kind.value:<5} {aff.rule_id}  @{where}  {url}")
    print(_BAR)
