"""
Port: PageBinder
Odpowiedzialność: dwuetapowe wiązanie strony encji z regułami.
Etap 1 (tytuł strony) musi poprzedzić etap 2 (rekord encji i grupy wyrażeń).
"""
from typing import Any, Iterable, Mapping, Optional, Protocol, runtime_checkable

from contracts import Affordance, EntityBinding, PageSnapshot, StatementGroup


@runtime_checkable
class PageBinder(Protocol):
    def bind_entity(self, page: PageSnapshot) -> Optional[EntityBinding]:
        """
        Stage one. Returns None for pages outside the main namespace or
        without an entity id.
        """
        ...

    def bind_statements(
        self,
        binding: EntityBinding,
        groups: Iterable[StatementGroup],
        record: Mapping[str, Any],
    ) -> list[Affordance]:
        """Stage two. Affordances follow page order of groups and values."""
        ...
