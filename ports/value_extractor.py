"""
Port: ValueExtractor
Odpowiedzialność: z markupu wartości i rekordu encji ustala tożsamość wartości.
"""
from typing import Any, Mapping, Protocol, runtime_checkable

from contracts import ExtractedValue


@runtime_checkable
class ValueExtractor(Protocol):
    def extract(
        self,
        markup: str,
        record: Mapping[str, Any],
        property_id: str,
        statement_index: int = 0,
    ) -> ExtractedValue:
        """
        Resolves a rendered value to EntityValue / StringLiteral /
        TypedLiteral / Unresolved. Never raises for a bad record.
        """
        ...
