"""
Port: TemplateEngine
Odpowiedzialność: podstawianie nazwanych placeholderów w szablonie zapytania
i kodowanie gotowego zapytania do fragmentu URL.
"""
from typing import Mapping, Optional, Protocol, runtime_checkable


@runtime_checkable
class TemplateEngine(Protocol):
    def render(
        self,
        template: str,
        bindings: Optional[Mapping[str, str]] = None,
        *,
        rule_bindings: Optional[Mapping[str, str]] = None,
        strict: bool = False,
    ) -> str:
        """
        Substitutes {name} placeholders: configuration constants first,
        then rule bindings, then caller bindings. Unbound placeholders are
        left verbatim unless strict=True.
        """
        ...

    def missing_placeholders(
        self,
        template: str,
        bindings: Optional[Mapping[str, str]] = None,
        *,
        rule_bindings: Optional[Mapping[str, str]] = None,
    ) -> list[str]:
        """Placeholder names no layer binds, in order of first appearance."""
        ...

    def encode_for_transport(self, rendered: str) -> str:
        """Returns "#" + percent-encoded query text."""
        ...
