"""
Adapter: PlaceholderTemplateEngine
Podstawianie {nazwa} w szablonach SPARQL i kodowanie do fragmentu URL.

Warstwy wiązań (pierwsza, która zna nazwę, wygrywa):
  1. stałe konfiguracji (prefiksy, identyfikatory właściwości i encji)
  2. wiązania reguły
  3. wiązania wywołującego (kontekst wyrażenia)

Jedno przejście regexem: podstawiony tekst nie jest ponownie rozwijany.
"""
from __future__ import annotations

import logging
import re
from typing import Mapping, Optional
from urllib.parse import quote

from config import Settings

logger = logging.getLogger("useful_queries.template_engine")

# Nawiasy SPARQL ("WHERE {", "{ ?s") nie pasują: nazwa musi przylegać do '{'.
_PLACEHOLDER_RE = re.compile(r"\{([A-Za-z_][A-Za-z0-9_]*)\}")

# Zbiór znaków, których encodeURIComponent nie koduje (poza alfanumerycznymi).
_TRANSPORT_SAFE = "-_.!~*'()"


class UnresolvedPlaceholderError(ValueError):
    """Rzucany przez tryb ścisły, gdy placeholder nie ma wiązania."""

    def __init__(self, missing: list[str]) -> None:
        self.missing = missing
        super().__init__("Unresolved placeholders: " + ", ".join(missing))


def placeholder_names(template: str) -> list[str]:
    """Unikalne nazwy placeholderów w kolejności pierwszego wystąpienia."""
    seen: dict[str, None] = {}
    for m in _PLACEHOLDER_RE.finditer(template):
        seen.setdefault(m.group(1), None)
    return list(seen)


class PlaceholderTemplateEngine:
    def __init__(self, settings: Settings | None = None) -> None:
        self._constants: dict[str, str] = (
            settings.template_constants() if settings is not None else {}
        )

    @property
    def constants(self) -> dict[str, str]:
        return dict(self._constants)

    def render(
        self,
        template: str,
        bindings: Optional[Mapping[str, str]] = None,
        *,
        rule_bindings: Optional[Mapping[str, str]] = None,
        strict: bool = False,
    ) -> str:
        layers = (self._constants, rule_bindings or {}, bindings or {})

        missing: dict[str, None] = {}

        def _substitute(m: re.Match[str]) -> str:
            name = m.group(1)
            for layer in layers:
                if name in layer:
                    return str(layer[name])
            missing.setdefault(name, None)
            return m.group(0)

        rendered = _PLACEHOLDER_RE.sub(_substitute, template)

        if missing:
            if strict:
                raise UnresolvedPlaceholderError(list(missing))
            logger.debug("Placeholders left unresolved: %s", ", ".join(missing))
        return rendered

    def missing_placeholders(
        self,
        template: str,
        bindings: Optional[Mapping[str, str]] = None,
        *,
        rule_bindings: Optional[Mapping[str, str]] = None,
    ) -> list[str]:
        known = set(self._constants) | set(rule_bindings or {}) | set(bindings or {})
        return [name for name in placeholder_names(template) if name not in known]

    def encode_for_transport(self, rendered: str) -> str:
        return "#" + quote(rendered, safe=_TRANSPORT_SAFE)
