"""
contracts.py — Jedyne źródło prawdy dla wszystkich typów danych w UsefulQueries.
Wszystkie moduły importują WYŁĄCZNIE stąd. Nie modyfikować bez versioning.
"""
from __future__ import annotations

import re
from enum import Enum
from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator, model_validator

CONTRACTS_VERSION = "1.0.0"

ENTITY_ID_RE = re.compile(r"^Q[1-9]\d*$")
PROPERTY_ID_RE = re.compile(r"^P[1-9]\d*$")


def is_entity_id(value: str | None) -> bool:
    return bool(value) and ENTITY_ID_RE.match(value) is not None


def is_property_id(value: str | None) -> bool:
    return bool(value) and PROPERTY_ID_RE.match(value) is not None


# ─────────────────────────── Identyfikatory ──────────────────────────────

class EntityRef(BaseModel):
    model_config = ConfigDict(frozen=True)

    entity_id: str
    label: str = ""

    @field_validator("entity_id")
    @classmethod
    def _check_entity_id(cls, v: str) -> str:
        if not is_entity_id(v):
            raise ValueError(f"not an entity id: {v!r}")
        return v


class PropertyRef(BaseModel):
    model_config = ConfigDict(frozen=True)

    property_id: str
    label: str = ""

    @field_validator("property_id")
    @classmethod
    def _check_property_id(cls, v: str) -> str:
        if not is_property_id(v):
            raise ValueError(f"not a property id: {v!r}")
        return v


# ─────────────────────────── Strona encji ────────────────────────────────

class Snak(BaseModel):
    """Wyrenderowana wartość w grupie wyrażeń: snak główny albo kwalifikator."""
    model_config = ConfigDict(frozen=True)

    index: int = Field(ge=0)              # pozycja w grupie (kolejność renderowania)
    statement_index: int = Field(default=0, ge=0)  # pozycja wyrażenia w claims[pid]
    qualifier: bool = False               # wartość z .wikibase-statementview-qualifiers
    markup: str                           # inner HTML elementu wartości
    property_id: Optional[str] = None     # nadpisanie z linku właściwości snaka


class StatementGroup(BaseModel):
    model_config = ConfigDict(frozen=True)

    property: PropertyRef
    snaks: tuple[Snak, ...] = ()


class PageSnapshot(BaseModel):
    model_config = ConfigDict(frozen=True)

    entity: Optional[EntityRef] = None
    namespace: Optional[int] = None       # None = nieznana, traktowana jak główna
    user_language: Optional[str] = None
    statement_groups: tuple[StatementGroup, ...] = ()


# ─────────────────────────── ExtractedValue ──────────────────────────────

class EntityValue(BaseModel):
    kind: Literal["entity"] = "entity"
    entity_id: str
    label: str = ""

    @computed_field  # type: ignore[prop-decorator]
    @property
    def query_term(self) -> Optional[str]:
        return self.entity_id


class StringLiteral(BaseModel):
    kind: Literal["string"] = "string"
    label: str
    literal: Optional[str] = None  # '"tekst"' albo None (monolingual text)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def query_term(self) -> Optional[str]:
        return self.literal


class TypedLiteral(BaseModel):
    kind: Literal["typed"] = "typed"
    datatype: Literal["time", "quantity"]
    raw_value: str
    label: str = ""

    @computed_field  # type: ignore[prop-decorator]
    @property
    def query_term(self) -> Optional[str]:
        if self.datatype == "time":
            return f'"{self.raw_value}"^^xsd:dateTime'
        return self.raw_value


class Unresolved(BaseModel):
    kind: Literal["unresolved"] = "unresolved"
    label: str = ""
    reason: Optional[str] = None

    @computed_field  # type: ignore[prop-decorator]
    @property
    def query_term(self) -> Optional[str]:
        return None


ExtractedValue = Annotated[
    Union[EntityValue, StringLiteral, TypedLiteral, Unresolved],
    Field(discriminator="kind"),
]


# ─────────────────────────── Record lookup ───────────────────────────────

class LookupErrorKind(str, Enum):
    MISSING_PROPERTY = "missing_property"
    MISSING_STATEMENT = "missing_statement"
    MISSING_DATAVALUE = "missing_datavalue"
    MALFORMED = "malformed"


class LookupOk(BaseModel):
    ok: Literal[True] = True
    datatype: str          # mainsnak.datavalue.type
    value: Any             # mainsnak.datavalue.value


class LookupErr(BaseModel):
    ok: Literal[False] = False
    kind: LookupErrorKind
    detail: str = ""


LookupResult = Union[LookupOk, LookupErr]


# ─────────────────────────── Reguły ──────────────────────────────────────

class RuleLevel(str, Enum):
    ENTITY = "entity"      # tytuł strony, raz na stronę
    PROPERTY = "property"  # etykieta właściwości, raz na grupę
    VALUE = "value"        # wskaźnik wartości, raz na snak


class Presentation(BaseModel):
    model_config = ConfigDict(frozen=True)

    icon: str
    tooltip: str
    title: str = ""        # może zawierać {entityLabel} / {targetEntityLabel}


class ExternalLink(BaseModel):
    model_config = ConfigDict(frozen=True)

    service: str           # klucz w Settings.external_services
    suffix: str = ""


class QueryRule(BaseModel):
    model_config = ConfigDict(frozen=True)

    rule_id: str
    level: RuleLevel
    match_property: Optional[str] = None
    match_value: Optional[str] = None      # None na poziomie VALUE = dowolna encja
    template: Optional[str] = None
    link: Optional[ExternalLink] = None
    bindings: dict[str, str] = Field(default_factory=dict)
    presentation: Presentation

    @model_validator(mode="after")
    def _check_shape(self) -> QueryRule:
        if (self.template is None) == (self.link is None):
            raise ValueError(f"rule {self.rule_id!r} needs exactly one of template/link")
        if self.level == RuleLevel.ENTITY:
            if self.match_property is not None or self.match_value is not None:
                raise ValueError(f"entity rule {self.rule_id!r} cannot match a property")
        elif not is_property_id(self.match_property):
            raise ValueError(f"rule {self.rule_id!r} has invalid match_property")
        if self.match_value is not None:
            if self.level != RuleLevel.VALUE:
                raise ValueError(f"only value rules may set match_value ({self.rule_id!r})")
            if not is_entity_id(self.match_value):
                raise ValueError(f"rule {self.rule_id!r} has invalid match_value")
        return self


# ─────────────────────────── Wyjście bindera ─────────────────────────────

class AnchorKind(str, Enum):
    ENTITY_TITLE = "entity_title"
    PROPERTY_LABEL = "property_label"
    VALUE_INDICATOR = "value_indicator"


class Anchor(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: AnchorKind
    property_id: Optional[str] = None
    value_index: Optional[int] = None


class RuleFiring(BaseModel):
    rule: QueryRule
    anchor: Anchor
    url: Optional[str] = None                 # reguła-link: gotowy URL
    template: Optional[str] = None            # reguła-zapytanie: szablon do renderowania
    bindings: dict[str, str] = Field(default_factory=dict)


class AffordanceKind(str, Enum):
    LINK = "link"
    POPUP = "popup"


class Affordance(BaseModel):
    rule_id: str
    kind: AffordanceKind
    anchor: Anchor
    url: str                                  # cel kliknięcia ikony
    query_string: Optional[str] = None        # "#" + zakodowane zapytanie
    embed_url: Optional[str] = None           # źródło iframe w popupie
    icon: str
    tooltip: str
    title: str = ""


class EntityBinding(BaseModel):
    """Wynik etapu 1; wymagane wejście wiązania grup wyrażeń."""
    entity: EntityRef
    user_language: str
    affordances: list[Affordance] = Field(default_factory=list)
