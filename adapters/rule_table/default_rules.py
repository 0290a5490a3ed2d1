"""
adapters/rule_table/default_rules.py — Domyślne reguły i szablony zapytań.

Reguły odwołują się do właściwości i encji przez klucze (PropertyKey, EntityKey),
a nie przez surowe identyfikatory; identyfikatory pochodzą z Settings.
"""
from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from contracts import ExternalLink, Presentation, RuleLevel


class PropertyKey(str, Enum):
    STUDENTS_COUNT = "studentsCount"
    MEMBERS_COUNT = "membersCount"
    FATHER = "father"
    MOTHER = "mother"
    SIBLING = "sibling"
    SPOUSE = "spouse"
    OCCUPATION = "occupation"
    EMPLOYER = "employer"
    CREATOR = "creator"
    IMAGE = "image"
    LOGO = "logo"
    POINT_IN_TIME = "pointInTime"


class EntityKey(str, Enum):
    PAINTER = "painter"
    RESEARCHER = "researcher"


class RuleDefinition(BaseModel):
    """Reguła przed rozwiązaniem kluczy względem Settings."""
    model_config = ConfigDict(frozen=True)

    rule_id: str
    level: RuleLevel
    properties: tuple[PropertyKey, ...] = ()
    value: Optional[EntityKey] = None
    template: Optional[str] = None
    link: Optional[ExternalLink] = None
    bindings: dict[str, str] = Field(default_factory=dict)   # warstwa reguły w szablonie
    presentation: Presentation


# ─────────────────────────── Szablony SPARQL ─────────────────────────────

ENTITY_GRAPH_QUERY = """#defaultView:Graph
SELECT ?node ?nodeLabel ?nodeImage ?childNode ?childNodeLabel ?childNodeImage ?rgb WHERE {
  {
    BIND({entityPrefix}{entityQid} AS ?node)
    ?node ?p ?i.
    OPTIONAL { ?node {propertyPrefix}{image} ?nodeImage. }
    ?childNode ?x ?p.
    ?childNode rdf:type wikibase:Property.
    FILTER(STRSTARTS(STR(?i), "{conceptUri}Q"))
    FILTER(STRSTARTS(STR(?childNode), "{conceptUri}P"))
  }
  UNION
  {
    BIND("EFFBD8" AS ?rgb)
    {entityPrefix}{entityQid} ?p ?childNode.
    OPTIONAL { ?childNode {propertyPrefix}{image} ?childNodeImage. }
    ?node ?x ?p.
    ?node rdf:type wikibase:Property.
    FILTER(STRSTARTS(STR(?childNode), "{conceptUri}Q"))
  }
  OPTIONAL {
    ?node {propertyPrefix}{image} ?nodeImage.
    ?childNode {propertyPrefix}{image} ?childNodeImage.
  }
  SERVICE wikibase:label { bd:serviceParam wikibase:language "{userLanguage}". }
}"""

STUDENTS_COUNT_QUERY = """#defaultView:LineChart
SELECT ?pit ?s_count WHERE {
  {entityPrefix}{entityQid} p:{studentsCount} ?statement.
  ?statement ps:{studentsCount} ?s_count.
  OPTIONAL { ?statement pq:{pointInTime} ?pit. }
}"""

MEMBERS_COUNT_QUERY = """#defaultView:LineChart
SELECT ?pit ?s_count WHERE {
  {entityPrefix}{entityQid} p:{membersCount} ?statement.
  ?statement ps:{membersCount} ?s_count.
  OPTIONAL { ?statement pq:{pointInTime} ?pit. }
}"""

ARTWORKS_QUERY = """#defaultView:ImageGrid
SELECT ?item ?creator ?creatorLabel ?image WHERE {
  SERVICE wikibase:label { bd:serviceParam wikibase:language "[AUTO_LANGUAGE],en". }
  ?item {propertyPrefix}{creator} {entityPrefix}{entityQid}.
  OPTIONAL { ?item {propertyPrefix}{image} ?image. }
}
LIMIT 100"""

EMPLOYER_QUERY = """#defaultView:Graph
SELECT DISTINCT ?employee ?employeeLabel ?imageEmp ?org ?orgLabel ?imageOrg WHERE {
  SERVICE wikibase:label { bd:serviceParam wikibase:language "[AUTO_LANGUAGE],en". }
  VALUES ?org {
    {entityPrefix}{targetEntityQid}
  }
  ?employee {propertyPrefix}{employer} ?org.
  OPTIONAL { ?employee {propertyPrefix}{image} ?imageEmp. }
  OPTIONAL { ?org {propertyPrefix}{logo} ?imageOrg. }
}
LIMIT {resultLimit}"""


# ─────────────────────────── Reguły ──────────────────────────────────────

_POPUP_ICON = "ellipsis"

DEFAULT_RULES: tuple[RuleDefinition, ...] = (
    RuleDefinition(
        rule_id="entity_graph",
        level=RuleLevel.ENTITY,
        template=ENTITY_GRAPH_QUERY,
        presentation=Presentation(
            icon=_POPUP_ICON,
            tooltip="Click to see entity graph",
            title="Entity Graph of {entityLabel}",
        ),
    ),
    RuleDefinition(
        rule_id="students_count",
        level=RuleLevel.PROPERTY,
        properties=(PropertyKey.STUDENTS_COUNT,),
        template=STUDENTS_COUNT_QUERY,
        presentation=Presentation(
            icon=_POPUP_ICON,
            tooltip="Students count over time",
            title='Students count of "{entityLabel}" over time:',
        ),
    ),
    RuleDefinition(
        rule_id="members_count",
        level=RuleLevel.PROPERTY,
        properties=(PropertyKey.MEMBERS_COUNT,),
        template=MEMBERS_COUNT_QUERY,
        presentation=Presentation(
            icon=_POPUP_ICON,
            tooltip="Members count over time",
            title="Members count of {entityLabel} over time:",
        ),
    ),
    RuleDefinition(
        rule_id="family_tree",
        level=RuleLevel.PROPERTY,
        properties=(
            PropertyKey.FATHER,
            PropertyKey.MOTHER,
            PropertyKey.SIBLING,
            PropertyKey.SPOUSE,
        ),
        link=ExternalLink(service="entitree", suffix="?0u0=u&0u1=u"),
        presentation=Presentation(
            icon="articleDisambiguation",
            tooltip="Familytree on Entitree",
        ),
    ),
    RuleDefinition(
        rule_id="painter_artworks",
        level=RuleLevel.VALUE,
        properties=(PropertyKey.OCCUPATION,),
        value=EntityKey.PAINTER,
        template=ARTWORKS_QUERY,
        presentation=Presentation(
            icon=_POPUP_ICON,
            tooltip="Artworks by this painter in Wikimedia Commons",
            title="Artworks by {entityLabel}",
        ),
    ),
    RuleDefinition(
        rule_id="researcher_scholia",
        level=RuleLevel.VALUE,
        properties=(PropertyKey.OCCUPATION,),
        value=EntityKey.RESEARCHER,
        link=ExternalLink(service="scholia"),
        presentation=Presentation(
            icon="articleSearch",
            tooltip="Page on Scholia",
        ),
    ),
    RuleDefinition(
        rule_id="employer_graph",
        level=RuleLevel.VALUE,
        properties=(PropertyKey.EMPLOYER,),
        template=EMPLOYER_QUERY,
        bindings={"resultLimit": "100"},
        presentation=Presentation(
            icon=_POPUP_ICON,
            tooltip="Other employees of this organization as graph",
            title="{resultLimit} other employees of {targetEntityLabel}",
        ),
    ),
)
