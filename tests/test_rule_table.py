from __future__ import annotations

import pytest
from pydantic import ValidationError

from adapters.rule_table import build_rule_table
from adapters.rule_table.default_rules import DEFAULT_RULES, EntityKey, PropertyKey, RuleDefinition
from config import Settings
from contracts import (
    Anchor,
    AnchorKind,
    ExternalLink,
    Presentation,
    QueryRule,
    RuleLevel,
)

PAINTER = "Q1028181"
RESEARCHER = "Q1650915"


def _ids(rules) -> list[str]:
    return [r.rule_id for r in rules]


def test_occupation_painter_fires_only_painter_rule(settings):
    table = build_rule_table(settings)
    assert _ids(table.value_rules("P106", settings.entities["painter"])) == ["painter_artworks"]
    assert _ids(table.value_rules("P106", PAINTER)) == ["painter_artworks"]


def test_occupation_with_unrecognized_value_fires_nothing(settings):
    table = build_rule_table(settings)
    assert table.value_rules("P106", "Q5") == ()
    assert table.property_rules("P106") == ()


def test_occupation_researcher_fires_scholia_rule(settings):
    table = build_rule_table(settings)
    assert _ids(table.value_rules("P106", RESEARCHER)) == ["researcher_scholia"]


def test_employer_rule_matches_any_entity_value(settings):
    table = build_rule_table(settings)
    assert _ids(table.value_rules("P108", "Q95")) == ["employer_graph"]
    assert _ids(table.value_rules("P108", "Q1")) == ["employer_graph"]


def test_property_level_dispatch(settings):
    table = build_rule_table(settings)
    assert _ids(table.property_rules(settings.properties["studentsCount"])) == ["students_count"]
    assert _ids(table.property_rules("P2124")) == ["members_count"]
    for pid in ("P22", "P25", "P3373", "P26"):
        assert _ids(table.property_rules(pid)) == ["family_tree"]
    assert table.property_rules("P31") == ()
    assert table.value_rules("P31", "Q5") == ()


def test_entity_rules_and_table_size(settings):
    table = build_rule_table(settings)
    assert _ids(table.entity_rules()) == ["entity_graph"]
    # family_tree daje jedną regułę na każdą z czterech właściwości
    assert len(table) == 10
    assert len(table.all_rules()) == 10


def test_fire_link_rule_builds_external_url(settings):
    table = build_rule_table(settings)
    rule = table.property_rules("P22")[0]
    anchor = Anchor(kind=AnchorKind.PROPERTY_LABEL, property_id="P22")

    firing = table.fire(rule, {"entityQid": "Q42"}, anchor)

    assert firing.url == "https://www.entitree.com/en/family_tree/Q42?0u0=u&0u1=u"
    assert firing.template is None
    assert firing.anchor == anchor


def test_fire_query_rule_carries_template_and_bindings(settings):
    table = build_rule_table(settings)
    rule = table.value_rules("P108", "Q95")[0]
    context = {"entityQid": "Q5", "targetEntityQid": "Q95"}

    firing = table.fire(rule, context, Anchor(kind=AnchorKind.VALUE_INDICATOR, property_id="P108", value_index=0))

    assert firing.url is None
    assert "{targetEntityQid}" in firing.template
    assert firing.bindings == context
    assert rule.bindings == {"resultLimit": "100"}


def test_rule_keys_resolve_against_configured_ids():
    properties = dict(Settings().properties, occupation="P999")
    settings = Settings(properties=properties, entities={"painter": "Q7", "researcher": "Q8"})
    table = build_rule_table(settings)

    assert _ids(table.value_rules("P999", "Q7")) == ["painter_artworks"]
    assert table.value_rules("P106", PAINTER) == ()


def test_unconfigured_key_fails_at_build_time():
    with pytest.raises(KeyError):
        build_rule_table(Settings(properties={"occupation": "P106"}))


def test_unknown_external_service_fails_at_build_time():
    with pytest.raises(KeyError):
        build_rule_table(Settings(external_services={"scholia": "https://scholia.toolforge.org/author/"}))


def test_custom_definitions(settings):
    definition = RuleDefinition(
        rule_id="creator_works",
        level=RuleLevel.VALUE,
        properties=(PropertyKey.CREATOR,),
        value=EntityKey.PAINTER,
        template="SELECT ?w WHERE { ?w {propertyPrefix}{creator} {entityPrefix}{targetEntityQid} }",
        presentation=Presentation(icon="ellipsis", tooltip="Works"),
    )
    table = build_rule_table(settings, definitions=[definition])

    assert _ids(table.value_rules("P170", PAINTER)) == ["creator_works"]
    assert table.entity_rules() == ()


def test_default_rules_use_unique_ids():
    ids = [d.rule_id for d in DEFAULT_RULES]
    assert len(ids) == len(set(ids))


def test_query_rule_shape_is_validated():
    presentation = Presentation(icon="ellipsis", tooltip="t")

    with pytest.raises(ValidationError):
        QueryRule(rule_id="x", level=RuleLevel.PROPERTY, match_property="P1", presentation=presentation)
    with pytest.raises(ValidationError):
        QueryRule(
            rule_id="x", level=RuleLevel.PROPERTY, match_property="P1",
            template="q", link=ExternalLink(service="s"), presentation=presentation,
        )
    with pytest.raises(ValidationError):
        QueryRule(rule_id="x", level=RuleLevel.ENTITY, match_property="P1", template="q", presentation=presentation)
    with pytest.raises(ValidationError):
        QueryRule(rule_id="x", level=RuleLevel.PROPERTY, match_property="Q1", template="q", presentation=presentation)
    with pytest.raises(ValidationError):
        QueryRule(
            rule_id="x", level=RuleLevel.PROPERTY, match_property="P1", match_value="Q1",
            template="q", presentation=presentation,
        )


def test_definition_bindings_reach_every_resolved_rule(settings):
    definition = RuleDefinition(
        rule_id="kin_graph",
        level=RuleLevel.PROPERTY,
        properties=(PropertyKey.FATHER, PropertyKey.MOTHER),
        template="SELECT ?x WHERE { ?x ?p ?o } LIMIT {resultLimit}",
        bindings={"resultLimit": "7"},
        presentation=Presentation(icon="ellipsis", tooltip="kin"),
    )
    table = build_rule_table(settings, definitions=[definition])

    assert [r.bindings for r in table.all_rules()] == [{"resultLimit": "7"}] * 2
