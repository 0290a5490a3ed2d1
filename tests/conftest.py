from __future__ import annotations

import pytest

from config import Settings

ENTITY_PAGE_HTML = """<!DOCTYPE html>
<html>
<head>
<script>RLCONF={"wgCanonicalNamespace":"","wgNamespaceNumber":0,"wgTitle":"Q42","wgUserLanguage":"de"};</script>
</head>
<body>
<h1 class="firstHeading wikibase-title">
  <span class="wikibase-title-label">Douglas Adams</span>
  <span class="wikibase-title-id">(Q42)</span>
</h1>

<div class="wikibase-statementgroupview" id="P106">
  <div class="wikibase-statementgroupview-property">
    <div class="wikibase-statementgroupview-property-label"><a title="Property:P106" href="/wiki/Property:P106">occupation</a></div>
  </div>
  <div class="wikibase-statementlistview">
    <div class="wikibase-statementview">
      <div class="wikibase-statementview-mainsnak-container">
        <div class="wikibase-snakview">
          <div class="wikibase-snakview-property"></div>
          <div class="wikibase-snakview-value-container">
            <div class="wikibase-snakview-indicators"></div>
            <div class="wikibase-snakview-value wikibase-snakview-variation-valuesnak"><a title="Q1028181" href="/wiki/Q1028181">painter</a></div>
          </div>
        </div>
      </div>
    </div>
    <div class="wikibase-statementview">
      <div class="wikibase-statementview-mainsnak-container">
        <div class="wikibase-snakview">
          <div class="wikibase-snakview-property"></div>
          <div class="wikibase-snakview-value-container">
            <div class="wikibase-snakview-indicators"></div>
            <div class="wikibase-snakview-value wikibase-snakview-variation-valuesnak"><a title="Q36180: writer" href="/wiki/Q36180">writer</a></div>
          </div>
        </div>
      </div>
    </div>
  </div>
</div>

<div class="wikibase-statementgroupview" id="P569">
  <div class="wikibase-statementgroupview-property">
    <div class="wikibase-statementgroupview-property-label"><a title="Property:P569" href="/wiki/Property:P569">date of birth</a></div>
  </div>
  <div class="wikibase-statementlistview">
    <div class="wikibase-statementview">
      <div class="wikibase-statementview-mainsnak-container">
        <div class="wikibase-snakview">
          <div class="wikibase-snakview-property"><a title="Property:P569" href="/wiki/Property:P569">date of birth</a></div>
          <div class="wikibase-snakview-value-container">
            <div class="wikibase-snakview-indicators"></div>
            <div class="wikibase-snakview-value wikibase-snakview-variation-valuesnak">11 March 1952</div>
          </div>
        </div>
      </div>
    </div>
  </div>
</div>

<div class="wikibase-statementgroupview" id="P108">
  <div class="wikibase-statementgroupview-property">
    <div class="wikibase-statementgroupview-property-label"><a title="Property:P108" href="/wiki/Property:P108">employer</a></div>
  </div>
  <div class="wikibase-statementlistview">
    <div class="wikibase-statementview">
      <div class="wikibase-statementview-mainsnak-container">
        <div class="wikibase-snakview">
          <div class="wikibase-snakview-property"></div>
          <div class="wikibase-snakview-value-container">
            <div class="wikibase-snakview-indicators"></div>
            <div class="wikibase-snakview-value wikibase-snakview-variation-valuesnak"><a title="Q95" href="/wiki/Q95">Google</a></div>
          </div>
        </div>
        <div class="wikibase-statementview-qualifiers">
          <div class="wikibase-snakview">
            <div class="wikibase-snakview-property"><a title="Property:P580" href="/wiki/Property:P580">start time</a></div>
            <div class="wikibase-snakview-value-container">
              <div class="wikibase-snakview-value wikibase-snakview-variation-valuesnak">1999</div>
            </div>
          </div>
        </div>
      </div>
    </div>
  </div>
</div>

<div class="wikibase-statementgroupview" id="P1477">
  <div class="wikibase-statementgroupview-property">
    <div class="wikibase-statementgroupview-property-label"><a title="Property:P1477" href="/wiki/Property:P1477">birth name</a></div>
  </div>
  <div class="wikibase-statementlistview">
    <div class="wikibase-statementview">
      <div class="wikibase-statementview-mainsnak-container">
        <div class="wikibase-snakview">
          <div class="wikibase-snakview-property"></div>
          <div class="wikibase-snakview-value-container">
            <div class="wikibase-snakview-indicators"></div>
            <div class="wikibase-snakview-value wikibase-snakview-variation-valuesnak"><span class="wb-monolingualtext-value" lang="en">Douglas Noël Adams</span> <span class="wb-monolingualtext-language-name">(English)</span></div>
          </div>
        </div>
      </div>
    </div>
  </div>
</div>

<div class="wikibase-statementgroupview" id="sitelinks-wikipedia">
  <div class="wikibase-statementgroupview-property-label">Wikipedia</div>
</div>
</body>
</html>
"""

ENTITY_RECORD = {
    "id": "Q42",
    "claims": {
        "P106": [
            {"mainsnak": {"snaktype": "value", "property": "P106", "datavalue": {
                "type": "wikibase-entityid", "value": {"id": "Q1028181"}}}},
            {"mainsnak": {"snaktype": "value", "property": "P106", "datavalue": {
                "type": "wikibase-entityid", "value": {"id": "Q36180"}}}},
        ],
        "P569": [
            {"mainsnak": {"snaktype": "value", "property": "P569", "datavalue": {
                "type": "time", "value": {"time": "+1952-03-11T00:00:00Z", "precision": 11}}}},
        ],
        "P108": [
            {"mainsnak": {"snaktype": "value", "property": "P108", "datavalue": {
                "type": "wikibase-entityid", "value": {"id": "Q95"}}}},
        ],
        "P1477": [
            {"mainsnak": {"snaktype": "value", "property": "P1477", "datavalue": {
                "type": "monolingualtext", "value": {"text": "Douglas Noël Adams", "language": "en"}}}},
        ],
    },
}


@pytest.fixture
def settings() -> Settings:
    return Settings()


@pytest.fixture
def entity_page_html() -> str:
    return ENTITY_PAGE_HTML


@pytest.fixture
def entity_record() -> dict:
    return ENTITY_RECORD
