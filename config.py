"""
config.py — Konfiguracja instancji Wikibase przez zmienne środowiskowe.
Wszystkie zmienne mają prefiks USEFUL_QUERIES_.

Settings jest zamrożony: tworzony raz w create_app() i przekazywany do adapterów.
"""
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Identyfikatory Wikidata; dla innej instancji Wikibase nadpisz przez env (JSON)
_DEFAULT_PROPERTIES: dict[str, str] = {
    "studentsCount": "P2196",
    "membersCount": "P2124",
    "father": "P22",
    "mother": "P25",
    "sibling": "P3373",
    "spouse": "P26",
    "occupation": "P106",
    "employer": "P108",
    "creator": "P170",
    "image": "P18",
    "logo": "P154",
    "pointInTime": "P585",
}

_DEFAULT_ENTITIES: dict[str, str] = {
    "painter": "Q1028181",
    "researcher": "Q1650915",
}

_DEFAULT_EXTERNAL_SERVICES: dict[str, str] = {
    "entitree": "https://www.entitree.com/en/family_tree/",
    "scholia": "https://scholia.toolforge.org/author/",
}


class Settings(BaseSettings):
    # Query service
    query_service_url: str = "https://query.wikidata.org/"
    query_embed_url: str = "https://query.wikidata.org/embed.html"
    entity_prefix: str = "wd:"
    property_prefix: str = "wdt:"
    concept_uri: str = "http://www.wikidata.org/entity/"

    # Mapowania identyfikatorów używane w szablonach zapytań
    properties: dict[str, str] = Field(default_factory=lambda: dict(_DEFAULT_PROPERTIES))
    entities: dict[str, str] = Field(default_factory=lambda: dict(_DEFAULT_ENTITIES))
    external_services: dict[str, str] = Field(
        default_factory=lambda: dict(_DEFAULT_EXTERNAL_SERVICES)
    )

    # Strona encji
    default_user_language: str = "en"
    main_namespace: int = 0

    # False = nierozwiązane placeholdery zostają w zapytaniu (zachowanie domyślne)
    strict_templates: bool = False

    # Logging
    log_level: str = "INFO"

    # App
    app_title: str = "UsefulQueries"
    app_version: str = "0.1.0"

    model_config = SettingsConfigDict(
        env_prefix="USEFUL_QUERIES_",
        env_file=".env",
        extra="ignore",
        frozen=True,
    )

    def template_constants(self) -> dict[str, str]:
        """Pierwsza warstwa wiązań każdego renderowanego szablonu."""
        constants = {
            "entityPrefix": self.entity_prefix,
            "propertyPrefix": self.property_prefix,
            "conceptUri": self.concept_uri,
        }
        constants.update(self.properties)
        constants.update(self.entities)
        return constants
