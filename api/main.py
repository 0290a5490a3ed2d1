"""
api/main.py — punkt wejścia FastAPI.

Lifespan:
  - Buduje tabelę reguł z Settings (raz, potem tylko odczyt)
  - Inicjalizuje adaptery (TemplateEngine, ValueExtractor, PageParser, PageBinder)

Settings tworzony raz w create_app() i przekazywany do wszystkich adapterów.
"""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request

from adapters.page_binder.entity_page_binder import EntityPageBinder
from adapters.page_parser.wikibase_html_parser import WikibaseHtmlParser
from adapters.rule_table import build_rule_table
from adapters.template_engine.placeholder_engine import PlaceholderTemplateEngine
from adapters.value_extractor.html_value_extractor import HtmlValueExtractor
from api.routers import bind, extract, render, rules
from api.schemas import HealthResponse
from config import Settings

logger = logging.getLogger("useful_queries")


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings

    # Adaptery bezstanowe — tworzone raz
    app.state.rule_table = build_rule_table(settings)
    app.state.template_engine = PlaceholderTemplateEngine(settings)
    app.state.value_extractor = HtmlValueExtractor()
    app.state.page_parser = WikibaseHtmlParser()
    app.state.page_binder = EntityPageBinder(
        settings=settings,
        rule_table=app.state.rule_table,
        template_engine=app.state.template_engine,
        value_extractor=app.state.value_extractor,
    )

    logger.info("UsefulQueries API ready.")
    yield
    logger.info("Shutting down.")


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or Settings()
    logging.basicConfig(level=settings.log_level.upper())

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )
    app.state.settings = settings

    # Routers
    app.include_router(bind.router)
    app.include_router(extract.router)
    app.include_router(render.router)
    app.include_router(rules.router)

    # Health
    @app.get("/health", response_model=HealthResponse, tags=["health"])
    async def health(request: Request):
        rule_table = getattr(request.app.state, "rule_table", None)
        count = len(rule_table) if rule_table is not None else 0
        return HealthResponse(
            status="ok" if count else "degraded",
            rules=count,
            version=settings.app_version,
        )

    return app


app = create_app()
