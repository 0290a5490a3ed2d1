"""
dependencies.py — FastAPI Dependency Injection.
Każda zależność zwraca odpowiedni adapter przez Request.app.state,
typowany portem, który adapter implementuje.
"""
from __future__ import annotations

from fastapi import Request

from config import Settings
from ports.page_binder import PageBinder
from ports.page_parser import PageParser
from ports.rule_table import RuleTable
from ports.template_engine import TemplateEngine
from ports.value_extractor import ValueExtractor


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_rule_table(request: Request) -> RuleTable:
    return request.app.state.rule_table


def get_template_engine(request: Request) -> TemplateEngine:
    return request.app.state.template_engine


def get_value_extractor(request: Request) -> ValueExtractor:
    return request.app.state.value_extractor


def get_page_parser(request: Request) -> PageParser:
    return request.app.state.page_parser


def get_page_binder(request: Request) -> PageBinder:
    return request.app.state.page_binder
