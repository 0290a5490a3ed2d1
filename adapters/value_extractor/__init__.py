from .html_value_extractor import HtmlValueExtractor
from .record_lookup import lookup_datavalue

__all__ = [
    "HtmlValueExtractor",
    "lookup_datavalue",
]
