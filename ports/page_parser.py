"""
Port: PageParser
Odpowiedzialność: wyrenderowana strona encji → PageSnapshot.
"""
from typing import Protocol, runtime_checkable

from contracts import PageSnapshot


@runtime_checkable
class PageParser(Protocol):
    def parse(self, html: str) -> PageSnapshot:
        """Reads title, namespace and statement groups. Missing parts stay empty."""
        ...
