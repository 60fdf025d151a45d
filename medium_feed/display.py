from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Dict, Optional

from bs4 import BeautifulSoup
from bs4.element import Tag


class DisplayContext(ABC):
    """Where rendered markup ends up: surfaces looked up by a stable id."""

    @abstractmethod
    def find_surface(self, surface_id: str) -> Optional[object]:
        """Return the surface registered under ``surface_id`` or ``None``."""

    @abstractmethod
    def set_content(self, surface: object, markup: str) -> None:
        """Replace whatever the surface currently shows with ``markup``."""


class InMemoryDisplay(DisplayContext):
    """Keeps surface contents as plain strings keyed by surface id."""

    def __init__(self, surface_ids: Optional[list[str]] = None) -> None:
        self.contents: Dict[str, str] = {surface_id: "" for surface_id in surface_ids or []}

    def find_surface(self, surface_id: str) -> Optional[str]:
        return surface_id if surface_id in self.contents else None

    def set_content(self, surface: object, markup: str) -> None:
        self.contents[str(surface)] = markup


class HtmlDocumentDisplay(DisplayContext):
    """An HTML page whose elements are addressed by their ``id`` attribute."""

    def __init__(self, html: str) -> None:
        self._soup = BeautifulSoup(html, "html.parser")

    def find_surface(self, surface_id: str) -> Optional[Tag]:
        if not surface_id:
            return None
        element = self._soup.find(id=surface_id)
        return element if isinstance(element, Tag) else None

    def set_content(self, surface: object, markup: str) -> None:
        if not isinstance(surface, Tag):
            raise TypeError("surface must be an element of this document")
        surface.clear()
        fragment = BeautifulSoup(markup, "html.parser")
        for node in list(fragment.contents):
            surface.append(node.extract())

    def html(self) -> str:
        return str(self._soup)
