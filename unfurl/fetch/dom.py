from typing import List, Optional

from bs4 import BeautifulSoup, NavigableString
from bs4.element import Tag

from .base import Element

# Text inside these tags is never part of the readable page text
_SKIPPED_TAGS = ("script", "style")


class SoupElement(Element):
    """Element backed by a BeautifulSoup tag. Never mutates the tree."""

    def __init__(self, tag: Tag):
        self._tag = tag

    @classmethod
    def from_html(cls, html: str) -> "SoupElement":
        return cls(BeautifulSoup(html, "html.parser"))

    def find(self, tag: str) -> Optional[Element]:
        found = self._tag.find(tag)
        return SoupElement(found) if found is not None else None

    def find_all(self, tag: str) -> List[Element]:
        return [SoupElement(found) for found in self._tag.find_all(tag)]

    def has_attr(self, name: str) -> bool:
        return self._tag.has_attr(name)

    def get(self, name: str) -> Optional[str]:
        value = self._tag.get(name)
        # multi-valued attributes (class, rel) come back as lists
        if isinstance(value, list):
            value = " ".join(value)
        return value

    def text(self) -> str:
        return self._tag.get_text()

    def plaintext(self) -> str:
        parts = []
        for string in self._tag.find_all(string=True):
            # Comment, Doctype, Script, Stylesheet... are subclasses
            if type(string) is not NavigableString:
                continue
            if string.parent is not None and string.parent.name in _SKIPPED_TAGS:
                continue
            parts.append(str(string))
        return "".join(parts)
