from typing import List, Optional

class Element:
    """Read-only view of a parsed HTML element.

    A whole document is an Element too (its root). The extractor only talks
    to this interface, so any HTML parser can back it.
    """

    def find(self, tag: str) -> Optional["Element"]:
        raise NotImplementedError

    def find_all(self, tag: str) -> List["Element"]:
        raise NotImplementedError

    def has_attr(self, name: str) -> bool:
        raise NotImplementedError

    def get(self, name: str) -> Optional[str]:
        raise NotImplementedError

    def text(self) -> str:
        raise NotImplementedError

    def plaintext(self) -> str:
        raise NotImplementedError

class PageLoader:
    def load(self, url: str, timeout_sec: Optional[int] = None) -> Optional[Element]:
        """Fetch and parse a page. Returns None on any failure."""
        raise NotImplementedError
