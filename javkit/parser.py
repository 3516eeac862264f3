"""Lenient HTML parsing with CSS selector helpers.

Absent elements yield None / empty lists, never errors.
"""

from typing import Optional

from bs4 import BeautifulSoup, Tag

# Pure-python backend; tolerates any malformed markup without extra deps.
PARSER = "html.parser"


def text_of(node: Optional[Tag]) -> str:
    if node is None:
        return ""
    return node.get_text().strip()


class Document:
    """Queryable document tree. `within` scopes a query to a sub-element."""

    def __init__(self, html: str):
        self.soup = BeautifulSoup(html or "", PARSER)

    def _root(self, within: Optional[Tag]):
        return self.soup if within is None else within

    def select(self, selector: str, within: Optional[Tag] = None) -> list[Tag]:
        return self._root(within).select(selector)

    def select_one(self, selector: str, within: Optional[Tag] = None) -> Optional[Tag]:
        return self._root(within).select_one(selector)

    def text(self, selector: str, within: Optional[Tag] = None) -> Optional[str]:
        """Trimmed text of all matches joined together, None if nothing matched."""
        nodes = self.select(selector, within)
        if not nodes:
            return None
        return "".join(n.get_text() for n in nodes).strip()

    def attr(self, selector: str, name: str, within: Optional[Tag] = None) -> Optional[str]:
        """Attribute of the first match, None if no match or attribute missing."""
        node = self.select_one(selector, within)
        if node is None:
            return None
        value = node.get(name)
        if isinstance(value, list):
            # bs4 returns multi-valued attributes (class, rel) as lists
            value = " ".join(value)
        return value

    def data(self, selector: str, key: str, within: Optional[Tag] = None) -> Optional[str]:
        """Read a data-* attribute, e.g. data-original on lazy-loaded images."""
        return self.attr(selector, f"data-{key}", within)


def parse(html: str) -> Document:
    return Document(html)
