import logging

from ..models import SearchResultItem
from ..parser import Document
from .base import BaseExtractor

logger = logging.getLogger("javkit.extractors.search")

ITEM_SELECTOR = ".video-item"


class SearchExtractor(BaseExtractor):
    page = "search"

    def _item(self, doc: Document, el) -> SearchResultItem:
        # Each field is read on its own; a missing sub-element only blanks that field.
        return SearchResultItem(
            title=doc.text("p.inf a", within=el) or "",
            url=doc.attr("a.thumb", "href", within=el),
            thumbnail=doc.data("img.cover", "original", within=el),
            duration=doc.text(".durations", within=el),
            views=doc.text(".viewsthumb", within=el),
            rating=doc.text("ul.list-unstyled li.pull-right", within=el),
        )

    def extract(self, doc: Document, raw_html: str = "") -> list[SearchResultItem]:
        items = [self._item(doc, el) for el in doc.select(ITEM_SELECTOR)]
        logger.debug(f"search page: {len(items)} items")
        return items


def extract_list(doc: Document) -> list[SearchResultItem]:
    return SearchExtractor().extract(doc)
