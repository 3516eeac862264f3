import logging
import re
from typing import Optional

from ..models import QUALITY_TIERS, VideoDetail
from ..parser import Document, text_of
from .base import BaseExtractor

logger = logging.getLogger("javkit.extractors.detail")

# Sources live in inline player config, not in markup: label -> one capture group.
SOURCE_PATTERNS = {
    "480p": re.compile(r"video_url:\s*'([^']+)'"),
    "720p": re.compile(r"video_alt_url:\s*'([^']+)'"),
    "1080p": re.compile(r"video_alt_url2:\s*'([^']+)'"),
}

TITLE_SELECTOR = "div.headline h1"
UPLOADER_SELECTOR = ".block-user .username a"
DESCRIPTION_SELECTOR = ".videodesc em"
SCREENSHOT_SELECTOR = "#tab_screenshots .block-screenshots a"

VIEWS_LABEL = "Views:"
SUBMITTED_LABEL = "Submitted:"
CATEGORIES_LABEL = "Categories:"


def _contains(label: str) -> str:
    return ':-soup-contains("{}")'.format(label.replace('"', '\\"'))


def label_value(doc: Document, label: str) -> str:
    """Value stored next to a colon-suffixed label in the flat info block."""
    return doc.text(f".info .item span{_contains(label)} em") or ""


def video_sources(raw_html: str) -> dict[str, Optional[str]]:
    sources = {}
    for quality in QUALITY_TIERS:
        m = SOURCE_PATTERNS[quality].search(raw_html or "")
        sources[quality] = m.group(1) if m else None
    return sources


class DetailExtractor(BaseExtractor):
    page = "detail"

    def _categories(self, doc: Document) -> list[str]:
        return [text_of(a) for a in doc.select(f".info .item{_contains(CATEGORIES_LABEL)} a")]

    def _screenshots(self, doc: Document) -> list[str]:
        shots = []
        for a in doc.select(SCREENSHOT_SELECTOR):
            href = a.get("href")
            if href:
                shots.append(href)
        return shots

    def extract(self, doc: Document, raw_html: str = "") -> VideoDetail:
        detail = VideoDetail(
            title=doc.text(TITLE_SELECTOR) or "",
            uploader=doc.text(UPLOADER_SELECTOR) or "",
            views=label_value(doc, VIEWS_LABEL),
            submitted=label_value(doc, SUBMITTED_LABEL),
            description=doc.text(DESCRIPTION_SELECTOR) or "",
            categories=self._categories(doc),
            screenshots=self._screenshots(doc),
            video_sources=video_sources(raw_html),
        )
        found = [q for q, url in detail.video_sources.items() if url]
        logger.debug(f"detail page: title={detail.title!r} sources={found}")
        return detail


def extract_detail(doc: Document, raw_html: str) -> VideoDetail:
    return DetailExtractor().extract(doc, raw_html)
