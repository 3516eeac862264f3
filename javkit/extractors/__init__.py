from .base import BaseExtractor
from .search import SearchExtractor, extract_list
from .detail import DetailExtractor, SOURCE_PATTERNS, extract_detail, label_value, video_sources

EXTRACTORS = {
    "search": SearchExtractor,
    "detail": DetailExtractor,
}

__all__ = [
    "BaseExtractor",
    "EXTRACTORS",
    "SearchExtractor",
    "DetailExtractor",
    "SOURCE_PATTERNS",
    "extract_list",
    "extract_detail",
    "label_value",
    "video_sources",
]
