__version__ = "1.0.0"

from .errors import JavkitError, ValidationError, NotFoundError, TransportError
from .models import QUALITY_TIERS, SearchResultItem, VideoDetail
from .parser import Document, parse
from .http import fetch, afetch, search_url
from .extractors import (
    EXTRACTORS,
    SearchExtractor,
    DetailExtractor,
    extract_list,
    extract_detail,
)
from .api import search, asearch, detail, adetail

__all__ = [
    "JavkitError",
    "ValidationError",
    "NotFoundError",
    "TransportError",
    "QUALITY_TIERS",
    "SearchResultItem",
    "VideoDetail",
    "Document",
    "parse",
    "fetch",
    "afetch",
    "search_url",
    "EXTRACTORS",
    "SearchExtractor",
    "DetailExtractor",
    "extract_list",
    "extract_detail",
    "search",
    "asearch",
    "detail",
    "adetail",
]
