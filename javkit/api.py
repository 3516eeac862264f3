"""Search and detail operations returning response envelopes.

Every call fetches and parses afresh; nothing is shared between invocations.
Envelopes are plain dicts: {"code": 200, ...payload} or {"code": 4xx/5xx, "msg": ...}.
The cause of a 500 is logged, never returned.
"""

import logging

from . import http
from .errors import NotFoundError, ValidationError
from .extractors import EXTRACTORS
from .parser import parse

logger = logging.getLogger("javkit.api")

SEARCH_EMPTY_MSG = "keyword must not be empty"
DETAIL_EMPTY_MSG = "url must not be empty"
NOT_FOUND_MSG = "no results for this keyword"
SEARCH_FAILED_MSG = "failed to fetch search results"
DETAIL_FAILED_MSG = "failed to fetch data from url"


def ok(**payload) -> dict:
    return {"code": 200, **payload}


def fail(code: int, msg: str) -> dict:
    return {"code": code, "msg": msg}


def _require(value, msg: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(msg)
    return value.strip()


def _server_error(op: str, target, e: Exception, msg: str) -> dict:
    logger.warning(f"{op} failed [{target}]: {type(e).__name__}: {e}")
    logger.debug(f"{op} traceback", exc_info=True)
    return fail(500, msg)


# ─── search ───────────────────────────────────────────────────────────────────

def _search_payload(html: str) -> dict:
    items = EXTRACTORS["search"]().extract(parse(html))
    if not items:
        raise NotFoundError(NOT_FOUND_MSG)
    return ok(results=[i.to_dict() for i in items])


def search(keyword: str) -> dict:
    """Search the catalog for a keyword (first results page only)."""
    try:
        keyword = _require(keyword, SEARCH_EMPTY_MSG)
        return _search_payload(http.fetch(http.search_url(keyword)))
    except (ValidationError, NotFoundError) as e:
        return fail(e.code, str(e))
    except Exception as e:
        return _server_error("Search", keyword, e, SEARCH_FAILED_MSG)


async def asearch(keyword: str) -> dict:
    try:
        keyword = _require(keyword, SEARCH_EMPTY_MSG)
        return _search_payload(await http.afetch(http.search_url(keyword)))
    except (ValidationError, NotFoundError) as e:
        return fail(e.code, str(e))
    except Exception as e:
        return _server_error("Search", keyword, e, SEARCH_FAILED_MSG)


# ─── detail ───────────────────────────────────────────────────────────────────

def _detail_payload(url: str, html: str) -> dict:
    record = EXTRACTORS["detail"]().extract(parse(html), html)
    if record.is_empty():
        # Still a success: the page itself was fetched. Usually means the markup changed.
        logger.warning(f"Detail page yielded no metadata: {url}")
    return ok(**record.to_dict())


def detail(url: str) -> dict:
    """Scrape a single video page: metadata, categories, screenshots, sources."""
    try:
        url = _require(url, DETAIL_EMPTY_MSG)
        return _detail_payload(url, http.fetch(url))
    except ValidationError as e:
        return fail(e.code, str(e))
    except Exception as e:
        return _server_error("Detail", url, e, DETAIL_FAILED_MSG)


async def adetail(url: str) -> dict:
    try:
        url = _require(url, DETAIL_EMPTY_MSG)
        return _detail_payload(url, await http.afetch(url))
    except ValidationError as e:
        return fail(e.code, str(e))
    except Exception as e:
        return _server_error("Detail", url, e, DETAIL_FAILED_MSG)


__all__ = [
    "search",
    "asearch",
    "detail",
    "adetail",
    "ok",
    "fail",
    "SEARCH_EMPTY_MSG",
    "DETAIL_EMPTY_MSG",
    "NOT_FOUND_MSG",
    "SEARCH_FAILED_MSG",
    "DETAIL_FAILED_MSG",
]
