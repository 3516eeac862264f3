import logging
import os
from urllib.parse import quote

import httpx

from .errors import TransportError

logger = logging.getLogger("javkit.http")

DESKTOP_UA = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/91.0.4472.124 Safari/537.36"
)

BASE_URL = os.getenv("JAVKIT_BASE_URL", "https://www.javbangers.com").rstrip("/")
TIMEOUT = float(os.getenv("JAVKIT_TIMEOUT", "5.0"))

SEARCH_PATH = "/search/{keyword}/"

NETWORK_EXCEPTIONS = (
    httpx.HTTPError,
    httpx.InvalidURL,
)


def _headers() -> dict[str, str]:
    return {"User-Agent": DESKTOP_UA}


def search_url(keyword: str, base_url: str = "") -> str:
    """Search page URL for a keyword, encoded as a single path component."""
    return (base_url or BASE_URL).rstrip("/") + SEARCH_PATH.format(keyword=quote(keyword, safe=""))


def _client() -> httpx.Client:
    return httpx.Client(follow_redirects=True, timeout=TIMEOUT, headers=_headers())


def _async_client() -> httpx.AsyncClient:
    return httpx.AsyncClient(follow_redirects=True, timeout=TIMEOUT, headers=_headers())


def fetch(url: str) -> str:
    """GET a page and return its HTML. No retries.

    Raises TransportError for any network failure or non-2xx response.
    """
    logger.debug(f"GET {url}")
    try:
        with _client() as client:
            resp = client.get(url)
            resp.raise_for_status()
            return resp.text
    except NETWORK_EXCEPTIONS as e:
        raise TransportError(f"GET {url} failed: {e}") from e


async def afetch(url: str) -> str:
    """Async counterpart of fetch(); the request is abandoned if cancelled."""
    logger.debug(f"GET {url} (async)")
    try:
        async with _async_client() as client:
            resp = await client.get(url)
            resp.raise_for_status()
            return resp.text
    except NETWORK_EXCEPTIONS as e:
        raise TransportError(f"GET {url} failed: {e}") from e


__all__ = [
    "DESKTOP_UA",
    "BASE_URL",
    "TIMEOUT",
    "NETWORK_EXCEPTIONS",
    "search_url",
    "fetch",
    "afetch",
]
