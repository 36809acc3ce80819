"""Playlist retrieval - fetches raw M3U text from a URL or a local file."""

import logging
from pathlib import Path

import httpx
from rich.console import Console

from m3ucatalog.utils.retry import (
    DEFAULT_MAX_RETRIES,
    RetrievalError,
    retry_fetch,
)

console = Console(stderr=True)
logger = logging.getLogger(__name__)

HEADERS = {
    "User-Agent": "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 "
                  "(KHTML, like Gecko) Chrome/131.0.0.0 Safari/537.36",
    "Accept": "*/*",
    "Accept-Encoding": "gzip, deflate",
    "Connection": "keep-alive",
}

TIMEOUT = 30.0


def is_remote(source: str) -> bool:
    return source.strip().lower().startswith(("http://", "https://"))


def fetch_playlist(
    source: str,
    timeout: float = TIMEOUT,
    max_retries: int = DEFAULT_MAX_RETRIES,
    transport: httpx.BaseTransport | None = None,
) -> str:
    """Return the full playlist text for a URL or local path.

    Raises RetrievalError when the source cannot be read.
    """
    if not source or not source.strip():
        raise RetrievalError("<empty>", "no playlist source configured")

    source = source.strip()
    if is_remote(source):
        return _fetch_remote(source, timeout, max_retries, transport)
    return _read_local(source)


def _fetch_remote(url: str, timeout: float, max_retries: int, transport) -> str:
    @retry_fetch(
        operation_name="Playlist fetch",
        max_retries=max_retries,
        retry_on=(httpx.TransportError,),
    )
    def _get() -> str:
        with httpx.Client(
            follow_redirects=True, timeout=timeout, headers=HEADERS, transport=transport,
        ) as client:
            response = client.get(url)
            response.raise_for_status()
        return response.text

    logger.info("Fetching playlist from %s", url)
    try:
        text = _get()
    except httpx.HTTPStatusError as e:
        raise RetrievalError(url, f"HTTP {e.response.status_code}") from e
    except httpx.HTTPError as e:
        raise RetrievalError(url, str(e) or type(e).__name__) from e

    logger.info("Fetched %d characters from %s", len(text), url)
    return text


def _read_local(path: str) -> str:
    file_path = Path(path).expanduser()
    try:
        return file_path.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        raise RetrievalError(path, e.strerror or str(e)) from e
    except ValueError as e:
        raise RetrievalError(path, str(e)) from e


def read_cached(path: str | Path) -> str | None:
    """Return the cached playlist text, or None if there is no cache."""
    path = Path(path)
    if not path.is_file():
        return None
    return path.read_text(encoding="utf-8", errors="replace")


def write_cached(path: str | Path, text: str):
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    console.print(f"[dim]Cached playlist at {path}[/dim]")
