"""Browsing session - the loading/error/ready state a front end renders.

The session fetches the playlist text once and re-parses it for every
profile switch; the engine itself stays stateless.
"""

import asyncio
import logging
from enum import Enum
from typing import Callable

from m3ucatalog.catalog.aggregator import Category
from m3ucatalog.catalog.engine import DEFAULT_CHUNK_SIZE, parse_in_chunks
from m3ucatalog.catalog.profiles import Profile, resolve_profile
from m3ucatalog.sources.fetcher import fetch_playlist
from m3ucatalog.utils.retry import RetrievalError

logger = logging.getLogger(__name__)

CONNECTION_ERROR = "Connection Error"


class LoadState(Enum):
    IDLE = "idle"
    LOADING = "loading"
    ERROR = "error"
    READY = "ready"


class CatalogSession:

    def __init__(
        self,
        source: str,
        fetcher: Callable[[str], str] = fetch_playlist,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
    ):
        self.source = source
        self.fetcher = fetcher
        self.chunk_size = chunk_size
        self.raw_text: str | None = None
        self.profile: Profile | None = None
        self.state = LoadState.IDLE
        self.error: str | None = None
        self.categories: list[Category] = []
        self._requested = False

    def load(self, profile) -> list[Category]:
        """Fetch (first time only) and parse the playlist for ``profile``.

        Retrieval failures put the session in the ERROR state instead of
        raising; ``retry()`` repeats the same request.
        """
        self.profile = resolve_profile(profile)
        self._requested = True
        self.state = LoadState.LOADING
        self.error = None
        self.categories = []

        try:
            if self.raw_text is None:
                self.raw_text = self.fetcher(self.source)
        except RetrievalError as e:
            logger.warning("Playlist retrieval failed: %s", e)
            self.state = LoadState.ERROR
            self.error = f"{CONNECTION_ERROR}: {e}"
            return []
        except Exception as e:
            self.state = LoadState.ERROR
            self.error = f"{type(e).__name__}: {e}"
            raise

        self.categories = parse_in_chunks(self.raw_text, self.profile, chunk_size=self.chunk_size)
        self.state = LoadState.READY
        return self.categories

    async def load_async(self, profile) -> list[Category]:
        """Run ``load`` in a worker thread so an event loop stays responsive."""
        return await asyncio.to_thread(self.load, profile)

    def retry(self) -> list[Category]:
        if not self._requested:
            raise RuntimeError("Nothing to retry: no profile has been loaded")
        return self.load(self.profile)

    def reset(self):
        """Forget the fetched text and any loaded catalog."""
        self.raw_text = None
        self.profile = None
        self._requested = False
        self.state = LoadState.IDLE
        self.error = None
        self.categories = []
