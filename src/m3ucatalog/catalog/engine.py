"""Profile-scoped catalog engine.

Ties the scanner, metadata extractor, classifier, profile filter and
aggregator together. Every function here is a pure function of the playlist
text and the requested profile: nothing is cached or shared between calls,
so two profiles can be parsed concurrently from the same text.

Entries are only built for candidates that survive the profile filter, which
keeps a profile switch on a large playlist cheap.
"""

import logging
from itertools import islice
from typing import Callable, Iterator

from m3ucatalog.catalog.aggregator import Category, CategoryAggregator
from m3ucatalog.catalog.entry import Entry
from m3ucatalog.catalog.profiles import CONTENT_PROFILES, Profile, profile_accepts, resolve_profile
from m3ucatalog.playlist.classifier import classify_entry
from m3ucatalog.playlist.metadata import parse_metadata
from m3ucatalog.playlist.scanner import RawEntry, scan_entries

logger = logging.getLogger(__name__)

DEFAULT_CHUNK_SIZE = 500


def _build_entry(raw: RawEntry, profile: Profile) -> Entry | None:
    meta = parse_metadata(raw.metadata_line)
    if not meta.name:
        return None
    kind = classify_entry(raw.url_line, meta.name, meta.group)
    if not profile_accepts(kind, profile):
        return None
    return Entry(
        name=meta.name,
        group=meta.group,
        locator=raw.url_line,
        kind=kind,
        artwork=meta.artwork,
    )


def _retained(candidates, profile: Profile) -> Iterator[Entry]:
    for raw in candidates:
        entry = _build_entry(raw, profile)
        if entry is not None:
            yield entry


def iter_profile_entries(text: str | None, profile) -> Iterator[Entry]:
    """Lazily yield the entries of ``text`` that belong to ``profile``, in scan order."""
    resolved = resolve_profile(profile)
    if resolved not in CONTENT_PROFILES:
        logger.debug("Profile %r has no content kind; returning nothing", profile)
        return
    yield from _retained(scan_entries(text), resolved)


def parse_playlist_subset(text: str | None, profile) -> list[Category]:
    """Parse playlist text into sorted categories holding only ``profile`` entries."""
    aggregator = CategoryAggregator()
    aggregator.extend(iter_profile_entries(text, profile))
    categories = aggregator.categories()
    logger.info(
        "Parsed %d entries in %d categories for profile %s",
        len(aggregator), len(categories), resolve_profile(profile),
    )
    return categories


def parse_in_chunks(
    text: str | None,
    profile,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    on_chunk: Callable[[int, int], None] | None = None,
) -> list[Category]:
    """Same result as parse_playlist_subset, processed ``chunk_size`` candidates at a time.

    ``on_chunk(scanned, retained)`` runs after each chunk with running totals,
    giving the caller a point to yield to other work or report progress.
    """
    if chunk_size < 1:
        raise ValueError("chunk_size must be at least 1")

    aggregator = CategoryAggregator()
    resolved = resolve_profile(profile)
    if resolved not in CONTENT_PROFILES:
        return []

    candidates = scan_entries(text)
    scanned = 0
    while True:
        chunk = list(islice(candidates, chunk_size))
        if not chunk:
            break
        scanned += len(chunk)
        aggregator.extend(_retained(chunk, resolved))
        if on_chunk is not None:
            on_chunk(scanned, len(aggregator))

    return aggregator.categories()
