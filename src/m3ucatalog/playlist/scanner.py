"""Entry scanner - splits Extended-M3U text into (metadata, url) pairs."""

import logging
import re
from dataclasses import dataclass
from typing import Iterator

logger = logging.getLogger(__name__)

EXTINF_PREFIX = "#EXTINF:"

# Only real line endings; str.splitlines also breaks on \x85, \u2028 and friends.
_LINE_BREAK = re.compile(r"\r\n|\r|\n")


@dataclass(frozen=True)
class RawEntry:
    metadata_line: str
    url_line: str


def scan_entries(text: str | None) -> Iterator[RawEntry]:
    """Yield each metadata line paired with the URL line that closes it.

    Blank lines and directives other than #EXTINF are skipped. A metadata line
    with no URL before the next metadata line (or end of input) is dropped, and
    so is a URL line with nothing pending.
    """
    if not text:
        return

    pending: str | None = None
    for raw_line in _LINE_BREAK.split(text):
        line = raw_line.strip()
        if not line:
            continue

        if line.startswith(EXTINF_PREFIX):
            if pending is not None:
                logger.debug("Dropping metadata line with no URL: %s", pending[:80])
            pending = line
        elif line.startswith("#"):
            continue
        elif pending is None:
            logger.debug("Ignoring URL with no metadata line: %s", line[:80])
        else:
            yield RawEntry(metadata_line=pending, url_line=line)
            pending = None

    if pending is not None:
        logger.debug("Dropping trailing metadata line with no URL: %s", pending[:80])
