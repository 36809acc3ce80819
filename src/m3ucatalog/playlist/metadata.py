"""Metadata extraction from #EXTINF lines."""

import re
from dataclasses import dataclass
from functools import lru_cache

DEFAULT_GROUP = "Uncategorized"

GROUP_ATTRIBUTE = "group-title"
ARTWORK_ATTRIBUTE = "tvg-logo"


@dataclass(frozen=True)
class EntryMetadata:
    name: str
    group: str = DEFAULT_GROUP
    artwork: str | None = None


@lru_cache(maxsize=32)
def _attribute_pattern(key: str) -> re.Pattern:
    return re.compile(re.escape(key) + r'="([^"]*)"')


def extract_attribute(line: str, key: str) -> str | None:
    """Return the value of ``key="value"`` in a metadata line, or None if absent."""
    match = _attribute_pattern(key).search(line)
    return match.group(1) if match else None


def extract_name(line: str) -> str:
    """Display name: the text after the last comma, or the whole line without one."""
    _, comma, tail = line.rpartition(",")
    return tail.strip() if comma else line.strip()


def parse_metadata(line: str) -> EntryMetadata:
    """Extract display name, group label and artwork from one #EXTINF line."""
    group = extract_attribute(line, GROUP_ATTRIBUTE)
    return EntryMetadata(
        name=extract_name(line),
        group=DEFAULT_GROUP if group is None else group,
        artwork=extract_attribute(line, ARTWORK_ATTRIBUTE),
    )
