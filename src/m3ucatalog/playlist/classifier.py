"""Content-type classifier - decides whether an entry is live, on-demand or series."""

from enum import Enum


class ContentKind(Enum):
    LIVE = "live"
    ON_DEMAND = "on_demand"
    SERIES = "series"


SERIES_GROUP_KEYWORDS = ("series", "season")
ON_DEMAND_GROUP_KEYWORDS = ("movie", "vod", "pelicula", "cinema")
ON_DEMAND_EXTENSIONS = (".mkv", ".mp4", ".avi")


def classify_entry(url: str, name: str, group: str) -> ContentKind:
    """Classify an entry from its URL and group label.

    Rules are checked in order and the first match wins: series keywords in
    the group, on-demand keywords in the group, a file-container extension on
    the URL. Anything else is live. ``name`` is accepted for signature
    stability but carries no signal today.
    """
    group_lower = group.lower()

    if any(kw in group_lower for kw in SERIES_GROUP_KEYWORDS):
        return ContentKind.SERIES
    if any(kw in group_lower for kw in ON_DEMAND_GROUP_KEYWORDS):
        return ContentKind.ON_DEMAND
    if url.lower().endswith(ON_DEMAND_EXTENSIONS):
        return ContentKind.ON_DEMAND

    return ContentKind.LIVE
