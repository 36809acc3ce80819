"""Content profiles and the filter that maps them to entry kinds."""

from enum import Enum

from m3ucatalog.playlist.classifier import ContentKind


class Profile(Enum):
    LIVE = "live"
    MOVIES = "movies"
    SERIES = "series"
    ADMIN = "admin"


PROFILE_KINDS = {
    Profile.LIVE: ContentKind.LIVE,
    Profile.MOVIES: ContentKind.ON_DEMAND,
    Profile.SERIES: ContentKind.SERIES,
}

CONTENT_PROFILES = tuple(PROFILE_KINDS)

_ALIASES = {
    "live_tv": Profile.LIVE,
}


def resolve_profile(value) -> Profile | None:
    """Turn a profile name (any case) into a Profile, or None if unknown."""
    if isinstance(value, Profile):
        return value
    if not isinstance(value, str):
        return None
    key = value.strip().lower()
    try:
        return Profile(key)
    except ValueError:
        return _ALIASES.get(key)


def profile_accepts(kind: ContentKind, profile) -> bool:
    """Keep/drop decision for one classified entry.

    Admin and unrecognised profiles keep nothing.
    """
    expected = PROFILE_KINDS.get(resolve_profile(profile))
    return expected is not None and kind is expected
