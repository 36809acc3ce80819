"""Catalog entry model."""

import uuid
from dataclasses import dataclass, field

from m3ucatalog.playlist.classifier import ContentKind


def new_identifier() -> str:
    return uuid.uuid4().hex


@dataclass(frozen=True)
class Entry:
    """One playable item of the catalog.

    ``identifier`` is an opaque per-entry token for UI keying only. It is left
    out of equality so two parses of the same text compare equal.
    """
    name: str
    group: str
    locator: str
    kind: ContentKind
    artwork: str | None = None
    identifier: str = field(default_factory=new_identifier, compare=False)

    def to_dict(self) -> dict:
        return {
            "identifier": self.identifier,
            "name": self.name,
            "group": self.group,
            "artwork": self.artwork,
            "locator": self.locator,
            "kind": self.kind.value,
        }
