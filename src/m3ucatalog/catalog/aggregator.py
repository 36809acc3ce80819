"""Category aggregator - groups entries by label and orders the result."""

from dataclasses import dataclass, field
from typing import Iterable

from m3ucatalog.catalog.entry import Entry


@dataclass
class Category:
    label: str
    members: list[Entry] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {"label": self.label, "members": [m.to_dict() for m in self.members]}


class CategoryAggregator:
    """Accumulates entries in scan order; can be fed one chunk at a time."""

    def __init__(self):
        self._groups: dict[str, list[Entry]] = {}

    def add(self, entry: Entry):
        self._groups.setdefault(entry.group, []).append(entry)

    def extend(self, entries: Iterable[Entry]):
        for entry in entries:
            self.add(entry)

    def __len__(self) -> int:
        return sum(len(members) for members in self._groups.values())

    def categories(self) -> list[Category]:
        """Categories sorted by label using plain code-point comparison."""
        return [
            Category(label=label, members=list(self._groups[label]))
            for label in sorted(self._groups)
        ]


def group_entries(entries: Iterable[Entry]) -> list[Category]:
    """Group entries by label, keeping first-seen order inside each category."""
    aggregator = CategoryAggregator()
    aggregator.extend(entries)
    return aggregator.categories()
