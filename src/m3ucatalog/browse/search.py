"""Client-side search and display helpers over an already-built catalog."""

from dataclasses import replace

from m3ucatalog.catalog.aggregator import Category
from m3ucatalog.catalog.entry import Entry


def filter_categories(categories: list[Category], query: str | None) -> list[Category]:
    """Keep entries whose name contains ``query`` (case-insensitive).

    A blank query returns the categories unchanged. Categories left empty
    are dropped; order is preserved.
    """
    needle = (query or "").strip().lower()
    if not needle:
        return categories

    results = []
    for category in categories:
        members = [m for m in category.members if needle in m.name.lower()]
        if members:
            results.append(replace(category, members=members))
    return results


def preview(category: Category, limit: int) -> list[Entry]:
    """First ``limit`` members of a category, for a single display row."""
    if limit <= 0:
        return []
    return category.members[:limit]


def summarize(categories: list[Category]) -> dict:
    return {
        "categories": len(categories),
        "entries": sum(len(c.members) for c in categories),
    }
