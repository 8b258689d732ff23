"""Inventory roll-ups computed on demand from the current items.

All functions take any iterable of objects shaped like InventoryItem
(``brand``, ``material_type_name``, ``weight_grams`` and ``spools`` with
``remaining_percentage``), so they work on ORM rows and plain test doubles.
"""

from collections.abc import Callable, Iterable

from backend.app.schemas.inventory import GroupCount, InventoryStatistics


def _spool_percentages(items: Iterable) -> list[float]:
    return [spool.remaining_percentage for item in items for spool in item.spools]


def _group_spool_counts(items: Iterable, key: Callable) -> list[tuple[str, int]]:
    # Exact string grouping: "Acme" and "acme" are different groups
    counts: dict[str, int] = {}
    for item in items:
        name = key(item)
        counts[name] = counts.get(name, 0) + len(item.spools)
    # sorted() is stable, so equal counts keep first-seen order
    return sorted(counts.items(), key=lambda pair: pair[1], reverse=True)


def brand_statistics(items: Iterable) -> list[tuple[str, int]]:
    """(brand, spool count) pairs, most spools first."""
    return _group_spool_counts(items, lambda item: item.brand)


def type_statistics(items: Iterable) -> list[tuple[str, int]]:
    """(material type, spool count) pairs, most spools first."""
    return _group_spool_counts(items, lambda item: item.material_type_name)


def total_spool_count(items: Iterable) -> int:
    return len(_spool_percentages(items))


def remaining_spool_count(items: Iterable) -> int:
    return sum(1 for pct in _spool_percentages(items) if pct > 0)


def full_spool_count(items: Iterable) -> int:
    return sum(1 for pct in _spool_percentages(items) if pct >= 100)


def partially_used_spool_count(items: Iterable) -> int:
    items = list(items)
    return remaining_spool_count(items) - full_spool_count(items)


def empty_spool_count(items: Iterable) -> int:
    items = list(items)
    return total_spool_count(items) - remaining_spool_count(items)


def estimated_remaining_weight(items: Iterable) -> float:
    """Grams left across all spools; each item's weight is split evenly per spool."""
    total = 0.0
    for item in items:
        if not item.spools:
            continue
        share = item.weight_grams / len(item.spools)
        total += sum(share * (spool.remaining_percentage / 100) for spool in item.spools)
    return total


def summarize(items: Iterable) -> InventoryStatistics:
    items = list(items)
    return InventoryStatistics(
        item_count=len(items),
        total_spool_count=total_spool_count(items),
        remaining_spool_count=remaining_spool_count(items),
        full_spool_count=full_spool_count(items),
        partially_used_spool_count=partially_used_spool_count(items),
        empty_spool_count=empty_spool_count(items),
        estimated_remaining_weight=estimated_remaining_weight(items),
        by_brand=[GroupCount(name=name, spool_count=count) for name, count in brand_statistics(items)],
        by_type=[GroupCount(name=name, spool_count=count) for name, count in type_statistics(items)],
    )
