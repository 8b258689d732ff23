"""Unit tests for inventory roll-ups."""

from types import SimpleNamespace

import pytest

from backend.app.services.statistics import (
    brand_statistics,
    empty_spool_count,
    estimated_remaining_weight,
    full_spool_count,
    partially_used_spool_count,
    remaining_spool_count,
    summarize,
    total_spool_count,
    type_statistics,
)


def item(brand="Acme", material="PLA", percentages=(100,), weight_grams=1000):
    return SimpleNamespace(
        brand=brand,
        material_type_name=material,
        weight_grams=weight_grams,
        spools=[SimpleNamespace(remaining_percentage=pct) for pct in percentages],
    )


class TestGrouping:
    def test_brand_counts_sorted_descending(self):
        items = [item("Acme", percentages=(100,)), item("Zeta", percentages=(100, 50, 0)), item("Acme", percentages=(20,))]
        assert brand_statistics(items) == [("Zeta", 3), ("Acme", 2)]

    def test_brand_grouping_is_case_sensitive(self):
        items = [item("Acme", percentages=(100, 100)), item("acme", percentages=(100,))]
        assert brand_statistics(items) == [("Acme", 2), ("acme", 1)]

    def test_ties_keep_first_seen_order(self):
        items = [item("Beta"), item("Alpha"), item("Gamma")]
        assert brand_statistics(items) == [("Beta", 1), ("Alpha", 1), ("Gamma", 1)]

    def test_type_counts(self):
        items = [item(material="PLA", percentages=(100,)), item(material="PETG", percentages=(100, 100))]
        assert type_statistics(items) == [("PETG", 2), ("PLA", 1)]

    def test_item_without_spools_counts_zero(self):
        assert brand_statistics([item("Empty", percentages=())]) == [("Empty", 0)]

    def test_empty_inventory(self):
        assert brand_statistics([]) == []
        assert type_statistics([]) == []


class TestSpoolTotals:
    @pytest.fixture
    def items(self):
        return [item(percentages=(100, 60)), item(percentages=(0, 100, 30))]

    def test_counts(self, items):
        assert total_spool_count(items) == 5
        assert remaining_spool_count(items) == 4
        assert full_spool_count(items) == 2
        assert partially_used_spool_count(items) == 2
        assert empty_spool_count(items) == 1

    def test_accepts_generators(self, items):
        assert partially_used_spool_count(i for i in items) == 2
        assert empty_spool_count(i for i in items) == 1

    def test_estimated_weight(self):
        items = [item(percentages=(100, 50), weight_grams=1000), item(percentages=(), weight_grams=500)]
        assert estimated_remaining_weight(items) == pytest.approx(750.0)


class TestSummarize:
    def test_summary_fields(self):
        items = [item("Acme", "PLA", (100, 0)), item("Zeta", "PETG", (40,))]
        summary = summarize(items)
        assert summary.item_count == 2
        assert summary.total_spool_count == 3
        assert summary.remaining_spool_count == 2
        assert summary.full_spool_count == 1
        assert summary.partially_used_spool_count == 1
        assert summary.empty_spool_count == 1
        assert summary.estimated_remaining_weight == pytest.approx(900.0)
        assert [(g.name, g.spool_count) for g in summary.by_brand] == [("Acme", 2), ("Zeta", 1)]
        assert [(g.name, g.spool_count) for g in summary.by_type] == [("PLA", 2), ("PETG", 1)]

    def test_empty(self):
        summary = summarize([])
        assert summary.item_count == 0
        assert summary.estimated_remaining_weight == 0.0
        assert summary.by_brand == []
