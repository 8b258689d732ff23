"""Unit tests for InventoryItem derived values (no database needed)."""

import pytest

from backend.app.core.colors import NEUTRAL_GRAY, ColorValue
from backend.app.models.inventory_item import InventoryItem
from backend.app.models.spool import Spool


def make_item(percentages=(100,), color=None, color_name="Red", weight_grams=1000):
    item = InventoryItem(
        brand="Acme",
        material_type_name="PLA",
        color_name=color_name,
        color=color,
        weight_grams=weight_grams,
        diameter_mm=1.75,
        notes="",
    )
    item.spools = [Spool(remaining_percentage=pct, notes="") for pct in percentages]
    return item


class TestSpoolCounts:
    def test_mixed_spools(self):
        item = make_item((100, 50, 0))
        assert item.spool_count == 3
        assert item.remaining_spool_count == 2
        assert item.full_spool_count == 1
        assert item.partially_used_spool_count == 1
        assert item.empty_spool_count == 1

    def test_boundaries(self):
        """Just above zero still counts as remaining; just below 100 is partial."""
        item = make_item((0.1, 99.9, 100.0, 0.0))
        assert item.remaining_spool_count == 3
        assert item.full_spool_count == 1
        assert item.partially_used_spool_count == 2
        assert item.empty_spool_count == 1

    def test_counts_add_up(self):
        item = make_item((100, 100, 75, 20, 0, 0))
        assert item.full_spool_count + item.partially_used_spool_count + item.empty_spool_count == item.spool_count

    def test_no_spools(self):
        item = make_item(())
        assert item.spool_count == 0
        assert item.remaining_spool_count == 0
        assert item.empty_spool_count == 0


class TestAverageAndWeight:
    def test_average_remaining(self):
        assert make_item((100, 50, 0)).average_remaining_percentage == pytest.approx(50.0)

    def test_average_with_no_spools_is_zero(self):
        assert make_item(()).average_remaining_percentage == 0.0

    def test_estimated_weight_splits_across_spools(self):
        item = make_item((100, 50), weight_grams=1000)
        assert item.estimated_remaining_weight == pytest.approx(750.0)

    def test_estimated_weight_with_no_spools(self):
        assert make_item((), weight_grams=1000).estimated_remaining_weight == 0.0


class TestDisplayColor:
    def test_stored_color_wins(self):
        item = make_item(color=ColorValue(0, 0, 1).to_dict(), color_name="红色")
        assert item.display_color == ColorValue(0, 0, 1)

    def test_guessed_from_name(self):
        assert make_item(color_name="红色").display_color == ColorValue(1, 0, 0)
        assert make_item(color_name="Jet Black").display_color == ColorValue(0, 0, 0)

    def test_unknown_name_is_gray(self):
        assert make_item(color_name="Mystery").display_color == NEUTRAL_GRAY

    def test_resolved_color_matches_display_color(self):
        item = make_item(color_name="黄色")
        assert item.resolved_color() == item.display_color


class TestDocumentedExamples:
    def test_weight_estimate_three_spools(self):
        item = make_item((100, 50, 0), weight_grams=900)
        assert item.estimated_remaining_weight == pytest.approx(450.0)

    def test_ninety_five_percent_is_not_full(self):
        item = make_item((100, 95, 60, 0))
        assert item.full_spool_count == 1
        assert item.remaining_spool_count == 3
        assert item.empty_spool_count == 1
