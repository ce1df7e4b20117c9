"""
Floor filter and row-collection tests.
"""

import pytest

from takeoff.calculators.footing import FootingCalculator
from takeoff.floors import filter_by_floor, list_floors, ALL_FLOORS
from takeoff.rows import (
    add_row,
    default_row,
    default_rows,
    remove_row,
    reset_rows,
    update_row,
)


# ============================================================
# Floor filter
# ============================================================

def test_filter_by_floor_keeps_only_selected_floor(footing_row):
    """Térreo + Pav1 rows filtered by Pav1 → totals of the Pav1 row alone."""
    pav1 = dict(footing_row, floor="Pav1", label="S2", height_cm="60")
    rows = [footing_row, pav1]
    calc = FootingCalculator()

    filtered = filter_by_floor(rows, "Pav1")
    assert filtered == [pav1]

    _, totals = calc.calculate(filtered)
    _, expected = calc.calculate([pav1])
    assert totals == expected
    assert totals.volume_m3 == pytest.approx(0.6)


def test_all_floors_sentinel_keeps_everything(footing_row):
    rows = [footing_row, dict(footing_row, floor="Pav1")]
    assert filter_by_floor(rows, ALL_FLOORS) == rows
    assert filter_by_floor(rows, None) == rows
    assert filter_by_floor(rows, "  ") == rows


def test_filter_ignores_surrounding_whitespace(footing_row):
    rows = [dict(footing_row, floor=" Pav1 ")]
    assert len(filter_by_floor(rows, "Pav1")) == 1


def test_filter_unknown_floor_is_empty(footing_row):
    assert filter_by_floor([footing_row], "Cobertura") == []


def test_list_floors_first_seen_order(footing_row, beam_row):
    footings = [footing_row, dict(footing_row, floor="Pav1"), dict(footing_row, floor="")]
    beams = [dict(beam_row, floor="Pav2"), beam_row]
    assert list_floors(footings, beams) == ["Térreo", "Pav1", "Pav2"]


# ============================================================
# Row collections
# ============================================================

def test_default_rows_shapes():
    assert len(default_rows("footing")) == 1
    assert len(default_rows("polygon")) == 4
    assert default_row("beam").label == "V1"


def test_add_row_returns_new_list():
    rows = default_rows("slab")
    grown = add_row(rows, "slab")
    assert len(rows) == 1
    assert len(grown) == 2


def test_update_row_replaces_one_field():
    rows = add_row(default_rows("masonry"), "masonry")
    updated = update_row(rows, 1, "area_m2", "25", "masonry")
    assert updated[1].area_m2 == "25"
    assert rows[1].area_m2 == "10"
    assert updated[0] == rows[0]


def test_update_row_unknown_field_raises():
    with pytest.raises(ValueError):
        update_row(default_rows("plaster"), 0, "colour", "red", "plaster")


def test_update_row_out_of_range_is_noop():
    rows = default_rows("plaster")
    assert update_row(rows, 5, "area_m2", "1", "plaster") == rows


def test_cannot_remove_last_row():
    rows = default_rows("footing")
    assert remove_row(rows, 0, "footing") == rows


def test_remove_row():
    rows = update_row(add_row(default_rows("beam"), "beam"), 1, "label", "V2", "beam")
    remaining = remove_row(rows, 0, "beam")
    assert [row.label for row in remaining] == ["V2"]


def test_polygon_keeps_three_vertices():
    vertices = default_rows("polygon")
    three = remove_row(vertices, 0, "polygon")
    assert len(three) == 3
    assert remove_row(three, 0, "polygon") == three


def test_reset_rows():
    rows = add_row(add_row(default_rows("column"), "column"), "column")
    assert len(rows) == 3
    assert reset_rows("column") == default_rows("column")


def test_unknown_kind_raises():
    with pytest.raises(ValueError):
        default_rows("roof")
