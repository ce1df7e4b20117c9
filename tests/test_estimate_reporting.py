"""
Estimate engine and report formatting tests.
"""

import pytest

from takeoff.consolidation import CEMENT, BLOCKS
from takeoff.estimate import EstimateEngine
from takeoff.reporting import (
    format_decimal,
    format_quantity,
    round_up_units,
    summary_table,
    detail_table,
    build_report,
)
from takeoff.schemas import EstimateRequest, ConsolidatedTotals, ConsolidatedItem


def _request(footing_row, beam_row, **kwargs):
    return EstimateRequest(
        footing=[footing_row, dict(footing_row, floor="Pav1", label="S2")],
        beam=[beam_row],
        masonry=[{"floor": "Pav1", "label": "A1", "area_m2": "10",
                  "block_width_cm": "39", "block_height_cm": "19", "joint_cm": "1"}],
        **kwargs,
    )


# ============================================================
# Estimate engine
# ============================================================

def test_estimate_all_calculators(footing_row, beam_row):
    result = EstimateEngine().build_estimate(_request(footing_row, beam_row))
    assert [r.kind for r in result.calculators] == [
        "footing", "beam", "column", "slab", "masonry", "plaster"]
    assert result.floors == ["Térreo", "Pav1"]
    footing = result.calculators[0]
    assert len(footing.rows) == 2
    assert result.consolidated.get(CEMENT) == pytest.approx(
        sum(r.totals.cement_bags for r in result.calculators))


def test_estimate_respects_active_set(footing_row, beam_row):
    result = EstimateEngine().build_estimate(
        _request(footing_row, beam_row, active=["beam", "masonry"]))
    assert [r.kind for r in result.calculators] == ["beam", "masonry"]
    assert result.consolidated.calculators == ["beam", "masonry"]
    assert result.consolidated.get(BLOCKS) == pytest.approx(131.25)


def test_estimate_floor_filter(footing_row, beam_row):
    result = EstimateEngine().build_estimate(_request(footing_row, beam_row, floor="Pav1"))
    footing = result.calculators[0]
    assert [row["label"] for row in footing.rows] == ["S2"]
    assert result.calculators[1].rows == []
    assert result.floor == "Pav1"


def test_estimate_with_parcel(footing_row, beam_row, unit_square):
    result = EstimateEngine().build_estimate(
        _request(footing_row, beam_row, parcel=unit_square))
    assert result.parcel.area_m2 == pytest.approx(1.0)


def test_estimate_accepts_plain_dict(footing_row):
    result = EstimateEngine().build_estimate({"footing": [footing_row], "active": ["footing"]})
    assert result.consolidated.get(CEMENT) == pytest.approx(2.5)


# ============================================================
# Formatting
# ============================================================

def test_format_decimal_locales():
    assert format_decimal(1234.5, 2, "pt_BR") == "1.234,50"
    assert format_decimal(1234.5, 2, "en_US") == "1,234.50"
    assert format_decimal(0.2254, 3, "pt_BR") == "0,225"


def test_round_up_units():
    assert round_up_units(131.25) == 132
    assert round_up_units(3.0000000000000004) == 3
    assert round_up_units(0.01) == 1
    assert round_up_units(0.0) == 0


def test_format_quantity_by_category():
    assert format_quantity(1.1666, "count", "en_US") == "2"
    assert format_quantity(2.5, "bags", "en_US") == "2.50"
    assert format_quantity(0.225, "volume", "en_US") == "0.225"


def test_summary_table():
    consolidated = ConsolidatedTotals(
        items=[
            ConsolidatedItem(name=CEMENT, quantity=5.0, unit="bags", category="bags"),
            ConsolidatedItem(name="Iron 3/8 (bars)", quantity=2.1, unit="bars", category="count"),
        ],
        slab_area_m2=30.0,
    )
    table = summary_table(consolidated, "pt_BR")
    assert table[0] == ["Material", "Quantity", "Unit"]
    assert table[1] == [CEMENT, "5,00", "bags"]
    assert table[2] == ["Iron 3/8 (bars)", "3", "bars"]
    assert table[3] == ["Slab area", "30,000", "m²"]


def test_detail_table_keeps_row_order(footing_row, beam_row):
    result = EstimateEngine().build_estimate(_request(footing_row, beam_row))
    table = detail_table("footing", result.calculators[0].rows, "en_US")
    assert table[0][:3] == ["Floor", "Element", "Qty"]
    assert [row[1] for row in table[1:]] == ["S1", "S2"]
    assert table[1][3] == "0.400"


def test_detail_table_unknown_kind():
    with pytest.raises(ValueError):
        detail_table("roof", [])


def test_build_report(footing_row, beam_row, unit_square):
    estimate = EstimateEngine().build_estimate(
        _request(footing_row, beam_row, parcel=unit_square, active=["footing"]))
    report = build_report(estimate, "en_US")
    assert report["floor"] == "all"
    assert [s["kind"] for s in report["sections"]] == ["footing"]
    assert report["parcel_area"] == "1.000"
    assert report["summary"][0] == ["Material", "Quantity", "Unit"]


def test_unknown_locale_logs_and_uses_en_us(caplog):
    with caplog.at_level("WARNING", logger="takeoff.reporting"):
        assert format_decimal(1234.5, 2, "xx_XX") == "1,234.50"
    assert "xx_XX" in caplog.text


def test_estimate_with_null_parcel_coordinate(footing_row, beam_row):
    parcel = [{"x": "0", "y": "0"}, {"x": None, "y": "0"}, {"x": "1", "y": "1"}]
    result = EstimateEngine().build_estimate(_request(footing_row, beam_row, parcel=parcel))
    assert result.parcel.area_m2 is None
    assert result.parcel.visualization is None
