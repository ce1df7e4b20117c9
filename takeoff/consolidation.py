"""
Consolidation — merge the Totals of every active calculator into one
cross-category material summary.

Rebar from different calculators is merged by diameter class, so 3/8"
bars from footings and from beams land in the same "Iron 3/8 (bars)" line.
Quantities stay unrounded here; rounding belongs to reporting.
"""

import logging

from .constants import DIAMETER_CLASSES, STIRRUP_DIAMETER
from .schemas import Totals, ConsolidatedItem, ConsolidatedTotals

logger = logging.getLogger(__name__)

CONCRETE = "Concrete (m³)"
CEMENT = "Cement (50 kg bags)"
SAND = "Sand (m³)"
GRAVEL = "Gravel (m³)"
MORTAR = "Mortar (m³)"
BLOCKS = "Blocks (units)"


def iron_item_name(diameter: str) -> str:
    return f"Iron {diameter} (bars)"


# Canonical report order — anything not listed sorts after, alphabetically
ITEM_ORDER = (
    [CONCRETE, CEMENT, SAND, GRAVEL, MORTAR, BLOCKS]
    + [iron_item_name(d) for d in [STIRRUP_DIAMETER] + DIAMETER_CLASSES]
)


def material_entries(totals: Totals):
    """
    Every (name, unit, category, quantity) a Totals record reports.

    This is the one place that knows which Totals field maps to which
    canonical material line.
    """
    yield CONCRETE, "m³", "volume", totals.volume_m3
    yield CEMENT, "bags", "bags", totals.cement_bags
    yield SAND, "m³", "volume", totals.sand_m3
    yield GRAVEL, "m³", "volume", totals.gravel_m3
    yield MORTAR, "m³", "volume", totals.mortar_m3
    yield BLOCKS, "units", "count", totals.block_count
    yield iron_item_name(STIRRUP_DIAMETER), "bars", "count", totals.stirrup_bars
    for diameter, bars in totals.bars_by_diameter.items():
        yield iron_item_name(diameter), "bars", "count", bars


def _sort_key(item: ConsolidatedItem):
    if item.name in ITEM_ORDER:
        return (0, ITEM_ORDER.index(item.name), "")
    return (1, 0, item.name)


def consolidate(active_totals) -> ConsolidatedTotals:
    """
    Fold the Totals of the active calculators into one summary.

    Inactive calculators are excluded by not passing them — they are not
    zeroed. Only nonzero entries create a line.
    """
    merged: dict[str, ConsolidatedItem] = {}
    slab_area = 0.0
    calculators = []

    for totals in active_totals:
        if isinstance(totals, dict):
            totals = Totals.model_validate(totals)
        if totals.calculator and totals.calculator not in calculators:
            calculators.append(totals.calculator)
        slab_area += totals.slab_area_m2

        for name, unit, category, quantity in material_entries(totals):
            if not quantity:
                continue
            item = merged.get(name)
            if item is None:
                item = ConsolidatedItem(name=name, quantity=0.0, unit=unit,
                                        category=category, sources=[])
                merged[name] = item
            item.quantity += quantity
            if totals.calculator and totals.calculator not in item.sources:
                item.sources.append(totals.calculator)

    items = sorted(merged.values(), key=_sort_key)
    logger.debug("Consolidated %d material lines from %d calculators",
                 len(items), len(calculators))
    return ConsolidatedTotals(items=items, slab_area_m2=slab_area, calculators=calculators)
