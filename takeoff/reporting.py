"""
Report formatting — turns computed rows and consolidated totals into plain
string tables for the report/PDF layer.

Formatting only. Nothing here recomputes a quantity:
- bars and blocks round UP to whole units (you can't buy half a bar)
- cement bags: 2 decimals
- volumes and areas: 3 decimals
- lengths: 2 decimals
"""

import logging
import math

from .config import settings

logger = logging.getLogger(__name__)

# (thousands separator, decimal separator)
LOCALE_SEPARATORS = {
    "pt_BR": (".", ","),
    "en_US": (",", "."),
    "de_DE": (".", ","),
    "fr_FR": (" ", ","),
}

CATEGORY_DECIMALS = {
    "bags": 2,
    "volume": 3,
    "area": 3,
    "length": 2,
}

KIND_TITLES = {
    "footing": "Footings",
    "beam": "Beams",
    "column": "Columns",
    "slab": "Slabs / Subfloors",
    "masonry": "Masonry",
    "plaster": "Plaster",
}

# Detail columns per calculator: (field, header, category)
# category None = show the text exactly as entered
DETAIL_COLUMNS = {
    "footing": [
        ("floor", "Floor", None),
        ("label", "Element", None),
        ("count", "Qty", None),
        ("volume_m3", "Concrete (m³)", "volume"),
        ("linear_length_m", "Rebar (m)", "length"),
        ("diameter", "Ø", None),
        ("bar_count", "Bars", "count"),
        ("cement_bags", "Cement (bags)", "bags"),
        ("sand_m3", "Sand (m³)", "volume"),
        ("gravel_m3", "Gravel (m³)", "volume"),
    ],
    "beam": [
        ("floor", "Floor", None),
        ("label", "Element", None),
        ("count", "Qty", None),
        ("volume_m3", "Concrete (m³)", "volume"),
        ("linear_length_m", "Rebar (m)", "length"),
        ("diameter", "Ø", None),
        ("bar_count", "Bars", "count"),
        ("stirrup_bars", "Stirrup bars 3/16", "count"),
        ("cement_bags", "Cement (bags)", "bags"),
        ("sand_m3", "Sand (m³)", "volume"),
        ("gravel_m3", "Gravel (m³)", "volume"),
    ],
    "slab": [
        ("floor", "Floor", None),
        ("label", "Element", None),
        ("slab_type", "Type", None),
        ("area_m2", "Area (m²)", None),
        ("volume_m3", "Concrete (m³)", "volume"),
        ("cement_bags", "Cement (bags)", "bags"),
        ("sand_m3", "Sand (m³)", "volume"),
        ("gravel_m3", "Gravel (m³)", "volume"),
    ],
    "masonry": [
        ("floor", "Floor", None),
        ("label", "Wall", None),
        ("area_m2", "Area (m²)", None),
        ("block_count", "Blocks", "count"),
        ("mortar_m3", "Mortar (m³)", "volume"),
        ("cement_bags", "Cement (bags)", "bags"),
        ("sand_m3", "Sand (m³)", "volume"),
    ],
    "plaster": [
        ("floor", "Floor", None),
        ("label", "Wall", None),
        ("effective_area_m2", "Area (m²)", "area"),
        ("mortar_m3", "Mortar (m³)", "volume"),
        ("cement_bags", "Cement (bags)", "bags"),
        ("sand_m3", "Sand (m³)", "volume"),
    ],
}
DETAIL_COLUMNS["column"] = DETAIL_COLUMNS["beam"]


def format_decimal(value: float, decimals: int, locale: str = None) -> str:
    """Locale-aware fixed-point display, e.g. 1234.5 -> '1.234,50' in pt_BR."""
    locale = locale or settings.DISPLAY_LOCALE
    if locale not in LOCALE_SEPARATORS:
        logger.warning("Unknown display locale %r, using en_US separators", locale)
        locale = "en_US"
    thousands, decimal = LOCALE_SEPARATORS[locale]
    text = f"{float(value):,.{decimals}f}"
    return text.replace(",", "\0").replace(".", decimal).replace("\0", thousands)


def round_up_units(quantity: float) -> int:
    """Bars and blocks are bought whole."""
    if quantity <= 0:
        return 0
    # Guard against float noise like 3.0000000000000004 becoming 4
    return math.ceil(round(quantity, 9))


def format_quantity(quantity: float, category: str, locale: str = None) -> str:
    if category == "count":
        return format_decimal(round_up_units(quantity), 0, locale)
    return format_decimal(quantity, CATEGORY_DECIMALS.get(category, 2), locale)


def summary_table(consolidated, locale: str = None) -> list[list[str]]:
    """Header + one row per consolidated material line."""
    table = [["Material", "Quantity", "Unit"]]
    for item in consolidated.items:
        table.append([item.name, format_quantity(item.quantity, item.category, locale), item.unit])
    if consolidated.slab_area_m2:
        table.append(["Slab area", format_quantity(consolidated.slab_area_m2, "area", locale), "m²"])
    return table


def detail_table(kind: str, computed_rows, locale: str = None) -> list[list[str]]:
    """Header + one row per computed element row, in input order."""
    columns = DETAIL_COLUMNS.get(kind)
    if columns is None:
        raise ValueError(f"No detail layout for kind: {kind}")
    table = [[header for _, header, _ in columns]]
    for row in computed_rows:
        data = row if isinstance(row, dict) else row.model_dump()
        cells = []
        for field, _, category in columns:
            value = data.get(field, "")
            if category is None:
                cells.append(str(value))
            else:
                cells.append(format_quantity(float(value or 0.0), category, locale))
        table.append(cells)
    return table


def build_report(estimate, locale: str = None) -> dict:
    """Formatted tables for a whole estimate — what the PDF layer prints."""
    return {
        "floor": estimate.floor or "all",
        "summary": summary_table(estimate.consolidated, locale),
        "sections": [
            {
                "kind": result.kind,
                "title": KIND_TITLES.get(result.kind, result.kind),
                "rows": detail_table(result.kind, result.rows, locale),
            }
            for result in estimate.calculators
        ],
        "parcel_area": (
            format_quantity(estimate.parcel.area_m2, "area", locale)
            if estimate.parcel is not None and estimate.parcel.area_m2 is not None
            else None
        ),
    }
