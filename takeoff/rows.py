"""
Row collection management.

Every operation returns a new list; input collections are never mutated.
Simple calculators keep at least one row, the parcel polygon at least
three vertices — removing below that is a no-op.
"""

import logging

from .schemas import (
    FootingRow,
    BeamRow,
    ColumnRow,
    SlabRow,
    MasonryRow,
    PlasterRow,
    Vertex,
)

logger = logging.getLogger(__name__)

ROW_MODELS = {
    "footing": FootingRow,
    "beam": BeamRow,
    "column": ColumnRow,
    "slab": SlabRow,
    "masonry": MasonryRow,
    "plaster": PlasterRow,
    "polygon": Vertex,
}

# Placeholder values a new row starts with
DEFAULT_ROWS = {
    "footing": {"floor": "Térreo", "label": "S1", "count": "1", "width_cm": "80",
                "length_cm": "80", "height_cm": "30", "horizontal_stirrups": "5",
                "vertical_stirrups": "5", "diameter": "3/8"},
    "beam": {"floor": "Térreo", "label": "V1", "count": "1", "length_m": "3",
             "width_cm": "14", "height_cm": "30", "bar_quantity": "4", "diameter": "3/8"},
    "column": {"floor": "Térreo", "label": "P1", "count": "1", "length_m": "2.8",
               "width_cm": "14", "height_cm": "30", "bar_quantity": "4", "diameter": "3/8"},
    "slab": {"floor": "Térreo", "label": "L1", "slab_type": "slab",
             "thickness_cm": "10", "area_m2": "10"},
    "masonry": {"floor": "Térreo", "label": "A1", "area_m2": "10",
                "block_width_cm": "39", "block_height_cm": "19", "joint_cm": "1"},
    "plaster": {"floor": "Térreo", "label": "R1", "area_m2": "10",
                "thickness_cm": "2", "sides": "1"},
}

DEFAULT_POLYGON = [
    {"x": "0", "y": "0"},
    {"x": "10", "y": "0"},
    {"x": "10", "y": "20"},
    {"x": "0", "y": "20"},
]


def _row_model(kind: str):
    if kind not in ROW_MODELS:
        raise ValueError(f"Unknown row kind: {kind}. Available: {list(ROW_MODELS.keys())}")
    return ROW_MODELS[kind]


def minimum_rows(kind: str) -> int:
    return 3 if kind == "polygon" else 1


def default_row(kind: str):
    """One new row with placeholder values."""
    model = _row_model(kind)
    if kind == "polygon":
        return model()
    return model(**DEFAULT_ROWS[kind])


def default_rows(kind: str) -> list:
    """The collection a calculator starts (and resets) with."""
    model = _row_model(kind)
    if kind == "polygon":
        return [model(**vertex) for vertex in DEFAULT_POLYGON]
    return [default_row(kind)]


def _coerce(kind: str, rows) -> list:
    model = _row_model(kind)
    return [row if isinstance(row, model) else model.model_validate(row) for row in rows]


def add_row(rows, kind: str) -> list:
    return _coerce(kind, rows) + [default_row(kind)]


def update_row(rows, index: int, field: str, value, kind: str) -> list:
    """Replace one field of one row. Unknown fields raise ValueError."""
    model = _row_model(kind)
    if field not in model.model_fields:
        raise ValueError(f"{kind} rows have no field {field!r}")
    current = _coerce(kind, rows)
    if not 0 <= index < len(current):
        logger.debug("update_row: index %d out of range for %d %s rows", index, len(current), kind)
        return current
    data = current[index].model_dump()
    data[field] = value
    current[index] = model.model_validate(data)
    return current


def remove_row(rows, index: int, kind: str) -> list:
    """Drop one row unless that would go below the minimum count."""
    current = _coerce(kind, rows)
    if len(current) <= minimum_rows(kind) or not 0 <= index < len(current):
        return current
    return current[:index] + current[index + 1:]


def reset_rows(kind: str) -> list:
    return default_rows(kind)
