"""
Floor filter — restricts a row set to one building level before computation.
"""

from .config import settings

ALL_FLOORS = settings.ALL_FLOORS_SENTINEL


def _floor_of(row) -> str:
    floor = row.get("floor", "") if isinstance(row, dict) else getattr(row, "floor", "")
    return (floor or "").strip()


def is_all_floors(floor) -> bool:
    return floor is None or floor.strip() in ("", ALL_FLOORS)


def filter_by_floor(rows, floor=None) -> list:
    """Rows on `floor`, in input order. None, blank or the sentinel keeps every row."""
    if is_all_floors(floor):
        return list(rows)
    wanted = floor.strip()
    return [row for row in rows if _floor_of(row) == wanted]


def list_floors(*row_sets) -> list[str]:
    """Distinct non-blank floors across row sets, in first-seen order."""
    seen = []
    for rows in row_sets:
        for row in rows or []:
            floor = _floor_of(row)
            if floor and floor not in seen:
                seen.append(floor)
    return seen
