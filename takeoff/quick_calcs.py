"""
Quick site calculators — one-shot figures used while talking to a client.

Each returns None when an input is missing, non-numeric or not positive,
so the caller can simply show nothing.
"""

from typing import Optional

from .parsing import try_parse_number


def _positive(*values) -> Optional[list]:
    numbers = [try_parse_number(v) for v in values]
    if any(n is None or n <= 0 for n in numbers):
        return None
    return numbers


def rectangle_area(width_m, length_m) -> Optional[float]:
    """Area of a rectangular space (m²)."""
    numbers = _positive(width_m, length_m)
    if numbers is None:
        return None
    width, length = numbers
    return width * length


def cost_estimate(area_m2, price_per_m2) -> Optional[float]:
    """Estimated construction cost from area and price per m²."""
    numbers = _positive(area_m2, price_per_m2)
    if numbers is None:
        return None
    area, price = numbers
    return area * price


def occupancy_rate(building_area_m2, land_area_m2) -> Optional[float]:
    """Percentage of the lot covered by the building footprint."""
    numbers = _positive(building_area_m2, land_area_m2)
    if numbers is None:
        return None
    building, land = numbers
    if building > land:
        return None
    return building / land * 100.0


def land_use_coefficient(total_built_area_m2, land_area_m2) -> Optional[float]:
    """Total built area over lot area (can exceed 1 for multi-storey buildings)."""
    numbers = _positive(total_built_area_m2, land_area_m2)
    if numbers is None:
        return None
    built, land = numbers
    return built / land
