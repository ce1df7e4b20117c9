"""
Plaster (reboco) calculator.

One or both faces of a wall, richer 1:4 mortar with 10% loss.
"""

from .base import BaseCalculator
from ..constants import (
    PLASTER_MORTAR_LOSS,
    PLASTER_CEMENT_KG_PER_M3,
    PLASTER_SAND_M3_PER_M3,
)
from ..schemas import PlasterRow, ComputedPlasterRow


class PlasterCalculator(BaseCalculator):

    kind = "plaster"
    row_model = PlasterRow
    computed_model = ComputedPlasterRow

    def parse_sides(self, value) -> int:
        """Anything other than 2 is a single face."""
        return 2 if self.parse_number(value) == 2 else 1

    def compute_row(self, row: PlasterRow) -> dict:
        area_m2 = self.parse_dimension(row.area_m2)
        thickness_cm = self.parse_dimension(row.thickness_cm)

        if area_m2 <= 0 or thickness_cm <= 0:
            self.log_invalid(row, "wall area and coat thickness must be positive")
            return self.zero_fields()

        effective_area = area_m2 * self.parse_sides(row.sides)
        mortar = self.apply_loss(effective_area * self.cm_to_m(thickness_cm), PLASTER_MORTAR_LOSS)

        return {
            "effective_area_m2": effective_area,
            "mortar_m3": mortar,
            **self.mortar_materials(mortar, PLASTER_CEMENT_KG_PER_M3, PLASTER_SAND_M3_PER_M3),
        }

    def accumulate(self, totals, computed: ComputedPlasterRow) -> None:
        totals.mortar_m3 += computed.mortar_m3
        totals.cement_bags += computed.cement_bags
        totals.sand_m3 += computed.sand_m3
        totals.wall_area_m2 += computed.effective_area_m2
