"""
Slab / subfloor (laje / contrapiso) calculator.

Area times thickness, leaner 1:4:5 trace. Only rows typed "slab" count
toward the slab area used by area-based reporting.
"""

from .base import BaseCalculator
from ..constants import SLAB_CONCRETE
from ..schemas import SlabRow, ComputedSlabRow


class SlabCalculator(BaseCalculator):

    kind = "slab"
    row_model = SlabRow
    computed_model = ComputedSlabRow

    def compute_row(self, row: SlabRow) -> dict:
        thickness_cm = self.parse_dimension(row.thickness_cm)
        area_m2 = self.parse_dimension(row.area_m2)

        if thickness_cm <= 0 or area_m2 <= 0:
            self.log_invalid(row, "area and thickness must be positive")
            return self.zero_fields()

        volume = area_m2 * self.cm_to_m(thickness_cm)
        return {
            "volume_m3": volume,
            **self.concrete_materials(volume, SLAB_CONCRETE),
        }

    def accumulate(self, totals, computed: ComputedSlabRow) -> None:
        totals.volume_m3 += computed.volume_m3
        totals.cement_bags += computed.cement_bags
        totals.sand_m3 += computed.sand_m3
        totals.gravel_m3 += computed.gravel_m3
        if computed.slab_type == "slab":
            totals.slab_area_m2 += self.parse_dimension(computed.area_m2)
