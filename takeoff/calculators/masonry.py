"""
Masonry (alvenaria) calculator.

Blocks by footprint including the joint, 5% breakage. Mortar is the wall
area times joint thickness with 10% loss, at a 1:8 cement:sand consumption.
"""

from .base import BaseCalculator
from ..constants import (
    MASONRY_BLOCK_LOSS,
    MASONRY_MORTAR_LOSS,
    MASONRY_CEMENT_KG_PER_M3,
    MASONRY_SAND_M3_PER_M3,
)
from ..schemas import MasonryRow, ComputedMasonryRow


class MasonryCalculator(BaseCalculator):

    kind = "masonry"
    row_model = MasonryRow
    computed_model = ComputedMasonryRow

    def compute_row(self, row: MasonryRow) -> dict:
        area_m2 = self.parse_dimension(row.area_m2)
        block_width_cm = self.parse_dimension(row.block_width_cm)
        block_height_cm = self.parse_dimension(row.block_height_cm)
        joint_cm = self.parse_dimension(row.joint_cm)

        if area_m2 <= 0 or block_width_cm <= 0 or block_height_cm <= 0:
            self.log_invalid(row, "wall area and block size must be positive")
            return self.zero_fields()

        footprint_m2 = (
            self.cm_to_m(block_width_cm + joint_cm) * self.cm_to_m(block_height_cm + joint_cm)
        )
        blocks = self.apply_loss(area_m2 / footprint_m2, MASONRY_BLOCK_LOSS)
        mortar = self.apply_loss(area_m2 * self.cm_to_m(joint_cm), MASONRY_MORTAR_LOSS)

        return {
            "block_count": blocks,
            "mortar_m3": mortar,
            **self.mortar_materials(mortar, MASONRY_CEMENT_KG_PER_M3, MASONRY_SAND_M3_PER_M3),
        }

    def accumulate(self, totals, computed: ComputedMasonryRow) -> None:
        totals.block_count += computed.block_count
        totals.mortar_m3 += computed.mortar_m3
        totals.cement_bags += computed.cement_bags
        totals.sand_m3 += computed.sand_m3
        if computed.block_count:
            totals.wall_area_m2 += self.parse_dimension(computed.area_m2)
