"""
Shared calculator for beams and columns.

Both are a rectangular cross-section times a length: longitudinal bars
with a splice allowance, plus closed 3/16" stirrups at fixed spacing.
The stirrup estimate ignores the row's main diameter class.
"""

from .base import BaseCalculator
from ..constants import (
    STRUCTURAL_CONCRETE,
    SPLICE_ALLOWANCE_M,
    STIRRUP_SPACING_M,
    STIRRUP_COVER_SUM_CM,
)
from ..schemas import LinearMemberRow, ComputedLinearMemberRow


class LinearMemberCalculator(BaseCalculator):

    row_model = LinearMemberRow
    computed_model = ComputedLinearMemberRow

    def compute_row(self, row: LinearMemberRow) -> dict:
        count = self.parse_dimension(row.count)
        length_m = self.parse_dimension(row.length_m)
        width_cm = self.parse_dimension(row.width_cm)
        height_cm = self.parse_dimension(row.height_cm)
        bar_quantity = self.parse_dimension(row.bar_quantity)

        if length_m <= 0 or width_cm <= 0 or height_cm <= 0:
            self.log_invalid(row, "length and cross-section must be positive")
            return self.zero_fields()

        volume = self.cm_to_m(width_cm) * self.cm_to_m(height_cm) * length_m * count
        linear_length = (length_m + SPLICE_ALLOWANCE_M) * bar_quantity * count

        stirrup_perimeter_m = 2 * (width_cm + height_cm + STIRRUP_COVER_SUM_CM) / 100.0
        stirrup_linear = (length_m / STIRRUP_SPACING_M) * stirrup_perimeter_m * count

        return {
            "volume_m3": volume,
            "linear_length_m": linear_length,
            "bar_count": self.bars_from_length(linear_length),
            "stirrup_linear_m": stirrup_linear,
            "stirrup_bars": self.bars_from_length(stirrup_linear),
            **self.concrete_materials(volume, STRUCTURAL_CONCRETE),
        }

    def accumulate(self, totals, computed: ComputedLinearMemberRow) -> None:
        totals.volume_m3 += computed.volume_m3
        totals.linear_length_m += computed.linear_length_m
        totals.cement_bags += computed.cement_bags
        totals.sand_m3 += computed.sand_m3
        totals.gravel_m3 += computed.gravel_m3
        totals.stirrup_linear_m += computed.stirrup_linear_m
        totals.stirrup_bars += computed.stirrup_bars
        if computed.bar_count:
            totals.bars_by_diameter[computed.diameter] = (
                totals.bars_by_diameter.get(computed.diameter, 0.0) + computed.bar_count
            )
