"""
Footing (sapata) calculator.

Rectangular pad footing: concrete block plus a mesh of straight bars
in both directions, each bar shortened by the cover allowance.
"""

from .base import BaseCalculator
from ..constants import STRUCTURAL_CONCRETE, FOOTING_COVER_CM
from ..schemas import FootingRow, ComputedFootingRow


class FootingCalculator(BaseCalculator):

    kind = "footing"
    row_model = FootingRow
    computed_model = ComputedFootingRow

    def compute_row(self, row: FootingRow) -> dict:
        count = self.parse_dimension(row.count)
        width_cm = self.parse_dimension(row.width_cm)
        length_cm = self.parse_dimension(row.length_cm)
        height_cm = self.parse_dimension(row.height_cm)
        horizontal_stirrups = self.parse_dimension(row.horizontal_stirrups)
        vertical_stirrups = self.parse_dimension(row.vertical_stirrups)

        if width_cm <= 0 or length_cm <= 0 or height_cm <= 0:
            self.log_invalid(row, "width, length and height must be positive")
            return self.zero_fields()

        width_m = self.cm_to_m(width_cm)
        length_m = self.cm_to_m(length_cm)
        height_m = self.cm_to_m(height_cm)

        unit_volume = width_m * length_m * height_m
        volume = unit_volume * count

        # Bars run the full dimension minus cover; too small a footing gets none
        vertical_bar_m = self.cm_to_m(length_cm - FOOTING_COVER_CM) if length_cm > FOOTING_COVER_CM else 0.0
        horizontal_bar_m = self.cm_to_m(width_cm - FOOTING_COVER_CM) if width_cm > FOOTING_COVER_CM else 0.0

        linear_length = (
            horizontal_bar_m * horizontal_stirrups + vertical_bar_m * vertical_stirrups
        ) * count

        return {
            "unit_volume_m3": unit_volume,
            "volume_m3": volume,
            "horizontal_bar_m": horizontal_bar_m,
            "vertical_bar_m": vertical_bar_m,
            "linear_length_m": linear_length,
            "bar_count": self.bars_from_length(linear_length),
            **self.concrete_materials(volume, STRUCTURAL_CONCRETE),
        }

    def accumulate(self, totals, computed: ComputedFootingRow) -> None:
        totals.volume_m3 += computed.volume_m3
        totals.linear_length_m += computed.linear_length_m
        totals.cement_bags += computed.cement_bags
        totals.sand_m3 += computed.sand_m3
        totals.gravel_m3 += computed.gravel_m3
        if computed.bar_count:
            totals.bars_by_diameter[computed.diameter] = (
                totals.bars_by_diameter.get(computed.diameter, 0.0) + computed.bar_count
            )
