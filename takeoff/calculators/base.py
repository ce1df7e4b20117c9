"""
Abstract base class for all element calculators.

Input: list of element rows (schema models or plain dicts, geometry as text)
Output: list of computed rows + one Totals record
"""

import logging
from abc import ABC, abstractmethod

from ..constants import STANDARD_BAR_LENGTH_M, TRACE_BAG_FACTOR, CEMENT_BAG_KG
from ..parsing import parse_number, parse_dimension
from ..schemas import Totals

logger = logging.getLogger(__name__)


class BaseCalculator(ABC):
    """All element calculators inherit from this."""

    kind: str = ""
    row_model = None
    computed_model = None

    @abstractmethod
    def compute_row(self, row) -> dict:
        """
        Takes one validated input row.
        Returns the derived fields only — the caller merges them into the row.
        """
        pass

    @abstractmethod
    def accumulate(self, totals: Totals, computed) -> None:
        """Add one computed row into the running totals."""
        pass

    def compute_rows(self, rows) -> list:
        """Compute every row, preserving input order. Never mutates the input."""
        computed = []
        for row in rows:
            row = self.coerce_row(row)
            derived = self.compute_row(row)
            # Input fields only: rows computed earlier carry stale derived fields
            fields = row.model_dump(include=set(self.row_model.model_fields))
            computed.append(self.computed_model(**fields, **derived))
        return computed

    def get_totals(self, computed_rows) -> Totals:
        """Pure fold over computed rows."""
        totals = Totals(calculator=self.kind)
        for computed in computed_rows:
            if isinstance(computed, dict):
                computed = self.computed_model.model_validate(computed)
            self.accumulate(totals, computed)
        return totals

    def calculate(self, rows) -> tuple:
        """compute_rows + get_totals in one call."""
        computed = self.compute_rows(rows)
        return computed, self.get_totals(computed)

    # --- Helper methods for all calculators ---

    def coerce_row(self, row):
        """Accept schema instances or raw dicts from the row collaborator."""
        if isinstance(row, self.row_model):
            return row
        if isinstance(row, dict):
            return self.row_model.model_validate(row)
        return self.row_model.model_validate(row.model_dump())

    def parse_number(self, value) -> float:
        return parse_number(value)

    def parse_dimension(self, value) -> float:
        return parse_dimension(value)

    def cm_to_m(self, cm: float) -> float:
        return cm / 100.0

    def bars_from_length(self, linear_length_m: float) -> float:
        """
        Number of 12 m commercial bars for a linear demand.
        Left fractional — rounding up is a presentation concern.
        """
        if linear_length_m <= 0:
            return 0.0
        return linear_length_m / STANDARD_BAR_LENGTH_M

    def apply_loss(self, quantity: float, loss_factor: float) -> float:
        """Inflate a quantity by a loss factor (0.10 = 10%)."""
        return quantity * (1 + loss_factor)

    def concrete_materials(self, volume_m3: float, mix: dict) -> dict:
        """Cement bags, sand and gravel for a concrete volume and trace."""
        if volume_m3 <= 0:
            return {"cement_bags": 0.0, "sand_m3": 0.0, "gravel_m3": 0.0}
        cement = volume_m3 / mix["cement_divisor"]
        return {
            "cement_bags": cement,
            "sand_m3": cement * mix["sand_parts"] * TRACE_BAG_FACTOR / 1000.0,
            "gravel_m3": cement * mix["gravel_parts"] * TRACE_BAG_FACTOR / 1000.0,
        }

    def mortar_materials(self, mortar_m3: float, cement_kg_per_m3: float,
                         sand_m3_per_m3: float) -> dict:
        """Cement bags and sand for a mortar volume at given consumption rates."""
        return {
            "cement_bags": mortar_m3 * cement_kg_per_m3 / CEMENT_BAG_KG,
            "sand_m3": mortar_m3 * sand_m3_per_m3,
        }

    def zero_fields(self) -> dict:
        """Every derived field of this calculator at zero."""
        base_fields = set(self.row_model.model_fields)
        return {
            name: 0.0 for name in self.computed_model.model_fields
            if name not in base_fields
        }

    def log_invalid(self, row, reason: str) -> None:
        logger.debug("%s row %r (%s) yields zero quantities: %s",
                     self.kind, row.label, row.floor, reason)
