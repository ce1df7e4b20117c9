"""
Estimate engine.

Runs the whole take-off for one request:
floor filter -> per-row computation -> per-calculator totals -> consolidation.

Stateless: build a new estimate whenever rows, the active calculator set
or the floor selection changes.
"""

import logging

from .calculators.polygon import PolygonCalculator
from .calculators.registry import get_calculator, list_calculators
from .consolidation import consolidate
from .floors import filter_by_floor, is_all_floors, list_floors
from .schemas import EstimateRequest, EstimateResult, CalculatorResult

logger = logging.getLogger(__name__)


class EstimateEngine:
    """Assembles per-calculator results and the consolidated summary."""

    def __init__(self):
        self.polygon = PolygonCalculator()

    def active_kinds(self, request: EstimateRequest) -> list[str]:
        """Active calculators in registry order. None means all of them."""
        if request.active is None:
            return list_calculators()
        return [kind for kind in list_calculators() if kind in request.active]

    def compute_kind(self, kind: str, rows, floor=None) -> CalculatorResult:
        calculator = get_calculator(kind)
        computed, totals = calculator.calculate(filter_by_floor(rows, floor))
        return CalculatorResult(
            kind=kind,
            rows=[row.model_dump() for row in computed],
            totals=totals,
        )

    def build_estimate(self, request: EstimateRequest) -> EstimateResult:
        if isinstance(request, dict):
            request = EstimateRequest.model_validate(request)

        floor = None if is_all_floors(request.floor) else request.floor.strip()
        kinds = self.active_kinds(request)

        results = [
            self.compute_kind(kind, getattr(request, kind), floor)
            for kind in kinds
        ]
        consolidated = consolidate([result.totals for result in results])

        parcel = None
        if request.parcel is not None:
            parcel = self.polygon.calculate(request.parcel)

        logger.info(
            "Estimate built: %d calculators, floor=%s, %d material lines",
            len(results), floor or "all", len(consolidated.items),
        )
        return EstimateResult(
            floor=floor,
            floors=list_floors(*(getattr(request, kind) for kind in list_calculators())),
            calculators=results,
            consolidated=consolidated,
            parcel=parcel,
        )
