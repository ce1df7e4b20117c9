"""
Quantity take-off endpoints.

POST /api/quantities/{kind}/compute  — rows (+ optional floor) -> computed rows + totals
POST /api/quantities/consolidate     — list of Totals -> consolidated summary
POST /api/quantities/estimate        — every calculator at once
POST /api/quantities/report          — estimate formatted as report tables
"""

from typing import List, Optional

from fastapi import APIRouter, HTTPException, Query
from pydantic import BaseModel

from .. import reporting
from ..calculators.registry import get_calculator, has_calculator, list_calculators
from ..consolidation import consolidate
from ..estimate import EstimateEngine
from ..floors import filter_by_floor
from ..rows import default_rows
from ..schemas import (
    Totals,
    ConsolidatedTotals,
    EstimateRequest,
    EstimateResult,
)

router = APIRouter(prefix="/quantities", tags=["quantities"])

engine = EstimateEngine()


class ComputeRequest(BaseModel):
    rows: List[dict] = []
    floor: Optional[str] = None


class ComputeResponse(BaseModel):
    kind: str
    rows: List[dict]
    totals: Totals


def _calculator_or_404(kind: str):
    if not has_calculator(kind):
        raise HTTPException(status_code=404, detail=f"Unknown calculator: {kind}")
    return get_calculator(kind)


@router.get("/calculators")
def calculators():
    return {"calculators": list_calculators()}


@router.get("/{kind}/default-rows")
def get_default_rows(kind: str):
    _calculator_or_404(kind)
    return {"kind": kind, "rows": [row.model_dump() for row in default_rows(kind)]}


@router.post("/{kind}/compute", response_model=ComputeResponse)
def compute(kind: str, request: ComputeRequest):
    calculator = _calculator_or_404(kind)
    try:
        rows = [calculator.coerce_row(row) for row in request.rows]
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    computed, totals = calculator.calculate(filter_by_floor(rows, request.floor))
    return ComputeResponse(kind=kind, rows=[row.model_dump() for row in computed], totals=totals)


@router.post("/consolidate", response_model=ConsolidatedTotals)
def consolidate_totals(totals: List[Totals]):
    return consolidate(totals)


@router.post("/estimate", response_model=EstimateResult)
def estimate(request: EstimateRequest):
    return engine.build_estimate(request)


@router.post("/report")
def report(request: EstimateRequest, locale: Optional[str] = Query(None)):
    return reporting.build_report(engine.build_estimate(request), locale)
