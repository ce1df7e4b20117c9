"""
Irregular parcel endpoints.

POST /api/polygon/area — vertices -> area, perimeter, drawing geometry
POST /api/polygon/svg  — vertices -> SVG drawing
"""

from typing import List, Optional

from fastapi import APIRouter
from fastapi.responses import Response
from pydantic import BaseModel

from ..calculators.polygon import PolygonCalculator, render_svg
from ..schemas import Vertex, PolygonResult

router = APIRouter(prefix="/polygon", tags=["polygon"])

calculator = PolygonCalculator()


class PolygonRequest(BaseModel):
    vertices: List[Vertex]
    width: Optional[int] = None
    height: Optional[int] = None


@router.post("/area", response_model=PolygonResult)
def polygon_area(request: PolygonRequest):
    return calculator.calculate(request.vertices)


@router.post("/svg")
def polygon_svg(request: PolygonRequest):
    """Degenerate outlines return an empty SVG, never an error."""
    visualization = calculator.build_visualization(
        request.vertices, width=request.width, height=request.height,
    )
    return Response(content=render_svg(visualization), media_type="image/svg+xml")
