"""
Irregular parcel (terreno irregular) calculator.

Area by the shoelace formula over the cyclic vertex list, plus a scaled
projection of the outline for drawing. Coordinates are metres, y-up.

Fails closed: a blank or non-numeric coordinate makes the area unavailable
(None) instead of computing over a partial outline.
"""

import logging
import math
from typing import List, Optional

from ..config import settings
from ..parsing import try_parse_number
from ..schemas import (
    PolygonResult,
    Visualization,
    ProjectedPoint,
    EdgeAnnotation,
)

logger = logging.getLogger(__name__)

MIN_VERTICES = 3


class PolygonCalculator:

    kind = "polygon"

    def parse_vertices(self, vertices) -> Optional[List[tuple]]:
        """
        (x, y) float pairs, or None when the outline is unusable.

        Vertices may be Vertex models, {"x", "y"} dicts or plain (x, y)
        pairs. A missing, null or non-numeric coordinate, a malformed vertex
        or fewer than three vertices all give None.
        """
        if vertices is None:
            return None
        points = []
        for vertex in vertices:
            if isinstance(vertex, dict):
                raw_x, raw_y = vertex.get("x"), vertex.get("y")
            elif isinstance(vertex, (tuple, list)):
                if len(vertex) != 2:
                    return None
                raw_x, raw_y = vertex
            else:
                raw_x, raw_y = getattr(vertex, "x", None), getattr(vertex, "y", None)
            x = try_parse_number(raw_x)
            y = try_parse_number(raw_y)
            if x is None or y is None:
                logger.debug("Parcel outline unavailable — non-numeric vertex %r", vertex)
                return None
            points.append((x, y))
        if len(points) < MIN_VERTICES:
            logger.debug("Parcel outline unavailable — %d vertices", len(points))
            return None
        return points

    def compute_area(self, vertices) -> Optional[float]:
        """Shoelace area, either winding. None when unavailable."""
        points = self.parse_vertices(vertices)
        return None if points is None else shoelace_area(points)

    def compute_perimeter(self, vertices) -> Optional[float]:
        points = self.parse_vertices(vertices)
        return None if points is None else perimeter(points)

    def build_visualization(self, vertices, width: int = None, height: int = None,
                            padding: int = None) -> Optional[Visualization]:
        """
        Fit the outline into a width x height viewport with padding.

        Uniform scale (aspect preserved), centred, y flipped for screen
        coordinates. Each edge carries its real length and a label position
        at its projected midpoint. None when the outline is degenerate.
        """
        points = self.parse_vertices(vertices)
        if points is None:
            return None
        return project(points, width, height, padding)

    def calculate(self, vertices) -> PolygonResult:
        points = self.parse_vertices(vertices)
        if points is None:
            return PolygonResult()
        return PolygonResult(
            area_m2=shoelace_area(points),
            perimeter_m=perimeter(points),
            visualization=project(points),
        )


def project(points, width: int = None, height: int = None,
            padding: int = None) -> Optional[Visualization]:
    """Viewport projection of parsed (x, y) points. None when degenerate."""
    width = settings.POLYGON_VIEWPORT_WIDTH if width is None else width
    height = settings.POLYGON_VIEWPORT_HEIGHT if height is None else height
    padding = settings.POLYGON_PADDING if padding is None else padding

    if len(points) < MIN_VERTICES:
        return None

    xs = [p[0] for p in points]
    ys = [p[1] for p in points]
    min_x, max_x = min(xs), max(xs)
    min_y, max_y = min(ys), max(ys)
    box_w = max_x - min_x
    box_h = max_y - min_y
    if box_w <= 0 or box_h <= 0:
        return None

    usable_w = width - 2 * padding
    usable_h = height - 2 * padding
    if usable_w <= 0 or usable_h <= 0:
        return None
    scale = min(usable_w / box_w, usable_h / box_h)

    # Centre the drawing in whichever axis has slack
    offset_x = padding + (usable_w - box_w * scale) / 2
    offset_y = padding + (usable_h - box_h * scale) / 2

    projected = [
        ProjectedPoint(
            x=offset_x + (x - min_x) * scale,
            y=height - (offset_y + (y - min_y) * scale),
        )
        for x, y in points
    ]

    edges = []
    count = len(points)
    for i in range(count):
        j = (i + 1) % count
        edges.append(EdgeAnnotation(
            start=i,
            end=j,
            length=edge_length(points[i], points[j]),
            label_x=(projected[i].x + projected[j].x) / 2,
            label_y=(projected[i].y + projected[j].y) / 2,
        ))

    return Visualization(width=width, height=height, scale=scale,
                         points=projected, edges=edges)


def _edges(points):
    count = len(points)
    for i in range(count):
        yield points[i], points[(i + 1) % count]


def shoelace_area(points) -> float:
    """A = 1/2 |Σ (x_i*y_{i+1} - x_{i+1}*y_i)|, closing edge included."""
    if len(points) < MIN_VERTICES:
        return 0.0
    area2 = 0.0
    for (x1, y1), (x2, y2) in _edges(points):
        area2 += x1 * y2 - x2 * y1
    return abs(area2) * 0.5


def edge_length(a, b) -> float:
    return math.hypot(b[0] - a[0], b[1] - a[1])


def perimeter(points) -> float:
    return sum(edge_length(a, b) for a, b in _edges(points))


def render_svg(visualization: Optional[Visualization], decimals: int = 2) -> str:
    """SVG drawing of a projected outline with edge-length labels."""
    if visualization is None:
        return '<svg xmlns="http://www.w3.org/2000/svg" width="0" height="0"></svg>'

    w, h = visualization.width, visualization.height
    path = " ".join(f"{p.x:.1f},{p.y:.1f}" for p in visualization.points)
    lines = [
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{w}" height="{h}" viewBox="0 0 {w} {h}">',
        f'  <polygon points="{path}" fill="#e8f0fe" stroke="#1a56db" stroke-width="2"/>',
    ]
    for p in visualization.points:
        lines.append(f'  <circle cx="{p.x:.1f}" cy="{p.y:.1f}" r="3" fill="#1a56db"/>')
    for edge in visualization.edges:
        lines.append(
            f'  <text x="{edge.label_x:.1f}" y="{edge.label_y:.1f}" font-size="11" '
            f'text-anchor="middle" fill="#111">{edge.length:.{decimals}f} m</text>'
        )
    lines.append("</svg>")
    return "\n".join(lines)
