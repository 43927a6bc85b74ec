"""SVG transform factory and page constants."""
from typing import Callable, Sequence
from .types import Vector

# US Letter landscape at 72 dpi (11" x 8.5")
W, H = 792, 612

# Page margin in SVG points on every side.
MARGIN = 54

def bounding_box(points: Sequence[Vector]) -> tuple[float, float, float, float]:
    """(min_x, min_y, max_x, max_y) of the first two coordinates."""
    xs = [float(p[0]) for p in points]; ys = [float(p[1]) for p in points]
    return min(xs), min(ys), max(xs), max(ys)

def make_svg_transform(
    points: Sequence[Vector], margin: float = MARGIN,
) -> Callable[[float, float], tuple[float, float]]:
    """Create to_svg closure fitting *points* onto the page with uniform scale, y up."""
    x0, y0, x1, y1 = bounding_box(points)
    span = max(x1-x0, y1-y0, 1e-12)
    s = min(W-2*margin, H-2*margin) / span
    px = (W - s*(x1-x0)) / 2
    py = (H + s*(y1-y0)) / 2
    def to_svg(x: float, y: float) -> tuple[float, float]:
        return (px + (float(x)-x0)*s, py - (float(y)-y0)*s)
    return to_svg
