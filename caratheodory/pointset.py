"""Weighted point set construction and entry validation."""
import math
from collections.abc import Mapping
from fractions import Fraction

from hullgeom.types import Scalar, Vector, WeightedPointSet
from hullgeom.geometry import InvalidInputError, is_exact, center_mass
from caratheodory.constants import WEIGHT_SUM_TOL, NEGATIVE_WEIGHT_TOL


def _as_dict(items) -> dict:
    return dict(items) if isinstance(items, Mapping) else dict(enumerate(items))


def make_point_set(points, weights) -> WeightedPointSet:
    """Build a WeightedPointSet from mappings or sequences of points and weights.

    Sequence positions become keys.  Key order follows *points*.  Values are
    promoted to Fraction when every coordinate and weight is exact, otherwise
    to float.  Raises InvalidInputError when the key sets differ.
    """
    pts = _as_dict(points); wts = _as_dict(weights)
    if set(pts) != set(wts):
        raise InvalidInputError(
            f"Point keys {sorted(map(repr, pts))} do not match weight keys {sorted(map(repr, wts))}")
    exact = is_exact([v for p in pts.values() for v in p] + list(wts.values()))
    conv = Fraction if exact else float
    return WeightedPointSet(
        {k: tuple(conv(v) for v in p) for k, p in pts.items()},
        {k: conv(wts[k]) for k in pts},
    )


def uniform_point_set(points) -> WeightedPointSet:
    """Equal weights 1/n on every point (exact when the points are exact)."""
    pts = _as_dict(points)
    if not pts:
        raise InvalidInputError("Empty point set")
    n = len(pts)
    w = Fraction(1, n) if is_exact(v for p in pts.values() for v in p) else 1.0/n
    return make_point_set(pts, {k: w for k in pts})


def target(point_set: WeightedPointSet) -> Vector:
    """The represented point: sum(weights[i] * points[i])."""
    keys = list(point_set.points)
    return center_mass([point_set.points[k] for k in keys], [point_set.weights[k] for k in keys])


def validate_point_set(point_set: WeightedPointSet, sum_tol: float = WEIGHT_SUM_TOL) -> None:
    """Raise InvalidInputError unless *point_set* is a convex-combination certificate."""
    points, weights = point_set
    if not points:
        raise InvalidInputError("Empty point set")
    if list(points) != list(weights):
        raise InvalidInputError("Point and weight keys differ or are ordered differently")
    dims = {len(p) for p in points.values()}
    if len(dims) != 1:
        raise InvalidInputError(f"Inconsistent point dimensions: {sorted(dims)}")
    values: list[Scalar] = [v for p in points.values() for v in p] + list(weights.values())
    exact = is_exact(values)
    if not exact and not all(math.isfinite(v) for v in values):
        raise InvalidInputError("Non-finite coordinate or weight")
    for k, w in weights.items():
        if w < -NEGATIVE_WEIGHT_TOL:
            raise InvalidInputError(f"Negative weight at {k!r}: {w}")
    total = sum(weights.values())
    off = total != 1 if exact else abs(total-1) > sum_tol
    if off:
        raise InvalidInputError(f"Weights sum to {total} (expected 1)")
