"""Ratio-test pivot: eliminate one point while keeping every weight nonnegative."""
import warnings

from hullgeom.types import Key, AffineRelation, WeightedPointSet
from hullgeom.geometry import ReductionError, DegeneracyWarning, is_exact
from caratheodory.constants import CLAMP_TOL, RATIO_TIE_TOL


def ratio_test(point_set: WeightedPointSet, relation: AffineRelation,
               tie_tol: float = RATIO_TIE_TOL) -> Key:
    """Key minimising weights[i] / g[i] over coefficients g[i] > 0.

    Ties go to the earliest key in the point set's key order.  For float
    sets, ratios within *tie_tol* (relative) of the current minimum count as
    ties.  Raises ReductionError when no coefficient is positive.
    """
    if is_exact(list(point_set.weights.values()) + list(relation.coeffs.values())):
        tie_tol = 0
    best, best_ratio = None, None
    for k, w in point_set.weights.items():
        g = relation.coeffs.get(k, 0)
        if g <= 0:
            continue
        r = w / g
        if best is None or r < best_ratio - tie_tol*abs(best_ratio):
            best, best_ratio = k, r
    if best is None:
        raise ReductionError("Affine relation has no positive coefficient")
    return best


def pivot(point_set: WeightedPointSet, relation: AffineRelation,
          clamp_tol: float = CLAMP_TOL, tie_tol: float = RATIO_TIE_TOL) -> WeightedPointSet:
    """New point set without the ratio-test key, representing the same target.

    k[i] = weights[i] - (weights[i0] / g[i0]) * g[i] for every i != i0.
    Float weights in [-clamp_tol, 0) are clamped to 0 with a
    DegeneracyWarning; anything more negative raises ReductionError.
    """
    i0 = ratio_test(point_set, relation, tie_tol)
    g0 = relation.coeffs[i0]
    if not g0 > 0:
        raise ReductionError(f"Pivot coefficient at {i0!r} is {g0} (expected > 0)")
    t = point_set.weights[i0] / g0
    exact = is_exact(list(point_set.weights.values()) + list(relation.coeffs.values()))

    points, weights = {}, {}
    for k, p in point_set.points.items():
        if k == i0:
            continue
        w = point_set.weights[k] - t*relation.coeffs.get(k, 0)
        if w < 0:
            if exact or w < -clamp_tol:
                raise ReductionError(f"Negative weight at {k!r} after pivot: {w}")
            warnings.warn(f"Clamped weight at {k!r} from {w:.3e} to 0", DegeneracyWarning, stacklevel=2)
            w = 0.0
        points[k] = p; weights[k] = w
    return WeightedPointSet(points, weights)
