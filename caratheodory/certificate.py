"""Convex-combination certificates via linear programming.

A certificate for *target* over points p_i is a weight vector w >= 0 with
sum(w) = 1 and sum(w_i * p_i) = target, i.e. a feasible point of the LP

    A w = [target; 1],  w >= 0

where A is the affine matrix of the points.  The objective is zero; any
feasible point will do.
"""
from collections.abc import Mapping

import numpy as np
from scipy.optimize import linprog

from hullgeom.types import Vector, WeightedPointSet
from hullgeom.geometry import GeometryError, InvalidInputError, affine_matrix
from caratheodory.constants import LP_METHOD
from caratheodory.pointset import make_point_set
from caratheodory.reduction import reduce, positive_support


def find_certificate(points, target: Vector, method: str = LP_METHOD) -> WeightedPointSet:
    """Float certificate expressing *target* as a convex combination of *points*.

    Raises InvalidInputError when *target* is outside the convex hull or has
    the wrong dimension, GeometryError when the LP solver fails otherwise.
    """
    pts = dict(points) if isinstance(points, Mapping) else dict(enumerate(points))
    if not pts:
        raise InvalidInputError("Empty point set")
    keys = list(pts)
    A = np.array(affine_matrix([tuple(float(v) for v in pts[k]) for k in keys]), dtype=float)
    b = np.append(np.asarray(target, dtype=float), 1.0)
    if b.shape[0] != A.shape[0]:
        raise InvalidInputError(f"Target dimension {b.shape[0]-1} does not match points ({A.shape[0]-1})")

    n = len(keys)
    res = linprog(np.zeros(n), A_eq=A, b_eq=b, bounds=[(0, None)] * n, method=method)
    if res.status == 2:
        raise InvalidInputError(f"Target {tuple(b[:-1])} is not in the convex hull: {res.message}")
    if res.status != 0:
        raise GeometryError(f"Linear program failed (status {res.status}): {res.message}")
    w = np.clip(res.x, 0.0, None)
    w = w / w.sum()
    return make_point_set({k: pts[k] for k in keys}, {k: float(w[i]) for i, k in enumerate(keys)})


def caratheodory_support(points, target: Vector) -> WeightedPointSet:
    """Affinely independent subset of *points* whose hull contains *target*, positive weights."""
    return positive_support(reduce(find_certificate(points, target)))
