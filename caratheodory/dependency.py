"""Affine dependency detection for weighted point sets.

An affine relation among points p_i is a coefficient vector g, not all
zero, with sum(g) = 0 and sum(g[i] * p_i) = 0.  Such a g is exactly a null
vector of the (D+1) x n matrix whose columns are the points stacked over a
row of ones, so finding one is a single Gaussian elimination.
"""
from hullgeom.types import AffineRelation, WeightedPointSet
from hullgeom.geometry import (
    NotAffinelyDependentError, NullSpaceError,
    normalized_affine_matrix, pivot_tol, null_vector,
)
from caratheodory.constants import RANK_TOL


def find_dependency(point_set: WeightedPointSet, rel_tol: float = RANK_TOL) -> AffineRelation:
    """Nontrivial affine relation among the points of *point_set*.

    Coefficients are keyed like the point set.  The first free column of
    the reduced echelon form gets coefficient 1, so the relation always has
    a strictly positive entry.  Float families are eliminated on
    normalized_affine_matrix, the same matrix affine_rank uses, so the
    result does not depend on the scale or offset of the points.

    Raises NotAffinelyDependentError when the points are affinely
    independent, and NullSpaceError when the elimination result fails its
    residual check.
    """
    keys = list(point_set.points)
    A = normalized_affine_matrix([point_set.points[k] for k in keys])
    tol = pivot_tol(A, rel_tol)
    g = null_vector(A, tol, rel_tol if tol else 0)
    if g is None:
        raise NotAffinelyDependentError(f"Family of {len(keys)} points is affinely independent")

    if not any(g):
        raise NullSpaceError("Elimination returned the zero vector")
    residual = max(abs(sum(a*v for a, v in zip(row, g))) for row in A)
    if residual > 2 * tol * len(keys) * max(abs(v) for v in g):
        raise NullSpaceError(f"Affine relation residual too large: {float(residual):.3e}")
    return AffineRelation(dict(zip(keys, g)))


def normalize_sign(relation: AffineRelation) -> AffineRelation:
    """Negate *relation* when none of its coefficients is strictly positive.

    Raises NullSpaceError for an identically zero relation.
    """
    nonzero = [v for v in relation.coeffs.values() if v != 0]
    if not nonzero:
        raise NullSpaceError("Affine relation is identically zero")
    if all(v <= 0 for v in nonzero):
        return AffineRelation({k: -v for k, v in relation.coeffs.items()})
    return relation
