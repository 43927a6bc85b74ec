"""Pure vector helpers, exact/float detection, and affine linear algebra."""
from fractions import Fraction
from typing import Iterable, Sequence

from .types import Scalar, Vector

# ============================================================
# Error Types
# ============================================================
class GeometryError(ValueError):
    """Raised for impossible geometry operations."""

class InvalidInputError(GeometryError):
    """Weights or points do not form a valid convex-combination certificate."""

class NotAffinelyDependentError(GeometryError):
    """A dependency was requested for an affinely independent family."""

class NullSpaceError(GeometryError):
    """Elimination failed to produce a nontrivial null vector."""

class ReductionError(GeometryError):
    """A pivot broke a weight invariant or the step budget ran out."""

class DegeneracyWarning(UserWarning):
    """Rounding noise was clamped after a pivot."""

# ============================================================
# Vector Utilities
# ============================================================
def vec_add(a: Vector, b: Vector) -> Vector:
    """Componentwise sum. Raises GeometryError on dimension mismatch."""
    if len(a) != len(b):
        raise GeometryError(f"Dimension mismatch: {len(a)} vs {len(b)}")
    return tuple(x+y for x, y in zip(a, b))

def vec_sub(a: Vector, b: Vector) -> Vector:
    """Componentwise difference. Raises GeometryError on dimension mismatch."""
    if len(a) != len(b):
        raise GeometryError(f"Dimension mismatch: {len(a)} vs {len(b)}")
    return tuple(x-y for x, y in zip(a, b))

def vec_scale(s: Scalar, a: Vector) -> Vector:
    return tuple(s*x for x in a)

def max_abs_diff(a: Vector, b: Vector) -> float:
    """Largest componentwise |a - b|; 0 for two empty vectors."""
    return max((abs(d) for d in vec_sub(a, b)), default=0.0)

def is_exact(values: Iterable[Scalar]) -> bool:
    """True when every value is an int or Fraction (bool excluded)."""
    return all(isinstance(v, (int, Fraction)) and not isinstance(v, bool) for v in values)

def center_mass(points: Sequence[Vector], weights: Sequence[Scalar]) -> Vector:
    """Weighted sum of points. Raises GeometryError on empty or ragged input."""
    if not points:
        raise GeometryError("Empty point family has no center of mass")
    if len(points) != len(weights):
        raise GeometryError(f"Got {len(points)} points but {len(weights)} weights")
    acc = vec_scale(weights[0], points[0])
    for p, w in zip(points[1:], weights[1:]):
        acc = vec_add(acc, vec_scale(w, p))
    return acc

def poly_area(verts: Sequence[Vector]) -> float:
    """Planar polygon area via the shoelace formula. Works for either winding order."""
    n = len(verts); a = 0
    for i in range(n):
        j = (i+1)%n; a += verts[i][0]*verts[j][1]-verts[j][0]*verts[i][1]
    return abs(a)/2

# ============================================================
# Gaussian Elimination
# ============================================================
def pivot_tol(matrix: Sequence[Sequence[Scalar]], rel_tol: float) -> float:
    """Absolute pivot threshold: 0 for exact matrices, else rel_tol * max|entry|."""
    entries = [v for row in matrix for v in row]
    if is_exact(entries):
        return 0
    return rel_tol * max([abs(v) for v in entries] + [1.0])

def rref(matrix: Sequence[Sequence[Scalar]], tol: float = 0) -> tuple[list[list[Scalar]], list[int]]:
    """Reduced row echelon form with partial pivoting.

    Entries are promoted to Fraction when the matrix is exact, otherwise to
    float.  A column whose largest remaining entry is at most *tol* in
    absolute value is treated as free.

    Returns (rows, pivot_cols).
    """
    exact = is_exact(v for row in matrix for v in row)
    conv = Fraction if exact else float
    R = [[conv(v) for v in row] for row in matrix]
    n_rows = len(R); n_cols = len(R[0]) if R else 0
    pivots: list[int] = []
    r = 0
    for c in range(n_cols):
        if r == n_rows:
            break
        p = max(range(r, n_rows), key=lambda i: abs(R[i][c]))
        if abs(R[p][c]) <= tol:
            continue
        R[r], R[p] = R[p], R[r]
        piv = R[r][c]
        R[r] = [v/piv for v in R[r]]
        for i in range(n_rows):
            if i != r and R[i][c] != 0:
                f = R[i][c]
                R[i] = [a-f*b for a, b in zip(R[i], R[r])]
        pivots.append(c); r += 1
    return R, pivots

def null_vector(matrix: Sequence[Sequence[Scalar]], tol: float = 0,
                chop_tol: float = 0) -> list[Scalar] | None:
    """Nontrivial solution of matrix . g = 0 from the first free column, or None.

    With *chop_tol*, pivot-column coefficients at most chop_tol * max|g| are
    zeroed.  The free column keeps its coefficient 1.
    """
    R, pivots = rref(matrix, tol)
    n_cols = len(matrix[0]) if matrix else 0
    free = [c for c in range(n_cols) if c not in pivots]
    if not free:
        return None
    f = free[0]
    exact = is_exact(v for row in matrix for v in row)
    zero, one = (Fraction(0), Fraction(1)) if exact else (0.0, 1.0)
    g = [zero] * n_cols
    g[f] = one
    for r, c in enumerate(pivots):
        g[c] = -R[r][f]
    if chop_tol:
        g_max = max(abs(v) for v in g)
        for c in pivots:
            if abs(g[c]) <= chop_tol*g_max:
                g[c] = zero
    return g

# ============================================================
# Affine Rank
# ============================================================
def affine_matrix(points: Sequence[Vector]) -> list[list[Scalar]]:
    """(D+1) x n matrix: one column per point, coordinates stacked over a row of ones."""
    if not points:
        return []
    dim = len(points[0])
    for p in points:
        if len(p) != dim:
            raise GeometryError(f"Dimension mismatch: {len(p)} vs {dim}")
    one = 1 if is_exact(v for p in points for v in p) else 1.0
    rows = [[p[d] for p in points] for d in range(dim)]
    rows.append([one] * len(points))
    return rows

def normalized_affine_matrix(points: Sequence[Vector]) -> list[list[Scalar]]:
    """Affine matrix of a float family moved to its first point and scaled to unit spread.

    Translation and uniform scaling leave the affine relations unchanged, so
    the null space equals that of affine_matrix(points).  Coordinates become
    p_i - p_0 divided by the largest |p_i - p_0| entry, so a relative pivot
    tolerance measures the point differences rather than the ones row or the
    offset from the origin.  Exact families are returned unscaled.
    """
    if not points or is_exact(v for p in points for v in p):
        return affine_matrix(points)
    base = points[0]
    diffs = [vec_sub(p, base) for p in points]
    spread = max((abs(v) for d in diffs for v in d), default=0.0)
    if spread:
        diffs = [vec_scale(1.0/spread, d) for d in diffs]
    return affine_matrix([tuple(float(v) for v in d) for d in diffs])

def affine_rank(points: Sequence[Vector], rel_tol: float = 1e-9) -> int:
    """Rank of the affine matrix (affine dimension of the family + 1).

    Invariant under translation and uniform scaling of float families.
    """
    A = normalized_affine_matrix(points)
    if not A:
        return 0
    _, pivots = rref(A, pivot_tol(A, rel_tol))
    return len(pivots)

def is_affinely_independent(points: Sequence[Vector], rel_tol: float = 1e-9) -> bool:
    """True when no nontrivial affine relation holds among the points."""
    return affine_rank(points, rel_tol) == len(points)
