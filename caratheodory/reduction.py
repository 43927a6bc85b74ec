"""Minimal support reduction: pivot until the support is affinely independent."""
from typing import Iterator, NamedTuple

from hullgeom.types import Key, WeightedPointSet
from hullgeom.geometry import ReductionError, is_affinely_independent
from caratheodory.constants import RANK_TOL
from caratheodory.pointset import validate_point_set
from caratheodory.dependency import find_dependency, normalize_sign
from caratheodory.pivot import pivot


class ReductionResult(NamedTuple):
    """Final support plus the pivots that produced it."""
    support: WeightedPointSet
    steps: int
    removed: list[Key]   # in removal order


def iter_reduction(point_set: WeightedPointSet, rel_tol: float = RANK_TOL,
                   max_steps: int | None = None) -> Iterator[WeightedPointSet]:
    """Yield *point_set*, then the result of each pivot, ending at an independent support.

    Validates *point_set* before the first yield.  Each yielded set has
    exactly one key fewer than the previous one.  Raises ReductionError
    instead of starting pivot number max_steps + 1.
    """
    validate_point_set(point_set)
    current = point_set
    steps = 0
    yield current
    while not is_affinely_independent(list(current.points.values()), rel_tol):
        if max_steps is not None and steps >= max_steps:
            raise ReductionError(
                f"Step budget exceeded: {max_steps} pivots without an affinely independent support")
        relation = normalize_sign(find_dependency(current, rel_tol))
        current = pivot(current, relation)
        steps += 1
        yield current


def reduce_with_trace(point_set: WeightedPointSet, max_steps: int | None = None,
                      rel_tol: float = RANK_TOL) -> ReductionResult:
    """Reduce *point_set* and record which keys each pivot removed.

    Raises ReductionError when more than *max_steps* pivots would be needed.
    """
    removed: list[Key] = []
    prev = None
    for current in iter_reduction(point_set, rel_tol, max_steps):
        if prev is not None:
            removed.extend(k for k in prev.points if k not in current.points)
        prev = current
    return ReductionResult(prev, len(removed), removed)


def reduce(point_set: WeightedPointSet, max_steps: int | None = None,
           rel_tol: float = RANK_TOL) -> WeightedPointSet:
    """Affinely independent sub-support of *point_set* with the same target.

    An already independent input is returned unchanged (same object).
    """
    return reduce_with_trace(point_set, max_steps, rel_tol).support


def positive_support(point_set: WeightedPointSet) -> WeightedPointSet:
    """Drop zero-weight keys. Target and affine independence are preserved."""
    keep = [k for k, w in point_set.weights.items() if w > 0]
    if len(keep) == len(point_set.weights):
        return point_set
    return WeightedPointSet(
        {k: point_set.points[k] for k in keep},
        {k: point_set.weights[k] for k in keep},
    )
