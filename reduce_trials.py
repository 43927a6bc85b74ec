"""
Random-cloud trials for support reduction.

Each trial draws n points uniformly from the unit cube in D dimensions and a
Dirichlet weight vector, reduces the support, and measures how far the
target drifted.  In general position every trial needs exactly n - (D+1)
pivots and ends on D+1 points.
"""

import math
from typing import NamedTuple

import numpy as np

from hullgeom.geometry import is_affinely_independent
from caratheodory.constants import TARGET_TOL
from caratheodory.pointset import make_point_set, target
from caratheodory.reduction import reduce_with_trace


class TrialResult(NamedTuple):
    """Outcome of one random reduction."""
    n_points: int
    dim: int
    steps: int
    support_size: int
    independent: bool
    weight_sum_err: float     # |sum(weights) - 1|
    residual: float           # ||target_after - target_before||


def run_trial(rng: np.random.Generator, n_points: int, dim: int) -> TrialResult:
    cloud = rng.random((n_points, dim))
    w = rng.dirichlet(np.ones(n_points))
    ps = make_point_set(cloud.tolist(), w.tolist())
    trace = reduce_with_trace(ps)
    sup = trace.support
    before = np.array(target(ps)); after = np.array(target(sup))
    return TrialResult(
        n_points, dim, trace.steps, len(sup.points),
        is_affinely_independent(list(sup.points.values())),
        abs(sum(sup.weights.values()) - 1.0),
        float(np.linalg.norm(after - before)),
    )


def run_trials(n_trials: int = 20, n_points: int = 12, dim: int = 3, seed: int = 42) -> list[TrialResult]:
    """*n_trials* independent reductions from one seeded generator."""
    rng = np.random.default_rng(seed)
    return [run_trial(rng, n_points, dim) for _ in range(n_trials)]


def rms(values: list[float]) -> float:
    return math.sqrt(np.mean(np.square(values))) if values else 0.0


if __name__ == "__main__":
    results = run_trials()
    print("=== Random Cloud Reductions ===")
    print(f"{'Trial':>5} {'n':>4} {'D':>3} {'Steps':>6} {'Support':>8} {'Indep':>6} {'Sum err':>10} {'Residual':>10}")
    print("-" * 60)
    for i, r in enumerate(results):
        print(f"{i:>5} {r.n_points:>4} {r.dim:>3} {r.steps:>6} {r.support_size:>8} "
              f"{'yes' if r.independent else 'NO':>6} {r.weight_sum_err:>10.2e} {r.residual:>10.2e}")

    residuals = [r.residual for r in results]
    print(f"\n  RMS residual: {rms(residuals):.2e}")
    print(f"  Max residual: {max(residuals):.2e}")
    bad = [i for i, r in enumerate(results) if r.residual > TARGET_TOL or not r.independent]
    print(f"  Trials outside tolerance: {len(bad)}" + (f" ({bad})" if bad else ""))
