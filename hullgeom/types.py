"""Shared type definitions for weighted point sets and affine relations."""
from fractions import Fraction
from collections.abc import Hashable
from typing import NamedTuple

Scalar = float | Fraction
Vector = tuple[Scalar, ...]
Key = Hashable

class WeightedPointSet(NamedTuple):
    """Points and convex-combination weights over the same ordered key set."""
    points: dict[Key, Vector]
    weights: dict[Key, Scalar]

class AffineRelation(NamedTuple):
    """Coefficients g with sum(g) = 0 and sum(g[i] * points[i]) = 0."""
    coeffs: dict[Key, Scalar]
