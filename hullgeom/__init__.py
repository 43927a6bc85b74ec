"""Shared types, affine geometry, and SVG utilities."""

from .types import Scalar, Vector, Key, WeightedPointSet, AffineRelation
from .geometry import (
    GeometryError, InvalidInputError, NotAffinelyDependentError,
    NullSpaceError, ReductionError, DegeneracyWarning,
    vec_add, vec_sub, vec_scale, max_abs_diff, is_exact, center_mass, poly_area,
    pivot_tol, rref, null_vector,
    affine_matrix, normalized_affine_matrix, affine_rank, is_affinely_independent,
)
from .svg import make_svg_transform, bounding_box, W, H
