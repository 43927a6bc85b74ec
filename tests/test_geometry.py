"""Tests for hullgeom/geometry.py pure functions."""
from fractions import Fraction

import numpy as np
import pytest
from hullgeom.geometry import (
    GeometryError,
    vec_add, vec_sub, vec_scale, max_abs_diff, is_exact, center_mass, poly_area,
    pivot_tol, rref, null_vector,
    affine_matrix, normalized_affine_matrix, affine_rank, is_affinely_independent,
)
from hullgeom.svg import make_svg_transform, bounding_box, W, H


# --- vector helpers ---

def test_vec_add_sub():
    assert vec_add((1, 2), (3, 4)) == (4, 6)
    assert vec_sub((1, 2), (3, 4)) == (-2, -2)


def test_vec_add_dimension_mismatch():
    with pytest.raises(GeometryError, match="Dimension mismatch"):
        vec_add((1, 2), (1, 2, 3))


def test_vec_scale():
    assert vec_scale(0.5, (2.0, -4.0)) == (1.0, -2.0)


def test_max_abs_diff():
    assert abs(max_abs_diff((1.0, 2.0), (1.5, 1.0)) - 1.0) < 1e-12
    assert max_abs_diff((), ()) == 0.0


# --- is_exact ---

def test_is_exact_ints_and_fractions():
    assert is_exact([1, Fraction(1, 2), -3])


def test_is_exact_float_is_not_exact():
    assert not is_exact([1, 0.5])


def test_is_exact_bool_is_not_exact():
    assert not is_exact([True])


# --- center_mass ---

def test_center_mass_segment_midpoint():
    c = center_mass([(0.0, 0.0), (2.0, 4.0)], [0.5, 0.5])
    assert abs(c[0] - 1.0) < 1e-12
    assert abs(c[1] - 2.0) < 1e-12


def test_center_mass_exact():
    c = center_mass([(0,), (1,), (2,)], [Fraction(1, 4), Fraction(1, 4), Fraction(1, 2)])
    assert c == (Fraction(5, 4),)


def test_center_mass_empty():
    with pytest.raises(GeometryError, match="Empty"):
        center_mass([], [])


def test_center_mass_length_mismatch():
    with pytest.raises(GeometryError, match="weights"):
        center_mass([(0.0,), (1.0,)], [1.0])


# --- poly_area ---

def test_poly_area_triangle():
    assert abs(poly_area([(0, 0), (2, 0), (0, 2)]) - 2.0) < 1e-12


def test_poly_area_degenerate():
    assert poly_area([(0, 0), (1, 1), (2, 2)]) == 0


# --- rref / null_vector ---

def test_rref_exact_identity():
    R, pivots = rref([[1, 2], [3, 4]])
    assert pivots == [0, 1]
    assert R == [[1, 0], [0, 1]]
    assert all(isinstance(v, Fraction) for row in R for v in row)


def test_rref_rank_deficient():
    _, pivots = rref([[1.0, 2.0, 3.0], [2.0, 4.0, 6.0]], tol=1e-12)
    assert pivots == [0]


def test_rref_partial_pivoting_swaps_rows():
    R, pivots = rref([[0, 1], [1, 0]])
    assert pivots == [0, 1]
    assert R == [[1, 0], [0, 1]]


def test_null_vector_first_free_column():
    g = null_vector([[1, 1, 1]])
    assert g == [-1, 1, 0]


def test_null_vector_full_rank_is_none():
    assert null_vector([[1, 0], [0, 1]]) is None


def test_null_vector_float_solves_system():
    A = [[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]]
    g = null_vector(A, tol=1e-12)
    assert g is not None
    assert np.allclose(np.array(A) @ np.array(g), 0.0, atol=1e-12)


def test_null_vector_chop_keeps_free_column():
    # Pivot 1e-10 gives a coefficient of -1e10 next to the free column's 1
    g = null_vector([[1e-10, 1.0]], tol=1e-12, chop_tol=1e-9)
    assert g[1] == 1.0
    assert abs(g[0] + 1e10) < 1.0


def test_null_vector_chop_zeroes_pivot_noise():
    g = null_vector([[1.0, 0.0, 1e-15], [0.0, 1.0, 1.0]], tol=1e-12, chop_tol=1e-9)
    assert g == [0.0, -1.0, 1.0]


def test_pivot_tol_exact_is_zero():
    assert pivot_tol([[1, 2], [3, 4]], 1e-9) == 0


def test_pivot_tol_scales_with_entries():
    assert abs(pivot_tol([[100.0, 1.0]], 1e-9) - 1e-7) < 1e-20


# --- affine rank ---

def test_affine_matrix_appends_ones_row():
    A = affine_matrix([(0.0, 0.0), (2.0, 0.0), (0.0, 2.0)])
    assert A == [[0.0, 2.0, 0.0], [0.0, 0.0, 2.0], [1.0, 1.0, 1.0]]


def test_affine_matrix_ragged():
    with pytest.raises(GeometryError, match="Dimension mismatch"):
        affine_matrix([(0.0, 0.0), (1.0,)])


def test_affine_rank_collinear():
    assert affine_rank([(0, 0), (1, 1), (2, 2)]) == 2


def test_affine_rank_matches_numpy():
    pts = np.random.default_rng(3).random((7, 3))
    A = np.vstack([pts.T, np.ones(7)])
    assert affine_rank([tuple(p) for p in pts.tolist()]) == np.linalg.matrix_rank(A)


def test_normalized_affine_matrix_unit_spread():
    A = normalized_affine_matrix([(1e9, 1e9), (1e9 + 4, 1e9), (1e9, 1e9 + 2)])
    assert A == [[0.0, 1.0, 0.0], [0.0, 0.0, 0.5], [1.0, 1.0, 1.0]]


def test_normalized_affine_matrix_exact_unchanged():
    pts = [(0, 0), (2, 0), (0, 2)]
    assert normalized_affine_matrix(pts) == affine_matrix(pts)


def test_normalized_affine_matrix_repeated_point():
    assert normalized_affine_matrix([(5.0,), (5.0,)]) == [[0.0, 0.0], [1.0, 1.0]]


@pytest.mark.parametrize("scale,offset", [(1e-10, 0.0), (1e10, 0.0), (1.0, 1e10), (1e-6, 1e3)])
def test_affine_rank_scale_and_offset(scale, offset):
    tri = [tuple(scale*v + offset for v in p) for p in [(0.0, 0.0), (4.0, 0.0), (0.0, 4.0)]]
    assert affine_rank(tri) == 3
    assert affine_rank(tri + [tuple(scale*v + offset for v in (1.0, 1.0))]) == 3


def test_is_affinely_independent_triangle():
    assert is_affinely_independent([(0.0, 0.0), (2.0, 0.0), (0.0, 2.0)])


def test_is_affinely_independent_four_planar_points():
    assert not is_affinely_independent([(0, 0), (2, 0), (0, 2), (1, 1)])


def test_is_affinely_independent_repeated_point():
    assert not is_affinely_independent([(1.0, 1.0), (1.0, 1.0)])


def test_is_affinely_independent_empty_and_single():
    assert is_affinely_independent([])
    assert is_affinely_independent([(3.0, 4.0)])


def test_is_affinely_independent_near_degenerate():
    # Third point off the line by far less than the rank tolerance
    assert not is_affinely_independent([(0.0, 0.0), (1.0, 0.0), (2.0, 1e-14)])


# --- svg transform ---

def test_bounding_box():
    assert bounding_box([(0, 1), (2, -1), (1, 3)]) == (0, -1, 2, 3)


def test_svg_transform_centers_bbox():
    to_svg = make_svg_transform([(0, 0), (2, 0), (0, 2)])
    x, y = to_svg(1, 1)
    assert abs(x - W / 2) < 1e-9
    assert abs(y - H / 2) < 1e-9


def test_svg_transform_flips_y():
    to_svg = make_svg_transform([(0, 0), (2, 2)])
    assert to_svg(0, 2)[1] < to_svg(0, 0)[1]
