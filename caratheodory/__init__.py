"""Carathéodory support reduction: dependency search, ratio-test pivots, minimal supports."""

from .pointset import make_point_set, uniform_point_set, target, validate_point_set
from .dependency import find_dependency, normalize_sign
from .pivot import ratio_test, pivot
from .reduction import ReductionResult, iter_reduction, reduce_with_trace, reduce, positive_support
from .certificate import find_certificate, caratheodory_support
