"""Named numeric tolerances for support reduction.

Tolerances apply to float point sets only; exact (int/Fraction) point sets
compare without tolerance.
"""

# Elimination
RANK_TOL = 1e-9                   # relative pivot threshold (x max |entry|)

# Entry validation
WEIGHT_SUM_TOL = 1e-9             # |sum(weights) - 1| allowed at entry
NEGATIVE_WEIGHT_TOL = 0.0         # weights must be >= -NEGATIVE_WEIGHT_TOL

# Pivoting
CLAMP_TOL = 1e-12                 # negative post-pivot weights down to -CLAMP_TOL clamp to 0
RATIO_TIE_TOL = 0.0               # relative ratio gap counted as a tie; > 0 leaves negative noise for the clamp

# Checks and reports
TARGET_TOL = 1e-9                 # max componentwise drift of the target

# Certificates
LP_METHOD = "highs"               # scipy.optimize.linprog method
