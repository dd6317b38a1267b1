# =============================================================================
#
#   Central configuration for the explicit-formula prime counter.
#
#   All thresholds, bounds and defaults used across the package live here so
#   that components can take explicit arguments with sensible defaults.
#
# =============================================================================

import math
from multiprocessing import cpu_count


class Config:
    # --- Möbius inversion ---
    # x^(1/31) < 2 for every x < 2^31, so 30 tabulated values cover the design range.
    MOBIUS_TABLE_SIZE = 30
    DEFAULT_MAX_N = 30

    # --- Domain ---
    MIN_X = 2.0

    # --- Precision & Thresholds ---
    MPMATH_PRECISION = 15            # decimal digits; double precision is the contract
    ZERO_IMAG_TOLERANCE = 1e-9       # relative bound on Im(pair) after conjugate cancellation
    ROOT_SNAP_TOLERANCE = 1e-9       # x^(1/n) this close to an integer is taken as that integer

    # --- Tail integral  ∫_x^∞ dt / (t (t^2 - 1) ln t) ---
    # Value of the integral at x = 2 (six places); for x >= 2 the integral lies in (0, TAIL_CONSTANT].
    TAIL_CONSTANT = 0.140010
    QUAD_LIMIT = 200
    QUAD_EPSREL = 1e-9

    # --- Accuracy expectation for π(10^6) with the first 1000 zeros ---
    PI_ESTIMATE_TOLERANCE = 10.0

    # --- Reporting ---
    DEFAULT_SAMPLE_POINTS = (100, 1_000, 10_000, 100_000, 1_000_000)
    GROUND_TRUTH_LIMIT = 10_000_000

    # --- Performance ---
    # Set to 0 to disable multiprocessing for easier debugging.
    NUM_PROCESSES = cpu_count()


LOG_2 = math.log(2.0)
