"""
Gateway to the special functions consumed from mpmath.

Branch convention: mpmath.ei is the principal branch of the exponential
integral with its cut along the negative real axis, so Ei(conj(z)) equals
conj(Ei(z)) everywhere off the cut. The explicit formula only evaluates
Ei(ρ · ln x) with Re(ρ · ln x) = ½ ln x > 0, which never touches the cut;
hence the imaginary parts of a conjugate pair cancel exactly.
"""

import mpmath

from .config import Config


class SpecialFunctionGateway:
    """
    Thin contract over mpmath: real logarithmic integral li(x) and complex
    exponential integral Ei(z). Library failures (e.g. NoConvergence) are
    propagated unmodified.
    """

    def __init__(self, dps: int = Config.MPMATH_PRECISION):
        self.dps = int(dps)

    def li(self, x: float) -> float:
        """li(x) = ∫_0^x dt / ln t (Cauchy principal value), for x > 0."""
        with mpmath.workdps(self.dps):
            return float(mpmath.li(x))

    def ei(self, z: complex) -> complex:
        with mpmath.workdps(self.dps):
            return complex(mpmath.ei(mpmath.mpc(z)))

    def li_power(self, log_x: float, rho: complex) -> complex:
        """li(x^ρ), defined as Ei(ρ · ln x) so the branch of x^ρ never matters."""
        return self.ei(complex(rho) * log_x)


DEFAULT_GATEWAY = SpecialFunctionGateway()
