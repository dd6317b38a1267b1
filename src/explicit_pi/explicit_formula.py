"""
Riemann's explicit formula for the prime-power counting function

    J(x) = li(x) - Σ_ρ li(x^ρ) - ln 2 + ∫_x^∞ dt / (t (t^2 - 1) ln t),

evaluated from a finite list of zeta-zero ordinates.
"""

from dataclasses import dataclass

import numpy as np
from scipy import integrate

from .config import LOG_2, Config
from .special_functions import DEFAULT_GATEWAY
from .zero_sum import ZeroPairSummer, check_x


# =============================================================================
# TAIL-INTEGRAL STRATEGIES
# =============================================================================

class ConstantTail:
    """
    Bounded-constant approximation of ∫_x^∞ dt / (t (t^2 - 1) ln t).
    For x >= 2 the integral lies in (0, 0.140010]; the default is the upper end.
    """

    def __init__(self, value: float = Config.TAIL_CONSTANT):
        self.value = float(value)

    def __call__(self, x: float) -> float:
        return self.value

    def __repr__(self):
        return f"ConstantTail({self.value!r})"


def _scaled_tail_integrand(v, log_x, inv_x2):
    # t = x e^v, with the factor 1/x^2 taken outside the integral
    decay = np.exp(-2.0 * v)
    return decay / ((1.0 - inv_x2 * decay) * (log_x + v))


class IntegralTail:
    """
    Per-x numerical value of ∫_x^∞ dt / (t (t^2 - 1) ln t) via scipy quad.

    Substituting t = x e^v gives x^-2 ∫_0^∞ e^{-2v} dv / ((1 - x^-2 e^{-2v})(ln x + v)),
    whose integrand is O(1) at every x, so quad sees a well-scaled problem
    even where the tail itself is of order x^-2.
    """

    def __init__(self, limit: int = Config.QUAD_LIMIT, epsrel: float = Config.QUAD_EPSREL):
        self.limit = int(limit)
        self.epsrel = float(epsrel)

    def __call__(self, x: float) -> float:
        x = check_x(x)
        inv_x2 = 1.0 / (x * x)
        value, _abserr = integrate.quad(_scaled_tail_integrand, 0.0, np.inf, args=(np.log(x), inv_x2),
                                       epsabs=0.0, epsrel=self.epsrel, limit=self.limit)
        return float(value) * inv_x2

    def __repr__(self):
        return "IntegralTail()"


def as_tail(tail):
    if tail is None:
        return ConstantTail()
    if callable(tail):
        return tail
    return ConstantTail(tail)


# =============================================================================
# EXPLICIT FORMULA
# =============================================================================

@dataclass(frozen=True)
class FormulaTerms:
    """The four additive components of J at one argument, already signed."""
    x: float
    li_term: float
    zero_term: float
    constant_term: float
    tail_term: float

    @property
    def total(self) -> float:
        return self.li_term + self.zero_term + self.constant_term + self.tail_term


class ExplicitFormulaEvaluator:
    """
    J(x) from the first k zeros (all of them when k is None).
    Holds only read-only inputs; every call is independent of the previous ones.
    """

    def __init__(self, zeros, k=None, tail=None, gateway=None):
        self.gateway = gateway if gateway is not None else DEFAULT_GATEWAY
        self.summer = ZeroPairSummer(zeros, self.gateway)
        self.k = len(self.summer) if k is None else self.summer.check_k(k)
        self.tail = as_tail(tail)

    def terms(self, x) -> FormulaTerms:
        x = check_x(x)
        zero_sum = self.summer.sum_zero_terms(x, self.k)
        return FormulaTerms(
            x=x,
            li_term=self.gateway.li(x),
            zero_term=-zero_sum,
            constant_term=-LOG_2,
            tail_term=float(self.tail(x)),
        )

    def __call__(self, x) -> float:
        return self.terms(x).total


class LogIntegralJ:
    """J(x) ≈ li(x). Inverting it gives Riemann's R(x), the zero-free baseline."""

    def __init__(self, gateway=None):
        self.gateway = gateway if gateway is not None else DEFAULT_GATEWAY

    def __call__(self, x) -> float:
        return self.gateway.li(check_x(x))


def j_from_zeros(x, zeros, k, tail_approx, gateway=None) -> float:
    """J(x) = li(x) - Σ_{first k pairs} li(x^ρ) - ln 2 + tail_approx."""
    return ExplicitFormulaEvaluator(zeros, k=k, tail=tail_approx, gateway=gateway)(x)
