"""
Convergence-controlled sum over non-trivial zeta zeros.

    Σ_ρ li(x^ρ),   ρ = ½ ± ti

The series over single zeros is only conditionally convergent; its partial
sums are meaningful only when each zero ½ + ti is added together with its
conjugate ½ - ti. Every entry point of ZeroPairSummer therefore takes the
positive ordinates t and adds both partners before anything is accumulated.
Truncation after k pairs is an approximation whose error is not bounded here.
"""

import math

import numpy as np

from .config import Config
from .errors import DomainError
from .special_functions import DEFAULT_GATEWAY
from .zeros import as_zero_array


def check_x(x) -> float:
    """Return x as a float, or raise DomainError when the explicit formula is undefined there."""
    try:
        x = float(x)
    except (TypeError, ValueError):
        raise DomainError(f"x must be a real number, got {x!r}") from None
    if not math.isfinite(x) or x < Config.MIN_X:
        raise DomainError(f"the explicit formula needs x >= {Config.MIN_X:g}, got {x!r}")
    return x


class ZeroPairSummer:
    """Sums li(x^ρ) + li(x^conj(ρ)) over the first k zeros in ascending order."""

    def __init__(self, zeros, gateway=None):
        self.zeros = as_zero_array(zeros)
        self.gateway = gateway if gateway is not None else DEFAULT_GATEWAY

    def __len__(self):
        return len(self.zeros)

    def check_k(self, k) -> int:
        if isinstance(k, bool) or not isinstance(k, (int, np.integer)):
            raise DomainError(f"k must be an integer, got {k!r}")
        k = int(k)
        if k < 0:
            raise DomainError(f"k must be non-negative, got {k}")
        if k > len(self.zeros):
            raise DomainError(f"k={k} exceeds the {len(self.zeros)} zeros available")
        return k

    def _pair(self, log_x: float, t: float) -> complex:
        rho = complex(0.5, t)
        return self.gateway.li_power(log_x, rho) + self.gateway.li_power(log_x, rho.conjugate())

    def pair_terms(self, x, k):
        """
        Yield the complex pair sums Ei((½+ti) ln x) + Ei((½-ti) ln x) for the
        first k zeros. Their imaginary parts vanish up to rounding.
        """
        log_x = math.log(check_x(x))
        for t in self.zeros[:self.check_k(k)]:
            yield self._pair(log_x, float(t))

    def partial_sums(self, x, k) -> np.ndarray:
        """Cumulative real pair sums S_1, ..., S_k (a convergence trace)."""
        reals = np.fromiter((pair.real for pair in self.pair_terms(x, k)), dtype=np.float64)
        return np.cumsum(reals)

    def sum_zero_terms(self, x, k) -> float:
        total = 0.0
        for pair in self.pair_terms(x, k):
            total += pair.real
        return total


def sum_zero_terms(x, zeros, k, gateway=None) -> float:
    return ZeroPairSummer(zeros, gateway).sum_zero_terms(x, k)
