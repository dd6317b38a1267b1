"""
Exact prime counting from a sieve, used only to validate the explicit formula.
"""

import math

import numpy as np
from sympy import sieve

from .config import Config
from .errors import DomainError
from .inversion import snap_root


class PrimeTable:
    """Sorted primes up to `limit`, answering π(x) by binary search."""

    def __init__(self, limit: int = Config.GROUND_TRUTH_LIMIT):
        self.limit = int(limit)
        if self.limit < 2:
            raise DomainError(f"a prime table needs limit >= 2, got {limit!r}")
        self.primes = np.fromiter(sieve.primerange(2, self.limit + 1), dtype=np.int64)
        self.primes.setflags(write=False)

    def pi_exact(self, x: int) -> int:
        x = int(x)
        if x > self.limit:
            raise DomainError(f"π({x}) is beyond the sieved limit {self.limit}")
        if x < 2:
            return 0
        return int(np.searchsorted(self.primes, x, side="right"))

    def j_exact(self, x: float) -> float:
        """J(x) = Σ_{m>=1} π(x^(1/m)) / m."""
        x = float(x)
        total = 0.0
        m = 1
        root = snap_root(x)
        while root >= 2.0:
            total += self.pi_exact(math.floor(root)) / m
            m += 1
            root = snap_root(x ** (1.0 / m))
        return total

    def __call__(self, x: float) -> float:
        return self.j_exact(x)
