"""
Möbius inversion of the prime-power counting function:

    π(x) = Σ_{n>=1} μ(n)/n · J(x^(1/n)),

summed over every n with x^(1/n) >= 2 (J vanishes below 2).
"""

from dataclasses import dataclass

from .config import Config
from .errors import ConvergenceError, DomainError
from .mobius import MOBIUS
from .zero_sum import check_x


def snap_root(root: float, tol: float = Config.ROOT_SNAP_TOLERANCE) -> float:
    """Replace x^(1/n) by the nearest integer when floating-point rounding put it just beside one."""
    nearest = round(root)
    if abs(root - nearest) <= tol * max(1.0, abs(root)):
        return float(nearest)
    return root


@dataclass(frozen=True)
class RootTerm:
    n: int
    root: float
    weight: float
    j_value: float
    contribution: float
    running_total: float


@dataclass(frozen=True)
class InversionResult:
    x: float
    total: float
    breakdown: tuple

    def __float__(self):
        return self.total


class MobiusInverter:
    """
    Recovers π(x) from any J estimator. The iteration bound max_n is an explicit
    contract: running past it with x^(1/n) still >= 2 raises ConvergenceError.
    """

    def __init__(self, mobius=MOBIUS, max_n: int = Config.DEFAULT_MAX_N):
        self.mobius = mobius
        self.max_n = self._check_max_n(max_n)

    def _check_max_n(self, max_n) -> int:
        if isinstance(max_n, bool) or not isinstance(max_n, int) or max_n < 1:
            raise DomainError(f"max_n must be a positive integer, got {max_n!r}")
        if max_n > self.mobius.max_n:
            raise DomainError(f"max_n={max_n} exceeds the Möbius table (1..{self.mobius.max_n})")
        return max_n

    def pi_estimate(self, x, j_function, max_n=None) -> InversionResult:
        x = check_x(x)
        max_n = self.max_n if max_n is None else self._check_max_n(max_n)

        breakdown = []
        total = 0.0
        n = 1
        root = x
        while root >= Config.MIN_X:
            if n > max_n:
                raise ConvergenceError(
                    f"unexpectedly many roots: x^(1/{n}) = {root:.6g} is still >= 2 "
                    f"after max_n={max_n} iterations for x={x:.6g}")
            mu = self.mobius.mu(n)
            if mu != 0:
                weight = mu / n
                j_value = float(j_function(root))
                contribution = weight * j_value
                total += contribution
                breakdown.append(RootTerm(n, root, weight, j_value, contribution, total))
            n += 1
            root = snap_root(x ** (1.0 / n))

        return InversionResult(x=x, total=total, breakdown=tuple(breakdown))


def pi_estimate(x, j_function, max_n: int = Config.DEFAULT_MAX_N) -> InversionResult:
    return MobiusInverter(max_n=max_n).pi_estimate(x, j_function)
