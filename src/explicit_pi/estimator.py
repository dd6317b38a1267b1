"""The explicit-formula prime counter: J from zeros, inverted over the roots of x."""

from . import report
from .config import Config
from .explicit_formula import ExplicitFormulaEvaluator, LogIntegralJ
from .inversion import MobiusInverter
from .mobius import MOBIUS


class ExplicitPrimeCounter:
    """
    π(x) ≈ Σ μ(n)/n · J_k(x^(1/n)), with J_k the explicit formula truncated to
    the first k zero pairs. Instances only hold read-only data and can be
    shipped to worker processes.
    """

    def __init__(self, zeros, k=None, tail=None, max_n: int = Config.DEFAULT_MAX_N,
                 gateway=None, mobius=MOBIUS):
        self.evaluator = ExplicitFormulaEvaluator(zeros, k=k, tail=tail, gateway=gateway)
        self.inverter = MobiusInverter(mobius, max_n=max_n)
        self.baseline = LogIntegralJ(self.evaluator.gateway)

    @property
    def k(self) -> int:
        return self.evaluator.k

    @property
    def gateway(self):
        return self.evaluator.gateway

    def estimate(self, x):
        return self.inverter.pi_estimate(x, self.evaluator)

    def pi(self, x) -> float:
        return self.estimate(x).total

    def riemann_r(self, x) -> float:
        """R(x) = Σ μ(n)/n · li(x^(1/n))."""
        return self.inverter.pi_estimate(x, self.baseline).total

    def li(self, x) -> float:
        return self.gateway.li(x)

    def explain(self, x):
        """Per-root FormulaBreakdown list for one estimate."""
        return report.explain(self, x)
