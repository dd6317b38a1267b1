"""
Inspection and batch reporting for the explicit-formula estimate.

explain()        per-root breakdown of one estimate (n, root, weight, the four
                 J components, weighted value, running total)
EstimateReport   batch of x values against ground truth, li(x) and R(x),
                 with failures isolated per row
"""

from dataclasses import dataclass
from multiprocessing import Pool

from mpmath.libmp import NoConvergence
from tqdm import tqdm

from .config import Config
from .errors import ExplicitFormulaError
from .explicit_formula import FormulaTerms
from .inversion import RootTerm


# =============================================================================
# PER-ROOT BREAKDOWN
# =============================================================================

@dataclass(frozen=True)
class FormulaBreakdown:
    root_term: RootTerm
    terms: FormulaTerms     # at root_term.root

    @property
    def weighted_total(self) -> float:
        return self.root_term.weight * self.terms.total


def explain(counter, x):
    """Run one estimate, keeping the explicit-formula components evaluated at every root."""
    evaluated = []

    def recording_j(root):
        terms = counter.evaluator.terms(root)
        evaluated.append(terms)
        return terms.total

    result = counter.inverter.pi_estimate(x, recording_j)
    return [FormulaBreakdown(rt, terms) for rt, terms in zip(result.breakdown, evaluated)]


def format_breakdown(breakdowns) -> str:
    header = (f"{'n':>3} {'root':>14} {'weight':>9} {'li':>14} {'-zeros':>12} "
              f"{'-ln2':>9} {'tail':>9} {'weighted':>14} {'running':>14}")
    lines = [header, "-" * len(header)]
    for b in breakdowns:
        rt, t = b.root_term, b.terms
        lines.append(f"{rt.n:>3} {rt.root:>14.6f} {rt.weight:>+9.4f} {t.li_term:>14.6f} {t.zero_term:>+12.6f} "
                     f"{t.constant_term:>9.6f} {t.tail_term:>9.6f} {b.weighted_total:>+14.6f} {rt.running_total:>14.6f}")
    return "\n".join(lines)


# =============================================================================
# BATCH REPORT
# =============================================================================

@dataclass(frozen=True)
class EstimateRow:
    x: float
    estimated_pi: float = None
    ground_truth_pi: int = None
    li: float = None
    riemann_r: float = None
    error: str = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def absolute_error(self):
        if self.estimated_pi is None or self.ground_truth_pi is None:
            return None
        return abs(self.estimated_pi - self.ground_truth_pi)

    @property
    def relative_error(self):
        abs_err = self.absolute_error
        if abs_err is None or self.ground_truth_pi == 0:
            return None
        return abs_err / self.ground_truth_pi


def _estimate_worker(payload):
    """
    Worker for one x. payload = (counter, prime_table, x).
    Numeric and domain failures are recorded in the row instead of aborting the batch.
    x beyond the sieved range keeps its estimate and gets no ground truth.
    """
    counter, prime_table, x = payload
    try:
        estimated = counter.pi(x)
        truth = None
        if prime_table is not None and x <= prime_table.limit:
            truth = prime_table.pi_exact(int(x))
        return EstimateRow(x=x, estimated_pi=estimated, ground_truth_pi=truth,
                           li=counter.li(x), riemann_r=counter.riemann_r(x))
    except (ExplicitFormulaError, NoConvergence) as exc:
        return EstimateRow(x=x, error=f"{type(exc).__name__}: {exc}")


class EstimateReport:
    """Evaluates a batch of x values; every x is an independent unit of work."""

    def __init__(self, counter, prime_table=None, config=Config, verbose=False):
        self.counter = counter
        self.prime_table = prime_table
        self.config = config
        self.verbose = verbose

    def build(self, xs, processes=None):
        xs = list(xs)
        processes = self.config.NUM_PROCESSES if processes is None else int(processes)
        payloads = [(self.counter, self.prime_table, x) for x in xs]
        rows = []

        with tqdm(total=len(payloads), desc="   Explicit formula", unit=" x", ncols=100,
                  disable=not self.verbose) as progress_bar:
            if processes > 0 and len(payloads) > 1:
                with Pool(processes=min(processes, len(payloads))) as pool:
                    for row in pool.imap(_estimate_worker, payloads):
                        rows.append(row)
                        progress_bar.update(1)
            else:
                for payload in payloads:
                    rows.append(_estimate_worker(payload))
                    progress_bar.update(1)

        if self.verbose:
            failures = [row for row in rows if not row.ok]
            print(f"  INFO: Evaluated {len(rows)} points with k={self.counter.k} zero pairs.")
            for row in failures:
                print(f"  INFO: x={row.x:g} failed: {row.error}")
        return rows


def format_table(rows) -> str:
    header = (f"{'x':>12} {'pi(x)':>10} {'estimate':>14} {'abs err':>10} {'rel err':>10} "
              f"{'R(x)':>14} {'li(x)':>14}")
    lines = [header, "-" * len(header)]
    for row in rows:
        if not row.ok:
            lines.append(f"{row.x:>12g}  ERROR {row.error}")
            continue
        truth = "-" if row.ground_truth_pi is None else f"{row.ground_truth_pi:d}"
        abs_err = "-" if row.absolute_error is None else f"{row.absolute_error:.4f}"
        rel_err = "-" if row.relative_error is None else f"{row.relative_error:.2e}"
        lines.append(f"{row.x:>12g} {truth:>10} {row.estimated_pi:>14.4f} {abs_err:>10} {rel_err:>10} "
                     f"{row.riemann_r:>14.4f} {row.li:>14.4f}")
    return "\n".join(lines)
