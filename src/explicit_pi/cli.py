#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# =============================================================================
#
#   Command-line driver: estimate π(x) at a handful of sample points with
#   Riemann's explicit formula and compare against a sieve.
#
#   Usage:
#     explicit-pi --zeros zeros.txt --x 1000 10000 1000000 --k 1000
#     explicit-pi --zeros zeros.txt --tail integral --explain 1000000
#
# =============================================================================

import argparse
import sys
import time

from .config import Config
from .errors import ExplicitFormulaError
from .estimator import ExplicitPrimeCounter
from .explicit_formula import ConstantTail, IntegralTail
from .ground_truth import PrimeTable
from .report import EstimateReport, format_breakdown, format_table
from .zeros import load_zeta_zeros


def build_parser():
    ap = argparse.ArgumentParser(
        prog="explicit-pi",
        description="Estimate the prime-counting function π(x) from non-trivial zeta zeros.")
    ap.add_argument("--zeros", required=True, help="file with one zero ordinate t per line, ascending")
    ap.add_argument("--x", nargs="+", type=float, default=list(Config.DEFAULT_SAMPLE_POINTS),
                    help="evaluation points (default: %(default)s)")
    ap.add_argument("--k", type=int, default=None, help="number of zero pairs to use (default: all)")
    ap.add_argument("--tail", choices=("constant", "integral"), default="constant",
                    help="tail-integral strategy (default: %(default)s)")
    ap.add_argument("--tail-constant", type=float, default=Config.TAIL_CONSTANT,
                    help="value used by --tail constant (default: %(default)s)")
    ap.add_argument("--max-n", type=int, default=Config.DEFAULT_MAX_N,
                    help="bound on the root iteration n (default: %(default)s)")
    ap.add_argument("--processes", type=int, default=Config.NUM_PROCESSES,
                    help="worker processes for the batch; 0 runs sequentially (default: %(default)s)")
    ap.add_argument("--explain", type=float, default=None, metavar="X",
                    help="print the per-root breakdown of the estimate at X")
    ap.add_argument("--no-ground-truth", action="store_true", help="skip the sieve comparison")
    return ap


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    print("\n[EXPLICIT FORMULA] Estimating π(x) from zeta zeros")
    try:
        zeros = load_zeta_zeros(args.zeros)
        tail = IntegralTail() if args.tail == "integral" else ConstantTail(args.tail_constant)
        counter = ExplicitPrimeCounter(zeros, k=args.k, tail=tail, max_n=args.max_n)
    except (OSError, ExplicitFormulaError) as exc:
        print(f"   -> ERROR: {exc}", file=sys.stderr)
        return 2
    print(f"  INFO: Loaded {len(zeros)} zeros from '{args.zeros}', using k={counter.k} pairs, tail={tail!r}.")

    prime_table = None
    if not args.no_ground_truth:
        limit = min(int(max(args.x)), Config.GROUND_TRUTH_LIMIT)
        if limit >= 2:
            start_time = time.time()
            prime_table = PrimeTable(limit)
            print(f"  INFO: Sieved {len(prime_table.primes)} primes up to {limit} in {time.time() - start_time:.2f} seconds.")

    start_time = time.time()
    rows = EstimateReport(counter, prime_table, verbose=True).build(args.x, processes=args.processes)
    print(f"  INFO: Explicit-formula evaluation took {time.time() - start_time:.2f} seconds.\n")
    print(format_table(rows))

    if args.explain is not None:
        print(f"\n  Per-root breakdown at x = {args.explain:g}:")
        try:
            print(format_breakdown(counter.explain(args.explain)))
        except ExplicitFormulaError as exc:
            print(f"   -> ERROR: {exc}", file=sys.stderr)
            return 2

    failures = [row for row in rows if not row.ok]
    if not failures:
        print(f"\n   -> VERDICT: [PASS] All {len(rows)} points evaluated.")
        return 0
    print(f"\n   -> VERDICT: [FAIL] {len(failures)} of {len(rows)} points could not be evaluated.")
    return 1


if __name__ == "__main__":
    sys.exit(main())
