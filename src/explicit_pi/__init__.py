"""Estimate the prime-counting function π(x) from Riemann's explicit formula."""

from .config import Config
from .errors import ConvergenceError, DomainError, ExplicitFormulaError, ParseError
from .estimator import ExplicitPrimeCounter
from .explicit_formula import (ConstantTail, ExplicitFormulaEvaluator, FormulaTerms, IntegralTail,
                               LogIntegralJ, j_from_zeros)
from .ground_truth import PrimeTable
from .inversion import InversionResult, MobiusInverter, RootTerm, pi_estimate
from .mobius import MOBIUS, MobiusTable
from .report import EstimateReport, EstimateRow, FormulaBreakdown
from .special_functions import SpecialFunctionGateway
from .zero_sum import ZeroPairSummer, sum_zero_terms
from .zeros import load_zeta_zeros, write_zeta_zeros

__version__ = "1.0.0"
