import math

import mpmath
import numpy as np
import pytest

from explicit_pi import Config, DomainError, ZeroPairSummer, sum_zero_terms


@pytest.fixture(scope="module")
def summer(zeros_30):
    return ZeroPairSummer(zeros_30)


def test_no_zeros_sum_to_zero(summer):
    assert summer.sum_zero_terms(1000.0, 0) == 0.0
    assert list(summer.pair_terms(1000.0, 0)) == []


@pytest.mark.parametrize("x", [1.999, 1.0, 0.0, -5.0, float("nan"), float("inf")])
def test_x_below_two_is_a_domain_error(summer, x):
    with pytest.raises(DomainError):
        summer.sum_zero_terms(x, 5)
    with pytest.raises(DomainError):
        summer.sum_zero_terms(x, 0)


@pytest.mark.parametrize("k", [-1, 31, 2.0, None])
def test_invalid_k(summer, k):
    with pytest.raises(DomainError):
        summer.sum_zero_terms(100.0, k)


@pytest.mark.parametrize("x", [2.0, 10.0, 1000.0, 1e6])
def test_pairs_are_real(summer, x):
    bound = Config.ZERO_IMAG_TOLERANCE * max(1.0, math.sqrt(x))
    for pair in summer.pair_terms(x, 30):
        assert abs(pair.imag) <= bound


@pytest.mark.parametrize("x", [2.5, 77.0, 123456.0])
def test_pairs_are_real_for_arbitrary_ordinates(x):
    summer = ZeroPairSummer([0.1, 3.7, 50.0, 1234.5])
    bound = Config.ZERO_IMAG_TOLERANCE * max(1.0, math.sqrt(x))
    for pair in summer.pair_terms(x, 4):
        assert abs(pair.imag) <= bound


def test_pair_is_twice_the_real_part_of_one_zero(summer, zeros_30):
    x = 500.0
    t = float(zeros_30[0])
    single = complex(mpmath.ei(mpmath.mpc(0.5, t) * mpmath.log(x)))
    (pair,) = list(summer.pair_terms(x, 1))
    assert pair.real == pytest.approx(2.0 * single.real, rel=1e-12, abs=1e-12)


def test_sum_accumulates_real_parts_in_order(summer):
    x = 321.0
    expected = 0.0
    for pair in summer.pair_terms(x, 12):
        expected += pair.real
    assert summer.sum_zero_terms(x, 12) == expected


def test_partial_sums_trace(summer):
    x = 1000.0
    trace = summer.partial_sums(x, 30)
    assert trace.shape == (30,)
    assert trace[-1] == pytest.approx(summer.sum_zero_terms(x, 30), abs=1e-12)
    assert trace[4] == pytest.approx(summer.sum_zero_terms(x, 5), abs=1e-12)


def test_deterministic(summer):
    assert summer.sum_zero_terms(4567.0, 30) == summer.sum_zero_terms(4567.0, 30)


def test_module_function_matches_class(summer, zeros_30):
    assert sum_zero_terms(250.0, zeros_30, 10) == summer.sum_zero_terms(250.0, 10)


def test_rejects_unsorted_zero_list():
    with pytest.raises(DomainError):
        ZeroPairSummer([21.0, 14.0])


@pytest.mark.slow
@pytest.mark.parametrize("x", [100.0, 1000.0, 1e6])
def test_partial_sums_stabilise(zeros_1000, x):
    trace = ZeroPairSummer(zeros_1000).partial_sums(x, 1000)
    early_spread = np.ptp(trace[:50])
    late_spread = np.ptp(trace[-100:])
    assert late_spread < 0.5 * early_spread


@pytest.mark.slow
def test_pairs_are_real_with_many_zeros(zeros_1000):
    x = 1e6
    bound = Config.ZERO_IMAG_TOLERANCE * math.sqrt(x)
    assert all(abs(pair.imag) <= bound for pair in ZeroPairSummer(zeros_1000).pair_terms(x, 1000))
