import pytest

from explicit_pi import Config, ExplicitPrimeCounter, IntegralTail

PI_OF_A_MILLION = 78_498
R_OF_A_MILLION = 78_527.4


def test_small_x_with_few_zeros(zeros_30):
    counter = ExplicitPrimeCounter(zeros_30)
    assert counter.k == 30
    assert counter.pi(100.0) == pytest.approx(25, abs=3.0)


def test_boundary_x_equal_two(zeros_30):
    result = ExplicitPrimeCounter(zeros_30).estimate(2.0)
    assert [term.n for term in result.breakdown] == [1]


def test_counter_is_deterministic(zeros_30):
    counter = ExplicitPrimeCounter(zeros_30, k=10)
    assert counter.pi(12345.0) == counter.pi(12345.0)


@pytest.mark.slow
def test_pi_of_a_million_with_constant_tail(zeros_1000):
    counter = ExplicitPrimeCounter(zeros_1000, k=1000)
    estimate = counter.pi(1e6)
    assert abs(estimate - PI_OF_A_MILLION) < Config.PI_ESTIMATE_TOLERANCE
    assert abs(estimate - PI_OF_A_MILLION) < abs(R_OF_A_MILLION - PI_OF_A_MILLION)


@pytest.mark.slow
def test_pi_of_a_million_with_integrated_tail(zeros_1000):
    counter = ExplicitPrimeCounter(zeros_1000, tail=IntegralTail())
    constant = ExplicitPrimeCounter(zeros_1000).pi(1e6)
    estimate = counter.pi(1e6)
    assert abs(estimate - PI_OF_A_MILLION) < Config.PI_ESTIMATE_TOLERANCE
    # the two strategies differ by at most the tail constant summed over the weighted roots
    assert abs(estimate - constant) < Config.TAIL_CONSTANT * 3


@pytest.mark.slow
def test_more_zeros_track_pi_closer(zeros_1000):
    x = 1e5
    errors = [abs(ExplicitPrimeCounter(zeros_1000, k=k).pi(x) - 9592) for k in (0, 1000)]
    assert errors[1] < errors[0]
