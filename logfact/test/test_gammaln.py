import math

import numpy as np
import pytest
from numba import njit
from scipy import special

from logfact.exceptions.custom_exceptions import NegativeFactorialArgument
from logfact.utils.statistics.gammaln import (LOG_FACTORIAL_TABLE_SIZE,
                                              checked_logfactorial,
                                              logfactorial)
from logfact.utils.statistics.table_generation import (measure_accuracy,
                                                       ulp_error)

# log(k!) to 30 digits
_reference_values = {
    5: "4.78749174278204599424770093452",
    10: "15.1044125730755152952257093293",
    125: "481.872979229887934228511677689",
    126: "486.709261136839412225824753028",
    1000: "5912.12817848816334887813088673",
    1000000: "12815518.3846581696242510758930",
    1000000000: "19723265848.2269826079231347454",
    2 ** 53 + 1: "321888483458023102.094841256415",
    2 ** 62: "193576097982213774845.130276977",
}


def test_small_values():

    assert logfactorial(0) == 0.0

    assert logfactorial(1) == 0.0

    assert logfactorial(2) == math.log(2)

    assert logfactorial(5) == pytest.approx(4.787491742782046, rel=1e-15)

    assert logfactorial(5) == pytest.approx(math.log(120), rel=1e-15)

    assert logfactorial(10) == pytest.approx(math.log(3628800), rel=1e-15)


def test_precomputed_constants():

    for k, reference in _reference_values.items():

        assert ulp_error(logfactorial(k), reference) <= 2, f"for k={k}"


def test_negative_arguments_give_nan():

    for k in [-1, -2, -125, -126, -10 ** 6, -(2 ** 63)]:

        value = logfactorial(k)

        assert value != value

        assert math.isnan(value)

    # NaN poisons whatever comes next
    assert math.isnan(logfactorial(-1) + 1.0)


def test_table_range_within_2_ulp():

    errors = measure_accuracy(range(LOG_FACTORIAL_TABLE_SIZE))

    assert np.all(errors <= 2)

    # the table is correctly rounded
    assert np.all(errors <= 0.5)


def test_series_range_within_2_ulp(large_arguments):

    errors = measure_accuracy(range(LOG_FACTORIAL_TABLE_SIZE, 3000))

    assert np.all(errors <= 2)

    errors = measure_accuracy(large_arguments)

    assert np.all(errors <= 2)

    # around 2**53 the argument itself stops being a double
    errors = measure_accuracy([2 ** 53 - 1, 2 ** 53, 2 ** 53 + 1, 2 ** 53 + 3, 2 ** 62 - 1])

    assert np.all(errors <= 2)


def test_boundary_continuity():

    below = logfactorial(125)
    above = logfactorial(126)

    assert ulp_error(below, _reference_values[125]) <= 2

    assert ulp_error(above, _reference_values[126]) <= 2

    # both sides share the error budget
    budget = 2 * np.spacing(below) + 2 * np.spacing(above)

    assert abs((above - below) - math.log(126)) <= budget


def test_monotonic(large_arguments):

    values = np.array([logfactorial(k) for k in range(20000)])

    # 0! == 1!
    assert values[0] == values[1]

    assert np.all(np.diff(values[1:]) > 0)

    values = np.array([logfactorial(k) for k in large_arguments])

    assert np.all(np.diff(values) > 0)


def test_deterministic(large_arguments):

    for k in [0, 7, 125, 126, 127, 10 ** 5] + list(large_arguments[:20]):

        first = logfactorial(k)

        for _ in range(5):

            assert logfactorial(k) == first

    assert math.isnan(logfactorial(-3))


def test_numpy_integer_arguments():

    assert logfactorial(np.int64(10)) == logfactorial(10)

    assert logfactorial(np.int32(200)) == logfactorial(200)


def test_callable_from_jitted_code():
    @njit
    def log_multinomial(counts):

        total = 0
        out = 0.0

        for c in counts:

            total += c
            out -= logfactorial(c)

        return out + logfactorial(total)

    counts = np.array([3, 4, 5], dtype=np.int64)

    expected = math.log(math.factorial(12) // (6 * 24 * 120))

    assert log_multinomial(counts) == pytest.approx(expected, rel=1e-14)


def test_checked_logfactorial():

    assert checked_logfactorial(10) == logfactorial(10)

    assert checked_logfactorial(np.int64(300)) == logfactorial(300)

    with pytest.raises(NegativeFactorialArgument):

        checked_logfactorial(-1)

    # still a ValueError for callers that do not know the subclass
    with pytest.raises(ValueError):

        checked_logfactorial(-10)

    for bad in [1.5, 3.0, "3", None, True]:

        with pytest.raises(TypeError):

            checked_logfactorial(bad)


def test_agrees_with_scipy_gammaln(large_arguments):

    ks = np.concatenate([np.arange(0, 1000), large_arguments])

    values = np.array([logfactorial(k) for k in ks])

    # gammaln is not guaranteed to 2 ULP, only check it loosely
    assert np.allclose(values, special.gammaln(ks + 1.0), rtol=1e-13, atol=1e-13)
