from typing import Iterable, Optional

import mpmath
import numpy as np

from logfact.config.config import logfact_config
from logfact.exceptions.custom_exceptions import (NegativeFactorialArgument,
                                                  ReferencePrecisionTooLow,
                                                  TableVerificationError,
                                                  custom_warnings)
from logfact.io.logging import setup_logger
from logfact.utils.statistics.gammaln import (_LOG_FACTORIAL_TABLE,
                                              logfactorial)

log = setup_logger(__name__)

# below this many digits the reference cannot settle the last bit of a double
_MIN_SAFE_PRECISION = 20


def _get_precision(precision: Optional[int]) -> int:

    if precision is None:

        precision = logfact_config.reference.precision

    if precision < _MIN_SAFE_PRECISION:

        custom_warnings.warn(
            f"a reference precision of {precision} digits may not resolve the "
            f"last bit of a double, use at least {_MIN_SAFE_PRECISION}",
            ReferencePrecisionTooLow,
        )

    return precision


def reference_log_factorial(k: int, precision: Optional[int] = None) -> mpmath.mpf:
    """
    log(k!) evaluated as loggamma(k + 1) with mpmath

    :param k: a non-negative integer
    :param precision: number of decimal digits, the configured one if None
    :returns: an mpmath.mpf
    """

    if k < 0:

        msg = f"there is no reference for log(k!) with negative k (got {k})"

        log.error(msg)

        raise NegativeFactorialArgument(msg)

    if k < 2:

        # 0! == 1! == 1
        return mpmath.mpf(0)

    with mpmath.workdps(_get_precision(precision)):

        # +mpf rounds to the working precision before leaving the context
        return +mpmath.loggamma(mpmath.mpf(int(k)) + 1)


def compute_log_factorial_table(
    size: Optional[int] = None, precision: Optional[int] = None
) -> np.ndarray:
    """
    Regenerate the table of log(i!) for i in [0, size), each entry
    correctly rounded to a double.

    :param size: number of entries, the configured table size if None
    :param precision: number of decimal digits used for the reference
    :returns: a float64 array
    """

    if size is None:

        size = logfact_config.table.size

    if size <= 0:

        msg = f"the table size must be positive, got {size}"

        log.error(msg)

        raise ValueError(msg)

    precision = _get_precision(precision)

    log.debug(f"computing {size} log-factorials with {precision} digits")

    return np.array(
        [float(reference_log_factorial(i, precision)) for i in range(size)],
        dtype=np.float64,
    )


def ulp_error(value: float, reference) -> float:
    """
    The distance between value and reference, in units of the spacing of
    the double closest to reference.

    :param value: the double to check
    :param reference: a high precision value (mpmath.mpf, or anything mpmath
    can convert)
    :returns: the error in ULP
    """

    with mpmath.workdps(logfact_config.reference.precision):

        # converting an mpf again would round it to the working precision
        if not isinstance(reference, mpmath.mpf):

            reference = mpmath.mpf(reference)

        spacing = np.spacing(abs(float(reference)))

        # the subtraction happens in the reference precision, not in doubles
        return float(abs(mpmath.mpf(float(value)) - reference) / mpmath.mpf(spacing))


def measure_accuracy(
    arguments: Iterable[int], precision: Optional[int] = None
) -> np.ndarray:
    """
    ULP error of logfactorial at each of the arguments

    :param arguments: non-negative integers
    :param precision: number of decimal digits used for the reference
    :returns: a float64 array, one entry per argument
    """

    precision = _get_precision(precision)

    errors = []

    for k in arguments:

        errors.append(ulp_error(logfactorial(k), reference_log_factorial(k, precision)))

    return np.array(errors, dtype=np.float64)


def verify_accuracy(
    arguments: Iterable[int], precision: Optional[int] = None
) -> float:
    """
    Check that logfactorial stays within the configured ULP bound

    :param arguments: non-negative integers
    :param precision: number of decimal digits used for the reference
    :returns: the largest error found
    """

    arguments = np.asarray(list(arguments), dtype=np.int64)

    errors = measure_accuracy(arguments, precision)

    max_ulp = logfact_config.table.max_ulp

    # NaN compares false, so it has to fail the bound explicitly
    bad = ~(errors <= max_ulp)

    if np.any(bad):

        for k, error in zip(arguments[bad], errors[bad]):

            log.error(f"log({k}!) is off by {error:.2f} ULP")

        msg = f"{bad.sum()} of {len(arguments)} arguments exceed {max_ulp} ULP"

        log.error(msg)

        raise TableVerificationError(msg)

    worst = float(errors.max()) if len(errors) > 0 else 0.0

    log.info(f"checked {len(arguments)} arguments, worst error {worst:.3f} ULP")

    return worst


def verify_log_factorial_table(precision: Optional[int] = None) -> int:
    """
    Compare the hard-coded table with a freshly computed one, entry by entry.
    Every entry must be bit-identical.

    :param precision: number of decimal digits used for the reference
    :returns: the number of entries checked
    """

    expected = compute_log_factorial_table(len(_LOG_FACTORIAL_TABLE), precision)

    mismatches = np.flatnonzero(expected != _LOG_FACTORIAL_TABLE)

    for idx in mismatches:

        log.error(
            f"table entry {idx} is {_LOG_FACTORIAL_TABLE[idx]!r}, "
            f"expected {expected[idx]!r}"
        )

    if len(mismatches) > 0:

        msg = f"{len(mismatches)} table entries differ from the reference"

        log.error(msg)

        raise TableVerificationError(msg)

    return len(expected)


def format_table(values: Iterable[float], per_line: int = 3) -> str:
    """
    Render values as the body of a Python list literal, using the shortest
    repr that round-trips each double

    :param values: the doubles
    :param per_line: entries per line
    :returns: the source text
    """

    literals = [repr(float(v)) for v in values]

    lines = []

    for start in range(0, len(literals), per_line):

        lines.append("    " + ", ".join(literals[start : start + per_line]) + ",")

    return "\n".join(lines)
