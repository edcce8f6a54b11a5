from math import log

import numpy as np
from numba import njit

from logfact.utils.statistics.gammaln import logfactorial


@njit(fastmath=False)
def xlogy_one(x, y):
    """
    A function which is 0 if x is 0, and x * log(y) otherwise. This is to fix the fact that for a machine
    0 * log(0) is nan, instead of 0.

    :param x:
    :param y:
    :return:
    """
    if x > 0:
        return x * log(y)
    else:
        return 0.0


@njit(fastmath=False)
def poisson_log_pmf(k, mu):
    """
    log P(k | mu) = k log(mu) - mu - log(k!)

    :param k: the observed count
    :param mu: the expectation
    :return: the log probability
    """

    return xlogy_one(k, mu) - mu - logfactorial(k)


@njit(fastmath=False)
def poisson_log_likelihood(observed_counts, expected_counts):
    """
    Poisson log-likelihood of every bin:

    L_i = o_i log(m_i) - m_i - log(o_i!)

    :param observed_counts: integer counts
    :param expected_counts: model expectations
    :return: the log_like vector
    """

    n = expected_counts.shape[0]
    log_likes = np.empty(n, dtype=np.float64)

    for i in range(n):

        log_likes[i] = poisson_log_pmf(observed_counts[i], expected_counts[i])

    return log_likes


# up to this many factors the coefficient is summed term by term
_DIRECT_SUM_MAX_K = 30


@njit(fastmath=False)
def log_binomial(n, k):
    """
    log(n! / (k! (n - k)!))

    For a large n and a small k the three log-factorials nearly cancel and
    their rounding dominates the result, so short products are summed
    directly as log((n - m + i) / i).

    :param n: population size
    :param k: number of chosen items
    :return: the log of the binomial coefficient, nan outside 0 <= k <= n
    """

    m = min(k, n - k)

    if 0 <= m <= _DIRECT_SUM_MAX_K:

        total = 0.0

        for i in range(1, m + 1):

            total += log((n - m + i) / i)

        return total

    return logfactorial(n) - logfactorial(k) - logfactorial(n - k)


@njit(fastmath=False)
def hypergeometric_log_pmf(k, n_good, n_bad, n_sample):
    """
    Log probability of drawing k good items in n_sample draws without
    replacement from an urn with n_good good and n_bad bad items.

    :return: the log probability, -inf outside the support
    """

    if k < max(0, n_sample - n_bad) or k > min(n_sample, n_good):

        return -np.inf

    return (
        log_binomial(n_good, k)
        + log_binomial(n_bad, n_sample - k)
        - log_binomial(n_good + n_bad, n_sample)
    )
