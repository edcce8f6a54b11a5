import math

import numpy as np
from numba import float64, int64, njit

from logfact.exceptions.custom_exceptions import NegativeFactorialArgument
from logfact.io.logging import setup_logger

log = setup_logger(__name__)

# log(k!) for k = 0..125, correctly rounded to double precision.
# Regenerate with logfact.utils.statistics.table_generation.
_LOG_FACTORIAL_TABLE = np.array(
    [
        0.0, 0.0, 0.69314718055994529,
        1.791759469228055, 3.1780538303479458, 4.7874917427820458,
        6.5792512120101012, 8.5251613610654147, 10.604602902745251,
        12.801827480081469, 15.104412573075516, 17.502307845873887,
        19.987214495661885, 22.552163853123425, 25.19122118273868,
        27.89927138384089, 30.671860106080672, 33.505073450136891,
        36.395445208033053, 39.339884187199495, 42.335616460753485,
        45.380138898476908, 48.471181351835227, 51.606675567764377,
        54.784729398112319, 58.003605222980518, 61.261701761002001,
        64.557538627006338, 67.88974313718154, 71.257038967168015,
        74.658236348830158, 78.092223553315307, 81.557959456115043,
        85.054467017581516, 88.580827542197682, 92.136175603687093,
        95.719694542143202, 99.330612454787428, 102.96819861451381,
        106.63176026064346, 110.32063971475739, 114.03421178146171,
        117.77188139974507, 121.53308151543864, 125.3172711493569,
        129.12393363912722, 132.95257503561632, 136.80272263732635,
        140.67392364823425, 144.5657439463449, 148.47776695177302,
        152.40959258449735, 156.3608363030788, 160.3311282166309,
        164.32011226319517, 168.32744544842765, 172.35279713916279,
        176.39584840699735, 180.45629141754378, 184.53382886144948,
        188.6281734236716, 192.7390472878449, 196.86618167289001,
        201.00931639928152, 205.1681994826412, 209.34258675253685,
        213.53224149456327, 217.73693411395422, 221.95644181913033,
        226.1905483237276, 230.43904356577696, 234.70172344281826,
        238.97838956183432, 243.26884900298271, 247.57291409618688,
        251.89040220972319, 256.22113555000954, 260.56494097186322,
        264.92164979855278, 269.29109765101981, 273.67312428569369,
        278.06757344036612, 282.4742926876304, 286.89313329542699,
        291.32395009427029, 295.76660135076065, 300.22094864701415,
        304.68685676566872, 309.1641935801469, 313.65282994987905,
        318.1526396202093, 322.66349912672615, 327.1852877037752,
        331.71788719692847, 336.26118197919845, 340.81505887079902,
        345.37940706226686, 349.95411804077025, 354.53908551944079,
        359.1342053695754, 363.73937555556347, 368.35449607240474,
        372.97946888568902, 377.61419787391867, 382.25858877306001,
        386.91254912321756, 391.57598821732961, 396.24881705179155,
        400.93094827891576, 405.6222961611449, 410.32277652693733,
        415.03230672824964, 419.75080559954472, 424.47819341825709,
        429.21439186665157, 433.95932399501481, 438.71291418612117,
        443.47508812091894, 448.24577274538461, 453.02489623849613,
        457.81238798127816, 462.60817852687489, 467.4121995716082,
        472.22438392698058, 477.04466549258564, 481.87297922988796,
    ],
    dtype=np.float64,
)

_LOG_FACTORIAL_TABLE.flags.writeable = False

LOG_FACTORIAL_TABLE_SIZE = _LOG_FACTORIAL_TABLE.shape[0]

# 0.5 * log(2 * pi)
_HALF_LOG_2PI = 0.91893853320467278

# above this not every int64 is a double
_MAX_EXACT_INT = 2 ** 53


# fastmath must stay off: it would drop the NaN branch and reorder the series
@njit(float64(int64), fastmath=False)
def logfactorial(k):
    """
    The natural logarithm of k!

    Small arguments come from a table of correctly rounded values, larger
    ones from the Stirling series truncated after the 1/k**5 term, which is
    within 2 ULP for every k > 125 (the first dropped term is < 1e-17).

    A negative k gives NaN: nothing is raised so that the value poisons
    whatever arithmetic follows.

    :param k: a non-negative integer
    :return: log(k!), or NaN if k < 0
    """

    if k < 0:

        return np.nan

    if k < LOG_FACTORIAL_TABLE_SIZE:

        return _LOG_FACTORIAL_TABLE[k]

    x = float(k)
    log_x = math.log(x)

    offset = 0.5

    if k > _MAX_EXACT_INT:

        # x is k rounded to a double, put the rounding error back in.
        # Halving keeps the conversion inside the int64 range.
        half = int(0.5 * x)
        offset += (k - half) - half

    r = 1.0 / x
    r2 = r * r

    # 1/(12k) - 1/(360k^3) + 1/(1260k^5)
    correction = r * (1.0 / 12.0 - r2 * (1.0 / 360.0 - r2 / 1260.0))

    # log_x - 1 is exact here since log_x > 2
    return x * (log_x - 1.0) + (offset * log_x + (_HALF_LOG_2PI + correction))


def checked_logfactorial(k) -> float:
    """
    Same as logfactorial, but raises on invalid arguments instead of
    returning NaN.

    :param k: a non-negative integer
    :return: log(k!)
    """

    if isinstance(k, bool) or not isinstance(k, (int, np.integer)):

        msg = f"log(k!) needs an integer argument, got {type(k).__name__}"

        log.error(msg)

        raise TypeError(msg)

    if k < 0:

        msg = f"log(k!) is undefined for negative k (got {k})"

        log.error(msg)

        raise NegativeFactorialArgument(msg)

    return logfactorial(k)
