"""Density of k-bit primes.

The estimates in ``estimators`` divide by a lower bound for the chance
that a random odd k-bit integer is prime.  Damgaard, Landrock and
Pomerance prove

    pi(2^k) - pi(2^(k - 1)) > 0.71867 * 2^k / k

for k >= 21; counting primes below 2^20 extends it down to k = 8.
"""

import numpy as np

from .estimators import PRIME_DENSITY
from .smallprimes import prime_sieve


DENSITY_KMAX = 24


def kbit_prime_count(k):
    """Number of primes p with 2^(k - 1) <= p < 2^k."""
    if k < 2 or k > DENSITY_KMAX:
        raise ValueError("k must be in [2, %d], got %d" % (DENSITY_KMAX, k))
    sieve = prime_sieve(1 << k)
    return int(np.count_nonzero(sieve[1 << (k - 1):]))


def density_bound_holds(k):
    """True if k * (pi(2^k) - pi(2^(k - 1))) > 0.71867 * 2^k."""
    return kbit_prime_count(k) * k > PRIME_DENSITY * (1 << k)


def density_table(kmin=4, kmax=20):
    """Map each k in [kmin, kmax] to ``density_bound_holds(k)``.

    The sieve is built once, for 2^kmax.
    """
    if kmin < 2 or kmax > DENSITY_KMAX or kmin > kmax:
        raise ValueError("invalid range [%d, %d]" % (kmin, kmax))

    counts = np.cumsum(prime_sieve(1 << kmax))
    result = {}
    for k in range(kmin, kmax + 1):
        primes = int(counts[(1 << k) - 1] - counts[(1 << (k - 1)) - 1])
        result[k] = primes * k > PRIME_DENSITY * (1 << k)
    return result
