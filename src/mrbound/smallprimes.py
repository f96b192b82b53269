"""Small primes for trial division.

A candidate with 16 or fewer significant bits is handled by trial
division alone; larger candidates are screened against the primes below
2^12 before any Miller-Rabin round is spent on them.  The same table
factors any n < 2^24 completely.
"""

import math
import numpy as np


#: primes below 2^TABLE_BITS are used for factorization.
TABLE_BITS = 12
FACTOR_LIMIT = 1 << (2 * TABLE_BITS)


def prime_sieve(n):
    """Sieve of Eratosthenes: boolean array, True at the primes below n."""
    sieve = np.ones(n, dtype=bool)
    sieve[:2] = False
    for p in range(2, math.isqrt(n - 1) + 1):
        if sieve[p]:
            sieve[p * p::p] = False
    return sieve


def small_primes(k=TABLE_BITS):
    """Return the primes below 2^k as a numpy array.

    Parameters
    ----------
    k : int
        Bit bound, 2 <= k <= 16.

    Returns
    -------
    numpy.ndarray
        Ascending array of primes p < 2^k.
    """
    if k < 2 or k > 16:
        raise ValueError("k must be in [2, 16], got %d" % k)

    return np.flatnonzero(prime_sieve(1 << k))


_TABLE = [int(p) for p in small_primes(TABLE_BITS)]


def factor(n):
    """Prime factorization of n in [2, 2^24), with multiplicity.

    Returns
    -------
    list of int
        Prime factors in ascending order; a single element when n is
        prime.
    """
    if n < 2 or n >= FACTOR_LIMIT:
        raise ValueError("n must be in [2, 2^24), got %d" % n)

    factors = []
    for p in _TABLE:
        if p * p > n:
            break
        while n % p == 0:
            factors.append(p)
            n //= p
    if n > 1:
        factors.append(n)
    return factors


def is_small_prime(n):
    """Primality of n in [2, 2^24) by trial division."""
    return len(factor(n)) == 1


def odd_coverage(primes):
    """Fraction of odd integers with a factor among the odd ``primes``.

    The product (1 - 1/p) over the odd primes in the table is the
    density of odd integers that survive trial division.
    """
    odd = np.asarray(primes, dtype=float)
    odd = odd[odd > 2]
    return 1.0 - float(np.prod((odd - 1.0) / odd))
