"""Strong probable-prime tests for word-sized integers.

``sprp`` is a single Miller-Rabin round with a fixed base.  With the
base sets of Jaeschke (n < 2^32) and Sinclair (n < 2^64) it becomes the
deterministic test ``is_prime64``.
"""

from . import smallprimes


U64_LIMIT = 1 << 64
U32_LIMIT = 1 << 32

SPRP32_BASES = (2, 7, 61)
SPRP64_BASES = (2, 325, 9375, 28178, 450775, 9780504, 1795265022)


def sprp(n, a):
    """Strong probable-prime test of an odd n > 2 to the base a.

    Parameters
    ----------
    n : int
        Odd integer in [3, 2^64).
    a : int
        Base; it is reduced mod n, and a multiple of n passes.

    Returns
    -------
    bool
        False if a witnesses the compositeness of n.
    """
    if n < 3 or n % 2 == 0 or n >= U64_LIMIT:
        raise ValueError("n must be odd and in [3, 2^64), got %d" % n)

    a %= n
    if a == 0:
        return True

    m = n - 1
    s = 0
    r = m
    while r % 2 == 0:
        r //= 2
        s += 1

    y = pow(a, r, n)
    if y == 1 or y == m:
        return True

    for _ in range(s - 1):
        y = y * y % n
        if y == m:
            return True
        if y == 1:
            return False
    return False


def is_prime64(n):
    """Deterministic primality test for n in [2, 2^64)."""
    if n < 2 or n >= U64_LIMIT:
        raise ValueError("n must be in [2, 2^64), got %d" % n)
    if n % 2 == 0:
        return n == 2
    if n == 3:
        return True

    bases = SPRP32_BASES if n < U32_LIMIT else SPRP64_BASES
    return all(sprp(n, a) for a in bases)


def strong_liar_frequency(k, base=2):
    """Count the k-bit odd composites that pass a ``base``-SPRP test.

    A single base-2 test removes all but a handful of composites before
    the randomised rounds begin.

    Parameters
    ----------
    k : int
        Bit-length in [4, 24].
    base : int
        Fixed SPRP base.

    Returns
    -------
    (int, int)
        The number of strong liars and the number of odd composites.
    """
    if k < 4 or k > 24:
        raise ValueError("k must be in [4, 24], got %d" % k)

    liars = composites = 0
    for n in range((1 << (k - 1)) + 1, 1 << k, 2):
        if smallprimes.is_small_prime(n):
            continue
        composites += 1
        if sprp(n, base):
            liars += 1
    return liars, composites
