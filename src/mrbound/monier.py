r"""Exact single-round error probabilities for small bit-lengths.

For an odd composite n, Monier's formula counts the strong liars, i.e.
the bases a in [1, n - 1] for which n passes the strong probable-prime
test:

    S(n) = (1 + (2^(w*v) - 1) / (2^w - 1)) * prod_i gcd(u, p_i - 1)

where p_1 .. p_w are the distinct prime factors of n, v is the smallest
2-adic valuation of the (p_i - 1), and u is the largest odd factor of
n - 1.

The probability that a random odd k-bit integer which passes a single
round with a random base is composite is then:

    p(k, 1) = sum_c S(c)/(c - 1) / (sum_c S(c)/(c - 1) + #primes)

with the sums taken over the odd k-bit composites c.  Every term is
rounded up before it is accumulated so the float result is never below
the true value.
"""

import math

from . import smallprimes


#: exact p(k, 1) for k = 0 .. 24.  p(0, 1) = p(1, 1) = 1 (no primes) and
#: p(2, 1) = p(3, 1) = 0 (no odd composites).  Since p(k, 1) < 1/5 on
#: 2 <= k <= 24, the Monier-Rabin bound is tighter than 4^-t there.
MONIER_P_K1 = (
    1.0000000000000000e+00, 1.0000000000000000e+00, 0.0000000000000000e+00,
    0.0000000000000000e+00, 1.6417910447761200e-01, 6.4299424184261059e-02,
    6.5348064836078495e-02, 5.6654752251003034e-02, 3.8003778178391873e-02,
    3.0837119635400381e-02, 2.0525079764265652e-02, 1.7393574680619316e-02,
    1.0710359182783314e-02, 7.9490871698650184e-03, 5.9337043808932611e-03,
    3.9442643069209568e-03, 2.6255166117476652e-03, 1.9286518790611249e-03,
    1.2577894174913744e-03, 9.0457147250914852e-04, 6.0885312016630043e-04,
    4.0170629568174411e-04, 2.7576379216948154e-04, 1.8760654682551843e-04,
    1.2612847365349537e-04,
)

MONIER_KMAX = len(MONIER_P_K1) - 1


def strong_liar_count(n):
    """Number of strong liars S(n) for an odd n in [3, 2^24).

    Parameters
    ----------
    n : int
        Odd integer to examine.

    Returns
    -------
    int
        S(n), or 0 when n is prime.
    """
    if n < 3 or n % 2 == 0:
        raise ValueError("n must be an odd integer >= 3, got %d" % n)

    factors = smallprimes.factor(n)
    if len(factors) == 1:
        return 0

    distinct = sorted(set(factors))
    w = len(distinct)

    v = min(_two_adic(p - 1) for p in distinct)
    count = 1 + ((1 << (w * v)) - 1) // ((1 << w) - 1)

    u = n - 1
    while u % 2 == 0:
        u //= 2
    for p in distinct:
        count *= math.gcd(u, p - 1)

    return count


def _two_adic(x):
    v = 0
    while x % 2 == 0:
        x //= 2
        v += 1
    return v


def exact_p_k1(k):
    """Compute p(k, 1) by enumerating every odd k-bit integer.

    The running time grows as 2^k; k = 16 takes a few seconds in pure
    Python.

    Parameters
    ----------
    k : int
        Bit-length in [0, 24].

    Returns
    -------
    float
        p(k, 1), rounded up.
    """
    if k < 0 or k > MONIER_KMAX:
        raise ValueError("k must be in [0, %d], got %d" % (MONIER_KMAX, k))
    if k < 2:
        return 1.0
    if k < 4:
        return 0.0

    liars = []
    primes = 0
    for n in range((1 << (k - 1)) + 1, 1 << k, 2):
        sn = strong_liar_count(n)
        if sn:
            liars.append(math.nextafter(sn / (n - 1), math.inf))
        else:
            primes += 1

    num = math.fsum(liars)
    return math.nextafter(num / (num + primes), math.inf)
