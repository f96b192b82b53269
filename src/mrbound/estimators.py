r"""Error probability p(k, t) for a random k-bit probable prime search.

p(k, t) is the probability that a random odd k-bit integer, having
passed t independent Miller-Rabin rounds with random bases, is composite.

Three results are combined, and the smallest bound wins:

1.  Burthe: p(k, t) <= 4^-t for all k >= 2, t >= 1.

2.  Monier-Rabin: for 2 <= k <= 24 the exact value p(k, 1) is known
    (see ``monier.MONIER_P_K1``), and

        p(k, t) <= 4^(1 - t) * p(k, 1) / (1 - p(k, 1))

3.  Damgaard, Landrock and Pomerance (Math. Comp. 61, 1993), section 4:
    for k >= 3 and any integer 3 <= M <= 2*sqrt(k - 1) - 1,

        p(k, t) <= (k / 0.71867) * ( 2^-(2 + tM)
                   + c * 2^(t - 2) * sum_{j=2..M} sum_{m=j'..M}
                     2^(-tm + m - j - (k - 1)/j) )

    with c = 8 (pi^2 - 6) / 3 and j' = max(j, 3).  0.71867 * 2^k / k is
    a lower bound for the number of k-bit primes, valid for k >= 8 (see
    ``density``).  There is no closed form for the optimal M, so every
    admissible M is evaluated.

``rbj_estimate`` implements Burthe's sharper but far more expensive
refinement (Math. Comp. 65, 1996, section 3) with the default fractional
step q = 4.

All exponentials are evaluated with ``numpy.exp2``.
"""

import math
import numpy as np
from scipy import special

from .monier import MONIER_KMAX, MONIER_P_K1


PRIME_DENSITY = 0.71867
DLP_C = 8.0 * (math.pi ** 2 - 6.0) / 3.0

#: below this bit-length the DLP bound is not used.
DLP_KMIN = 8
#: below this bit-length the Burthe bound is not used.
RBJ_KMIN = 10
RBJ_STEP = 4
RBJ_SMAX = 30

#: c(s) = (s + 1) * sum_{n > s} 1/n^2, for s = 0 .. 30.
RBJ_C = (
    1.6449340668482266e+00, 1.2898681336964530e+00, 1.1848022005446794e+00,
    1.1352918229484619e+00, 1.1066147786855773e+00, 1.0879377344226930e+00,
    1.0748162457153638e+00, 1.0650961175522526e+00, 1.0576081322462842e+00,
    1.0516633568168590e+00, 1.0468296924985450e+00, 1.0428224744612227e+00,
    1.0394465695552135e+00, 1.0365637612961471e+00, 1.0340734177152595e+00,
    1.0319005344518326e+00, 1.0299880678550721e+00, 1.0282918642340901e+00,
    1.0267772147162311e+00, 1.0254164587040657e+00, 1.0241872816392692e+00,
    1.0230714832592795e+00, 1.0220540713413131e+00, 1.0211225848400847e+00,
    1.0202665814306437e+00, 1.0194772446878697e+00, 1.0187470795427285e+00,
    1.0180696737096060e+00, 1.0174395089951531e+00, 1.0168518107322035e+00,
    1.0163024266454992e+00,
)


def c_sequence(smax=RBJ_SMAX):
    """Evaluate c(s) = (s + 1) * zeta(2, s + 1) for s = 0 .. smax.

    Returns
    -------
    numpy.ndarray
        Array of length smax + 1; reproduces ``RBJ_C``.
    """
    s = np.arange(smax + 1, dtype=float)
    return (s + 1.0) * special.zeta(2.0, s + 1.0)


def _baseline(k, t):
    """Burthe and Monier-Rabin bounds.

    Returns
    -------
    (float, bool)
        The bound, and whether it is the exact single-round value.
    """
    rp = float(np.exp2(-2.0 * t))
    if k <= MONIER_KMAX:
        p_k1 = MONIER_P_K1[k]
        if t == 1:
            return p_k1, True
        rp = float(np.exp2(2.0 - 2.0 * t)) * p_k1 / (1.0 - p_k1)
    return rp, False


def dlp_estimate(k, t):
    """Upper bound for p(k, t), following Damgaard, Landrock, Pomerance.

    Parameters
    ----------
    k : int
        Bit-length of the candidate, k >= 2.
    t : int
        Number of Miller-Rabin rounds, t >= 1.

    Returns
    -------
    float
        The tightest available bound.  Degenerate arguments (k <= 1 or
        t < 1) return 1.0.
    """
    if k < 2 or t < 1:
        return 1.0

    rp, exact = _baseline(k, t)
    if exact or k < DLP_KMIN:
        return rp

    mh = int(2.0 * math.sqrt(k - 1.0) - 1.0)
    if mh < 3:
        return rp

    # w[j - 2] = 2^-(j + (k - 1)/j); the cumulative sum over j <= m is
    # the inner sum of every column m >= 3.
    j = np.arange(2, mh + 1, dtype=float)
    w = np.cumsum(np.exp2(-(j + (k - 1.0) / j)))

    m = np.arange(3, mh + 1, dtype=float)
    col = DLP_C * np.exp2((1.0 - t) * (m - 1.0) - 1.0) * w[1:]

    # r0[i] is the double sum for M = i + 3
    r0 = np.cumsum(col)
    candidates = (r0 + np.exp2(-(2.0 + t * m))) * (k / PRIME_DENSITY)

    return min(rp, float(candidates.min()))


def _rbj_terms(k, t, m):
    """Burthe's inner sum, evaluated for every fractional m at once."""
    jmax = int(math.ceil(m[-1]))
    j = np.arange(2, jmax + 1, dtype=float)
    inside = j[None, :] <= np.ceil(m)[:, None]

    with np.errstate(over='ignore'):
        jd = np.exp2((k - 1.0) / j) - 1.0
        jn = np.exp2(j[None, :] - m[:, None] - 2.0)
        js = np.where(inside, jd[None, :] * jn, np.inf)
        terms = np.where(inside,
                         (np.ceil(1.0 / (2.0 * jn)) - 1.0) / jd[None, :],
                         0.0)

    s = np.minimum(float(RBJ_SMAX), js.min(axis=1)).astype(int)
    c = np.asarray(RBJ_C)[s]

    return np.exp2(-m * t) * terms.sum(axis=1) * c


def rbj_estimate(k, t):
    """Upper bound for p(k, t), following Burthe.

    Tighter than ``dlp_estimate`` but roughly O(k) work per call rather
    than O(sqrt(k)).  Arguments and return value as for ``dlp_estimate``.
    """
    if k < 2 or t < 1:
        return 1.0

    rp, exact = _baseline(k, t)
    if exact or k < RBJ_KMIN:
        return rp

    mh = int(2.0 * math.sqrt(k - 1.0) - 3.0)
    if mh < 3:
        return rp

    q = RBJ_STEP
    steps = np.arange(2 * q + 1, q * mh + 1)
    m = steps / float(q)
    f = np.cumsum(_rbj_terms(float(k), float(t), m))

    big_m = np.arange(3, mh + 1)
    n1 = f[q * big_m - 2 * q - 1] * 0.5 * (np.exp2(t / float(q)) - 1.0)
    n1 = n1 + np.exp2(-(t * big_m + 2.0))

    candidates = n1 / (n1 + PRIME_DENSITY / k)

    return min(rp, float(candidates.min()))


estimate = dlp_estimate

ESTIMATORS = {
    'dlp': dlp_estimate,
    'rbj': rbj_estimate,
}
