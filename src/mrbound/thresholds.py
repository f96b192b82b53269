r"""Threshold tables of Miller-Rabin rounds for a target error bound.

For a security exponent s, the table lists, for t = 2, 3, ..., the
largest bit-length k for which t rounds are required so that
p(k, t) <= 2^-s.  Candidates with 16 or fewer bits are left to trial
division, so only k > 16 is considered.

Table construction
------------------
The construction relies on p(k, t) decreasing in k.  For each t, a
binary search over k finds the "sweet spot" where the previous round
count stops being sufficient:

    p(k + 1, t - 1) <= 2^-s < p(k, t - 1)

It follows from p(k, t) < p(k, t - 1), but is not guaranteed, that
p(k, t) <= 2^-s at that k; a short linear scan moves k upward until it
is.  The estimate is not strictly monotonic in k: a local maximum can
push the threshold for t above the one already found for t - 1.  The
earlier entries are then raised so that the table stays non-increasing.

Using the table
---------------
The rounds needed for a k-bit candidate are one more than the number of
leading entries with k <= max_k; the terminating (0) entry guarantees
the scan stops.  See ``rounds_required``.
"""

import logging
import math

from .estimators import dlp_estimate


logger = logging.getLogger(__name__)

#: candidates of SMALL_K or fewer bits are handled by trial division.
SMALL_K = 16
KMAX_SEED = 25


def find_kmax(s, estimator=dlp_estimate):
    """Smallest 25 * 2^i such that a single round meets 2^-s.

    Parameters
    ----------
    s : int
        Security exponent.
    estimator : callable
        p(k, t) evaluation function.

    Returns
    -------
    int
        Upper bound for every threshold in the table.
    """
    pmax = math.ldexp(1.0, -s)
    kmax = KMAX_SEED
    while estimator(kmax, 1) > pmax:
        kmax <<= 1
    return kmax


def _search(t, kmax, pmax, estimator):
    """Threshold for t rounds in (SMALL_K, kmax], or None if there is none."""
    k0, k1 = SMALL_K + 1, kmax
    while k0 <= k1:
        k = k0 + (k1 - k0) // 2

        if estimator(k + 1, t - 1) > pmax:
            k0 = k + 1
        elif estimator(k, t - 1) <= pmax:
            k1 = k - 1
        else:
            while estimator(k, t) > pmax:
                k += 1
            return k
    return None


def build_threshold_table(s, estimator=dlp_estimate):
    """Build the round-count threshold table for the error bound 2^-s.

    Parameters
    ----------
    s : int
        Security exponent (64 .. 256 in practice).
    estimator : callable
        p(k, t) evaluation function, ``dlp_estimate`` by default.

    Returns
    -------
    list of (int, int)
        ``(t, max_k)`` pairs for t = 2 .. tmax, followed by the sentinel
        ``(tmax + 1, 0)``.  max_k is non-increasing in t.
    """
    if s < 1:
        raise ValueError("s must be a positive integer, got %d" % s)

    pmax = math.ldexp(1.0, -s)
    kmax = find_kmax(s, estimator)
    logger.debug("s = %d: kmax = %d", s, kmax)

    # Burthe's p(k, t) <= 4^-t gives tmax = ceil(s / 2) for k >= 2.
    tmax = (s + 1) // 2

    thresholds = {}
    for t in range(2, tmax + 1):
        k = _search(t, kmax, pmax, estimator)
        if k is None:
            # p(k, t - 1) <= 2^-s already holds for every k > 16.
            tmax = t - 1
            break

        if k > kmax:
            logger.warning("local maximum in p(k, %d): threshold %d exceeds "
                           "%d for t = %d", t, k, kmax, t - 1)
            ti = t - 1
            while ti >= 2 and thresholds[ti] < k:
                thresholds[ti] = k
                ti -= 1

        thresholds[t] = kmax = k
        logger.debug("t = %d: k <= %d", t, k)

    table = [(t, thresholds[t]) for t in range(2, tmax + 1)]
    table.append((tmax + 1, 0))
    return table


def rounds_required(table, k):
    """Number of rounds a k-bit candidate needs according to ``table``.

    Parameters
    ----------
    table : list of (int, int)
        Output of ``build_threshold_table``.
    k : int
        Bit-length of the candidate, k > 16.

    Returns
    -------
    int
        Rounds required.
    """
    if k <= SMALL_K:
        raise ValueError("k must exceed %d, got %d" % (SMALL_K, k))

    t = 1
    for _, max_k in table:
        if k > max_k:
            break
        t += 1
    return t
