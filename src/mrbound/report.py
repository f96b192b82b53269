"""Text renderings of threshold and comparison tables."""

import numpy as np

from .estimators import dlp_estimate


COMPARISON_K = tuple(range(100, 601, 50))
COMPARISON_T = tuple(range(1, 11))


def format_values(values, per_line=8, fmt='0x%04x'):
    """Render integers as the body of a C-style array literal.

    Each line holds ``per_line`` values and is indented by four spaces.
    """
    values = [fmt % int(v) for v in values]
    lines = []
    for i in range(0, len(values), per_line):
        lines.append('    ' + ', '.join(values[i:i + per_line]))
    return ',\n'.join(lines)


def format_threshold_table(table, per_line=8):
    """Render the thresholds in hexadecimal, sentinel included."""
    return format_values([max_k for _, max_k in table], per_line)


def comparison_table(estimator=dlp_estimate, ks=COMPARISON_K,
                     ts=COMPARISON_T):
    """Lower bounds for -log2(p(k, t)).

    Returns
    -------
    numpy.ndarray
        Integer array of shape (len(ks), len(ts)) holding
        floor(-log2(p(k, t))), as listed in DLP table 1.
    """
    p = np.array([[estimator(k, t) for t in ts] for k in ks])
    return np.floor(-np.log2(p)).astype(int)


def format_comparison_table(bits, ks=COMPARISON_K, ts=COMPARISON_T):
    lines = ['lower bounds for -lb(p(k, t))', '']
    lines.append('k\\t |' + ''.join(' %3d' % t for t in ts))
    lines.append('-----' + '----' * len(ts))
    for k, row in zip(ks, bits):
        lines.append('%3d |' % k + ''.join(' %3d' % b for b in row))
    return '\n'.join(lines)
