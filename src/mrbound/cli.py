"""Command-line entry points.

``table_main``
    Threshold table for 2^-s (default), or the DLP comparison table.
``check_main``
    Verification runs for the auxiliary results the estimates rely on.
``prime64_main``
    Deterministic primality of a 64-bit value.
"""

import argparse
import logging
import math
import sys

from . import density
from . import monier
from . import smallprimes
from . import sprp
from .estimators import ESTIMATORS, RBJ_C, c_sequence
from .report import comparison_table, format_comparison_table, \
    format_threshold_table, format_values
from .thresholds import SMALL_K, build_threshold_table


DEFAULT_SECURITY = 128
MIN_SECURITY = 64
MAX_SECURITY = 256


class Range(object):
    """Inclusive integer interval usable in argparse ``choices``."""

    def __init__(self, start, end):
        self.start = start
        self.end = end
        self.format = '%d--%d'

    def __eq__(self, other):
        return self.start <= other <= self.end

    def __str__(self):
        return (self.format % (self.start, self.end)) + ' inclusive'

    def __repr__(self):
        return self.format % (self.start, self.end)


class UsageParser(argparse.ArgumentParser):
    """Argument parser that exits with status 1 on a usage error."""

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, '%s: error: %s\n' % (self.prog, message))


def unsigned_decimal(text):
    """argparse type: an unsigned decimal integer without leading zeros."""
    if not (text.isascii() and text.isdigit()) or \
            (len(text) > 1 and text[0] == '0'):
        raise argparse.ArgumentTypeError(
            "%r is not an unsigned decimal integer" % text)
    return int(text)


def _configure_logging(verbose):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
        stream=sys.stderr)


def table_main(argv=None):
    parser = UsageParser(
        prog='mrbound-tab',
        description="M-R test iterations s.t. p(k, t) <= (2^-s), "
                    "for k > %d." % SMALL_K)

    parser.add_argument(
        'security',
        nargs='?',
        type=unsigned_decimal,
        help="The security exponent s.",
        default=DEFAULT_SECURITY,
        choices=[Range(MIN_SECURITY, MAX_SECURITY)])

    parser.add_argument(
        '-d', '--comparison',
        help="Print floor(-log2(p(k, t))) for k = 100 .. 600, t = 1 .. 10.",
        action='store_true')

    parser.add_argument(
        '-e', '--estimator',
        help="The p(k, t) evaluation function.",
        default='dlp',
        choices=sorted(ESTIMATORS))

    parser.add_argument(
        '-v', '--verbose',
        help="Log the table construction.",
        action='store_true')

    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    estimator = ESTIMATORS[args.estimator]

    if args.comparison:
        print(format_comparison_table(comparison_table(estimator)))
        return 0

    s = args.security
    table = build_threshold_table(s, estimator)

    print("k from t = 2 (k > %d) s.t. p(k, t) <= 2^-%d (%.2e) :"
          % (SMALL_K, s, math.ldexp(1.0, -s)))
    print()
    print(format_threshold_table(table))
    print()
    return 0


def _check_monier(args):
    for k in range(args.kmax + 1):
        p = monier.exact_p_k1(k)
        mark = '' if p == monier.MONIER_P_K1[k] else ' *'
        print("%2d : %.16e%s" % (k, p, mark))


def _check_primes(args):
    primes = smallprimes.small_primes(args.bits)
    fmt = '0x%02x' if (1 << args.bits) <= 0x100 else '0x%04x'
    print(format_values(primes, fmt=fmt))
    print()
    print("%d primes < 2^%d factor %2.2f%% of all odd integers."
          % (len(primes), args.bits,
             100.0 * smallprimes.odd_coverage(primes)))


def _check_liars(args):
    print("frequency of 2-SPRP strong liars:")
    print()
    for k in range(4, args.kmax + 1):
        liars, composites = sprp.strong_liar_frequency(k)
        print("%2d : %2d / %7d" % (k, liars, composites))


def _check_density(args):
    for k, holds in density.density_table(args.kmin, args.kmax).items():
        print("%2d : %s" % (k, 'T' if holds else 'F'))


def _check_cseq(args):
    for s, (c, tab) in enumerate(zip(c_sequence(), RBJ_C)):
        print("s = %2d : %.16e (rel = %.3e)" % (s, c, (c - tab) / tab))


def check_main(argv=None):
    parser = UsageParser(
        prog='mrbound-check',
        description="Verify the auxiliary results behind p(k, t).")
    parser.add_argument(
        '-v', '--verbose',
        help="Enable debug logging.",
        action='store_true')
    commands = parser.add_subparsers(dest='command', required=True)

    p = commands.add_parser(
        'monier', help="Exact p(k, 1) by enumeration (Monier's formula).")
    p.add_argument(
        '--kmax', type=unsigned_decimal, default=16,
        help="The largest bit-length to enumerate.",
        choices=[Range(2, monier.MONIER_KMAX)])
    p.set_defaults(run=_check_monier)

    p = commands.add_parser(
        'primes', help="Small prime table for trial division.")
    p.add_argument(
        'bits', nargs='?', type=unsigned_decimal,
        default=smallprimes.TABLE_BITS,
        help="Primes below 2^bits.",
        choices=[Range(2, 16)])
    p.set_defaults(run=_check_primes)

    p = commands.add_parser(
        'liars', help="Frequency of 2-SPRP strong liars.")
    p.add_argument(
        '--kmax', type=unsigned_decimal, default=20,
        help="The largest bit-length to survey.",
        choices=[Range(4, 24)])
    p.set_defaults(run=_check_liars)

    p = commands.add_parser(
        'density', help="k-bit prime density lower bound.")
    p.add_argument('--kmin', type=unsigned_decimal, default=4,
                   choices=[Range(2, density.DENSITY_KMAX)])
    p.add_argument('--kmax', type=unsigned_decimal, default=20,
                   choices=[Range(2, density.DENSITY_KMAX)])
    p.set_defaults(run=_check_density)

    p = commands.add_parser(
        'cseq', help="Burthe's c(s) sequence.")
    p.set_defaults(run=_check_cseq)

    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    try:
        args.run(args)
    except ValueError as e:
        parser.error(str(e))
    return 0


def prime64_main(argv=None):
    parser = UsageParser(
        prog='mrbound-prime64',
        description="Deterministic M-R primality test for a 64-bit value.")
    parser.add_argument(
        'n',
        type=unsigned_decimal,
        help="The value to test.",
        choices=[Range(2, sprp.U64_LIMIT - 1)])

    args = parser.parse_args(argv)
    print("%d : %s" % (args.n,
                       'prime' if sprp.is_prime64(args.n) else 'composite'))
    return 0
