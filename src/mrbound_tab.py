#!/usr/bin/env python

import sys

import mrbound.cli


if __name__ == '__main__':
    sys.exit(mrbound.cli.table_main())
