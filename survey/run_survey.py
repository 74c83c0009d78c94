#!/usr/bin/env python3
"""
Rotation Orbit Survey Runner
============================

Runs the orbit registry over one or more matrix orders and prints the
representatives, imprints and counts.

Usage:
    python survey/run_survey.py 4              # unique images of 4x4, ASCII + summary
    python survey/run_survey.py -f -n 2-6      # all images, summary only
    python survey/run_survey.py -i -n 4,5      # imprint report
    python survey/run_survey.py -n --table 1-8 # census table across orders

Author: Carmen Esteban
"""

import os
import sys
import time
import json
import argparse

# Add project root to path
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, PROJECT_ROOT)

from survey.config import DEFAULT_OPTIONS, SurveyOptions, parse_ranges, expand_ranges
from matrix_orbits.registry import OrbitRegistry
from matrix_orbits.report import (
    census_summary, census_table, imprint_report, render_census,
)


USAGE = """\
Usage: run_survey.py [options] <matrix size>
  Matrix size format
     6        1 matrixes: 6x6
     2,3,6    3 matrixes: 2x2,3x3,6x6
     4-7      4 matrixes: 4x4,5x5,6x6,7x7
     2,4-7,9  6 matrixes: 2x2,4x4,5x5,6x6,7x7,9x9
  Options
    -d        unique images, one per rotation orbit
    -f        all images without deduplication
    -a        visualize images in ascii and output on screen
    -n        turn off any visual output
    -i        imprint images
    -s        output summary information
    -v        show matrix generation progress
    --table   census table over all sizes
    --json    census summaries as JSON
"""


def build_parser():
    parser = argparse.ArgumentParser(
        description="Rotation orbits of permutation matrices",
        add_help=True)
    parser.add_argument("sizes", nargs="*",
                        help="Matrix sizes, e.g. 6 or 2,4-7,9")
    # -d/-f and -a/-n share a destination: the last flag given wins.
    parser.add_argument("-d", dest="unique", action="store_true", default=None,
                        help="Keep one image per rotation orbit (default)")
    parser.add_argument("-f", dest="unique", action="store_false", default=None,
                        help="Keep all images")
    parser.add_argument("-a", dest="ascii", action="store_true", default=None,
                        help="ASCII output of every image (default)")
    parser.add_argument("-n", dest="ascii", action="store_false", default=None,
                        help="Turn off visual output")
    parser.add_argument("-i", dest="imprint", action="store_true",
                        help="Imprint report")
    parser.add_argument("-s", dest="summary", action="store_true",
                        help="Summary information (default)")
    parser.add_argument("-v", dest="verbose", action="store_true",
                        help="Show generation progress")
    parser.add_argument("--table", action="store_true",
                        help="Census table over all sizes")
    parser.add_argument("--json", action="store_true",
                        help="Census summaries as JSON")
    return parser


def options_from_args(args):
    """Turn parsed arguments into SurveyOptions.

    Malformed size tokens are reported and skipped.
    """
    opts = SurveyOptions(
        unique=DEFAULT_OPTIONS.unique if args.unique is None else args.unique,
        ascii=DEFAULT_OPTIONS.ascii if args.ascii is None else args.ascii,
        imprint=args.imprint,
        summary=DEFAULT_OPTIONS.summary or args.summary,
        verbose=args.verbose,
        table=args.table,
        json=args.json,
    )
    for arg in args.sizes:
        try:
            opts.ranges.extend(parse_ranges(arg))
        except ValueError:
            print("Argument error! Need matrix size: {}".format(arg),
                  file=sys.stderr)
    return opts


class SurveyRunner:
    """Run the registry for every requested order, one at a time."""

    def __init__(self, options=None):
        self.options = options or DEFAULT_OPTIONS
        self.censuses = []

    def run(self):
        opts = self.options
        for m in expand_ranges(opts.ranges):
            registry = OrbitRegistry(m)
            census = registry.generate(unique=opts.unique, verbose=opts.verbose)
            self.censuses.append(census)

            if opts.ascii:
                print(render_census(census))
            if opts.imprint:
                print(imprint_report(census)['text'])
            if opts.summary:
                print(census_summary(census))

        if opts.table:
            print(census_table(self.censuses))
        if opts.json:
            print(json.dumps([c.summary() for c in self.censuses], indent=2))
        return self.censuses


# --- Entry point ---

def main(argv=None):
    args = build_parser().parse_args(argv)
    opts = options_from_args(args)

    if not opts.ranges:
        print(USAGE)
        return 1

    t1 = time.time()
    try:
        SurveyRunner(opts).run()
    except ValueError as e:
        print("ERROR: {}".format(e), file=sys.stderr)
        print(USAGE)
        return 2
    t2 = time.time()
    print("Elapsed (milli-second): {}".format(int((t2 - t1) * 1000)))
    return 0


if __name__ == "__main__":
    sys.exit(main())
