"""
Survey configuration.
=====================

Default output options for the batch runner and the size-list parser.

Author: Carmen Esteban
"""

from dataclasses import dataclass, field
from typing import List, Tuple


@dataclass
class SurveyOptions:
    """What the runner computes and prints for each order."""
    unique: bool = True
    ascii: bool = True
    imprint: bool = False
    summary: bool = True
    verbose: bool = False
    table: bool = False
    json: bool = False
    ranges: List[Tuple[int, int]] = field(default_factory=list)


DEFAULT_OPTIONS = SurveyOptions()


def parse_ranges(arg):
    """Parse '6', '2,3,6', '4-7' or '2,4-7,9' into (low, high) pairs.

    Raises ValueError on a token that is not a number or a range.
    """
    ranges = []
    for token in arg.split(","):
        token = token.strip()
        if not token:
            continue
        if "-" in token:
            low, high = token.split("-", 1)
            ranges.append((int(low), int(high)))
        else:
            n = int(token)
            ranges.append((n, n))
    return ranges


def expand_ranges(ranges):
    """All orders covered by the ranges, in the order given."""
    orders = []
    for low, high in ranges:
        orders.extend(range(low, high + 1))
    return orders
