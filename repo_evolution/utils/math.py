"""Shared math utilities."""

import math


def round_half_up(value):
    """Round to the nearest integer, halves away from zero for non-negative input.

    Python's built-in round() uses banker's rounding (round(2.5) == 2), which
    would shrink trend windows whose size lands exactly on a half.
    """
    return int(math.floor(value + 0.5))
