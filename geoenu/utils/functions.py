"""Module for miscellaneous multi-use functions"""

__all__ = ['is_finite', 'round_half_up']

import math
from typing import Iterable


def round_half_up(value: float, precision) -> float:
    """
    Rounds numbers to the nearest whole, where a value exactly between the two nearest
    wholes is rounded to the higher whole.

    Args:
        value:
            The float value to be rounded
        precision:
            The precision to round the float value to

    """
    mod = value + 10 ** -(precision + 12)

    return round(mod, precision)


def is_finite(values: Iterable[float]) -> bool:
    """
    Test whether every value is a finite float (i.e. neither NaN nor +/- infinity).

    Args:
        values: (Iterable[float])
            The values to test

    Returns:
        bool
    """
    return all(math.isfinite(x) for x in values)
