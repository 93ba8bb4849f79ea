"""Integer helpers."""

import math


def gcd(a: int, b: int) -> int:
    """Greatest common divisor."""
    return math.gcd(a, b)


def lcm(a: int, b: int) -> int:
    """Lowest common multiple; raises ZeroDivisionError when both are zero."""
    return a // gcd(a, b) * b