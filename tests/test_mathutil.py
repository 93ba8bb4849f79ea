import pytest

from aocsolutions.mathutil import gcd, lcm

PAIRS = [(12, 18), (7, 13), (100, 75), (1, 1), (21, 6), (17, 17)]


@pytest.mark.parametrize("a, b", PAIRS)
def test_gcd_divides_both(a, b):
    g = gcd(a, b)
    assert a % g == 0
    assert b % g == 0


@pytest.mark.parametrize("a, b", PAIRS)
def test_lcm_is_multiple_of_both(a, b):
    m = lcm(a, b)
    assert m % a == 0
    assert m % b == 0


@pytest.mark.parametrize("a, b", PAIRS)
def test_gcd_times_lcm_is_product(a, b):
    assert gcd(a, b) * lcm(a, b) == a * b


def test_gcd_with_zero():
    assert gcd(9, 0) == 9
    assert gcd(0, 9) == 9


def test_lcm_of_zeros_raises():
    with pytest.raises(ZeroDivisionError):
        lcm(0, 0)