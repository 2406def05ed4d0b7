import math

import pytest

from contestkit.bigint import BigInt, gcd, lcm

LARGE = [
    0,
    1,
    -1,
    999_999_999,
    1_000_000_000,
    -1_000_000_000_000_000_001,
    123_456_789_012_345_678_901_234_567_890,
    -98_765_432_109_876_543_210,
]


@pytest.mark.parametrize("value", LARGE)
def test_string_round_trip(value):
    assert str(BigInt(str(value))) == str(value)
    assert int(BigInt(value)) == value


def test_parse_leading_zeros_and_signs():
    assert str(BigInt("-000123")) == "-123"
    assert BigInt("--5") == 5
    assert BigInt("+-7") == -7
    assert BigInt("-0").is_zero()


def test_parse_rejects_garbage():
    with pytest.raises(ValueError):
        BigInt("12a3")


def test_constructor_rejects_float():
    with pytest.raises(TypeError):
        BigInt(1.5)


@pytest.mark.parametrize("a", LARGE)
@pytest.mark.parametrize("b", [3, -7, 1_000_000_000, -123_456_789_123_456_789])
def test_arithmetic_matches_int(a, b):
    x, y = BigInt(a), BigInt(b)
    assert int(x + y) == a + b
    assert int(x - y) == a - b
    assert int(x * y) == a * b
    assert x * b == a * b


@pytest.mark.parametrize("a", LARGE)
@pytest.mark.parametrize("b", [2, -2, 7, -1_000_000_007, 10**30 + 3])
def test_divmod_truncates(a, b):
    q, r = divmod(BigInt(a), BigInt(b))
    assert q * b + r == a
    assert abs(r) < abs(BigInt(b))
    assert r.is_zero() or (r < 0) == (a < 0)
    assert BigInt(a) // b == q
    assert BigInt(a) % b == r


def test_division_by_zero():
    with pytest.raises(ZeroDivisionError):
        BigInt(5) // BigInt(0)
    with pytest.raises(ZeroDivisionError):
        BigInt(5) % 0


def test_product_from_demo():
    result = BigInt(99999999) * 1000200000003000
    assert int(result) == 99999999 * 1000200000003000
    assert result // 1000200000003000 == 99999999


def test_power():
    assert (BigInt(3) ^ BigInt(40)) == 3**40
    assert (BigInt(-2) ^ 61) == (-2) ** 61
    assert (BigInt(5) ^ 0) == 1
    assert (BigInt(7) ^ -3) == (BigInt(7) ^ 3)


def test_digit_count_and_sum():
    assert BigInt(0).digit_count() == 0
    assert BigInt(10**20).digit_count() == len(str(10**20))
    assert BigInt(-(10**20)).digit_count() == BigInt(10**20).digit_count()
    ones = "1" * 37
    assert BigInt(ones).digit_sum() == len(ones)


def test_negation_and_abs():
    value = BigInt(-12345678901234567890)
    assert -value == 12345678901234567890
    assert abs(value) == -value
    assert abs(-value) == abs(value)


def test_ordering_and_hash():
    values = [BigInt(v) for v in LARGE]
    assert [int(v) for v in sorted(values)] == sorted(LARGE)
    assert BigInt(10) > BigInt(-10)
    assert BigInt(10) <= 10
    assert len({BigInt(3), BigInt("3"), BigInt(4)}) == 2
    assert hash(BigInt(42)) == hash(42)


@pytest.mark.parametrize("a,b", [(12, 18), (10**20, 10**15 * 6), (17, 5), (0, 9)])
def test_gcd_lcm_positive(a, b):
    assert gcd(a, b) == math.gcd(a, b)
    if a and b:
        assert lcm(a, b) * gcd(a, b) == a * b


def test_gcd_negative_divides_both():
    g = gcd(BigInt(-4), BigInt(6))
    assert abs(g) == math.gcd(4, 6)
    assert BigInt(-4) % g == 0 and BigInt(6) % g == 0