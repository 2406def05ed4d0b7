"""Arbitrary-precision signed integers with truncating division."""

from __future__ import annotations

from functools import total_ordering
from typing import Union

Number = Union["BigInt", int]


def _parse(text: str) -> int:
    """Parse optional leading signs followed by decimal digits."""
    text = text.strip()
    sign = 1
    body = text.lstrip("+-")
    for char in text[: len(text) - len(body)]:
        if char == "-":
            sign = -sign
    if not body:
        return 0
    if not body.isdigit() or not body.isascii():
        raise ValueError(f"invalid integer literal: {text!r}")
    return sign * int(body)


def _trunc_divmod(a: int, b: int) -> tuple[int, int]:
    """Divide rounding toward zero; the remainder takes the dividend's sign."""
    if b == 0:
        raise ZeroDivisionError("division by zero")
    quotient = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        quotient = -quotient
    return quotient, a - quotient * b


def _as_int(value: object) -> int | None:
    if isinstance(value, BigInt):
        return value._value
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    return None


@total_ordering
class BigInt:
    """A signed integer of unlimited size.

    Division and remainder truncate toward zero, and ``^`` raises to a power.
    """

    __slots__ = ("_value",)

    def __init__(self, value: Number | str = 0) -> None:
        if isinstance(value, str):
            self._value = _parse(value)
            return
        number = _as_int(value)
        if number is None:
            raise TypeError(f"cannot build BigInt from {type(value).__name__}")
        self._value = number

    def digit_count(self) -> int:
        """Number of decimal digits in the magnitude; zero has none."""
        return 0 if self._value == 0 else len(str(abs(self._value)))

    def digit_sum(self) -> int:
        """Sum of the decimal digits of the magnitude."""
        return sum(int(char) for char in str(abs(self._value)))

    def is_zero(self) -> bool:
        return self._value == 0

    def __bool__(self) -> bool:
        return self._value != 0

    def __int__(self) -> int:
        return self._value

    def __index__(self) -> int:
        return self._value

    def __str__(self) -> str:
        return str(self._value)

    def __repr__(self) -> str:
        return f"BigInt('{self._value}')"

    def __add__(self, other: object) -> BigInt:
        number = _as_int(other)
        if number is None:
            return NotImplemented
        return BigInt(self._value + number)

    __radd__ = __add__

    def __sub__(self, other: object) -> BigInt:
        number = _as_int(other)
        if number is None:
            return NotImplemented
        return BigInt(self._value - number)

    def __rsub__(self, other: object) -> BigInt:
        number = _as_int(other)
        if number is None:
            return NotImplemented
        return BigInt(number - self._value)

    def __mul__(self, other: object) -> BigInt:
        number = _as_int(other)
        if number is None:
            return NotImplemented
        return BigInt(self._value * number)

    __rmul__ = __mul__

    def __divmod__(self, other: object) -> tuple[BigInt, BigInt]:
        number = _as_int(other)
        if number is None:
            return NotImplemented
        quotient, remainder = _trunc_divmod(self._value, number)
        return BigInt(quotient), BigInt(remainder)

    def __rdivmod__(self, other: object) -> tuple[BigInt, BigInt]:
        number = _as_int(other)
        if number is None:
            return NotImplemented
        quotient, remainder = _trunc_divmod(number, self._value)
        return BigInt(quotient), BigInt(remainder)

    def __floordiv__(self, other: object) -> BigInt:
        result = self.__divmod__(other)
        if result is NotImplemented:
            return NotImplemented
        return result[0]

    def __rfloordiv__(self, other: object) -> BigInt:
        result = self.__rdivmod__(other)
        if result is NotImplemented:
            return NotImplemented
        return result[0]

    def __mod__(self, other: object) -> BigInt:
        result = self.__divmod__(other)
        if result is NotImplemented:
            return NotImplemented
        return result[1]

    def __rmod__(self, other: object) -> BigInt:
        result = self.__rdivmod__(other)
        if result is NotImplemented:
            return NotImplemented
        return result[1]

    def __xor__(self, other: object) -> BigInt:
        """Raise to a power; the sign of the exponent is ignored."""
        exponent = _as_int(other)
        if exponent is None:
            return NotImplemented
        return BigInt(self._value ** abs(exponent))

    def __neg__(self) -> BigInt:
        return BigInt(-self._value)

    def __abs__(self) -> BigInt:
        return BigInt(abs(self._value))

    def __eq__(self, other: object) -> bool:
        number = _as_int(other)
        if number is None:
            return NotImplemented
        return self._value == number

    def __lt__(self, other: object) -> bool:
        number = _as_int(other)
        if number is None:
            return NotImplemented
        return self._value < number

    def __hash__(self) -> int:
        return hash(self._value)


def gcd(a: Number, b: Number) -> BigInt:
    """Euclid's algorithm with truncating remainders; the sign may be negative."""
    a, b = BigInt(a), BigInt(b)
    while not b.is_zero():
        a, b = b, a % b
    return a


def lcm(a: Number, b: Number) -> BigInt:
    """Least common multiple as ``a // gcd(a, b) * b``."""
    a, b = BigInt(a), BigInt(b)
    return a // gcd(a, b) * b