"""Integer and digit puzzles: bit counting, powers, roots and numerals."""

from __future__ import annotations

from functools import reduce
from operator import xor
from typing import Iterable

_WORD_BITS = 32
_WORD_MASK = (1 << _WORD_BITS) - 1

_ROMAN_VALUES = {
    "I": 1,
    "V": 5,
    "X": 10,
    "L": 50,
    "C": 100,
    "D": 500,
    "M": 1000,
}

_ROMAN_SUBTRACTIVE = {
    "IV": 4,
    "IX": 9,
    "XL": 40,
    "XC": 90,
    "CD": 400,
    "CM": 900,
}


def hamming_weight(n: int) -> int:
    """Count the set bits of n taken as a 32-bit two's-complement word."""
    return bin(n & _WORD_MASK).count("1")


def is_palindrome_number(x: int) -> bool:
    """Tell whether the decimal digits of x read the same both ways."""
    if x < 0:
        return False
    digits = str(x)
    return digits == digits[::-1]


def reverse_bits(n: int) -> int:
    """Reverse the order of the bits of n taken as a 32-bit unsigned word."""
    return int(f"{n & _WORD_MASK:0{_WORD_BITS}b}"[::-1], 2)


def single_number(nums: Iterable[int]) -> int:
    """Return the value that appears once when every other appears twice."""
    return reduce(xor, nums, 0)


def single_number_ii(nums: Iterable[int]) -> int:
    """Return the value that appears once when every other appears three times."""
    ones = twos = 0
    for value in nums:
        twos |= value & ones
        ones ^= value
        common = ~(ones & twos)
        ones &= common
        twos &= common
    return ones


def my_pow(x: float, n: int) -> float:
    """Raise x to the integer power n by repeated squaring."""
    exponent = n
    if exponent < 0:
        if x == 0:
            raise ZeroDivisionError("zero cannot be raised to a negative power")
        x = 1.0 / x
        exponent = -exponent
    result = 1.0
    while exponent > 0:
        if exponent % 2 == 1:
            result *= x
        x *= x
        exponent //= 2
    return result


def my_sqrt(x: int) -> int:
    """Return the integer part of the square root of x, using Newton's method."""
    if x < 0:
        raise ValueError(f"cannot take the square root of a negative number: {x}")
    if x == 0:
        return 0
    if x < 4:
        return 1
    estimate = x
    while True:
        improved = (estimate + x // estimate) // 2
        if improved >= estimate:
            return estimate
        estimate = improved


def plus_one(digits: Iterable[int]) -> list[int]:
    """Add one to a number given as its decimal digits, most significant first."""
    result: list[int] = []
    carry = 1
    for digit in reversed(list(digits)):
        carry, digit = divmod(digit + carry, 10)
        result.append(digit)
    if carry:
        result.append(carry)
    result.reverse()
    return result


def roman_to_int(s: str) -> int:
    """Convert a Roman numeral to an integer."""
    number = 0
    index = 0
    while index < len(s):
        pair = s[index : index + 2]
        if pair in _ROMAN_SUBTRACTIVE:
            number += _ROMAN_SUBTRACTIVE[pair]
            index += 2
            continue
        symbol = s[index]
        try:
            number += _ROMAN_VALUES[symbol]
        except KeyError:
            raise ValueError(f"not a Roman numeral symbol: {symbol!r}") from None
        index += 1
    return number