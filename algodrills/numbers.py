"""Small puzzles over integers and their digit strings."""

from functools import reduce
from itertools import count, zip_longest
from operator import xor

_ROMAN_TABLE = (
    (1000, "M"),
    (900, "CM"),
    (500, "D"),
    (400, "CD"),
    (100, "C"),
    (90, "XC"),
    (50, "L"),
    (40, "XL"),
    (10, "X"),
    (9, "IX"),
    (5, "V"),
    (4, "IV"),
    (1, "I"),
)

_INT32_MASK = 0xFFFFFFFF


def reverse_digits(n):
    """Return ``n`` with its decimal digits reversed; non-positive values give 0."""
    if n <= 0:
        return 0
    return int(str(n)[::-1])


def is_same_after_reversals(num):
    """Tell whether reversing the digits of ``num`` twice gives ``num`` back."""
    return reverse_digits(reverse_digits(num)) == num


def add_binary(a, b):
    """Add two binary numbers given as strings and return their sum as a string."""
    if set(a + b) - {"0", "1"}:
        raise ValueError("binary strings may hold only '0' and '1'")
    bits = []
    carry = 0
    for x, y in zip_longest(reversed(a), reversed(b), fillvalue="0"):
        total = carry + int(x) + int(y)
        bits.append(str(total % 2))
        carry = total // 2
    if carry:
        bits.append("1")
    return "".join(reversed(bits))


def convert_to_base7(num):
    """Return the base-7 representation of ``num``."""
    if num == 0:
        return "0"
    remaining = abs(num)
    digits = []
    while remaining:
        remaining, digit = divmod(remaining, 7)
        digits.append(str(digit))
    sign = "-" if num < 0 else ""
    return sign + "".join(reversed(digits))


def _has_zero(n):
    return n > 0 and "0" in str(n)


def _truncating_div(n, divisor):
    quotient = abs(n) // divisor
    return quotient if n >= 0 else -quotient


def get_no_zero_integers(n):
    """Split ``n`` into two integers whose decimal forms contain no zero."""
    for divisor in count(2):
        first = _truncating_div(n, divisor)
        second = n - first
        if not _has_zero(first) and not _has_zero(second):
            return [first, second]


def hamming_distance(x, y):
    """Count the differing bits of two 32-bit integers."""
    return bin((x ^ y) & _INT32_MASK).count("1")


def _digit_square_sum(n):
    if n <= 0:
        return 0
    return sum(int(digit) ** 2 for digit in str(n))


def is_happy(n):
    """Tell whether repeatedly summing squared digits of ``n`` reaches 1."""
    seen = set()
    while True:
        seen.add(n)
        n = _digit_square_sum(n)
        if n == 1:
            return True
        if n in seen:
            return False


def int_to_roman(num):
    """Write a positive integer as a Roman numeral."""
    parts = []
    for value, symbol in _ROMAN_TABLE:
        if num <= 0:
            break
        times, num = divmod(num, value)
        parts.append(symbol * times)
    return "".join(parts)


def maximum_69_number(num):
    """Turn the first 6 of ``num`` into a 9, giving the largest reachable value."""
    if num <= 0:
        return num
    return int(str(num).replace("6", "9", 1))


def get_maximum_xor(nums, maximum_bit):
    """For each prefix, longest first, find the k below 2**maximum_bit maximising the XOR."""
    mask = (1 << maximum_bit) - 1
    accumulated = reduce(xor, nums, 0)
    answers = []
    for value in reversed(nums):
        answers.append(~accumulated & mask)
        accumulated ^= value
    return answers


def get_maximum_generated(n):
    """Return the largest value of the generated array of length ``n + 1``."""
    if n < 0:
        raise ValueError("n must not be negative")
    if n == 0:
        return 0
    generated = [0] * (n + 1)
    generated[1] = 1
    for i in range(1, n // 2 + 1):
        generated[2 * i] = generated[i]
        if 2 * i + 1 <= n:
            generated[2 * i + 1] = generated[i] + generated[i + 1]
    return max(generated)


def climb_stairs(n):
    """Count the ways to climb ``n`` steps taking one or two at a time."""
    if n < 0:
        raise ValueError("n must not be negative")
    current, following = 1, 1
    for _ in range(n):
        current, following = following, current + following
    return current