"""
Conditions and loops exercises.

Small pure functions over numbers and strings. None of them keep state
or touch I/O; inputs are never mutated.
"""

from __future__ import annotations

from collections import Counter
from typing import List, Optional, Sequence, Union

_BRACKET_PAIRS = {")": "(", "]": "[", "}": "{", ">": "<"}
_OPENING = frozenset(_BRACKET_PAIRS.values())


def get_fizz_buzz(num: int) -> Union[int, str]:
    """
    Return 'Fizz' for multiples of 3, 'Buzz' for multiples of 5,
    'FizzBuzz' for multiples of both and the number itself otherwise.
    """
    if num % 15 == 0:
        return "FizzBuzz"
    if num % 3 == 0:
        return "Fizz"
    if num % 5 == 0:
        return "Buzz"
    return num


def get_factorial(n: int) -> int:
    if n < 0:
        raise ValueError(f"Factorial is undefined for negative numbers: {n}")
    result = 1
    for i in range(2, n + 1):
        result *= i
    return result


def get_sum_between_numbers(n1: int, n2: int) -> int:
    """Sum of the integers from n1 to n2 inclusive (0 when n1 > n2)."""
    return sum(range(n1, n2 + 1))


def find_first_single_char(s: str) -> Optional[str]:
    """
    Return the first character that occurs exactly once, or None.

    Examples:
        'The quick brown fox jumps over the lazy dog' => 'T'
        'abracadabra' => 'c'
        'entente' => None
    """
    counts = Counter(s)
    for char in s:
        if counts[char] == 1:
            return char
    return None


def get_interval_string(a, b, is_start_included: bool, is_end_included: bool) -> str:
    """
    Mathematical interval notation, smaller number first.

    Examples:
        0, 1, True, False => '[0, 1)'
        5, 3, True, True  => '[3, 5]'
    """
    low, high = sorted((a, b))
    opening = "[" if is_start_included else "("
    closing = "]" if is_end_included else ")"
    return f"{opening}{low}, {high}{closing}"


def reverse_string(s: str) -> str:
    return s[::-1]


def reverse_integer(num: int) -> int:
    """Reverse the digits of an integer, keeping its sign."""
    reversed_digits = int(str(abs(num))[::-1])
    return -reversed_digits if num < 0 else reversed_digits


def is_credit_card_number(ccn: Union[int, str]) -> bool:
    """
    Validate a card number with the Luhn checksum.

    Examples:
        79927398713      => True
        4012888888881881 => True
        4571234567890111 => False
    """
    digits = str(ccn)
    if not digits.isdigit():
        raise ValueError(f"Card number must contain digits only: {ccn!r}")

    total = 0
    for position, char in enumerate(reversed(digits)):
        digit = int(char)
        if position % 2 == 1:
            digit *= 2
            if digit > 9:
                digit -= 9
        total += digit
    return total % 10 == 0


def _digit_sum(num: int) -> int:
    return sum(int(char) for char in str(abs(num)))


def get_digital_root(num: int) -> int:
    """
    Sum the digits repeatedly until a single digit remains.

    Example:
        165536 (1+6+5+5+3+6 = 26, 2+6 = 8) => 8
    """
    num = abs(num)
    while num > 9:
        num = _digit_sum(num)
    return num


def is_brackets_balanced(s: str) -> bool:
    """
    True when every bracket of [], (), {}, <> is closed in nesting order.

    Characters that are not brackets are ignored.

    Examples:
        ''             => True
        '[[]'          => False
        ']['           => False
        '{[(<{[]}>)]}' => True
    """
    stack: List[str] = []
    for char in s:
        if char in _OPENING:
            stack.append(char)
        elif char in _BRACKET_PAIRS:
            if not stack or stack.pop() != _BRACKET_PAIRS[char]:
                return False
    return not stack


def to_nary_string(num: int, n: int) -> str:
    """
    Representation of a non-negative integer in radix n (2 <= n <= 10).

    Examples:
        1024, 2 => '10000000000'
        365, 3  => '111112'
    """
    if not 2 <= n <= 10:
        raise ValueError(f"Radix must be between 2 and 10, got {n}")
    if num < 0:
        raise ValueError(f"Number must be non-negative, got {num}")
    if num == 0:
        return "0"

    digits = []
    while num:
        num, remainder = divmod(num, n)
        digits.append(str(remainder))
    return "".join(reversed(digits))


def get_common_directory_path(paths: Sequence[str]) -> str:
    """
    Common directory of the given file paths, with a trailing '/'.

    Comparison is per path component, so '/web' and '/web-scripts'
    only share '/'.

    Examples:
        ['/web/images/image1.png', '/web/images/image2.png'] => '/web/images/'
        ['/web/assets/style.css', '/web/scripts/app.js', 'home/setting.conf'] => ''
        ['/web/favicon.ico', '/web-scripts/dump', '/webalizer/logs'] => '/'
    """
    if not paths:
        return ""

    directories = [path.split("/")[:-1] for path in paths]
    common: List[str] = []
    for parts in zip(*directories):
        if any(part != parts[0] for part in parts):
            break
        common.append(parts[0])

    if not common:
        return ""
    return "/".join(common) + "/"
