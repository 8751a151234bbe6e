"""Positional decoding of share values written in radix 2..36"""

import string

from .bigint import ZERO, BigInt
from .errors import InvalidArgument, InvalidDigit

MIN_BASE = 2
MAX_BASE = 36
DIGITS = string.digits + string.ascii_lowercase


def digit_value(char: str) -> int:
    """Map '0'-'9' to 0-9 and letters (either case) to 10-35; -1 otherwise"""
    if "0" <= char <= "9":
        return ord(char) - ord("0")
    if "a" <= char <= "z":
        return 10 + ord(char) - ord("a")
    if "A" <= char <= "Z":
        return 10 + ord(char) - ord("A")
    return -1


def check_base(base) -> int:
    if isinstance(base, bool) or not isinstance(base, int):
        raise InvalidArgument(f"Base must be an integer, got {base!r}")
    if not MIN_BASE <= base <= MAX_BASE:
        raise InvalidArgument(f"Base must be between {MIN_BASE} and {MAX_BASE}, got {base}")
    return base


def decode(digits: str, base: int, strict: bool = False) -> BigInt:
    """Evaluate ``digits`` left to right as ``acc = acc * base + digit``.

    In the default permissive mode any character that is not a digit of
    ``base`` is skipped, so an empty or all-noise string decodes to zero.
    With ``strict=True`` the first such character raises InvalidDigit.
    """
    check_base(base)
    value = ZERO
    for position, char in enumerate(digits):
        digit = digit_value(char)
        if digit < 0 or digit >= base:
            if strict:
                raise InvalidDigit(char, position, base)
            continue
        value = value.multiply_small(base).add(BigInt.from_int(digit))
    return value


def encode(value, base: int) -> str:
    """Render an integer in ``base`` using lowercase digits"""
    check_base(base)
    number = int(value)
    if number == 0:
        return "0"
    prefix = "-" if number < 0 else ""
    number = abs(number)
    out = []
    while number:
        number, digit = divmod(number, base)
        out.append(DIGITS[digit])
    return prefix + "".join(reversed(out))
