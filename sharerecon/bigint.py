"""Immutable arbitrary-precision signed integers on base 10**9 limbs.

Only the operations Lagrange reconstruction needs are provided: signed
addition and subtraction, multiplication and exact division by a scalar,
comparison and decimal rendering.
"""

from functools import total_ordering

from .errors import InvalidArgument

LIMB_BASE = 10 ** 9
LIMB_DIGITS = 9


def _trim(limbs: list) -> tuple:
    while limbs and limbs[-1] == 0:
        limbs.pop()
    return tuple(limbs)


def _compare_abs(a: tuple, b: tuple) -> int:
    if len(a) != len(b):
        return -1 if len(a) < len(b) else 1
    for i in range(len(a) - 1, -1, -1):
        if a[i] != b[i]:
            return -1 if a[i] < b[i] else 1
    return 0


def _add_abs(a: tuple, b: tuple) -> tuple:
    result = []
    carry = 0
    for i in range(max(len(a), len(b))):
        cur = carry
        if i < len(a):
            cur += a[i]
        if i < len(b):
            cur += b[i]
        carry = 1 if cur >= LIMB_BASE else 0
        result.append(cur - LIMB_BASE if carry else cur)
    if carry:
        result.append(carry)
    return _trim(result)


def _sub_abs(a: tuple, b: tuple) -> tuple:
    # requires |a| >= |b|
    result = list(a)
    borrow = 0
    i = 0
    while i < len(b) or borrow:
        cur = result[i] - (b[i] if i < len(b) else 0) - borrow
        borrow = 1 if cur < 0 else 0
        result[i] = cur + LIMB_BASE if borrow else cur
        i += 1
    return _trim(result)


@total_ordering
class BigInt:
    """Signed integer stored as (sign, little-endian limbs)"""

    __slots__ = ("_sign", "_limbs")

    def __init__(self, sign: int = 0, limbs: tuple = ()):
        limbs = _trim(list(limbs))
        if any(not 0 <= limb < LIMB_BASE for limb in limbs):
            raise InvalidArgument(f"Limbs must lie in [0, {LIMB_BASE})")
        if not limbs:
            sign = 0
        elif sign not in (-1, 1):
            raise InvalidArgument("A non-zero magnitude needs sign -1 or +1")
        self._sign = sign
        self._limbs = limbs

    @classmethod
    def from_int(cls, value: int) -> "BigInt":
        """Build a BigInt equal to a native integer"""
        if isinstance(value, BigInt):
            return value
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidArgument(f"Expected an integer, got {type(value).__name__}")
        if value == 0:
            return ZERO
        sign = -1 if value < 0 else 1
        magnitude = -value if value < 0 else value
        limbs = []
        while magnitude:
            magnitude, limb = divmod(magnitude, LIMB_BASE)
            limbs.append(limb)
        return cls(sign, tuple(limbs))

    @property
    def sign(self) -> int:
        return self._sign

    @property
    def limbs(self) -> tuple:
        return self._limbs

    def is_zero(self) -> bool:
        return self._sign == 0

    @staticmethod
    def compare_magnitude(a: "BigInt", b: "BigInt") -> int:
        """Return -1, 0 or 1 comparing |a| with |b|"""
        return _compare_abs(a._limbs, b._limbs)

    def negate(self) -> "BigInt":
        if self.is_zero():
            return self
        return BigInt(-self._sign, self._limbs)

    def add(self, other: "BigInt") -> "BigInt":
        if self.is_zero():
            return other
        if other.is_zero():
            return self
        if self._sign == other._sign:
            return BigInt(self._sign, _add_abs(self._limbs, other._limbs))
        cmp = _compare_abs(self._limbs, other._limbs)
        if cmp == 0:
            return ZERO
        if cmp > 0:
            return BigInt(self._sign, _sub_abs(self._limbs, other._limbs))
        return BigInt(other._sign, _sub_abs(other._limbs, self._limbs))

    def subtract(self, other: "BigInt") -> "BigInt":
        return self.add(other.negate())

    def multiply_small(self, m: int) -> "BigInt":
        """Multiply by a native integer scalar with carry propagation"""
        if isinstance(m, bool) or not isinstance(m, int):
            raise InvalidArgument(f"Scalar multiplier must be an integer, got {type(m).__name__}")
        if m == 0 or self.is_zero():
            return ZERO
        sign = -self._sign if m < 0 else self._sign
        factor = -m if m < 0 else m
        limbs = []
        carry = 0
        for limb in self._limbs:
            carry, low = divmod(limb * factor + carry, LIMB_BASE)
            limbs.append(low)
        while carry:
            carry, low = divmod(carry, LIMB_BASE)
            limbs.append(low)
        return BigInt(sign, tuple(limbs))

    def divmod_small(self, d: int) -> tuple:
        """Long division by a positive scalar.

        Returns ``(quotient, remainder)`` where the quotient is truncated
        toward zero and keeps this value's sign, and the remainder is the
        non-negative remainder of the magnitude. Callers that expect an exact
        result must check the remainder themselves.
        """
        if isinstance(d, bool) or not isinstance(d, int):
            raise InvalidArgument(f"Divisor must be an integer, got {type(d).__name__}")
        if d <= 0:
            raise InvalidArgument(f"Divisor must be positive, got {d}")
        if self.is_zero():
            return ZERO, 0
        quotient = [0] * len(self._limbs)
        remainder = 0
        for i in range(len(self._limbs) - 1, -1, -1):
            cur = self._limbs[i] + remainder * LIMB_BASE
            quotient[i], remainder = divmod(cur, d)
        return BigInt(self._sign, tuple(quotient)), remainder

    def to_decimal_string(self) -> str:
        if self.is_zero():
            return "0"
        top = len(self._limbs) - 1
        parts = ["-" if self._sign < 0 else "", str(self._limbs[top])]
        for i in range(top - 1, -1, -1):
            parts.append(str(self._limbs[i]).zfill(LIMB_DIGITS))
        return "".join(parts)

    # Operator protocol; native ints are promoted on the fly.

    @staticmethod
    def _coerce(value):
        if isinstance(value, BigInt):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            return BigInt.from_int(value)
        return NotImplemented

    def __add__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        return self.add(other)

    __radd__ = __add__

    def __sub__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        return self.subtract(other)

    def __rsub__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        return other.subtract(self)

    def __mul__(self, other):
        if isinstance(other, int) and not isinstance(other, bool):
            return self.multiply_small(other)
        return NotImplemented

    __rmul__ = __mul__

    def __neg__(self):
        return self.negate()

    def __abs__(self):
        return self.negate() if self._sign < 0 else self

    def __bool__(self):
        return not self.is_zero()

    def __int__(self):
        value = 0
        for limb in reversed(self._limbs):
            value = value * LIMB_BASE + limb
        return -value if self._sign < 0 else value

    def __eq__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        return self._sign == other._sign and self._limbs == other._limbs

    def __lt__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        if self._sign != other._sign:
            return self._sign < other._sign
        cmp = _compare_abs(self._limbs, other._limbs)
        return cmp > 0 if self._sign < 0 else cmp < 0

    def __hash__(self):
        return hash(int(self))

    def __str__(self):
        return self.to_decimal_string()

    def __repr__(self):
        return f"BigInt({self.to_decimal_string()!r})"


ZERO = BigInt()
ONE = BigInt(1, (1,))
