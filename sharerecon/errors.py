"""Exceptions raised while decoding shares and reconstructing secrets"""


class ShareRecoveryError(Exception):
    """Base class for every reconstruction failure"""


class InvalidArgument(ShareRecoveryError, ValueError):
    """A caller passed a value the arithmetic cannot accept"""


class InvalidDigit(InvalidArgument):
    def __init__(self, char: str, position: int, base: int):
        self.char = char
        self.position = position
        self.base = base
        super().__init__(
            f"Invalid digit {char!r} at position {position} for base {base}"
        )


class InsufficientShares(ShareRecoveryError, ValueError):
    def __init__(self, required: int, supplied: int):
        self.required = required
        self.supplied = supplied
        super().__init__(f"Not enough shares. Need {required}, got {supplied}")


class DegenerateShareSet(ShareRecoveryError):
    def __init__(self, x: int):
        self.x = x
        super().__init__(f"Duplicate share index x={x} makes a Lagrange denominator zero")


class ArithmeticInconsistency(ShareRecoveryError, ArithmeticError):
    """Exact division left a remainder: the shares are not on one integer polynomial"""


class InconsistentShares(ShareRecoveryError):
    def __init__(self, xs):
        self.xs = list(xs)
        listed = ", ".join(str(x) for x in self.xs)
        super().__init__(f"Shares at x={listed} do not lie on the reconstructed polynomial")


class MalformedShareDocument(ShareRecoveryError, ValueError):
    """The share document could not be turned into a ShareSet"""
