"""Lagrange interpolation of share points over the integers.

Each basis term ``y_i * prod(at - x_j) / prod(x_i - x_j)`` is a rational
number. Individual terms need not be integral, only their sum is, so the
terms are brought onto the least common multiple of their denominators and
divided exactly once at the end.
"""

import math
from dataclasses import dataclass
from typing import Iterable, List, NamedTuple, Sequence

from .bigint import ZERO, BigInt
from .errors import (
    ArithmeticInconsistency,
    DegenerateShareSet,
    InconsistentShares,
    InsufficientShares,
    InvalidArgument,
)


@dataclass(frozen=True)
class Point:
    """One share: index ``x`` and decoded value ``y``."""

    x: int
    y: BigInt

    def __post_init__(self):
        if isinstance(self.x, bool) or not isinstance(self.x, int):
            raise InvalidArgument(f"Share index must be an integer, got {self.x!r}")
        object.__setattr__(self, "y", BigInt.from_int(self.y))


class InterpolationTerm(NamedTuple):
    numerator: BigInt
    denominator: int


def _check_distinct(points: Sequence[Point]) -> None:
    seen = set()
    for point in points:
        if point.x in seen:
            raise DegenerateShareSet(point.x)
        seen.add(point.x)


def lagrange_terms(points: Sequence[Point], at: int = 0) -> List[InterpolationTerm]:
    """Basis terms of the interpolating polynomial evaluated at ``at``"""
    _check_distinct(points)
    terms = []
    for i, point in enumerate(points):
        numerator, denominator = 1, 1
        for j, other in enumerate(points):
            if j == i:
                continue
            numerator *= at - other.x
            denominator *= point.x - other.x
        terms.append(InterpolationTerm(point.y.multiply_small(numerator), denominator))
    return terms


def sum_terms(terms: Iterable[InterpolationTerm]) -> BigInt:
    """Add rational terms and divide exactly by their common denominator"""
    terms = list(terms)
    if not terms:
        return ZERO
    common = math.lcm(*(abs(term.denominator) for term in terms))
    total = ZERO
    for term in terms:
        scale = common // abs(term.denominator)
        if term.denominator < 0:
            scale = -scale
        total = total.add(term.numerator.multiply_small(scale))
    secret, remainder = total.divmod_small(common)
    if remainder:
        raise ArithmeticInconsistency(
            f"Lagrange sum {total} is not divisible by {common} (remainder {remainder}); "
            "the shares do not lie on an integer polynomial"
        )
    return secret


def interpolate_at(points: Sequence[Point], at: int) -> BigInt:
    """Value at ``at`` of the unique polynomial through ``points``"""
    return sum_terms(lagrange_terms(points, at))


def reconstruct(points: Iterable[Point], k: int, cross_check: bool = False) -> BigInt:
    """Recover the constant term from the k lowest-indexed shares.

    With ``cross_check`` every share beyond the first k must also lie on the
    recovered polynomial; the x-values that do not are reported through
    InconsistentShares.
    """
    if isinstance(k, bool) or not isinstance(k, int) or k < 1:
        raise InvalidArgument(f"Required share count must be a positive integer, got {k!r}")
    points = list(points)
    if len(points) < k:
        raise InsufficientShares(k, len(points))

    ordered = sorted(points, key=lambda p: p.x)
    selected = ordered[:k]
    secret = interpolate_at(selected, 0)

    if cross_check:
        mismatched = [extra.x for extra in ordered[k:] if not _lies_on(selected, extra)]
        if mismatched:
            raise InconsistentShares(mismatched)
    return secret


def _lies_on(selected: Sequence[Point], point: Point) -> bool:
    try:
        return interpolate_at(selected, point.x) == point.y
    except ArithmeticInconsistency:
        # polynomial is not integral at this x, so no integer share fits
        return False
