"""Share sets and the JSON share document loader.

A share document looks like::

    {
        "keys": {"n": 4, "k": 3},
        "1": {"base": "10", "value": "4"},
        "2": {"base": "2", "value": "111"}
    }

Every key other than ``keys`` is a share index mapped to its radix and digit
string. Malformed documents raise MalformedShareDocument before any
arithmetic runs.
"""

import json
import re
from typing import List, NamedTuple, Optional

import config
from .bigint import BigInt
from .errors import InvalidArgument, MalformedShareDocument
from .interpolation import Point, reconstruct
from .radix import check_base, decode


class RawShare(NamedTuple):
    """Undecoded share as it appears in a document"""

    x: int
    base: int
    digits: str

    def decode(self, strict: bool = False) -> Point:
        return Point(self.x, decode(self.digits, self.base, strict=strict))


class ShareSet:
    """Threshold, total count and decoded points of one sharing"""

    def __init__(self, required_count: int, total_count: int, points: List[Point]):
        if isinstance(required_count, bool) or not isinstance(required_count, int) or required_count < 1:
            raise InvalidArgument(f"Required share count must be >= 1, got {required_count!r}")
        self.required_count = required_count
        self.total_count = total_count
        self.points = list(points)

    @property
    def point_count(self) -> int:
        return len(self.points)

    def reconstruct(self, cross_check: Optional[bool] = None) -> BigInt:
        if cross_check is None:
            cross_check = config.Config.CROSS_CHECK_SHARES
        return reconstruct(self.points, self.required_count, cross_check=cross_check)

    def __repr__(self):
        return (f"ShareSet(k={self.required_count}, n={self.total_count}, "
                f"points={self.point_count})")


class _Pairs(list):
    """Object members in document order, duplicates included"""


def _keep_duplicates(pairs):
    # duplicate share indices must reach the interpolator, so keep every pair
    return _Pairs(pairs)


def _as_int(value, what: str) -> int:
    if isinstance(value, bool):
        raise MalformedShareDocument(f"{what} must be an integer, got {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, str) and re.fullmatch(r"\s*[+-]?[0-9]+\s*", value):
        return int(value)
    raise MalformedShareDocument(f"{what} must be an integer, got {value!r}")


def _parse_keys(value) -> tuple:
    if not isinstance(value, _Pairs):
        raise MalformedShareDocument("'keys' must be an object")
    fields = dict(value)
    if "n" not in fields or "k" not in fields:
        raise MalformedShareDocument("'keys' is missing n or k")
    total = _as_int(fields["n"], "keys.n")
    required = _as_int(fields["k"], "keys.k")
    if required < 1:
        raise MalformedShareDocument(f"keys.k must be >= 1, got {required}")
    return total, required


def _parse_share(key: str, value) -> RawShare:
    if not (key.isascii() and key.isdigit()):
        raise MalformedShareDocument(f"Unexpected key {key!r}")
    if not isinstance(value, _Pairs):
        raise MalformedShareDocument(f"Share {key} must be an object")
    fields = dict(value)
    if "base" not in fields or "value" not in fields:
        raise MalformedShareDocument(f"Share {key} is missing base or value")
    digits = fields["value"]
    if not isinstance(digits, str):
        raise MalformedShareDocument(f"Share {key} value must be a string")
    base = _as_int(fields["base"], f"Share {key} base")
    try:
        check_base(base)
    except InvalidArgument as e:
        raise MalformedShareDocument(f"Share {key}: {e}") from e
    return RawShare(int(key), base, digits)


def read_raw_shares(pairs) -> tuple:
    """Split parsed document pairs into ``(n, k, [RawShare, ...])``"""
    keys = None
    raw = []
    for key, value in pairs:
        if key == "keys":
            keys = _parse_keys(value)
        else:
            raw.append(_parse_share(key, value))
    if keys is None:
        raise MalformedShareDocument("Document has no 'keys' object")
    total, required = keys
    return total, required, raw


def _build(pairs, strict: Optional[bool]) -> ShareSet:
    if strict is None:
        strict = config.Config.STRICT_DECODING
    total, required, raw = read_raw_shares(pairs)
    points = [share.decode(strict=strict) for share in raw]
    return ShareSet(required, total, points)


def parse_share_document(text: str, strict: Optional[bool] = None) -> ShareSet:
    try:
        pairs = json.loads(text, object_pairs_hook=_keep_duplicates)
    except json.JSONDecodeError as e:
        raise MalformedShareDocument(f"Invalid JSON: {e}") from e
    if not isinstance(pairs, _Pairs):
        raise MalformedShareDocument("Top level must be an object")
    return _build(pairs, strict)


def share_set_from_dict(doc, strict: Optional[bool] = None) -> ShareSet:
    """Build a ShareSet from an already-parsed document"""
    if not isinstance(doc, dict):
        raise MalformedShareDocument("Top level must be an object")
    return _build(_to_pairs(doc), strict)


def _to_pairs(obj) -> _Pairs:
    pairs = _Pairs()
    for key, value in obj.items():
        if isinstance(value, dict):
            value = _to_pairs(value)
        pairs.append((key, value))
    return pairs


def load_share_file(path, strict: Optional[bool] = None) -> ShareSet:
    try:
        with open(path, "r", encoding="utf-8") as f:
            text = f.read()
    except OSError as e:
        raise MalformedShareDocument(f"Cannot open file: {path} ({e})") from e
    except UnicodeDecodeError as e:
        raise MalformedShareDocument(f"File is not valid UTF-8: {path} ({e})") from e
    return parse_share_document(text, strict=strict)
